from __future__ import annotations

import os
from decimal import Decimal


# Descripciones: limite de caracteres tras la limpieza
DESCRIPTION_MAX_LENGTH = 100

# Redondeo final de montos y balances
AMOUNT_QUANTUM = Decimal("0.01")

# Montos con mas digitos enteros que esto se consideran basura de OCR
AMOUNT_MAX_INTEGER_DIGITS = 15

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "STATEMENT_EXTRACTOR_LOG_LEVEL"


def log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
