from __future__ import annotations

import datetime
import re
from typing import Iterator, Optional, Tuple, Union

from .classify import categorize, classify_type
from .models import Candidate, SkippedCandidate, SkipReason
from .normalize import clean_description, parse_amount, parse_date


# Montos: 1,234.56 / -45.67 / $3,500.00 / -$125.50 / (250.00)
# Siempre con centavos: un monto entero como "-5" no se extrae.
AMOUNT = r"\(?[-+]?\$?\d[\d,]*\.\d{2}\)?"

BOILERPLATE_RE = re.compile(
    r"page\s+\d+"
    r"|statement"
    r"|account\s+summary"
    r"|transaction\s+history"
    r"|date\s+description"
    r"|beginning\s+balance"
    r"|ending\s+balance",
    re.IGNORECASE,
)


def is_boilerplate(line: str) -> bool:
    """Encabezados / pies de pagina que nunca son transacciones."""
    return bool(BOILERPLATE_RE.search(line))


def iter_lines(text: str) -> Iterator[Tuple[int, str]]:
    """
    Devuelve (numero_de_linea, linea) saltando vacias y boilerplate.
    Numeracion 1-based sobre el texto de entrada.
    """
    for i, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or is_boilerplate(line):
            continue
        yield i, line


def build_candidate(
    line_number: int,
    line: str,
    raw_date: str,
    raw_description: str,
    raw_amount: str,
    raw_balance: Optional[str],
    today: Optional[datetime.date] = None,
) -> Union[Candidate, SkippedCandidate]:
    """
    Convierte los grupos capturados de una linea en Candidate,
    o en SkippedCandidate con el motivo si algun campo no se puede parsear.
    """
    date = parse_date(raw_date, today)
    if date is None:
        return SkippedCandidate(line_number, line, SkipReason.INVALID_DATE)

    amount = parse_amount(raw_amount)
    if amount is None:
        return SkippedCandidate(line_number, line, SkipReason.INVALID_AMOUNT)

    description = clean_description(raw_description)
    if not description:
        return SkippedCandidate(line_number, line, SkipReason.EMPTY_DESCRIPTION)

    # balance invalido no descarta la transaccion, solo queda vacio
    balance = parse_amount(raw_balance) if raw_balance else None

    return Candidate(
        line_number=line_number,
        date=date,
        description=description,
        amount=amount,
        balance=balance,
        type=classify_type(description, amount),
        category=categorize(description),
    )
