from __future__ import annotations

import datetime
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from .config import AMOUNT_MAX_INTEGER_DIGITS, DESCRIPTION_MAX_LENGTH


FULL_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
SHORT_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})$")

_CURRENCY_RE = re.compile(r"[$\s]")
_WHITESPACE_RE = re.compile(r"\s+")
_DESC_NOISE_RE = re.compile(r"[^\w\s\-&.]")


def parse_amount(raw: Optional[str]) -> Optional[Decimal]:
    """
    Convierte un monto con formato local a Decimal con signo.
    - "$1,234.56" -> 1234.56
    - "(250.00)"  -> -250.00 (notacion contable)
    Fuera de rango (mas de AMOUNT_MAX_INTEGER_DIGITS enteros) -> None.
    No redondea: eso ocurre en el postprocesado.
    """
    if not raw:
        return None

    s = _CURRENCY_RE.sub("", raw)
    if s.startswith("(") and s.endswith(")"):
        s = "-" + s[1:-1]
    s = s.replace(",", "")

    try:
        value = Decimal(s)
    except InvalidOperation:
        return None
    if not value.is_finite() or value.adjusted() >= AMOUNT_MAX_INTEGER_DIGITS:
        return None
    return value


def parse_date(raw: Optional[str], today: Optional[datetime.date] = None) -> Optional[datetime.date]:
    """
    MM/DD/YYYY -> año literal.
    MM/DD      -> año actual (al momento de parsear).
    Cualquier otra forma, o una fecha inexistente (02/30), -> None.
    """
    if not raw:
        return None
    s = raw.strip()

    m = FULL_DATE_RE.match(s)
    if m:
        month, day, year = int(m.group(1)), int(m.group(2)), int(m.group(3))
    else:
        m = SHORT_DATE_RE.match(s)
        if not m:
            return None
        month, day = int(m.group(1)), int(m.group(2))
        year = (today or datetime.date.today()).year

    try:
        return datetime.date(year, month, day)
    except ValueError:
        return None


def clean_description(raw: str) -> str:
    # colapsar espacios antes de truncar: el limite se gasta en contenido
    s = _WHITESPACE_RE.sub(" ", raw)
    s = _DESC_NOISE_RE.sub("", s)
    return s.strip()[:DESCRIPTION_MAX_LENGTH]
