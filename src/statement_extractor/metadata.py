from __future__ import annotations

import datetime
import re
from decimal import Decimal
from typing import Optional

from .models import AccountInfo, StatementPeriod
from .normalize import parse_amount, parse_date
from .postprocess import round_money


ACCOUNT_NUMBER_RE = re.compile(
    r"account\s*(?:number|no\.?|#)?[:\s#]*[*xX•-]*\d*?(\d{4})\b",
    re.IGNORECASE,
)
# nombre: palabras que empiezan en mayuscula, en la misma linea
ACCOUNT_HOLDER_RE = re.compile(
    r"(?i:account\s+holder|name)[:\t ]+([A-Z][A-Za-z.'-]*(?:[ ][A-Z][A-Za-z.'-]*)*)"
)

_BAL_AMOUNT = r"(\(?[-+]?\$?\d[\d,]*(?:\.\d{1,2})?\)?)"
# Wells Fargo: "Beginning balance on 3/12 $1,234.56"
_BAL_ON_DATE = r"(?:\s+on\s+\d{1,2}/\d{1,2}(?:/\d{2,4})?)?"
OPENING_BALANCE_RE = re.compile(
    rf"(?:opening|beginning)\s+balance{_BAL_ON_DATE}[:\s]+{_BAL_AMOUNT}", re.IGNORECASE
)
CLOSING_BALANCE_RE = re.compile(
    rf"(?:closing|ending)\s+balance{_BAL_ON_DATE}[:\s]+{_BAL_AMOUNT}", re.IGNORECASE
)

STATEMENT_PERIOD_RE = re.compile(
    r"statement\s+period[:\s]+(\d{1,2}/\d{1,2}(?:/\d{4})?)\s*(?:-|to|through)\s*(\d{1,2}/\d{1,2}(?:/\d{4})?)",
    re.IGNORECASE,
)


def _balance(pattern: re.Pattern, text: str) -> Optional[Decimal]:
    m = pattern.search(text)
    if not m:
        return None
    value = parse_amount(m.group(1))
    if value is None:
        return None
    return round_money(value)


def extract_account_info(text: str) -> AccountInfo:
    """
    Busquedas independientes sobre todo el texto; cada campo es opcional.
    """
    info = AccountInfo()

    m = ACCOUNT_NUMBER_RE.search(text)
    if m:
        info.account_number_masked = f"****{m.group(1)}"

    m = ACCOUNT_HOLDER_RE.search(text)
    if m:
        info.account_holder = m.group(1).strip()

    info.opening_balance = _balance(OPENING_BALANCE_RE, text)
    info.closing_balance = _balance(CLOSING_BALANCE_RE, text)
    return info


def extract_statement_period(
    text: str, today: Optional[datetime.date] = None
) -> Optional[StatementPeriod]:
    m = STATEMENT_PERIOD_RE.search(text)
    if not m:
        return None

    start = parse_date(m.group(1), today)
    end = parse_date(m.group(2), today)
    if start is None or end is None:
        return None
    return StatementPeriod(start=start, end=end)
