from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Tuple

from .models import Category, TransactionType


CREDIT_KEYWORDS = ("deposit", "credit")
DEBIT_KEYWORDS = ("withdrawal", "debit", "fee")

# Orden = prioridad. "ATM fee" es Banking Fees, no ATM/Cash.
CATEGORY_RULES: List[Tuple[Tuple[str, ...], Category]] = [
    (("fee", "charge"), Category.BANKING_FEES),
    (("atm", "withdrawal"), Category.ATM_CASH),
    (("direct deposit", "payroll", "salary"), Category.INCOME),
    (("transfer", "tfr"), Category.TRANSFERS),
    (("online", "electronic", "ach"), Category.ONLINE_PAYMENT),
    (("check", "chk"), Category.CHECK),
    (("debit", "purchase", "pos"), Category.DEBIT_CARD),
]


def classify_type(description: str, amount: Decimal) -> TransactionType:
    """
    El signo manda. Solo con monto 0 miramos la descripcion:
    primero señales de entrada (deposit, credit), luego de salida.
    """
    if amount > 0:
        return TransactionType.CREDIT
    if amount < 0:
        return TransactionType.DEBIT

    d = description.lower()
    if any(k in d for k in CREDIT_KEYWORDS):
        return TransactionType.CREDIT
    if any(k in d for k in DEBIT_KEYWORDS):
        return TransactionType.DEBIT
    return TransactionType.UNKNOWN


def categorize(
    description: str,
    rules: Iterable[Tuple[Tuple[str, ...], Category]] = CATEGORY_RULES,
) -> Category:
    # substring, no palabra completa: "SURCHARGE" cuenta como "charge"
    d = description.lower()
    for keywords, category in rules:
        if any(k in d for k in keywords):
            return category
    return Category.OTHER
