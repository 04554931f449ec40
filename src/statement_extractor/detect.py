from __future__ import annotations

from .banks.variants import DETECTION_ORDER
from .models import BankVariant


def detect_bank_variant(text: str) -> BankVariant:
    """
    Determina el banco emisor por encabezado, en orden fijo de prioridad
    (chase, bankOfAmerica, wellsFargo, citibank). Sin match -> generic.
    """
    lowered = text.lower()
    for grammar in DETECTION_ORDER:
        if grammar.matches_header(lowered):
            return grammar.variant
    return BankVariant.GENERIC
