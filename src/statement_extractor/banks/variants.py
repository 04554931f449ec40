from __future__ import annotations

import re
from typing import Dict, Tuple

from ..models import BankVariant
from .grammar import BankGrammar, transaction_pattern


GENERIC = BankGrammar(
    variant=BankVariant.GENERIC,
    transaction=transaction_pattern(r"\d{1,2}/\d{1,2}/\d{2,4}"),
)

# Chase imprime MM/DD sin año
CHASE = BankGrammar(
    variant=BankVariant.CHASE,
    transaction=transaction_pattern(r"\d{2}/\d{2}"),
    header=re.compile(r"chase"),
)

BANK_OF_AMERICA = BankGrammar(
    variant=BankVariant.BANK_OF_AMERICA,
    transaction=transaction_pattern(r"\d{2}/\d{2}/\d{4}"),
    header=re.compile(r"bank\s+of\s+america"),
)

WELLS_FARGO = BankGrammar(
    variant=BankVariant.WELLS_FARGO,
    transaction=transaction_pattern(r"\d{2}/\d{2}/\d{4}"),
    header=re.compile(r"wells\s+fargo"),
)

CITIBANK = BankGrammar(
    variant=BankVariant.CITIBANK,
    transaction=transaction_pattern(r"\d{2}/\d{2}/\d{4}"),
    header=re.compile(r"citi"),
)

# Orden de deteccion: el primero que matchea gana
DETECTION_ORDER: Tuple[BankGrammar, ...] = (CHASE, BANK_OF_AMERICA, WELLS_FARGO, CITIBANK)

GRAMMARS: Dict[BankVariant, BankGrammar] = {
    g.variant: g for g in (GENERIC,) + DETECTION_ORDER
}


def grammar_for(variant: BankVariant) -> BankGrammar:
    return GRAMMARS.get(variant, GENERIC)
