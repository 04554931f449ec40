from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional

from .config import AMOUNT_QUANTUM
from .models import Candidate, Transaction


def round_money(value: Optional[Decimal]) -> Optional[Decimal]:
    if value is None:
        return None
    return value.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)


def is_complete(candidate: Candidate) -> bool:
    return (
        candidate.date is not None
        and bool(candidate.description)
        and candidate.amount is not None
    )


def finalize(candidates: Iterable[Candidate]) -> List[Transaction]:
    """
    Unico filtro final antes de devolver resultados:
    1) descarta candidatos sin fecha, descripcion o monto
    2) redondea amount y balance a 2 decimales
    3) ordena por fecha; empates conservan el orden de extraccion
    """
    complete = [c for c in candidates if is_complete(c)]

    # el indice en la clave hace explicita la estabilidad del orden
    ordered = sorted(enumerate(complete), key=lambda pair: (pair[1].date, pair[0]))

    return [
        Transaction(
            date=c.date,
            description=c.description.strip(),
            amount=round_money(c.amount),
            balance=round_money(c.balance),
            type=c.type,
            category=c.category,
        )
        for _, c in ordered
    ]
