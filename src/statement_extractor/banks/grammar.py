from __future__ import annotations

import datetime
import re
from dataclasses import dataclass
from typing import Optional, Pattern

from ..models import BankVariant, Candidate, Extraction
from ..parse import AMOUNT, build_candidate, iter_lines


def transaction_pattern(date: str) -> Pattern[str]:
    """
    fecha, descripcion, monto y (opcional) balance corrido.
    La descripcion es lazy: se corta en el primer monto seguido de espacio o fin de linea.
    """
    return re.compile(
        rf"(?<![\d/])(?P<date>{date})(?![\d/])\s+"
        r"(?P<description>.+?)\s+"
        rf"(?P<amount>{AMOUNT})"
        rf"(?:\s+(?P<balance>{AMOUNT}))?"
        r"(?!\S)"
    )


@dataclass(frozen=True)
class BankGrammar:
    variant: BankVariant
    transaction: Pattern[str]
    header: Optional[Pattern[str]] = None

    def matches_header(self, lowered_text: str) -> bool:
        return bool(self.header and self.header.search(lowered_text))

    def try_extract(self, text: str, today: Optional[datetime.date] = None) -> Extraction:
        """
        Pasada primaria: aplica el regex del banco a cada linea y junta
        todos los matches en orden de aparicion.
        """
        out = Extraction()
        for line_number, line in iter_lines(text):
            for m in self.transaction.finditer(line):
                result = build_candidate(
                    line_number,
                    line,
                    m.group("date"),
                    m.group("description"),
                    m.group("amount"),
                    m.group("balance"),
                    today,
                )
                if isinstance(result, Candidate):
                    out.accepted.append(result)
                else:
                    out.skipped.append(result)
        return out
