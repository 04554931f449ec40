from __future__ import annotations

import datetime
import re
from typing import Optional

from ..models import Candidate, Extraction, SkippedCandidate, SkipReason
from ..normalize import parse_date
from ..parse import AMOUNT, build_candidate, iter_lines


LOOSE_DATE_RE = re.compile(r"(?<![\d/])\d{1,2}/\d{1,2}(?:/\d{2,4})?(?![\d/])")
LOOSE_AMOUNT_RE = re.compile(rf"(?<![\d/.,]){AMOUNT}(?![\d/])")


class FallbackGrammar:
    """
    Heuristica generica para formatos que ningun banco reconoce.
    Por linea: primera fecha, texto hasta el primer monto = descripcion,
    primer monto = amount, ultimo monto (si hay 2+) = balance.
    Prefiere recall, pero nunca emite montos invalidos ni descripciones vacias.
    """

    def try_extract(self, text: str, today: Optional[datetime.date] = None) -> Extraction:
        out = Extraction()
        for line_number, line in iter_lines(text):
            dates = list(LOOSE_DATE_RE.finditer(line))
            if not dates:
                out.skipped.append(SkippedCandidate(line_number, line, SkipReason.NO_DATE))
                continue

            amounts = list(LOOSE_AMOUNT_RE.finditer(line))
            if not amounts:
                out.skipped.append(SkippedCandidate(line_number, line, SkipReason.NO_AMOUNT))
                continue

            first_date = dates[0]
            if parse_date(first_date.group(0), today) is None:
                out.skipped.append(SkippedCandidate(line_number, line, SkipReason.INVALID_DATE))
                continue

            first_amount = amounts[0]
            if first_date.start() >= first_amount.start():
                out.skipped.append(SkippedCandidate(line_number, line, SkipReason.DATE_AFTER_AMOUNT))
                continue

            balance = amounts[-1].group(0) if len(amounts) > 1 else None
            result = build_candidate(
                line_number,
                line,
                first_date.group(0),
                line[first_date.end():first_amount.start()],
                first_amount.group(0),
                balance,
                today,
            )
            if isinstance(result, Candidate):
                out.accepted.append(result)
            else:
                out.skipped.append(result)
        return out
