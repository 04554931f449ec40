from __future__ import annotations

import datetime
import logging
from typing import Callable, Optional, Tuple

from .banks.fallback import FallbackGrammar
from .banks.variants import grammar_for
from .detect import detect_bank_variant
from .metadata import extract_account_info, extract_statement_period
from .models import (
    BankVariant,
    Extraction,
    ParseMetadata,
    ParseResult,
    StatementData,
)
from .postprocess import finalize
from .text_source import PdfplumberTextExtractor, TextExtractor


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.datetime]


def _local_now() -> datetime.datetime:
    return datetime.datetime.now().astimezone()


class StatementParser:
    """
    Extractor de transacciones para estados de cuenta.

    - parse_pdf: bytes del PDF -> ParseResult (success=False solo si falla la extraccion de texto)
    - parse_text: texto ya extraido -> ParseResult (nunca falla por contenido malformado)

    El clock define "hoy" (año para fechas MM/DD) y parsed_at.
    """

    def __init__(self, extractor: Optional[TextExtractor] = None, clock: Optional[Clock] = None) -> None:
        self.extractor = extractor or PdfplumberTextExtractor()
        self.clock = clock or _local_now
        self.fallback = FallbackGrammar()

    def parse_pdf(self, data: bytes) -> ParseResult:
        logger.info("Starting PDF parsing, buffer size: %d", len(data))
        try:
            extracted = self.extractor.extract(data)
        except Exception as exc:
            logger.exception("PDF parsing error")
            return ParseResult(success=False, error=str(exc) or "Failed to parse PDF")

        logger.debug("Extracted text length: %d", len(extracted.text))
        return self.parse_text(extracted.text, page_count=extracted.page_count)

    def parse_text(self, text: str, page_count: int = 1) -> ParseResult:
        now = self.clock()
        today = now.date()

        variant, extraction = self.extract_transactions(text, today)
        transactions = finalize(extraction.accepted)
        logger.info(
            "Found transactions: %d (skipped %d)", len(transactions), len(extraction.skipped)
        )

        data = StatementData(
            bank_variant=variant,
            account_info=extract_account_info(text),
            transactions=transactions,
            total_transactions=len(transactions),
            statement_period=extract_statement_period(text, today),
            metadata=ParseMetadata(page_count=page_count, parsed_at=now),
            skipped=extraction.skipped,
        )
        return ParseResult(success=True, data=data)

    def extract_transactions(
        self, text: str, today: Optional[datetime.date] = None
    ) -> Tuple[BankVariant, Extraction]:
        """
        Pasada primaria con la gramatica del banco detectado; si no acepta
        ningun candidato, se reintenta con la heuristica generica.
        """
        variant = detect_bank_variant(text)
        logger.info("Detected bank type: %s", variant.value)

        extraction = grammar_for(variant).try_extract(text, today)
        if not extraction.accepted:
            logger.info("No %s matches, using fallback extraction", variant.value)
            fallback = self.fallback.try_extract(text, today)
            # los descartes de la pasada primaria se conservan para diagnostico
            fallback.skipped[:0] = extraction.skipped
            extraction = fallback

        return variant, extraction
