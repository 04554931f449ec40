from __future__ import annotations

import datetime
from typing import Optional

import pytest

from statement_extractor.engine import StatementParser
from statement_extractor.text_source import ExtractedText


FIXED_NOW = datetime.datetime(2025, 6, 1, 12, 0, tzinfo=datetime.timezone.utc)


class FakeExtractor:
    """Sustituye a pdfplumber: devuelve texto fijo o lanza la excepcion dada."""

    def __init__(self, text: str = "", page_count: int = 1, error: Optional[Exception] = None):
        self.text = text
        self.page_count = page_count
        self.error = error
        self.calls = 0

    def extract(self, data: bytes) -> ExtractedText:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return ExtractedText(text=self.text, page_count=self.page_count)


@pytest.fixture
def fixed_now() -> datetime.datetime:
    return FIXED_NOW


@pytest.fixture
def make_parser(fixed_now):
    def _make(text: str = "", page_count: int = 1, error: Optional[Exception] = None) -> StatementParser:
        return StatementParser(
            extractor=FakeExtractor(text, page_count, error),
            clock=lambda: fixed_now,
        )

    return _make
