from __future__ import annotations

import importlib
import io
import logging
import threading
from dataclasses import dataclass
from types import ModuleType
from typing import Optional, Protocol

from .errors import TextExtractionError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractedText:
    text: str
    page_count: int


class TextExtractor(Protocol):
    def extract(self, data: bytes) -> ExtractedText:
        ...


class PdfplumberTextExtractor:
    """
    Convierte PDF (bytes) a texto lineal con pdfplumber.
    pdfplumber se carga una sola vez, en el primer uso, detras de un lock;
    despues la instancia se puede compartir entre hilos.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pdfplumber: Optional[ModuleType] = None

    def _load(self) -> ModuleType:
        if self._pdfplumber is None:
            with self._lock:
                if self._pdfplumber is None:
                    try:
                        self._pdfplumber = importlib.import_module("pdfplumber")
                    except ImportError as exc:
                        raise TextExtractionError("PDF parsing library not available") from exc
                    logger.debug("pdfplumber loaded")
        return self._pdfplumber

    def extract(self, data: bytes) -> ExtractedText:
        pdfplumber = self._load()
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise TextExtractionError(f"Could not read PDF: {exc}") from exc

        return ExtractedText(text="\n".join(pages), page_count=len(pages))
