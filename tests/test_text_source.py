from __future__ import annotations

import threading
from types import SimpleNamespace

import pytest

from statement_extractor import text_source
from statement_extractor.errors import TextExtractionError
from statement_extractor.text_source import ExtractedText, PdfplumberTextExtractor


class _FakePdf:
    def __init__(self, texts):
        self.pages = [SimpleNamespace(extract_text=lambda t=t: t) for t in texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def _fake_pdfplumber(texts):
    return SimpleNamespace(open=lambda stream: _FakePdf(texts))


def test_pages_are_joined_in_order(monkeypatch):
    monkeypatch.setattr(
        text_source.importlib,
        "import_module",
        lambda name: _fake_pdfplumber(["page one", None, "page three"]),
    )

    out = PdfplumberTextExtractor().extract(b"%PDF")

    assert out == ExtractedText(text="page one\n\npage three", page_count=3)


def test_pdfplumber_is_loaded_once_across_threads(monkeypatch):
    calls = []
    gate = threading.Event()

    def slow_import(name):
        calls.append(name)
        gate.wait(timeout=1)
        return _fake_pdfplumber(["x"])

    monkeypatch.setattr(text_source.importlib, "import_module", slow_import)

    extractor = PdfplumberTextExtractor()
    results = []
    threads = [
        threading.Thread(target=lambda: results.append(extractor.extract(b"%PDF")))
        for _ in range(8)
    ]
    for t in threads:
        t.start()
    gate.set()
    for t in threads:
        t.join()

    assert calls == ["pdfplumber"]
    assert len(results) == 8


def test_missing_library_is_an_extraction_error(monkeypatch):
    def broken_import(name):
        raise ImportError(name)

    monkeypatch.setattr(text_source.importlib, "import_module", broken_import)

    with pytest.raises(TextExtractionError):
        PdfplumberTextExtractor().extract(b"%PDF")


def test_unreadable_pdf_is_an_extraction_error():
    pytest.importorskip("pdfplumber")

    with pytest.raises(TextExtractionError):
        PdfplumberTextExtractor().extract(b"this is not a pdf")
