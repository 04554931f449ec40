from __future__ import annotations


class StatementExtractorError(Exception):
    """Base para errores del extractor."""


class TextExtractionError(StatementExtractorError):
    """El PDF no se pudo convertir a texto (corrupto, cifrado, ilegible)."""
