"""
Error taxonomy for SQL -> data-object conversion.

Every failure the orchestrator can report is a ``ConversionError``. The
``error_type`` attribute is a stable, machine-readable tag that is copied onto
the ``ConversionResult`` so the HTTP layer can choose a status code without
parsing messages.
"""
from typing import Iterable, List


class ConversionError(Exception):
    """Base class for all conversion failures."""

    error_type = "conversion"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ConversionError):
    """The request itself is unusable (empty or whitespace-only SQL)."""

    error_type = "validation"


class ParseError(ConversionError):
    """The SQL parser reported one or more diagnostics."""

    error_type = "parse"

    def __init__(self, diagnostics: Iterable[str]):
        self.diagnostics: List[str] = [d for d in diagnostics if d] or ["Unknown parser error"]
        super().__init__(f"SQL parsing error: {', '.join(self.diagnostics)}")


class NoTablesFoundError(ConversionError):
    """Parsing succeeded but the script holds no CREATE TABLE statement."""

    error_type = "no_tables"

    def __init__(self, message: str = "No valid CREATE TABLE statements found"):
        super().__init__(message)


class UnsupportedLanguageError(ConversionError):
    """The requested target language is not one of ``TargetLanguage``."""

    error_type = "unsupported_language"

    def __init__(self, language):
        self.language = language
        super().__init__(f"Unsupported language: {language}")


class InternalError(ConversionError):
    """Unexpected failure. The message never carries internal details."""

    error_type = "internal"

    def __init__(self, message: str = "Error generating data objects"):
        super().__init__(message)
