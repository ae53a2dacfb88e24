"""Data model shared by the extractor, the type mapper and the emitters."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from .errors import ConversionError, UnsupportedLanguageError


class TargetLanguage(str, Enum):
    CSHARP = "csharp"
    JAVA = "java"
    TYPESCRIPT = "typescript"
    PYTHON = "python"

    @classmethod
    def from_identifier(cls, value) -> "TargetLanguage":
        """Case-insensitive lookup; anything unrecognised is rejected."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedLanguageError(value)


@dataclass(frozen=True)
class ColumnSchema:
    name: str
    sql_type: str
    nullable: bool = True


@dataclass(frozen=True)
class TableSchema:
    name: str
    columns: Tuple[ColumnSchema, ...] = ()

    def __post_init__(self):
        if not self.name:
            raise ValueError("TableSchema requires a non-empty table name")
        # Accept any iterable of columns but always store a tuple.
        object.__setattr__(self, "columns", tuple(self.columns))


@dataclass
class ConversionResult:
    """Outcome of one conversion request: either generated code or a single error."""

    generated_code: Dict[str, str] = field(default_factory=dict)
    success: bool = False
    error: Optional[str] = None
    error_type: Optional[str] = None

    @classmethod
    def ok(cls, generated_code: Dict[str, str]) -> "ConversionResult":
        return cls(generated_code=generated_code, success=True)

    @classmethod
    def failure(cls, error: ConversionError) -> "ConversionResult":
        return cls(success=False, error=error.message, error_type=error.error_type)

    def to_dict(self) -> dict:
        """Serialise to the public response shape."""
        return {
            "generatedCode": dict(self.generated_code),
            "success": self.success,
            "error": self.error,
            "errorType": self.error_type,
        }
