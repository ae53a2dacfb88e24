"""
POCO Generation Package - SQL CREATE TABLE to data-object source code.

Main Components:
    - ConversionOrchestrator: Main entry point (parse -> extract -> emit)
    - extract_tables: sqlglot AST -> TableSchema
    - TypeMapper: Table-driven SQL type -> target-language type lookup
    - Emitters: C#, Java, TypeScript and Python renderers
    - Utils: dialect resolution, sqlglot parser extension, config loading

Usage:
    from sqlpoco.services.poco_generation import ConversionOrchestrator

    orchestrator = ConversionOrchestrator()
    result = orchestrator.convert(
        "CREATE TABLE Foo (Id INT NOT NULL);",
        language="python",
    )
    result.generated_code["Foo"]
"""

from .errors import (
    ConversionError,
    InternalError,
    NoTablesFoundError,
    ParseError,
    UnsupportedLanguageError,
    ValidationError,
)
from .models import ColumnSchema, ConversionResult, TableSchema, TargetLanguage
from .orchestrator import ConversionOrchestrator

__all__ = [
    'ConversionOrchestrator',
    'ConversionResult',
    'TableSchema',
    'ColumnSchema',
    'TargetLanguage',
    'ConversionError',
    'ValidationError',
    'ParseError',
    'NoTablesFoundError',
    'UnsupportedLanguageError',
    'InternalError',
]
