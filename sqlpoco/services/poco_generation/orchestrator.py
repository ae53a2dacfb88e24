"""ConversionOrchestrator – high-level driver for SQL DDL -> data-object generation.

Responsibilities
----------------
1. Reject empty scripts.
2. Parse the script with sqlglot (configured source dialect).
3. Extract one ``TableSchema`` per CREATE TABLE.
4. Pick the emitter for the requested language and render every table.
5. Fold every failure into a single ``ConversionResult``.

All rendering detail lives in the emitter layer and every type decision in
``TypeMapper``; the orchestrator only sequences the steps, logs and turns
exceptions into results.

FUNCTIONS:
==========
Public Functions (called by external code):
  - convert(): Main entry point. Never raises.
  - generate(): Same pipeline, but raises ``ConversionError`` subclasses.

Private Functions (internal helpers, start with _):
  - _parse(): Runs sqlglot and converts its errors into ``ParseError``.
  - _render_tables(): Emits every table, resolving duplicate names.

NOTE: Conversion is deterministic; there is no retry logic.
"""
from typing import Dict, List, Optional

from sqlglot import exp

from sqlpoco.config import config
from sqlpoco.utils.logger import setup_logger
from .emitters import get_emitter
from .emitters.base_emitter import BaseEmitter
from .errors import ConversionError, InternalError, NoTablesFoundError, ValidationError
from .extractor import extract_tables
from .models import ConversionResult, TableSchema, TargetLanguage
from .type_mapper import TypeMapper, get_type_mapper
from .utils.dialect_utils import get_sqlglot_dialect
from .utils.parser_utils import parse_script
from .utils.sqlglot_patch import ddl_dialect


class ConversionOrchestrator:

    def __init__(self, source_dialect: Optional[str] = None, *, type_mapper: Optional[TypeMapper] = None):
        self.logger = setup_logger("ConversionOrchestrator")
        conversion_cfg = config.get('conversion', {})
        self.source_dialect = source_dialect or conversion_cfg.get('source_dialect', 'sqlserver')
        self.sqlglot_dialect = get_sqlglot_dialect(self.source_dialect)
        self._type_mapper = type_mapper

    @property
    def type_mapper(self) -> TypeMapper:
        if self._type_mapper is None:
            self._type_mapper = get_type_mapper()
        return self._type_mapper

    def convert(self, sql_script: str, language: str) -> ConversionResult:
        """
        Convert every CREATE TABLE in ``sql_script`` to a data object in ``language``.

        Returns:
            A successful result mapping table name to source text, or a
            failed result carrying one human-readable error.
        """
        try:
            generated = self.generate(sql_script, language)
            return ConversionResult.ok(generated)
        except ConversionError as ce:
            self.logger.info(f"Conversion rejected ({ce.error_type}): {ce.message}")
            return ConversionResult.failure(ce)
        except Exception as e:
            self.logger.error(f"Error generating data objects: {e}", exc_info=True)
            return ConversionResult.failure(InternalError())

    def generate(self, sql_script: str, language: str) -> Dict[str, str]:
        if sql_script is None or not str(sql_script).strip():
            raise ValidationError("SQL script cannot be empty")

        statements = self._parse(sql_script)
        tables = list(extract_tables(statements, dialect=self.sqlglot_dialect))
        if not tables:
            raise NoTablesFoundError()

        emitter = get_emitter(language, self.type_mapper)
        self.logger.info(f"Generating {emitter.language.value} code for {len(tables)} table(s)")
        return self._render_tables(tables, emitter)

    def _parse(self, sql_script: str) -> List[exp.Expression]:
        try:
            dialect = ddl_dialect(self.sqlglot_dialect)
        except ValueError as ve:
            raise ValidationError(f"Unsupported SQL dialect: {self.source_dialect}") from ve
        return parse_script(sql_script, dialect)

    def _render_tables(self, tables: List[TableSchema], emitter: BaseEmitter) -> Dict[str, str]:
        generated_code: Dict[str, str] = {}
        for table in tables:
            if table.name in generated_code:
                # Last definition wins; earlier code for the same name is dropped.
                self.logger.warning(f"Duplicate table name '{table.name}'; keeping the last definition")
            generated_code[table.name] = emitter.emit(table)
            self.logger.debug(f"Generated {emitter.language.value} code for table '{table.name}' ({len(table.columns)} columns)")
        return generated_code

    @staticmethod
    def supported_languages() -> List[str]:
        return [language.value for language in TargetLanguage]
