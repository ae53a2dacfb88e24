"""
Sqlglot parser extension that keeps the raw column type keyword.

sqlglot normalises data types into ``exp.DataType.Type`` members and folds
synonyms together on the way (T-SQL ``REAL`` and ``FLOAT``, ``NTEXT`` and
``TEXT``, ``NUMERIC`` and ``DECIMAL``). Generated code needs the keyword as it
was written, so this module derives a dialect whose parser notes the type
token of every column definition before the normal parse consumes it.

WHAT THIS FILE DOES:
====================
- Defines a parser mixin that records the type keyword in
  ``ColumnDef.meta[SOURCE_TYPE_META]`` and the source text of each column
  constraint in ``meta[SOURCE_SQL_META]``.
- Provides ``ddl_dialect``, which builds (once per base dialect) a subclass of
  any sqlglot dialect with the mixin applied to its parser.
"""
import logging
from functools import lru_cache

from sqlglot import exp
from sqlglot.dialects.dialect import Dialect

logger = logging.getLogger(__name__)

SOURCE_TYPE_META = 'source_type'
SOURCE_SQL_META = 'source_sql'


class _SourceTypeParserMixin:
    """Records the data-type token of a column and the text of its constraints."""

    def _parse_column_def(self, this, *args, **kwargs):
        # The column name has already been consumed; the current token is the type.
        type_token = self._curr
        column = super()._parse_column_def(this, *args, **kwargs)
        if (
            isinstance(column, exp.ColumnDef)
            and type_token is not None
            and type_token.token_type in self.TYPE_TOKENS
        ):
            column.meta[SOURCE_TYPE_META] = type_token.text.upper()
        return column

    def _parse_column_constraint(self, *args, **kwargs):
        start = self._curr
        constraint = super()._parse_column_constraint(*args, **kwargs)
        if constraint is not None and start is not None and self._prev is not None:
            # Rendering rewrites predicates (IS NOT NULL -> NOT ... IS NULL), keep the text as written.
            constraint.meta[SOURCE_SQL_META] = self._find_sql(start, self._prev)
        return constraint


@lru_cache(maxsize=None)
def ddl_dialect(dialect_name: str):
    """
    Return a subclass of the named sqlglot dialect whose parser records raw
    column type keywords.

    Args:
        dialect_name: Any name accepted by ``Dialect.get_or_raise`` ('tsql', 'postgres', ...)

    Raises:
        ValueError: if sqlglot does not know the dialect.
    """
    base = Dialect.get_or_raise(dialect_name)
    base_cls = base if isinstance(base, type) else type(base)

    parser_cls = type('Parser', (_SourceTypeParserMixin, base_cls.Parser), {})
    patched = type(f"{base_cls.__name__}Ddl", (base_cls,), {'Parser': parser_cls})
    logger.info("Built DDL parsing dialect %s on top of sqlglot dialect '%s'.", patched.__name__, dialect_name)
    return patched
