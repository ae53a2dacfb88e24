"""
Schema extraction: sqlglot ASTs -> ``TableSchema`` objects.

Only ``CREATE TABLE`` statements contribute; every other statement kind is
walked past silently. Extraction is lazy.
"""
import logging
from typing import Iterable, Iterator, Optional

from sqlglot import exp

from .models import ColumnSchema, TableSchema
from .utils.sqlglot_patch import SOURCE_SQL_META, SOURCE_TYPE_META

logger = logging.getLogger(__name__)

# sqlglot folds some SQL Server keywords into generic types. Used only when the
# parser did not record the raw keyword (plain sqlglot dialects).
_TYPE_ALIASES = {
    'UTINYINT': 'TINYINT',
    'TIMESTAMPTZ': 'DATETIMEOFFSET',
    'UUID': 'UNIQUEIDENTIFIER',
    'BOOLEAN': 'BIT',
    'DOUBLE': 'FLOAT',
}

NOT_NULL_MARKER = 'NOT NULL'


def extract_tables(statements: Iterable[exp.Expression], dialect=None) -> Iterator[TableSchema]:
    """
    Yield one ``TableSchema`` per CREATE TABLE found, in document order.

    Args:
        statements: Parsed statement ASTs.
        dialect: Dialect used to render constraints for the NOT NULL check.
    """
    for statement in statements:
        if statement is None:
            continue
        for node in _walk_in_document_order(statement):
            table = _table_from_node(node, dialect)
            if table is not None:
                yield table


def _walk_in_document_order(statement: exp.Expression) -> Iterator[exp.Expression]:
    # Depth-first pre-order keeps nested CREATEs (T-SQL IF ... BEGIN ... END) in place.
    yield from statement.find_all(exp.Create, bfs=False)


def _table_from_node(node: exp.Expression, dialect) -> Optional[TableSchema]:
    if not isinstance(node, exp.Create) or (node.kind or '').upper() != 'TABLE':
        return None

    target = node.this
    schema = target if isinstance(target, exp.Schema) else None
    table = schema.this if schema is not None else target
    if not isinstance(table, exp.Table) or not table.name:
        logger.warning(f"Skipping CREATE TABLE without a recognisable table name: {node.sql(dialect=dialect)[:100]}")
        return None

    columns = []
    if schema is not None:
        for definition in schema.expressions:
            if isinstance(definition, exp.ColumnDef):
                columns.append(_column_from_def(definition, dialect))

    logger.debug(f"Extracted table '{table.name}' with {len(columns)} column(s)")
    return TableSchema(name=table.name, columns=tuple(columns))


def _column_from_def(column_def: exp.ColumnDef, dialect) -> ColumnSchema:
    return ColumnSchema(
        name=column_def.name,
        sql_type=column_type_token(column_def),
        nullable=is_nullable(column_def, dialect),
    )


def column_type_token(column_def: exp.ColumnDef) -> str:
    """Upper-cased type keyword of a column, as written where possible."""
    recorded = column_def.meta.get(SOURCE_TYPE_META)
    if recorded:
        return recorded

    kind = column_def.args.get('kind')
    if kind is None:
        return ''
    if isinstance(kind, exp.DataType):
        if kind.this.name == 'USERDEFINED':
            # user-defined/alias types: keep the unqualified identifier
            udt_name = kind.args.get('kind')
            name = udt_name if isinstance(udt_name, str) else kind.sql()
            return name.split('.')[-1].strip('[]"').upper()
        type_name = kind.this.name
        return _TYPE_ALIASES.get(type_name, type_name)
    return (kind.name or kind.sql()).split('.')[-1].upper()


def is_nullable(column_def: exp.ColumnDef, dialect=None) -> bool:
    """
    A column is nullable unless the text of one of its constraints contains
    NOT NULL.

    The text is the constraint as written in the script when the parser
    recorded it, otherwise sqlglot's rendering. This is a deliberate substring
    check, not a constraint parser: ``CHECK (X IS NOT NULL)`` and a DEFAULT
    whose literal contains 'NOT NULL' both make the column non-nullable.
    """
    for constraint in column_def.args.get('constraints') or []:
        text = constraint.meta.get(SOURCE_SQL_META) or constraint.sql(dialect=dialect)
        if NOT_NULL_MARKER in text.upper():
            return False
    return True
