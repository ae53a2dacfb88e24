import re
import sqlglot
import sqlglot.errors
from sqlglot import exp
from sqlglot.errors import ErrorLevel
import logging
from typing import List

from ..errors import ParseError

logger = logging.getLogger(__name__)

# T-SQL batch separator: GO alone on its line, optionally with a repeat count.
GO_SEPARATOR = re.compile(r'^[ \t]*GO(?:[ \t]+\d+)?[ \t]*;?[ \t]*$', re.IGNORECASE | re.MULTILINE)

# CREATE statements sqlglot may keep as raw commands without losing a table.
_NON_TABLE_CREATE = re.compile(
    r'^\s*(?:OR\s+(?:ALTER|REPLACE)\s+)?'
    r'(?:PROC|PROCEDURE|FUNCTION|TRIGGER|VIEW|TYPE|SCHEMA|SEQUENCE|SYNONYM|LOGIN|USER|ROLE|DATABASE)\b',
    re.IGNORECASE,
)


def normalize_sql(sql: str) -> str:
    """Strip a leading BOM and normalise line endings."""
    if sql.startswith('\ufeff'):
        sql = sql[1:]
    return sql.replace('\r\n', '\n').replace('\r', '\n')


def replace_batch_separators(sql: str) -> str:
    """Turn every ``GO`` line into a statement terminator; line numbers are kept."""
    return GO_SEPARATOR.sub(';', sql)


def _describe(error: dict) -> str:
    description = error.get('description') or 'Invalid SQL'
    line, col = error.get('line'), error.get('col')
    if line is not None and col is not None:
        return f"{description} (line {line}, col {col})"
    return description


def parse_script(sql: str, dialect) -> List[exp.Expression]:
    """
    Parses a whole SQL script into statement ASTs.

    Args:
        sql: The SQL script.
        dialect: A sqlglot dialect name or class.

    Returns:
        The parsed statements, empty chunks removed.

    Raises:
        ParseError: carrying one diagnostic per error sqlglot collected, or
            per CREATE statement it could only keep as an unparsed command.
    """
    script = replace_batch_separators(normalize_sql(sql))
    try:
        # RAISE collects every error of a statement before raising, so the
        # caller sees all diagnostics instead of only the first.
        statements = sqlglot.parse(script, read=dialect, error_level=ErrorLevel.RAISE)
    except sqlglot.errors.ParseError as pe:
        diagnostics = [_describe(e) for e in (pe.errors or [])] or [str(pe)]
        logger.warning(f"SQL parse failed with {len(diagnostics)} diagnostic(s): {diagnostics}")
        raise ParseError(diagnostics) from pe
    except sqlglot.errors.TokenError as te:
        logger.warning(f"SQL tokenization failed: {te}")
        raise ParseError([str(te)]) from te

    parsed = [stmt for stmt in statements if stmt is not None]
    diagnostics = unsupported_create_diagnostics(parsed)
    if diagnostics:
        logger.warning(f"SQL parse fell back to raw commands for {len(diagnostics)} CREATE statement(s): {diagnostics}")
        raise ParseError(diagnostics)

    logger.debug(f"Successfully parsed {len(parsed)} statement AST(s)")
    return parsed


def unsupported_create_diagnostics(statements: List[exp.Expression]) -> List[str]:
    """
    Describe every CREATE that sqlglot kept as an ``exp.Command``.

    sqlglot falls back to a raw command, with only a logged warning, when it
    cannot parse a statement (``CREATE TABEL``, trailing tokens after a
    column list). Such a statement may hide a table. Procedures, functions,
    views and other non-table objects are skipped.
    """
    diagnostics = []
    for statement in statements:
        for command in statement.find_all(exp.Command):
            if command.name.upper() != 'CREATE':
                continue
            rest = command.text('expression')
            if _NON_TABLE_CREATE.match(rest):
                logger.debug(f"Ignoring unparsed non-table statement: CREATE{rest[:80]}")
                continue
            text = f"{command.name} {rest.strip()}"
            diagnostics.append(f"Unsupported syntax: {text[:100]}")
    return diagnostics
