# ============================================================================
# SCHEMA EXTRACTOR TESTS
# ============================================================================
"""
Schema Extractor Tests

Runs real T-SQL through sqlglot (with the raw-type-recording dialect) and
checks the TableSchema objects that come out:
- Table names with schema qualifiers stripped
- Column order, raw type keywords, nullability heuristic
- GO batch separators and CREATE statements sqlglot could not parse
- Non-table statements ignored, lazy extraction

Run with:
    pytest tests/test_extractor.py -v
"""

import inspect

import pytest
import sqlglot

from sqlpoco.services.poco_generation.extractor import extract_tables
from sqlpoco.services.poco_generation.models import ColumnSchema, TableSchema
from sqlpoco.services.poco_generation.errors import ParseError
from sqlpoco.services.poco_generation.utils.parser_utils import parse_script, replace_batch_separators
from sqlpoco.services.poco_generation.utils.sqlglot_patch import ddl_dialect


def _extract(sql, dialect="tsql"):
    statements = parse_script(sql, ddl_dialect(dialect))
    return list(extract_tables(statements, dialect=dialect))


# ============================================================================
# TABLES
# ============================================================================


class TestTables:
    def test_single_table(self):
        tables = _extract(
            "CREATE TABLE dbo.Customers ("
            " Id INT NOT NULL,"
            " Name NVARCHAR(100),"
            " Balance DECIMAL(18, 2) NULL,"
            " CreatedAt DATETIME2 NOT NULL"
            ");"
        )
        assert tables == [
            TableSchema("Customers", (
                ColumnSchema("Id", "INT", False),
                ColumnSchema("Name", "NVARCHAR", True),
                ColumnSchema("Balance", "DECIMAL", True),
                ColumnSchema("CreatedAt", "DATETIME2", False),
            ))
        ]

    def test_bracketed_and_qualified_name(self):
        tables = _extract("CREATE TABLE [Sales].[dbo].[Orders] ([OrderId] INT NOT NULL)")
        assert tables[0].name == "Orders"
        assert tables[0].columns[0].name == "OrderId"

    def test_document_order_and_other_statements_ignored(self):
        tables = _extract(
            "SELECT 1;\n"
            "CREATE TABLE Alpha (X INT);\n"
            "INSERT INTO Alpha VALUES (1);\n"
            "CREATE VIEW V AS SELECT X FROM Alpha;\n"
            "CREATE TABLE Beta (Y INT);\n"
        )
        assert [t.name for t in tables] == ["Alpha", "Beta"]

    def test_no_tables(self):
        assert _extract("SELECT 1; UPDATE T SET A = 1;") == []

    def test_table_level_constraints_are_not_columns(self):
        tables = _extract(
            "CREATE TABLE T (Id INT NOT NULL, Code CHAR(3), CONSTRAINT PK_T PRIMARY KEY (Id))"
        )
        assert [c.name for c in tables[0].columns] == ["Id", "Code"]

    def test_extraction_is_lazy(self):
        statements = parse_script("CREATE TABLE A (X INT)", ddl_dialect("tsql"))
        result = extract_tables(statements)
        assert inspect.isgenerator(result)
        assert next(result).name == "A"


# ============================================================================
# COLUMN TYPES
# ============================================================================


class TestColumnTypes:
    def test_raw_keywords_are_preserved(self):
        tables = _extract(
            "CREATE TABLE Metrics ("
            " Ratio REAL,"
            " Score FLOAT,"
            " Notes NTEXT,"
            " Amount NUMERIC(10, 2),"
            " Tier TINYINT,"
            " Stamp DATETIMEOFFSET,"
            " Token UNIQUEIDENTIFIER"
            ")"
        )
        assert [c.sql_type for c in tables[0].columns] == [
            "REAL", "FLOAT", "NTEXT", "NUMERIC", "TINYINT", "DATETIMEOFFSET", "UNIQUEIDENTIFIER",
        ]

    def test_lowercase_ddl_is_upper_cased(self):
        tables = _extract("create table people (id int not null, name nvarchar(50))")
        assert tables[0].columns == (
            ColumnSchema("id", "INT", False),
            ColumnSchema("name", "NVARCHAR", True),
        )

    def test_plain_sqlglot_dialect_falls_back_to_type_names(self):
        statements = [sqlglot.parse_one("CREATE TABLE T (A INT, B NVARCHAR(10))", read="tsql")]
        columns = list(extract_tables(statements, dialect="tsql"))[0].columns
        assert [c.sql_type for c in columns] == ["INT", "NVARCHAR"]


# ============================================================================
# NULLABILITY
# ============================================================================


class TestNullability:
    def test_default_is_nullable(self):
        column = _extract("CREATE TABLE T (A INT)")[0].columns[0]
        assert column.nullable is True

    def test_explicit_null_is_nullable(self):
        column = _extract("CREATE TABLE T (A INT NULL)")[0].columns[0]
        assert column.nullable is True

    def test_not_null_among_other_constraints(self):
        column = _extract("CREATE TABLE T (Id INT IDENTITY(1,1) NOT NULL PRIMARY KEY)")[0].columns[0]
        assert column.sql_type == "INT"
        assert column.nullable is False

    def test_primary_key_alone_does_not_imply_not_null(self):
        column = _extract("CREATE TABLE T (Id INT PRIMARY KEY)")[0].columns[0]
        assert column.nullable is True

    def test_not_null_text_inside_default_counts(self):
        """Substring heuristic: any constraint rendering 'NOT NULL' wins."""
        column = _extract("CREATE TABLE T (Note NVARCHAR(20) DEFAULT 'not null')")[0].columns[0]
        assert column.nullable is False

    def test_check_with_is_not_null_counts(self):
        """The constraint text as written is matched, not sqlglot's rewrite of it."""
        column = _extract("CREATE TABLE A (X INT CHECK (X IS NOT NULL))")[0].columns[0]
        assert column.nullable is False

    def test_composite_check_with_not_null_counts(self):
        tables = _extract("CREATE TABLE A (X INT CHECK (X IS NOT NULL AND X > 0), Y INT CHECK (Y > 0))")
        assert [c.nullable for c in tables[0].columns] == [False, True]

    def test_named_constraint_text_is_matched(self):
        column = _extract("CREATE TABLE A (X INT CONSTRAINT CK_X CHECK (X IS NOT NULL))")[0].columns[0]
        assert column.nullable is False


# ============================================================================
# SCRIPT SHAPE
# ============================================================================


class TestScriptShape:
    def test_go_lines_become_terminators(self):
        sql = "CREATE TABLE A (X INT)\nGO\nCREATE TABLE GOODS (Y INT)\n  go 3 \n"
        assert replace_batch_separators(sql) == "CREATE TABLE A (X INT)\n;\nCREATE TABLE GOODS (Y INT)\n;\n"

    def test_tables_after_go_are_extracted(self):
        tables = _extract("CREATE TABLE A (X INT)\nGO\nCREATE TABLE B (Y INT)\nGO\n")
        assert [t.name for t in tables] == ["A", "B"]

    def test_create_kept_as_raw_command_is_rejected(self):
        with pytest.raises(ParseError) as excinfo:
            _extract("CREATE TABEL B (Y INT)")
        assert excinfo.value.diagnostics == ["Unsupported syntax: CREATE TABEL B (Y INT)"]


@pytest.mark.parametrize("dialect,sql", [
    ("postgres", "CREATE TABLE public.users (id INT NOT NULL, name VARCHAR(50))"),
    ("mysql", "CREATE TABLE shop.users (id INT NOT NULL, name VARCHAR(50))"),
])
def test_other_dialects(dialect, sql):
    tables = _extract(sql, dialect=dialect)
    assert tables == [
        TableSchema("users", (ColumnSchema("id", "INT", False), ColumnSchema("name", "VARCHAR", True)))
    ]
