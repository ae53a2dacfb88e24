# ============================================================================
# CONVERSION ORCHESTRATOR TESTS
# ============================================================================
"""
Conversion Orchestrator Tests

End-to-end through parse -> extract -> emit, plus the error taxonomy:
- validation, parse, no_tables, unsupported_language, internal
- multi-table and duplicate-name behaviour
- determinism

Run with:
    pytest tests/test_orchestrator.py -v
"""

import pytest
import sqlglot.errors

from sqlpoco.services.poco_generation import ConversionOrchestrator
from sqlpoco.services.poco_generation.emitters.python_emitter import PythonEmitter
from sqlpoco.services.poco_generation.errors import ParseError, ValidationError
from sqlpoco.services.poco_generation.utils import parser_utils


MULTI_TABLE_SQL = "CREATE TABLE Foo (Id INT NOT NULL); CREATE TABLE Bar (Name NVARCHAR(50));"


@pytest.fixture
def orchestrator():
    return ConversionOrchestrator(source_dialect="sqlserver")


# ============================================================================
# SUCCESS PATHS
# ============================================================================


class TestSuccess:
    def test_multi_table_python(self, orchestrator):
        result = orchestrator.convert(MULTI_TABLE_SQL, "python")

        assert result.success is True
        assert result.error is None
        assert list(result.generated_code) == ["Foo", "Bar"]
        assert "    Id: int\n" in result.generated_code["Foo"]
        assert "    Name: Optional[str]\n" in result.generated_code["Bar"]

    def test_language_is_case_insensitive(self, orchestrator):
        result = orchestrator.convert(MULTI_TABLE_SQL, "CSharp")
        assert result.success is True
        assert "public int Id { get; set; }" in result.generated_code["Foo"]

    @pytest.mark.parametrize("language", ["csharp", "java", "typescript", "python"])
    def test_output_is_deterministic(self, orchestrator, language):
        sql = (
            "CREATE TABLE dbo.Invoice (InvoiceId UNIQUEIDENTIFIER NOT NULL, Total MONEY, "
            "IssuedOn DATE NOT NULL, Paid BIT);"
        )
        first = orchestrator.convert(sql, language)
        second = ConversionOrchestrator(source_dialect="sqlserver").convert(sql, language)
        assert first.success is True
        assert first.generated_code == second.generated_code

    def test_column_order_matches_ddl(self, orchestrator):
        result = orchestrator.convert("CREATE TABLE T (Zeta INT, Alpha INT, Mid INT)", "typescript")
        assert result.generated_code["T"] == (
            "interface T {\n"
            "    Zeta?: number;\n"
            "    Alpha?: number;\n"
            "    Mid?: number;\n"
            "}\n"
        )

    def test_not_null_yields_non_nullable_form(self, orchestrator):
        sql = "CREATE TABLE T (A INT NOT NULL, B INT)"
        assert "public int A" in orchestrator.convert(sql, "csharp").generated_code["T"]
        assert "public int? B" in orchestrator.convert(sql, "csharp").generated_code["T"]
        java = orchestrator.convert(sql, "java").generated_code["T"]
        assert "private int A;" in java
        assert "private Integer B;" in java

    def test_duplicate_table_name_last_wins(self, orchestrator):
        result = orchestrator.convert(
            "CREATE TABLE A (OldCol INT); CREATE TABLE dbo.A (NewCol BIGINT NOT NULL);", "csharp"
        )
        assert result.success is True
        assert list(result.generated_code) == ["A"]
        assert "NewCol" in result.generated_code["A"]
        assert "OldCol" not in result.generated_code["A"]

    @pytest.mark.parametrize("sql", [
        "CREATE TABLE A (X INT NOT NULL)\nGO\nCREATE TABLE B (Y INT)\nGO\nCREATE TABLE C (Z INT)\nGO\n",
        "CREATE TABLE A (X INT NOT NULL);\nGO\nCREATE TABLE B (Y INT);\ngo\nCREATE TABLE C (Z INT);\nGO 2\n",
    ])
    def test_go_separated_batches(self, orchestrator, sql):
        result = orchestrator.convert(sql, "typescript")
        assert result.success is True
        assert list(result.generated_code) == ["A", "B", "C"]
        assert "    X: number;" in result.generated_code["A"]

    def test_non_table_statements_are_skipped(self, orchestrator):
        result = orchestrator.convert(
            "SELECT 1;\nCREATE TABLE AuditLog (Message NTEXT);\nDROP TABLE Old;", "python"
        )
        assert list(result.generated_code) == ["AuditLog"]

    def test_other_source_dialect(self):
        result = ConversionOrchestrator(source_dialect="postgresql").convert(
            "CREATE TABLE public.users (id INT NOT NULL, name VARCHAR(50))", "typescript"
        )
        assert result.generated_code == {"users": "interface users {\n    id: number;\n    name?: string;\n}\n"}

    def test_to_dict_shape(self, orchestrator):
        payload = orchestrator.convert(MULTI_TABLE_SQL, "python").to_dict()
        assert set(payload) == {"generatedCode", "success", "error", "errorType"}
        assert payload["success"] is True


# ============================================================================
# FAILURE PATHS
# ============================================================================


class TestFailures:
    @pytest.mark.parametrize("sql", ["", "   \n\t ", None])
    def test_empty_input_is_validation_error(self, orchestrator, sql):
        result = orchestrator.convert(sql, "csharp")
        assert result.success is False
        assert result.error_type == "validation"
        assert result.error == "SQL script cannot be empty"
        assert result.generated_code == {}

    def test_no_tables(self, orchestrator):
        result = orchestrator.convert("SELECT 1;", "csharp")
        assert result.success is False
        assert result.error_type == "no_tables"
        assert result.error == "No valid CREATE TABLE statements found"

    def test_unsupported_language(self, orchestrator):
        result = orchestrator.convert(MULTI_TABLE_SQL, "rust")
        assert result.success is False
        assert result.error_type == "unsupported_language"
        assert result.error == "Unsupported language: rust"

    def test_unterminated_string_is_parse_error(self, orchestrator):
        result = orchestrator.convert("CREATE TABLE T (A INT DEFAULT 'abc", "csharp")
        assert result.success is False
        assert result.error_type == "parse"
        assert result.error.startswith("SQL parsing error: ")

    def test_missing_parenthesis_is_parse_error(self, orchestrator):
        result = orchestrator.convert("CREATE TABLE Foo (Id INT NOT NULL", "csharp")
        assert result.error_type == "parse"

    def test_misspelled_create_is_parse_error(self, orchestrator):
        result = orchestrator.convert(
            "CREATE TABLE A (X INT); CREATE TABEL B (Y INT); CREATE TABLE C (Z INT);", "csharp"
        )
        assert result.success is False
        assert result.error_type == "parse"
        assert "TABEL B" in result.error

    def test_trailing_tokens_after_create_table_is_parse_error(self, orchestrator):
        result = orchestrator.convert("CREATE TABLE Foo (Id INT) GARBAGE HERE", "csharp")
        assert result.error_type == "parse"
        assert result.generated_code == {}

    def test_parse_error_aggregates_diagnostics(self, orchestrator, monkeypatch):
        def fake_parse(*args, **kwargs):
            raise sqlglot.errors.ParseError("boom", errors=[
                {"description": "Expecting )", "line": 1, "col": 5},
                {"description": "Invalid expression / Unexpected token", "line": 2, "col": 1},
            ])

        monkeypatch.setattr(parser_utils.sqlglot, "parse", fake_parse)
        result = orchestrator.convert("CREATE TABLE Foo (Id INT", "csharp")
        assert result.error == (
            "SQL parsing error: Expecting ) (line 1, col 5), "
            "Invalid expression / Unexpected token (line 2, col 1)"
        )

    def test_parse_precedes_language_check(self, orchestrator):
        result = orchestrator.convert("CREATE TABLE T (A INT DEFAULT 'abc", "rust")
        assert result.error_type == "parse"

    def test_unknown_source_dialect(self):
        result = ConversionOrchestrator(source_dialect="nosuchdb").convert(MULTI_TABLE_SQL, "csharp")
        assert result.error_type == "validation"
        assert "nosuchdb" in result.error

    def test_internal_error_hides_details(self, orchestrator, monkeypatch):
        def explode(self, table):
            raise RuntimeError("secret internal state")

        monkeypatch.setattr(PythonEmitter, "emit", explode)
        result = orchestrator.convert(MULTI_TABLE_SQL, "python")
        assert result.success is False
        assert result.error_type == "internal"
        assert "secret" not in result.error

    def test_generate_raises_typed_errors(self, orchestrator):
        with pytest.raises(ValidationError):
            orchestrator.generate("", "csharp")
        with pytest.raises(ParseError) as excinfo:
            orchestrator.generate("SELECT 'abc", "csharp")
        assert excinfo.value.diagnostics
