"""
SQLGlot dialect utilities for DDL parsing.
Handles mapping between database types and their corresponding SQLGlot dialects.
"""


def get_sqlglot_dialect(source_type: str):
    """
    Get the appropriate SQLGlot dialect for parsing.

    Args:
        source_type: Database type (e.g., 'sqlserver', 'postgresql', 'tsql')

    Returns:
        SQLGlot dialect name. Names that are not friendly aliases are passed
        through unchanged so any dialect sqlglot knows can be configured.
    """
    dialect_map = {
        'sqlserver': 'tsql',
        'mssql': 'tsql',
        'azuresql': 'tsql',
        'tsql': 'tsql',
        'oracle': 'oracle',
        'mysql': 'mysql',
        'postgresql': 'postgres',
        'postgres': 'postgres',
        'snowflake': 'snowflake',
        'bigquery': 'bigquery',
    }

    if not source_type:
        return 'tsql'
    key = source_type.strip().lower()
    return dialect_map.get(key, key)
