"""SQL validation and formatting for the reference report queries."""

from __future__ import annotations

import logging
from typing import Any

import sqlglot
from sqlglot import exp

from healthanalytics.storage.schema import INIT_SCHEMA


logger = logging.getLogger(__name__)
DIALECT = "sqlite"


class SQLValidator:
    """Validates SQL syntax and schema references with sqlglot."""

    def __init__(self, schema: str = INIT_SCHEMA) -> None:
        self._schema_tables = self._parse_schema(schema)

    @property
    def tables(self) -> dict[str, list[str]]:
        return self._schema_tables

    def _parse_schema(self, schema: str) -> dict[str, list[str]]:
        """Parse schema DDL to extract table and column names."""
        tables: dict[str, list[str]] = {}
        for statement in sqlglot.parse(schema, read=DIALECT):
            if not isinstance(statement, exp.Create) or not isinstance(statement.this, exp.Schema):
                continue
            table_name = statement.this.this.name.lower()
            tables[table_name] = [
                column.name.lower()
                for column in statement.this.expressions
                if isinstance(column, exp.ColumnDef)
            ]
        return tables

    def validate(self, sql: str) -> dict[str, Any]:
        """Validate SQL query syntax and schema references.

        Tables defined by a CTE and columns defined by a select alias count
        as known.

        Returns:
            Dict with ``is_valid``, ``tables_used``, ``columns_used``,
            ``warnings`` and ``error``.
        """
        result: dict[str, Any] = {"is_valid": False, "sql": sql, "tables_used": [], "columns_used": [], "warnings": [], "error": None}
        try:
            parsed = sqlglot.parse_one(sql, read=DIALECT)
        except (sqlglot.errors.ParseError, sqlglot.errors.TokenError) as e:
            result["error"] = f"SQL syntax error: {e}"
            return result

        cte_names = {cte.alias_or_name.lower() for cte in parsed.find_all(exp.CTE)}
        aliases = {alias.alias.lower() for alias in parsed.find_all(exp.Alias)}

        tables_used: list[str] = []
        for table in parsed.find_all(exp.Table):
            table_name = table.name.lower()
            tables_used.append(table_name)
            if table_name not in self._schema_tables and table_name not in cte_names:
                result["warnings"].append(f"Unknown table: {table_name}")
        result["tables_used"] = sorted(set(tables_used))

        columns_used: list[str] = []
        for column in parsed.find_all(exp.Column):
            col_name = column.name.lower()
            columns_used.append(col_name)
            if col_name in aliases:
                continue
            if not any(col_name in table_cols for table_cols in self._schema_tables.values()):
                result["warnings"].append(f"Unknown column: {col_name}")
        result["columns_used"] = sorted(set(columns_used))

        result["is_valid"] = True
        if result["warnings"]:
            logger.debug("SQL warnings: %s", result["warnings"])
        return result

    def format_sql(self, sql: str) -> str:
        """Format SQL query for readability."""
        try:
            parsed = sqlglot.parse_one(sql, read=DIALECT)
            return parsed.sql(dialect=DIALECT, pretty=True)
        except (sqlglot.errors.ParseError, sqlglot.errors.TokenError):
            return sql.strip()
