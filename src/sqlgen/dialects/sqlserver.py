"""
Microsoft SQL Server dialect implementation.
"""

from __future__ import annotations

from typing import Any, Final, MutableMapping

from .base import BaseDialect

ORDER_BY = " ORDER BY "
ROW_NUMBER_COLUMN = "_row_number"
PROJECTION_ALIAS = "_proj"


class SqlServerDialect(BaseDialect):
    """
    SQL Server dialect windowing through ``ROW_NUMBER() OVER (...)``.
    """

    name: Final[str] = "sqlserver"
    open_quote: Final[str] = "["
    close_quote: Final[str] = "]"

    def get_identity_sql(self, table_name: str) -> str:
        return f"SELECT CAST(SCOPE_IDENTITY() AS BIGINT) AS {self.quote_identifier('Id')}"

    def get_window_sql(self, sql: str, first_result: int, max_results: int, params: MutableMapping[str, Any]) -> str:
        select_sql, order_by = self._split_order_by(sql)
        if not select_sql.upper().startswith("SELECT "):
            raise ValueError("Windowed SQL must start with SELECT.")
        projection = select_sql[len("SELECT ") :]

        first, limit = self._bind_window(params, first_result, max_results)
        proj = self.quote_identifier(PROJECTION_ALIAS)
        row_number = self.quote_identifier(ROW_NUMBER_COLUMN)
        return (
            f"SELECT TOP({limit}) {proj}.* FROM "
            f"(SELECT ROW_NUMBER() OVER(ORDER BY {order_by}) AS {row_number}, {projection}) {proj} "
            f"WHERE {proj}.{row_number} > {first} "
            f"ORDER BY {proj}.{row_number}"
        )

    @staticmethod
    def _split_order_by(sql: str) -> tuple[str, str]:
        index = sql.upper().rfind(ORDER_BY)
        if index == -1:
            raise ValueError("Windowed SQL requires an ORDER BY clause.")
        return sql[:index], sql[index + len(ORDER_BY) :].strip()
