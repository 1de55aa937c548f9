"""
MySQL dialect implementation.
"""

from __future__ import annotations

from typing import Any, Final, MutableMapping

from .base import BaseDialect


class MySQLDialect(BaseDialect):
    """
    MySQL dialect using backtick quoting and ``LIMIT offset, count`` windows.

    String literals treat backslash as an escape character unless the server
    runs with ``NO_BACKSLASH_ESCAPES``, so both backslashes and quotes are
    doubled.
    """

    name: Final[str] = "mysql"
    open_quote: Final[str] = "`"
    close_quote: Final[str] = "`"

    def escape_string_literal(self, text: str) -> str:
        return super().escape_string_literal(text.replace("\\", "\\\\"))

    def get_identity_sql(self, table_name: str) -> str:
        return f"SELECT LAST_INSERT_ID() AS {self.quote_identifier('Id')}"

    def get_window_sql(self, sql: str, first_result: int, max_results: int, params: MutableMapping[str, Any]) -> str:
        first, limit = self._bind_window(params, first_result, max_results)
        return f"{sql} LIMIT {first}, {limit}"
