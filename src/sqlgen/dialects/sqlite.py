"""
SQLite dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import BaseDialect


class SQLiteDialect(BaseDialect):
    """
    SQLite dialect; schemas map onto attached database names.
    """

    name: Final[str] = "sqlite"

    def get_identity_sql(self, table_name: str) -> str:
        return f"SELECT LAST_INSERT_ROWID() AS {self.quote_identifier('Id')}"
