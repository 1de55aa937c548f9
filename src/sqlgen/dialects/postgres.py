"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import BaseDialect


class PostgresDialect(BaseDialect):
    """
    PostgreSQL dialect using LIMIT/OFFSET windowing.
    """

    name: Final[str] = "postgresql"

    def get_identity_sql(self, table_name: str) -> str:
        return f"SELECT LASTVAL() AS {self.quote_identifier('Id')}"
