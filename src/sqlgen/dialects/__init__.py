"""
Dialect strategy registry.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..errors import ConfigurationError
from .base import BaseDialect, Dialect, DialectCapabilities
from .mysql import MySQLDialect
from .oracle import OracleDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect
from .sqlserver import SqlServerDialect

DIALECTS: Dict[str, Callable[[], Dialect]] = {
    "sqlite": SQLiteDialect,
    "postgresql": PostgresDialect,
    "postgres": PostgresDialect,
    "mysql": MySQLDialect,
    "sqlserver": SqlServerDialect,
    "mssql": SqlServerDialect,
    "oracle": OracleDialect,
}


def get_dialect(name: str) -> Dialect:
    try:
        factory = DIALECTS[name.strip().lower()]
    except KeyError:
        raise ConfigurationError(f"Unknown dialect '{name}'") from None
    return factory()


__all__ = [
    "BaseDialect",
    "Dialect",
    "DialectCapabilities",
    "MySQLDialect",
    "OracleDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "SqlServerDialect",
    "get_dialect",
]
