"""
Dialect strategy interfaces describing engine-specific SQL syntax.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping, Optional, Protocol, Tuple

from ..core.literals import escape_quotes
from ..errors import UnsupportedOperationError


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_multiple_statements: bool = True
    supports_identity_retrieval: bool = True


class Dialect(Protocol):
    """
    Strategy interface consumed by the SQL generator.
    """

    @property
    def name(self) -> str: ...

    @property
    def open_quote(self) -> str: ...

    @property
    def close_quote(self) -> str: ...

    @property
    def parameter_prefix(self) -> str: ...

    @property
    def first_result_param(self) -> str: ...

    @property
    def max_results_param(self) -> str: ...

    @property
    def empty_expression(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def escape_string_literal(self, text: str) -> str: ...

    def get_table_name(self, schema_name: Optional[str], table_name: str, alias: Optional[str] = None) -> str: ...

    def get_column_name(self, prefix: Optional[str], column_name: str, alias: Optional[str] = None) -> str: ...

    def get_identity_sql(self, table_name: str) -> str: ...

    def get_paging_sql(self, sql: str, page: int, page_size: int, params: MutableMapping[str, Any]) -> str: ...

    def get_window_sql(self, sql: str, first_result: int, max_results: int, params: MutableMapping[str, Any]) -> str: ...

    def supports_multiple_statements(self) -> bool: ...


class BaseDialect:
    """
    Shared quoting, naming and paging behaviour.

    Concrete dialects override the quote characters, the parameter prefix,
    :meth:`get_identity_sql` and :meth:`get_window_sql`.
    """

    name: str = "ansi"
    open_quote: str = '"'
    close_quote: str = '"'
    parameter_prefix: str = "@"
    first_result_param: str = "_first_result"
    max_results_param: str = "_max_results"
    empty_expression: str = "1=1"
    capabilities: DialectCapabilities = DialectCapabilities()

    # Quoting -------------------------------------------------------------
    def is_quoted(self, value: str) -> bool:
        value = value.strip()
        return (
            len(value) >= 2
            and value.startswith(self.open_quote)
            and value.endswith(self.close_quote)
        )

    def quote_identifier(self, identifier: str) -> str:
        identifier = identifier.strip()
        if identifier == "*" or self.is_quoted(identifier):
            return identifier
        escaped = identifier.replace(self.close_quote, self.close_quote * 2)
        return f"{self.open_quote}{escaped}{self.close_quote}"

    def escape_string_literal(self, text: str) -> str:
        """
        Escape ``text`` for use between single quotes.
        """
        return escape_quotes(text)

    # Naming --------------------------------------------------------------
    def get_table_name(self, schema_name: Optional[str], table_name: str, alias: Optional[str] = None) -> str:
        if not table_name or not table_name.strip():
            raise ValueError("Table name cannot be empty.")
        result = self.quote_identifier(table_name)
        if schema_name:
            result = f"{self.quote_identifier(schema_name)}.{result}"
        if alias:
            result = f"{result} AS {self.quote_identifier(alias)}"
        return result

    def get_column_name(self, prefix: Optional[str], column_name: str, alias: Optional[str] = None) -> str:
        if not column_name or not column_name.strip():
            raise ValueError("Column name cannot be empty.")
        result = self.quote_identifier(column_name)
        if prefix:
            result = f"{self.quote_identifier(prefix)}.{result}"
        if alias:
            result = f"{result} AS {self.quote_identifier(alias)}"
        return result

    # Statements ----------------------------------------------------------
    def get_identity_sql(self, table_name: str) -> str:
        raise UnsupportedOperationError(
            f"Dialect '{self.name}' does not support retrieving the last inserted identity."
        )

    def get_paging_sql(self, sql: str, page: int, page_size: int, params: MutableMapping[str, Any]) -> str:
        return self.get_window_sql(sql, page * page_size, page_size, params)

    def get_window_sql(self, sql: str, first_result: int, max_results: int, params: MutableMapping[str, Any]) -> str:
        first, limit = self._bind_window(params, first_result, max_results)
        return f"{sql} LIMIT {limit} OFFSET {first}"

    def _bind_window(
        self, params: MutableMapping[str, Any], first_result: int, max_results: int
    ) -> Tuple[str, str]:
        """
        Store the window bounds in ``params`` and return their placeholders.
        """
        params[self.first_result_param] = first_result
        params[self.max_results_param] = max_results
        prefix = self.parameter_prefix
        return f"{prefix}{self.first_result_param}", f"{prefix}{self.max_results_param}"

    def supports_multiple_statements(self) -> bool:
        return self.capabilities.supports_multiple_statements

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
