"""
Oracle dialect implementation.
"""

from __future__ import annotations

from typing import Any, Final, MutableMapping

from .base import BaseDialect, DialectCapabilities


class OracleDialect(BaseDialect):
    """
    Oracle 12c+ dialect using colon-prefixed binds and ``FETCH NEXT`` windows.

    Bind names must start with a letter. Oracle has no session-level last
    identity; generated keys are read back through ``RETURNING ... INTO`` on
    trigger identity columns instead.
    """

    name: Final[str] = "oracle"
    parameter_prefix: Final[str] = ":"
    first_result_param: Final[str] = "first_result"
    max_results_param: Final[str] = "max_results"
    capabilities: Final[DialectCapabilities] = DialectCapabilities(
        supports_multiple_statements=False,
        supports_identity_retrieval=False,
    )

    def get_window_sql(self, sql: str, first_result: int, max_results: int, params: MutableMapping[str, Any]) -> str:
        first, limit = self._bind_window(params, first_result, max_results)
        return f"{sql} OFFSET {first} ROWS FETCH NEXT {limit} ROWS ONLY"
