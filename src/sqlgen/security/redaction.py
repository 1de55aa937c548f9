"""Redaction helpers for logged parameter bags."""

from __future__ import annotations

from typing import Any, Mapping

REDACTED_VALUE = "***"

_SENSITIVE_NAME_TOKENS = (
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "apikey",
    "accesskey",
    "privatekey",
    "salt",
)

_SENSITIVE_VALUE_TOKENS = (
    "password",
    "secret",
    "bearer",
    "authorization",
)


def _compact(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch.isalnum())


def is_sensitive_name(name: str) -> bool:
    """
    Return True when a parameter or column name looks like it carries secrets.

    Generated suffixes (``Password_p0``, ``Token3``) are ignored by matching on
    the compacted name.
    """
    compact = _compact(name)
    return any(token in compact for token in _SENSITIVE_NAME_TOKENS)


def is_sensitive_value(value: str) -> bool:
    normalized = value.lower()
    return any(token in normalized for token in _SENSITIVE_VALUE_TOKENS)


def redact_value(value: Any, *, name: str | None = None) -> Any:
    if name is not None and is_sensitive_name(name):
        return REDACTED_VALUE
    if isinstance(value, Mapping):
        return {key: redact_value(item, name=str(key)) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [redact_value(item) for item in value]
    if isinstance(value, bytes):
        return REDACTED_VALUE if is_sensitive_value(value.decode("utf-8", errors="ignore")) else value
    if isinstance(value, str) and is_sensitive_value(value):
        return REDACTED_VALUE
    return value


def redact_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return a copy of a parameter bag that is safe to log."""
    if not params:
        return {}
    return {key: redact_value(value, name=key) for key, value in params.items()}
