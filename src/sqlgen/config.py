"""
Generator configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from .dialects import Dialect, get_dialect
from .errors import ConfigurationError

DEFAULT_ENV_PREFIX = "SQLGEN_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: Any, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_int(value: Any, *, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid integer value for '{key}': {value!r}")
    try:
        parsed = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid integer value for '{key}': {value!r}") from exc
    if parsed < 0:
        raise ConfigurationError(f"'{key}' must be non-negative, got {parsed}")
    return parsed


def _resolve_dialect(value: Any) -> Dialect:
    if isinstance(value, str):
        return get_dialect(value)
    if value is None:
        raise ConfigurationError("A dialect is required.")
    return value


@dataclass
class GeneratorConfig:
    """
    Settings shared by every statement a generator builds.
    """

    dialect: Dialect
    log_statements: bool = True
    slow_generation_ms: int = 50
    source: str | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any], **kwargs: Any) -> "GeneratorConfig":
        """
        Build a config from a plain mapping, e.g. a parsed settings file.
        """

        data = dict(values)
        unknown = set(data) - {"dialect", "log_statements", "slow_generation_ms"}
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        if "dialect" not in data:
            raise ConfigurationError("Configuration is missing 'dialect'")

        config_kwargs: dict[str, Any] = {"dialect": _resolve_dialect(data["dialect"])}
        if "log_statements" in data:
            config_kwargs["log_statements"] = _parse_bool(data["log_statements"], key="log_statements")
        if "slow_generation_ms" in data:
            config_kwargs["slow_generation_ms"] = _parse_int(
                data["slow_generation_ms"], key="slow_generation_ms"
            )
        config_kwargs.update(kwargs)
        return cls(**config_kwargs)

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX, **kwargs: Any) -> "GeneratorConfig":
        """
        Build a config from ``<prefix>DIALECT`` and related environment variables.
        """

        dialect_var = f"{prefix}DIALECT"
        dialect_name = os.getenv(dialect_var)
        if not dialect_name:
            raise ConfigurationError(f"Environment variable {dialect_var} is not set")

        values: dict[str, Any] = {"dialect": dialect_name}
        log_statements = os.getenv(f"{prefix}LOG_STATEMENTS")
        if log_statements is not None:
            values["log_statements"] = log_statements
        slow_ms = os.getenv(f"{prefix}SLOW_GENERATION_MS")
        if slow_ms is not None:
            values["slow_generation_ms"] = slow_ms
        kwargs.setdefault("source", dialect_var)
        return cls.from_mapping(values, **kwargs)

    def describe(self) -> str:
        label = getattr(self.dialect, "name", type(self.dialect).__name__)
        if self.source:
            return f"{label} (from {self.source})"
        return label
