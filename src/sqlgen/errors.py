"""
Error hierarchy raised while generating SQL.

Every error here signals a violated precondition on the caller's side and is
raised before any SQL text is returned.
"""

from __future__ import annotations


class SqlGenerationError(ValueError):
    """Base class for generation-time validation failures."""


class NullParameterBagError(SqlGenerationError):
    """Raised when a required parameter bag is ``None``."""

    def __init__(self) -> None:
        super().__init__("A parameter bag is required for this statement.")


class MissingSortError(SqlGenerationError):
    """Raised when paging or windowing is requested without an ordering."""

    def __init__(self) -> None:
        super().__init__("Sort cannot be null or empty for paged or windowed selects.")


class MissingPredicateError(SqlGenerationError):
    """Raised when an UPDATE or DELETE is requested without a predicate."""

    def __init__(self, statement: str) -> None:
        self.statement = statement
        super().__init__(f"{statement} requires a predicate; unconditional statements are not generated.")


class NoMappedColumnsError(SqlGenerationError):
    """Raised when no writable columns remain after key/flag filtering."""

    def __init__(self, table: str) -> None:
        self.table = table
        super().__init__(f"No columns were mapped for '{table}'.")


class UnknownColumnError(SqlGenerationError):
    """Raised when a logical column name does not resolve on a mapping."""

    def __init__(self, name: str, table: str) -> None:
        self.name = name
        self.table = table
        super().__init__(f"Could not find '{name}' in mapping for '{table}'.")


class MultiColumnTriggerIdentityError(SqlGenerationError):
    """Raised when a mapping declares more than one trigger identity column."""

    def __init__(self, table: str, columns: list[str]) -> None:
        self.table = table
        self.columns = list(columns)
        joined = ", ".join(self.columns)
        super().__init__(
            f"TriggerIdentity cannot be used with multi-column keys on '{table}' ({joined})."
        )


class EmptyBatchError(SqlGenerationError):
    """Raised when a bulk insert receives no mappings or rows."""

    def __init__(self) -> None:
        super().__init__("Bulk insert requires at least one mapping or row.")


class EmptyPredicateListError(SqlGenerationError):
    """Raised when a bulk update receives no predicates."""

    def __init__(self) -> None:
        super().__init__("Bulk update requires at least one predicate.")


class ParameterNameCollisionError(SqlGenerationError):
    """Raised when two bulk insert bindings would share one parameter name."""

    def __init__(self, table: str, names: list[str]) -> None:
        self.table = table
        self.names = list(names)
        joined = ", ".join(self.names)
        super().__init__(
            f"Bulk insert into '{table}' would bind the same parameter more than once ({joined}); "
            "rename the column whose logical name ends in digits."
        )


class InvalidPagingError(SqlGenerationError):
    """Raised for negative offsets/pages or non-positive page sizes."""


class UnsupportedOperationError(SqlGenerationError):
    """Raised when a dialect cannot express the requested statement."""


class MappingConfigurationError(Exception):
    """Raised when a table mapping or column descriptor is misconfigured."""


class ConfigurationError(RuntimeError):
    """Raised when generator configuration is invalid or incomplete."""
