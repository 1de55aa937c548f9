"""
Column descriptors for table mappings.

A :class:`ColumnMap` pairs the logical name used by calling code with the
physical column name used in SQL, and classifies how the column takes part
in key handling.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from ..errors import MappingConfigurationError
from .literals import ValueKind


class KeyType(Enum):
    NOT_A_KEY = "not_a_key"
    ASSIGNED = "assigned"
    IDENTITY = "identity"
    TRIGGER_IDENTITY = "trigger_identity"


GENERATED_KEY_TYPES = frozenset({KeyType.IDENTITY, KeyType.TRIGGER_IDENTITY})


class ColumnMap:
    """
    Describes a single mapped column.

    Subclasses fix :attr:`kind`, which decides how inline literals for the
    column are rendered. Descriptors are treated as immutable once they are
    attached to a mapping.
    """

    kind: ValueKind = ValueKind.TEXT

    def __init__(
        self,
        name: str,
        *,
        column_name: Optional[str] = None,
        key_type: KeyType = KeyType.NOT_A_KEY,
        ignored: bool = False,
        read_only: bool = False,
    ) -> None:
        if not name:
            raise MappingConfigurationError("Column name cannot be empty.")
        if ignored and key_type is not KeyType.NOT_A_KEY:
            raise MappingConfigurationError(f"Key column '{name}' cannot be ignored.")
        if read_only and key_type is not KeyType.NOT_A_KEY:
            raise MappingConfigurationError(f"Key column '{name}' cannot be read-only.")
        self.name = name
        self.column_name = column_name or name
        self.key_type = key_type
        self.ignored = ignored
        self.read_only = read_only

    # Classification helpers ----------------------------------------------
    @property
    def is_key(self) -> bool:
        return self.key_type is not KeyType.NOT_A_KEY

    @property
    def is_generated(self) -> bool:
        return self.key_type in GENERATED_KEY_TYPES

    @property
    def writable(self) -> bool:
        return not (self.ignored or self.read_only)

    @property
    def is_renamed(self) -> bool:
        return self.column_name != self.name

    # Utilities -----------------------------------------------------------
    def deconstruct(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "column_name": self.column_name,
            "key_type": self.key_type.value,
            "ignored": self.ignored,
            "read_only": self.read_only,
            "kind": self.kind.value,
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.name!r}, column_name={self.column_name!r}, "
            f"key_type={self.key_type.name})"
        )


class StringColumn(ColumnMap):
    kind = ValueKind.TEXT


class IntegerColumn(ColumnMap):
    kind = ValueKind.NUMERIC


class FloatColumn(ColumnMap):
    kind = ValueKind.NUMERIC


class DecimalColumn(ColumnMap):
    kind = ValueKind.NUMERIC


class BooleanColumn(ColumnMap):
    kind = ValueKind.BOOLEAN


class DateTimeColumn(ColumnMap):
    kind = ValueKind.TEMPORAL


class DateColumn(ColumnMap):
    kind = ValueKind.TEMPORAL


class UUIDColumn(ColumnMap):
    kind = ValueKind.UUID
