"""
Mapping metadata building blocks: column descriptors, literals, tables.
"""

from .columns import (
    BooleanColumn,
    ColumnMap,
    DateColumn,
    DateTimeColumn,
    DecimalColumn,
    FloatColumn,
    IntegerColumn,
    KeyType,
    StringColumn,
    UUIDColumn,
)
from .literals import ValueKind, escape_quotes, render_literal
from .mapping import TableMapping

__all__ = [
    "BooleanColumn",
    "ColumnMap",
    "DateColumn",
    "DateTimeColumn",
    "DecimalColumn",
    "FloatColumn",
    "IntegerColumn",
    "KeyType",
    "StringColumn",
    "TableMapping",
    "UUIDColumn",
    "ValueKind",
    "escape_quotes",
    "render_literal",
]
