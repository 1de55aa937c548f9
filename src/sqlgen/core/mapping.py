"""
Table mapping metadata consumed by the SQL generator.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Iterable, Iterator, List, Optional, Tuple

from ..errors import MappingConfigurationError, UnknownColumnError
from .columns import ColumnMap, KeyType


class TableMapping:
    """
    Table identity plus the ordered list of mapped columns.

    Column lookups by logical name are case-insensitive.
    """

    def __init__(
        self,
        table_name: str,
        columns: Iterable[ColumnMap] = (),
        *,
        schema_name: Optional[str] = None,
    ) -> None:
        if not table_name:
            raise MappingConfigurationError("Table name cannot be empty.")
        self.table_name = table_name
        self.schema_name = schema_name or None
        self.columns: "OrderedDict[str, ColumnMap]" = OrderedDict()
        for column in columns:
            self.map(column)

    def map(self, column: ColumnMap) -> "TableMapping":
        key = column.name.lower()
        if key in self.columns:
            raise MappingConfigurationError(
                f"Duplicate column '{column.name}' on mapping '{self.table_name}'"
            )
        self.columns[key] = column
        return self

    @property
    def identity(self) -> Tuple[Optional[str], str]:
        return self.schema_name, self.table_name

    @property
    def qualified_name(self) -> str:
        if self.schema_name:
            return f"{self.schema_name}.{self.table_name}"
        return self.table_name

    def get_column(self, name: str) -> ColumnMap:
        try:
            return self.columns[name.lower()]
        except KeyError:
            raise UnknownColumnError(name, self.qualified_name) from None

    def has_column(self, name: str) -> bool:
        return name.lower() in self.columns

    def get_columns(self) -> List[ColumnMap]:
        return list(self.columns.values())

    def key_columns(self) -> List[ColumnMap]:
        return [column for column in self.columns.values() if column.is_key]

    def columns_with_key(self, key_type: KeyType) -> List[ColumnMap]:
        return [column for column in self.columns.values() if column.key_type is key_type]

    def __iter__(self) -> Iterator[ColumnMap]:
        return iter(self.columns.values())

    def __len__(self) -> int:
        return len(self.columns)

    def __repr__(self) -> str:
        return f"TableMapping({self.qualified_name!r}, columns={len(self.columns)})"
