import pytest

from sqlgen.core import (
    BooleanColumn,
    ColumnMap,
    DateTimeColumn,
    DecimalColumn,
    KeyType,
    StringColumn,
    UUIDColumn,
    ValueKind,
)
from sqlgen.errors import MappingConfigurationError


def test_column_defaults():
    column = ColumnMap("Name")
    assert column.column_name == "Name"
    assert column.key_type is KeyType.NOT_A_KEY
    assert column.writable is True
    assert column.is_key is False
    assert column.is_renamed is False
    assert column.kind is ValueKind.TEXT


def test_renamed_column():
    column = StringColumn("Name", column_name="full_name")
    assert column.is_renamed is True
    assert column.deconstruct()["column_name"] == "full_name"


def test_typed_columns_declare_value_kinds():
    assert DecimalColumn("Price").kind is ValueKind.NUMERIC
    assert BooleanColumn("Active").kind is ValueKind.BOOLEAN
    assert DateTimeColumn("CreatedAt").kind is ValueKind.TEMPORAL
    assert UUIDColumn("Token").kind is ValueKind.UUID


def test_generated_key_types():
    assert ColumnMap("Id", key_type=KeyType.IDENTITY).is_generated is True
    assert ColumnMap("Id", key_type=KeyType.TRIGGER_IDENTITY).is_generated is True
    assert ColumnMap("Id", key_type=KeyType.ASSIGNED).is_generated is False


def test_ignored_or_read_only_columns_are_not_writable():
    assert ColumnMap("Cache", ignored=True).writable is False
    assert ColumnMap("Computed", read_only=True).writable is False


@pytest.mark.parametrize("flag", ["ignored", "read_only"])
def test_key_columns_cannot_be_ignored_or_read_only(flag):
    with pytest.raises(MappingConfigurationError):
        ColumnMap("Id", key_type=KeyType.ASSIGNED, **{flag: True})


def test_empty_column_name_rejected():
    with pytest.raises(MappingConfigurationError):
        ColumnMap("")
