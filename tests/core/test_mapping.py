import pytest

from sqlgen.core import ColumnMap, IntegerColumn, KeyType, StringColumn, TableMapping
from sqlgen.errors import MappingConfigurationError, UnknownColumnError


def make_person() -> TableMapping:
    return TableMapping(
        "Person",
        [
            IntegerColumn("Id", key_type=KeyType.IDENTITY),
            StringColumn("Name", column_name="full_name"),
            IntegerColumn("Age"),
        ],
        schema_name="crm",
    )


def test_mapping_preserves_column_order():
    person = make_person()
    assert [column.name for column in person] == ["Id", "Name", "Age"]
    assert person.identity == ("crm", "Person")
    assert person.qualified_name == "crm.Person"
    assert len(person) == 3


def test_get_column_is_case_insensitive():
    person = make_person()
    for name in ("name", "NAME", "Name"):
        assert person.get_column(name) is person.get_columns()[1]
    assert person.has_column("AGE")


def test_get_column_unknown_name_raises():
    person = make_person()
    with pytest.raises(UnknownColumnError) as excinfo:
        person.get_column("Email")
    assert excinfo.value.name == "Email"
    assert "crm.Person" in str(excinfo.value)


def test_lookup_round_trip_matches_direct_lookup():
    person = make_person()
    for column in person.get_columns():
        resolved = person.get_column(column.name.swapcase())
        assert resolved is column
        assert resolved.column_name == column.column_name


def test_duplicate_columns_rejected_case_insensitively():
    person = make_person()
    with pytest.raises(MappingConfigurationError):
        person.map(StringColumn("NAME"))


def test_key_helpers():
    mapping = TableMapping(
        "Ledger",
        [
            IntegerColumn("Id", key_type=KeyType.TRIGGER_IDENTITY),
            StringColumn("Code", key_type=KeyType.ASSIGNED),
            StringColumn("Memo"),
        ],
    )
    assert [column.name for column in mapping.key_columns()] == ["Id", "Code"]
    assert [column.name for column in mapping.columns_with_key(KeyType.TRIGGER_IDENTITY)] == ["Id"]
    assert mapping.identity == (None, "Ledger")


def test_empty_table_name_rejected():
    with pytest.raises(MappingConfigurationError):
        TableMapping("", [ColumnMap("Id")])
