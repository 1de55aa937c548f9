import uuid
from datetime import datetime
from decimal import Decimal

import pytest

from sqlgen.core import (
    BooleanColumn,
    DateTimeColumn,
    DecimalColumn,
    IntegerColumn,
    KeyType,
    StringColumn,
    TableMapping,
    UUIDColumn,
)
from sqlgen.dialects import MySQLDialect, OracleDialect, SQLiteDialect
from sqlgen.errors import (
    EmptyBatchError,
    EmptyPredicateListError,
    NoMappedColumnsError,
    NullParameterBagError,
    ParameterNameCollisionError,
    UnknownColumnError,
)
from sqlgen.query import FieldPredicate, Operator, SqlGenerator


def make_person(schema=None) -> TableMapping:
    return TableMapping(
        "Person",
        [
            IntegerColumn("Id", key_type=KeyType.IDENTITY),
            StringColumn("Name"),
            IntegerColumn("Age"),
        ],
        schema_name=schema,
    )


order = TableMapping(
    "Order",
    [IntegerColumn("Id", key_type=KeyType.IDENTITY), DecimalColumn("Total")],
)


def make_generator(dialect=None) -> SqlGenerator:
    return SqlGenerator.for_dialect(dialect or SQLiteDialect())


def test_bulk_insert_collapses_same_table_into_one_statement():
    sql = make_generator().bulk_insert([make_person(), make_person()])
    assert sql == (
        'INSERT INTO "Person" ("Name", "Age") VALUES\n'
        "(@Name0, @Age0),\n"
        "(@Name1, @Age1);"
    )


def test_bulk_insert_keeps_rows_with_their_own_table():
    sql = make_generator().bulk_insert([make_person(), order, make_person()])
    assert sql == (
        'INSERT INTO "Person" ("Name", "Age") VALUES\n'
        "(@Name0, @Age0),\n"
        "(@Name2, @Age2);\n"
        'INSERT INTO "Order" ("Total") VALUES\n'
        "(@Total1);"
    )


def test_bulk_insert_groups_by_schema_and_table():
    sql = make_generator().bulk_insert([make_person("crm"), make_person()])
    assert sql.count("INSERT INTO") == 2
    assert 'INSERT INTO "crm"."Person"' in sql


def test_bulk_insert_rejects_empty_batch():
    with pytest.raises(EmptyBatchError):
        make_generator().bulk_insert([])


def test_bulk_insert_group_without_writable_columns():
    counter = TableMapping("Counter", [IntegerColumn("Id", key_type=KeyType.IDENTITY)])
    with pytest.raises(NoMappedColumnsError):
        make_generator().bulk_insert([make_person(), counter])


def test_bulk_insert_values_renders_typed_literals():
    event = TableMapping(
        "Event",
        [
            IntegerColumn("Seq", key_type=KeyType.IDENTITY),
            UUIDColumn("Id", key_type=KeyType.ASSIGNED),
            StringColumn("Title"),
            DateTimeColumn("At"),
            BooleanColumn("Active"),
            DecimalColumn("Price"),
        ],
    )
    rows = [
        {
            "Seq": 99,
            "Id": uuid.UUID("12345678-1234-5678-1234-567812345678"),
            "Title": "O'Neil",
            "At": datetime(2024, 1, 2, 3, 4, 5),
            "Active": True,
            "Price": Decimal("9.50"),
        },
        {"id": "aaaaaaaa-0000-0000-0000-000000000000", "active": False},
    ]
    sql = make_generator().bulk_insert_values(event, rows)
    assert sql == (
        'INSERT INTO "Event" ("Id", "Title", "At", "Active", "Price") VALUES\n'
        "('12345678-1234-5678-1234-567812345678', 'O''Neil', '2024-01-02 03:04:05', 1, 9.50),\n"
        "('aaaaaaaa-0000-0000-0000-000000000000', NULL, NULL, 0, NULL)"
    )


def test_bulk_insert_values_rejects_unknown_columns_and_empty_rows():
    generator = make_generator()
    with pytest.raises(UnknownColumnError):
        generator.bulk_insert_values(make_person(), [{"Name": "Ann", "Email": "a@example.com"}])
    with pytest.raises(EmptyBatchError):
        generator.bulk_insert_values(make_person(), [])


def test_bulk_update_emits_one_statement_per_predicate():
    person = make_person()
    params = {}
    predicates = [
        FieldPredicate(person, "Id", Operator.EQ, 1),
        FieldPredicate(person, "Id", Operator.EQ, 2),
    ]
    sql = make_generator().bulk_update(person, predicates, params, False)
    assert sql == (
        'UPDATE "Person" SET "Name" = @Name_0, "Age" = @Age_0 WHERE "Person"."Id" = @Id_p0;\n'
        'UPDATE "Person" SET "Name" = @Name_1, "Age" = @Age_1 WHERE "Person"."Id" = @Id_p1;'
    )
    assert params == {"Id_p0": 1, "Id_p1": 2}


def test_bulk_update_parameter_names_never_collide():
    person = make_person()
    predicates = [FieldPredicate(person, "Name", Operator.EQ, f"n{i}") for i in range(4)]
    params = {}
    sql = make_generator().bulk_update(person, predicates, params)
    statements = sql.splitlines()
    assert len(statements) == 4
    assert all(statement.startswith("UPDATE ") and statement.endswith(";") for statement in statements)
    names = [token.rstrip(",;") for token in sql.split() if token.startswith("@")]
    assert len(names) == len(set(names))


def test_bulk_update_repeated_predicate_object_gets_distinct_suffixes():
    person = make_person()
    predicate = FieldPredicate(person, "Id", Operator.EQ, 1)
    sql = make_generator().bulk_update(person, [predicate, predicate], {})
    assert "@Name_0" in sql and "@Name_1" in sql


def test_bulk_update_validation():
    person = make_person()
    generator = make_generator()
    with pytest.raises(EmptyPredicateListError):
        generator.bulk_update(person, [], {})
    with pytest.raises(NullParameterBagError):
        generator.bulk_update(person, [FieldPredicate(person, "Id", Operator.EQ, 1)], None)


def test_bulk_update_does_not_gate_on_dialect_capability():
    person = make_person()
    generator = make_generator(OracleDialect())
    sql = generator.bulk_update(person, [FieldPredicate(person, "Id", Operator.EQ, 1)], {})
    assert sql.startswith('UPDATE "Person" SET "Name" = :Name_0')
    assert generator.supports_multiple_statements() is False


def test_bulk_insert_rejects_row_parameters_that_share_a_name():
    numbered = TableMapping("Contact", [StringColumn("Name"), StringColumn("Name1")])
    generator = make_generator()
    sql = generator.bulk_insert([numbered] * 10)
    assert "@Name9, @Name19" in sql
    with pytest.raises(ParameterNameCollisionError) as excinfo:
        generator.bulk_insert([numbered] * 11)
    assert excinfo.value.names == ["Name10"]


def test_bulk_insert_values_escapes_backslashes_on_mysql():
    sql = make_generator(MySQLDialect()).bulk_insert_values(
        make_person(), [{"Name": "x\\'); DROP TABLE t; --", "Age": 1}]
    )
    assert sql == (
        "INSERT INTO `Person` (`Name`, `Age`) VALUES\n"
        "('x\\\\''); DROP TABLE t; --', 1)"
    )


def test_bulk_insert_values_keeps_backslashes_on_standard_dialects():
    sql = make_generator().bulk_insert_values(make_person(), [{"Name": "C:\\temp", "Age": 2}])
    assert sql.endswith("('C:\\temp', 2)")
