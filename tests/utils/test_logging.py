import io
import logging

from sqlgen.core import IntegerColumn, KeyType, StringColumn, TableMapping
from sqlgen.dialects import SQLiteDialect
from sqlgen.query import FieldPredicate, Operator, SqlGenerator
from sqlgen.utils import StatementContextFilter, configure_logging, get_logger, time_call
from sqlgen.utils.logging import ROOT_LOGGER

account = TableMapping(
    "Account",
    [
        IntegerColumn("Id", key_type=KeyType.IDENTITY),
        StringColumn("Login"),
        StringColumn("Password"),
    ],
)


def test_context_filter_defaults_missing_fields():
    record = logging.LogRecord("sqlgen.x", logging.INFO, __file__, 1, "msg", None, None)
    assert StatementContextFilter().filter(record) is True
    assert record.dialect == "-"
    assert record.operation == "-"


def test_configure_logging_formats_generator_context():
    root = logging.getLogger(ROOT_LOGGER)
    saved_handlers, saved_level = list(root.handlers), root.level
    stream = io.StringIO()
    try:
        root.handlers = []
        handler = configure_logging(logging.DEBUG, stream=stream)
        assert configure_logging(logging.DEBUG) is handler
        SqlGenerator.for_dialect(SQLiteDialect()).insert(account)
        get_logger("tests.logging").info("plain message")
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
    lines = stream.getvalue().splitlines()
    assert any("| sqlite | insert | sqlgen.query.generator | Generated insert statement" in line for line in lines)
    assert any("| - | - | sqlgen.tests.logging | plain message" in line for line in lines)


def test_get_logger_is_namespaced():
    assert get_logger("tests.logging").name == "sqlgen.tests.logging"


def test_time_call_logs_duration(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("unit-test", logger, threshold_ms=0):
        pass
    messages = [record.getMessage() for record in caplog.records if record.name == logger.name]
    assert any("unit-test took" in message for message in messages)


def test_generator_logs_statements_with_redacted_params(caplog):
    generator = SqlGenerator.for_dialect(SQLiteDialect())
    caplog.set_level(logging.DEBUG, logger=generator.logger.name)
    params = {}
    sql = generator.select(account, FieldPredicate(account, "Password", Operator.EQ, "hunter2"), None, params)
    records = [record for record in caplog.records if record.name == generator.logger.name]
    assert records
    assert records[-1].sql == sql
    assert records[-1].params == {"Password_p0": "***"}
    assert params == {"Password_p0": "hunter2"}


def test_generator_logging_can_be_disabled(caplog):
    generator = SqlGenerator.for_dialect(SQLiteDialect(), log_statements=False)
    caplog.set_level(logging.DEBUG, logger=generator.logger.name)
    generator.insert(account)
    assert not [record for record in caplog.records if record.name == generator.logger.name]
