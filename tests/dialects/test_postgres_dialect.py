from sqlgen.dialects import PostgresDialect


def test_postgres_dialect_quotes_identifiers():
    dialect = PostgresDialect()
    assert dialect.quote_identifier('table"name') == '"table""name"'
    assert dialect.get_table_name("public", "users") == '"public"."users"'


def test_postgres_dialect_window_sql():
    dialect = PostgresDialect()
    params = {"Name_p0": "Ann"}
    sql = dialect.get_window_sql("SELECT 1 ORDER BY 1", 0, 20, params)
    assert sql == "SELECT 1 ORDER BY 1 LIMIT @_max_results OFFSET @_first_result"
    assert params == {"Name_p0": "Ann", "_first_result": 0, "_max_results": 20}


def test_postgres_dialect_identity_sql():
    dialect = PostgresDialect()
    assert dialect.get_identity_sql('"public"."users"') == 'SELECT LASTVAL() AS "Id"'
    assert dialect.parameter_prefix == "@"
