"""
Blog example running generated statements against an in-memory SQLite database.

sqlite3 accepts ``@name`` placeholders bound from a dict keyed by ``name``,
which is exactly the shape of a sqlgen parameter bag.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Dict, Iterable, List

from sqlgen.dialects import SQLiteDialect
from sqlgen.query import FieldPredicate, Operator, Sort, SqlGenerator

from .mappings import SCHEMA, author, post

POST_FIELDS = ("AuthorId", "Title", "Published", "Views")


def bootstrap_connection(path: str = ":memory:") -> sqlite3.Connection:
    connection = sqlite3.connect(path)
    connection.row_factory = sqlite3.Row
    for ddl in SCHEMA:
        connection.execute(ddl)
    return connection


def make_generator() -> SqlGenerator:
    return SqlGenerator.for_dialect(SQLiteDialect())


def create_author(connection: sqlite3.Connection, generator: SqlGenerator, name: str, email: str) -> int:
    connection.execute(generator.insert(author), {"Name": name, "Email": email})
    row = connection.execute(generator.identity_sql(author)).fetchone()
    return int(row["Id"])


def create_posts(connection: sqlite3.Connection, generator: SqlGenerator, posts: List[Dict[str, Any]]) -> None:
    sql = generator.bulk_insert([post] * len(posts))
    params: Dict[str, Any] = {}
    for index, values in enumerate(posts):
        for field in POST_FIELDS:
            params[f"{field}{index}"] = values[field]
    connection.execute(sql, params)


def update_posts(connection: sqlite3.Connection, generator: SqlGenerator, changes: List[Dict[str, Any]]) -> None:
    """
    Apply full-row updates, one statement per post, keyed by ``Id``.
    """
    predicates = [FieldPredicate(post, "Id", Operator.EQ, change["Id"]) for change in changes]
    params: Dict[str, Any] = {}
    sql = generator.bulk_update(post, predicates, params)
    for index, change in enumerate(changes):
        for field in POST_FIELDS:
            params[f"{field}_{index}"] = change[field]
    # sqlite3 runs one statement per execute() call.
    for statement in sql.splitlines():
        connection.execute(statement, params)


def fetch_posts(connection: sqlite3.Connection, generator: SqlGenerator) -> List[Dict[str, Any]]:
    params: Dict[str, Any] = {}
    sql = generator.select(post, None, [Sort("Id")], params)
    return [dict(row) for row in connection.execute(sql, params)]


def fetch_published_page(
    connection: sqlite3.Connection, generator: SqlGenerator, page: int, page_size: int
) -> List[Dict[str, Any]]:
    params: Dict[str, Any] = {}
    predicate = FieldPredicate(post, "Published", Operator.EQ, True)
    sql = generator.select_paged(post, predicate, [Sort("Views", ascending=False), Sort("Id")], page, page_size, params)
    return [dict(row) for row in connection.execute(sql, params)]


def count_posts(connection: sqlite3.Connection, generator: SqlGenerator, author_id: int) -> int:
    params: Dict[str, Any] = {}
    sql = generator.count(post, FieldPredicate(post, "AuthorId", Operator.EQ, author_id), params)
    return int(connection.execute(sql, params).fetchone()["Total"])


def delete_posts(connection: sqlite3.Connection, generator: SqlGenerator, ids: Iterable[int]) -> int:
    params: Dict[str, Any] = {}
    sql = generator.delete(post, FieldPredicate(post, "Id", Operator.EQ, list(ids)), params)
    return connection.execute(sql, params).rowcount


def run_demo() -> List[Dict[str, Any]]:
    connection = bootstrap_connection()
    generator = make_generator()
    try:
        author_id = create_author(connection, generator, "Ada Lovelace", "ada@example.com")
        create_posts(
            connection,
            generator,
            [
                {"AuthorId": author_id, "Title": f"Notes {n}", "Published": n % 2 == 0, "Views": n * 10}
                for n in range(6)
            ],
        )
        return fetch_published_page(connection, generator, 0, 2)
    finally:
        connection.close()
