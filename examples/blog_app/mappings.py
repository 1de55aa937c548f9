"""
Table mappings for the sqlgen blog example.
"""

from __future__ import annotations

from sqlgen.core import BooleanColumn, IntegerColumn, KeyType, StringColumn, TableMapping

author = TableMapping(
    "author",
    [
        IntegerColumn("Id", column_name="id", key_type=KeyType.IDENTITY),
        StringColumn("Name", column_name="name"),
        StringColumn("Email", column_name="email"),
    ],
)

post = TableMapping(
    "post",
    [
        IntegerColumn("Id", column_name="id", key_type=KeyType.IDENTITY),
        IntegerColumn("AuthorId", column_name="author_id"),
        StringColumn("Title", column_name="title"),
        BooleanColumn("Published", column_name="published"),
        IntegerColumn("Views", column_name="views"),
    ],
)

SCHEMA = (
    "CREATE TABLE IF NOT EXISTS author ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT NOT NULL, email TEXT NOT NULL UNIQUE)",
    "CREATE TABLE IF NOT EXISTS post ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, author_id INTEGER NOT NULL REFERENCES author(id), "
    "title TEXT NOT NULL, published INTEGER NOT NULL DEFAULT 0, views INTEGER NOT NULL DEFAULT 0)",
)
