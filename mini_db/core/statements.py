"""SQL builders for the table mutation helpers.

Each builder returns the SQL text with `?` placeholders together with a
`Positional` parameter collection in placeholder order. Table names are
inserted verbatim and column names are only quoted, so neither may come from
untrusted input.
"""

from __future__ import annotations

from typing import Any, Mapping, Tuple

from .contracts import DialectPort
from .params import Positional


def _assignments(fields: Mapping[str, Any], dialect: DialectPort, delimiter: str) -> str:
    return delimiter.join(f"{dialect.q(name)} = ?" for name in fields)


def insert_sql(
    table: str, fields: Mapping[str, Any], dialect: DialectPort
) -> Tuple[str, Positional]:
    """Build `INSERT INTO table (c1, c2) VALUES (?, ?)` in mapping order."""

    if not fields:
        return f"INSERT INTO {table} DEFAULT VALUES", Positional()

    columns = ", ".join(dialect.q(name) for name in fields)
    placeholders = ", ".join("?" for _ in fields)
    sql = f"INSERT INTO {table} ({columns}) VALUES ({placeholders})"
    return sql, Positional(tuple(fields.values()))


def update_sql(
    table: str,
    fields: Mapping[str, Any],
    where: Mapping[str, Any],
    dialect: DialectPort,
) -> Tuple[str, Positional]:
    """Build `UPDATE table SET ... WHERE ...`.

    SET values come first, then WHERE values, matching placeholder order.

    Raises:
        ValueError: `fields` or `where` is empty.
    """

    if not fields:
        raise ValueError("Cannot UPDATE without fields to set.")
    if not where:
        raise ValueError("Cannot UPDATE without WHERE fields.")

    set_clause = _assignments(fields, dialect, ", ")
    where_clause = _assignments(where, dialect, " AND ")
    sql = f"UPDATE {table} SET {set_clause} WHERE {where_clause}"
    return sql, Positional(tuple(fields.values()) + tuple(where.values()))


def delete_sql(
    table: str, where: Mapping[str, Any], dialect: DialectPort
) -> Tuple[str, Positional]:
    """Build `DELETE FROM table WHERE c1 = ? AND ...`.

    Raises:
        ValueError: `where` is empty.
    """

    if not where:
        raise ValueError("Cannot DELETE without WHERE fields.")

    where_clause = _assignments(where, dialect, " AND ")
    return f"DELETE FROM {table} WHERE {where_clause}", Positional(tuple(where.values()))
