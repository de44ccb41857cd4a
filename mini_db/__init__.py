"""mini_db: parameterized query helpers over DB-API connections."""

from .core import (
    BoundParams,
    Collection,
    CollectionAdapter,
    Named,
    Positional,
    QueryExecutor,
    bind_params,
    render_literal,
    render_sql,
)
from .ports import Database, Dialect, MySQLDialect, PostgresDialect, SQLiteDialect

__all__ = [
    "QueryExecutor",
    "CollectionAdapter",
    "Collection",
    "Database",
    "Dialect",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "BoundParams",
    "Positional",
    "Named",
    "bind_params",
    "render_literal",
    "render_sql",
]
