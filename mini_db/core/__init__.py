"""Public core API for parameter binding, debug rendering, and query helpers."""

from .collection import Collection
from .collection_executor import CollectionAdapter
from .debug_render import quote_string, render_literal, render_sql
from .executor import QueryExecutor
from .params import BoundParams, Named, Positional, bind_params
from .placeholders import Token, tokenize
from .statements import delete_sql, insert_sql, update_sql

__all__ = [
    "BoundParams",
    "Collection",
    "CollectionAdapter",
    "Named",
    "Positional",
    "QueryExecutor",
    "Token",
    "bind_params",
    "delete_sql",
    "insert_sql",
    "quote_string",
    "render_literal",
    "render_sql",
    "tokenize",
    "update_sql",
]
