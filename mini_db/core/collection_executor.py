"""Collection-returning facade over `QueryExecutor`."""

from __future__ import annotations

from .collection import Collection
from .executor import QueryExecutor
from .types import QueryParams


class CollectionAdapter:
    """Wrap select results of a `QueryExecutor` in `Collection` objects."""

    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    def select(self, sql: str, params: QueryParams = None) -> Collection:
        return Collection(self.executor.select(sql, params))

    def select_column(self, sql: str, params: QueryParams = None) -> Collection:
        return Collection(self.executor.select_column(sql, params))

    def select_with_key(self, index: str, sql: str, params: QueryParams = None) -> Collection:
        return Collection(self.executor.select_with_key(index, sql, params))
