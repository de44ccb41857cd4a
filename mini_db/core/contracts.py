"""Core port contracts used by adapters and the query executor."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from .params import BoundParams
from .types import Rows


class DialectPort(Protocol):
    """Dialect behavior required by statement builders and the database adapter."""

    name: str
    positional_style: str
    named_style: str
    backslash_escapes: bool

    def q(self, ident: str) -> str: ...

    def placeholder(self, key: Optional[str] = None) -> str: ...

    def compile(self, sql: str, params: BoundParams) -> str: ...

    def get_lastrowid(self, cursor: Any) -> Optional[int]: ...

    def sequence_value_sql(self, name: str) -> Optional[str]: ...


class DatabasePort(Protocol):
    """Database adapter behavior required by `QueryExecutor`."""

    dialect: DialectPort

    def execute(self, sql: str, params: BoundParams) -> Any: ...

    def mappings(self, cursor: Any) -> Rows: ...

    def column(self, cursor: Any) -> List[Any]: ...

    def begin(self) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...

    def last_insert_id(self, name: Optional[str] = None) -> str: ...
