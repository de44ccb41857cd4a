"""Query helpers over a database port.

`QueryExecutor` runs parameterized SQL and shapes the results. Every call
blocks until the driver returns, and every driver error reaches the caller
unchanged. One instance belongs to one connection and one thread at a time;
its debug log is not synchronized.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from .contracts import DatabasePort
from .debug_render import render_sql
from .params import BoundParams, bind_params
from .statements import delete_sql, insert_sql, update_sql
from .types import KeyedRows, QueryParams, Row, Rows


class QueryExecutor:
    """Parameterized select/insert/update/delete helpers with a debug log.

    Usage:

        db = QueryExecutor(Database(sqlite3.connect(":memory:")))
        db.select("SELECT * FROM users WHERE id = ?", 13)
        db.select("SELECT * FROM users WHERE id IN (?, ?, ?)", [13, 14, 15])
        db.select("SELECT * FROM users WHERE name = :name", {"name": "ann"})
    """

    def __init__(self, db: DatabasePort, *, logger: Optional[logging.Logger] = None):
        """Create executor.

        Args:
            db: Database adapter that performs the actual execution.
            logger: Logger receiving rendered statements at DEBUG level.
                Defaults to this module's logger.
        """

        self.db = db
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._debug: List[str] = []

    @property
    def connection(self) -> DatabasePort:
        """Expose the wrapped database adapter."""

        return self.db

    def debug(self) -> List[str]:
        """Return a copy of the rendered statements executed so far, oldest first."""

        return list(self._debug)

    def transaction(self) -> None:
        """Begin a transaction. No nesting is tracked."""

        self.db.begin()

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    def execute(self, sql: str, params: QueryParams = None) -> Any:
        """Execute SQL and return the driver cursor.

        Args:
            sql: SQL text with `?` or `:name` placeholders.
            params: A bare scalar, a list/tuple for `?`, or a mapping for
                `:name`. An empty collection binds nothing.
        """

        bound: BoundParams = bind_params(params)
        cursor = self.db.execute(sql, bound)
        self._log_for_debug(sql, bound)
        return cursor

    def select(self, sql: str, params: QueryParams = None) -> Rows:
        """Return all rows as column-keyed dicts."""

        return self.db.mappings(self.execute(sql, params))

    def select_column(self, sql: str, params: QueryParams = None) -> List[Any]:
        """Return the first column of every row."""

        return self.db.column(self.execute(sql, params))

    def select_row(self, sql: str, params: QueryParams = None) -> Row:
        """Return the first row, or an empty dict when there is none."""

        rows = self.select(sql, params)
        return rows[0] if rows else {}

    def select_cell(self, sql: str, params: QueryParams = None) -> Any:
        """Return the last column of the first row, or `None` when there is no row."""

        row = self.select_row(sql, params)
        if not row:
            return None
        return list(row.values())[-1]

    def select_with_key(self, index: str, sql: str, params: QueryParams = None) -> KeyedRows:
        """Return rows keyed by their `index` column; later duplicates win."""

        result: KeyedRows = {}
        for row in self.select(sql, params):
            result[row[index]] = row
        return result

    def insert(self, table: str, fields: Mapping[str, Any]) -> Any:
        """Insert one row.

        `db.insert("users", {"name": "ann", "age": 30})`
        """

        sql, params = insert_sql(table, fields, self.db.dialect)
        return self.execute(sql, params)

    def update(
        self, table: str, fields: Mapping[str, Any], where: Mapping[str, Any]
    ) -> Any:
        """Update rows matching every `where` column.

        `db.update("users", {"name": "bob"}, {"id": 1})`
        """

        sql, params = update_sql(table, fields, where, self.db.dialect)
        return self.execute(sql, params)

    def delete(self, table: str, where: Mapping[str, Any]) -> Any:
        sql, params = delete_sql(table, where, self.db.dialect)
        return self.execute(sql, params)

    def last_insert_id(self, name: Optional[str] = None) -> str:
        return self.db.last_insert_id(name)

    def _log_for_debug(self, sql: str, params: BoundParams) -> None:
        rendered = render_sql(sql, params, self.db.dialect.backslash_escapes)
        self._debug.append(rendered)
        self._logger.debug("%s", rendered)
