"""DB-API adapter implementation for the core database port."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ...core.params import BoundParams, Named, Positional, bind_params
from ...core.types import QueryParams, Row, Rows
from .dialects import Dialect, SQLiteDialect


class Database:
    """Thin DB-API wrapper that normalizes execute and row mapping behavior."""

    def __init__(self, conn: Any, dialect: Optional[Dialect] = None):
        """Create database adapter.

        Args:
            conn: DB-API connection object.
            dialect: Concrete SQL dialect instance. Defaults to `SQLiteDialect`.
        """

        self._closed = False
        self._last_cursor: Any = None
        self.conn: Any | None = conn
        self.dialect = dialect if dialect is not None else SQLiteDialect()

    def _require_open_connection(self) -> Any:
        if self._closed or self.conn is None:
            raise RuntimeError("connection is closed")
        return self.conn

    def begin(self) -> None:
        """Start a transaction on the underlying connection.

        Uses the driver's own `begin()` when it has one, issues `BEGIN` on
        SQLite, and otherwise relies on the implicit DB-API transaction.
        """

        conn = self._require_open_connection()
        begin = getattr(conn, "begin", None)
        if callable(begin):
            begin()
            return
        if self.dialect.name == "sqlite":
            conn.execute("BEGIN")

    def commit(self) -> None:
        self._require_open_connection().commit()

    def rollback(self) -> None:
        self._require_open_connection().rollback()

    def execute(self, sql: str, params: QueryParams | BoundParams = None) -> Any:
        """Execute SQL with optional parameters and return cursor."""

        cur = self._run(sql, bind_params(params))
        self._last_cursor = cur
        return cur

    def _run(self, sql: str, bound: BoundParams) -> Any:
        cur = self._require_open_connection().cursor()
        if not len(bound):
            cur.execute(sql)
        elif isinstance(bound, Named):
            cur.execute(self.dialect.compile(sql, bound), dict(bound.values))
        else:
            cur.execute(self.dialect.compile(sql, bound), list(bound.values))
        return cur

    def _row_to_mapping(self, cursor: Any, row: Any) -> Row:
        """Normalize row object to a column-keyed dict.

        Supports mapping rows directly and tuple/list rows via
        `cursor.description`.
        """

        if isinstance(row, Mapping):
            return dict(row)

        if isinstance(row, (tuple, list)):
            desc = getattr(cursor, "description", None)
            if not desc:
                raise TypeError(
                    "Cursor has no description; cannot map tuple rows to dict."
                )
            cols = [d[0] for d in desc]
            return dict(zip(cols, row, strict=True))

        try:
            return dict(row)
        except (TypeError, ValueError):
            pass

        raise TypeError(f"Unsupported row type: {type(row)}")

    def _first_value(self, row: Any) -> Any:
        if isinstance(row, Mapping):
            return next(iter(row.values()), None)
        return row[0]

    def mappings(self, cursor: Any) -> Rows:
        """Fetch all remaining rows from `cursor` as column-keyed dicts."""

        return [self._row_to_mapping(cursor, r) for r in cursor.fetchall()]

    def column(self, cursor: Any) -> List[Any]:
        """Fetch the first column of every remaining row from `cursor`."""

        return [self._first_value(r) for r in cursor.fetchall()]

    def fetchone(self, sql: str, params: QueryParams | BoundParams = None) -> Optional[Row]:
        """Execute query and return one normalized row mapping."""

        cur = self.execute(sql, params)
        row = cur.fetchone()
        if row is None:
            return None
        return self._row_to_mapping(cur, row)

    def fetchall(self, sql: str, params: QueryParams | BoundParams = None) -> Rows:
        """Execute query and return all rows as normalized mappings."""

        return self.mappings(self.execute(sql, params))

    def last_insert_id(self, name: Optional[str] = None) -> str:
        """Return the last generated id as a string (`"0"` when unknown).

        Args:
            name: Sequence name, for dialects that read ids from sequences.
        """

        self._require_open_connection()
        if name is not None:
            sql = self.dialect.sequence_value_sql(name)
            if sql is not None:
                # Separate cursor so `_last_cursor` keeps the last INSERT.
                cur = self._run(sql, Positional((name,)))
                row = cur.fetchone()
                return "0" if row is None else str(self._first_value(row))

        new_id = self.dialect.get_lastrowid(self._last_cursor)
        return "0" if new_id is None else str(new_id)

    def close(self) -> None:
        """Close underlying connection."""

        if self._closed:
            return
        conn = self.conn
        self._closed = True
        self.conn = None
        self._last_cursor = None
        close = getattr(conn, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()
