from __future__ import annotations

from typing import Any


class FakeCursor:
    def __init__(self, conn: "FakeConnection"):
        self._conn = conn
        self.description = None
        self.lastrowid = None
        self._rows: list[Any] = []

    def execute(self, sql, params=None):  # noqa: ANN001,ANN201
        if self._conn.fail_with is not None:
            raise self._conn.fail_with
        self._conn.executed.append((sql, params))
        columns, rows = self._conn.results.pop(0) if self._conn.results else ((), [])
        self.description = [(name, None, None, None, None, None, None) for name in columns] or None
        self._rows = list(rows)
        self.lastrowid = self._conn.next_lastrowid
        return None

    def fetchone(self):  # noqa: ANN201
        return self._rows.pop(0) if self._rows else None

    def fetchall(self):  # noqa: ANN201
        rows, self._rows = self._rows, []
        return rows


class FakeConnection:
    """Records executed statements and serves queued result sets."""

    def __init__(self) -> None:
        self.executed: list[tuple[str, Any]] = []
        self.results: list[tuple[tuple[str, ...], list[Any]]] = []
        self.calls: list[str] = []
        self.fail_with: BaseException | None = None
        self.next_lastrowid: int | None = None

    def queue(self, columns: tuple[str, ...], rows: list[Any]) -> None:
        self.results.append((columns, rows))

    def cursor(self) -> FakeCursor:
        return FakeCursor(self)

    def commit(self) -> None:
        self.calls.append("commit")

    def rollback(self) -> None:
        self.calls.append("rollback")

    def close(self) -> None:
        self.calls.append("close")


class FakeBeginConnection(FakeConnection):
    def begin(self) -> None:
        self.calls.append("begin")
