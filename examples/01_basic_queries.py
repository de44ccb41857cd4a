"""Basic select/insert/update/delete example for mini_db QueryExecutor."""

from __future__ import annotations

import sqlite3
import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "mini_db").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mini_db import Database, QueryExecutor, SQLiteDialect


def main() -> None:
    # 1) Wrap a DB-API connection. isolation_level=None keeps sqlite in autocommit.
    conn = sqlite3.connect(":memory:", isolation_level=None)
    db = QueryExecutor(Database(conn, SQLiteDialect()))

    try:
        db.execute(
            'CREATE TABLE "users" ("id" INTEGER PRIMARY KEY, "email" TEXT, "age" INTEGER);'
        )

        # 2) Insert rows from plain dicts.
        db.insert("users", {"email": "alice@example.com", "age": 25})
        print("Inserted id:", db.last_insert_id())
        db.insert("users", {"email": "bob@example.com", "age": 30})

        # 3) Positional, bare scalar, and named parameters.
        print("All:", db.select('SELECT * FROM "users" ORDER BY "id";'))
        print("By id:", db.select_row('SELECT * FROM "users" WHERE "id" = ?;', 2))
        print("Emails:", db.select_column('SELECT "email" FROM "users" WHERE "age" >= :age;', {"age": 18}))
        print("Count:", db.select_cell('SELECT COUNT(*) FROM "users";'))
        print("Keyed:", db.select_with_key("email", 'SELECT * FROM "users";'))

        # 4) Update and delete by column equality.
        updated = db.update("users", {"age": 31}, {"email": "bob@example.com"})
        print("Updated row count:", updated.rowcount)
        deleted = db.delete("users", {"id": 1})
        print("Deleted row count:", deleted.rowcount)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
