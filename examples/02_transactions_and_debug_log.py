"""Transaction passthrough and debug log example."""

from __future__ import annotations

import logging
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
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    conn = sqlite3.connect(":memory:", isolation_level=None)
    db = QueryExecutor(Database(conn, SQLiteDialect()))

    try:
        db.execute('CREATE TABLE "payments" ("id" INTEGER PRIMARY KEY, "amount" REAL, "note" TEXT);')

        # Commit path.
        db.transaction()
        db.insert("payments", {"amount": 10.5, "note": "first"})
        db.commit()

        # Rollback is the caller's job; nothing is rolled back automatically.
        db.transaction()
        try:
            db.insert("payments", {"amount": 99, "note": "rolled back"})
            db.execute('INSERT INTO "missing" ("x") VALUES (?);', 1)
            db.commit()
        except sqlite3.OperationalError as exc:
            db.rollback()
            print("Rolled back:", exc)

        db.select(
            'SELECT * FROM "payments" WHERE "amount" > :amount AND "amount" < :amount2 AND "note" <> :note;',
            {"amount": 1, "amount2": 100, "note": "it's"},
        )

        print("Debug log:")
        for line in db.debug():
            print("  ", line)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
