"""CollectionAdapter example: chain transformations over query results."""

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

from mini_db import CollectionAdapter, Database, QueryExecutor, SQLiteDialect


def main() -> None:
    conn = sqlite3.connect(":memory:", isolation_level=None)
    executor = QueryExecutor(Database(conn, SQLiteDialect()))
    db = CollectionAdapter(executor)

    try:
        executor.execute('CREATE TABLE "orders" ("id" INTEGER PRIMARY KEY, "customer" TEXT, "total" INTEGER);')
        for customer, total in [("ann", 30), ("bob", 12), ("ann", 8), ("cid", 50)]:
            executor.insert("orders", {"customer": customer, "total": total})

        orders = db.select('SELECT * FROM "orders" ORDER BY "id";')
        print("Big orders:", orders.filter(lambda row: row["total"] >= 20).pluck("id").to_list())
        print("Revenue:", orders.sum("total"))

        per_customer = orders.group_by("customer").map(lambda group: group.sum("total"))
        print("Per customer:", per_customer.all())

        keyed = db.select_with_key("id", 'SELECT * FROM "orders";')
        print("Order 3 customer:", keyed[3]["customer"])

        customers = db.select_column('SELECT DISTINCT "customer" FROM "orders" ORDER BY 1;')
        print("Customers:", customers.map(str.upper).to_list())
    finally:
        conn.close()


if __name__ == "__main__":
    main()
