"""
Example 02: Running Queries

Executes query set queries against an in-memory SQLite database with
DBHelper, mapping rows onto a dataclass.
"""

import sqlite3
from dataclasses import dataclass
from pathlib import Path

from sqlset import DBHelper, SQLSet


@dataclass
class User:
    id: int
    name: str
    email: str


def main():
    sqlset = SQLSet.from_directory(Path(__file__).parent / "queries")
    conn = sqlite3.connect(":memory:")
    db = DBHelper(conn, sqlset)

    db.execute("users", "CreateTable")
    db.execute("users", "CreateUser", {"name": "Alice", "email": "alice@example.com"})
    db.execute("users", "CreateUser", {"name": "Bob", "email": "bob@example.com"})

    print("=== Running Queries ===\n")

    # get: a single row, None when nothing matches
    user = db.get("users", "GetUserByID", {"id": 1}, model=User)
    print(f"get result: {user}\n")

    # select: all rows
    users = db.select("users", "ListUsers", model=User)
    print(f"select result ({len(users)} rows):")
    for user in users:
        print(f"  - {user.name} ({user.email})")
    print()

    total = db.get("reports", "UserCount")["total"]
    print(f"UserCount: {total}")

    conn.close()


if __name__ == "__main__":
    main()
