"""
Example 01: Basic Usage

Loads the query sets in examples/queries and looks queries up by
(set ID, query ID).
"""

import logging
from pathlib import Path

from sqlset import MissingQueryError, NotFoundError, SQLSet


def main():
    logging.basicConfig(level=logging.INFO)

    queries_dir = Path(__file__).parent / "queries"
    sqlset = SQLSet.from_directory(queries_dir)

    print("=== Lookup ===\n")

    # get: raises NotFoundError subclasses for unknown keys
    query = sqlset.get("users", "GetUserByID")
    print(f"GetUserByID query:\n{query}\n")

    try:
        sqlset.get("users", "DeleteUser")
    except NotFoundError as e:
        print(f"get failed as expected: {e}\n")

    # must_get: for queries the application cannot run without
    query = sqlset.must_get("users", "CreateUser")
    print(f"CreateUser query:\n{query}\n")

    try:
        sqlset.must_get("billing", "ListInvoices")
    except MissingQueryError as e:
        print(f"must_get failed: {e}\n")

    print("=== Metadata ===\n")
    for meta in sqlset.get_all_metas():
        print(f"Set ID: {meta.id}, Name: {meta.name}, Description: {meta.description}")


if __name__ == "__main__":
    main()
