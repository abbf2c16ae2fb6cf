"""Database helper - runs SQLSet queries on a DB-API connection.

SQL text is sent to the driver exactly as stored; placeholders must use
the driver's own parameter style.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from sqlset.core.exceptions import MultipleRowsError, QueryExecutionError
from sqlset.core.registry import SQLSet
from sqlset.db.model import ModelMapper

logger = logging.getLogger(__name__)

T = TypeVar("T")

Params = Mapping[str, Any] | Sequence[Any] | None


def _rows_to_dicts(cursor: Any) -> list[dict[str, Any]]:
    """Convert cursor results to a list of dicts.

    Handles both tuple-like rows and dict-like rows from different drivers.
    """
    if cursor.description is None:
        return []
    columns = [desc[0] for desc in cursor.description]
    rows = cursor.fetchall()

    if rows and isinstance(rows[0], Mapping):
        return [dict(row) for row in rows]
    return [dict(zip(columns, row, strict=True)) for row in rows]


class DBHelper:
    """Looks up queries in an SQLSet and executes them.

    Args:
        connection: Any PEP 249 connection (sqlite3, psycopg, ...).
        sqlset: The loaded query registry.
    """

    def __init__(self, connection: Any, sqlset: SQLSet) -> None:
        self._connection = connection
        self._sqlset = sqlset

    def _run(self, set_id: str, query_id: str, params: Params, *, write: bool) -> Any:
        """Execute a query and return its rows, or the affected row count for writes.

        Every driver error, including ones raised while fetching or
        committing, is wrapped in QueryExecutionError.
        """
        sql = self._sqlset.get(set_id, query_id)
        label = f"{set_id}.{query_id}"
        logger.debug("Executing %s", label)

        cursor = None
        try:
            cursor = self._connection.cursor()
            if params is None:
                cursor.execute(sql)
            else:
                cursor.execute(sql, params)
            if not write:
                return _rows_to_dicts(cursor)
            affected = int(cursor.rowcount)
            self._connection.commit()
            return affected
        except Exception as e:
            raise QueryExecutionError(label, str(e)) from e
        finally:
            if cursor is not None:
                cursor.close()

    def get(
        self,
        set_id: str,
        query_id: str,
        params: Params = None,
        *,
        model: type[T] | None = None,
    ) -> Any:
        """Fetch a single row, mapped onto *model* when given.

        Returns None if zero rows match.
        Raises MultipleRowsError if more than one row matches.
        """
        rows = self._run(set_id, query_id, params, write=False)

        if not rows:
            return None
        if len(rows) > 1:
            raise MultipleRowsError(f"{set_id}.{query_id}", len(rows))
        if model is not None:
            return ModelMapper(model).map_one(rows[0])
        return rows[0]

    def select(
        self,
        set_id: str,
        query_id: str,
        params: Params = None,
        *,
        model: type[T] | None = None,
    ) -> list[Any]:
        """Fetch all matching rows."""
        rows = self._run(set_id, query_id, params, write=False)

        if model is not None:
            return ModelMapper(model).map_many(rows)
        return rows

    def execute(self, set_id: str, query_id: str, params: Params = None) -> int:
        """Execute a write query and commit. Returns the affected row count."""
        return self._run(set_id, query_id, params, write=True)
