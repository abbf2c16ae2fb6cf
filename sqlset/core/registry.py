"""SQLSet - the query set registry.

Set ID convention:
    queries/users.sql                                  -> "users"
    queries/users.sql starting with --# {"id": "accounts"} -> "accounts"

Query lookup is by (set ID, query ID):
    sqlset.get("users", "GetUserByID")
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from importlib import resources
from pathlib import Path
from types import MappingProxyType

from sqlset.core.config import LoaderConfig
from sqlset.core.exceptions import (
    MissingQueryError,
    NotFoundError,
    QueryNotFoundError,
    QuerySetNotFoundError,
)
from sqlset.core.loader import iter_directory, load_query_sets
from sqlset.core.models import QuerySet, QuerySetMeta


class SQLSet:
    """Container for query sets, organized by set ID.

    The registry is immutable after loading: load once at startup, then
    read-only access for the lifetime of the application. Concurrent
    readers need no locking. To reload, build a new instance and swap
    the reference.

    Use one of the ``from_*`` constructors to load files.

    Args:
        sets: Query sets keyed by set ID.
    """

    def __init__(self, sets: Mapping[str, QuerySet]) -> None:
        self._sets: Mapping[str, QuerySet] = MappingProxyType(dict(sets))

    @classmethod
    def from_files(
        cls,
        files: Iterable[tuple[str, bytes]],
        config: LoaderConfig | None = None,
    ) -> SQLSet:
        """Load from ``(file_name, data)`` pairs.

        Raises:
            LoadError: If any file is invalid. No SQLSet is created.
        """
        return cls(load_query_sets(files, config))

    @classmethod
    def from_directory(
        cls,
        root_dir: Path | str,
        config: LoaderConfig | None = None,
    ) -> SQLSet:
        """Load every eligible file in *root_dir*.

        Raises:
            FileNotFoundError: If *root_dir* is not a directory.
            LoadError: If any file is invalid. No SQLSet is created.
        """
        return cls.from_files(iter_directory(Path(root_dir), config), config)

    @classmethod
    def from_package(
        cls,
        package: str,
        resource: str = "queries",
        config: LoaderConfig | None = None,
    ) -> SQLSet:
        """Load query files shipped as package data, e.g. ``myapp/queries/*.sql``."""
        root = resources.files(package).joinpath(resource)
        return cls.from_files(iter_directory(root, config), config)

    def get(self, set_id: str, query_id: str) -> str:
        """Look up SQL text by set ID and query ID.

        Raises:
            QuerySetNotFoundError: If no set is registered under *set_id*.
            QueryNotFoundError: If the set has no query *query_id*.
        """
        query_set = self.get_query_set(set_id)
        sql = query_set.get(query_id)
        if sql is None:
            raise QueryNotFoundError(set_id, query_id)
        return sql

    def must_get(self, set_id: str, query_id: str) -> str:
        """Like ``get`` but for queries the caller knows must exist.

        Raises:
            MissingQueryError: If the lookup fails. This is not an
                ``SQLSetError`` and is meant to abort the calling path.
        """
        try:
            return self.get(set_id, query_id)
        except NotFoundError as e:
            raise MissingQueryError(e) from e

    def get_query_set(self, set_id: str) -> QuerySet:
        """Return the whole query set registered under *set_id*."""
        try:
            return self._sets[set_id]
        except KeyError:
            raise QuerySetNotFoundError(set_id) from None

    def get_all_metas(self) -> list[QuerySetMeta]:
        """Metadata of every loaded query set. Callers must not rely on the order."""
        return [self._sets[set_id].meta for set_id in sorted(self._sets)]

    def has(self, set_id: str, query_id: str | None = None) -> bool:
        """Check if a set, or a query within it, is registered."""
        query_set = self._sets.get(set_id)
        if query_set is None:
            return False
        return query_id is None or query_id in query_set.queries

    @property
    def set_ids(self) -> list[str]:
        """List all registered set IDs, sorted alphabetically."""
        return sorted(self._sets)

    def __len__(self) -> int:
        """Number of registered query sets."""
        return len(self._sets)

    def __repr__(self) -> str:
        return f"SQLSet(sets={self.set_ids!r})"
