"""Query set value types and the set builder."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from sqlset.core.meta import MetaBlock


@dataclass(frozen=True)
class QuerySetMeta:
    """Metadata for a query set.

    ``id`` defaults to the file stem and ``name`` to ``id`` when the file
    has no metadata block overriding them.
    """

    id: str
    name: str
    description: str = ""


@dataclass(frozen=True)
class QuerySet:
    """A set of named queries, usually from a single file."""

    meta: QuerySetMeta
    queries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict are not visible here
        object.__setattr__(self, "queries", MappingProxyType(dict(self.queries)))

    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def query_ids(self) -> list[str]:
        """Query IDs in file order."""
        return list(self.queries)

    def get(self, query_id: str) -> str | None:
        return self.queries.get(query_id)

    def __len__(self) -> int:
        return len(self.queries)


def build_query_set(meta: MetaBlock, file_stem: str, queries: Mapping[str, str]) -> QuerySet:
    """Merge parsed metadata with filename defaults into a QuerySet."""
    set_id = meta.id or file_stem
    return QuerySet(
        meta=QuerySetMeta(
            id=set_id,
            name=meta.name or set_id,
            description=meta.description,
        ),
        queries=queries,
    )
