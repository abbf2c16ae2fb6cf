"""Unit tests for query set values and the set builder."""

from __future__ import annotations

import pytest

from sqlset.core.meta import MetaBlock
from sqlset.core.models import QuerySet, QuerySetMeta, build_query_set


class TestBuildQuerySet:
    def test_defaults_from_file_stem(self) -> None:
        qs = build_query_set(MetaBlock(), "users", {"List": "SELECT 1"})
        assert qs.meta == QuerySetMeta(id="users", name="users", description="")

    def test_id_override(self) -> None:
        qs = build_query_set(MetaBlock(id="accounts"), "users", {})
        assert qs.meta.id == "accounts"
        assert qs.meta.name == "accounts"

    def test_name_and_description_override(self) -> None:
        qs = build_query_set(MetaBlock(name="Users", description="All users"), "users", {})
        assert qs.meta == QuerySetMeta(id="users", name="Users", description="All users")

    def test_queries_are_copied(self) -> None:
        queries = {"List": "SELECT 1"}
        qs = build_query_set(MetaBlock(), "users", queries)
        queries["List"] = "SELECT 2"
        assert qs.get("List") == "SELECT 1"


class TestQuerySet:
    def test_lookup(self) -> None:
        qs = QuerySet(QuerySetMeta(id="users", name="users"), {"A": "SELECT 1", "B": "SELECT 2"})
        assert qs.id == "users"
        assert qs.get("A") == "SELECT 1"
        assert qs.get("missing") is None
        assert qs.query_ids == ["A", "B"]
        assert len(qs) == 2

    def test_frozen(self) -> None:
        meta = QuerySetMeta(id="users", name="users")
        with pytest.raises(AttributeError):
            meta.name = "other"  # type: ignore[misc]
