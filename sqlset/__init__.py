"""sqlset - named SQL queries kept in plain .sql files."""

from __future__ import annotations

from sqlset.core.config import LoaderConfig
from sqlset.core.exceptions import (
    ColumnMismatchError,
    DuplicateQueryError,
    DuplicateQuerySetError,
    ExecutionError,
    InvalidSyntaxError,
    LoadError,
    MaxLineLengthExceededError,
    MissingQueryError,
    MultipleRowsError,
    NotFoundError,
    QueryExecutionError,
    QueryNotFoundError,
    QuerySetNotFoundError,
    SQLSetError,
)
from sqlset.core.models import QuerySet, QuerySetMeta
from sqlset.core.parser import parse_query_set
from sqlset.core.registry import SQLSet
from sqlset.db.helper import DBHelper
from sqlset.db.model import ModelMapper

__all__ = [
    # Registry
    "SQLSet",
    "QuerySet",
    "QuerySetMeta",
    "parse_query_set",
    # Config
    "LoaderConfig",
    # Database
    "DBHelper",
    "ModelMapper",
    # Exceptions
    "SQLSetError",
    "LoadError",
    "InvalidSyntaxError",
    "MaxLineLengthExceededError",
    "DuplicateQueryError",
    "DuplicateQuerySetError",
    "NotFoundError",
    "QuerySetNotFoundError",
    "QueryNotFoundError",
    "MissingQueryError",
    "ExecutionError",
    "QueryExecutionError",
    "MultipleRowsError",
    "ColumnMismatchError",
]
