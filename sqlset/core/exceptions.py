"""sqlset exception hierarchy.

Every load failure carries the offending file and line. Lookup failures
carry the requested keys. Raw driver exceptions are never exposed to
callers of the DB helper.
"""

from __future__ import annotations


class SQLSetError(Exception):
    """Base exception for all sqlset errors."""


# --- Loading ---


class LoadError(SQLSetError):
    """Base for errors raised while loading query set files."""

    def __init__(self, file: str, line: int, message: str) -> None:
        self.file = file
        self.line = line
        super().__init__(f"{file}:{line}: {message}")


class InvalidSyntaxError(LoadError):
    """Raised when a query set file violates the file grammar."""

    def __init__(self, file: str, line: int, detail: str) -> None:
        self.detail = detail
        super().__init__(file, line, f"invalid syntax: {detail}")


class MaxLineLengthExceededError(LoadError):
    """Raised when a line is longer than the configured limit."""

    def __init__(self, file: str, line: int, limit: int) -> None:
        self.limit = limit
        super().__init__(file, line, f"line exceeds maximum length of {limit} bytes")


class DuplicateQueryError(LoadError):
    """Raised in strict mode when a file defines the same query ID twice."""

    def __init__(self, file: str, line: int, query_id: str) -> None:
        self.query_id = query_id
        super().__init__(file, line, f"duplicate query ID '{query_id}'")


class DuplicateQuerySetError(SQLSetError):
    """Raised in strict mode when two files resolve to the same set ID."""

    def __init__(self, set_id: str, file_a: str, file_b: str) -> None:
        self.set_id = set_id
        super().__init__(f"Duplicate query set ID '{set_id}': {file_a} and {file_b}")


# --- Lookup ---


class NotFoundError(SQLSetError):
    """Base for lookup failures."""


class QuerySetNotFoundError(NotFoundError):
    """Raised when no query set is registered under the given ID."""

    def __init__(self, set_id: str) -> None:
        self.set_id = set_id
        super().__init__(f"Query set not found: '{set_id}'")


class QueryNotFoundError(NotFoundError):
    """Raised when a query set has no query with the given ID."""

    def __init__(self, set_id: str, query_id: str) -> None:
        self.set_id = set_id
        self.query_id = query_id
        super().__init__(f"Query not found: '{set_id}.{query_id}'")


class MissingQueryError(RuntimeError):
    """Raised by ``SQLSet.must_get`` for a query that has to exist.

    Not an ``SQLSetError``: handlers for ordinary lookup failures must not
    catch it.
    """

    def __init__(self, cause: NotFoundError) -> None:
        self.cause = cause
        super().__init__(f"Required query is missing: {cause}")


# --- Execution ---


class ExecutionError(SQLSetError):
    """Base for query execution errors."""


class QueryExecutionError(ExecutionError):
    """Raised when the database driver rejects a query."""

    def __init__(self, label: str, detail: str) -> None:
        self.label = label
        super().__init__(f"Execution of '{label}' failed: {detail}")


class MultipleRowsError(ExecutionError):
    """Raised when a single-row fetch encounters more than one row."""

    def __init__(self, label: str, row_count: int) -> None:
        self.label = label
        self.row_count = row_count
        super().__init__(f"get for '{label}' returned {row_count} rows (expected 0 or 1)")


class ColumnMismatchError(ExecutionError):
    """Raised when a row cannot be mapped onto the requested model."""

    def __init__(
        self,
        target_class: str,
        missing_fields: list[str],
        invalid_fields: list[str] | None = None,
    ) -> None:
        self.target_class = target_class
        self.missing_fields = missing_fields
        self.invalid_fields = invalid_fields or []
        message = f"Cannot map to {target_class}: missing fields {missing_fields}"
        if self.invalid_fields:
            message += f", invalid fields {self.invalid_fields}"
        super().__init__(message)
