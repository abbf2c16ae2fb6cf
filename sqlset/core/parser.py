"""Query set file parser.

File layout::

    -- free-form comments and blank lines
    --# { "name": "User queries" }        (optional metadata block)

    --SQL:GetUserByID
    SELECT * FROM users WHERE id = :id;

    --SQL:ListUsers
    SELECT * FROM users;

Each ``--SQL:<id>`` marker opens a query whose body runs until the next
marker or the end of the file. Query bodies are opaque text.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from sqlset.core.config import LoaderConfig
from sqlset.core.exceptions import DuplicateQueryError, InvalidSyntaxError
from sqlset.core.meta import IDENTIFIER_PATTERN, MetaBlock, is_meta_line, parse_meta_block
from sqlset.core.models import QuerySet, build_query_set
from sqlset.core.scanner import Line, scan_lines

logger = logging.getLogger(__name__)

QUERY_PREFIX = "--SQL:"

# A column-0 "--SQL" followed by a colon is a marker attempt, e.g. "--SQL :x"
_MARKER_CANDIDATE = re.compile(r"--SQL\s*:")


def parse_marker(line: Line, file_name: str) -> str | None:
    """Return the query ID opened by *line*, or None for a non-marker line.

    Raises:
        InvalidSyntaxError: If the line looks like a marker but is malformed.
    """
    if not _MARKER_CANDIDATE.match(line.text):
        return None
    if not line.text.startswith(QUERY_PREFIX):
        raise InvalidSyntaxError(
            file_name, line.number, f"no whitespace allowed inside '{QUERY_PREFIX}'"
        )

    query_id = line.text[len(QUERY_PREFIX) :].strip()
    if not query_id:
        raise InvalidSyntaxError(file_name, line.number, "query marker has an empty ID")
    if not IDENTIFIER_PATTERN.fullmatch(query_id):
        raise InvalidSyntaxError(
            file_name,
            line.number,
            f"invalid query ID {query_id!r}: only letters, digits, '_' and '-' are allowed",
        )
    return query_id


def _is_preamble(text: str) -> bool:
    stripped = text.strip()
    return not stripped or stripped.startswith("--")


def _trim_body(lines: list[str]) -> str:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end]).rstrip()


class _QueryCollector:
    """Accumulates query bodies in file order."""

    def __init__(self, file_name: str, strict: bool) -> None:
        self._file_name = file_name
        self._strict = strict
        self.queries: dict[str, str] = {}
        self._current: str | None = None
        self._opened_at = 0
        self._body: list[str] = []

    @property
    def started(self) -> bool:
        return self._current is not None

    def open(self, query_id: str, line_number: int) -> None:
        self.close()
        self._current = query_id
        self._opened_at = line_number
        self._body = []

    def append(self, text: str) -> None:
        self._body.append(text)

    def close(self) -> None:
        if self._current is None:
            return

        body = _trim_body(self._body)
        if not body and self._strict:
            raise InvalidSyntaxError(
                self._file_name, self._opened_at, f"query '{self._current}' has an empty body"
            )
        if self._current in self.queries:
            if self._strict:
                raise DuplicateQueryError(self._file_name, self._opened_at, self._current)
            logger.warning(
                "%s:%d: query '%s' redefined, keeping the later definition",
                self._file_name,
                self._opened_at,
                self._current,
            )
        self.queries[self._current] = body
        self._current = None


def parse_lines(
    lines: Sequence[Line],
    file_name: str,
    strict: bool = False,
) -> tuple[MetaBlock, dict[str, str]]:
    """Split scanned lines into the metadata block and the query bodies.

    Returns:
        Tuple of (metadata, queries). Metadata is all-empty when the file
        has no metadata block.

    Raises:
        InvalidSyntaxError: On malformed markers or misplaced or repeated
            metadata. In strict mode also on SQL text before the first
            marker and on an empty query body.
        DuplicateQueryError: In strict mode, for a repeated query ID.
    """
    meta: MetaBlock | None = None
    collector = _QueryCollector(file_name, strict)
    index = 0

    while index < len(lines):
        line = lines[index]

        if is_meta_line(line.text):
            if collector.started:
                raise InvalidSyntaxError(
                    file_name, line.number, "metadata block must precede all queries"
                )
            if meta is not None:
                raise InvalidSyntaxError(file_name, line.number, "duplicate metadata block")
            end = index
            while end < len(lines) and is_meta_line(lines[end].text):
                end += 1
            meta = parse_meta_block(lines[index:end], file_name)
            index = end
            continue

        query_id = parse_marker(line, file_name)
        if query_id is not None:
            collector.open(query_id, line.number)
        elif collector.started:
            collector.append(line.text)
        elif not _is_preamble(line.text):
            if strict:
                raise InvalidSyntaxError(
                    file_name, line.number, "SQL text outside of a query block"
                )
            logger.warning(
                "%s:%d: ignoring text before the first query marker", file_name, line.number
            )
        index += 1

    collector.close()
    return meta or MetaBlock(), collector.queries


def parse_query_set(data: bytes, file_name: str, config: LoaderConfig | None = None) -> QuerySet:
    """Parse one query set file.

    Args:
        data: Raw file contents.
        file_name: File name including the extension; its stem is the
            default set ID.
        config: Loader settings, defaults to ``LoaderConfig()``.

    Raises:
        LoadError: Any subclass, with the file name and line of the failure.
    """
    config = config or LoaderConfig()
    lines = scan_lines(data, file_name, config.max_line_length, config.encoding)
    meta, queries = parse_lines(lines, file_name, strict=config.strict)

    query_set = build_query_set(meta, file_stem(file_name, config), queries)
    if not query_set.id:
        raise InvalidSyntaxError(file_name, 1, "cannot derive a set ID from the file name")
    logger.debug("Parsed %s: set '%s' with %d queries", file_name, query_set.id, len(query_set))
    return query_set


def file_stem(file_name: str, config: LoaderConfig) -> str:
    """Strip the directory part and the matching configured extension."""
    base = file_name.replace("\\", "/").rsplit("/", 1)[-1]
    lowered = base.lower()
    for ext in config.extensions:
        if lowered.endswith(ext):
            return base[: -len(ext)]
    return base.rsplit(".", 1)[0] if "." in base else base
