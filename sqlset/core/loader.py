"""Query set loading - enumerates files and builds the set ID index.

Loading is all-or-nothing: the first error aborts the load and nothing
built so far is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from importlib.resources.abc import Traversable
from pathlib import Path

from sqlset.core.config import LoaderConfig
from sqlset.core.exceptions import DuplicateQuerySetError
from sqlset.core.models import QuerySet
from sqlset.core.parser import parse_query_set

logger = logging.getLogger(__name__)


def load_query_sets(
    files: Iterable[tuple[str, bytes]],
    config: LoaderConfig | None = None,
) -> dict[str, QuerySet]:
    """Parse ``(file_name, data)`` pairs into a mapping keyed by set ID.

    Files are processed in file name order, so when two files resolve to
    the same set ID the later name wins (or, in strict mode, the load fails).

    Raises:
        LoadError: On the first file that fails to parse.
        DuplicateQuerySetError: In strict mode, on a set ID collision.
    """
    config = config or LoaderConfig()
    sets: dict[str, QuerySet] = {}
    origins: dict[str, str] = {}

    for file_name, data in sorted(files, key=lambda item: item[0]):
        query_set = parse_query_set(data, file_name, config)
        set_id = query_set.id

        if set_id in sets:
            if config.strict:
                raise DuplicateQuerySetError(set_id, origins[set_id], file_name)
            logger.warning(
                "Query set '%s' from %s replaces the one from %s",
                set_id,
                file_name,
                origins[set_id],
            )

        sets[set_id] = query_set
        origins[set_id] = file_name

    logger.info(
        "Loaded %d query sets with %d queries",
        len(sets),
        sum(len(qs) for qs in sets.values()),
    )
    return sets


def iter_directory(
    root: Path | Traversable,
    config: LoaderConfig | None = None,
) -> Iterator[tuple[str, bytes]]:
    """Yield ``(relative_name, data)`` for every eligible file under *root*.

    Works for both ``pathlib.Path`` and ``importlib.resources`` traversables.

    Raises:
        FileNotFoundError: If *root* is not a directory.
    """
    config = config or LoaderConfig()
    if not root.is_dir():
        raise FileNotFoundError(f"Query set directory not found: {root}")
    yield from _walk(root, "", config)


def _walk(
    directory: Path | Traversable,
    prefix: str,
    config: LoaderConfig,
) -> Iterator[tuple[str, bytes]]:
    for entry in sorted(directory.iterdir(), key=lambda item: item.name):
        name = f"{prefix}{entry.name}"
        if entry.is_dir():
            if config.recursive:
                yield from _walk(entry, f"{name}/", config)
        elif config.is_eligible(entry.name):
            yield name, entry.read_bytes()
