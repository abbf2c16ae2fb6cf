"""Metadata block parser.

A metadata block is a run of ``--#`` lines whose payload, once the
prefixes are stripped, is a JSON object::

    --# {
    --#   "id": "users",
    --#   "name": "User queries",
    --#   "description": "CRUD for the users table"
    --# }

Only ``id``, ``name`` and ``description`` are accepted, all strings.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, ValidationError

from sqlset.core.exceptions import InvalidSyntaxError
from sqlset.core.scanner import Line

META_PREFIX = "--#"

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class MetaBlock(BaseModel):
    """Fields a metadata block may set. Empty means "use the default"."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    id: str = ""
    name: str = ""
    description: str = ""


def is_meta_line(text: str) -> bool:
    return text.startswith(META_PREFIX)


def parse_meta_block(lines: Sequence[Line], file_name: str) -> MetaBlock:
    """Parse consecutive ``--#`` lines into a validated MetaBlock.

    Args:
        lines: The marker lines of one block, in file order.
        file_name: Used in error messages.

    Raises:
        InvalidSyntaxError: Malformed JSON, a non-object payload, an unknown
            key, a non-string value or an ``id`` that is not an identifier.
    """
    first_line = lines[0].number
    payload = "\n".join(line.text[len(META_PREFIX) :] for line in lines)

    try:
        meta = MetaBlock.model_validate_json(payload)
    except ValidationError as e:
        raise InvalidSyntaxError(
            file_name, first_line, f"bad metadata block: {_describe(e)}"
        ) from e

    if meta.id and not IDENTIFIER_PATTERN.fullmatch(meta.id):
        raise InvalidSyntaxError(
            file_name, first_line, f"metadata id {meta.id!r} is not a valid identifier"
        )
    return meta


def _describe(error: ValidationError) -> str:
    """Flatten pydantic errors into one line, e.g. ``nmae: Extra inputs are not permitted``."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)
