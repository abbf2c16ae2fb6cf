"""Loader configuration.

LoaderConfig is a Pydantic model for type-safe loader settings. It is
frozen so one instance can be shared between loads.
"""

from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MAX_LINE_LENGTH = 4096

# Characters the file grammar relies on; they must encode to the same bytes as in ASCII
_GRAMMAR_CHARS = "\r\n-#:SQL{}\""


class LoaderConfig(BaseModel):
    """Configuration for loading query set files."""

    model_config = ConfigDict(frozen=True)

    extensions: tuple[str, ...] = (".sql",)
    max_line_length: int = Field(default=DEFAULT_MAX_LINE_LENGTH, gt=0)
    encoding: str = "utf-8"
    recursive: bool = False
    strict: bool = False

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one file extension is required")
        # ".SQL" and "sql" both mean ".sql"
        return tuple(ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value)

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            name = codecs.lookup(value).name
            encoded = _GRAMMAR_CHARS.encode(name)
        except LookupError as e:
            raise ValueError(f"unknown text encoding {value!r}") from e
        if encoded != _GRAMMAR_CHARS.encode("ascii"):
            raise ValueError(f"encoding {value!r} is not ASCII compatible")
        return name

    def is_eligible(self, file_name: str) -> bool:
        """Check whether a file name carries one of the configured extensions."""
        lowered = file_name.lower()
        return any(lowered.endswith(ext) for ext in self.extensions)
