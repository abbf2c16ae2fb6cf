"""Line scanner - splits raw file bytes into numbered lines."""

from __future__ import annotations

import codecs
from typing import NamedTuple

from sqlset.core.exceptions import InvalidSyntaxError, MaxLineLengthExceededError


class Line(NamedTuple):
    """One logical line of a source file, numbered from 1."""

    number: int
    text: str


def scan_lines(
    data: bytes,
    file_name: str,
    max_line_length: int,
    encoding: str = "utf-8",
) -> list[Line]:
    """Split *data* on ``\\n``, ``\\r\\n`` and ``\\r``.

    Line endings and a leading UTF-8 byte order mark are dropped. Length
    is measured in bytes before decoding. *encoding* must be ASCII
    compatible, which ``LoaderConfig`` enforces.

    Raises:
        MaxLineLengthExceededError: If any line is longer than *max_line_length*.
        InvalidSyntaxError: If a line cannot be decoded with *encoding*.
    """
    data = data.removeprefix(codecs.BOM_UTF8)
    lines: list[Line] = []
    for number, raw in enumerate(data.splitlines(), start=1):
        if len(raw) > max_line_length:
            raise MaxLineLengthExceededError(file_name, number, max_line_length)
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise InvalidSyntaxError(file_name, number, f"cannot decode line as {encoding}") from e
        lines.append(Line(number, text))
    return lines
