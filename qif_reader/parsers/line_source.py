# qif_reader/parsers/line_source.py
"""
Re-readable line cursor over QIF content.

The reader needs three things from its input that a plain file iterator does
not give: a way back to the start (the date guesser samples lines before the
header is parsed), a way to step back one line (the header parser reads one
line too far), and end of input reported as a value instead of an exception.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class LineMark:
    """A position returned by ``LineSource.mark`` and accepted by ``LineSource.reset``."""

    offset: int
    line_number: int


class LineSource:
    """
    Wraps a ``str`` or a text stream. Streams that cannot seek are read into
    memory once so the cursor can still be moved.
    """

    def __init__(self, data: str | TextIO):
        if isinstance(data, str):
            stream: TextIO = io.StringIO(data)
        elif _is_seekable(data):
            stream = data
        else:
            stream = io.StringIO(data.read())
        self._stream = stream
        self._start = LineMark(stream.tell(), 0)
        self._line_number = 0

    @property
    def line_number(self) -> int:
        """Number of lines consumed since the start."""
        return self._line_number

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def readline(self) -> str | None:
        """Return the next line including its terminator, or None at end of input."""
        line = self._stream.readline()
        if line == "":
            return None
        self._line_number += 1
        return line

    def mark(self) -> LineMark:
        return LineMark(self._stream.tell(), self._line_number)

    def reset(self, mark: LineMark) -> None:
        self._stream.seek(mark.offset)
        self._line_number = mark.line_number

    def rewind(self) -> None:
        self.reset(self._start)

    def close(self) -> None:
        self._stream.close()


def _is_seekable(stream: object) -> bool:
    seekable = getattr(stream, "seekable", None)
    if seekable is None:
        return False
    try:
        return bool(seekable())
    except (OSError, ValueError):
        return False
