"""Line reader over a text stream (stdin by default)."""
from __future__ import annotations

import sys
from typing import TextIO

from domain.interfaces import LineReader


class StreamLineReader(LineReader):
    """Reads lines from any text stream, e.g. ``sys.stdin`` or an opened file."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin

    def read_line(self) -> str:
        return self._stream.readline().rstrip("\r\n")

    def read_line_with_number(self) -> int:
        line = self.read_line()
        parts = line.split()
        if not parts:
            raise ValueError("Expected a number, got an empty line")
        return int(parts[0])


__all__ = ["StreamLineReader"]
