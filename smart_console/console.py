"""Line sources and sinks the reader talks to.

A source hands out one line of text per call and raises
``InputExhaustedError`` once nothing is left. A sink accepts prompts,
diagnostics and menu lines; every write is flushed so a prompt is on the
screen before the matching read blocks.
"""

from __future__ import annotations

import sys
from typing import IO, Iterable, Optional, Protocol

from smart_console.exceptions import InputExhaustedError
from smart_console.logging import LoggerFactory


log = LoggerFactory.for_console()


class LineSource(Protocol):
    def read_line(self) -> str:
        ...


class LineSink(Protocol):
    def write(self, text: str) -> None:
        ...

    def write_line(self, text: str = "") -> None:
        ...


class StreamLineSource:
    """Read lines from a text stream such as ``sys.stdin``.

    The stream is borrowed, never closed.
    """

    def __init__(self, stream: Optional[IO[str]] = None, name: str | None = None):
        self._stream = stream if stream is not None else sys.stdin
        self.name = name or getattr(self._stream, "name", "stream")
        self.consumed = 0

    def read_line(self) -> str:
        line = self._stream.readline()
        if line == "":
            log.warning(f"Input exhausted on {self.name}")
            raise InputExhaustedError(self.name, self.consumed)
        self.consumed += 1
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line


class ScriptedLineSource:
    """Hand out a fixed sequence of lines, then report exhaustion."""

    def __init__(self, lines: Iterable[str], name: str = "script"):
        self._lines = list(lines)
        self.name = name
        self.consumed = 0

    @property
    def remaining(self) -> int:
        return len(self._lines) - self.consumed

    def read_line(self) -> str:
        if self.consumed >= len(self._lines):
            log.warning(f"Input exhausted on {self.name}")
            raise InputExhaustedError(self.name, self.consumed)
        line = self._lines[self.consumed]
        self.consumed += 1
        return line


class StreamSink:
    """Write prompts and diagnostics to a text stream, flushing each write."""

    def __init__(self, stream: Optional[IO[str]] = None):
        self._stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def write_line(self, text: str = "") -> None:
        self.write(f"{text}\n")
