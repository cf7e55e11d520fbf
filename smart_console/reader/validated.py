from __future__ import annotations

import re
from dataclasses import replace
from typing import Callable, Optional, TypeVar, Union

from smart_console.config.settings import DEFAULT_PROMPT_MARKER, get_str
from smart_console.console import LineSink, LineSource, StreamSink
from smart_console.logging import LoggerFactory
from smart_console.reader.parsing import (
    ParseResult,
    Parsed,
    check_bounds,
    check_range,
    match_pattern,
    parse_bool,
    parse_float,
    parse_int,
    sanitize,
)


T = TypeVar("T")
Number = Union[int, float]

log = LoggerFactory.for_reader()
input_log = LoggerFactory.for_input()


class ValidatedReader:
    """Prompt for a line and keep asking until it converts and validates.

    Two failure policies are offered. Most readers loop until the user
    enters something valid; ``read_bool_or_default`` makes a single attempt
    and falls back to the caller's default. Malformed input never raises;
    ``InputExhaustedError`` from the source is the only error that escapes.
    """

    def __init__(
        self,
        source: LineSource,
        output: Optional[LineSink] = None,
        *,
        prompt_marker: Optional[str] = None,
    ) -> None:
        self.source = source
        self.output = output if output is not None else StreamSink()
        if prompt_marker is None:
            prompt_marker = get_str("prompt_marker", DEFAULT_PROMPT_MARKER)
        self.prompt_marker = prompt_marker

    def _prompt(self, prompt: str) -> str:
        self.output.write_line(prompt)
        self.output.write(self.prompt_marker)
        line = self.source.read_line()
        input_log.trace(f"Read {line!r} for prompt {prompt!r}")
        return line

    def _read_until_valid(
        self, prompt: str, convert: Callable[[str], ParseResult[T]]
    ) -> T:
        while True:
            result = convert(self._prompt(prompt))
            if isinstance(result, Parsed):
                return result.value
            log.debug(f"Rejected input for {prompt!r}: {result.kind.value}")
            self.output.write_line(result.message)

    def read_line(self, prompt: str) -> str:
        """Return the next line exactly as typed."""
        return self._prompt(prompt)

    def read_sanitized_line(self, prompt: str) -> str:
        """Return the next line trimmed and lowercased."""
        return sanitize(self._prompt(prompt))

    def read_matching(self, prompt: str, pattern: Union[str, re.Pattern[str]]) -> str:
        """Return the first line in which ``pattern`` is found.

        The pattern is searched, not anchored: ``"\\d"`` accepts ``"abc1"``.
        """
        return self._read_until_valid(
            prompt, lambda line: match_pattern(line, pattern)
        )

    def read_int(
        self,
        prompt: str,
        lower: Optional[int] = None,
        upper: Optional[int] = None,
    ) -> int:
        """Return an integer with ``lower <= value <= upper``.

        Either bound may be omitted. A value out of range is discarded and a
        fresh line is read.
        """
        return self._read_number(prompt, parse_int, lower, upper)

    def read_float(
        self,
        prompt: str,
        lower: Optional[float] = None,
        upper: Optional[float] = None,
    ) -> float:
        """Return a float with ``lower <= value <= upper``."""
        return self._read_number(prompt, parse_float, lower, upper)

    def _read_number(
        self,
        prompt: str,
        parse: Callable[[str], ParseResult[T]],
        lower: Optional[Number],
        upper: Optional[Number],
    ) -> T:
        check_bounds(lower, upper)

        def convert(line: str) -> ParseResult[T]:
            result = parse(line)
            if not isinstance(result, Parsed):
                return result
            return check_range(result.value, lower, upper)

        return self._read_until_valid(prompt, convert)

    def read_bool(self, prompt: str) -> bool:
        """Return True or False, asking again until the answer is recognised."""

        def convert(line: str) -> ParseResult[bool]:
            result = parse_bool(line)
            if isinstance(result, Parsed):
                return result
            return replace(result, message=f"{result.message} Try again.\n")

        return self._read_until_valid(prompt, convert)

    def read_bool_or_default(self, prompt: str, default: bool) -> bool:
        """Return the answer to a yes/no prompt, or ``default`` if unrecognised.

        Only one line is read.
        """
        result = parse_bool(self._prompt(prompt))
        if isinstance(result, Parsed):
            return result.value
        log.debug(f"Unrecognised answer for {prompt!r}, using default {default}")
        self.output.write_line(
            f"{result.message} Assuming default value {str(default).lower()}.\n"
        )
        return default
