"""Pure parse and check functions used by the validated reader.

Each function returns a ``Parsed`` value or a ``Rejected`` failure instead
of raising, so the reader's retry loops can branch on the outcome. The
``Rejected.message`` is the diagnostic shown to the user.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union


T = TypeVar("T")

TRUTHY_WORDS = frozenset({"yes", "y", "1", "true", "t"})
FALSY_WORDS = frozenset({"no", "n", "0", "false", "f"})


class FailureKind(Enum):
    PARSE_FAILURE = "parse_failure"
    OUT_OF_RANGE = "out_of_range"
    PATTERN_MISMATCH = "pattern_mismatch"
    UNRECOGNIZED_BOOLEAN = "unrecognized_boolean"


@dataclass(frozen=True)
class Parsed(Generic[T]):
    value: T


@dataclass(frozen=True)
class Rejected:
    kind: FailureKind
    message: str


ParseResult = Union[Parsed[T], Rejected]


def sanitize(text: str) -> str:
    """Trim surrounding whitespace and lowercase."""
    return text.strip().lower()


def _parse_failure(error: ValueError) -> Rejected:
    return Rejected(
        FailureKind.PARSE_FAILURE,
        f"That is not a valid value. Try again.\nDetailed error below:\n{error}\n",
    )


def parse_int(text: str) -> ParseResult[int]:
    try:
        return Parsed(int(text))
    except ValueError as error:
        return _parse_failure(error)


def parse_float(text: str) -> ParseResult[float]:
    try:
        return Parsed(float(text))
    except ValueError as error:
        return _parse_failure(error)


def _format_bound(bound: Union[int, float]) -> str:
    if isinstance(bound, float):
        return f"{bound:,}"
    return f"{bound:,d}"


def check_bounds(
    lower: Optional[Union[int, float]], upper: Optional[Union[int, float]]
) -> None:
    """Raise ValueError for a range no value can satisfy."""
    if lower is not None and upper is not None and lower > upper:
        raise ValueError(f"Lower bound {lower} is greater than upper bound {upper}")


def check_range(
    value: T,
    lower: Optional[Union[int, float]] = None,
    upper: Optional[Union[int, float]] = None,
) -> ParseResult[T]:
    """Accept ``value`` if ``lower <= value <= upper``; either bound may be None.

    NaN fails every bounded comparison and is rejected whenever a bound is set.
    """
    below = lower is not None and not value >= lower
    above = upper is not None and not value <= upper
    if not (below or above):
        return Parsed(value)
    if lower is not None and upper is not None:
        message = (
            f"Please enter a value between {_format_bound(lower)} "
            f"and {_format_bound(upper)}."
        )
    elif lower is not None:
        message = f"Please enter a value greater than or equal to {_format_bound(lower)}."
    else:
        message = f"Please enter a value less than or equal to {_format_bound(upper)}."
    return Rejected(FailureKind.OUT_OF_RANGE, message)


def match_pattern(text: str, pattern: Union[str, re.Pattern[str]]) -> ParseResult[str]:
    """Accept ``text`` if ``pattern`` is found anywhere in it."""
    if re.search(pattern, text):
        return Parsed(text)
    return Rejected(
        FailureKind.PATTERN_MISMATCH,
        "That was not a valid response. Please try again.",
    )


def parse_bool(text: str) -> ParseResult[bool]:
    response = sanitize(text)
    if response in TRUTHY_WORDS:
        return Parsed(True)
    if response in FALSY_WORDS:
        return Parsed(False)
    return Rejected(
        FailureKind.UNRECOGNIZED_BOOLEAN,
        f"Sorry, {response} is not a valid response.",
    )
