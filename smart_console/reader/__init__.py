from smart_console.reader.parsing import (
    FALSY_WORDS,
    TRUTHY_WORDS,
    FailureKind,
    ParseResult,
    Parsed,
    Rejected,
)
from smart_console.reader.validated import ValidatedReader

__all__ = [
    "FALSY_WORDS",
    "TRUTHY_WORDS",
    "FailureKind",
    "ParseResult",
    "Parsed",
    "Rejected",
    "ValidatedReader",
]
