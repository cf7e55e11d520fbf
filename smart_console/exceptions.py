"""Custom exceptions for console input handling.

Malformed user input is never raised: the reader recovers from it locally
by reprompting or defaulting. The exceptions here cover the conditions a
caller has to deal with.

Exception Hierarchy:
    ConsoleError (base)
        ├── InputExhaustedError
        └── MenuDefinitionError

Usage:
    from smart_console.exceptions import InputExhaustedError

    try:
        main_menu.run()
    except InputExhaustedError:
        print()
"""

from __future__ import annotations


class ConsoleError(Exception):
    """Base exception for all console operations."""



class InputExhaustedError(ConsoleError):
    """The input source has no more lines to read."""

    def __init__(self, source_name: str = "input", consumed: int | None = None):
        self.source_name = source_name
        self.consumed = consumed
        msg = f"No more lines available from {source_name}"
        if consumed is not None:
            msg += f" after {consumed} line(s)"
        super().__init__(msg)


class MenuDefinitionError(ConsoleError):
    """A menu was built with an option that is not an action."""

    def __init__(self, menu_name: str, option: object):
        self.menu_name = menu_name
        self.option = option
        super().__init__(
            f"Menu {menu_name!r} option {option!r} must provide "
            f"name, description and run()"
        )
