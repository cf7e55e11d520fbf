"""Validated console input and numbered text menus."""

from loguru import logger

# Library logging stays silent until setup_logging() enables it.
logger.disable("smart_console")

from smart_console.__version__ import __version__  # noqa: E402
from smart_console.console import (  # noqa: E402
    LineSink,
    LineSource,
    ScriptedLineSource,
    StreamLineSource,
    StreamSink,
)
from smart_console.exceptions import (  # noqa: E402
    ConsoleError,
    InputExhaustedError,
    MenuDefinitionError,
)
from smart_console.menu import Action, LeafAction, Menu  # noqa: E402
from smart_console.reader import ValidatedReader  # noqa: E402

__all__ = [
    "__version__",
    "Action",
    "ConsoleError",
    "InputExhaustedError",
    "LeafAction",
    "LineSink",
    "LineSource",
    "Menu",
    "MenuDefinitionError",
    "ScriptedLineSource",
    "StreamLineSource",
    "StreamSink",
    "ValidatedReader",
]
