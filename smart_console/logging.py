from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger

PACKAGE_NAME = "smart_console"

DEFAULT_LOG_DIR = Path(
    os.environ.get(
        "SMART_CONSOLE_LOG_DIR",
        Path.home() / ".local" / "state" / "smart-console" / "logs",
    )
)

# Note: TRACE level already exists in loguru at level 5 (below DEBUG which is 10)


def _should_log_read(record) -> bool:
    """Raw line reads are TRACE-only, they echo everything the user types."""
    tags = record["extra"].get("tags", [])
    if "read" in tags:
        return record["level"].no <= logger.level("TRACE").no
    return True


def _combined_filter(record) -> bool:
    """Combined filter for all log suppression rules."""
    return _should_log_read(record)


def setup_logging(
    *,
    debug: bool = False,
    trace: bool = False,
    log_dir: Path | None = None,
    stream=None,
) -> Logger:
    """
    Setup logging for console sessions.

    Prompts and menus go to stdout, so the console sink writes to stderr
    unless another stream is given.

    Log Files (only when log_dir is given):
    - operations.log: INFO+ events (7 day retention)
    - debug.log: DEBUG+ events when debug or trace is enabled (3 day retention)
    - structured.jsonl: Structured JSON logs for analysis (7 day retention)

    Args:
        debug: Enable DEBUG level logging
        trace: Enable TRACE level logging (very verbose, includes raw input)
        log_dir: Directory for log files; no file sinks when omitted
        stream: Console sink stream (defaults to sys.stderr)
    """
    logger.remove()
    logger.configure(extra={"tags": [], "source": "APP"})
    logger.enable(PACKAGE_NAME)

    if trace:
        console_level = "TRACE"
    elif debug:
        console_level = "DEBUG"
    else:
        console_level = "INFO"

    # SINK 1: Console (stderr) - kept off the prompt stream
    logger.add(
        stream if stream is not None else sys.stderr,
        level=console_level,
        backtrace=False,
        diagnose=False,
        filter=_combined_filter,
        colorize=stream is None,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[source]: <8}</cyan> | "
            "{message}"
        ),
    )

    if log_dir is None:
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)

    # SINK 2: Operations Log - Important events only (INFO+)
    logger.add(
        log_dir / "operations.log",
        level="INFO",
        rotation="5 MB",
        retention="7 days",
        compression="zip",
        backtrace=False,
        diagnose=False,
        format=(
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{extra[source]: <8} | "
            "{message}"
        ),
    )

    # SINK 3: Debug Log - Detailed diagnostics
    if debug or trace:
        logger.add(
            log_dir / "debug.log",
            level="TRACE" if trace else "DEBUG",
            rotation="10 MB",
            retention="3 days",
            compression="zip",
            backtrace=True,
            diagnose=True,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
                "{level: <8} | "
                "{extra[source]: <8} | "
                "{extra[tags]} | "
                "{message}"
            ),
        )

    # SINK 4: Structured JSON Log - For analysis tools (INFO+)
    logger.add(
        log_dir / "structured.jsonl",
        level="INFO",
        rotation="10 MB",
        retention="7 days",
        compression="zip",
        serialize=True,
        format="{message}",
    )

    return logger


def get_logger(
    *,
    tags: Iterable[str] | None = None,
    source: str | None = None,
) -> Logger:
    """
    Get a logger with bound context.

    Args:
        tags: Tags for filtering (e.g., ["menu", "ui"])
        source: Source component (e.g., "reader", "menu")

    Returns:
        Logger with bound context
    """
    extras: dict[str, object] = {}
    if tags is not None:
        extras["tags"] = list(tags)
    if source is not None:
        extras["source"] = source
    return logger.bind(**extras)


class LoggerFactory:
    """
    Factory for creating domain-specific loggers with automatic context.
    """

    @staticmethod
    def for_reader() -> Logger:
        """Logger for validated reads (rejections, defaults)."""
        return logger.bind(source="reader", tags=["input", "validation"])

    @staticmethod
    def for_input() -> Logger:
        """Logger for raw line reads. Filtered below TRACE."""
        return logger.bind(source="reader", tags=["input", "read"])

    @staticmethod
    def for_menu() -> Logger:
        """Logger for menu navigation."""
        return logger.bind(source="menu", tags=["ui", "menu"])

    @staticmethod
    def for_console() -> Logger:
        """Logger for line sources and sinks."""
        return logger.bind(source="console", tags=["console"])

    @staticmethod
    def for_system() -> Logger:
        """Logger for startup, shutdown and config."""
        return logger.bind(source="system", tags=["system"])
