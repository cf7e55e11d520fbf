"""
Pytest configuration and shared fixtures for smart-console tests.

Scripted line sources and StringIO sinks stand in for the terminal.
"""

import io
import os
import tempfile
from pathlib import Path
from typing import Callable, List

import pytest

# Point settings at an empty location before the package loads them, so a
# developer's own settings file never leaks into the tests.
os.environ.setdefault(
    "SMART_CONSOLE_SETTINGS_PATH",
    str(Path(tempfile.gettempdir()) / "smart-console-tests" / "missing.json"),
)

from smart_console.config import settings  # noqa: E402
from smart_console.console import ScriptedLineSource, StreamSink  # noqa: E402
from smart_console.reader import ValidatedReader  # noqa: E402


class ConsoleHarness:
    """A reader wired to scripted input and captured output."""

    def __init__(self, lines: List[str]):
        self.source = ScriptedLineSource(lines)
        self.buffer = io.StringIO()
        self.reader = ValidatedReader(self.source, StreamSink(self.buffer))

    @property
    def text(self) -> str:
        return self.buffer.getvalue()

    def prompt_count(self, prompt: str) -> int:
        return self.text.count(f"{prompt}\n> ")


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts from the default settings."""
    settings.settings_store.values = dict(settings.DEFAULT_SETTINGS)
    yield
    settings.settings_store.values = dict(settings.DEFAULT_SETTINGS)


@pytest.fixture
def console() -> Callable[..., ConsoleHarness]:
    """
    Fixture providing a factory for scripted console sessions.

    Usage:
        session = console("abc", "42")
        assert session.reader.read_int("Number") == 42
    """

    def _make(*lines: str) -> ConsoleHarness:
        return ConsoleHarness(list(lines))

    return _make


@pytest.fixture
def temp_settings_file(tmp_path) -> Path:
    """
    Fixture providing a temporary settings file path.

    Returns:
        Path to a temporary settings file.
    """
    settings_dir = tmp_path / ".config" / "smart-console"
    settings_dir.mkdir(parents=True, exist_ok=True)
    return settings_dir / "settings.json"
