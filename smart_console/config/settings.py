"""Settings storage for console prompts and menu labels."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from smart_console.logging import LoggerFactory


log = LoggerFactory.for_system()

SETTINGS_PATH = Path(
    os.environ.get(
        "SMART_CONSOLE_SETTINGS_PATH",
        Path.home() / ".config" / "smart-console" / "settings.json",
    )
)

# Default values - use these constants instead of hardcoding values elsewhere
DEFAULT_PROMPT_MARKER = "> "
DEFAULT_SELECTION_PROMPT = "Select an option"
DEFAULT_EXIT_LABEL = "Leave this menu"

DEFAULT_SETTINGS: dict[str, Any] = {
    "prompt_marker": DEFAULT_PROMPT_MARKER,
    "selection_prompt": DEFAULT_SELECTION_PROMPT,
    "exit_label": DEFAULT_EXIT_LABEL,
}


@dataclass
class SettingsStore:
    values: dict[str, Any] = field(default_factory=dict)


settings_store = SettingsStore()


def load_settings() -> None:
    settings_store.values = dict(DEFAULT_SETTINGS)
    if not SETTINGS_PATH.exists():
        return
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as error:
        log.warning(f"Ignoring unreadable settings file {SETTINGS_PATH}: {error}")
        return
    if not isinstance(data, dict):
        log.warning(f"Ignoring settings file {SETTINGS_PATH}: expected an object")
        return
    for key, value in data.items():
        # Labels and prompts are written verbatim, so only strings are kept.
        if key in DEFAULT_SETTINGS and not isinstance(value, str):
            log.warning(f"Ignoring non-string value for setting {key!r}: {value!r}")
            continue
        settings_store.values[key] = value


def save_settings() -> None:
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(settings_store.values, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def get_setting(key: str, default: Any | None = None) -> Any:
    return settings_store.values.get(key, default)


def set_setting(key: str, value: Any) -> None:
    settings_store.values[key] = value
    save_settings()


def get_str(key: str, default: str = "") -> str:
    value = get_setting(key, default)
    if value is None:
        return default
    return str(value)


load_settings()
