from smart_console.config.settings import (
    DEFAULT_EXIT_LABEL,
    DEFAULT_PROMPT_MARKER,
    DEFAULT_SELECTION_PROMPT,
    get_setting,
    get_str,
    load_settings,
    save_settings,
    set_setting,
)

__all__ = [
    "DEFAULT_EXIT_LABEL",
    "DEFAULT_PROMPT_MARKER",
    "DEFAULT_SELECTION_PROMPT",
    "get_setting",
    "get_str",
    "load_settings",
    "save_settings",
    "set_setting",
]
