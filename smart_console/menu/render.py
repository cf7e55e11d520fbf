"""Text rendering for console menus."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from smart_console.config.settings import DEFAULT_EXIT_LABEL, get_str

if TYPE_CHECKING:
    from smart_console.menu.model import Action, Menu

EXIT_SELECTION = 0


def format_option(index: int, action: Action) -> str:
    return f"[{index}] {action.name} - {action.description}"


def exit_line() -> str:
    return f"[{EXIT_SELECTION}] {get_str('exit_label', DEFAULT_EXIT_LABEL)}"


def render_menu(menu: Menu) -> List[str]:
    """Lines shown before each selection: header, options, then the exit entry."""
    lines = [menu.description, menu.info_text, ""]
    lines.extend(
        format_option(index, option)
        for index, option in enumerate(menu.options, start=1)
    )
    lines.append(exit_line())
    return lines
