from __future__ import annotations

from contextvars import ContextVar
from typing import TYPE_CHECKING, Tuple

from smart_console.config.settings import DEFAULT_SELECTION_PROMPT, get_str
from smart_console.logging import LoggerFactory
from smart_console.menu.render import EXIT_SELECTION, render_menu

if TYPE_CHECKING:
    from smart_console.menu.model import Menu

log = LoggerFactory.for_menu()

_menu_path: ContextVar[Tuple[str, ...]] = ContextVar("menu_path", default=())


def current_path() -> Tuple[str, ...]:
    """Names of the menus currently open, outermost first."""
    return _menu_path.get()


def run_menu(menu: Menu) -> None:
    """Show ``menu`` and dispatch selections until the user picks 0.

    A submenu's ``run()`` returns here when the user leaves it, and this
    menu is shown again.
    """
    token = _menu_path.set(_menu_path.get() + (menu.name,))
    path = " > ".join(_menu_path.get())
    log.trace(f"Entered menu {path}")
    try:
        while True:
            for line in render_menu(menu):
                menu.reader.output.write_line(line)
            selection = menu.reader.read_int(
                get_str("selection_prompt", DEFAULT_SELECTION_PROMPT),
                EXIT_SELECTION,
                len(menu.options),
            )
            if selection == EXIT_SELECTION:
                log.trace(f"Leaving menu {path}")
                return
            action = menu.options[selection - 1]
            log.debug(f"{path}: running [{selection}] {action.name}")
            action.run()
    finally:
        _menu_path.reset(token)
