from smart_console.menu.model import Action, LeafAction, Menu
from smart_console.menu.navigator import current_path, run_menu
from smart_console.menu.render import EXIT_SELECTION, format_option, render_menu

__all__ = [
    "EXIT_SELECTION",
    "Action",
    "LeafAction",
    "Menu",
    "current_path",
    "format_option",
    "render_menu",
    "run_menu",
]
