from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Protocol, runtime_checkable

from smart_console.exceptions import MenuDefinitionError
from smart_console.menu.navigator import run_menu
from smart_console.reader.validated import ValidatedReader


@runtime_checkable
class Action(Protocol):
    name: str
    description: str

    def run(self) -> None:
        ...


@dataclass
class LeafAction:
    name: str
    description: str
    callback: Callable[[], None]

    def run(self) -> None:
        self.callback()


@dataclass
class Menu:
    """A numbered list of actions; selecting 0 leaves the menu.

    A Menu is itself an Action, so it can be an option of another Menu.
    """

    name: str
    description: str
    info_text: str
    reader: ValidatedReader
    options: List[Action] = field(default_factory=list)

    def __post_init__(self) -> None:
        for option in self.options:
            if not isinstance(option, Action):
                raise MenuDefinitionError(self.name, option)

    def run(self) -> None:
        run_menu(self)
