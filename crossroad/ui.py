"""Base widget and a text button."""

from __future__ import annotations

import abc

from crossroad.config import Key
from crossroad.console import Console, InputHandler
from crossroad.utilities import Color, color


class Widget(InputHandler):
    """A rectangle on screen that can be shown, hidden and highlighted."""

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.width = 120
        self.height = 41
        self.shown = False
        self.hovered = False

    def show(self) -> None:
        self.shown = True

    def hide(self) -> None:
        self.shown = False

    def highlight(self) -> None:
        self.hovered = True

    def unhighlight(self) -> None:
        self.hovered = False

    def clear(self, console: Console) -> None:
        console.clear_area(self.x, self.y, self.width, self.height)

    @abc.abstractmethod
    def draw(self, console: Console) -> None:
        """Paint the widget onto ``console``."""

    def on_key_pressed(self, key: int) -> bool:
        return False


class Button(Widget):
    """A label sized to its longest line."""

    def __init__(self, x: int = 0, y: int = 0, label: str = "") -> None:
        super().__init__()
        self.x = x
        self.y = y
        self.label = label
        lines = label.split("\n")
        self.height = len(lines)
        self.width = max(len(line) for line in lines)

    def draw(self, console: Console) -> None:
        attr = color(Color.BLACK, Color.YELLOW) if self.hovered else Color.YELLOW
        console.write(self.x, self.y, self.label, attr)
        self.shown = True

    def on_key_pressed(self, key: int) -> bool:
        # Compared against the config slot, not the bound key code.
        return key == Key.KEY_ENTER