"""The pause menu shown during a game."""

from __future__ import annotations

import enum
import time
from typing import Callable, Optional

from crossroad.config import Config, Key
from crossroad.console import Console
from crossroad.ui import Button, Widget
from crossroad.utilities import BorderOptions, Color, text_with_border

BUTTON_LABELS = (
    "      New Game       ",
    "      Continue       ",
    "      Load Game      ",
    "      Setting        ",
    "      Exit           ",
)


def _sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000.0)


class IngameOption(enum.IntEnum):
    CONTINUE = 0
    SAVE = 1
    LOAD = 2
    SETTING = 3
    EXIT = 4


class IngameMenu(Widget):
    """A column of buttons; the hovered one is the chosen option."""

    def __init__(
        self,
        console: Console,
        config: Optional[Config] = None,
        x: int = 80,
        y: int = 10,
        width: int = 28,
        height: int = 20,
    ) -> None:
        super().__init__()
        self.console = console
        self.config = config if config is not None else Config()
        self.shown = True
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.hovered_button = 0
        self.sleep_ms: Callable[[float], None] = _sleep_ms
        left = x + (width - 19) // 2
        self.buttons = [
            Button(left, y + 4 * row + 1, label) for row, label in enumerate(BUTTON_LABELS)
        ]

    def get_option(self) -> IngameOption:
        """Run the menu until a button is pressed and return the choice."""
        self.show()
        while self.shown:
            self.console.wait_input(self)
            self.draw(self.console)
            self.console.draw()
            self.sleep_ms(self.config.get(Key.FRAME_LENGTH))
        return IngameOption(self.hovered_button)

    def draw(self, console: Console) -> None:
        if not self.shown:
            return
        options = BorderOptions(min_width=self.width, min_height=self.height)
        console.write(self.x - 1, self.y - 1, text_with_border(options, ""), Color.YELLOW)
        for index, button in enumerate(self.buttons):
            if index == self.hovered_button:
                button.highlight()
            else:
                button.unhighlight()
            button.draw(console)

    def show(self) -> None:
        for button in self.buttons:
            button.show()
        self.shown = True

    def hide(self) -> None:
        for button in self.buttons:
            button.hide()
        self.console.clear_area(self.x - 1, self.y - 1, self.width + 2, self.height + 2)
        self.shown = False

    def on_key_pressed(self, key: int) -> bool:
        if not self.shown:
            return False
        parsed = self.config.parse_key(key)
        count = len(self.buttons)
        if parsed in (Key.KEY_UP, Key.KEY_LEFT):
            self.hovered_button = (self.hovered_button - 1) % count
            return True
        if parsed in (Key.KEY_DOWN, Key.KEY_RIGHT):
            self.hovered_button = (self.hovered_button + 1) % count
            return True
        if parsed == Key.KEY_ENTER:
            self.on_button_pressed(self.hovered_button)
            return True
        if parsed == Key.KEY_ESC:
            self.hovered_button = 0
            self.on_button_pressed(self.hovered_button)
            return True
        return False

    def on_button_pressed(self, button_id: int) -> None:
        self.hide()