"""Modal dialogs: alert, yes/no question, confirm and text prompt."""

from __future__ import annotations

import enum
from typing import Optional, Union

from crossroad.config import Config, Key
from crossroad.console import Console
from crossroad.ui import Button, Widget
from crossroad.utilities import (
    Color,
    StrokeType,
    TextAlign,
    align_text,
    get_chars,
    get_pixel_chars,
    vk_to_str,
)

POPUP_WIDTH = 48
POPUP_HEIGHT = 12

VK_BACK = 0x08
VK_SPACE = 0x20


class PopUpType(enum.Enum):
    ALERT = "alert"
    QUESTION = "question"
    CONFIRM = "confirm"
    PROMPT = "prompt"


class PopUp(Widget):
    """A dialog box with buttons; prompts also collect a line of text."""

    def __init__(self, config: Config, x: int, y: int, message: str, kind: PopUpType) -> None:
        super().__init__()
        self.config = config
        self.kind = kind
        self.done = False
        self.done_prompt = False
        self.hovered_button = 0
        self.width = POPUP_WIDTH
        self.height = POPUP_HEIGHT
        self.x = x
        self.y = y

        step = self.width - 1
        pos = step
        while pos < len(message):
            message = message[:pos] + "\n" + message[pos:]
            pos += step
        self.message = message

        self.result: Union[bool, str, None] = "" if kind == PopUpType.PROMPT else None

        mid = self.x + self.width // 2
        row = self.y + self.height - 2
        if kind == PopUpType.ALERT:
            self.buttons = [Button(mid - 1, row, align_text(TextAlign.CENTER, "Ok", 4))]
        elif kind == PopUpType.QUESTION:
            self.buttons = [
                Button(mid - 7, row, align_text(TextAlign.CENTER, "Yes", 6)),
                Button(mid + 4, row, align_text(TextAlign.CENTER, "No", 6)),
            ]
        else:
            self.buttons = [
                Button(mid - 6, row, align_text(TextAlign.CENTER, "Ok", 4)),
                Button(mid + 1, row, align_text(TextAlign.CENTER, "Cancel", 8)),
            ]

    def _draw_border(self, console: Console, attr: int) -> None:
        chars = get_pixel_chars()
        left, top = self.x, self.y
        right, bottom = self.x + self.width - 1, self.y + self.height - 1
        for cx, cy in ((left, top), (right, top), (left, bottom), (right, bottom)):
            console.put(cx, cy, chars.full, attr)
        for cx in range(left + 1, right):
            console.put(cx, top, chars.top, attr)
            console.put(cx, bottom, chars.bottom, attr)
        for cy in range(top + 1, bottom):
            console.put(left, cy, chars.full, attr)
            console.put(right, cy, chars.full, attr)

    def _draw_input_box(self, console: Console, attr: int) -> None:
        chars = get_chars(StrokeType.SINGLE)
        top = self.y + self.height - 5
        mid = self.y + self.height - 4
        bottom = self.y + self.height - 3
        left = self.x + 1
        right = self.x + self.width - 2
        console.put(left, top, chars.top_left, attr)
        console.put(left, mid, chars.vertical, attr)
        console.put(left, bottom, chars.bottom_left, attr)
        console.put(right, top, chars.top_right, attr)
        console.put(right, mid, chars.vertical, attr)
        console.put(right, bottom, chars.bottom_right, attr)
        for cx in range(left + 1, right):
            console.put(cx, top, chars.horizontal, attr)
            console.put(cx, bottom, chars.horizontal, attr)

    def _button_brackets(self) -> tuple[tuple[int, str], ...]:
        pixel = get_pixel_chars()
        half = self.width // 2
        if self.kind == PopUpType.ALERT:
            return ((half - 2, pixel.right), (half + 3, pixel.left))
        if self.kind == PopUpType.QUESTION:
            return (
                (half - 8, pixel.right),
                (half - 1, pixel.left),
                (half + 3, pixel.right),
                (half + 10, pixel.left),
            )
        return (
            (half - 7, pixel.right),
            (half - 2, pixel.left),
            (half, pixel.right),
            (half + 9, pixel.left),
        )

    def draw(self, console: Console) -> None:
        self.clear(console)
        if self.done:
            return
        attr = Color.YELLOW
        console.write(self.x + 1, self.y + 1, self.message, Color.YELLOW)
        self._draw_border(console, attr)
        if self.kind == PopUpType.PROMPT:
            self._draw_input_box(console, attr)

        for index, button in enumerate(self.buttons):
            if index == self.hovered_button:
                button.highlight()
            else:
                button.unhighlight()
            button.draw(console)

        row = self.y + self.height - 2
        for offset, char in self._button_brackets():
            console.put(self.x + offset, row, char, attr)

        if self.kind == PopUpType.PROMPT and isinstance(self.result, str):
            console.write(self.x + 2, self.y + self.height - 4, self.result, Color.YELLOW)

    def on_key_pressed(self, key: int) -> bool:
        if self.kind == PopUpType.PROMPT and not self.done_prompt and isinstance(self.result, str):
            if key == VK_BACK:
                self.result = self.result[:-1]
                return True
            text = " " if key == VK_SPACE else vk_to_str(key)
            if len(text) == 1 and len(self.result) < POPUP_WIDTH - 10:
                self.result += text
                return True

        parsed = self.config.parse_key(key)
        count = len(self.buttons)
        if parsed in (Key.KEY_UP, Key.KEY_LEFT):
            self.hovered_button = (self.hovered_button - 1) % count
        elif parsed in (Key.KEY_DOWN, Key.KEY_RIGHT):
            self.hovered_button = (self.hovered_button + 1) % count
        elif parsed == Key.KEY_ENTER:
            self.on_button_pressed(self.hovered_button)
        elif parsed == Key.KEY_ESC:
            self.done_prompt = True
            self.hovered_button = 1
            self.on_button_pressed(self.hovered_button)
        return True

    def on_button_pressed(self, button_id: int) -> None:
        self.done = True
        if self.kind != PopUpType.PROMPT:
            self.result = not button_id
        elif button_id == 1:
            self.result = None


def _run(console: Console, popup: PopUp) -> PopUp:
    while not popup.done:
        console.wait_input(popup)
        popup.draw(console)
        console.draw()
    return popup


def alert(console: Console, config: Config, x: int, y: int, message: str) -> None:
    """Show a message until it is dismissed."""
    _run(console, PopUp(config, x, y, message, PopUpType.ALERT))


def question(console: Console, config: Config, x: int, y: int, message: str) -> bool:
    """Ask a yes/no question; True means yes."""
    return bool(_run(console, PopUp(config, x, y, message, PopUpType.QUESTION)).result)


def confirm(console: Console, config: Config, x: int, y: int, message: str) -> bool:
    """Ask for Ok/Cancel; True means Ok."""
    return bool(_run(console, PopUp(config, x, y, message, PopUpType.CONFIRM)).result)


def prompt(console: Console, config: Config, x: int, y: int, message: str) -> str:
    """Read a line of text; cancelling gives an empty string."""
    result: Optional[Union[bool, str]] = _run(
        console, PopUp(config, x, y, message, PopUpType.PROMPT)
    ).result
    return result if isinstance(result, str) else ""