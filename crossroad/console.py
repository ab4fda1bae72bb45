"""An in-memory character screen that is flushed to a terminal with ANSI codes."""

from __future__ import annotations

import abc
import sys
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TextIO

from crossroad.utilities import Color, cp437

DEFAULT_WIDTH = 160
DEFAULT_HEIGHT = 48

_INPUT_BATCH = 128
_SPRITE_LINES = 20
_BLOCK = cp437(219)

_SPRITE_COLORS = {
    "B": Color.CYAN,
    "b": Color.LIGHT_CYAN,
    "W": Color.WHITE,
    "R": Color.RED,
    "r": Color.LIGHT_RED,
    "Y": Color.YELLOW,
    "G": Color.GREEN,
    "g": Color.LIGHT_GREEN,
}

# Console colour index -> ANSI colour index.
_ANSI = (0, 4, 2, 6, 1, 5, 3, 7)


class InputHandler(abc.ABC):
    """Something that reacts to key presses."""

    @abc.abstractmethod
    def on_key_pressed(self, key: int) -> bool:
        """Handle a key; return True when the key was consumed."""


@dataclass(frozen=True)
class Cell:
    char: str = " "
    attr: int = 0


def _sgr(attr: int) -> str:
    fg = attr & 0x0F
    bg = (attr >> 4) & 0x0F
    fg_code = (90 if fg & 8 else 30) + _ANSI[fg & 7]
    bg_code = (100 if bg & 8 else 40) + _ANSI[bg & 7]
    return f"\x1b[{fg_code};{bg_code}m"


class Console:
    """A fixed-size grid of cells plus a queue of pending key presses."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("console size must be positive")
        self.width = width
        self.height = height
        self.key_source: Optional[Callable[[], Iterable[int]]] = None
        self._pending: deque[int] = deque()
        self._buffer = [Cell()] * (width * height)

    def _map(self, x: int, y: int) -> tuple[int, int]:
        if x < 0:
            x += self.width
        if y < 0:
            y += self.height
        return x, y

    def cls(self) -> None:
        """Blank the whole screen."""
        self._buffer = [Cell()] * (self.width * self.height)

    def clear_area(self, x: int, y: int, width: int, height: int) -> None:
        """Blank a rectangle, clipped to the screen."""
        for col in range(max(x, 0), min(x + width, self.width)):
            for row in range(max(y, 0), min(y + height, self.height)):
                self._buffer[col + row * self.width] = Cell()

    def write(self, x: int, y: int, text: str, attr: int = Color.WHITE) -> None:
        """Write text, one screen row per line, cut at the right edge."""
        x, y = self._map(x, y)
        for row, segment in enumerate(text.split("\n")):
            line_y = y + row
            if not 0 <= line_y < self.height:
                continue
            for col, char in enumerate(segment):
                if x + col + 1 > self.width:
                    break
                if x + col < 0:
                    continue
                self._buffer[x + col + line_y * self.width] = Cell(char, int(attr))

    def put(self, x: int, y: int, char: str, attr: int) -> None:
        """Place one character; past the right edge it runs on to the next row."""
        x, y = self._map(x, y)
        offset = x + y * self.width
        if 0 <= offset < len(self._buffer):
            self._buffer[offset] = Cell(char, int(attr))

    def cell(self, x: int, y: int) -> Cell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is off screen")
        return self._buffer[x + y * self.width]

    def row_text(self, y: int) -> str:
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is off screen")
        start = y * self.width
        return "".join(cell.char for cell in self._buffer[start:start + self.width])

    def draw_sprite_line(self, line: str, x: int, y: int) -> str:
        """Draw one sprite row where letters pick colours; returns what was drawn."""
        attr = Color.WHITE
        drawn = []
        for offset, char in enumerate(line):
            attr = _SPRITE_COLORS.get(char, attr)
            if char != " ":
                char = _BLOCK
            self.put(x + offset, y, char, attr)
            drawn.append(char)
        return "".join(drawn)

    def draw_sprite(self, path, x: int, y: int) -> None:
        """Draw a sprite file; a missing file draws nothing."""
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                lines = handle.read().splitlines()[:_SPRITE_LINES]
        except OSError:
            return
        for row, line in enumerate(lines):
            self.draw_sprite_line(line, x, y + row)

    def push_key(self, key: int) -> None:
        """Queue a key press for the next ``wait_input``."""
        self._pending.append(key)

    def wait_input(self, handler: InputHandler) -> None:
        """Hand pending key presses to ``handler`` without blocking."""
        if self.key_source is not None:
            self._pending.extend(self.key_source())
        handled = 0
        while self._pending and handled < _INPUT_BATCH:
            key = self._pending.popleft()
            handled += 1
            handler.on_key_pressed(key)

    def render(self) -> str:
        """Return the whole screen as ANSI escape sequences."""
        parts = []
        for row in range(self.height):
            parts.append(f"\x1b[{row + 1};1H")
            current = None
            start = row * self.width
            for cell in self._buffer[start:start + self.width]:
                if cell.attr != current:
                    parts.append(_sgr(cell.attr))
                    current = cell.attr
                parts.append(cell.char)
        parts.append("\x1b[0m")
        return "".join(parts)

    def draw(self, stream: Optional[TextIO] = None) -> None:
        """Flush the screen to ``stream`` (standard output by default)."""
        out = sys.stdout if stream is None else stream
        out.write(self.render())
        out.flush()