"""Key bindings and console settings loaded from a simple ``name=value,`` file."""

from __future__ import annotations

import enum
import os
import re
from typing import Union


class Key(enum.IntEnum):
    """Configuration slots, in file order."""

    UNDEFINE = 0
    SIZE = 1
    KEY_UP = 2
    KEY_DOWN = 3
    KEY_LEFT = 4
    KEY_RIGHT = 5
    KEY_ENTER = 6
    KEY_PAUSE = 7
    KEY_ESC = 8
    KEY_LOAD = 9
    KEY_SAVE = 10
    KEY_MUTE = 11
    FRAME_LENGTH = 12
    CONSOLE_WIDTH = 13
    CONSOLE_HEIGHT = 14


NAMES = (
    "null",
    "size",
    "key_up",
    "key_down",
    "key_left",
    "key_right",
    "key_enter",
    "key_pause",
    "key_ecs",
    "key_load",
    "key_save",
    "key_mute",
    "frame_length",
    "console_width",
    "console_height",
)

DELIMITER = "="
SEPARATOR = ","

_WORD_MASK = 0xFFFF
_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

PathLike = Union[str, "os.PathLike[str]"]


def _to_int(text: str) -> int:
    """Parse a leading integer the way a lenient C-style parser does."""
    match = _INT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid integer in config: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range in config: {text!r}")
    return value


class Config:
    """Two 16-bit values for every configuration key."""

    def __init__(self) -> None:
        self._values = [[0, 0] for _ in NAMES]
        self.reset_defaults()

    def reset_defaults(self) -> None:
        """Apply the built-in settings (virtual key codes for the keys)."""
        self.set(Key.SIZE, 15)
        self.set(Key.CONSOLE_WIDTH, 1260)
        self.set(Key.CONSOLE_HEIGHT, 900)
        self.set(Key.FRAME_LENGTH, 20)
        self.set(Key.KEY_UP, 0x26, 1)
        self.set(Key.KEY_DOWN, 0x28, 1)
        self.set(Key.KEY_LEFT, 0x25, 1)
        self.set(Key.KEY_RIGHT, 0x27, 1)
        self.set(Key.KEY_ENTER, 0x0D, 1)
        self.set(Key.KEY_PAUSE, 0x50, 0)
        self.set(Key.KEY_PAUSE, 0x13, 1)
        self.set(Key.KEY_ESC, 0x1B)
        self.set(Key.KEY_LOAD, 84)
        self.set(Key.KEY_SAVE, 76)
        self.set(Key.KEY_MUTE, 77)

    def parse_line(self, line: str) -> None:
        """Apply one ``name=value,value,`` line; unknown names are ignored."""
        token, sep, rest = line.partition(DELIMITER)
        if not sep or token not in NAMES:
            return
        index = NAMES.index(token)
        if index == 0:
            return
        # Only values terminated by a separator count, at most two of them.
        fields = rest.split(SEPARATOR)[:-1]
        for slot, field in enumerate(fields[:2]):
            self._values[index][slot] = _to_int(field) & _WORD_MASK

    def _check_key(self, key: int) -> int:
        key = int(key)
        if not 0 <= key < len(NAMES):
            raise IndexError(f"unknown config key {key}")
        return key

    def get(self, key: int, index: int = 0) -> int:
        """Return a stored value; every real key reads its first slot."""
        key = self._check_key(key)
        if index > 1:
            index = 1
        if key >= Key.SIZE:
            index = 0
        if index < 0:
            raise IndexError(f"invalid slot {index}")
        return self._values[key][index]

    def set(self, key: int, value: int, index: int = 0) -> None:
        """Store a value; an invalid slot falls back to the first one."""
        key = self._check_key(key)
        if index not in (0, 1):
            index = 0
        self._values[key][index] = int(value) & _WORD_MASK

    def load(self, path: PathLike) -> None:
        """Reset to defaults, then apply every line of ``path`` if it exists."""
        self.reset_defaults()
        try:
            with open(path, encoding="utf-8") as handle:
                for line in handle:
                    self.parse_line(line.rstrip("\n"))
        except OSError:
            return

    def save(self, path: PathLike) -> None:
        """Write every key with its non-zero values."""
        with open(path, "w", encoding="utf-8") as handle:
            for name, pair in zip(NAMES, self._values):
                values = "".join(f"{value}{SEPARATOR}" for value in pair if value)
                handle.write(f"{name}{DELIMITER}{values}\n")

    def parse_key(self, code: int) -> int:
        """Map a virtual key code to the bound key, or return it unchanged."""
        for key in range(Key.KEY_UP, Key.KEY_MUTE + 1):
            if code in self._values[key]:
                return Key(key)
        return code