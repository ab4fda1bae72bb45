"""Text helpers, colours and box-drawing characters for the console."""

from __future__ import annotations

import enum
from dataclasses import dataclass


def cp437(code: int) -> str:
    """Return the character for a code-page 437 byte."""
    return bytes([code]).decode("cp437")


class Color(enum.IntEnum):
    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    LIGHT_GRAY = 7
    DARK_GRAY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_CYAN = 11
    LIGHT_RED = 12
    LIGHT_MAGENTA = 13
    YELLOW = 14
    WHITE = 15


class TextAlign(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class StrokeType(enum.Enum):
    SINGLE = "single"
    DOUBLE = "double"


@dataclass(frozen=True)
class TableChars:
    top_right: str
    top_left: str
    bottom_right: str
    bottom_left: str
    horizontal: str
    top_separation: str
    bottom_separation: str
    vertical: str
    left_separation: str
    right_separation: str
    centre_separation: str


@dataclass(frozen=True)
class PixelChars:
    top: str
    bottom: str
    left: str
    right: str
    full: str
    center: str


@dataclass
class BorderOptions:
    min_width: int = 0
    min_height: int = 0
    stroke: StrokeType = StrokeType.DOUBLE
    align: TextAlign = TextAlign.CENTER


_DOUBLE = TableChars(*(cp437(c) for c in (187, 201, 188, 200, 205, 203, 202, 186, 204, 185, 206)))
_SINGLE = TableChars(*(cp437(c) for c in (191, 218, 217, 192, 196, 194, 193, 179, 195, 180, 197)))
_PIXEL = PixelChars(*(cp437(c) for c in (223, 220, 221, 222, 219, 254)))

_NAMED_KEYS = {
    0x26: "arrow_up",
    0x28: "arrow_down",
    0x25: "arrow_left",
    0x27: "arrow_right",
    0x20: "space",
    0x1B: "esc",
    0x0D: "enter",
    0x13: "pause",
}

_NUMPAD_OPERATORS = {
    0x6A: "*",
    0x6B: "+",
    0x6C: ",",
    0x6D: "-",
    0x6E: ".",
    0x6F: "/",
}


def vk_to_str(key: int) -> str:
    """Describe a virtual key code: a name, a single character, or ``none``."""
    if key in _NAMED_KEYS:
        return _NAMED_KEYS[key]
    if 0x41 <= key <= 0x5A or 0x30 <= key <= 0x39:
        return chr(key)
    if 0x60 <= key <= 0x69:
        return chr(ord("0") + key - 0x60)
    if key in _NUMPAD_OPERATORS:
        return _NUMPAD_OPERATORS[key]
    return "none"


def whitespace(count: int) -> str:
    """Return ``count`` spaces."""
    if count < 0:
        raise ValueError(f"negative whitespace count {count}")
    return " " * count


def clamp(value: int, start: int, end: int) -> int:
    """Keep ``value`` in the half-open range ``[start, end)``."""
    if value < start:
        value = start
    if value >= end:
        value = end - 1
    return value


def color(foreground: int, background: int) -> int:
    """Pack a foreground and background colour into one attribute."""
    return ((background & 0x0F) << 4) + (foreground & 0x0F)


def get_chars(stroke: StrokeType) -> TableChars:
    return _DOUBLE if stroke == StrokeType.DOUBLE else _SINGLE


def get_pixel_chars() -> PixelChars:
    return _PIXEL


def align_text(align: TextAlign, text: str, width: int) -> str:
    """Pad or cut ``text`` to ``width``; a trailing newline is kept."""
    if width < 0:
        raise ValueError(f"negative width {width}")
    has_line_break = text.endswith("\n")
    if has_line_break:
        text = text[:-1]

    if align == TextAlign.LEFT:
        text = text[:width]
        text += whitespace(width - len(text))
    elif align == TextAlign.RIGHT:
        text = text[max(0, len(text) - width):]
        text = whitespace(width - len(text)) + text
    else:
        diff = width - len(text)
        if diff >= 0:
            left = (diff + 1) // 2
            text = whitespace(left) + text + whitespace(diff - left)
        else:
            excess = -diff
            left = (excess + 1) // 2
            text = text[left:len(text) - (excess - left)]

    return text + "\n" if has_line_break else text


def text_with_border(options: BorderOptions, *args: str) -> str:
    """Frame the given lines with block characters."""
    max_width = max([options.min_width, *(len(arg) for arg in args)])
    max_height = max(options.min_height, len(args))
    chars = get_pixel_chars()

    lines = [chars.full + chars.top * max_width + chars.full]
    for row in range(max_height):
        body = align_text(options.align, args[row], max_width) if row < len(args) else whitespace(max_width)
        lines.append(chars.full + body + chars.full)
    lines.append(chars.full + chars.bottom * max_width + chars.full)
    return "\n".join(lines)


def string_replace(source: str, old: str, new: str) -> str:
    """Replace matches of ``old`` found in ``source`` at their original offsets."""
    result = source
    last = 0
    while (pos := source.find(old, last)) != -1:
        last = pos + 1
        if pos > len(result):
            raise IndexError(f"replacement position {pos} outside the result")
        result = result[:pos] + new + result[pos + len(old):]
        if last > len(source):
            break
    return result