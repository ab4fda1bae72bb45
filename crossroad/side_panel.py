"""The panel on the left of the screen with instructions and game info."""

from __future__ import annotations

from crossroad.console import Console
from crossroad.objects import BIRD, BIRD_REVERSE, DINOSAUR, DINOSAUR_REVERSE
from crossroad.ui import Widget
from crossroad.utilities import Color, TextAlign, align_text, get_pixel_chars

_HEADER_WIDTH = 33
_INFO_TOP = 28
_INSTRUCT_TOP = 11


def _centered(lines: tuple[str, ...], width: int) -> str:
    return "".join(align_text(TextAlign.CENTER, line, width) for line in lines)


class SidePanel(Widget):
    """Headers, key instructions and a free-form information block."""

    def __init__(self) -> None:
        super().__init__()
        self.x = 0
        self.y = 0
        self.width = 33
        self.height = 47
        self.info = ""

    def set_info(self, info: str) -> None:
        self.info = info

    def write_header(self, console: Console, y: int, header: str, attr: int = Color.WHITE) -> None:
        """Draw a framed, centred header whose text sits on row ``y + 1``."""
        pixel = get_pixel_chars()
        console.put(self.x + self.width, y, pixel.full, Color.YELLOW)
        console.put(self.x + self.width, y + 2, pixel.full, Color.YELLOW)
        for offset in range(self.width):
            console.put(self.x + offset, y, pixel.bottom, Color.YELLOW)
            console.put(self.x + offset, y + 2, pixel.top, Color.YELLOW)
        console.write(self.x, y + 1, align_text(TextAlign.CENTER, header, _HEADER_WIDTH), attr)

    def write_info(self, console: Console, x: int, y: int, text: str, attr: int) -> None:
        console.write(self.x + x, self.y + _INFO_TOP + y, text, attr)

    def clear_info(self, console: Console) -> None:
        console.clear_area(self.x, self.y + 29, self.width, 8)

    def write_instruct(self, console: Console, x: int, y: int, text: str, attr: int) -> None:
        console.write(self.x + x, self.y + _INSTRUCT_TOP + y, text, attr)

    def clear_instruct(self, console: Console) -> None:
        console.clear_area(self.x, self.y + 12, self.width, 15)

    def on_key_pressed(self, key: int) -> bool:
        return False

    def draw(self, console: Console) -> None:
        self.clear(console)
        self.write_header(console, self.y + 26, "INFORMATION")
        self.write_header(console, self.y + 34, "")
        self.write_info(console, 0, 2, self.info, Color.DARK_GRAY)
        self.write_header(console, self.y + 9, "INSTRUCTION")

        width = self.width
        self.write_instruct(
            console, 0, 2, _centered(("         CONTROL          \n",), width), Color.WHITE
        )
        self.write_instruct(
            console,
            0,
            3,
            _centered(("     Use Arrow key        \n", "       to move            \n"), width),
            Color.DARK_GRAY,
        )
        self.write_instruct(
            console, 0, 7, _centered(("          SETTING         \n",), width), Color.WHITE
        )
        self.write_instruct(
            console,
            0,
            8,
            _centered(
                (
                    "     Save game: L         \n",
                    "     Load game: T         \n",
                    "     Pause/Continue: P    \n",
                    "     Mute/Unmute: M       \n",
                    "     Menu: Esc            \n",
                ),
                width,
            ),
            Color.DARK_GRAY,
        )

        full = get_pixel_chars().full
        for row in range(self.y, self.height):
            console.put(self.x + self.width, row, full, Color.YELLOW)

        console.draw_sprite(BIRD, 5, 2)
        console.draw_sprite(BIRD_REVERSE, 21, 2)
        console.draw_sprite(DINOSAUR, 5, 40)
        console.draw_sprite(DINOSAUR_REVERSE, 21, 40)