"""Command-line entry point: terminal input, the splash and the main loop."""

from __future__ import annotations

import argparse
import contextlib
import os
import select
import sys
import time
from typing import Iterator, Optional, TextIO

from crossroad.config import Config, Key
from crossroad.console import Console
from crossroad.game import Game
from crossroad.main_menu import MainMenu
from crossroad.side_panel import SidePanel
from crossroad.splash import SplashScreen
from crossroad.utilities import TextAlign, align_text

CONFIG_PATH = "Config/config.ini"

VK_BACK = 0x08
VK_RETURN = 0x0D
VK_ESCAPE = 0x1B
VK_SPACE = 0x20
VK_LEFT = 0x25
VK_UP = 0x26
VK_RIGHT = 0x27
VK_DOWN = 0x28

_ANSI_ARROWS = {"A": VK_UP, "B": VK_DOWN, "C": VK_RIGHT, "D": VK_LEFT}
_CONSOLE_ARROWS = {"H": VK_UP, "P": VK_DOWN, "M": VK_RIGHT, "K": VK_LEFT}

_HIDE_CURSOR = "\x1b[?25l\x1b[2J"
_RESTORE = "\x1b[0m\x1b[2J\x1b[H\x1b[?25h"


def _decode(text: str) -> list[int]:
    """Turn raw terminal input into virtual key codes."""
    keys: list[int] = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        pos += 1
        if char == "\x1b":
            if pos < len(text) and text[pos] in "[O":
                pos += 1
                while pos < len(text) and (text[pos].isdigit() or text[pos] == ";"):
                    pos += 1
                if pos < len(text):
                    final = text[pos]
                    pos += 1
                    if final in _ANSI_ARROWS:
                        keys.append(_ANSI_ARROWS[final])
            else:
                keys.append(VK_ESCAPE)
        elif char in "\xe0\x00":
            if pos < len(text):
                code = _CONSOLE_ARROWS.get(text[pos])
                pos += 1
                if code is not None:
                    keys.append(code)
        elif char in "\r\n":
            keys.append(VK_RETURN)
        elif char in "\x7f\x08":
            keys.append(VK_BACK)
        elif char == " ":
            keys.append(VK_SPACE)
        elif char.isascii() and char.isalnum():
            keys.append(ord(char.upper()))
    return keys


class TerminalKeys:
    """Non-blocking reader of key presses from a terminal stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = sys.stdin if stream is None else stream

    def _read_available(self) -> str:
        try:
            fd = self.stream.fileno()
        except (AttributeError, OSError, ValueError):
            return self.stream.read() or ""
        if os.name == "nt":
            import msvcrt

            chars = []
            while msvcrt.kbhit():
                chars.append(msvcrt.getwch())
            return "".join(chars)
        ready, _, _ = select.select([fd], [], [], 0)
        if not ready:
            return ""
        return os.read(fd, 1024).decode("utf-8", errors="replace")

    def poll(self) -> list[int]:
        """Return the virtual key codes typed since the last poll."""
        return _decode(self._read_available())


@contextlib.contextmanager
def _raw_terminal(stream: TextIO) -> Iterator[None]:
    try:
        fd = stream.fileno()
        interactive = stream.isatty()
    except (AttributeError, OSError, ValueError):
        interactive = False
    if os.name != "posix" or not interactive:
        yield
        return
    import termios
    import tty

    saved = termios.tcgetattr(fd)
    tty.setcbreak(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def build_app(config_path=CONFIG_PATH, console: Optional[Console] = None) -> MainMenu:
    """Load the configuration and wire the game, side panel and main menu."""
    config = Config()
    config.load(config_path)
    console = console if console is not None else Console()
    panel = SidePanel()
    game = Game(console, config, panel)
    return MainMenu(console, config, game, panel)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="crossroad", description="Cross the road game.")
    parser.add_argument("--config", default=CONFIG_PATH, help="settings file")
    parser.add_argument("--no-splash", action="store_true", help="skip the loading screen")
    args = parser.parse_args(argv)

    menu = build_app(args.config)
    console = menu.console
    panel = menu.panel
    console.key_source = TerminalKeys(sys.stdin).poll
    title = align_text(TextAlign.CENTER, "Cross the road\n", panel.width)

    with _raw_terminal(sys.stdin):
        sys.stdout.write(_HIDE_CURSOR)
        try:
            if not args.no_splash:
                SplashScreen(console).draw()
            panel.show()
            menu.show()
            while menu.shown:
                console.wait_input(menu)
                menu.draw(console)
                panel.set_info(title)
                panel.draw(console)
                console.draw()
                time.sleep(menu.config.get(Key.FRAME_LENGTH) / 1000.0)
        except KeyboardInterrupt:
            pass
        finally:
            sys.stdout.write(_RESTORE)
            sys.stdout.flush()
    return 0