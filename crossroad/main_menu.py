"""The title screen menu that starts and drives games."""

from __future__ import annotations

import time
from typing import Callable, Optional

from crossroad.config import Config, Key
from crossroad.console import Console
from crossroad.game import Game
from crossroad.ingame_menu import BUTTON_LABELS
from crossroad.objects import PEOPLE_FIGURE
from crossroad.popup import alert
from crossroad.side_panel import SidePanel
from crossroad.splash import SS_NAME
from crossroad.ui import Button, Widget
from crossroad.utilities import BorderOptions, Color, get_pixel_chars, text_with_border


def _sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000.0)


class MainMenu(Widget):
    """New game, continue, load, setting and exit."""

    def __init__(
        self,
        console: Console,
        config: Config,
        game: Game,
        panel: Optional[SidePanel] = None,
        x: int = 80,
        y: int = 10,
        width: int = 28,
        height: int = 20,
    ) -> None:
        super().__init__()
        self.console = console
        self.config = config
        self.game = game
        self.panel = panel if panel is not None else game.panel
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

    def new_game(self) -> None:
        self.game.reset()
        self.start_game()

    def start_game(self) -> None:
        """Run the game loop until the game is hidden."""
        alert(self.console, self.config, 65, 17, "                ARE YOU READY?")
        self.sleep_ms(200)
        self.game.show()
        self.game.resume()
        while self.game.shown:
            self.console.wait_input(self.game)
            self.game.update()
            self.game.draw()
            self.panel.draw(self.console)
            self.sleep_ms(self.config.get(Key.FRAME_LENGTH))
            self.console.draw()

    def _draw_side_road(self, console: Console, y: int, attr: int) -> None:
        bottom = get_pixel_chars().bottom
        for offset in range(117):
            console.put(34 + offset, y, bottom, attr)

    def draw(self, console: Console) -> None:
        if not self.shown:
            return
        console.draw_sprite(SS_NAME, 61, 33)
        self._draw_side_road(console, 5, Color.RED)
        self._draw_side_road(console, 41, Color.RED)
        console.write(93, 42, PEOPLE_FIGURE, Color.WHITE)
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
        self.draw(self.console)

    def hide(self) -> None:
        for button in self.buttons:
            button.hide()
        self.console.clear_area(self.x - 1, self.y - 1, self.width + 2, self.height + 2)
        self.shown = False

    def on_key_pressed(self, key: int) -> bool:
        if self.shown:
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
        return self.game.on_key_pressed(key)

    def on_button_pressed(self, button_id: int) -> None:
        self.hide()
        if button_id == 0:
            self.new_game()
        elif button_id == 1:
            self.start_game()
        elif button_id == 2:
            self.game.load()
            self.start_game()
        elif button_id == 3:
            self.game.setting()
        elif button_id == 4:
            self.hide()
            return
        self.show()