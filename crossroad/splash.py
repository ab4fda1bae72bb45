"""The loading screen shown before the main menu."""

from __future__ import annotations

import time
from typing import Callable, Optional

from crossroad.console import Console
from crossroad.utilities import Color

SS_CAR = "UserInterface/SplashScreen/SS-car.txt"
SS_NAME = "UserInterface/SplashScreen/SS-name.txt"
SS_LOAD = "UserInterface/SplashScreen/SS-loading"
LOADING_STEPS = 4


class SplashScreen:
    """Draws the title art and a loading bar that fills in four steps."""

    def __init__(self, console: Console, sleep: Optional[Callable[[float], None]] = None) -> None:
        self.console = console
        self.sleep = sleep if sleep is not None else time.sleep

    def draw(self) -> None:
        """Show the splash, waiting one second per loading step, then clear."""
        console = self.console
        console.draw_sprite(SS_CAR, 58, 9)
        console.draw_sprite(SS_NAME, 42, 23)
        console.write(26, 32, "Loading....", Color.LIGHT_GREEN)
        console.draw()
        for step in range(1, LOADING_STEPS + 1):
            self.sleep(1.0)
            console.draw_sprite(f"{SS_LOAD}{step}.txt", 18, 33)
            console.draw()
        console.cls()