import random

import pytest

from crossroad.config import Config
from crossroad.console import Console
from crossroad.game import Difficulty, Game
from crossroad.main_menu import MainMenu
from crossroad.objects import PEOPLE_FIGURE
from crossroad.side_panel import SidePanel
from crossroad.utilities import Color, color, get_pixel_chars

UP, DOWN, ENTER = 0x26, 0x28, 0x0D


@pytest.fixture
def parts():
    console = Console()
    config = Config()
    panel = SidePanel()
    game = Game(console, config, panel, rng=random.Random(3))
    menu = MainMenu(console, config, game, panel)
    return console, game, menu


def test_show_draws_scene(parts):
    console, _, menu = parts
    menu.show()
    assert console.cell(34, 5).char == get_pixel_chars().bottom
    assert console.cell(34, 5).attr == Color.RED
    first = menu.buttons[0]
    assert "New Game" in console.row_text(first.y)
    assert console.cell(first.x, first.y).attr == color(Color.BLACK, Color.YELLOW)
    figure_row = PEOPLE_FIGURE.split("\n")[0]
    assert console.row_text(42)[93:93 + len(figure_row)] == figure_row


def test_navigation_wraps(parts):
    _, _, menu = parts
    assert menu.on_key_pressed(UP) is True
    assert menu.hovered_button == len(menu.buttons) - 1
    assert menu.on_key_pressed(DOWN) is True
    assert menu.hovered_button == 0


def test_exit_button_hides_menu(parts):
    _, _, menu = parts
    menu.on_key_pressed(UP)
    assert menu.on_key_pressed(ENTER) is True
    assert menu.shown is False
    assert all(not b.shown for b in menu.buttons)


def test_hidden_menu_passes_keys_to_game(parts):
    _, game, menu = parts
    menu.hide()
    assert menu.on_key_pressed(77) is False
    assert game.mute is True


def test_setting_button_changes_difficulty(parts):
    console, game, menu = parts
    menu.hovered_button = 3
    console.push_key(0x33)
    console.push_key(ENTER)
    menu.on_key_pressed(ENTER)
    assert game.difficulty == Difficulty.HARD
    assert menu.shown is True


def test_start_game_runs_until_hidden(parts):
    console, game, menu = parts
    sleeps = []

    def fake_sleep(ms):
        sleeps.append(ms)
        game.hide()

    menu.sleep_ms = fake_sleep
    console.push_key(ENTER)
    menu.start_game()
    assert sleeps == [200, 20]
    assert game.shown is False
    assert "Level" in menu.panel.info


def test_new_game_resets_level(parts):
    console, game, menu = parts
    game.level = 5
    menu.sleep_ms = lambda ms: game.hide()
    console.push_key(ENTER)
    menu.new_game()
    assert game.level == 1