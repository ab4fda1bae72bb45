import pytest

from crossroad.config import Key
from crossroad.console import Console
from crossroad.ui import Button, Widget
from crossroad.utilities import Color, color


def test_widget_is_abstract():
    with pytest.raises(TypeError):
        Widget()


def test_button_size_from_label():
    button = Button(1, 2, "ab\ncdef")
    assert (button.width, button.height) == (4, 2)
    assert (button.x, button.y) == (1, 2)


def test_button_empty_label():
    button = Button()
    assert (button.width, button.height) == (0, 1)


def test_show_hide_highlight():
    button = Button(0, 0, "x")
    assert not button.shown and not button.hovered
    button.show()
    button.highlight()
    assert button.shown and button.hovered
    button.hide()
    button.unhighlight()
    assert not button.shown and not button.hovered


def test_button_draw_colours():
    console = Console(20, 5)
    button = Button(2, 1, "Ok")
    button.draw(console)
    assert button.shown
    assert console.row_text(1)[2:4] == "Ok"
    assert console.cell(2, 1).attr == Color.YELLOW
    button.highlight()
    button.draw(console)
    assert console.cell(2, 1).attr == color(Color.BLACK, Color.YELLOW)


def test_button_key_compares_with_config_slot():
    button = Button(0, 0, "Ok")
    assert button.on_key_pressed(Key.KEY_ENTER) is True
    assert button.on_key_pressed(0x0D) is False


def test_widget_clear_blanks_area():
    console = Console(20, 5)
    button = Button(3, 2, "Hello")
    button.draw(console)
    button.clear(console)
    assert console.row_text(2).strip() == ""