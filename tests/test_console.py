import io

import pytest

from crossroad.console import Cell, Console, InputHandler
from crossroad.utilities import Color, cp437


class Recorder(InputHandler):
    def __init__(self):
        self.keys = []

    def on_key_pressed(self, key):
        self.keys.append(key)
        return True


def test_new_console_is_blank():
    console = Console(10, 4)
    assert console.row_text(0) == " " * 10
    assert console.cell(9, 3) == Cell()


def test_invalid_size():
    with pytest.raises(ValueError):
        Console(0, 5)


def test_write_and_attr():
    console = Console(10, 4)
    console.write(1, 2, "hello", Color.YELLOW)
    assert console.row_text(2)[1:6] == "hello"
    assert console.cell(1, 2).attr == Color.YELLOW


def test_write_default_white():
    console = Console(10, 4)
    console.write(0, 0, "x")
    assert console.cell(0, 0) == Cell("x", Color.WHITE)


def test_write_multiline():
    console = Console(10, 4)
    console.write(2, 0, "ab\ncd")
    assert console.row_text(0)[2:4] == "ab"
    assert console.row_text(1)[2:4] == "cd"


def test_write_negative_coordinates_wrap():
    console = Console(10, 5)
    console.write(-3, -1, "abc")
    assert console.row_text(4).endswith("abc")


def test_write_clipped_at_right_edge():
    console = Console(10, 2)
    console.write(8, 0, "abcd")
    assert console.row_text(0)[8:] == "ab"
    assert console.row_text(1) == " " * 10


def test_clear_area():
    console = Console(10, 3)
    console.write(0, 0, "hello")
    console.clear_area(0, 0, 2, 1)
    assert console.row_text(0).startswith("  llo")


def test_cls():
    console = Console(6, 3)
    console.write(0, 0, "abc\ndef", Color.RED)
    console.cls()
    assert all(console.cell(x, y) == Cell() for x in range(6) for y in range(3))


def test_put_runs_on_to_next_row():
    console = Console(4, 2)
    console.put(5, 0, "x", Color.GREEN)
    assert console.cell(1, 1) == Cell("x", Color.GREEN)


def test_put_outside_buffer_is_ignored():
    console = Console(4, 2)
    console.put(0, 5, "x", Color.GREEN)
    assert console.row_text(0) + console.row_text(1) == " " * 8


def test_cell_off_screen():
    with pytest.raises(IndexError):
        Console(4, 2).cell(4, 0)


def test_draw_sprite_line_colors():
    console = Console(10, 2)
    drawn = console.draw_sprite_line("B W", 0, 0)
    block = cp437(219)
    assert drawn == block + " " + block
    assert console.cell(0, 0) == Cell(block, Color.CYAN)
    assert console.cell(1, 0) == Cell(" ", Color.CYAN)
    assert console.cell(2, 0) == Cell(block, Color.WHITE)


def test_draw_sprite_limits_lines(tmp_path):
    path = tmp_path / "sprite.txt"
    path.write_text("\n".join(["R"] * 25), encoding="utf-8")
    console = Console(5, 30)
    console.draw_sprite(path, 1, 0)
    block = cp437(219)
    assert all(console.cell(1, y) == Cell(block, Color.RED) for y in range(20))
    assert console.cell(1, 20) == Cell()


def test_draw_sprite_missing_file(tmp_path):
    console = Console(5, 3)
    console.draw_sprite(tmp_path / "missing.txt", 0, 0)
    assert console.row_text(0) == " " * 5


def test_wait_input_dispatches_in_order():
    console = Console(5, 3)
    handler = Recorder()
    for key in (0x26, 0x28, 0x0D):
        console.push_key(key)
    console.wait_input(handler)
    assert handler.keys == [0x26, 0x28, 0x0D]
    console.wait_input(handler)
    assert len(handler.keys) == 3


def test_wait_input_batch_limit():
    console = Console(5, 3)
    handler = Recorder()
    for key in range(130):
        console.push_key(key)
    console.wait_input(handler)
    assert len(handler.keys) == 128
    console.wait_input(handler)
    assert handler.keys == list(range(130))


def test_wait_input_polls_key_source():
    console = Console(5, 3)
    handler = Recorder()
    console.key_source = lambda: [0x41, 0x42]
    console.wait_input(handler)
    assert handler.keys == [0x41, 0x42]


def test_render_and_draw():
    console = Console(6, 2)
    console.write(0, 1, "hey", Color.YELLOW)
    rendered = console.render()
    assert rendered.startswith("\x1b[1;1H")
    assert "hey" in rendered
    assert rendered.endswith("\x1b[0m")
    stream = io.StringIO()
    console.draw(stream)
    assert stream.getvalue() == rendered