import io

import pytest

from crossroad.app import TerminalKeys, build_app, main
from crossroad.config import Key
from crossroad.console import Console


def test_arrow_sequences():
    keys = TerminalKeys(io.StringIO("\x1b[A\x1b[B\x1b[C\x1b[D")).poll()
    assert keys == [0x26, 0x28, 0x27, 0x25]


def test_letters_enter_and_escape():
    assert TerminalKeys(io.StringIO("p\r")).poll() == [0x50, 0x0D]
    assert TerminalKeys(io.StringIO("\x1b")).poll() == [0x1B]


def test_digits_space_and_backspace():
    assert TerminalKeys(io.StringIO("12 \x7f")).poll() == [ord("1"), ord("2"), 0x20, 0x08]


def test_console_arrow_prefix():
    assert TerminalKeys(io.StringIO("\xe0H\x00P")).poll() == [0x26, 0x28]


def test_poll_drains_stream():
    keys = TerminalKeys(io.StringIO("m"))
    assert keys.poll() == [ord("M")]
    assert keys.poll() == []


def test_build_app_loads_config(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("frame_length=40,\n", encoding="utf-8")
    console = Console()
    menu = build_app(path, console)
    assert menu.config.get(Key.FRAME_LENGTH) == 40
    assert menu.console is console
    assert menu.game.config is menu.config
    assert menu.game.panel is menu.panel


def test_build_app_missing_config_uses_defaults(tmp_path):
    menu = build_app(tmp_path / "absent.ini", Console())
    assert menu.config.get(Key.FRAME_LENGTH) == 20
    assert menu.shown is True


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0