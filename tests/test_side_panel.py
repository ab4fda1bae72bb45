from crossroad.console import Console
from crossroad.side_panel import SidePanel
from crossroad.utilities import Color, TextAlign, align_text, get_pixel_chars


def test_set_info_stores_text():
    panel = SidePanel()
    panel.set_info("hello\n")
    assert panel.info == "hello\n"


def test_on_key_pressed_never_consumes():
    panel = SidePanel()
    assert panel.on_key_pressed(0x26) is False
    assert panel.on_key_pressed(0x0D) is False


def test_write_header_frames_centered_text():
    console = Console()
    panel = SidePanel()
    panel.write_header(console, 3, "TITLE", Color.WHITE)
    pixel = get_pixel_chars()
    assert console.row_text(3)[: panel.width] == pixel.bottom * panel.width
    assert console.row_text(5)[: panel.width] == pixel.top * panel.width
    assert console.cell(panel.width, 3).char == pixel.full
    assert console.cell(panel.width, 5).attr == Color.YELLOW
    assert console.row_text(4)[:33] == align_text(TextAlign.CENTER, "TITLE", 33)


def test_write_info_and_clear_info():
    console = Console()
    panel = SidePanel()
    panel.write_info(console, 0, 2, "abc", Color.DARK_GRAY)
    row = panel.y + 28 + 2
    assert console.row_text(row).startswith("abc")
    assert console.cell(0, row).attr == Color.DARK_GRAY
    panel.clear_info(console)
    assert console.row_text(row)[: panel.width].strip() == ""


def test_write_instruct_and_clear_instruct():
    console = Console()
    panel = SidePanel()
    panel.write_instruct(console, 1, 3, "move", Color.WHITE)
    row = panel.y + 11 + 3
    assert console.row_text(row)[1:5] == "move"
    panel.clear_instruct(console)
    assert console.row_text(row)[: panel.width].strip() == ""


def test_draw_shows_headers_info_and_border():
    console = Console()
    panel = SidePanel()
    panel.set_info("status line")
    panel.draw(console)
    assert "INFORMATION" in console.row_text(27)
    assert "INSTRUCTION" in console.row_text(10)
    assert "CONTROL" in console.row_text(13)
    assert "status line" in console.row_text(30)
    full = get_pixel_chars().full
    for row in range(panel.height):
        assert console.cell(panel.width, row).char == full
        assert console.cell(panel.width, row).attr == Color.YELLOW