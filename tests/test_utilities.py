import pytest

from crossroad.utilities import (
    BorderOptions,
    Color,
    StrokeType,
    TextAlign,
    align_text,
    clamp,
    color,
    cp437,
    get_chars,
    get_pixel_chars,
    string_replace,
    text_with_border,
    vk_to_str,
    whitespace,
)


@pytest.mark.parametrize(
    "key, name",
    [(0x26, "arrow_up"), (0x28, "arrow_down"), (0x1B, "esc"), (0x0D, "enter"), (0x20, "space"), (0x13, "pause")],
)
def test_vk_named(key, name):
    assert vk_to_str(key) == name


def test_vk_letters_and_digits():
    assert vk_to_str(0x41) == "A"
    assert vk_to_str(0x5A) == "Z"
    assert vk_to_str(0x30) == "0"
    assert len(vk_to_str(0x60)) == 1


def test_vk_unknown():
    assert vk_to_str(0x07) == "none"


def test_whitespace():
    assert whitespace(3) == "   "
    assert whitespace(0) == ""
    with pytest.raises(ValueError):
        whitespace(-1)


def test_clamp():
    assert clamp(-5, 0, 10) == 0
    assert clamp(10, 0, 10) == 9
    assert clamp(4, 0, 10) == 4


@pytest.mark.parametrize("fg", list(Color))
@pytest.mark.parametrize("bg", [Color.BLACK, Color.YELLOW, Color.WHITE])
def test_color_packs_nibbles(fg, bg):
    packed = color(fg, bg)
    assert packed & 0x0F == fg
    assert packed >> 4 == bg


def test_cp437_block():
    assert cp437(219) == "\u2588"
    assert get_pixel_chars().full == cp437(219)


def test_get_chars():
    assert get_chars(StrokeType.DOUBLE).top_left == cp437(201)
    assert get_chars(StrokeType.SINGLE).vertical == cp437(179)


def test_align_center_button_label():
    assert align_text(TextAlign.CENTER, "Ok", 4) == " Ok "


@pytest.mark.parametrize("text", ["", "a", "Cancel", "a longer label here"])
@pytest.mark.parametrize("width", [0, 3, 8, 33])
@pytest.mark.parametrize("align", list(TextAlign))
def test_align_width_invariant(align, text, width):
    assert len(align_text(align, text, width)) == width


def test_align_center_keeps_text_when_padding():
    out = align_text(TextAlign.CENTER, "Cancel", 8)
    assert out.strip() == "Cancel"


def test_align_left_and_right():
    assert align_text(TextAlign.LEFT, "abcdef", 3) == "abc"
    assert align_text(TextAlign.LEFT, "ab", 4).startswith("ab")
    assert align_text(TextAlign.RIGHT, "ab", 4).endswith("ab")


def test_align_keeps_newline():
    out = align_text(TextAlign.CENTER, "Level\n", 33)
    assert out.endswith("\n")
    assert len(out) == 34


def test_align_negative_width():
    with pytest.raises(ValueError):
        align_text(TextAlign.LEFT, "x", -1)


def test_text_with_border_menu_box():
    chars = get_pixel_chars()
    box = text_with_border(BorderOptions(28, 20), "")
    lines = box.split("\n")
    assert len(lines) == 22
    assert all(len(line) == 30 for line in lines)
    assert lines[0] == chars.full + chars.top * 28 + chars.full
    assert lines[-1] == chars.full + chars.bottom * 28 + chars.full


def test_text_with_border_grows_to_content():
    box = text_with_border(BorderOptions(), "hello", "hi")
    lines = box.split("\n")
    assert len(lines) == 4
    assert "hello" in lines[1]
    assert lines[2].strip(get_pixel_chars().full).strip() == "hi"


def test_string_replace():
    assert string_replace("a-b-c", "-", "+") == "a+b+c"
    assert string_replace("abc", "x", "y") == "abc"