import io

import pytest

from crossroad.abstract_factory import (
    FactoryProducer,
    Rectangle,
    RoundedRectangle,
    RoundedShapeFactory,
    ShapeFactory,
    init_shape,
    main,
)

MENU = "1: Rectangle, 2: Rounded Rectangle\n"


def _drawn(shape):
    out = io.StringIO()
    shape.draw(out)
    return out.getvalue()


def test_rectangle_draw():
    assert _drawn(Rectangle()) == "Rectangle\n"


def test_rounded_rectangle_draw():
    assert _drawn(RoundedRectangle()) == "Rounded Rectangle\n"


@pytest.mark.parametrize(
    "kind, text", [(1, "Rectangle\n"), (2, "Rounded Rectangle\n")]
)
def test_init_shape_known_kinds(kind, text):
    assert _drawn(init_shape(kind)) == text


@pytest.mark.parametrize("kind", [0, 3, -1])
def test_init_shape_unknown_kind(kind):
    assert init_shape(kind) is None


def test_factories_produce_their_family():
    assert _drawn(ShapeFactory().get_shape()) == "Rectangle\n"
    assert _drawn(RoundedShapeFactory().get_shape()) == "Rounded Rectangle\n"


def test_get_factory_repeats_until_valid():
    out = io.StringIO()
    factory = FactoryProducer().get_factory(iter(["0", "3", "2"]), out)
    assert out.getvalue() == MENU * 3
    assert _drawn(factory.get_shape()) == "Rounded Rectangle\n"


def test_get_factory_first_choice():
    out = io.StringIO()
    factory = FactoryProducer().get_factory(iter(["1"]), out)
    assert out.getvalue() == MENU
    assert _drawn(factory.get_shape()) == "Rectangle\n"


def test_get_factory_leaves_remaining_tokens():
    reader = iter(["1", "2"])
    FactoryProducer().get_factory(reader, io.StringIO())
    assert list(reader) == ["2"]


def test_get_factory_end_of_input():
    with pytest.raises(EOFError):
        FactoryProducer().get_factory(iter(["5"]), io.StringIO())


def test_get_factory_bad_number():
    with pytest.raises(ValueError):
        FactoryProducer().get_factory(iter(["abc"]), io.StringIO())


def test_main_asks_twice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == MENU + "Rectangle\n" + MENU + "Rounded Rectangle\n"


def test_main_direct(capsys):
    assert main(["--direct", "rounded"]) == 0
    assert capsys.readouterr().out == "Rounded Rectangle\n"