"""Shapes chosen through interchangeable factories."""

from __future__ import annotations

import abc
import argparse
import sys
from typing import Iterable, Iterator, Optional, TextIO

MENU = "1: Rectangle, 2: Rounded Rectangle\n"


def _read_tokens(stream: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-separated tokens lazily, line by line."""
    for line in stream:
        yield from line.split()


def _next_int(reader: Iterator[str]) -> int:
    try:
        token = next(reader)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    return int(token)


class Shape(abc.ABC):
    """Something that can describe itself."""

    @abc.abstractmethod
    def draw(self, out: TextIO) -> None:
        """Write the shape's name to ``out``."""


class Rectangle(Shape):
    def draw(self, out: TextIO) -> None:
        out.write("Rectangle\n")


class RoundedRectangle(Shape):
    def draw(self, out: TextIO) -> None:
        out.write("Rounded Rectangle\n")


def init_shape(kind: int) -> Optional[Shape]:
    """Return a rectangle for 1, a rounded rectangle for 2, otherwise None."""
    if kind == 1:
        return Rectangle()
    if kind == 2:
        return RoundedRectangle()
    return None


class AbstractFactory(abc.ABC):
    """Produces one family of shapes."""

    @abc.abstractmethod
    def get_shape(self) -> Shape:
        """Create a shape of this factory's family."""


class ShapeFactory(AbstractFactory):
    def get_shape(self) -> Shape:
        return Rectangle()


class RoundedShapeFactory(AbstractFactory):
    def get_shape(self) -> Shape:
        return RoundedRectangle()


class FactoryProducer:
    """Asks which family is wanted and hands out the matching factory."""

    def get_factory(self, reader: Iterator[str], out: TextIO) -> AbstractFactory:
        """Prompt until 1 or 2 is read; raises EOFError or ValueError on bad input."""
        while True:
            out.write(MENU)
            kind = _next_int(reader)
            if kind == 1:
                return ShapeFactory()
            if kind == 2:
                return RoundedShapeFactory()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="crossroad-shapes", description="Draw shapes made by factories."
    )
    parser.add_argument(
        "--direct",
        choices=("rectangle", "rounded"),
        help="draw one shape without asking for a factory",
    )
    args = parser.parse_args(argv)
    out = sys.stdout

    if args.direct is not None:
        shape = Rectangle() if args.direct == "rectangle" else RoundedRectangle()
        shape.draw(out)
        return 0

    reader = _read_tokens(sys.stdin)
    for _ in range(2):
        factory = FactoryProducer().get_factory(reader, out)
        factory.get_shape().draw(out)
    return 0