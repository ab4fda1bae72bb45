"""Shapes read from input and created through a factory function."""

from __future__ import annotations

import abc
import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, TextIO

PI = 3.1416


def _read_tokens(stream: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-separated tokens lazily, line by line."""
    for line in stream:
        yield from line.split()


def _next_token(reader: Iterator[str]) -> str:
    try:
        return next(reader)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _next_float(reader: Iterator[str]) -> float:
    return float(_next_token(reader))


def _next_int(reader: Iterator[str]) -> int:
    return int(_next_token(reader))


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0


class Shape(abc.ABC):
    """A shape whose dimensions are read from input."""

    @abc.abstractmethod
    def read(self, reader: Iterator[str], out: TextIO) -> None:
        """Prompt on ``out`` and read the dimensions from ``reader``."""

    @abc.abstractmethod
    def area(self) -> float:
        """Return the shape's area."""


@dataclass
class Rectangle(Shape):
    top_left: Point = field(default_factory=Point)
    width: float = 0.0
    height: float = 0.0

    def read(self, reader: Iterator[str], out: TextIO) -> None:
        out.write("Rectangle\n")
        out.write("Top Left: ")
        x = _next_float(reader)
        y = _next_float(reader)
        self.top_left = Point(x, y)
        out.write("Width: ")
        self.width = _next_float(reader)
        out.write("Height: ")
        self.height = _next_float(reader)

    def area(self) -> float:
        return self.width * self.height


@dataclass
class Circle(Shape):
    center: Point = field(default_factory=Point)
    radius: float = 0.0

    def read(self, reader: Iterator[str], out: TextIO) -> None:
        out.write("Circle\n")
        out.write("Center: ")
        x = _next_float(reader)
        y = _next_float(reader)
        self.center = Point(x, y)
        out.write("Radius: ")
        self.radius = _next_float(reader)

    def area(self) -> float:
        return PI * self.radius * self.radius


def init_shape(kind: int) -> Optional[Shape]:
    """Return a rectangle for 1, a circle for 2, otherwise None."""
    if kind == 1:
        return Rectangle()
    if kind == 2:
        return Circle()
    return None


class ShapeArray:
    """A list of shapes read interactively."""

    def __init__(self) -> None:
        self.shapes: list[Shape] = []

    def read(self, reader: Iterator[str], out: TextIO) -> None:
        """Read a count, then a kind and dimensions for each shape."""
        out.write("How many Shape: ")
        size = _next_int(reader)
        for _ in range(size):
            while True:
                out.write("1: Rectangle; 2: Circle\n")
                shape = init_shape(_next_int(reader))
                if shape is not None:
                    break
            shape.read(reader, out)
            self.shapes.append(shape)

    def output_area(self, out: TextIO) -> None:
        for shape in self.shapes:
            out.write(f"Area: {shape.area():g}\n")


def _read_menu(reader: Iterator[str], out: TextIO) -> list[Shape]:
    """Collect shapes from a menu until Exit, then read each one."""
    shapes: list[Shape] = []
    while True:
        out.write("1: Rectangle, 2: Circle, 3: Exit\n")
        kind = _next_int(reader)
        if kind == 3:
            break
        shape = init_shape(kind)
        if shape is not None:
            shapes.append(shape)
    for shape in shapes:
        shape.read(reader, out)
    return shapes


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="crossroad-areas", description="Read shapes and print their areas."
    )
    parser.add_argument(
        "--menu", action="store_true", help="pick shapes from a menu without printing areas"
    )
    args = parser.parse_args(argv)
    reader = _read_tokens(sys.stdin)
    out = sys.stdout

    if args.menu:
        _read_menu(reader, out)
        return 0

    shapes = ShapeArray()
    shapes.read(reader, out)
    shapes.output_area(out)
    return 0