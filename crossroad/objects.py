"""Moving things on the road and the person crossing it."""

from __future__ import annotations

import abc
import enum
import math
import time
from typing import Optional

from crossroad.console import Console
from crossroad.utilities import Color, cp437

CAR = "Object/Draw/car.txt"
BIRD = "Object/Draw/bird.txt"
BIRD_REVERSE = "Object/Draw/birdR.txt"
DINOSAUR = "Object/Draw/dinosaur.txt"
DINOSAUR_REVERSE = "Object/Draw/dinosaurR.txt"
TRUCK = "Object/Draw/truck.txt"
TRUCK_REVERSE = "Object/Draw/truckR.txt"


def _now_ms() -> float:
    return time.monotonic() * 1000.0


class ObjectType(enum.IntEnum):
    TRUCK = 0
    CAR = 1
    DINOSAUR = 2
    BIRD = 3
    PEOPLE = 4


class GameObject(abc.ABC):
    """A rectangle with a grid position, a precise position and a velocity."""

    WIDTH = 0
    HEIGHT = 0
    SPRITE: Optional[str] = None
    SPRITE_REVERSE: Optional[str] = None

    def __init__(self, x: int = 0, y: int = 0, attr: int = Color.WHITE) -> None:
        self.x = int(x)
        self.y = int(y)
        self.abs_x = float(self.x)
        self.abs_y = float(self.y)
        self.attr = int(attr)
        self.width = self.WIDTH
        self.height = self.HEIGHT
        self.shown = False
        self.vel_x = 1
        self.vel_y = 1
        self.last_moving_time = _now_ms()

    @property
    @abc.abstractmethod
    def kind(self) -> ObjectType:
        """The object's type tag, used when saving."""

    def distance_from(self, other: "GameObject") -> float:
        """Distance between the nearest edges of two objects."""
        dx = abs(other.abs_x - (self.abs_x + self.width))
        alt_x = abs(other.abs_x + other.width - self.abs_x)
        if dx > alt_x:
            dx = alt_x
        dy = other.abs_y - (self.abs_y + self.height)
        alt_y = abs(other.abs_y + other.height - self.abs_y)
        if dy > alt_y:
            dy = alt_y
        return math.sqrt(dx * dx + dy * dy)

    def distance_to_point(self, x: float, y: float) -> float:
        """Distance from the object's edges to a point."""
        dx = abs(x - (self.abs_x + self.width))
        alt_x = abs(x - self.abs_x)
        if dx > alt_x:
            dx = alt_x
        dy = y - (self.abs_y + self.height)
        alt_y = abs(y - self.abs_y)
        if dy > alt_y:
            dy = alt_y
        return math.sqrt(dx * dx + dy * dy)

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def impact(self, other: "GameObject") -> bool:
        """True when any cell of this object lies inside ``other``."""
        if self.width <= 0 or self.height <= 0 or other.width <= 0 or other.height <= 0:
            return False
        return (
            self.x < other.x + other.width
            and other.x < self.x + self.width
            and self.y < other.y + other.height
            and other.y < self.y + self.height
        )

    def set_position(self, x: float, y: float) -> None:
        self.x = int(x)
        self.y = int(y)
        self.abs_x = float(self.x)
        self.abs_y = float(self.y)

    def set_velocity(self, vel_x: int, vel_y: int) -> None:
        self.vel_x = int(vel_x)
        self.vel_y = int(vel_y)

    def reset_time(self, now: Optional[float] = None) -> None:
        """Restart the movement clock (milliseconds)."""
        self.last_moving_time = _now_ms() if now is None else now

    def move(self, now: Optional[float] = None, frame_length: int = 20) -> None:
        """Advance by velocity (cells per second) once a frame has passed."""
        if self.vel_x + self.vel_y == 0:
            return
        now = _now_ms() if now is None else now
        delta = now - self.last_moving_time
        if delta >= frame_length:
            self.abs_x += self.vel_x * delta / 1000
            self.abs_y += self.vel_y * delta / 1000
            self.x = int(self.abs_x)
            self.y = int(self.abs_y)
            self.last_moving_time = now

    def sprite_path(self) -> Optional[str]:
        """The sprite file for the current direction of travel."""
        return self.SPRITE_REVERSE if self.vel_x < 0 else self.SPRITE

    def draw(self, console: Console) -> None:
        path = self.sprite_path()
        if path is not None:
            console.draw_sprite(path, self.x, self.y)
        self.shown = True

    def clear(self, console: Console) -> None:
        console.clear_area(self.x, self.y, self.width, self.height)
        self.shown = False


class Bird(GameObject):
    WIDTH = 7
    HEIGHT = 5
    SPRITE = BIRD
    SPRITE_REVERSE = BIRD_REVERSE
    kind = ObjectType.BIRD


class Car(GameObject):
    WIDTH = 9
    HEIGHT = 4
    SPRITE = CAR
    SPRITE_REVERSE = CAR
    kind = ObjectType.CAR


class Dinosaur(GameObject):
    WIDTH = 9
    HEIGHT = 5
    SPRITE = DINOSAUR
    SPRITE_REVERSE = DINOSAUR_REVERSE
    kind = ObjectType.DINOSAUR


class Truck(GameObject):
    WIDTH = 17
    HEIGHT = 5
    SPRITE = TRUCK
    SPRITE_REVERSE = TRUCK_REVERSE
    kind = ObjectType.TRUCK


_PEOPLE_ROWS = (
    (32, 32, 222, 219, 221, 32, 32),
    (220, 220, 220, 219, 220, 220, 220),
    (219, 222, 219, 219, 219, 221, 219),
    (32, 222, 219, 219, 219, 221, 32),
    (32, 32, 219, 32, 219, 32, 32),
)
PEOPLE_FIGURE = "\n".join("".join(cp437(code) for code in row) for row in _PEOPLE_ROWS)


class People(GameObject):
    """The player's figure, drawn from built-in block characters."""

    WIDTH = 7
    HEIGHT = 5
    kind = ObjectType.PEOPLE

    def sprite_path(self) -> Optional[str]:
        return None

    def draw(self, console: Console) -> None:
        console.write(self.x, self.y, PEOPLE_FIGURE, self.attr)
        self.shown = True


_OBJECT_CLASSES = {
    ObjectType.BIRD: Bird,
    ObjectType.CAR: Car,
    ObjectType.DINOSAUR: Dinosaur,
    ObjectType.TRUCK: Truck,
}


def make_object(kind: int, attr: int = Color.WHITE) -> GameObject:
    """Create a road object at the origin; people and unknown kinds are rejected."""
    try:
        cls = _OBJECT_CLASSES[ObjectType(kind)]
    except (ValueError, KeyError):
        raise ValueError(f"cannot create a road object of kind {kind}") from None
    return cls(0, 0, attr)