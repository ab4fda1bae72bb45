"""The road-crossing game: lanes of traffic, the player, levels and save files."""

from __future__ import annotations

import enum
import random
import struct
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from crossroad.config import Config, Key
from crossroad.console import Console
from crossroad.objects import GameObject, People, make_object
from crossroad.popup import alert, prompt, question
from crossroad.side_panel import SidePanel
from crossroad.ui import Widget
from crossroad.utilities import Color, TextAlign, align_text, get_pixel_chars

LANE_COUNT = 6
LANE_HEIGHT = 5
LANE_STEP = LANE_HEIGHT + 1

FIRE = "UserInterface/Crash/fire.txt"

# Per difficulty: space reduction, minimum and maximum speed per level.
_FACTORS = ((1, 1, 3), (2, 2, 4), (3, 3, 6))

_OPT_CONTINUE, _OPT_SAVE, _OPT_LOAD, _OPT_SETTING, _OPT_EXIT = range(5)


class Difficulty(enum.IntEnum):
    EASY = 0
    NORMAL = 1
    HARD = 2


_DIFFICULTY_NAMES = {
    Difficulty.EASY: "Easy",
    Difficulty.NORMAL: "Normal",
    Difficulty.HARD: "Hard",
}


@dataclass
class Lane:
    x: int = 0
    y: int = 0
    velocity: int = 1
    objects: list[GameObject] = field(default_factory=list)


def _default_clock() -> float:
    return time.monotonic() * 1000.0


def _sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000.0)


def _ring_bell() -> None:
    sys.stdout.write("\a")
    sys.stdout.flush()


def _read_ints(stream: BinaryIO, count: int) -> tuple[int, ...]:
    size = 4 * count
    data = stream.read(size)
    if len(data) != size:
        raise ValueError("truncated save data")
    return struct.unpack(f"<{count}i", data)


def _write_ints(stream: BinaryIO, *values: int) -> None:
    stream.write(struct.pack(f"<{len(values)}i", *values))


class Game(Widget):
    """The playing field and its rules."""

    def __init__(
        self,
        console: Console,
        config: Optional[Config] = None,
        panel: Optional[SidePanel] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
        save_dir="Saved",
    ) -> None:
        super().__init__()
        self.console = console
        self.config = config if config is not None else Config()
        self.panel = panel if panel is not None else SidePanel()
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else _default_clock
        self.save_dir = Path(save_dir)

        self.crash_sound: Callable[[], None] = _ring_bell
        self.on_mute_changed: Optional[Callable[[bool], None]] = None
        self.sleep_ms: Callable[[float], None] = _sleep_ms
        self.menu = None

        self.x = 34
        self.y = 0
        self.width = 119
        self.height = 41
        self.level = 1
        self.min_space = 20
        self.difficulty = Difficulty.EASY
        self.pause_frame = 10
        self.paused = False
        self.mute = False
        self.shown = True
        self.people: Optional[People] = None
        self.lanes = [Lane(self.x, self.y + (i + 1) * LANE_STEP) for i in range(LANE_COUNT)]
        self.reset()

    def _rand(self, left: int, right: int) -> int:
        return self.rng.randint(left, right)

    @property
    def _frame_length(self) -> int:
        return self.config.get(Key.FRAME_LENGTH)

    def difficulty_name(self) -> str:
        return _DIFFICULTY_NAMES[self.difficulty]

    def reset(self) -> None:
        """Start again from level one."""
        self.level = 1
        self.shown = True
        self.paused = False
        self.delete_objects()
        self.init_level()

    def _try_place(self, lane: Lane, obj: GameObject) -> bool:
        fits = True
        for other in lane.objects:
            space = self._rand(self.min_space, self.width)
            if obj.impact(other) or obj.distance_from(other) < space:
                fits = False
        if fits:
            lane.objects.append(obj)
        return fits

    def init_level(self) -> None:
        """Pick lane speeds, scatter traffic and put the player at the bottom."""
        reduce, slowest, fastest = _FACTORS[self.difficulty]
        self.min_space = 20 - self.level * reduce
        min_vel = self.level * slowest
        max_vel = self.level * fastest
        for lane in self.lanes:
            lane.velocity = self._rand(min_vel, max_vel)
            if self._rand(0, 1):
                lane.velocity = -lane.velocity

        candidate: Optional[GameObject] = None
        for _ in range(10):
            for lane in self.lanes:
                if candidate is None:
                    candidate = self.new_object(self.rng.randrange(4), Color.WHITE)
                candidate.set_position(
                    lane.x + self._rand(0, self.width - 1),
                    lane.y + LANE_HEIGHT - candidate.height,
                )
                candidate.set_velocity(lane.velocity, 0)
                if self._try_place(lane, candidate):
                    candidate = None

        self.people = People()
        self.people.set_position(self.x + self.width // 2, self.lanes[-1].y + LANE_STEP)
        self.people.set_velocity(0, 0)

    def check(self) -> None:
        """Advance the level at the top, or end the run on a collision."""
        if self.people.y < self.lanes[0].y:
            self.level += 1
            self.delete_objects()
            self.init_level()
            alert(self.console, self.config, 65, 15, f"NEXT LEVEL: {self.level}")
            return

        for lane in self.lanes:
            for obj in lane.objects:
                if not self.people.impact(obj):
                    continue
                if not self.mute:
                    self.crash_sound()
                self.console.draw_sprite(
                    FIRE, self.people.x - 5, max(0, self.people.y - 5)
                )
                self.console.draw()
                self.sleep_ms(10 * self._frame_length)
                if question(self.console, self.config, 60, 15, "You lose! Play again?"):
                    self.reset()
                else:
                    self.hide()
                return

    def add_objects(self) -> None:
        """Try to bring a new object in at the entry edge of every lane."""
        candidate: Optional[GameObject] = None
        for lane in self.lanes:
            if candidate is None:
                candidate = self.new_object(self.rng.randrange(4), 9 + self._rand(0, 6))
            new_x = 2 if lane.velocity > 0 else lane.x + self.width - 1
            candidate.set_position(new_x, lane.y + LANE_HEIGHT - candidate.height)
            candidate.set_velocity(lane.velocity, 0)
            if self._try_place(lane, candidate):
                candidate = None

    def write_info(self) -> None:
        """Show level, difficulty and sound state in the side panel."""
        width = self.panel.width
        lines = (
            f"Level      : {self.level}",
            f"difficulty : {self.difficulty_name()}",
            f"Sound      : {'Off' if self.mute else 'On'}",
        )
        self.panel.clear_info(self.console)
        self.panel.set_info(
            "".join(align_text(TextAlign.CENTER, line.ljust(20) + "\n", width) for line in lines)
        )

    def update(self) -> None:
        """Run one frame: random red lights, collisions, spawning and movement."""
        if self._rand(0, 100) == 0 and self.pause_frame == 0:
            self.pause_frame = (3 - self.difficulty) * 10

        if self.pause_frame > 0:
            self.pause_frame -= 1
            if self.pause_frame == 0:
                self.resume()

        if self.paused:
            return

        self.check()
        self.add_objects()

        right_edge = self.x + self.width
        now = self.clock()
        for lane in self.lanes:
            kept: list[GameObject] = []
            skip_next = False
            for obj in lane.objects:
                if skip_next:
                    # The object after a removed one waits until the next frame.
                    skip_next = False
                    kept.append(obj)
                    continue
                obj.clear(self.console)
                if obj.abs_x >= right_edge or obj.abs_x < 2:
                    skip_next = True
                    continue
                if self.pause_frame == 0:
                    obj.move(now, self._frame_length)
                kept.append(obj)
            lane.objects = kept

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        """Unpause and restart every object's movement clock."""
        self.paused = False
        now = self.clock()
        for lane in self.lanes:
            for obj in lane.objects:
                obj.reset_time(now)

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self.difficulty = Difficulty(difficulty)
        self.delete_objects()
        self.init_level()

    def setting(self) -> None:
        """Ask for a difficulty and apply it."""
        self.pause()
        answer = prompt(
            self.console, self.config, 65, 17, "ENTER difficulty\n\nEasy - 1\nNormal - 2\nHard - 3"
        )
        if answer == "":
            self.resume()
            return
        choices = {"1": Difficulty.EASY, "2": Difficulty.NORMAL, "3": Difficulty.HARD}
        if answer in choices:
            self.set_difficulty(choices[answer])
        else:
            alert(self.console, self.config, 65, 17, "                Invalid Input!")
        self.resume()

    def save_state(self, stream: BinaryIO) -> None:
        """Write the game as little-endian 32-bit integers."""
        _write_ints(stream, self.level, int(self.difficulty))
        _write_ints(stream, int(self.people.abs_x), int(self.people.abs_y))
        for lane in self.lanes:
            _write_ints(stream, lane.velocity, len(lane.objects))
            for obj in lane.objects:
                _write_ints(stream, int(obj.kind), int(obj.abs_x), int(obj.abs_y), obj.attr)

    def load_state(self, stream: BinaryIO) -> None:
        """Replace the game with one read by ``save_state``; bad data raises ValueError."""
        level, difficulty = _read_ints(stream, 2)
        difficulty = Difficulty(difficulty)
        people_x, people_y = _read_ints(stream, 2)
        lanes: list[tuple[int, list[GameObject]]] = []
        for _ in self.lanes:
            velocity, size = _read_ints(stream, 2)
            if size < 0:
                raise ValueError(f"negative object count {size}")
            objects = []
            for _ in range(size):
                kind, x, y, attr = _read_ints(stream, 4)
                obj = self.new_object(kind, attr)
                obj.set_position(x, y)
                obj.set_velocity(velocity, 0)
                objects.append(obj)
            lanes.append((velocity, objects))

        self.delete_objects()
        self.level = level
        self.difficulty = difficulty
        self.people = People(people_x, people_y)
        for lane, (velocity, objects) in zip(self.lanes, lanes):
            lane.velocity = velocity
            lane.objects = objects

    def _save_path(self, name: str) -> Path:
        return self.save_dir / f"{name}.txt"

    def load(self) -> None:
        """Ask for a file name and load that save."""
        self.pause()
        name = prompt(self.console, self.config, 60, 17, "                Enter file name:")
        try:
            with open(self._save_path(name), "rb") as handle:
                self.load_state(handle)
        except OSError:
            alert(self.console, self.config, 60, 17, "            No such file or directory!")
        except ValueError:
            alert(self.console, self.config, 60, 17, "            Invalid save file!")
        self.resume()

    def save(self) -> None:
        """Ask for a file name and save the game there."""
        self.pause()
        name = prompt(self.console, self.config, 60, 15, "          Enter file name:")
        try:
            with open(self._save_path(name), "wb") as handle:
                self.save_state(handle)
        except OSError:
            alert(self.console, self.config, 60, 17, "        Fail to save!")
        else:
            alert(self.console, self.config, 60, 17, "                Successfully!")
        self.resume()

    def ingame_menu(self) -> None:
        """Pause and act on the choice made in the in-game menu."""
        self.pause()
        if self.menu is None:
            from crossroad.ingame_menu import IngameMenu

            self.menu = IngameMenu(self.console, self.config, 80, 10, 28, 20)
        choice = self.menu.get_option()
        option = int(getattr(choice, "value", choice))
        if option == _OPT_CONTINUE:
            self.resume()
        elif option == _OPT_SETTING:
            self.setting()
        elif option == _OPT_LOAD:
            self.load()
            alert(self.console, self.config, 65, 15, "                 Loading....")
            self.sleep_ms(200)
        elif option == _OPT_SAVE:
            self.save()
        elif option == _OPT_EXIT:
            self.hide()

    def _toggle_mute(self) -> None:
        self.mute = not self.mute
        if self.on_mute_changed is not None:
            self.on_mute_changed(self.mute)

    def on_key_pressed(self, key: int) -> bool:
        if not self.shown:
            return False
        parsed = self.config.parse_key(key)
        if parsed == Key.KEY_PAUSE:
            if self.paused:
                self.resume()
            else:
                self.pause()
            return True
        if parsed == Key.KEY_ESC:
            self.ingame_menu()
            return True
        if parsed == Key.KEY_LOAD:
            self.load()
            return True
        if parsed == Key.KEY_SAVE:
            self.save()
            return True
        if parsed == Key.KEY_MUTE:
            self._toggle_mute()

        if self.paused:
            return False

        people = self.people
        if parsed == Key.KEY_UP:
            people.clear(self.console)
            if people.y > self.lanes[0].y - LANE_STEP:
                people.set_position(people.x, people.y - LANE_STEP)
            return True
        if parsed == Key.KEY_LEFT:
            people.clear(self.console)
            if people.x > self.x:
                people.set_position(people.x - 1, people.y)
            return True
        if parsed == Key.KEY_DOWN:
            people.clear(self.console)
            if people.y < self.lanes[-1].y + LANE_STEP:
                people.set_position(people.x, people.y + LANE_STEP)
            return True
        if parsed == Key.KEY_RIGHT:
            people.clear(self.console)
            if people.x < self.x + self.width - 1:
                people.set_position(people.x + 1, people.y)
            return True
        return False

    def _draw_side_road(self, y: int, attr: int) -> None:
        bottom = get_pixel_chars().bottom
        for offset in range(self.width):
            self.console.put(self.x + offset, y, bottom, attr)

    def _draw_lane_break(self, y: int, attr: int) -> None:
        center = get_pixel_chars().center
        for offset in range(self.width):
            if offset % 6 < 3:
                self.console.put(self.x + offset, y, center, attr)

    def _draw_traffic_light(self, attr: int) -> None:
        light = get_pixel_chars().full * 4
        row = self.lanes[0].y - 3
        self.console.write(self.x, row, light, attr)
        self.console.write(self.x + self.width - 4, row, light, attr)

    def draw(self) -> None:
        """Paint the road, traffic and player, then refresh the side panel info."""
        console = self.console
        self.clear(console)
        if self.shown:
            self._draw_traffic_light(Color.RED if self.pause_frame > 0 else Color.CYAN)
            self._draw_side_road(5, Color.RED)
            for i in range(1, LANE_COUNT):
                self._draw_lane_break(5 + i * LANE_STEP, Color.WHITE)
            self._draw_side_road(5 + LANE_COUNT * LANE_STEP, Color.RED)
            for lane in self.lanes:
                for obj in lane.objects:
                    obj.draw(console)
            self.people.draw(console)
        self.write_info()

    def new_object(self, kind: int, attr: int = Color.WHITE) -> GameObject:
        """Create a road object whose movement clock starts now."""
        obj = make_object(kind, attr)
        obj.reset_time(self.clock())
        return obj

    def delete_objects(self) -> None:
        for lane in self.lanes:
            lane.objects.clear()