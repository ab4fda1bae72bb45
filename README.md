# crossroad

A terminal arcade game: guide a pedestrian across six lanes of traffic made of
birds, cars, dinosaurs and trucks. Each time you reach the far side the level
goes up, and the lanes get faster and the gaps between vehicles smaller. If
you are hit, you are asked whether to play again.

The package also holds two small interactive shape-factory demos.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
crossroad [--config PATH] [--no-splash]
```

- `--config PATH` reads settings from `PATH` (default `Config/config.ini`,
  relative to the current directory). A missing file means the defaults are
  used.
- `--no-splash` skips the four-second loading screen.

The screen is a 160 x 48 character grid drawn with ANSI escape codes. On the
left a side panel shows the controls and, during a game, the level,
difficulty and sound state. The main menu offers New Game, Continue,
Load Game, Setting and Exit. Press Ctrl+C to leave at any time.

Keys read from the terminal:

| Action            | Key         |
|-------------------|-------------|
| Move / choose     | Arrow keys  |
| Select            | Enter       |
| Pause / continue  | P           |
| In-game menu      | Esc         |
| Save game         | L           |
| Load game         | T           |
| Mute / unmute     | M           |

Now and then the traffic lights turn red and the traffic stops for a short
while; on easier settings the stop lasts longer.

Difficulty (Easy, Normal, Hard) is chosen from the Setting entry by typing
`1`, `2` or `3`. Harder settings mean faster lanes and less space between
vehicles.

The in-game menu (Esc) shows the same five labels as the main menu, but its
entries act, from top to bottom, as continue, save, load, setting and exit.
Pressing Esc inside that menu picks the first entry.

### Saved games

Save (L) and load (T) ask for a name and use `Saved/<name>.txt` under the
current directory. The `Saved` directory has to exist already; if it does
not, saving reports "Fail to save!". A save file is a sequence of
little-endian 32-bit integers: level, difficulty, the player's position, and
for every lane its speed, its object count and each object's kind, position
and colour. `crossroad.game.Game.save_state` and `Game.load_state` read and
write this format on any binary stream; a truncated or malformed file is
rejected with `ValueError` and reported as an invalid save.

### Configuration

Settings are read from a file of `name=value,` lines. A line may give up to
two values, each followed by a comma; for keys the second value is an
alternative key code. Recognised names are `size`, `key_up`, `key_down`,
`key_left`, `key_right`, `key_enter`, `key_pause`, `key_ecs`, `key_load`,
`key_save`, `key_mute`, `frame_length`, `console_width` and `console_height`.
Unknown names are ignored and anything missing keeps its default. Key values
are virtual key codes (for example 80 for `P`, 13 for Enter). For example:

```
frame_length=30,
key_pause=80,19,
```

`frame_length` sets the delay between frames in milliseconds. `size`,
`console_width` and `console_height` are stored and saved but do not change
the screen size.

In code the same settings are handled by `crossroad.config.Config`, with
`load`, `save`, `get`, `set` and `parse_key`.

### What is not included

- Sprite art is read at run time from text files under the current directory
  (`Object/Draw/*.txt`, `UserInterface/SplashScreen/*.txt`,
  `UserInterface/Crash/fire.txt`). These files are not part of the package;
  where one is missing nothing is drawn in its place, so without them
  vehicles are invisible. The player, roads, menus and dialogs are drawn
  without any files.
- There is no music or sound effects. A crash rings the terminal bell unless
  sound is muted; mute only toggles that and the "Sound" line in the panel.

## Shape factory demos

```
crossroad-abstract-factory [--direct {rectangle,rounded}]
```

Asks twice for a factory (`1: Rectangle, 2: Rounded Rectangle`), repeating
the question until 1 or 2 is entered, and prints the name of the shape each
factory makes. With `--direct` it prints that one shape without asking.

```
crossroad-factory-method [--menu]
```

Asks how many shapes to enter, then for each one its kind
(`1: Rectangle; 2: Circle`) and its measurements (top-left corner, width and
height; or centre and radius), and prints `Area: ...` for every shape.
Circle areas use 3.1416 for pi. With `--menu` it instead offers
`1: Rectangle, 2: Circle, 3: Exit` until 3 is entered, then reads the
measurements of each chosen shape without printing areas.

Both read whitespace-separated input from standard input and stop with an
error on a non-number or at the end of input.