# solong

A small top-down puzzle game played on a grid of tiles. Walk the player
around the map, pick up every collectible, then step onto the exit.

## Installing

```
pip install .
```

The game window uses pygame. For the tests:

```
pip install .[test]
pytest
```

## Playing

```
solong path/to/level.ber
```

The command takes exactly one argument, the map file; with any other
number of arguments it prints `ERROR: Invalid ammount of arguments.` and
stops.

Controls:

- `W` / `↑`: move up
- `S` / `↓`: move down
- `A` / `←`: move left
- `D` / `→`: move right
- `Esc` or closing the window: quit (prints `GAME OVER!`)

Each move prints `Steps taken: N`, and once the player has moved the
window shows the step count in its top-left corner. Stepping onto the
exit before all collectibles are gathered prints
`COLLECT THEM ALL FIRST!` and the player stays where they are. Reaching
the exit with everything collected prints `YOU WON!` and the game ends.

### Textures

The game draws each tile from an image file. It looks for them in the
directory named by the `SOLONG_TEXTURES` environment variable, or in
`textures` under the current directory when that is not set. The
directory must hold these six files:

| File                | Drawn for                         |
|---------------------|-----------------------------------|
| `0player.xpm`       | the player (`P`)                  |
| `1collectible.xpm`  | a collectible (`C`)               |
| `2exit_open.xpm`    | the exit, once everything is collected |
| `3background.xpm`   | empty floor (`0`)                 |
| `4wall.xpm`         | a wall (`1`)                      |
| `5exit_closed.xpm`  | the exit, while collectibles remain |

Each tile is 120 × 120 pixels. If any texture is missing the command
prints `ERROR: texture init` and exits.

## Map files

A map is a plain text file, one row per line, built from these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

Example:

```
1111111
1P0C0E1
1111111
```

A map is accepted only when:

1. every row has the same length (the map is rectangular);
2. it is closed in by walls on all four sides;
3. it holds no characters other than the five above;
4. it has exactly one `P`, exactly one `E` and at least one `C`;
5. every collectible and the exit can be reached from the player's start.

If a check fails, the game prints one of these lines and exits without
opening a window:

- `ERROR: Map not rectangular`
- `ERROR: Map not closed by walls.`
- `ERROR: Invalid elements!`
- `ERROR: Invalid number of elements.`
- `ERROR: No valid path.`

A file that cannot be opened is reported on standard error as
`Error opening file: ...` and is then treated as an empty map.

## Using the library

Maps can be loaded and checked from Python:

```python
from solong.gamemap import parse_map, MapError

game_map = parse_map("1111111\n1P0C0E1\n1111111\n")
game_map.validate()          # raises MapError on a bad map
print(game_map.dimensions()) # (width, height)
```

`solong.gamemap.load_map(path)` reads a map from a file. `GameMap` also
offers the individual checks (`is_rectangular`, `has_closed_walls`,
`has_only_valid_elements`, `has_valid_counts`, `path_is_valid`) and tile
access (`char_at`, `set_char`, `find_player`, `count`).

The game rules live in `solong.game.Game`, which takes a `GameMap`.
`Game.move(dx, dy)` and `Game.handle_key(keycode)` return a `MoveResult`
(`BLOCKED`, `MOVED`, `COLLECTED`, `EXIT_CLOSED`, `WON` or `QUIT`); key
codes are listed in `solong.game.Key`. The game tracks `steps`,
`collected`, `position` and the last `direction`.

Drawing is done by `solong.display.Renderer`, and `solong.display.run(game,
texture_dir)` opens the window and plays until the player wins or quits.

The package also carries small helper modules used alongside the game:

- `solong.charclass`: ASCII classification, case mapping, `atoi`, `itoa`;
- `solong.memory`: byte-buffer operations on `bytearray` objects;
- `solong.strings`: string searching, comparing, trimming and splitting;
- `solong.printf`: `%c %s %p %d %i %u %x %X %%` formatting and writers;
- `solong.linereader`: `LineReader`, reading a stream line by line in
  fixed-size chunks.

## What it does not do

No texture images come with the package; supply your own six files as
described above. There are no enemies, animations or levels beyond the
map file you pass in, and the game keeps no scores between runs.