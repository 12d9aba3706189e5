"""The game map: parsing, inspection and validation of a tile grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional, Union

import os

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"
FILLED = "F"

VALID_TILES = frozenset((WALL, FLOOR, PLAYER, COLLECTIBLE, EXIT))
_FILLABLE = frozenset((FLOOR, PLAYER, COLLECTIBLE, EXIT))
_TARGETS = frozenset((COLLECTIBLE, EXIT))


class MapError(ValueError):
    """Raised when a map fails validation."""


def is_wall_line(line: str, width: int) -> bool:
    """True when the first ``width`` characters of ``line`` are all walls."""
    if width < 0:
        raise ValueError("width must not be negative")
    return len(line) >= width and all(ch == WALL for ch in line[:width])


class GameMap:
    """A mutable grid of map tiles, one string per row."""

    def __init__(self, rows: Iterable[str] = ()) -> None:
        grid = []
        for row in rows:
            if not isinstance(row, str):
                raise TypeError("map rows must be strings")
            grid.append(list(row))
        self._grid: list[list[str]] = grid

    @property
    def rows(self) -> list[str]:
        """The rows of the map as strings."""
        return ["".join(row) for row in self._grid]

    def __len__(self) -> int:
        return len(self._grid)

    def __iter__(self) -> Iterator[str]:
        return iter(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameMap):
            return NotImplemented
        return self._grid == other._grid

    def __str__(self) -> str:
        return "\n".join(self.rows)

    def __repr__(self) -> str:
        return f"GameMap({self.rows!r})"

    def dimensions(self) -> tuple[int, int]:
        """Return ``(width, height)``.

        The width is the longest row among all rows but the last; the last
        row does not take part in the measurement.
        """
        if not self._grid:
            return 0, 0
        width = max((len(row) for row in self._grid[:-1]), default=0)
        return width, len(self._grid)

    def char_at(self, row: int, col: int) -> Optional[str]:
        """Return the tile at ``(row, col)``, or None when out of range."""
        if row < 0 or col < 0 or row >= len(self._grid):
            return None
        line = self._grid[row]
        if col >= len(line):
            return None
        return line[col]

    def set_char(self, row: int, col: int, char: str) -> None:
        """Replace the tile at ``(row, col)``; positions out of range are ignored."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if self.char_at(row, col) is None:
            return
        self._grid[row][col] = char

    def is_rectangular(self) -> bool:
        """True when the map has rows and all rows share the first row's length."""
        if not self._grid:
            return False
        width = len(self._grid[0])
        return all(len(row) == width for row in self._grid[1:])

    def has_closed_walls(self) -> bool:
        """True when the first and last rows are walls and every row is bounded by walls."""
        if not self._grid:
            return False
        rows = self.rows
        width = len(rows[0])
        if not is_wall_line(rows[0], width) or not is_wall_line(rows[-1], width):
            return False
        for row in rows[1:-1]:
            if width == 0 or len(row) < width:
                return False
            if row[0] != WALL or row[width - 1] != WALL:
                return False
        return True

    def has_only_valid_elements(self) -> bool:
        """True when every tile is a wall, floor, player, collectible or exit."""
        return all(ch in VALID_TILES for row in self._grid for ch in row)

    def count(self, char: str) -> int:
        """Return how many tiles equal ``char``."""
        return sum(row.count(char) for row in self._grid)

    def has_valid_counts(self) -> bool:
        """True for exactly one player, one exit and at least one collectible."""
        return (
            self.count(PLAYER) == 1
            and self.count(COLLECTIBLE) >= 1
            and self.count(EXIT) == 1
        )

    def find_player(self) -> Optional[tuple[int, int]]:
        """Return ``(row, col)`` of the first player tile, or None."""
        for row_index, row in enumerate(self._grid):
            for col_index, ch in enumerate(row):
                if ch == PLAYER:
                    return row_index, col_index
        return None

    def flood_fill(self, row: int, col: int) -> None:
        """Mark every open tile reachable from ``(row, col)`` as filled, in place.

        Floor, player, collectible and exit tiles are open; anything else
        stops the fill.
        """
        width, height = self.dimensions()
        pending = [(row, col)]
        while pending:
            r, c = pending.pop()
            if not (0 <= r < height and 0 <= c < width):
                continue
            if self.char_at(r, c) not in _FILLABLE:
                continue
            self._grid[r][c] = FILLED
            pending.extend(((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))

    def has_unreachable(self) -> bool:
        """True while any collectible or exit tile remains on the map."""
        return any(ch in _TARGETS for row in self._grid for ch in row)

    def path_is_valid(self) -> bool:
        """True when every collectible and the exit can be reached from the player.

        The map itself is left unchanged.
        """
        start = self.find_player()
        if start is None:
            return False
        scratch = self.copy()
        scratch.flood_fill(*start)
        return not scratch.has_unreachable()

    def validate(self) -> None:
        """Raise MapError describing the first rule the map breaks."""
        if not self.is_rectangular():
            raise MapError("Map not rectangular")
        if not self.has_closed_walls():
            raise MapError("Map not closed by walls.")
        if not self.has_only_valid_elements():
            raise MapError("Invalid elements!")
        if not self.has_valid_counts():
            raise MapError("Invalid number of elements.")
        if not self.path_is_valid():
            raise MapError("No valid path.")

    def copy(self) -> GameMap:
        """Return an independent copy of the map."""
        return GameMap(self.rows)


def parse_map(text: str) -> GameMap:
    """Build a map from text, one row per line.

    A final newline does not start an extra row.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return GameMap(lines)


def load_map(path: Union[str, os.PathLike]) -> GameMap:
    """Read a map file; raises OSError when it cannot be opened."""
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        return parse_map(handle.read())