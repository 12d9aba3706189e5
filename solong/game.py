"""Game state and player movement on a validated map."""

from __future__ import annotations

from enum import Enum, IntEnum, auto
from typing import Optional

from solong.gamemap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap, MapError


class Key(IntEnum):
    """Key codes the game responds to."""

    ESC = 65307
    W = 119
    S = 115
    A = 97
    D = 100
    UP = 65362
    DOWN = 65364
    LEFT = 65361
    RIGHT = 65363


class Direction(IntEnum):
    """The way the player last tried to move."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3


class MoveResult(Enum):
    """What happened in response to a move or key press."""

    BLOCKED = auto()
    MOVED = auto()
    COLLECTED = auto()
    EXIT_CLOSED = auto()
    WON = auto()
    QUIT = auto()


_KEY_MOVES: dict[int, tuple[Direction, int, int]] = {
    Key.W: (Direction.UP, 0, -1),
    Key.UP: (Direction.UP, 0, -1),
    Key.S: (Direction.DOWN, 0, 1),
    Key.DOWN: (Direction.DOWN, 0, 1),
    Key.A: (Direction.LEFT, -1, 0),
    Key.LEFT: (Direction.LEFT, -1, 0),
    Key.D: (Direction.RIGHT, 1, 0),
    Key.RIGHT: (Direction.RIGHT, 1, 0),
}


class Game:
    """A running game: the map, the player's position and the score."""

    def __init__(self, game_map: GameMap) -> None:
        position = game_map.find_player()
        if position is None:
            raise MapError("Invalid number of elements.")
        self.map = game_map
        self.position: tuple[int, int] = position
        self.collectibles = game_map.count(COLLECTIBLE)
        self.collected = 0
        self.steps = 0
        self.direction = Direction.RIGHT
        self.finished = False

    def exit_open(self) -> bool:
        """True once every collectible has been picked up."""
        return self.collected == self.collectibles

    def move(self, dx: int, dy: int) -> MoveResult:
        """Try to move the player by ``dx`` columns and ``dy`` rows."""
        if self.finished:
            raise RuntimeError("the game is over")
        row, col = self.position
        new_row, new_col = row + dy, col + dx
        target = self.map.char_at(new_row, new_col)
        if target is None or target == WALL:
            return MoveResult.BLOCKED
        if target == EXIT:
            if self.exit_open():
                self.finished = True
                return MoveResult.WON
            return MoveResult.EXIT_CLOSED
        picked_up = target == COLLECTIBLE
        if picked_up:
            self.collected += 1
        self.map.set_char(row, col, FLOOR)
        self.map.set_char(new_row, new_col, PLAYER)
        self.position = (new_row, new_col)
        self.steps += 1
        return MoveResult.COLLECTED if picked_up else MoveResult.MOVED

    def handle_key(self, keycode: int) -> Optional[MoveResult]:
        """React to a key code; returns None for keys the game ignores."""
        if keycode == Key.ESC:
            self.finished = True
            return MoveResult.QUIT
        action = _KEY_MOVES.get(keycode)
        if action is None:
            return None
        direction, dx, dy = action
        self.direction = direction
        return self.move(dx, dy)