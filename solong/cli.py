"""Command-line entry point: check a map file and play it."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from solong.gamemap import GameMap, MapError, load_map

_TEXTURES_ENV = "SOLONG_TEXTURES"
_DEFAULT_TEXTURES = "textures"


def check_input(game_map: GameMap) -> bool:
    """Validate a map, printing the error when it breaks a rule."""
    try:
        game_map.validate()
    except MapError as error:
        print(f"ERROR: {error}")
        return False
    return True


def _read_map(path: str) -> GameMap:
    try:
        return load_map(path)
    except OSError as error:
        print(f"Error opening file: {error.strerror or error}", file=sys.stderr)
        return GameMap()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("ERROR: Invalid ammount of arguments.")
        return 0
    game_map = _read_map(args[0])
    if not check_input(game_map):
        return 0

    from solong.display import run
    from solong.game import Game

    texture_dir = os.environ.get(_TEXTURES_ENV, _DEFAULT_TEXTURES)
    try:
        run(Game(game_map), texture_dir)
    except FileNotFoundError:
        print("ERROR: texture init")
    return 0


if __name__ == "__main__":
    sys.exit(main())