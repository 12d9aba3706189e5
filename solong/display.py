"""Drawing the game with pygame and running its event loop."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import Game, Key, MoveResult  # noqa: E402
from solong.gamemap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL  # noqa: E402

TILE_SIZE = 120

TEXTURE_PLAYER = "0player.xpm"
TEXTURE_COLLECTIBLE = "1collectible.xpm"
TEXTURE_EXIT_OPEN = "2exit_open.xpm"
TEXTURE_GROUND = "3background.xpm"
TEXTURE_WALL = "4wall.xpm"
TEXTURE_EXIT_CLOSED = "5exit_closed.xpm"

ALL_TEXTURES = (
    TEXTURE_PLAYER,
    TEXTURE_COLLECTIBLE,
    TEXTURE_EXIT_OPEN,
    TEXTURE_GROUND,
    TEXTURE_WALL,
    TEXTURE_EXIT_CLOSED,
)

_TILE_TEXTURES = {
    WALL: TEXTURE_WALL,
    FLOOR: TEXTURE_GROUND,
    PLAYER: TEXTURE_PLAYER,
    COLLECTIBLE: TEXTURE_COLLECTIBLE,
}

_STEPS_LABEL = "Steps taken: "
_LABEL_COLOR = (0xFF, 0x00, 0x0F)
_COUNT_COLOR = (0x00, 0xFF, 0x00)
_LABEL_POS = (10, 50)
_COUNT_X = 100
_FONT_SIZE = 24

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


class Renderer:
    """Draws the map tiles and the step counter onto a pygame surface."""

    def __init__(self, game: Game, texture_dir: Union[str, os.PathLike] = "textures") -> None:
        self.game = game
        self.texture_dir = Path(texture_dir)
        self.textures: dict[str, pygame.Surface] = {}
        self._font: Optional[pygame.font.Font] = None

    def window_size(self) -> tuple[int, int]:
        """Return the window size in pixels for the game's map."""
        width, height = self.game.map.dimensions()
        return width * TILE_SIZE, height * TILE_SIZE

    def texture_for(self, char: str) -> Optional[str]:
        """Return the texture file name for a tile, or None if it has none."""
        if char == EXIT:
            return TEXTURE_EXIT_OPEN if self.game.exit_open() else TEXTURE_EXIT_CLOSED
        return _TILE_TEXTURES.get(char)

    def _texture(self, name: str) -> pygame.Surface:
        if name not in self.textures:
            path = self.texture_dir / name
            if not path.is_file():
                raise FileNotFoundError(f"texture not found: {path}")
            self.textures[name] = pygame.image.load(str(path))
        return self.textures[name]

    def _load_all(self) -> None:
        for name in ALL_TEXTURES:
            self._texture(name)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every tile and, once the player has moved, the step counter."""
        for y, row in enumerate(self.game.map.rows):
            for x, char in enumerate(row):
                name = self.texture_for(char)
                if name is not None:
                    surface.blit(self._texture(name), (x * TILE_SIZE, y * TILE_SIZE))
        if self.game.steps > 0:
            self._draw_steps(surface)

    def _draw_steps(self, surface: pygame.Surface) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        label = self._font.render(_STEPS_LABEL, True, _LABEL_COLOR)
        surface.blit(label, _LABEL_POS)
        count = self._font.render(str(self.game.steps), True, _COUNT_COLOR)
        count_x = max(_COUNT_X, _LABEL_POS[0] + label.get_width())
        surface.blit(count, (count_x, _LABEL_POS[1]))


def _report(game: Game, result: MoveResult) -> None:
    if result in (MoveResult.MOVED, MoveResult.COLLECTED):
        print(f"Steps taken: {game.steps}")
    elif result is MoveResult.EXIT_CLOSED:
        print("COLLECT THEM ALL FIRST!")
    elif result is MoveResult.WON:
        print("YOU WON!")
        print()
    elif result is MoveResult.QUIT:
        print("GAME OVER!")
        print()


def run(game: Game, texture_dir: Union[str, os.PathLike] = "textures") -> MoveResult:
    """Open a window and play until the player wins or quits.

    Raises FileNotFoundError when a texture is missing.
    """
    pygame.init()
    try:
        renderer = Renderer(game, texture_dir)
        screen = pygame.display.set_mode(renderer.window_size())
        pygame.display.set_caption("so_long")
        renderer._load_all()
        renderer.draw(screen)
        pygame.display.flip()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.finished = True
                    result: Optional[MoveResult] = MoveResult.QUIT
                elif event.type == pygame.KEYDOWN:
                    keycode = _PYGAME_KEYS.get(event.key)
                    if keycode is None:
                        continue
                    result = game.handle_key(keycode)
                else:
                    continue
                if result is None:
                    continue
                _report(game, result)
                if result in (MoveResult.WON, MoveResult.QUIT):
                    return result
                if result in (MoveResult.MOVED, MoveResult.COLLECTED):
                    renderer.draw(screen)
                    pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()