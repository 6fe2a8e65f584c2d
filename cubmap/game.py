"""The game window: map loading, texture set-up, key handling and the event loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike

from cubmap.parser import MapData, MapError, check_map_name, parse_map
from cubmap.pixels import Image
from cubmap.reader import read_map_file
from cubmap.xpm import XpmError, load_xpm

TITLE = "Cub3D"
FRAME_WIDTH = 1080
FRAME_HEIGHT = 720
TILE_SIZE = 50
CLOSE_WINDOW_EVENT = 17
_FRAME_RATE = 60


class Key(IntEnum):
    """Key symbols the game reacts to."""

    A = 97
    S = 115
    D = 100
    W = 119
    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    LEFT = 65361
    ESC = 65307


@dataclass
class Game:
    """A loaded map together with its textures and window state."""

    map_data: MapData
    textures: dict[str, Image] = field(default_factory=dict)
    frame: Image | None = None
    running: bool = True

    def load_textures(self) -> None:
        """Create the frame buffer and load the four wall textures.

        Raises ``XpmError`` if any texture cannot be read.
        """
        self.frame = Image(FRAME_WIDTH, FRAME_HEIGHT)
        paths = self.map_data.textures
        loaded = {
            "NO": load_xpm(paths.north),
            "SO": load_xpm(paths.south),
            "WE": load_xpm(paths.west),
            "EA": load_xpm(paths.east),
        }
        self.textures = loaded

    def window_size(self) -> tuple[int, int]:
        """Return the window size in pixels for the loaded map."""
        return (
            (self.map_data.x_limit - 1) * TILE_SIZE,
            self.map_data.y_limit * TILE_SIZE,
        )

    def handle_key(self, keycode: int) -> bool:
        """React to a released key; return whether the game keeps running."""
        if keycode == Key.ESC:
            self.running = False
        return self.running

    def run(self) -> None:
        """Open the window and process events until the game is closed."""
        import pygame

        key_map = {
            pygame.K_a: Key.A,
            pygame.K_s: Key.S,
            pygame.K_d: Key.D,
            pygame.K_w: Key.W,
            pygame.K_UP: Key.UP,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_DOWN: Key.DOWN,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_ESCAPE: Key.ESC,
        }
        pygame.init()
        try:
            width, height = self.window_size()
            screen = pygame.display.set_mode((max(width, 1), max(height, 1)))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYUP and event.key in key_map:
                        self.handle_key(key_map[event.key])
                screen.fill((0, 0, 0))
                pygame.display.flip()
                clock.tick(_FRAME_RATE)
        finally:
            pygame.quit()


def format_map(lines: Sequence[str]) -> str:
    """Return the map rows joined as stored, followed by a newline."""
    return "".join(lines) + "\n"


def load_game(path: str | PathLike[str]) -> Game:
    """Check, read and parse the map at ``path``.

    Raises ``MapError`` whose message says which stage failed.
    """
    try:
        name = check_map_name(path)
    except MapError as exc:
        raise MapError("Error: name map file") from exc
    try:
        lines = read_map_file(name)
    except OSError as exc:
        raise MapError("Error get_map") from exc
    try:
        map_data = parse_map(lines)
    except MapError as exc:
        raise MapError("Error: Invalid map") from exc
    return Game(map_data)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the single map file named in ``argv``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error: not enough arguments")
        return 0
    try:
        game = load_game(args[0])
    except MapError as exc:
        print(exc)
        return 0
    try:
        game.load_textures()
    except XpmError:
        print("Error: init textures")
        return 0
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())