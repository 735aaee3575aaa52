"""The game window, keyboard handling and the command-line entry point."""

from __future__ import annotations

import os
import sys
from array import array
from typing import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from .mapfile import MapError
from .player import Keys, apply_inputs
from .raycast import SCREEN_HEIGHT, SCREEN_WIDTH
from .render import Frame, Textures, render_frame
from .validation import Scene, load_scene
from .xpm import XpmError

TITLE = "Cub3D"
FPS = 60

_KEY_FLAGS = {
    pygame.K_w: "forward",
    pygame.K_s: "backward",
    pygame.K_a: "strafe_left",
    pygame.K_d: "strafe_right",
    pygame.K_LEFT: "turn_left",
    pygame.K_RIGHT: "turn_right",
}


class Game:
    """A running game: the scene, its textures, held keys and the frame."""

    def __init__(
        self,
        scene: Scene,
        textures: Textures,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
    ) -> None:
        self.scene = scene
        self.textures = textures
        self.frame = Frame(width, height)
        self.keys = Keys()
        self.running = True

    def key_down(self, key: int) -> None:
        """Handle a key press; Escape ends the game."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key in _KEY_FLAGS:
            setattr(self.keys, _KEY_FLAGS[key], True)

    def key_up(self, key: int) -> None:
        """Handle a key release."""
        if key in _KEY_FLAGS:
            setattr(self.keys, _KEY_FLAGS[key], False)

    def step(self) -> Frame:
        """Apply held keys and draw the next frame."""
        apply_inputs(self.scene.player, self.keys, self.scene.map)
        return render_frame(self.frame, self.scene, self.textures)


def check_extension(path: str) -> bool:
    """Return True if the path names a .cub file with a non-empty stem."""
    return len(path) >= 5 and path.endswith(".cub")


def _to_surface(frame: Frame) -> pygame.Surface:
    data = array("I", ((p & 0xFFFFFF) | 0xFF000000 for p in frame.pixels))
    if sys.byteorder == "little":
        data.byteswap()
    return pygame.image.frombuffer(data.tobytes(), (frame.width, frame.height), "ARGB")


def _run(game: Game) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.frame.width, game.frame.height))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    game.key_down(event.key)
                elif event.type == pygame.KEYUP:
                    game.key_up(event.key)
            if not game.running:
                break
            screen.blit(_to_surface(game.step()), (0, 0))
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the .cub file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error\nUsage: cubcaster maps/map.cub")
        return 1
    if not check_extension(args[0]):
        print("Error\nInvalid extension")
        return 1
    try:
        scene = load_scene(args[0])
    except MapError as exc:
        print(f"Error\nMap parsing failed: {exc}", file=sys.stderr)
        return 1
    try:
        textures = Textures.load(scene.config)
    except (MapError, XpmError) as exc:
        print(f"Error\nInitialization failed: {exc}", file=sys.stderr)
        return 1
    _run(Game(scene, textures))
    return 0