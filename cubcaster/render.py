"""Drawing a frame: background, textured wall columns and wall textures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .mapfile import MapError, SceneConfig
from .raycast import SCREEN_HEIGHT, SCREEN_WIDTH, Ray, cast_ray, texture_column, wall_face
from .validation import Scene
from .xpm import Image, load_xpm

_SHADE_MASK = 8355711
_FACES = ("north", "south", "east", "west")


def shade(color: int) -> int:
    """Darken a colour to half brightness, as done for walls hit on a y side."""
    return (color >> 1) & _SHADE_MASK


@dataclass
class Textures:
    """The four wall textures, one per face."""

    north: Image
    south: Image
    east: Image
    west: Image

    @classmethod
    def load(cls, config: SceneConfig) -> "Textures":
        """Load the XPM files named in the scene configuration."""
        paths = {face: getattr(config, face) for face in _FACES}
        missing = [face for face, path in paths.items() if not path]
        if missing:
            raise MapError(f"missing texture path for: {', '.join(missing)}")
        return cls(**{face: load_xpm(Path(path)) for face, path in paths.items()})

    def for_face(self, face: str) -> Image:
        """Return the texture for 'north', 'south', 'east' or 'west'."""
        if face not in _FACES:
            raise ValueError(f"unknown wall face {face!r}")
        return getattr(self, face)


@dataclass
class Frame:
    """The screen image that a frame is drawn into."""

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [0] * size
        elif len(self.pixels) != size:
            raise ValueError(f"expected {size} pixels, got {len(self.pixels)}")

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put(self, x: int, y: int, color: int) -> None:
        """Set a pixel; points outside the frame are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get(self, x: int, y: int) -> int:
        """Return a pixel; points outside the frame read as 0."""
        if not self._inside(x, y):
            return 0
        return self.pixels[y * self.width + x]


def draw_background(frame: Frame, floor: int, ceiling: int) -> None:
    """Fill the upper half with the ceiling colour and the rest with the floor."""
    split = (frame.height // 2) * frame.width
    total = frame.width * frame.height
    frame.pixels[:split] = [ceiling & 0xFFFFFFFF] * split
    frame.pixels[split:] = [floor & 0xFFFFFFFF] * (total - split)


def _draw_column(frame: Frame, x: int, ray: Ray, texture: Image, column: int) -> None:
    if ray.line_height <= 0:
        return
    step = texture.height / ray.line_height
    pos = (ray.draw_start - frame.height // 2 + ray.line_height // 2) * step
    mask = texture.height - 1
    for y in range(ray.draw_start, ray.draw_end):
        color = texture.pixel(column, int(pos) & mask)
        pos += step
        if ray.side == 1:
            color = shade(color)
        frame.put(x, y, color)


def render_frame(frame: Frame, scene: Scene, textures: Textures) -> Frame:
    """Draw the scene as seen by its player into the frame and return it."""
    draw_background(frame, scene.config.floor, scene.config.ceiling)
    player = scene.player
    for x in range(frame.width):
        ray = cast_ray(player, scene.map, x, frame.width, frame.height)
        texture = textures.for_face(wall_face(ray))
        column = texture_column(ray, player, texture.width)
        _draw_column(frame, x, ray, texture, column)
    return frame