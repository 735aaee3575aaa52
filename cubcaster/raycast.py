"""Casting one ray per screen column through the map grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from .player import Player

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

_MIN_DISTANCE = 1e-6


class _Walls(Protocol):
    def is_wall(self, x: float, y: float) -> bool: ...


@dataclass
class Ray:
    """The result of casting one ray: where it hit and how tall the wall is."""

    camera: float
    dir_x: float
    dir_y: float
    map_x: int
    map_y: int
    delta_x: float
    delta_y: float
    side_x: float
    side_y: float
    step_x: int
    step_y: int
    side: int = 0
    distance: float = 0.0
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0


def _axis(position: float, cell: int, direction: float, delta: float) -> tuple[int, float]:
    step = -1 if direction < 0 else 1
    if math.isinf(delta):
        return step, math.inf
    if direction < 0:
        return step, (position - cell) * delta
    return step, (cell + 1.0 - position) * delta


def cast_ray(
    player: Player,
    cub_map: _Walls,
    x: int,
    width: int = SCREEN_WIDTH,
    height: int = SCREEN_HEIGHT,
) -> Ray:
    """Cast the ray for screen column ``x`` and measure the wall it hits."""
    camera = 2 * x / width - 1
    dir_x = player.dx + player.cx * camera
    dir_y = player.dy + player.cy * camera
    map_x, map_y = int(player.x), int(player.y)
    delta_x = abs(1 / dir_x) if dir_x else math.inf
    delta_y = abs(1 / dir_y) if dir_y else math.inf
    step_x, side_x = _axis(player.x, map_x, dir_x, delta_x)
    step_y, side_y = _axis(player.y, map_y, dir_y, delta_y)
    ray = Ray(camera, dir_x, dir_y, map_x, map_y, delta_x, delta_y,
              side_x, side_y, step_x, step_y)

    while True:
        if ray.side_x < ray.side_y:
            ray.side_x += ray.delta_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_y += ray.delta_y
            ray.map_y += ray.step_y
            ray.side = 1
        if cub_map.is_wall(ray.map_x, ray.map_y):
            break

    if ray.side == 0:
        ray.distance = ray.side_x - ray.delta_x
    else:
        ray.distance = ray.side_y - ray.delta_y
    ray.line_height = int(height / max(ray.distance, _MIN_DISTANCE))
    ray.draw_start = max(-(ray.line_height // 2) + height // 2, 0)
    ray.draw_end = min(ray.line_height // 2 + height // 2, height - 1)
    return ray


def texture_column(ray: Ray, player: Player, texture_width: int) -> int:
    """Return the texture column that the ray's hit point maps to."""
    if ray.side == 0:
        wall_x = player.y + ray.distance * ray.dir_y
    else:
        wall_x = player.x + ray.distance * ray.dir_x
    wall_x -= math.floor(wall_x)
    column = int(wall_x * texture_width)
    if (ray.side == 0 and ray.dir_x > 0) or (ray.side == 1 and ray.dir_y < 0):
        column = texture_width - column - 1
    return column


def wall_face(ray: Ray) -> str:
    """Return which wall face was hit: 'north', 'south', 'east' or 'west'."""
    if ray.side == 0:
        return "east" if ray.dir_x > 0 else "west"
    return "south" if ray.dir_y > 0 else "north"