"""Player position, view direction and movement."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

MOVE_SPEED = 0.06
ROT_SPEED = 0.04
PLANE = 0.66

_FACINGS = {
    "N": (0.0, -1.0, PLANE, 0.0),
    "S": (0.0, 1.0, -PLANE, 0.0),
    "E": (1.0, 0.0, 0.0, PLANE),
    "W": (-1.0, 0.0, 0.0, -PLANE),
}


class _Walls(Protocol):
    def is_wall(self, x: float, y: float) -> bool: ...


@dataclass
class Player:
    """Position (x, y), direction vector (dx, dy) and camera plane (cx, cy)."""

    x: float
    y: float
    dx: float = 0.0
    dy: float = 0.0
    cx: float = 0.0
    cy: float = 0.0
    direction: str = ""

    @classmethod
    def facing(cls, x: float, y: float, direction: str) -> "Player":
        """Create a player at (x, y) looking towards 'N', 'S', 'E' or 'W'."""
        try:
            dx, dy, cx, cy = _FACINGS[direction]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None
        return cls(x, y, dx, dy, cx, cy, direction)

    def _step(self, walls: _Walls, sx: float, sy: float) -> None:
        nx = self.x + sx
        ny = self.y + sy
        if not walls.is_wall(nx, self.y):
            self.x = nx
        if not walls.is_wall(self.x, ny):
            self.y = ny

    def move(self, cub_map: _Walls, d: float) -> None:
        """Walk along the view direction; d is 1 forwards, -1 backwards."""
        self._step(cub_map, self.dx * MOVE_SPEED * d, self.dy * MOVE_SPEED * d)

    def strafe(self, cub_map: _Walls, d: float) -> None:
        """Walk sideways along the camera plane; d is 1 right, -1 left."""
        self._step(cub_map, self.cx * MOVE_SPEED * d, self.cy * MOVE_SPEED * d)

    def rotate(self, d: float) -> None:
        """Turn the view; d is 1 to the right, -1 to the left."""
        s = math.sin(ROT_SPEED * d)
        c = math.cos(ROT_SPEED * d)
        self.dx, self.dy = self.dx * c - self.dy * s, self.dx * s + self.dy * c
        self.cx, self.cy = self.cx * c - self.cy * s, self.cx * s + self.cy * c


@dataclass
class Keys:
    """Which movement keys are currently held."""

    forward: bool = False
    backward: bool = False
    strafe_left: bool = False
    strafe_right: bool = False
    turn_left: bool = False
    turn_right: bool = False


def apply_inputs(player: Player, keys: Keys, cub_map: _Walls) -> None:
    """Apply one frame of movement for every held key."""
    if keys.forward:
        player.move(cub_map, 1.0)
    if keys.backward:
        player.move(cub_map, -1.0)
    if keys.strafe_left:
        player.strafe(cub_map, -1.0)
    if keys.strafe_right:
        player.strafe(cub_map, 1.0)
    if keys.turn_left:
        player.rotate(-1.0)
    if keys.turn_right:
        player.rotate(1.0)