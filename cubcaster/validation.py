"""Map validation and loading of a complete scene."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .mapfile import (
    CubMap,
    MapError,
    SceneConfig,
    build_grid,
    check_contiguous,
    map_dimensions,
    read_config,
    read_lines,
)
from .player import Player

VALID_CELLS = frozenset("01NSEW \n\r")
PLAYER_CELLS = "NSEW"


@dataclass
class Scene:
    """A validated map with its player start and configuration."""

    map: CubMap
    player: Player
    config: SceneConfig


def valid_chars(grid: Sequence[str]) -> bool:
    """Return True if all cells are allowed and there is exactly one player start."""
    cells = "".join(grid)
    if not set(cells) <= VALID_CELLS:
        return False
    return sum(cells.count(mark) for mark in PLAYER_CELLS) == 1


def no_empty_gaps(grid: Sequence[str]) -> bool:
    """Return False if an all-space row lies between rows with content."""
    seen = gap = False
    for row in grid:
        if row.strip(" "):
            if gap:
                return False
            seen = True
        elif seen:
            gap = True
    return True


def check_walls(grid: Sequence[str], height: int, width: int) -> bool:
    """Return True if no floor or start cell touches a space or the map edge."""

    def is_open(y: int, x: int) -> bool:
        if not (0 <= y < height and 0 <= x < width) or x >= len(grid[y]):
            return False
        return grid[y][x] not in " \0"

    for y, row in enumerate(grid[:height]):
        for x, cell in enumerate(row[:width]):
            if cell not in "0NSEW":
                continue
            if y in (0, height - 1):
                return False
            neighbours = ((y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1))
            if not all(is_open(ny, nx) for ny, nx in neighbours):
                return False
    return True


def find_player(grid: Sequence[str]) -> tuple[int, int] | None:
    """Return (x, y) of the first player start cell, or None."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell in PLAYER_CELLS:
                return x, y
    return None


def _cell(grid: Sequence[str], x: int, y: int) -> str:
    row = grid[y]
    return row[x] if x < len(row) else " "


def _flood(grid: Sequence[str], width: int, height: int, start: tuple[int, int]) -> set[tuple[int, int]]:
    filled: set[tuple[int, int]] = set()
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= x < width and 0 <= y < height) or (x, y) in filled:
            continue
        if _cell(grid, x, y) in "1 ":
            continue
        filled.add((x, y))
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return filled


def _enclosed(grid: Sequence[str], width: int, height: int, x: int, y: int) -> bool:
    if y == 0 or y == height - 1 or x == 0 or x >= width - 1:
        return False
    neighbours = ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y))
    return all(_cell(grid, nx, ny) != " " for nx, ny in neighbours)


def check_flood(grid: Sequence[str], width: int, height: int) -> bool:
    """Return True if the area reachable from the player never touches the void."""
    start = find_player(grid)
    if start is None:
        return False
    filled = _flood(grid, width, height, start)
    return all(_enclosed(grid, width, height, x, y) for x, y in filled)


def set_player(cub_map: CubMap) -> Player:
    """Create the player from its start cell and turn that cell into floor."""
    start = find_player(cub_map.grid)
    if start is None:
        raise MapError("map has no player start")
    x, y = start
    row = cub_map.grid[y]
    direction = row[x]
    cub_map.grid[y] = row[:x] + "0" + row[x + 1:]
    return Player.facing(x + 0.5, y + 0.5, direction)


def validate_map(cub_map: CubMap) -> Player:
    """Check the map and return the player placed on it."""
    grid = cub_map.grid
    if not valid_chars(grid):
        raise MapError("map has invalid characters or not exactly one player start")
    if not no_empty_gaps(grid):
        raise MapError("map has empty rows inside it")
    if not check_walls(grid, cub_map.height, cub_map.width):
        raise MapError("map is not closed by walls")
    if not check_flood(grid, cub_map.width, cub_map.height):
        raise MapError("player area is not enclosed")
    return set_player(cub_map)


def load_scene(path: str | Path) -> Scene:
    """Read, parse and validate a .cub scene file."""
    lines = read_lines(path)
    config = read_config(lines)
    if not check_contiguous(lines):
        raise MapError("map block is not contiguous")
    height, width = map_dimensions(lines)
    cub_map = CubMap(build_grid(lines, height, width), width, height)
    player = validate_map(cub_map)
    return Scene(cub_map, player, config)