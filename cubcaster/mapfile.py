"""Reading .cub scene files: configuration lines and the raw map grid."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterable, Sequence

log = logging.getLogger(__name__)

_BLANKS = " \t"
_DIGITS = re.compile(r"[0-9]+")
_PATH = re.compile(r"[^\n ]*")
_TEXTURE_KEYS = (("NO", "north"), ("SO", "south"), ("WE", "west"), ("EA", "east"))


class MapError(ValueError):
    """Raised when a scene file cannot be read or does not describe a valid scene."""


@dataclass
class SceneConfig:
    """Texture paths and floor/ceiling colours given before the map block."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: int = 0
    ceiling: int = 0


@dataclass
class CubMap:
    """A rectangular map grid; every row is exactly ``width`` characters."""

    grid: list[str]
    width: int
    height: int

    def is_wall(self, x: float, y: float) -> bool:
        """Return True if the point lies in a wall cell or outside the map."""
        mx, my = int(x), int(y)
        if not (0 <= mx < self.width and 0 <= my < self.height):
            return True
        return self.grid[my][mx] == "1"


def is_map_line(line: str) -> bool:
    """Return True if the line, after leading blanks, starts with '1' or '0'."""
    return line.lstrip(_BLANKS)[:1] in ("1", "0")


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def _skip_blanks(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _BLANKS:
        pos += 1
    return pos


def _read_path(line: str, start: int) -> str:
    return _PATH.match(line, _skip_blanks(line, start)).group()


def _read_number(text: str, pos: int) -> tuple[int, int]:
    pos = _skip_blanks(text, pos)
    match = _DIGITS.match(text, pos)
    if match is None:
        return -1, pos
    return int(match.group()), _skip_blanks(text, match.end())


def _skip_comma(text: str, pos: int) -> int:
    return pos + 1 if text[pos:pos + 1] == "," else pos


def _read_color(text: str, line: str) -> int:
    red, pos = _read_number(text, 1)
    green, pos = _read_number(text, _skip_comma(text, pos))
    blue, _ = _read_number(text, _skip_comma(text, pos))
    if not all(0 <= channel <= 255 for channel in (red, green, blue)):
        raise MapError(f"invalid color line: {line.rstrip()!r}")
    return red << 16 | green << 8 | blue


def _apply_line(config: SceneConfig, line: str) -> None:
    body = line.lstrip(_BLANKS)
    if not body:
        return
    start = len(line) - len(body)
    for key, attribute in _TEXTURE_KEYS:
        if body.startswith(key):
            setattr(config, attribute, _read_path(line, start + len(key)))
            return
    if body.startswith("F"):
        config.floor = _read_color(body, line)
    elif body.startswith("C"):
        config.ceiling = _read_color(body, line)


def read_config(lines: Iterable[str]) -> SceneConfig:
    """Read the configuration lines that precede the first map line."""
    config = SceneConfig()
    for line in lines:
        if is_map_line(line):
            break
        if line.startswith("\n"):
            continue
        _apply_line(config, line)
    return config


def _is_blank(line: str) -> bool:
    return line.lstrip(_BLANKS)[:1] in ("", "\n")


def check_contiguous(lines: Iterable[str]) -> bool:
    """Return False if a blank line separates two parts of the map block."""
    started = gap = False
    for number, line in enumerate(lines, start=1):
        if is_map_line(line):
            if gap:
                log.debug("line %d: map line after a gap", number)
                return False
            started = True
        elif started and _is_blank(line):
            gap = True
    return True


def map_dimensions(lines: Iterable[str]) -> tuple[int, int]:
    """Return (height, width) of the map: map line count and longest map line."""
    rows = [_strip_newline(line) for line in lines if is_map_line(line)]
    return len(rows), max((len(row) for row in rows), default=0)


def build_grid(lines: Iterable[str], height: int, width: int) -> list[str]:
    """Copy the first ``height`` map lines into rows padded with spaces to ``width``."""
    rows = (_strip_newline(line) for line in lines if is_map_line(line))
    grid = [row[:width].ljust(width) for row in islice(rows, height)]
    grid.extend(" " * width for _ in range(height - len(grid)))
    return grid


def read_lines(path: str | Path) -> list[str]:
    """Read a file into lines, each keeping its trailing newline."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError(f"cannot read {path}: {exc.strerror or exc}") from exc
    pieces = data.decode("utf-8", errors="surrogateescape").split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines