"""Loading XPM images used as wall textures."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from .colors import NO_COLOR, lookup_color

TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_DECIMAL = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass
class Image:
    """A width x height image of 32-bit pixel values stored row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [0] * size
        elif len(self.pixels) != size:
            raise ValueError(f"expected {size} pixels, got {len(self.pixels)}")

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y); points outside the image read as 0."""
        if not self._inside(x, y):
            return 0
        return self.pixels[y * self.width + x]

    def put(self, x: int, y: int, color: int) -> None:
        """Store a colour at (x, y), kept to 32 bits."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        self.pixels[y * self.width + x] = color & 0xFFFFFFFF


def _words(text: str) -> list[str]:
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _atoi(text: str) -> int:
    match = _DECIMAL.match(text)
    return int(match.group(1)) if match else 0


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    if match is None:
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def text_to_rgb(name: str, extra: str | None = None) -> int:
    """Turn a colour spec into 0xRRGGBB.

    '#rrggbb' is read as hexadecimal; otherwise ``name`` (joined with
    ``extra`` by a space when given) is looked up in the colour table.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if extra is not None:
        name = f"{name} {extra}"
    return lookup_color(name)


def _find_unquoted(text: str, token: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def _blank_out(text: str, opener: str, closer: str) -> str:
    while (begin := _find_unquoted(text, opener)) != -1:
        end = text.find(closer, begin + len(opener))
        stop = len(text) if end == -1 else end + len(closer)
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def strip_comments(text: str) -> str:
    """Replace C comments outside string literals with spaces, keeping the length."""
    text = _blank_out(text, "/*", "*/")
    return _blank_out(text, "//", "\n")


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour lines, then pixel rows."""
    source: Iterator[str] = iter(lines)

    def next_line() -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError("unexpected end of XPM data") from None

    header = _words(next_line())
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(header)!r}")

    later_wins = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        words = _words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour line without a value: {line!r}")
        extra = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], extra)
        key = line[:cpp]
        if later_wins:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        line = next_line()
        for x in range(width):
            color = colors.get(line[cpp * x:cpp * (x + 1)], 0)
            image.put(x, y, TRANSPARENT if color == NO_COLOR else color)
    return image


def parse_xpm_text(text: str) -> Image:
    """Parse the text of an XPM file, as written in C syntax."""
    return parse_xpm(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | Path) -> Image:
    """Read and parse an XPM file."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc.strerror or exc}") from exc
    return parse_xpm_text(data.decode("latin-1"))