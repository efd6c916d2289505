"""Reader for XPM images as used for wall, door and torch textures."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from cubcaster.colors import lookup_color
from cubcaster.textutil import atoi

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63
_HEX_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)"
)
_QUOTED = re.compile(r'"([^"]*)"')
_WORD_SEP = re.compile(r"[ \t]")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image; ``pixels`` holds 32-bit values row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the 32-bit value of the pixel at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def _words(text: str) -> list[str]:
    return [word for word in _WORD_SEP.split(text) if word]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _parse_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits, 16) if digits else 0
    if sign == "-":
        value = -value
    return _to_int32(value)


def text_to_rgb(name: str, extra: str | None = None) -> int:
    """Resolve an XPM colour specification to 0xRRGGBB.

    ``#`` introduces a hexadecimal value. Otherwise ``name`` (joined with
    ``extra`` by a space when given) is looked up among the named colours;
    "none" gives -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _find_unquoted(text: str, token: str) -> int:
    quoted = False
    for pos in range(len(text) - len(token) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The result has the same length as ``text``.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 2)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 1)
    return text


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(lines: Iterator[str]) -> tuple[int, int, int, int]:
    words = _words(_next_line(lines, "header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    values = tuple(atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header: {' '.join(words[:4])}")
    return values  # type: ignore[return-value]


def _read_palette(lines: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    # Short keys let later definitions win; long keys keep the first one.
    first_wins = cpp > 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "colour table")
        words = _words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        extra = words[index + 2] if index + 2 < len(words) else None
        value = text_to_rgb(words[index + 1], extra)
        key = line[:cpp]
        if first_wins:
            palette.setdefault(key, value)
        else:
            palette[key] = value
    return palette


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from the strings of an XPM file, header first."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(source)
    palette = _read_palette(source, ncolors, cpp)
    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(source, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        for start in range(0, width * cpp, cpp):
            color = palette.get(line[start:start + cpp], 0)
            if color == -1:
                color = TRANSPARENT
            pixels.append(color & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the full text of an XPM file."""
    return parse_xpm(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(text)