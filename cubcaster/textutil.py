"""Small text helpers used by the scene parser."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr

_WHITESPACE = " \t\n\v\f\r"
_CHUNK_SIZE = 4096


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped. A single ``+`` or ``-`` may follow; more
    than one sign character yields 0. Parsing stops at the first non-digit,
    and text with no digits yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    signs = 0
    negative = False
    while pos < length and text[pos] in "+-":
        if text[pos] == "-":
            negative = not negative
        signs += 1
        pos += 1
    if signs > 1:
        return 0
    value = 0
    while pos < length and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return -value if negative else value


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each keeping its trailing newline.

    Lines are split on ``\\n`` only. A final line without a newline is
    yielded as is; nothing is yielded for an empty remainder.
    """
    pending = None
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        pending = chunk if pending is None else pending + chunk
        newline = "\n" if isinstance(pending, str) else b"\n"
        start = 0
        while True:
            end = pending.find(newline, start)
            if end == -1:
                break
            yield pending[start:end + 1]
            start = end + 1
        pending = pending[start:]
    if pending:
        yield pending