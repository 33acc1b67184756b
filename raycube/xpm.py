"""Reader for XPM text images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from .colors import create_trgb, text_to_rgb
from .image import Image

__all__ = [
    "XpmError",
    "split_words",
    "find_unquoted",
    "strip_comments",
    "quoted_lines",
    "parse_xpm",
    "load_xpm",
]

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_TRANSPARENT = create_trgb(0xFF, 0, 0, 0)


class XpmError(ValueError):
    """The XPM data is malformed or could not be read."""


def split_words(text: str) -> list[str]:
    """Split on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of needle outside double quotes, or -1."""
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quotes by spaces, keeping length."""
    while (start := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", start + 2)
        text = _blank(text, start, len(text) if end == -1 else end + 2)
    while (start := find_unquoted(text, "//")) != -1:
        end = text.find("\n", start + 2)
        text = _blank(text, start, len(text) if end == -1 else end + 1)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in order."""
    pos = 0
    while (opening := text.find('"', pos)) != -1:
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def _atoi(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what} line") from None


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour lines, then pixel rows."""
    rows = iter(lines)
    words = split_words(_next_line(rows, "header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(words[:4])!r}")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour")
        words = split_words(line[cpp:])
        try:
            pos = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if pos >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        suffix = words[pos + 1] if pos + 1 < len(words) else None
        rgb = text_to_rgb(words[pos], suffix)
        key = line[:cpp]
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(rows, "pixel")
        for x in range(width):
            color = palette.get(line[cpp * x:cpp * (x + 1)], 0)
            pixels.append(_TRANSPARENT if color == -1 else color)
    return Image(width, height, pixels)


def load_xpm(path: str | Path) -> Image:
    """Read an XPM file from disk."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))