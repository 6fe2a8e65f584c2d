"""Reader for XPM pixmap images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from cubmap.colors import lookup_color
from cubmap.pixels import Image

TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_QUOTED = re.compile(r'"([^"]*)"')
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be read or decoded."""


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the first index of ``needle`` outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, length: int) -> str:
    stop = min(start + length, len(text))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside strings, keeping the length."""
    while (start := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", start + 2)
        length = end - start + 2 if end != -1 else 3
        text = _blank(text, start, length)
    while (start := find_unquoted(text, "//")) != -1:
        end = text.find("\n", start + 2)
        length = end - start + 1 if end != -1 else 2
        text = _blank(text, start, length)
    return text


def _atoi(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group(1)) if match else 0


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def text_color(name: str, extra: str | None = None) -> int:
    """Decode an XPM colour: ``#RRGGBB`` or a name, optionally two words.

    Unknown names give 0; ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        if not match or not match.group(2):
            return 0
        value = int(match.group(2), 16)
        if match.group(1) == "-":
            value = -value
        return _to_int32(value)
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _header(line: str | None) -> tuple[int, int, int, int]:
    if line is None:
        raise XpmError("missing XPM header")
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"incomplete XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if not all(values):
        raise XpmError(f"invalid XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _color_entry(line: str | None, cpp: int) -> tuple[str, int]:
    if line is None:
        raise XpmError("missing XPM colour definition")
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
        value = words[index]
    except (ValueError, IndexError):
        raise XpmError(f"no colour in definition: {line!r}") from None
    extra = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_color(value, extra)


def parse_xpm(lines: Iterable[str], big_endian: bool = False) -> Image:
    """Build an image from XPM strings: header, colours, then pixel rows.

    Transparent (``None``) pixels are stored as 0xFF000000.
    """
    rows = iter(lines)
    width, height, ncolors, cpp = _header(next(rows, None))
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _color_entry(next(rows, None), cpp)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)
    image = Image(width, height, big_endian=big_endian)
    for y in range(height):
        line = next(rows, None)
        if line is None:
            raise XpmError(f"missing pixel row {y}")
        for x in range(width):
            color = palette.get(line[cpp * x:cpp * (x + 1)], 0)
            image.put_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def parse_xpm_text(text: str, big_endian: bool = False) -> Image:
    """Decode the text of an XPM file."""
    return parse_xpm(quoted_lines(strip_comments(text)), big_endian)


def load_xpm(path: str | PathLike[str], big_endian: bool = False) -> Image:
    """Read and decode an XPM file."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc.strerror}") from exc
    return parse_xpm_text(text, big_endian)