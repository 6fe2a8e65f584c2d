"""Validation of map descriptions: texture headers, grid characters, closure."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike, fspath

_KEYS = ("NO", "SO", "WE", "EA", "F", "C")
_ALLOWED = frozenset("10NSOE\n ")
_PLAYERS = "NSEW"
_WALLS = "1x"
_EXTENSION = ".cub"


class MapError(ValueError):
    """Raised when a map file or its contents are not valid."""


@dataclass
class Textures:
    """Texture paths for the four walls and the floor and ceiling colours."""

    north: str
    south: str
    west: str
    east: str
    floor: str
    ceiling: str


@dataclass
class MapData:
    """A validated map: the grid rows and where the player starts."""

    lines: list[str]
    textures: Textures
    x: int
    y: int
    direction: str
    x_limit: int
    y_limit: int


def check_map_name(path: str | PathLike[str]) -> str:
    """Return ``path`` as a string if it names a ``.cub`` file with a stem."""
    name = fspath(path)
    if len(name) <= len(_EXTENSION) or not name.endswith(_EXTENSION):
        raise MapError(f"map file name must end in {_EXTENSION}: {name!r}")
    return name


def parse_coordinates(lines: Sequence[str]) -> tuple[Textures, list[str]]:
    """Read the six header definitions, in order, from the top of ``lines``.

    Each definition line is removed, together with one blank line right
    after it.  Returns the textures and the lines that are left.
    """
    remaining = list(lines)
    values: list[str] = []
    i = 0
    while i < len(remaining) and len(values) < len(_KEYS):
        line = remaining[i]
        if line.startswith("\n"):
            i += 1
            continue
        key = _KEYS[len(values)]
        if not line.startswith(key):
            raise MapError(f"expected {key} definition, found {line.rstrip()!r}")
        values.append(line[len(key):].strip(" \t\n"))
        follows_blank = i + 1 < len(remaining) and remaining[i + 1].startswith("\n")
        del remaining[i:i + (2 if follows_blank else 1)]
    if len(values) < len(_KEYS):
        raise MapError(f"missing {_KEYS[len(values)]} definition")
    return Textures(*values), remaining


def check_characters(lines: Sequence[str]) -> None:
    """Check that the grid, after any leading blank lines, uses only map characters."""
    start = next((i for i, line in enumerate(lines) if not line.startswith("\n")), None)
    if start is None:
        raise MapError("map has no grid")
    for row, line in enumerate(lines[start:], start):
        bad = next((char for char in line if char not in _ALLOWED), None)
        if bad is not None:
            raise MapError(f"invalid character {bad!r} in map row {row}")


def find_player(lines: Sequence[str]) -> tuple[int, int, str] | None:
    """Return ``(x, y, direction)`` of the first player mark, or ``None``."""
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char in _PLAYERS:
                return x, y, char
    return None


def map_limits(lines: Sequence[str]) -> tuple[int, int]:
    """Return ``(x_limit, y_limit)``: the first row's length and the row count."""
    if not lines:
        return 0, 0
    return len(lines[0]), len(lines)


def is_closed(lines: Sequence[str], x: int, y: int, y_limit: int) -> bool:
    """Tell whether every cell reachable from ``(x, y)`` is enclosed by walls.

    Reaching a space, the end of a row or the edge of the map means the
    map is open.
    """
    seen: set[tuple[int, int]] = set()
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if cx < 0 or cy < 0 or cy >= y_limit or cy >= len(lines):
            return False
        row = lines[cy]
        if cx >= len(row) or row[cx] == " ":
            return False
        if row[cx] in _WALLS or (cx, cy) in seen:
            continue
        seen.add((cx, cy))
        stack.extend(((cx, cy + 1), (cx, cy - 1), (cx + 1, cy), (cx - 1, cy)))
    return True


def parse_map(lines: Sequence[str]) -> MapData:
    """Validate the lines of a map file and return the parsed map."""
    textures, grid = parse_coordinates(lines)
    check_characters(grid)
    x_limit, y_limit = map_limits(grid)
    player = find_player(grid)
    if player is None or not is_closed(grid, player[0], player[1], y_limit):
        raise MapError("open map")
    x, y, direction = player
    return MapData(grid, textures, x, y, direction, x_limit, y_limit)