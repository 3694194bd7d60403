"""Structural checks on the map part of a ``.cub`` scene."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from raycub.lines import is_wall, map_start_index, split_words
from raycub.model import CubError

_PLAYERS = frozenset("NSEW")
_OPEN_CELLS = frozenset("0NSEW")
_BLANK_LINE = re.compile(r"\n *\n")
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def map_closed(lines: Sequence[str], start: int) -> bool:
    """True when the map starting at ``lines[start]`` is walled in.

    Every row but the last must begin and end (ignoring spaces) with a
    wall, and the last row must be a wall line.
    """
    rows = list(lines[start:])
    if not rows:
        return False
    for line in rows[:-1]:
        body = line.strip(" ")
        if not body or body[0] != "1" or body[-1] != "1":
            return False
    last = rows[-1]
    return is_wall(last, len(last))


def check_players(text: str) -> int:
    """Count the player markers in the map part of ``text``.

    Raises CubError when there is no player, or when two or more markers
    are followed by any other character.
    """
    start = map_start_index(text) or 0
    count = 0
    for char in text[start:]:
        if char in _PLAYERS:
            count += 1
        elif count > 1:
            raise CubError("Double player found!")
    if count == 0:
        raise CubError("No player found")
    return count


def check_blank_lines(text: str) -> int:
    """Reject a missing map or blank lines inside it.

    Returns the offset the map scan starts from.
    """
    start = map_start_index(text)
    if start is None:
        raise CubError("The map is missing or invalid")
    if _BLANK_LINE.search(text, start):
        raise CubError("Multiples lines in map")
    return start


def is_double_id(
    lines: Sequence[str], count: int, ident: str, index: int
) -> bool:
    """True when another of the first ``count`` lines starts with ``ident``."""
    for position, line in enumerate(lines[:count]):
        words = split_words(line, " \t")
        if position != index and words and words[0] == ident:
            return True
    return False


def valid_area(rows: Sequence[str], x: int, y: int, allowed: str) -> bool:
    """True when the right, left and lower neighbours of (x, y) are allowed.

    When ``allowed`` starts with a space, neighbours beyond the end of
    their row are ignored.
    """
    above: Optional[str] = rows[y - 1] if y > 0 else rows[y]
    lenient = allowed.startswith(" ")
    for dx, dy in _NEIGHBOURS:
        nx, ny = x + dx, y + dy
        if nx < 0 or ny < y:
            continue
        row = rows[ny] if ny < len(rows) else None
        if lenient and (row is None or nx > len(row)):
            continue
        if nx > len(above):
            return False
        if row is None or nx >= len(row):
            return False
        if row[nx] not in allowed:
            return False
    return True


def check_spaces(rows: Sequence[str], start: int) -> bool:
    """True when spaces touch only walls and open cells touch only open cells or walls."""
    for y, row in enumerate(rows[start:], start):
        for x, cell in enumerate(row):
            if cell == " " and not valid_area(rows, x, y, " 1"):
                return False
            if cell in _OPEN_CELLS and not valid_area(rows, x, y, "01NSEW"):
                return False
    return True