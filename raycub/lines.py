"""Line-level helpers for reading ``.cub`` scene text."""

from __future__ import annotations

from typing import Optional, Sequence

_MAP_CHARS = frozenset("10NSEW\t ")
_WALL_CHARS = frozenset("1 ")


def split_words(text: str, separators: str) -> list[str]:
    """Split ``text`` on any character of ``separators``, dropping empty words."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in separators:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def is_map_line(line: str) -> bool:
    """True when every character may appear in a map row."""
    return all(char in _MAP_CHARS for char in line)


def is_wall(line: str, size: int) -> bool:
    """True when the first ``size - 1`` characters are walls or spaces.

    The last character of the span is not examined.
    """
    return all(char in _WALL_CHARS for char in line[: max(size - 1, 0)])


def map_start_line(lines: Sequence[str]) -> Optional[int]:
    """Index of the first map line, or None.

    The map starts at the first line made only of map characters whose
    leading part is wall. Every line from there on must be a map line,
    otherwise there is no valid map and None is returned.
    """
    start: Optional[int] = None
    for index, line in enumerate(lines):
        if start is None and is_map_line(line) and is_wall(line, len(line)):
            start = index
        if start is not None and not is_map_line(line):
            return None
    return start


def map_start_index(text: str) -> Optional[int]:
    """Offset just past the first wall line of ``text``, or None.

    Only lines that follow a newline are looked at; an empty line passes
    its newline on to the next line, and after any other line that is not
    a wall the scan resumes past that line's newline.
    """
    length = len(text)
    pos = text.find("\n")
    while pos != -1:
        first = pos + 1
        end = text.find("\n", first)
        if end == -1:
            end = length
        if end == first:
            pos = end if end < length else -1
            continue
        if is_wall(text[first:end], end - first):
            return end
        pos = text.find("\n", end + 1) if end + 1 <= length else -1
    return None