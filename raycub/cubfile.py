"""Reading and validating whole ``.cub`` scene files."""

from __future__ import annotations

import os
from typing import Union

from raycub.elements import parse_elements
from raycub.lines import map_start_line, split_words
from raycub.mapcheck import check_blank_lines, check_players, check_spaces, map_closed
from raycub.model import CubError, Scene

EXTENSION_ERROR = "Only [.cub] files are expected"
OPEN_ERROR = "The file failed to open :"
READ_ERROR = "The file failed to read :"

_EXTENSION = ".cub"

PathLike = Union[str, "os.PathLike[str]"]


def valid_extension(filename: str) -> bool:
    """True when ``filename`` ends in ``.cub`` and has a name before it."""
    return len(filename) > len(_EXTENSION) and filename.endswith(_EXTENSION)


def read_text(path: PathLike) -> str:
    """Return the whole content of ``path``; raise CubError when it cannot be read or is empty."""
    name = os.fspath(path)
    try:
        handle = open(name, "rb")
    except IsADirectoryError:
        raise CubError(READ_ERROR, name) from None
    except OSError:
        raise CubError(OPEN_ERROR, name) from None
    with handle:
        try:
            data = handle.read()
        except OSError:
            raise CubError(READ_ERROR, name) from None
    if not data:
        raise CubError(OPEN_ERROR, name)
    return data.decode("utf-8", errors="surrogateescape")


def parse_text(text: str) -> Scene:
    """Validate scene ``text`` and return the scene it describes."""
    check_blank_lines(text)
    lines = split_words(text, "\n")
    start = map_start_line(lines)
    if start is None or start <= 0:
        raise CubError("Invalid map placement")
    scene = parse_elements(lines, start, Scene())
    if scene.color_count != 2:
        raise CubError("Missing map elements")
    if not map_closed(lines, start):
        raise CubError("The map is not closed")
    if not check_spaces(lines, start):
        raise CubError("Invalid map space")
    check_players(text)
    scene.rows = list(lines[start:])
    return scene


def load_scene(path: PathLike) -> Scene:
    """Read and validate the ``.cub`` file at ``path``."""
    name = os.fspath(path)
    if not valid_extension(name):
        raise CubError(EXTENSION_ERROR)
    return parse_text(read_text(name))