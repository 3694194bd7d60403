"""Identifier lines of a ``.cub`` scene: textures and colours."""

from __future__ import annotations

import os
from typing import Optional, Sequence

from raycub.lines import is_map_line, is_wall, split_words
from raycub.mapcheck import is_double_id
from raycub.model import (
    CEILING_ERROR,
    FLOOR_ERROR,
    NO_ID,
    CubError,
    Scene,
    TextureId,
)

_IDS = ("NO", "SO", "WE", "EA", "F", "C")
_TEXTURE_IDS = {
    "NO": TextureId.NORTH,
    "SO": TextureId.SOUTH,
    "EA": TextureId.EAST,
    "WE": TextureId.WEST,
}


def check_id(token: str) -> str:
    """Return ``token`` when it is a known identifier, else raise CubError."""
    if token not in _IDS:
        if is_map_line(token) and not is_wall(token, len(token)):
            raise CubError("The map is not closed")
        raise CubError("Invalid ID")
    return token


def is_valid_rgb_component(text: Optional[str]) -> bool:
    """True for one to three ASCII digits worth at most 255."""
    if text is None:
        return False
    if not all("0" <= char <= "9" for char in text):
        return False
    if not 1 <= len(text) <= 3:
        return False
    return int(text) <= 255


def has_double_separator(text: str, separator: str) -> bool:
    """True when ``separator`` appears twice in a row."""
    return separator * 2 in text


def parse_color(text: str) -> tuple[int, int, int]:
    """Parse ``R,G,B`` into a tuple; raise ValueError when malformed."""
    if not text or text[0] == "," or text[-1] == ",":
        raise ValueError(f"invalid colour {text!r}")
    if has_double_separator(text, ","):
        raise ValueError(f"invalid colour {text!r}")
    parts = split_words(text, ",")
    if len(parts) != 3 or not all(is_valid_rgb_component(p) for p in parts):
        raise ValueError(f"invalid colour {text!r}")
    red, green, blue = (int(part) for part in parts)
    return red, green, blue


def check_texture_file(path: str) -> str:
    """Return ``path`` when it can be opened for reading, else raise CubError."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except PermissionError:
        raise CubError("Permission denied: ", path) from None
    except FileNotFoundError:
        raise CubError("File not found: ", path) from None
    except OSError:
        raise CubError("Cannot open file: ", path) from None
    os.close(fd)
    return path


def parse_elements(lines: Sequence[str], count: int, scene: Scene) -> Scene:
    """Read the first ``count`` identifier lines into ``scene``."""
    for index, line in enumerate(lines[:count]):
        words = split_words(line, " \t")
        if len(words) > 2:
            raise CubError("Too much content")
        ident = check_id(words[0] if words else "")
        if is_double_id(lines, count, ident, index):
            raise CubError("Double ID")
        if len(words) < 2:
            raise CubError(NO_ID)
        value = words[1]
        if ident == "F":
            try:
                scene.floor_color = parse_color(value)
            except ValueError:
                raise CubError(FLOOR_ERROR) from None
            scene.color_count += 1
        elif ident == "C":
            try:
                scene.ceiling_color = parse_color(value)
            except ValueError:
                raise CubError(CEILING_ERROR) from None
            scene.color_count += 1
        else:
            check_texture_file(value)
            scene.texture_paths[_TEXTURE_IDS[ident]] = value
    return scene