"""Core data types shared by the parser, the ray caster and the game loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence

PI = 3.14159265359

ALLOC = "Allocation memory"
USAGE = "Usage -> ./cub3d [path/to/map.cub]"
NO_ID = "No ID content is provided"
CEILING_ERROR = "Invalid ceiling RGB"
FLOOR_ERROR = "Invalid floor RGB"


class Setting(IntEnum):
    """Fixed game settings."""

    WIDTH = 1280
    HEIGHT = 720
    GRID_SIZE = 64
    PLAYER_SPEED = 5
    PLAYER_ROT_SPEED = 4
    FOV = 60
    FOCUS_OUT = 10


class TextureId(IntEnum):
    """Wall textures, one per facing."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


class Key(IntEnum):
    """X11 key symbols the game reacts to."""

    W = 119
    A = 97
    S = 115
    D = 100
    LEFT = 65361
    RIGHT = 65363
    ESC = 65307


class Move(IntEnum):
    """Movement requests a player can hold."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    ROTATE_LEFT = 4
    ROTATE_RIGHT = 5


class CubError(Exception):
    """A scene or game error, reported as ``Error`` followed by the message."""

    def __init__(self, message: str, subject: Optional[str] = None) -> None:
        self.message = message
        self.subject = subject
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.subject is None:
            return self.message
        return f"{self.message}{self.subject}"


@dataclass
class Player:
    """Player position in pixels, view angle in radians and held moves."""

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    moves: set[Move] = field(default_factory=set)

    def clear_moves(self) -> None:
        """Release every held move."""
        self.moves.clear()


@dataclass
class Texture:
    """A wall texture as a row-major list of 0xRRGGBB pixels."""

    width: int
    height: int
    pixels: Sequence[int]
    path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("texture size must not be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    def pixel(self, x: int, y: int) -> int:
        """Colour at (x, y), or 0 when the point lies outside the texture."""
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return 0
        return self.pixels[y * self.width + x]


@dataclass
class Scene:
    """What a ``.cub`` file describes: map rows, colours and texture paths."""

    rows: list[str] = field(default_factory=list)
    floor_color: tuple[int, int, int] = (0, 0, 0)
    ceiling_color: tuple[int, int, int] = (0, 0, 0)
    texture_paths: dict[TextureId, str] = field(default_factory=dict)
    color_count: int = 0