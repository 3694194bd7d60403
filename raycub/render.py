"""Frame buffer and textured wall drawing for one rendered view."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Mapping

from raycub.model import PI, Player, Scene, Setting, Texture, TextureId
from raycub.player import FrameClock, move_player
from raycub.raycast import cast_ray_to_wall

_EDGE_TOLERANCE = 0.0001
_COLOR_MASK = 0xFFFFFF


@dataclass
class Frame:
    """A row-major image of 0xRRGGBB pixels."""

    width: int = int(Setting.WIDTH)
    height: int = int(Setting.HEIGHT)
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("frame size must not be negative")
        self.pixels = [0] * (self.width * self.height)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points outside the frame are ignored."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return
        self.pixels[y * self.width + x] = color & _COLOR_MASK

    def clear(self) -> None:
        """Paint the whole frame black."""
        self.pixels[:] = [0] * (self.width * self.height)

    def fill_rows(self, start: int, stop: int, color: int) -> None:
        """Paint rows ``start`` up to, not including, ``stop`` with ``color``."""
        start = max(start, 0)
        stop = min(stop, self.height)
        if start >= stop:
            return
        count = (stop - start) * self.width
        self.pixels[start * self.width : stop * self.width] = [
            color & _COLOR_MASK
        ] * count


@dataclass(frozen=True)
class WallColumn:
    """The wall slice drawn in one screen column."""

    screen_x: int
    wall_x: float
    tex_id: TextureId
    wall_height: float
    draw_start: int
    draw_end: int


def rgb_to_int(r: int, g: int, b: int) -> int:
    """Pack red, green and blue components into one 0xRRGGBB value."""
    return (r << 16) | (g << 8) | b


def corrected_distance(player: Player, hit_x: float, hit_y: float) -> float:
    """Distance to the hit projected on the view direction (no fish-eye)."""
    delta_x = hit_x - player.x
    delta_y = hit_y - player.y
    angle_diff = math.atan2(delta_y, delta_x) - player.angle
    while angle_diff < -PI:
        angle_diff += 2 * PI
    while angle_diff > PI:
        angle_diff -= 2 * PI
    return math.hypot(delta_x, delta_y) * math.cos(angle_diff)


def select_wall_texture(
    hit_x: float, hit_y: float, dir_x: float, dir_y: float, hit_vertical: bool
) -> tuple[TextureId, float]:
    """Texture facing the ray and the horizontal texture offset in [0, 1]."""
    grid = Setting.GRID_SIZE
    if hit_vertical:
        wall_x = math.fmod(hit_y, grid) / grid
        if dir_x > 0:
            return TextureId.EAST, wall_x
        return TextureId.WEST, 1.0 - wall_x
    wall_x = math.fmod(hit_x, grid) / grid
    if dir_y > 0:
        return TextureId.SOUTH, 1.0 - wall_x
    return TextureId.NORTH, wall_x


def wall_column(
    player: Player, scene: Scene, angle: float, column: int
) -> WallColumn:
    """Cast the ray at ``angle`` and work out the wall slice for ``column``."""
    grid = Setting.GRID_SIZE
    height = int(Setting.HEIGHT)
    dir_x = math.cos(angle)
    dir_y = math.sin(angle)
    hit = cast_ray_to_wall(player, scene, dir_x, dir_y)
    dist = corrected_distance(player, hit.x, hit.y)
    offset = math.fmod(hit.x, grid)
    hit_vertical = (
        abs(offset) < _EDGE_TOLERANCE or abs(offset - grid) < _EDGE_TOLERANCE
    )
    tex_id, wall_x = select_wall_texture(hit.x, hit.y, dir_x, dir_y, hit_vertical)

    if dist == 0:
        wall_height = math.inf
        draw_start, draw_end = 0, height - 1
    else:
        wall_height = grid * height / dist
        draw_start = int(-wall_height / 2 + height // 2)
        draw_end = int(wall_height / 2 + height // 2)
    draw_start = max(draw_start, 0)
    draw_end = min(draw_end, height - 1)
    return WallColumn(column, wall_x, tex_id, wall_height, draw_start, draw_end)


def render_wall_column(
    frame: Frame,
    player: Player,
    scene: Scene,
    textures: Mapping[TextureId, Texture],
    angle: float,
    column: int,
) -> WallColumn:
    """Draw the textured wall slice for one column into ``frame``."""
    wall = wall_column(player, scene, angle, column)
    texture = textures[wall.tex_id]
    if math.isfinite(wall.wall_height):
        step = texture.height / wall.wall_height
        tex_pos = (
            wall.draw_start - int(Setting.HEIGHT) // 2 + wall.wall_height / 2
        ) * step
    else:
        step = 0.0
        tex_pos = 0.0
    tex_x = int(wall.wall_x * texture.width)
    mask = texture.height - 1
    for y in range(wall.draw_start, wall.draw_end + 1):
        tex_y = int(tex_pos) & mask
        tex_pos += step
        frame.put_pixel(wall.screen_x, y, texture.pixel(tex_x, tex_y))
    return wall


def render_frame(
    frame: Frame,
    player: Player,
    scene: Scene,
    textures: Mapping[TextureId, Texture],
    clock: FrameClock,
) -> Frame:
    """Advance the player one frame and draw ceiling, floor and walls."""
    move_player(player, clock)
    frame.clear()
    half = int(Setting.HEIGHT) // 2
    frame.fill_rows(0, half, rgb_to_int(*scene.ceiling_color))
    frame.fill_rows(half, int(Setting.HEIGHT), rgb_to_int(*scene.floor_color))
    width = int(Setting.WIDTH)
    half_fov = Setting.FOV * PI / 180.0 / 2
    spread = math.tan(half_fov)
    for screen_x in range(width):
        camera_x = 2.0 * screen_x / width - 1
        ray_angle = player.angle + math.atan(camera_x * spread)
        render_wall_column(frame, player, scene, textures, ray_angle, screen_x)
    return frame