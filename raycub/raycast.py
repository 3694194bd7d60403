"""Grid traversal (DDA) that finds where a ray meets a wall."""

from __future__ import annotations

from dataclasses import dataclass

from raycub.model import Player, Scene, Setting

_EPSILON = 1e-10
_FAR = 1e6

VERTICAL = 0
HORIZONTAL = 1


@dataclass(frozen=True)
class RayHit:
    """Where a ray meets a wall.

    ``side`` is 0 when a vertical wall face (a grid line of constant x) was
    hit and 1 for a horizontal face. ``map_x`` and ``map_y`` name the wall
    cell that stopped the ray.
    """

    x: float
    y: float
    side: int
    map_x: int
    map_y: int


def is_wall_or_boundary(scene: Scene, map_x: int, map_y: int) -> bool:
    """True when the cell is a wall or lies outside the map."""
    if map_x < 0 or map_y < 0:
        return True
    if map_y >= len(scene.rows):
        return True
    row = scene.rows[map_y]
    if map_x >= len(row):
        return True
    return row[map_x] == "1"


def _delta_distance(direction: float) -> float:
    if abs(direction) < _EPSILON:
        return _FAR
    return abs(1.0 / direction)


def _initial_step(position: float, cell: int, direction: float, delta: float) -> tuple[int, float]:
    scaled = position / Setting.GRID_SIZE
    if direction < 0:
        return -1, (scaled - cell) * delta
    return 1, (cell + 1.0 - scaled) * delta


def cast_ray_to_wall(player: Player, scene: Scene, dir_x: float, dir_y: float) -> RayHit:
    """Follow the ray from the player along (dir_x, dir_y) to the first wall."""
    grid = Setting.GRID_SIZE
    map_x = int(player.x / grid)
    map_y = int(player.y / grid)
    delta_x = _delta_distance(dir_x)
    delta_y = _delta_distance(dir_y)
    step_x, side_x = _initial_step(player.x, map_x, dir_x, delta_x)
    step_y, side_y = _initial_step(player.y, map_y, dir_y, delta_y)

    side = VERTICAL
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = VERTICAL
        else:
            side_y += delta_y
            map_y += step_y
            side = HORIZONTAL
        if is_wall_or_boundary(scene, map_x, map_y):
            break

    if side == VERTICAL:
        hit_x = float(map_x * grid)
        if step_x < 0:
            hit_x += grid
        hit_y = player.y
        if abs(dir_x) > _EPSILON:
            hit_y = player.y + dir_y * (hit_x - player.x) / dir_x
    else:
        hit_y = float(map_y * grid)
        if step_y < 0:
            hit_y += grid
        hit_x = player.x
        if abs(dir_y) > _EPSILON:
            hit_x = player.x + dir_x * (hit_y - player.y) / dir_y
    return RayHit(hit_x, hit_y, side, map_x, map_y)