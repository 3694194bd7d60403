"""Keyboard state and per-frame movement of the player."""

from __future__ import annotations

import math

from raycub.model import PI, Key, Move, Player, Setting

FRAME_TIME = 0.016667
MAX_DELTA = 0.1

_KEY_MOVES = {
    int(Key.W): Move.UP,
    int(Key.S): Move.DOWN,
    int(Key.A): Move.LEFT,
    int(Key.D): Move.RIGHT,
    int(Key.LEFT): Move.ROTATE_LEFT,
    int(Key.RIGHT): Move.ROTATE_RIGHT,
}


class FrameClock:
    """A simulated clock advancing one fixed frame per reading."""

    def __init__(self, frame_time: float = FRAME_TIME) -> None:
        self.frame_time = frame_time
        self.frames = 0
        self.last = 0.0

    def delta(self) -> float:
        """Advance one frame and return the time since the previous reading, capped."""
        self.frames += 1
        now = self.frames * self.frame_time
        elapsed = now - self.last
        self.last = now
        return min(elapsed, MAX_DELTA)


def key_press(player: Player, key: int) -> bool:
    """Hold the move bound to ``key``; return True when the key asks to quit."""
    if key == Key.ESC:
        return True
    move = _KEY_MOVES.get(int(key))
    if move is not None:
        player.moves.add(move)
    return False


def key_release(player: Player, key: int) -> None:
    """Release the move bound to ``key``."""
    move = _KEY_MOVES.get(int(key))
    if move is not None:
        player.moves.discard(move)


def rotate_player(player: Player, delta: float) -> None:
    """Turn the player for ``delta`` seconds and keep the angle in [0, 2*PI)."""
    speed = Setting.PLAYER_ROT_SPEED / 3 * delta
    if Move.ROTATE_LEFT in player.moves:
        player.angle -= speed
    if Move.ROTATE_RIGHT in player.moves:
        player.angle += speed
    full_turn = 2 * PI
    if player.angle < 0 or player.angle >= full_turn:
        player.angle = math.fmod(player.angle, full_turn)
        if player.angle < 0:
            player.angle += full_turn
        if player.angle >= full_turn:
            player.angle -= full_turn


def move_player(player: Player, clock: FrameClock) -> None:
    """Apply one frame of rotation and movement from the held moves."""
    delta = clock.delta()
    rotate_player(player, clock.delta())
    cos_angle = math.cos(player.angle)
    sin_angle = math.sin(player.angle)
    strafe = Setting.PLAYER_SPEED * delta * 20
    forward = strafe * 1.5
    dx = dy = 0.0
    if Move.UP in player.moves:
        dx += cos_angle * forward
        dy += sin_angle * forward
    if Move.DOWN in player.moves:
        dx -= cos_angle * forward
        dy -= sin_angle * forward
    if Move.LEFT in player.moves:
        dx += sin_angle * strafe
        dy -= cos_angle * strafe
    if Move.RIGHT in player.moves:
        dx -= sin_angle * strafe
        dy += cos_angle * strafe
    player.x += dx
    player.y += dy