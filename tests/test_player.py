import math

import pytest

from raycub.model import PI, Key, Move, Player
from raycub.player import FrameClock, key_press, key_release, move_player, rotate_player


@pytest.mark.parametrize(
    "key, move",
    [
        (Key.W, Move.UP),
        (Key.S, Move.DOWN),
        (Key.A, Move.LEFT),
        (Key.D, Move.RIGHT),
        (Key.LEFT, Move.ROTATE_LEFT),
        (Key.RIGHT, Move.ROTATE_RIGHT),
    ],
)
def test_press_and_release(key, move):
    player = Player()
    assert key_press(player, int(key)) is False
    assert player.moves == {move}
    key_release(player, int(key))
    assert player.moves == set()


def test_escape_requests_quit():
    player = Player()
    assert key_press(player, int(Key.ESC)) is True
    assert player.moves == set()


def test_unknown_key_is_ignored():
    player = Player(moves={Move.UP})
    assert key_press(player, 1) is False
    key_release(player, 1)
    assert player.moves == {Move.UP}


def test_clock_first_delta_is_one_frame():
    clock = FrameClock()
    assert math.isclose(clock.delta(), 0.016667)


def test_clock_deltas_are_steady_and_capped():
    clock = FrameClock()
    deltas = [clock.delta() for _ in range(50)]
    assert all(math.isclose(d, deltas[0]) for d in deltas)
    slow = FrameClock(frame_time=1.0)
    assert slow.delta() == 0.1


def test_rotation_wraps_into_range():
    player = Player(angle=0.0, moves={Move.ROTATE_LEFT})
    rotate_player(player, 0.3)
    assert 0 <= player.angle < 2 * PI
    assert player.angle > PI


def test_rotation_left_then_right_restores_angle():
    player = Player(angle=1.0, moves={Move.ROTATE_LEFT})
    rotate_player(player, 0.2)
    assert player.angle < 1.0
    player.moves = {Move.ROTATE_RIGHT}
    rotate_player(player, 0.2)
    assert math.isclose(player.angle, 1.0)


def test_no_moves_keeps_player_still():
    player = Player(x=96.0, y=160.0, angle=0.5)
    move_player(player, FrameClock())
    assert (player.x, player.y, player.angle) == (96.0, 160.0, 0.5)


def test_forward_facing_east_moves_along_x():
    player = Player(x=100.0, y=100.0, angle=0.0, moves={Move.UP})
    move_player(player, FrameClock())
    assert player.x > 100.0
    assert math.isclose(player.y, 100.0)


def test_strafe_left_facing_east_moves_up():
    player = Player(x=100.0, y=100.0, angle=0.0, moves={Move.LEFT})
    move_player(player, FrameClock())
    assert player.y < 100.0
    assert math.isclose(player.x, 100.0)


def test_opposite_moves_cancel():
    player = Player(x=50.0, y=70.0, angle=1.2, moves={Move.UP, Move.DOWN})
    move_player(player, FrameClock())
    assert math.isclose(player.x, 50.0)
    assert math.isclose(player.y, 70.0)


def test_forward_is_faster_than_strafe():
    ahead = Player(x=0.0, y=0.0, angle=0.0, moves={Move.UP})
    aside = Player(x=0.0, y=0.0, angle=0.0, moves={Move.RIGHT})
    move_player(ahead, FrameClock())
    move_player(aside, FrameClock())
    assert math.isclose(ahead.x / aside.y, 1.5)