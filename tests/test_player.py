import math

import pytest

from cubcaster.mapfile import CubMap
from cubcaster.player import MOVE_SPEED, Keys, Player, apply_inputs


def open_map():
    rows = ["11111", "10001", "10001", "10001", "11111"]
    return CubMap(rows, 5, 5)


def test_facing_north():
    player = Player.facing(2.5, 2.5, "N")
    assert (player.dx, player.dy, player.cx, player.cy) == (0.0, -1.0, 0.66, 0.0)
    assert player.direction == "N"


def test_facing_unknown_direction():
    with pytest.raises(ValueError):
        Player.facing(1.5, 1.5, "X")


@pytest.mark.parametrize("direction", ["N", "S", "E", "W"])
def test_camera_plane_is_perpendicular(direction):
    player = Player.facing(2.5, 2.5, direction)
    assert player.dx * player.cx + player.dy * player.cy == pytest.approx(0.0)
    assert math.hypot(player.dx, player.dy) == pytest.approx(1.0)


def test_rotate_preserves_length_and_angle():
    player = Player.facing(2.5, 2.5, "E")
    for _ in range(25):
        player.rotate(1.0)
    assert math.hypot(player.dx, player.dy) == pytest.approx(1.0)
    assert player.dx * player.cx + player.dy * player.cy == pytest.approx(0.0, abs=1e-12)


def test_rotate_back_restores_direction():
    player = Player.facing(2.5, 2.5, "S")
    player.rotate(1.0)
    player.rotate(-1.0)
    assert player.dx == pytest.approx(0.0, abs=1e-12)
    assert player.dy == pytest.approx(1.0)
    assert player.cx == pytest.approx(-0.66)


def test_move_forward_north():
    player = Player.facing(2.5, 2.5, "N")
    player.move(open_map(), 1.0)
    assert player.y == pytest.approx(2.5 - MOVE_SPEED)
    assert player.x == pytest.approx(2.5)


def test_walls_block_movement():
    cub_map = open_map()
    player = Player.facing(1.5, 1.5, "N")
    for _ in range(100):
        player.move(cub_map, 1.0)
    assert not cub_map.is_wall(player.x, player.y)
    assert player.y >= 1.0


def test_strafe_right_when_facing_north_moves_east():
    player = Player.facing(2.5, 2.5, "N")
    player.strafe(open_map(), 1.0)
    assert player.x > 2.5
    assert player.y == pytest.approx(2.5)


def test_forward_and_backward_cancel():
    player = Player.facing(2.5, 2.5, "W")
    apply_inputs(player, Keys(forward=True, backward=True), open_map())
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(2.5)


def test_turn_right_matches_rotate():
    expected = Player.facing(2.5, 2.5, "N")
    expected.rotate(1.0)
    player = Player.facing(2.5, 2.5, "N")
    apply_inputs(player, Keys(turn_right=True), open_map())
    assert (player.dx, player.dy) == pytest.approx((expected.dx, expected.dy))


def test_no_keys_no_change():
    player = Player.facing(2.5, 2.5, "E")
    before = Player.facing(2.5, 2.5, "E")
    apply_inputs(player, Keys(), open_map())
    assert player == before