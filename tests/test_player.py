import math

import pytest

from raycube.player import Key, Player, QuitRequested
from raycube.world import GameMap


@pytest.fixture
def game_map():
    return GameMap.from_lines(["11111", "1E001", "10001", "11111"], 300, 240)


@pytest.fixture
def player(game_map):
    return Player.spawn(game_map)


def test_spawn(game_map, player):
    t = game_map.tile_size
    assert (player.x, player.y) == (1.5 * t, 1.5 * t)
    assert player.angle == 0.0
    assert player.radius == pytest.approx(t / 6)
    assert player.move_speed == 0.35
    assert player.rotate_speed == pytest.approx(7 * math.pi / 180)
    assert player.walk is None and player.turn == 0


def test_walk_forward(game_map, player):
    start_x, start_y = player.x, player.y
    player.press(Key.W)
    player.update(game_map)
    assert player.x == pytest.approx(start_x + 0.35 * game_map.tile_size)
    assert player.y == pytest.approx(start_y)


def test_walk_backward_and_sideways(game_map, player):
    start_x, start_y = player.x, player.y
    player.press(Key.S)
    player.update(game_map)
    assert player.x < start_x
    player.release(Key.S)
    player.x, player.y = 2.5 * game_map.tile_size, 2.5 * game_map.tile_size
    player.press(Key.A)
    player.update(game_map)
    assert player.y == pytest.approx(2.5 * game_map.tile_size - 0.35 * game_map.tile_size)
    assert player.x == pytest.approx(2.5 * game_map.tile_size)


def test_wall_blocks_movement(game_map, player):
    player.press(Key.W)
    for _ in range(30):
        player.update(game_map)
    assert player.x < 4 * game_map.tile_size
    before = (player.x, player.y)
    player.update(game_map)
    assert (player.x, player.y) == before


def test_release_stops_walking(game_map, player):
    player.press(Key.D)
    player.release(Key.D)
    before = (player.x, player.y)
    player.update(game_map)
    assert (player.x, player.y) == before
    assert player.walk is None


def test_turning(game_map, player):
    player.press(Key.RIGHT_ARROW)
    player.update_orientation()
    assert player.angle == pytest.approx(player.rotate_speed)
    player.release(Key.RIGHT_ARROW)
    player.update_orientation()
    assert player.angle == pytest.approx(player.rotate_speed)
    player.press(Key.LEFT_ARROW)
    player.update_orientation()
    player.update_orientation()
    assert player.angle == pytest.approx(2 * math.pi - player.rotate_speed)
    assert player.turn == -1


def test_escape_requests_quit(player):
    with pytest.raises(QuitRequested):
        player.press(Key.ESC)


def test_unknown_key_is_ignored(game_map, player):
    player.press(99)
    player.release(99)
    assert player.walk is None and player.turn == 0
    before = (player.x, player.y, player.angle)
    player.update(game_map)
    assert (player.x, player.y, player.angle) == before


def test_raw_keycodes_work(player):
    player.press(13)
    assert player.walk is Key.W
    player.press(124)
    assert player.turn == 1