import math

import pytest

from raycube.world import (
    GameMap,
    Settings,
    View,
    calculate_tile_size,
    distance_points,
    normal_rad,
    spawn_rotation,
)

LINES = ["11111", "1N021", "10201", "111"]


@pytest.fixture
def game_map():
    return GameMap.from_lines(LINES, 300, 240)


@pytest.mark.parametrize(
    "char, angle",
    [("E", 0.0), ("S", math.pi / 2), ("W", math.pi), ("N", 3 * math.pi / 2)],
)
def test_spawn_rotation(char, angle):
    assert spawn_rotation(char) == pytest.approx(angle)


def test_normal_rad_wraps_both_ways():
    assert normal_rad(2 * math.pi) == pytest.approx(0.0)
    assert normal_rad(-0.5) == pytest.approx(2 * math.pi - 0.5)
    assert normal_rad(1.25) == 1.25


def test_distance_points():
    assert distance_points(0, 0, 3, 4) == pytest.approx(5.0)
    assert distance_points(1, 2, 1, 2) == 0
    assert distance_points(1, 7, -2, 3) == distance_points(-2, 3, 1, 7)


def test_calculate_tile_size_fits_a_third_of_the_screen():
    tile = calculate_tile_size(640, 480, 10, 5)
    assert tile == 21.0
    assert tile.is_integer()
    assert tile * 10 * 3 <= 640
    assert tile * 5 * 3 <= 480


def test_calculate_tile_size_rejects_empty_map():
    with pytest.raises(ValueError):
        calculate_tile_size(640, 480, 0, 0)


def test_from_lines_dimensions(game_map):
    assert game_map.rows == len(LINES)
    assert game_map.cols == max(len(line) for line in LINES)
    assert game_map.width == game_map.cols * game_map.tile_size
    assert game_map.height == game_map.rows * game_map.tile_size
    assert game_map.tile_size == calculate_tile_size(300, 240, 5, 4)


def test_from_lines_rejects_map_too_big_for_screen():
    with pytest.raises(ValueError):
        GameMap.from_lines(["1" * 50], 100, 100)


def test_has_wall(game_map):
    t = game_map.tile_size
    assert game_map.has_wall(0.5 * t, 0.5 * t)
    assert not game_map.has_wall(2.5 * t, 1.5 * t)
    assert game_map.has_wall(-5, 1.5 * t)
    assert game_map.has_wall(game_map.width + 1, 1.5 * t)
    # Short last row: columns past its end count as walls.
    assert game_map.has_wall(4.5 * t, 3.5 * t)
    assert game_map.has_wall(1.5 * t, game_map.height)


def test_player_spawn(game_map):
    t = game_map.tile_size
    x, y, angle = game_map.player_spawn()
    assert (x, y) == (1.5 * t, 1.5 * t)
    assert angle == pytest.approx(spawn_rotation("N"))


def test_player_spawn_last_letter_wins():
    gm = GameMap.from_lines(["1111", "1NE1", "1111"], 400, 300)
    x, _, angle = gm.player_spawn()
    assert x == 2.5 * gm.tile_size
    assert angle == spawn_rotation("E")


def test_player_spawn_missing():
    gm = GameMap.from_lines(["111", "101", "111"], 300, 300)
    with pytest.raises(ValueError):
        gm.player_spawn()


def test_sprite_positions_in_reading_order(game_map):
    t = game_map.tile_size
    assert game_map.sprite_positions() == [
        (3.5 * t, 1.5 * t),
        (2.5 * t, 2.5 * t),
    ]


def test_view_for_width():
    view = View.for_width(640)
    assert view.num_rays == 640
    assert view.fov == pytest.approx(math.radians(60))
    assert view.fov_min + view.fov_max == pytest.approx(2 * math.pi)
    assert view.dist_proj_plane * math.tan(view.fov / 2) == pytest.approx(320)


def test_settings_colors():
    settings = Settings(
        width=640, height=480, north="n.xpm", south="s.xpm", west="w.xpm",
        east="e.xpm", sprite="sp.xpm", floor=(255, 0, 0), ceiling=(0, 0, 255),
        map_lines=list(LINES),
    )
    assert settings.floor_color == 0xFF0000
    assert settings.ceiling_color == 0x0000FF