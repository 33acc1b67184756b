import math

import pytest

from raycube.raycast import (
    NO_HIT,
    RayHit,
    cast_ray,
    facing,
    horizontal_hit,
    texture_offset,
    vertical_hit,
)
from raycube.world import GameMap, distance_points

ROOM = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]


@pytest.fixture
def room():
    return GameMap.from_lines(ROOM, 150, 150)


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, (False, False)),
        (math.pi / 2, (True, False)),
        (math.pi, (False, True)),
        (3 * math.pi / 2, (False, False)),
        (math.pi * 0.75, (True, True)),
        (math.pi * 1.25, (False, True)),
    ],
)
def test_facing(angle, expected):
    assert facing(angle) == expected


def test_east_ray_hits_vertical_wall(room):
    x, y, _ = room.player_spawn()
    hit = cast_ray(room, x, y, 0.0)
    assert hit.vertical is True
    assert hit.found
    assert hit.y == pytest.approx(y)
    assert hit.x % room.tile_size == 0
    assert room.has_wall(hit.x + 1, hit.y)
    assert not room.has_wall(hit.x - 1, hit.y)
    assert hit.distance == pytest.approx(distance_points(x, y, hit.x, hit.y))


def test_east_ray_has_no_horizontal_crossing(room):
    x, y, _ = room.player_spawn()
    assert horizontal_hit(room, x, y, 0.0) is None


def test_south_ray_hits_horizontal_wall(room):
    x, y, _ = room.player_spawn()
    hit = cast_ray(room, x, y, math.pi / 2)
    assert hit.vertical is False
    assert hit.x == pytest.approx(x)
    assert hit.y % room.tile_size == 0
    assert room.has_wall(hit.x, hit.y + 1)


def test_west_and_north_hits_face_back_toward_player(room):
    x, y, _ = room.player_spawn()
    west = cast_ray(room, x, y, math.pi)
    north = cast_ray(room, x, y, 3 * math.pi / 2)
    assert west.vertical is True
    assert room.has_wall(west.x - 1, west.y)
    assert west.x < x
    assert north.vertical is False
    assert room.has_wall(north.x, north.y - 1)
    assert north.y < y


def test_symmetric_room_gives_equal_distances(room):
    x, y, _ = room.player_spawn()
    distances = [cast_ray(room, x, y, a).distance for a in (0.0, math.pi / 2, math.pi)]
    assert distances[0] == pytest.approx(distances[1])
    assert distances[1] == pytest.approx(distances[2])


def test_diagonal_ray_picks_nearer_hit(room):
    x, y, _ = room.player_spawn()
    angle = 0.3
    hit = cast_ray(room, x, y, angle)
    candidates = [p for p in (horizontal_hit(room, x, y, angle), vertical_hit(room, x, y, angle)) if p]
    best = min(distance_points(x, y, *p) for p in candidates)
    assert hit.distance == pytest.approx(best)


def test_open_map_has_no_hit():
    game_map = GameMap.from_lines(["000", "0E0", "000"], 90, 90)
    x, y, angle = game_map.player_spawn()
    hit = cast_ray(game_map, x, y, angle)
    assert hit.distance == NO_HIT
    assert hit.vertical is True
    assert not hit.found


def test_texture_offset_at_tile_edge_is_zero():
    hit = RayHit(x=20.0, y=30.0, distance=5.0, vertical=True)
    assert texture_offset(hit, 10.0, 64) == 0


def test_texture_offset_uses_x_for_horizontal_hits():
    vertical = RayHit(x=25.0, y=30.0, distance=5.0, vertical=True)
    horizontal = RayHit(x=25.0, y=30.0, distance=5.0, vertical=False)
    assert texture_offset(vertical, 10.0, 64) == 0
    assert texture_offset(horizontal, 10.0, 64) > 0


@pytest.mark.parametrize("frac", [0.0, 0.1, 0.33, 0.5, 0.9, 0.999])
def test_texture_offset_stays_in_range(frac):
    hit = RayHit(x=(3 + frac) * 10.0, y=0.0, distance=1.0, vertical=False)
    assert 0 <= texture_offset(hit, 10.0, 64) < 64