import math

import pytest

from raycube.image import Image
from raycube.player import Player
from raycube.sprites import Sprite, sprites_from_map, update_sprites
from raycube.world import GameMap, View

LINES = [
    "111111",
    "1E0021",
    "100001",
    "120001",
    "111111",
]
WIDTH = HEIGHT = 180


@pytest.fixture
def game_map():
    return GameMap.from_lines(LINES, WIDTH, HEIGHT)


@pytest.fixture
def texture():
    return Image.blank(64, 64)


def test_sprites_from_map_positions(game_map, texture):
    sprites = sprites_from_map(game_map, texture)
    assert [(s.x, s.y) for s in sprites] == game_map.sprite_positions()
    assert all(s.texture is texture for s in sprites)
    assert len(sprites) == 2


def test_update_sorts_farthest_first(game_map, texture):
    sprites = sprites_from_map(game_map, texture)
    player = Player.spawn(game_map)
    view = View.for_width(WIDTH)
    result = update_sprites(sprites, player, view, WIDTH, HEIGHT, game_map.tile_size)
    assert result is sprites
    distances = [s.distance for s in sprites]
    assert distances == sorted(distances, reverse=True)
    far = math.hypot(sprites[0].x - player.x, sprites[0].y - player.y)
    assert sprites[0].distance == pytest.approx(far)


def test_visibility_follows_field_of_view(game_map, texture):
    sprites = sprites_from_map(game_map, texture)
    player = Player.spawn(game_map)
    view = View.for_width(WIDTH)
    update_sprites(sprites, player, view, WIDTH, HEIGHT, game_map.tile_size)
    by_pos = {(s.x, s.y): s for s in sprites}
    ahead = by_pos[game_map.sprite_positions()[0]]
    aside = by_pos[game_map.sprite_positions()[1]]
    assert ahead.visible is True
    assert ahead.angle == pytest.approx(0.0)
    assert aside.visible is False
    assert aside.angle == pytest.approx(math.pi / 2)


def test_sprite_straight_ahead_is_centred(game_map, texture):
    sprites = sprites_from_map(game_map, texture)
    player = Player.spawn(game_map)
    view = View.for_width(WIDTH)
    update_sprites(sprites, player, view, WIDTH, HEIGHT, game_map.tile_size)
    ahead = next(s for s in sprites if s.visible)
    assert (ahead.x_start + ahead.x_end) / 2 == pytest.approx(WIDTH / 2)
    assert (ahead.y_start + ahead.y_end) / 2 == pytest.approx(HEIGHT / 2)
    assert ahead.x_end - ahead.x_start == pytest.approx(ahead.width)
    assert ahead.width == pytest.approx(ahead.height)


def test_nearer_sprite_is_larger(texture):
    view = View.for_width(WIDTH)
    near = Sprite(0.0, 0.0, texture, distance=20.0)
    far = Sprite(0.0, 0.0, texture, distance=40.0)
    near.place_on_screen(view, WIDTH, HEIGHT, 10.0)
    far.place_on_screen(view, WIDTH, HEIGHT, 10.0)
    assert near.height == pytest.approx(2 * far.height)


def test_narrow_texture_gets_zero_width(texture):
    view = View.for_width(WIDTH)
    tall = Sprite(0.0, 0.0, Image.blank(32, 64), distance=20.0)
    tall.place_on_screen(view, WIDTH, HEIGHT, 10.0)
    assert tall.width == 0
    assert tall.height > 0


def test_zero_distance_hides_sprite(texture):
    sprite = Sprite(0.0, 0.0, texture, visible=True, distance=0.0)
    sprite.place_on_screen(View.for_width(WIDTH), WIDTH, HEIGHT, 10.0)
    assert sprite.visible is False


def test_covers_column_is_inclusive(texture):
    sprite = Sprite(0.0, 0.0, texture, x_start=10.0, x_end=20.0, width=10.0)
    assert sprite.covers_column(10)
    assert sprite.covers_column(20)
    assert not sprite.covers_column(9)
    assert not sprite.covers_column(21)


def test_texture_offset_spans_texture(texture):
    sprite = Sprite(0.0, 0.0, texture, x_start=10.0, x_end=20.0, width=10.0)
    assert sprite.texture_offset(10) == 0
    assert sprite.texture_offset(20) == texture.width - 1
    offsets = [sprite.texture_offset(c) for c in range(10, 21)]
    assert offsets == sorted(offsets)