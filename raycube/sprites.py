"""Sprites on the map: visibility, depth order and on-screen placement."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .image import Image
from .world import GameMap, View, normal_rad

__all__ = ["Sprite", "sprites_from_map", "update_sprites"]

# Sprites are drawn a little smaller than a full tile.
SPRITE_SCALE = 0.8


@dataclass
class Sprite:
    """One sprite: map position, texture and its latest screen geometry."""

    x: float
    y: float
    texture: Image
    angle: float = 0.0
    distance: float = 0.0
    visible: bool = False
    width: float = 0.0
    height: float = 0.0
    y_start: float = 0.0
    y_end: float = 0.0
    x_start: float = 0.0
    x_end: float = 0.0

    def covers_column(self, column: int) -> bool:
        """Whether the screen column falls within the sprite."""
        return self.x_start <= column <= self.x_end

    def texture_offset(self, column: int) -> int:
        """Texture column to draw at a screen column."""
        remainder = (column - self.x_start) / self.width
        return int((self.texture.width - 1) * remainder)

    def place_on_screen(
        self, view: View, width: float, height: float, tile_size: float
    ) -> None:
        """Work out the sprite's size and position on a width x height screen."""
        if self.distance == 0:
            # Standing on the sprite: it cannot be projected.
            self.visible = False
            return
        depth = self.distance / tile_size
        aspect = self.texture.width // self.texture.height
        self.width = aspect * view.dist_proj_plane * SPRITE_SCALE / depth
        self.height = view.dist_proj_plane * SPRITE_SCALE / depth
        self.y_start = height / 2 - self.height / 2
        self.y_end = self.y_start + self.height
        center = math.tan(self.angle) * view.dist_proj_plane
        self.x_start = width / 2 + center - self.width / 2
        self.x_end = self.x_start + self.width


def sprites_from_map(game_map: GameMap, texture: Image) -> list[Sprite]:
    """Create one sprite at the centre of every sprite tile."""
    return [Sprite(x, y, texture) for x, y in game_map.sprite_positions()]


def _update_info(sprite: Sprite, player, view: View) -> None:
    dx = sprite.x - player.x
    dy = sprite.y - player.y
    map_angle = normal_rad(math.atan2(dy, dx))
    sprite.angle = normal_rad(map_angle - player.angle)
    sprite.visible = (
        view.fov_min < sprite.angle < 2 * math.pi
        or 0 <= sprite.angle < view.fov_max
    )
    sprite.distance = math.hypot(dx, dy)


def update_sprites(
    sprites: list[Sprite],
    player,
    view: View,
    width: float,
    height: float,
    tile_size: float,
) -> list[Sprite]:
    """Refresh angles and distances, sort farthest first, place visible ones.

    The list is sorted in place and also returned.
    """
    for sprite in sprites:
        _update_info(sprite, player, view)
    sprites.sort(key=lambda sprite: sprite.distance, reverse=True)
    for sprite in sprites:
        if sprite.visible:
            sprite.place_on_screen(view, width, height, tile_size)
    return sprites