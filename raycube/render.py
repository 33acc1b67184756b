"""Drawing one frame: floor, ceiling, textured walls, sprites and the minimap."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from .image import Image
from .player import Player
from .raycast import RayHit, cast_ray, texture_offset
from .sprites import Sprite, sprites_from_map, update_sprites
from .world import WALL, GameMap, Settings, View, normal_rad

__all__ = [
    "MINIMAP_WALL",
    "MINIMAP_FLOOR",
    "MINIMAP_PLAYER",
    "WALL_SIDES",
    "Scene",
]

MINIMAP_WALL = 0x85B569
MINIMAP_FLOOR = 0xEBDBB7
MINIMAP_PLAYER = 0xB87CB3
WALL_SIDES = ("north", "south", "west", "east")

_MINIMAP_OPEN = "02NSWE"
_TWO_PI = 2 * math.pi


@dataclass
class Scene:
    """The whole game state needed to draw a frame into an image."""

    settings: Settings
    game_map: GameMap
    view: View
    player: Player
    walls: Mapping[str, Image]
    sprites: list[Sprite]
    image: Image = field(repr=False)

    @classmethod
    def from_settings(
        cls, settings: Settings, walls: Mapping[str, Image], sprite_texture: Image
    ) -> Scene:
        """Set up map, player, view and sprites for the given settings.

        walls maps each of "north", "south", "west" and "east" to its texture.
        """
        missing = [side for side in WALL_SIDES if side not in walls]
        if missing:
            raise ValueError(f"missing wall textures: {', '.join(missing)}")
        game_map = GameMap.from_lines(settings.map_lines, settings.width, settings.height)
        return cls(
            settings=settings,
            game_map=game_map,
            view=View.for_width(settings.width),
            player=Player.spawn(game_map),
            walls=dict(walls),
            sprites=sprites_from_map(game_map, sprite_texture),
            image=Image.blank(settings.width, settings.height),
        )

    # -- pixel helpers -------------------------------------------------

    def _put(self, x: float, y: float, color: int) -> None:
        ix, iy = int(x), int(y)
        if 0 <= ix < self.image.width and 0 <= iy < self.image.height:
            self.image.pixels[iy * self.image.width + ix] = color

    def _fill_rect(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        width = self.image.width
        x0, x1 = max(0, x0), min(width, x1)
        y0, y1 = max(0, y0), min(self.image.height, y1)
        if x0 >= x1:
            return
        for y in range(y0, y1):
            self.image.pixels[y * width + x0:y * width + x1] = [color] * (x1 - x0)

    @staticmethod
    def _texel(texture: Image, texx: int, texy: int) -> int | None:
        index = texy * texture.width + texx
        if 0 <= index < len(texture.pixels):
            return texture.pixels[index]
        return None

    def _span(self, top: float, bottom: float) -> tuple[float, float]:
        """Clip a column's vertical extent to the screen."""
        height = self.settings.height
        start = 0.0 if top < 0 else top
        end = height - 1.0 if bottom >= height else bottom
        return start, end

    def _draw_textured_column(
        self,
        column: int,
        start: float,
        end: float,
        texture: Image,
        texx: int,
        *,
        transparent_zero: bool,
    ) -> None:
        pixels = abs(end - start)
        if not math.isfinite(pixels) or pixels <= 0:
            return
        direction = 1.0 if end >= start else -1.0
        y = start
        texy = 0
        for _ in range(math.ceil(pixels)):
            if not transparent_zero and texy == texture.width:
                texy = texture.width - 1
            color = self._texel(texture, texx, texy)
            if color is not None and (color or not transparent_zero):
                self._put(column, y, color)
            y += direction
            texy = int((y - start) * texture.width / pixels)

    # -- scene parts -----------------------------------------------------

    def wall_texture(self, hit: RayHit, angle: float) -> Image:
        """Pick the texture of the wall face that the ray reached."""
        angle = normal_rad(angle)
        if hit.vertical:
            side = "west" if math.pi / 2 < angle < 3 * math.pi / 2 else "east"
        else:
            side = "north" if math.pi < angle < _TWO_PI else "south"
        return self.walls[side]

    def _half_row(self) -> int:
        return int(math.ceil(self.settings.height / 2) - 1)

    def draw_floor(self) -> None:
        """Paint the lower part of the screen with the floor colour."""
        self.image.fill_rows(self._half_row(), self.settings.height, self.settings.floor_color)

    def draw_ceiling(self) -> None:
        """Paint the upper part of the screen with the ceiling colour."""
        self.image.fill_rows(0, self._half_row(), self.settings.ceiling_color)

    def _draw_wall_column(self, hit: RayHit, angle: float, column: int) -> None:
        tile = self.game_map.tile_size
        undistorted = hit.distance / tile * math.cos(angle - self.player.angle)
        line_height = self.view.dist_proj_plane / undistorted if undistorted else math.inf
        half = self.settings.height / 2
        start, end = self._span(half - line_height / 2, half + line_height / 2)
        texture = self.wall_texture(hit, angle)
        texx = texture_offset(hit, tile, texture.width)
        self._draw_textured_column(column, start, end, texture, texx, transparent_zero=False)

    def _draw_sprite_columns(self, hit: RayHit, column: int) -> None:
        for sprite in self.sprites:
            if not (
                sprite.visible
                and sprite.width > 0
                and sprite.covers_column(column)
                and hit.distance > sprite.distance
                and sprite.x_start > 0
                and sprite.x_end < self.settings.width
            ):
                continue
            half = self.settings.height / 2
            start, end = self._span(
                half - sprite.height * 11 / 40, half + sprite.height * 29 / 40
            )
            texx = sprite.texture_offset(column)
            self._draw_textured_column(
                column, start, end, sprite.texture, texx, transparent_zero=True
            )

    def draw_walls(self) -> None:
        """Cast one ray per column and draw the wall slice and sprites it sees."""
        view = self.view
        if view.num_rays <= 0:
            return
        step = view.fov / view.num_rays
        angle = normal_rad(self.player.angle - view.fov / 2)
        for column in range(view.num_rays):
            hit = cast_ray(self.game_map, self.player.x, self.player.y, angle)
            self._draw_wall_column(hit, angle, column)
            self._draw_sprite_columns(hit, column)
            angle = normal_rad(angle + step)

    def draw_minimap(self) -> None:
        """Draw the map from above in the top-left corner, with the player."""
        game_map = self.game_map
        tile = int(game_map.tile_size)
        for row, line in enumerate(game_map.lines):
            for col, char in enumerate(line):
                if char == WALL:
                    color = MINIMAP_WALL
                elif char in _MINIMAP_OPEN:
                    color = MINIMAP_FLOOR
                else:
                    continue
                self._fill_rect(
                    col * tile,
                    row * tile,
                    min((col + 1) * tile, game_map.width),
                    min((row + 1) * tile, game_map.height),
                    color,
                )
        self._draw_player_dot()
        self._draw_direction_line()

    def _draw_player_dot(self) -> None:
        px, py, radius = self.player.x, self.player.y, self.player.radius
        x_lo = max(0, math.floor(px - radius))
        x_hi = min(self.game_map.width - 1, math.ceil(px + radius))
        y_lo = max(0, math.floor(py - radius))
        y_hi = min(self.game_map.height - 1, math.ceil(py + radius))
        for y in range(y_lo, y_hi + 1):
            for x in range(x_lo, x_hi + 1):
                if math.hypot(px - x, py - y) <= radius:
                    self._put(x, y, MINIMAP_PLAYER)

    def _draw_direction_line(self) -> None:
        tile = self.game_map.tile_size
        dx = math.cos(self.player.angle) * tile
        dy = math.sin(self.player.angle) * tile
        length = math.hypot(dx, dy)
        if length <= 0:
            return
        dx, dy = dx / length, dy / length
        x, y = self.player.x, self.player.y
        for _ in range(math.ceil(length)):
            self._put(x, y, MINIMAP_PLAYER)
            x += dx
            y += dy

    def render(self) -> Image:
        """Advance the player one frame and draw a fresh image of the scene."""
        self.image = Image.blank(self.settings.width, self.settings.height)
        self.player.update(self.game_map)
        update_sprites(
            self.sprites,
            self.player,
            self.view,
            self.settings.width,
            self.settings.height,
            self.game_map.tile_size,
        )
        self.draw_floor()
        self.draw_ceiling()
        self.draw_walls()
        self.draw_minimap()
        return self.image