"""Grid ray casting: where a ray from the player first meets a wall."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .world import GameMap, distance_points

__all__ = [
    "NO_HIT",
    "RayHit",
    "facing",
    "horizontal_hit",
    "vertical_hit",
    "cast_ray",
    "texture_offset",
]

# Distance reported for a ray that meets no wall inside the map.
NO_HIT = float(2**31 - 1)


@dataclass(frozen=True)
class RayHit:
    """The wall point a ray reached, its distance and which grid line it crossed."""

    x: float
    y: float
    distance: float
    vertical: bool

    @property
    def found(self) -> bool:
        """Whether the ray met a wall at all."""
        return self.distance < NO_HIT


def facing(angle: float) -> tuple[bool, bool]:
    """Return (facing_down, facing_left) for a normalised angle."""
    down = 0 < angle < math.pi
    left = math.pi / 2 < angle < 3 * math.pi / 2
    return down, left


def _march(
    game_map: GameMap,
    x: float,
    y: float,
    step_x: float,
    step_y: float,
    limit_x: float,
    limit_y: float,
    probe_x: float,
    probe_y: float,
) -> tuple[float, float] | None:
    """Step along grid crossings until the probed point lies in a wall."""
    while 0 <= x < limit_x and 0 <= y < limit_y:
        if game_map.has_wall(x + probe_x, y + probe_y):
            return x, y
        x += step_x
        y += step_y
    return None


def horizontal_hit(
    game_map: GameMap, x: float, y: float, angle: float
) -> tuple[float, float] | None:
    """First wall point where the ray crosses a horizontal grid line, if any."""
    tan = math.tan(angle)
    if tan == 0:
        # A ray parallel to the horizontal grid lines never crosses one.
        return None
    down, left = facing(angle)
    tile = game_map.tile_size
    inter_y = math.floor(y / tile) * tile
    if down:
        inter_y += tile
    inter_x = x + (inter_y - y) / tan
    step_y = tile if down else -tile
    step_x = abs(tile / tan)
    if left:
        step_x = -step_x
    return _march(
        game_map,
        inter_x,
        inter_y,
        step_x,
        step_y,
        game_map.width,
        game_map.height,
        0.0,
        1.0 if down else -1.0,
    )


def vertical_hit(
    game_map: GameMap, x: float, y: float, angle: float
) -> tuple[float, float] | None:
    """First wall point where the ray crosses a vertical grid line, if any."""
    down, left = facing(angle)
    tile = game_map.tile_size
    tan = math.tan(angle)
    inter_x = math.floor(x / tile) * tile
    if not left:
        inter_x += tile
    inter_y = y + (inter_x - x) * tan
    step_x = -tile if left else tile
    step_y = abs(tile * tan)
    if not down:
        step_y = -step_y
    if left:
        return _march(
            game_map, inter_x, inter_y, step_x, step_y,
            game_map.width, game_map.height, -1.0, 0.0,
        )
    return _march(
        game_map, inter_x, inter_y, step_x, step_y,
        game_map.width - 1, game_map.height - 1, 1.0, 0.0,
    )


def cast_ray(game_map: GameMap, x: float, y: float, angle: float) -> RayHit:
    """Cast one ray and keep the nearer of its horizontal and vertical hits."""
    horizontal = horizontal_hit(game_map, x, y, angle)
    vertical = vertical_hit(game_map, x, y, angle)
    horz_dist = distance_points(x, y, *horizontal) if horizontal else NO_HIT
    vert_dist = distance_points(x, y, *vertical) if vertical else NO_HIT
    if horz_dist < vert_dist:
        hx, hy = horizontal
        return RayHit(hx, hy, horz_dist, False)
    vx, vy = vertical if vertical else (0.0, 0.0)
    return RayHit(vx, vy, vert_dist, True)


def texture_offset(hit: RayHit, tile_size: float, texture_width: int) -> int:
    """Texture column for a wall hit, from where it falls within its tile."""
    coord = (hit.y if hit.vertical else hit.x) / tile_size
    remainder = coord - math.floor(coord)
    return int((texture_width - 1) * remainder)