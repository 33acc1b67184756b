"""Scene settings, the tile map and the projection view derived from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .colors import create_trgb

__all__ = [
    "MAX_X_SIZE",
    "MAX_Y_SIZE",
    "MAP_CHARS",
    "MAP_INSIDE",
    "PLAYER_CHARS",
    "WALL",
    "SPRITE",
    "Settings",
    "GameMap",
    "View",
    "spawn_rotation",
    "normal_rad",
    "distance_points",
    "calculate_tile_size",
]

MAX_X_SIZE = 2560
MAX_Y_SIZE = 1440
MAP_CHARS = "012NSEW"
MAP_INSIDE = "02NSEW"
PLAYER_CHARS = "NSEW"
WALL = "1"
SPRITE = "2"

_TWO_PI = 2 * math.pi


@dataclass
class Settings:
    """Everything a scene description provides: screen, textures, colours, map."""

    width: int
    height: int
    north: str
    south: str
    west: str
    east: str
    sprite: str
    floor: tuple[int, int, int]
    ceiling: tuple[int, int, int]
    map_lines: list[str] = field(default_factory=list)

    @property
    def floor_color(self) -> int:
        """The floor colour packed as one integer."""
        return create_trgb(0, *self.floor)

    @property
    def ceiling_color(self) -> int:
        """The ceiling colour packed as one integer."""
        return create_trgb(0, *self.ceiling)


def spawn_rotation(c: str) -> float:
    """Return the starting view angle for a player letter; north is the default."""
    return {"E": 0.0, "S": math.pi / 2, "W": math.pi}.get(c, 3 * math.pi / 2)


def normal_rad(angle: float) -> float:
    """Bring an angle that is at most one turn out of range back into [0, 2*pi)."""
    if angle >= _TWO_PI:
        angle -= _TWO_PI
    if angle < 0:
        angle += _TWO_PI
    return angle


def distance_points(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def calculate_tile_size(width: int, height: int, cols: int, rows: int) -> float:
    """Largest whole tile size that lets the minimap fill a third of the screen."""
    if cols <= 0 or rows <= 0:
        raise ValueError("map must have at least one row and one column")
    ratio_x = int((width / cols) / 3)
    ratio_y = int((height / rows) / 3)
    return float(min(ratio_x, ratio_y))


@dataclass(frozen=True)
class GameMap:
    """The map rows and the size of one tile in pixels."""

    lines: tuple[str, ...]
    tile_size: float

    @classmethod
    def from_lines(cls, lines, width: int, height: int) -> GameMap:
        """Build a map sized for a width x height screen."""
        rows = tuple(lines)
        cols = max((len(row) for row in rows), default=0)
        tile_size = calculate_tile_size(width, height, cols, len(rows))
        if tile_size <= 0:
            raise ValueError(
                f"map of {cols}x{len(rows)} tiles is too large for a {width}x{height} screen"
            )
        return cls(rows, tile_size)

    @property
    def rows(self) -> int:
        return len(self.lines)

    @property
    def cols(self) -> int:
        return max((len(row) for row in self.lines), default=0)

    @property
    def width(self) -> int:
        """Map width in pixels."""
        return int(self.cols * self.tile_size)

    @property
    def height(self) -> int:
        """Map height in pixels."""
        return int(self.rows * self.tile_size)

    def has_wall(self, x: float, y: float) -> bool:
        """Whether the pixel position lies in a wall or outside the map."""
        ix, iy = int(x), int(y)
        if ix < 0 or ix > self.width or iy < 0 or iy > self.height:
            return True
        col = int(ix / self.tile_size)
        row = int(iy / self.tile_size)
        if row >= len(self.lines) or col >= len(self.lines[row]):
            return True
        return self.lines[row][col] == WALL

    def player_spawn(self) -> tuple[float, float, float]:
        """Return (x, y, angle) of the player; the last letter on the map wins."""
        spawn = None
        for row, line in enumerate(self.lines):
            for col, char in enumerate(line):
                if char in PLAYER_CHARS:
                    spawn = (
                        (col + 0.5) * self.tile_size,
                        (row + 0.5) * self.tile_size,
                        spawn_rotation(char),
                    )
        if spawn is None:
            raise ValueError("map has no player start position")
        return spawn

    def sprite_positions(self) -> list[tuple[float, float]]:
        """Centres of every sprite tile, row by row."""
        return [
            ((col + 0.5) * self.tile_size, (row + 0.5) * self.tile_size)
            for row, line in enumerate(self.lines)
            for col, char in enumerate(line)
            if char == SPRITE
        ]


@dataclass(frozen=True)
class View:
    """Field of view and projection constants for one screen width."""

    fov: float
    fov_min: float
    fov_max: float
    wall_strip_width: float
    num_rays: int
    dist_proj_plane: float

    @classmethod
    def for_width(cls, width: float) -> View:
        """A 60-degree view with one ray per screen column."""
        fov = math.radians(60)
        strip = 1.0
        return cls(
            fov=fov,
            fov_min=_TWO_PI - fov / 2,
            fov_max=fov / 2,
            wall_strip_width=strip,
            num_rays=int(width / strip),
            dist_proj_plane=(width / 2) / math.tan(fov / 2),
        )