"""The player: keyboard state, turning and collision-checked walking."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .world import GameMap, normal_rad

__all__ = ["Key", "QuitRequested", "Player"]


class Key(IntEnum):
    """Keyboard codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESC = 53
    LEFT_ARROW = 123
    RIGHT_ARROW = 124
    DOWN_ARROW = 125
    UP_ARROW = 126


class QuitRequested(Exception):
    """The player asked to leave the game."""


# Angle added to the view direction for each walking key.
_WALK_OFFSETS = {
    Key.W: 0.0,
    Key.S: math.pi,
    Key.A: -math.pi / 2,
    Key.D: math.pi / 2,
}
_TURNS = {Key.RIGHT_ARROW: 1, Key.LEFT_ARROW: -1}

DEFAULT_MOVE_SPEED = 0.35
DEFAULT_ROTATE_SPEED = 7 * (math.pi / 180)


def _as_key(keycode: int) -> Key | None:
    try:
        return Key(keycode)
    except ValueError:
        return None


@dataclass
class Player:
    """Position in map pixels, view angle and the keys currently held."""

    x: float
    y: float
    angle: float
    radius: float
    walk: Key | None = None
    turn: int = 0
    move_speed: float = DEFAULT_MOVE_SPEED
    rotate_speed: float = DEFAULT_ROTATE_SPEED

    @classmethod
    def spawn(cls, game_map: GameMap) -> Player:
        """Place a player on the map's start tile."""
        x, y, angle = game_map.player_spawn()
        return cls(x=x, y=y, angle=angle, radius=game_map.tile_size / 6)

    def press(self, keycode: int) -> None:
        """React to a key going down; Escape raises QuitRequested."""
        key = _as_key(keycode)
        if key is Key.ESC:
            raise QuitRequested
        if key in _WALK_OFFSETS:
            self.walk = key
        elif key in _TURNS:
            self.turn = _TURNS[key]

    def release(self, keycode: int) -> None:
        """React to a key going up."""
        key = _as_key(keycode)
        if key in _WALK_OFFSETS:
            self.walk = None
        elif key in _TURNS:
            self.turn = 0

    def update_orientation(self) -> None:
        """Turn by one step in the held direction."""
        if self.turn:
            self.angle = normal_rad(self.angle + self.turn * self.rotate_speed)

    def update_position(self, game_map: GameMap) -> None:
        """Take one step in the held direction unless it ends inside a wall."""
        if self.walk is None:
            return
        move_angle = normal_rad(self.angle + _WALK_OFFSETS[self.walk])
        step = self.move_speed * game_map.tile_size
        next_x = self.x + math.cos(move_angle) * step
        next_y = self.y + math.sin(move_angle) * step
        if not game_map.has_wall(next_x, next_y):
            self.x, self.y = next_x, next_y

    def update(self, game_map: GameMap) -> None:
        """Advance one frame: turn first, then walk."""
        self.update_orientation()
        self.update_position(game_map)