"""Running the game in a window, or rendering a single frame to a BMP file."""

from __future__ import annotations

import os
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .bmp import write_bmp  # noqa: E402
from .errors import CubError, ErrorCode  # noqa: E402
from .image import Image  # noqa: E402
from .player import Key, QuitRequested  # noqa: E402
from .render import Scene  # noqa: E402
from .world import Settings  # noqa: E402
from .xpm import XpmError, load_xpm  # noqa: E402

__all__ = ["WINDOW_TITLE", "SCREENSHOT_NAME", "load_scene", "save_screenshot", "translate_key", "run"]

WINDOW_TITLE = "Wolfenstein3D"
SCREENSHOT_NAME = "img.bmp"
FRAME_RATE = 60

_PYGAME_KEYS = {
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_w: Key.W,
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_LEFT: Key.LEFT_ARROW,
    pygame.K_RIGHT: Key.RIGHT_ARROW,
    pygame.K_DOWN: Key.DOWN_ARROW,
    pygame.K_UP: Key.UP_ARROW,
}


def _load_texture(path: str, code: ErrorCode) -> Image:
    try:
        return load_xpm(path)
    except XpmError as exc:
        raise CubError(code) from exc


def load_scene(settings: Settings) -> Scene:
    """Load every texture named in the settings and build the scene.

    Raises CubError with the matching code when a texture cannot be read.
    """
    walls = {
        "north": _load_texture(settings.north, ErrorCode.BADNO),
        "south": _load_texture(settings.south, ErrorCode.BADSO),
        "west": _load_texture(settings.west, ErrorCode.BADWE),
        "east": _load_texture(settings.east, ErrorCode.BADEA),
    }
    sprite = _load_texture(settings.sprite, ErrorCode.BADSPRITE)
    return Scene.from_settings(settings, walls, sprite)


def save_screenshot(settings: Settings, path: str | Path = SCREENSHOT_NAME) -> Image:
    """Render the first frame of the scene and write it to path as a BMP."""
    image = load_scene(settings).render()
    write_bmp(image, path)
    return image


def translate_key(key: int) -> Key | None:
    """Map a pygame key constant to the game's key code, or None if unused."""
    return _PYGAME_KEYS.get(key)


def _to_surface(image: Image) -> pygame.Surface:
    data = b"".join((color & 0xFFFFFF).to_bytes(3, "big") for color in image.pixels)
    return pygame.image.frombuffer(data, (image.width, image.height), "RGB")


def _handle_events(scene: Scene) -> bool:
    """Apply pending window events; return False once the game should stop."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            continue
        key = translate_key(event.key)
        if key is None:
            continue
        if event.type == pygame.KEYDOWN:
            try:
                scene.player.press(key)
            except QuitRequested:
                return False
        else:
            scene.player.release(key)
    return True


def run(settings: Settings) -> int:
    """Open a window and play until it is closed; return the frames drawn."""
    scene = load_scene(settings)
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((settings.width, settings.height))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        frames = 0
        while _handle_events(scene):
            screen.blit(_to_surface(scene.render()), (0, 0))
            pygame.display.flip()
            frames += 1
            clock.tick(FRAME_RATE)
        return frames
    finally:
        pygame.display.quit()