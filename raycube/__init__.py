"""A grid-based raycasting engine with textured walls, sprites, XPM textures and BMP screenshots."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "bmp",
    "colors",
    "errors",
    "image",
    "player",
    "raycast",
    "render",
    "sprites",
    "world",
    "xpm",
]