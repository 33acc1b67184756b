"""Writing images as 24-bit uncompressed BMP files."""

from __future__ import annotations

import struct
from pathlib import Path

from .image import Image

__all__ = ["bmp_header", "encode_bmp", "write_bmp"]

HEADER_SIZE = 54
_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IIIHHIIIIII")
_MASK32 = 0xFFFFFFFF


def bmp_header(width: int, height: int) -> bytes:
    """Return the 54-byte file and info header for a width x height image.

    Rows are written without padding, so the file size is 54 + 3*w*h.
    """
    if width < 0 or height < 0:
        raise ValueError(f"negative image size {width}x{height}")
    filesize = HEADER_SIZE + 3 * width * height
    file_header = _FILE_HEADER.pack(b"BM", filesize & _MASK32, 0, 0, HEADER_SIZE)
    info_header = _INFO_HEADER.pack(
        40, width & _MASK32, height & _MASK32, 1, 24, 0, 0, 0, 0, 0, 0
    )
    return file_header + info_header


def encode_bmp(image: Image) -> bytes:
    """Encode an image as BMP bytes, bottom row first, blue-green-red order."""
    out = bytearray(bmp_header(image.width, image.height))
    width = image.width
    for y in reversed(range(image.height)):
        for color in image.pixels[y * width:(y + 1) * width]:
            out += (color & 0xFFFFFF).to_bytes(3, "little")
    return bytes(out)


def write_bmp(image: Image, path: str | Path) -> None:
    """Write an image to path as a BMP file."""
    Path(path).write_bytes(encode_bmp(image))