"""A plain in-memory image of packed 32-bit pixels, stored row by row."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Image"]


@dataclass
class Image:
    """A width x height grid of packed colours in row-major order."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"negative image size {self.width}x{self.height}")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    @classmethod
    def blank(cls, width: int, height: int) -> Image:
        """Create an image filled with colour 0."""
        if width < 0 or height < 0:
            raise ValueError(f"negative image size {width}x{height}")
        return cls(width, height, [0] * (width * height))

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column x, row y."""
        return self.pixels[self._index(x, y)]

    def put(self, x: int, y: int, color: int) -> None:
        """Set the colour at column x, row y."""
        self.pixels[self._index(x, y)] = color

    def fill_rows(self, start: int, stop: int, color: int) -> None:
        """Paint rows start .. stop-1 with one colour, clipped to the image."""
        start = max(0, min(start, self.height))
        stop = max(start, min(stop, self.height))
        count = (stop - start) * self.width
        self.pixels[start * self.width:stop * self.width] = [color] * count