"""A 32-bit pixel canvas and Bresenham line drawing of a map's wireframe."""

from __future__ import annotations

import struct
from typing import Iterator

from fdfview.heightmap import HeightMap

_PIXEL = struct.Struct("<I")
BYTES_PER_PIXEL = _PIXEL.size


class Canvas:
    """An image of width x height pixels, each a 0xAARRGGBB value.

    Pixels are kept as little-endian 32-bit words, so the raw bytes of a
    pixel read blue, green, red, then the top byte.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.size_line = width * BYTES_PER_PIXEL
        self._data = bytearray(self.size_line * height)

    def _offset(self, x: int, y: int) -> int:
        return y * self.size_line + x * BYTES_PER_PIXEL

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points outside the canvas are ignored."""
        if self._inside(x, y):
            _PIXEL.pack_into(self._data, self._offset(x, y), color & 0xFFFFFFFF)

    def get_pixel(self, x: int, y: int) -> int:
        """The colour stored at a pixel."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return _PIXEL.unpack_from(self._data, self._offset(x, y))[0]

    def to_bytes(self) -> bytes:
        """The raw image, row by row."""
        return bytes(self._data)


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Every pixel of the line from (x0, y0) to (x1, y1), both ends included."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        e2 = err * 2
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def draw_line(canvas: Canvas, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
    """Draw a one-pixel line in a single colour."""
    for x, y in bresenham(x0, y0, x1, y1):
        canvas.put_pixel(x, y, color)


def draw_lines(canvas: Canvas, heightmap: HeightMap) -> None:
    """Join every point to its right and lower neighbours, in the point's colour."""
    rows = heightmap.rows
    for i, row in enumerate(rows):
        for j, point in enumerate(row):
            if j + 1 < len(row):
                right = row[j + 1]
                draw_line(canvas, point.x, point.y, right.x, right.y, point.color)
            if i + 1 < len(rows):
                below = rows[i + 1][j]
                draw_line(canvas, point.x, point.y, below.x, below.y, point.color)