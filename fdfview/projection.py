"""Isometric projection of a height map onto a window, and rendering it."""

from __future__ import annotations

import math
import struct

from fdfview.color import get_color
from fdfview.heightmap import HeightMap
from fdfview.raster import Canvas, draw_lines

DEFAULT_Z_SCALE = 4
DEFAULT_ANGLE = 0.55

_FLOAT = struct.Struct("f")


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return _FLOAT.unpack(_FLOAT.pack(value))[0]


def isometric(x: int, y: int, z_scaled: int, angle: float) -> tuple[int, int]:
    """Project a grid position and scaled height, truncating toward zero."""
    new_x = int((x - y) * math.cos(angle))
    new_y = int((x + y) * math.sin(angle) - z_scaled)
    return new_x, new_y


def project(
    heightmap: HeightMap,
    win_width: int,
    win_height: int,
    z_scale: int = DEFAULT_Z_SCALE,
    angle: float = DEFAULT_ANGLE,
) -> None:
    """Give every point its screen position and height colour.

    The grid is scaled to half the window, centred on the origin, projected
    and then moved to the window centre.
    """
    z_min, z_max = heightmap.z_range()
    scale_x = _f32(win_width / (heightmap.width * 2))
    scale_y = _f32(win_height / (heightmap.height * 2))
    x_offset = int(_f32(_f32((heightmap.width - 1) * scale_x) / 2))
    y_offset = int(_f32(_f32((heightmap.height - 1) * scale_y) / 2))
    for i, row in enumerate(heightmap.rows):
        for j, point in enumerate(row):
            x = int(_f32(_f32(j * scale_x) - x_offset))
            y = int(_f32(_f32(i * scale_y) - y_offset))
            x, y = isometric(x, y, point.z * z_scale, angle)
            point.x = x + win_width // 2
            point.y = y + win_height // 2
            point.color = get_color(point.z, z_min, z_max)


def render(
    heightmap: HeightMap,
    canvas: Canvas,
    z_scale: int = DEFAULT_Z_SCALE,
    angle: float = DEFAULT_ANGLE,
) -> Canvas:
    """Project the map to fit the canvas and draw its wireframe; return the canvas."""
    project(heightmap, canvas.width, canvas.height, z_scale, angle)
    draw_lines(canvas, heightmap)
    return canvas