"""Colour of a map point from its height."""

from __future__ import annotations

WHITE = 0xFFFFFF
_BLUE = 200


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def get_color(z: int, z_min: int, z_max: int) -> int:
    """A 0xRRGGBB colour running from green at z_min to red at z_max.

    Blue is fixed at 200; a map with a single height is drawn white.
    """
    if z_min == z_max:
        return WHITE
    ratio = (z - z_min) / (z_max - z_min)
    red = int(255 * ratio)
    green = int(255 * (1 - ratio))
    return _to_int32((red << 16) | (green << 8) | _BLUE)