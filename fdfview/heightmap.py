"""Height maps: a grid of points read from a whitespace-separated text file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Union

from fdfview.color import WHITE
from fdfview.libft.lines import read_lines
from fdfview.libft.strings import atoi, split


class MapError(Exception):
    """A map file could not be read or is malformed."""


@dataclass
class Point:
    """A grid point: its screen position, height and colour."""

    x: int
    y: int
    z: int
    color: int = WHITE


@dataclass
class HeightMap:
    """A rectangular grid of points, stored row by row."""

    rows: list[list[Point]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows:
            width = len(self.rows[0])
            if any(len(row) != width for row in self.rows):
                raise MapError("all rows of a map must have the same width")

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def z_range(self) -> tuple[int, int]:
        """The lowest and highest heights in the map."""
        heights = [point.z for point in self.points()]
        if not heights:
            raise MapError("the map has no points")
        return min(heights), max(heights)

    def reset_positions(self) -> None:
        """Place every point back at its grid column and row."""
        for i, row in enumerate(self.rows):
            for j, point in enumerate(row):
                point.x = j
                point.y = i

    def points(self) -> Iterator[Point]:
        """Every point, row by row."""
        for row in self.rows:
            yield from row


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a map from lines of space-separated heights.

    The first line fixes the width; extra values on later lines are ignored
    and a line with too few values is an error. Anything after the leading
    integer of a value, such as a colour suffix, is ignored.
    """
    rows: list[list[Point]] = []
    width = 0
    for i, line in enumerate(lines):
        words = split(line, " ")
        if i == 0:
            width = len(words)
        if len(words) < width:
            raise MapError(
                f"line {i + 1} has {len(words)} values, expected {width}"
            )
        rows.append([Point(j, i, atoi(word)) for j, word in enumerate(words[:width])])
    return HeightMap(rows)


def read_map(path: Union[str, os.PathLike]) -> HeightMap:
    """Read a map file."""
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            return parse_map(read_lines(stream))
    except OSError as exc:
        raise MapError(f"cannot read {os.fspath(path)}: {exc.strerror}") from exc


def flat_map(width: int = 10, height: int = 10) -> HeightMap:
    """A map of the given size with every height at zero."""
    if width < 0 or height < 0:
        raise ValueError("map dimensions must not be negative")
    return HeightMap([[Point(j, i, 0) for j in range(width)] for i in range(height)])