"""The map viewer window and its command-line entry point."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, Union

from fdfview.heightmap import HeightMap, MapError, read_map
from fdfview.projection import DEFAULT_ANGLE, DEFAULT_Z_SCALE, render
from fdfview.raster import Canvas

WIN_WIDTH = 800
WIN_HEIGHT = 800
TITLE = "FDF"
_FRAME_RATE = 30


class Viewer:
    """A map file shown as an isometric wireframe."""

    def __init__(
        self,
        path: Union[str, os.PathLike],
        width: int = WIN_WIDTH,
        height: int = WIN_HEIGHT,
        z_scale: int = DEFAULT_Z_SCALE,
        angle: float = DEFAULT_ANGLE,
    ) -> None:
        self.heightmap: HeightMap = read_map(path)
        self.heightmap.reset_positions()
        self.width = width if width > 0 else WIN_WIDTH
        self.height = height if height > 0 else WIN_HEIGHT
        self.z_scale = z_scale
        self.angle = angle
        self.canvas = Canvas(self.width, self.height)

    def render(self) -> Canvas:
        """Draw the map into the canvas and return it."""
        return render(self.heightmap, self.canvas, self.z_scale, self.angle)

    def _rgb(self) -> bytes:
        data = self.canvas.to_bytes()
        rgb = bytearray(self.width * self.height * 3)
        rgb[0::3] = data[2::4]
        rgb[1::3] = data[1::4]
        rgb[2::3] = data[0::4]
        return bytes(rgb)

    def run(self) -> None:
        """Show the rendered map until the window is closed or Escape is pressed."""
        import pygame

        self.render()
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(TITLE)
            image = pygame.image.frombuffer(self._rgb(), (self.width, self.height), "RGB")
            screen.blit(image, (0, 0))
            pygame.display.flip()
            clock = pygame.time.Clock()
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        return
                clock.tick(_FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the map file named on the command line in a viewer window."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: fdf <filename>", file=sys.stderr)
        return 1
    try:
        viewer = Viewer(args[0])
    except MapError as exc:
        print(f"Error reading the file.: {exc}", file=sys.stderr)
        return 1
    viewer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())