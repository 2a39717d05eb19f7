"""PixelGrid - immutable half-block pixel art that renders to Lines.

Each terminal cell shows two pixels stacked vertically using the upper
half block: the foreground paints the top pixel, the background paints
the bottom one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from cellframe.compose.lines import Line, simplify
from cellframe.core.constants import UPPER_HALF
from cellframe.core.pixel import Pixel
from cellframe.core.segment import Segment
from cellframe.core.style import Style

TRANSPARENT = Pixel.transparent_pixel()


@dataclass(frozen=True)
class PixelGrid:
    """
    A width x pixel_height grid of Pixels.

    Mutators never touch the grid they are called on; they return a new
    grid. Pixels live in a flat row-major tuple addressed by index.

    Example:
        >>> grid = PixelGrid.blank(4, 4).fill_rect(0, 0, 2, 2, Pixel(255, 0, 0))
        >>> len(grid.to_lines())
        2
    """
    width: int
    pixel_height: int
    _pixels: tuple[Pixel, ...] = field(repr=False, default=())

    def __post_init__(self) -> None:
        expected = self.width * self.pixel_height
        if self.width < 0 or self.pixel_height < 0:
            raise ValueError(f"Invalid grid size {self.width}x{self.pixel_height}")
        if len(self._pixels) != expected:
            raise ValueError(f"Expected {expected} pixels, got {len(self._pixels)}")

    @classmethod
    def blank(cls, width: int, pixel_height: int, pixel: Pixel = TRANSPARENT) -> PixelGrid:
        """Create a grid filled with one pixel (transparent by default)."""
        return cls(width, pixel_height, (pixel,) * (width * pixel_height))

    @property
    def height(self) -> int:
        """Height in terminal rows (half of pixel height, rounded up)."""
        return (self.pixel_height + 1) // 2

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.pixel_height):
            raise IndexError(f"Position ({x}, {y}) out of bounds ({self.width}x{self.pixel_height})")
        return y * self.width + x

    def get(self, x: int, y: int) -> Pixel:
        """
        Get pixel at position.

        Raises:
            IndexError: If position is out of bounds
        """
        return self._pixels[self._index(x, y)]

    def with_pixel(self, x: int, y: int, pixel: Pixel) -> PixelGrid:
        """Return a copy with one pixel replaced."""
        index = self._index(x, y)
        buffer = list(self._pixels)
        buffer[index] = pixel
        return PixelGrid(self.width, self.pixel_height, tuple(buffer))

    def fill(self, pixel: Pixel) -> PixelGrid:
        """Return a copy filled with a single pixel color."""
        return PixelGrid.blank(self.width, self.pixel_height, pixel)

    def fill_rect(self, x: int, y: int, w: int, h: int, pixel: Pixel) -> PixelGrid:
        """Return a copy with a rectangle filled; the rectangle is clipped to the grid."""
        buffer = list(self._pixels)
        for py in range(max(0, y), min(self.pixel_height, y + h)):
            row = py * self.width
            for px in range(max(0, x), min(self.width, x + w)):
                buffer[row + px] = pixel
        return PixelGrid(self.width, self.pixel_height, tuple(buffer))

    def pixels(self) -> Iterator[tuple[int, int, Pixel]]:
        """Iterate over all pixels as (x, y, pixel) tuples."""
        for index, pixel in enumerate(self._pixels):
            y, x = divmod(index, self.width)
            yield x, y, pixel

    def to_lines(self) -> list[Line]:
        """Render to one Line per terminal row, each exactly width cells."""
        lines: list[Line] = []
        for row in range(self.height):
            top_y = row * 2
            bottom_y = top_y + 1
            line: Line = []
            for x in range(self.width):
                top = self.get(x, top_y)
                bottom = self.get(x, bottom_y) if bottom_y < self.pixel_height else TRANSPARENT
                if top.transparent and bottom.transparent:
                    line.append(Segment(" "))
                else:
                    style = Style(fg=top.to_color(), bg=bottom.to_color())
                    line.append(Segment(UPPER_HALF, style))
            lines.append(simplify(line))
        return lines
