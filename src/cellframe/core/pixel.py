"""Pixel - one half of a terminal cell in half-block art."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cellframe.core.color import Color


@dataclass(frozen=True, slots=True)
class Pixel:
    """
    An RGB pixel, or a transparent one.

    Two pixels stack vertically in each terminal cell. A transparent
    pixel lets the terminal's default color show through.
    """
    r: int
    g: int
    b: int
    transparent: bool = False

    def __post_init__(self) -> None:
        if not all(0 <= channel <= 255 for channel in (self.r, self.g, self.b)):
            raise ValueError(f"Pixel channels must be 0-255, got ({self.r}, {self.g}, {self.b})")

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @classmethod
    def transparent_pixel(cls) -> Pixel:
        return cls(0, 0, 0, transparent=True)

    def to_color(self) -> Optional[Color]:
        """Color for this pixel, or None for transparent."""
        if self.transparent:
            return None
        return Color.rgb(*self.rgb)
