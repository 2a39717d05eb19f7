"""Reference palettes and nearest-color search."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence

from cellframe.core.constants import PALETTE_16

RGB = tuple[int, int, int]

# Channel weights approximating how sensitive the eye is to each primary
RED_WEIGHT = 30
GREEN_WEIGHT = 59
BLUE_WEIGHT = 11

# Intensity levels of the 6x6x6 color cube (indices 16-231)
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def _build_palette_256() -> tuple[RGB, ...]:
    palette: list[RGB] = list(PALETTE_16)
    for r in CUBE_LEVELS:
        for g in CUBE_LEVELS:
            for b in CUBE_LEVELS:
                palette.append((r, g, b))
    # Grayscale ramp (indices 232-255)
    for step in range(24):
        level = 8 + step * 10
        palette.append((level, level, level))
    return tuple(palette)


PALETTE_256: tuple[RGB, ...] = _build_palette_256()


def color_distance(c1: RGB, c2: RGB) -> int:
    """Weighted squared distance between two RGB colors."""
    dr = c1[0] - c2[0]
    dg = c1[1] - c2[1]
    db = c1[2] - c2[2]
    return RED_WEIGHT * dr * dr + GREEN_WEIGHT * dg * dg + BLUE_WEIGHT * db * db


def nearest_index(rgb: RGB, palette: Sequence[RGB]) -> int:
    """Index of the closest palette entry; ties go to the lowest index."""
    best_idx = 0
    best_dist = -1
    for idx, entry in enumerate(palette):
        dist = color_distance(rgb, entry)
        if best_dist < 0 or dist < best_dist:
            best_dist = dist
            best_idx = idx
            if dist == 0:
                break
    return best_idx


@lru_cache(maxsize=1024)
def rgb_to_256(rgb: RGB) -> int:
    """Closest entry in the 256-color palette."""
    return nearest_index(rgb, PALETTE_256)


@lru_cache(maxsize=1024)
def rgb_to_16(rgb: RGB) -> int:
    """Closest entry in the 16-color palette."""
    return nearest_index(rgb, PALETTE_16)


@lru_cache(maxsize=1024)
def rgb_to_8(rgb: RGB) -> int:
    """Closest entry among the 8 basic colors."""
    return nearest_index(rgb, PALETTE_16[:8])
