"""Core value types: cell widths, colors, styles and segments."""

from cellframe.core.cells import cell_len, get_character_width, set_cell_size, truncate_cells
from cellframe.core.color import Color, ColorDepth, ColorType, ResolvedColor, ResolvedType
from cellframe.core.pixel import Pixel
from cellframe.core.segment import ControlType, Segment, SegmentKind
from cellframe.core.style import Style

__all__ = [
    "cell_len",
    "get_character_width",
    "set_cell_size",
    "truncate_cells",
    "Color",
    "ColorDepth",
    "ColorType",
    "ResolvedColor",
    "ResolvedType",
    "Pixel",
    "ControlType",
    "Segment",
    "SegmentKind",
    "Style",
]
