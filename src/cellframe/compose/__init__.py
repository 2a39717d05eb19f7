"""Composition of segments into exactly-shaped lines."""

from cellframe.compose.lines import (
    Line,
    VerticalAlign,
    adjust_width,
    align_vertical,
    apply_style,
    blank_line,
    divide,
    join_lines,
    line_length,
    set_lines_shape,
    set_shape,
    shape,
    simplify,
    split_lines,
    strip_styles,
    wrap_line,
)
from cellframe.compose.pixel_grid import PixelGrid

__all__ = [
    "Line",
    "VerticalAlign",
    "adjust_width",
    "align_vertical",
    "apply_style",
    "blank_line",
    "divide",
    "join_lines",
    "line_length",
    "set_lines_shape",
    "set_shape",
    "shape",
    "simplify",
    "split_lines",
    "strip_styles",
    "wrap_line",
    "PixelGrid",
]
