"""
cellframe: rendering-composition core for terminal UIs

Turn styled content into an exact rectangular grid of terminal cells.

Quick Start:
    >>> import cellframe as cf
    >>> lines = cf.set_shape([cf.Segment("Hello, 世界")], width=12, height=2)
    >>> profile = cf.TerminalProfile.from_environment()
    >>> print(cf.AnsiRenderer(profile).render(lines))

Features:
    - Cell-width aware measurement and truncation (wide/zero-width glyphs)
    - Segment/line algebra: split, crop, pad, divide, style overlay, merge
    - Min/max width negotiation between content and layout
    - Responsive layout allocation with exact largest-remainder shares
    - Terminal color depth detection and perceptual color downgrading
"""

__version__ = "0.1.0"

# Core types
from cellframe.core.cells import cell_len, truncate_cells
from cellframe.core.color import Color, ColorDepth, ResolvedColor
from cellframe.core.segment import ControlType, Segment
from cellframe.core.style import Style

# Composition
from cellframe.compose.lines import (
    Line,
    VerticalAlign,
    adjust_width,
    align_vertical,
    apply_style,
    divide,
    set_shape,
    shape,
    simplify,
    split_lines,
)
from cellframe.compose.pixel_grid import PixelGrid

# Layout
from cellframe.layout.allocator import allocate, responsive
from cellframe.layout.measurement import Measurable, Measurement
from cellframe.layout.slots import (
    Auto,
    CollapseTo,
    Fixed,
    Fractional,
    HiddenBelow,
    LayoutSlot,
    MinMax,
    Overflow,
    Percent,
    Visible,
)

# Terminal
from cellframe.terminal.profile import TerminalProfile, detect_color_depth
from cellframe.terminal.resolver import resolve

# Rendering
from cellframe.render.ansi import AnsiRenderer

# Errors
from cellframe.errors import (
    CellframeError,
    ConfigurationError,
    InvalidBreakpoints,
    InvalidCut,
    NoMatchingBreakpoint,
)

__all__ = [
    # Version
    "__version__",
    # Core types
    "cell_len",
    "truncate_cells",
    "Color",
    "ColorDepth",
    "ResolvedColor",
    "ControlType",
    "Segment",
    "Style",
    # Composition
    "Line",
    "VerticalAlign",
    "adjust_width",
    "align_vertical",
    "apply_style",
    "divide",
    "set_shape",
    "shape",
    "simplify",
    "split_lines",
    "PixelGrid",
    # Layout
    "allocate",
    "responsive",
    "Measurable",
    "Measurement",
    "Auto",
    "CollapseTo",
    "Fixed",
    "Fractional",
    "HiddenBelow",
    "LayoutSlot",
    "MinMax",
    "Overflow",
    "Percent",
    "Visible",
    # Terminal
    "TerminalProfile",
    "detect_color_depth",
    "resolve",
    # Rendering
    "AnsiRenderer",
    # Errors
    "CellframeError",
    "ConfigurationError",
    "InvalidBreakpoints",
    "InvalidCut",
    "NoMatchingBreakpoint",
]
