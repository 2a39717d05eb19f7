"""Terminal color capability detection and color resolution."""

from cellframe.terminal.palette import PALETTE_256, color_distance, rgb_to_8, rgb_to_16, rgb_to_256
from cellframe.terminal.profile import TerminalProfile, detect_color_depth
from cellframe.terminal.resolver import resolve, resolve_style

__all__ = [
    "PALETTE_256",
    "color_distance",
    "rgb_to_8",
    "rgb_to_16",
    "rgb_to_256",
    "TerminalProfile",
    "detect_color_depth",
    "resolve",
    "resolve_style",
]
