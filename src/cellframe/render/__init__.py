"""Rendering shaped lines to strings."""

from cellframe.render.ansi import AnsiRenderer, control_sequence
from cellframe.render.text import render_text

__all__ = ["AnsiRenderer", "control_sequence", "render_text"]
