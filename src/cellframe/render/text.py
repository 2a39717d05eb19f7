"""Render lines as plain text (no escape codes)."""

from typing import Iterable

from cellframe.core.segment import Segment


def render_text(lines: Iterable[Iterable[Segment]]) -> str:
    """Render lines to plain text with styles and controls dropped."""
    return "\n".join(
        "".join(segment.text for segment in line if segment.is_text)
        for line in lines
    )
