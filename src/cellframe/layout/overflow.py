"""Fitting slot content to its allocated width using the slot's Overflow policy."""

from __future__ import annotations

from typing import Any, Optional

from cellframe.compose.lines import (
    Line,
    adjust_width,
    blank_line,
    line_length,
    set_lines_shape,
    split_lines,
    wrap_line,
)
from cellframe.core.constants import ELLIPSIS
from cellframe.core.segment import Segment
from cellframe.layout.slots import LayoutSlot, Overflow


def _to_segments(content: Any) -> list[Segment]:
    if content is None:
        return []
    if isinstance(content, str):
        return [Segment(content)]
    return list(content)


def _ellipsize(line: Line, width: int) -> Line:
    if line_length(line) <= width:
        return adjust_width(line, width)
    if width <= 0:
        return []
    head = adjust_width(line, width - 1)
    style = next((s.style for s in reversed(head) if s.is_text and s.text), None)
    return [*head, Segment(ELLIPSIS, style)]


def fit_slot(
    content: Any,
    slot: LayoutSlot,
    width: int,
    height: Optional[int] = None,
) -> list[Line]:
    """
    Render content into lines exactly width cells wide.

    Args:
        content: A string or a sequence of Segments
        slot: The slot whose overflow policy applies
        width: Cells allocated to the slot
        height: If given, the result is padded or cut to this many lines

    Returns:
        Lines of exactly width cells each
    """
    width = max(0, width)
    lines = split_lines(_to_segments(content))

    if slot.overflow == Overflow.WRAP:
        fitted = [
            adjust_width(wrapped, width)
            for line in lines
            for wrapped in wrap_line(line, width)
        ]
    elif slot.overflow == Overflow.ELLIPSIS:
        fitted = [_ellipsize(line, width) for line in lines]
    elif slot.overflow == Overflow.HIDDEN and any(line_length(line) > width for line in lines):
        fitted = [blank_line(width) for _ in lines]
    else:
        fitted = [adjust_width(line, width) for line in lines]

    if height is not None:
        return set_lines_shape(fitted, width, height)
    return fitted
