"""Segment - atomic unit of renderable content."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from cellframe.core.cells import cell_len, truncate_cells
from cellframe.core.style import Style


class SegmentKind(Enum):
    """What a segment carries."""
    TEXT = "text"
    LINE_BREAK = "line_break"
    CONTROL = "control"


class ControlType(IntEnum):
    """Non-printing terminal controls a segment may carry."""
    BELL = 1
    CARRIAGE_RETURN = 2
    HOME = 3
    CLEAR = 4
    SHOW_CURSOR = 5
    HIDE_CURSOR = 6
    CURSOR_UP = 7
    CURSOR_DOWN = 8
    CURSOR_FORWARD = 9
    CURSOR_BACKWARD = 10
    CURSOR_MOVE_TO_COLUMN = 11
    CURSOR_MOVE_TO = 12
    ERASE_IN_LINE = 13


@dataclass(frozen=True)
class Segment:
    """
    A piece of content: styled text, a line break, or a control marker.

    Segments are immutable. Their width in cells is derived from the text
    on demand; line breaks and controls occupy no cells.
    """
    text: str = ""
    style: Optional[Style] = None
    kind: SegmentKind = SegmentKind.TEXT
    code: Optional[ControlType] = None
    params: tuple[int, ...] = ()

    @classmethod
    def line(cls) -> Segment:
        """A line break."""
        return _LINE_BREAK

    @classmethod
    def control(cls, code: ControlType, *params: int) -> Segment:
        """A control marker with optional integer parameters."""
        return cls(kind=SegmentKind.CONTROL, code=code, params=params)

    @property
    def is_text(self) -> bool:
        return self.kind == SegmentKind.TEXT

    @property
    def is_line_break(self) -> bool:
        return self.kind == SegmentKind.LINE_BREAK

    @property
    def is_control(self) -> bool:
        return self.kind == SegmentKind.CONTROL

    @property
    def cell_length(self) -> int:
        """Number of cells this segment occupies."""
        return cell_len(self.text) if self.is_text else 0

    def split_cells(self, cut: int) -> tuple[Segment, Segment]:
        """
        Split a text segment at a cell offset.

        If the cut falls in the middle of a wide character, that character
        is replaced by a space on each side, so the left part is always
        exactly ``cut`` cells and the two parts add up to the original
        width.
        """
        if cut <= 0:
            return Segment("", self.style), self

        prefix, used = truncate_cells(self.text, cut)
        suffix = self.text[len(prefix):]
        if not suffix:
            return self, Segment("", self.style)
        if used == cut:
            return Segment(prefix, self.style), Segment(suffix, self.style)
        return (
            Segment(prefix + " ", self.style),
            Segment(" " + suffix[1:], self.style),
        )


_LINE_BREAK = Segment(kind=SegmentKind.LINE_BREAK)
