"""Line composition - splitting, cropping, padding and shaping segments.

A Line is a list of Segments making up one terminal row. Every operation
here returns new lists; input lines are never modified.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, Optional, Sequence

from cellframe.core.cells import cell_len, get_character_width
from cellframe.core.segment import Segment
from cellframe.core.style import Style
from cellframe.errors import InvalidCut

Line = list[Segment]

_WORD_PATTERN = re.compile(r"\S+")


class VerticalAlign(Enum):
    """Where padding lines go when content is shorter than its box."""
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


def line_length(line: Iterable[Segment]) -> int:
    """Total cell width of a line."""
    return sum(segment.cell_length for segment in line)


def blank_line(width: int, style: Optional[Style] = None) -> Line:
    """A line of width spaces."""
    if width <= 0:
        return []
    return [Segment(" " * width, style)]


def split_lines(segments: Iterable[Segment]) -> list[Line]:
    """
    Split segments into lines at line breaks.

    Newlines embedded in text segments also split. A trailing run with no
    line break after it is still a line.
    """
    lines: list[Line] = []
    line: Line = []
    for segment in segments:
        if segment.is_line_break:
            lines.append(line)
            line = []
        elif segment.is_text and "\n" in segment.text:
            *complete, last = segment.text.split("\n")
            for part in complete:
                if part:
                    line.append(Segment(part, segment.style))
                lines.append(line)
                line = []
            if last:
                line.append(Segment(last, segment.style))
        else:
            line.append(segment)
    if line:
        lines.append(line)
    return lines


def join_lines(lines: Iterable[Line]) -> list[Segment]:
    """Flatten lines back into segments separated by line breaks."""
    segments: list[Segment] = []
    for index, line in enumerate(lines):
        if index:
            segments.append(Segment.line())
        segments.extend(line)
    return segments


def _split_line_at(line: Sequence[Segment], cut: int) -> tuple[Line, Line]:
    """Split a line into the first ``cut`` cells and the rest."""
    head: Line = []
    total = 0
    for index, segment in enumerate(line):
        if total >= cut:
            return head, list(line[index:])
        length = segment.cell_length
        if total + length <= cut:
            head.append(segment)
            total += length
        else:
            left, right = segment.split_cells(cut - total)
            head.append(left)
            return head, [right, *line[index + 1:]]
    return head, []


def adjust_width(line: Sequence[Segment], width: int) -> Line:
    """
    Crop or pad a line so it is exactly width cells.

    Padding is a single unstyled run of spaces. Cropping truncates the
    segment that crosses the boundary and drops everything after it; a
    wide character that would be cut in half is replaced with a space.
    """
    width = max(0, width)
    length = line_length(line)
    if length < width:
        return [*line, Segment(" " * (width - length))]
    if length == width:
        return list(line)
    head, _ = _split_line_at(line, width)
    return head


def divide(line: Sequence[Segment], cuts: Sequence[int]) -> list[Line]:
    """
    Divide a line at cell offsets.

    Produces one line per interval ``[cuts[i], cuts[i + 1])``, each exactly
    as wide as its interval.

    Raises:
        InvalidCut: If cuts are not strictly increasing or fall outside
            the line.
    """
    length = line_length(line)
    for cut in cuts:
        if not 0 <= cut <= length:
            raise InvalidCut(f"cut {cut} outside line of width {length}")
    for previous, cut in zip(cuts, cuts[1:]):
        if cut <= previous:
            raise InvalidCut(f"cuts must be strictly increasing, got {list(cuts)}")
    if len(cuts) < 2:
        return []

    _, remaining = _split_line_at(line, cuts[0])
    lines: list[Line] = []
    for start, end in zip(cuts, cuts[1:]):
        head, remaining = _split_line_at(remaining, end - start)
        lines.append(head)
    return lines


def apply_style(line: Iterable[Segment], style: Optional[Style]) -> Line:
    """
    Lay a style underneath every text segment.

    Attributes a segment sets itself are kept; only its unset attributes
    are taken from style.
    """
    if style is None or style.is_null:
        return list(line)
    return [
        Segment(segment.text, style + segment.style) if segment.is_text else segment
        for segment in line
    ]


def strip_styles(line: Iterable[Segment]) -> Line:
    """Remove styles from every text segment."""
    return [Segment(segment.text) if segment.is_text else segment for segment in line]


def simplify(line: Iterable[Segment]) -> Line:
    """Merge adjacent text segments that share a style."""
    result: Line = []
    for segment in line:
        if segment.is_text and not segment.text:
            continue
        if (
            result
            and segment.is_text
            and result[-1].is_text
            and (result[-1].style or Style.null()) == (segment.style or Style.null())
        ):
            last = result.pop()
            result.append(Segment(last.text + segment.text, last.style))
        else:
            result.append(segment)
    return result


def shape(segments: Iterable[Segment], width: int) -> list[Line]:
    """Split segments into lines, each exactly width cells."""
    return [adjust_width(line, width) for line in split_lines(segments)]


def set_lines_shape(
    lines: Sequence[Sequence[Segment]],
    width: int,
    height: int,
    style: Optional[Style] = None,
) -> list[Line]:
    """Make lines an exact width x height grid, padding with blank lines."""
    height = max(0, height)
    shaped = [adjust_width(line, width) for line in lines[:height]]
    while len(shaped) < height:
        shaped.append(blank_line(width, style))
    return shaped


def set_shape(
    segments: Iterable[Segment],
    width: int,
    height: int,
    style: Optional[Style] = None,
) -> list[Line]:
    """
    Shape segments into exactly height lines of exactly width cells.

    The output is ready to be written row by row; shaping it again at the
    same dimensions returns an equal grid.
    """
    return set_lines_shape(split_lines(segments), width, height, style)


def align_vertical(
    lines: Sequence[Sequence[Segment]],
    align: VerticalAlign,
    width: int,
    height: int,
    style: Optional[Style] = None,
) -> list[Line]:
    """
    Pad lines with blank lines to fill height.

    With MIDDLE alignment an odd gap puts the extra line at the bottom.
    Lines are never removed.
    """
    gap = height - len(lines)
    if gap <= 0:
        return [list(line) for line in lines]
    if align == VerticalAlign.TOP:
        top = 0
    elif align == VerticalAlign.BOTTOM:
        top = gap
    else:
        top = gap // 2
    bottom = gap - top
    return (
        [blank_line(width, style) for _ in range(top)]
        + [list(line) for line in lines]
        + [blank_line(width, style) for _ in range(bottom)]
    )


def _wrap_spans(text: str, width: int) -> list[tuple[int, int]]:
    """
    Cell intervals ``(start, end)`` of the wrapped lines of text.

    Whitespace between lines is left out of every interval. Words that
    occupy no cells (lone combining marks, controls) never start a line.
    """
    offsets = [0]
    for char in text:
        offsets.append(offsets[-1] + get_character_width(char))

    spans: list[tuple[int, int]] = []
    start: Optional[int] = None
    end = 0
    for match in _WORD_PATTERN.finditer(text):
        word_start, word_end = offsets[match.start()], offsets[match.end()]
        if word_end == word_start:
            continue
        if start is not None:
            if word_end - start <= width:
                end = word_end
                continue
            spans.append((start, end))
            start = word_start
        else:
            # Leading whitespace stays on the first line when it fits
            start = 0 if word_end <= width else word_start
        # Word is wider than a whole line: break it between characters
        for index in range(match.start(), match.end()):
            if offsets[index + 1] - start > width and offsets[index] > start:
                spans.append((start, offsets[index]))
                start = offsets[index]
        end = word_end
    if start is not None:
        spans.append((start, end))
    return spans


def _slice_line(line: Sequence[Segment], start: int, end: int) -> Line:
    _, rest = _split_line_at(line, start)
    head, _ = _split_line_at(rest, end - start)
    return head


def wrap_line(line: Sequence[Segment], width: int) -> list[Line]:
    """
    Word-wrap a line to at most width cells per line.

    Breaks at whitespace, which is dropped at the break; words longer
    than width are broken between characters. Lines are not padded.
    """
    if width <= 0:
        return [[]]
    if line_length(line) <= width:
        return [list(line)]
    text = "".join(segment.text for segment in line if segment.is_text)
    spans = _wrap_spans(text, width)
    if not spans:
        return [adjust_width(line, width)]
    wrapped: list[Line] = []
    for start, end in spans:
        piece = _slice_line(line, start, end)
        if end - start > width:
            # A single glyph wider than the line
            piece = adjust_width(piece, width)
        wrapped.append(piece)
    return wrapped
