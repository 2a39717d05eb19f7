"""Measurement - the (minimum, maximum) width range content can live in.

Measurements are recomputed on every layout pass. Nothing here caches or
looks at previous layouts: each function depends only on its arguments.
"""

from __future__ import annotations

from typing import Any, Iterable, NamedTuple, Optional, Protocol, runtime_checkable

from cellframe.compose.lines import line_length, split_lines
from cellframe.core.cells import cell_len
from cellframe.core.segment import Segment


@runtime_checkable
class Measurable(Protocol):
    """Protocol for content that can report the width range it needs."""

    def __measure__(self, available: int) -> Measurement:
        """Return the measurement of this content within available cells."""
        ...


class Measurement(NamedTuple):
    """
    The range of widths content can be rendered in.

    ``minimum`` is the narrowest width before content has to be clipped,
    ``maximum`` the widest it would ever use.
    """
    minimum: int
    maximum: int

    @property
    def span(self) -> int:
        """Difference between maximum and minimum."""
        return self.maximum - self.minimum

    def normalize(self) -> Measurement:
        """Return a measurement with 0 <= minimum <= maximum."""
        minimum, maximum = self
        maximum = max(0, maximum)
        minimum = min(max(0, minimum), maximum)
        return Measurement(minimum, maximum)

    def clamp_max(self, width: int) -> Measurement:
        """Limit both bounds to at most width."""
        minimum, maximum = self
        return Measurement(min(minimum, width), min(maximum, width)).normalize()

    def clamp_min(self, width: int) -> Measurement:
        """Raise both bounds to at least width."""
        minimum, maximum = self
        return Measurement(max(minimum, width), max(maximum, width)).normalize()

    def clamp(
        self, min_width: Optional[int] = None, max_width: Optional[int] = None
    ) -> Measurement:
        """Clamp into [min_width, max_width]; None leaves that side open."""
        measurement = self.normalize()
        if min_width is not None:
            measurement = measurement.clamp_min(min_width)
        if max_width is not None:
            measurement = measurement.clamp_max(max_width)
        return measurement

    @classmethod
    def zero(cls) -> Measurement:
        return cls(0, 0)

    @classmethod
    def combine(cls, measurements: Iterable[Measurement]) -> Measurement:
        """Combine alternatives or siblings: the largest minimum and maximum."""
        minimum = maximum = 0
        for measurement in measurements:
            minimum = max(minimum, measurement.minimum)
            maximum = max(maximum, measurement.maximum)
        return cls(minimum, maximum).normalize()

    @classmethod
    def sum(cls, measurements: Iterable[Measurement]) -> Measurement:
        """Combine content placed side by side: bounds add up."""
        minimum = maximum = 0
        for measurement in measurements:
            minimum += measurement.minimum
            maximum += measurement.maximum
        return cls(minimum, maximum).normalize()

    @classmethod
    def from_text(cls, text: str) -> Measurement:
        """Measure plain text: widest word to widest line."""
        return cls.from_segments([Segment(text)])

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> Measurement:
        """Measure segments: widest word to widest line."""
        lines = split_lines(segments)
        maximum = max((line_length(line) for line in lines), default=0)
        minimum = 0
        for line in lines:
            text = "".join(segment.text for segment in line if segment.is_text)
            for word in text.split():
                minimum = max(minimum, cell_len(word))
        return cls(minimum, maximum).normalize()

    @classmethod
    def get(cls, content: Any, available: int) -> Measurement:
        """
        Measure content within available cells.

        Content implementing Measurable is asked directly; strings and
        lists of Segments are measured from their text. Anything else
        (including None) does not take part in negotiation and gets
        ``Measurement(0, available)``, meaning it will fill whatever it
        is given.
        """
        available = max(0, available)
        if isinstance(content, Measurable):
            measurement = content.__measure__(available)
        elif isinstance(content, str):
            measurement = cls.from_text(content)
        elif isinstance(content, (list, tuple)) and all(
            isinstance(item, Segment) for item in content
        ):
            measurement = cls.from_segments(content)
        else:
            measurement = cls(0, available)
        return measurement.normalize().clamp_max(available)
