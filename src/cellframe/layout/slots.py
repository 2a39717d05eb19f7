"""Layout slots: how big each position in a layout should be.

A LayoutSlot combines a Size (how many cells to ask for), an Overflow
policy (what to do with content that does not fit) and a Visibility rule
(whether the slot survives when space is tight).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from cellframe.errors import ConfigurationError


@dataclass(frozen=True)
class Fixed:
    """Exactly this many cells (never more than is available)."""
    cells: int


@dataclass(frozen=True)
class Fractional:
    """A share of the space left over, proportional to weight."""
    weight: float = 1

    def __post_init__(self) -> None:
        if self.weight < 0:
            raise ValueError(f"Fractional weight must be >= 0, got {self.weight}")


@dataclass(frozen=True)
class Auto:
    """As wide as the slot's content wants to be."""


@dataclass(frozen=True)
class Percent:
    """A percentage of the available width, rounded down."""
    percent: float

    def __post_init__(self) -> None:
        if self.percent < 0:
            raise ValueError(f"Percent must be >= 0, got {self.percent}")


@dataclass(frozen=True)
class MinMax:
    """Size of ``inner``, kept between minimum and maximum cells."""
    minimum: int
    maximum: int
    inner: Size = field(default_factory=Fractional)

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ConfigurationError(
                f"MinMax minimum {self.minimum} exceeds maximum {self.maximum}"
            )


Size = Union[Fixed, Fractional, Auto, MinMax, Percent]


class Overflow(Enum):
    """What happens to content wider than its slot."""
    CLIP = "clip"          # Cut at the slot edge
    WRAP = "wrap"          # Word-wrap onto more lines
    ELLIPSIS = "ellipsis"  # Cut and mark with …
    HIDDEN = "hidden"      # Show nothing rather than partial content


@dataclass(frozen=True)
class Visible:
    """Always shown."""


@dataclass(frozen=True)
class HiddenBelow:
    """Dropped from the layout when fewer than threshold cells are available."""
    threshold: int


@dataclass(frozen=True)
class CollapseTo:
    """Switches to ``size`` when fewer than threshold cells are available."""
    threshold: int
    size: Size


Visibility = Union[Visible, HiddenBelow, CollapseTo]


@dataclass(frozen=True)
class LayoutSlot:
    """
    One position in a layout.

    ``content`` is what an Auto slot measures (a string, a list of
    Segments, or anything implementing Measurable).
    """
    size: Size = field(default_factory=Fractional)
    overflow: Overflow = Overflow.CLIP
    visibility: Visibility = field(default_factory=Visible)
    content: Any = None

    def effective_size(self, available: int) -> Size | None:
        """The Size in force at this width, or None if the slot is hidden."""
        visibility = self.visibility
        if isinstance(visibility, HiddenBelow) and available < visibility.threshold:
            return None
        if isinstance(visibility, CollapseTo) and available < visibility.threshold:
            return visibility.size
        return self.size
