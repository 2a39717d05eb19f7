"""Space negotiation and layout allocation."""

from cellframe.layout.allocator import allocate, allocate_responsive, apportion, responsive
from cellframe.layout.measurement import Measurable, Measurement
from cellframe.layout.overflow import fit_slot
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
    Size,
    Visibility,
    Visible,
)

__all__ = [
    "allocate",
    "allocate_responsive",
    "apportion",
    "responsive",
    "Measurable",
    "Measurement",
    "fit_slot",
    "Auto",
    "CollapseTo",
    "Fixed",
    "Fractional",
    "HiddenBelow",
    "LayoutSlot",
    "MinMax",
    "Overflow",
    "Percent",
    "Size",
    "Visibility",
    "Visible",
]
