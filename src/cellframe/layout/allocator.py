"""Layout allocation - turning slot sizes into exact cell counts.

``allocate`` runs five phases over a list of LayoutSlots:

0. Visibility: hidden slots drop out, collapsing slots switch size.
1. Fixed and Percent slots take their size.
2. Auto slots are measured and start at their maximum.
3. Fractional slots share what is left by largest-remainder apportionment.
4. If the total is over budget, Auto slots shrink toward their minimum,
   then Fractional slots toward zero. If it is under budget, Auto slots
   grow toward their maximum, then Fractional slots share the surplus.

Allocation is a pure function of its arguments and is simply re-run on
every layout pass.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Callable, Optional, Sequence, Union

from cellframe.errors import InvalidBreakpoints, NoMatchingBreakpoint
from cellframe.layout.measurement import Measurement
from cellframe.layout.slots import Auto, Fixed, Fractional, LayoutSlot, MinMax, Percent, Size

logger = logging.getLogger(__name__)

MeasureFunc = Callable[[int, LayoutSlot, int], Measurement]
Breakpoints = Union[Mapping[int, Sequence[LayoutSlot]], Sequence[tuple[int, Sequence[LayoutSlot]]]]


class _Kind(Enum):
    RIGID = "rigid"
    AUTO = "auto"
    FRACTION = "fraction"


@dataclass
class _Allocation:
    """Working state for one visible slot."""
    kind: _Kind
    size: int
    floor: int
    ceiling: float
    weight: float = 0

    @property
    def slack(self) -> int:
        return self.size - self.floor

    @property
    def room(self) -> float:
        return self.ceiling - self.size


def _default_measure(index: int, slot: LayoutSlot, available: int) -> Measurement:
    return Measurement.get(slot.content, available)


def apportion(total: int, weights: Sequence[float]) -> list[int]:
    """
    Split total cells in proportion to weights, summing exactly to total.

    Each entry first gets the whole part of its exact share; the cells
    left over go one each to the entries with the largest fractional
    remainder. Equal remainders are settled in favour of the earlier
    entry. Non-positive weights get nothing.

    Example:
        >>> apportion(41, [1, 2])
        [14, 27]
    """
    weights = [max(0.0, weight) for weight in weights]
    weight_total = sum(Fraction(weight) for weight in weights)
    if total <= 0 or weight_total == 0:
        return [0] * len(weights)

    shares = [Fraction(total) * Fraction(weight) / weight_total for weight in weights]
    result = [math.floor(share) for share in shares]
    leftover = total - sum(result)
    order = sorted(range(len(shares)), key=lambda i: (-(shares[i] - result[i]), i))
    for index in order[:leftover]:
        result[index] += 1
    return result


def _distribute(amount: int, weights: Sequence[float], caps: Sequence[float]) -> list[int]:
    """
    Hand out up to amount cells by weight without exceeding each cap.

    Entries that would reach their cap are filled to it and the rest is
    shared again among the others.
    """
    given = [0] * len(weights)
    active = [i for i in range(len(weights)) if weights[i] > 0 and caps[i] > 0]
    while amount > 0 and active:
        shares = apportion(amount, [weights[i] for i in active])
        saturated = [i for i, share in zip(active, shares) if share >= caps[i] - given[i]]
        if saturated:
            for i in saturated:
                room = int(caps[i] - given[i])
                given[i] += room
                amount -= room
            active = [i for i in active if i not in saturated]
            continue
        for i, share in zip(active, shares):
            given[i] += share
        amount = 0
    return given


def _resolve_size(
    size: Size, index: int, slot: LayoutSlot, available: int, measure: MeasureFunc
) -> _Allocation:
    """Phases 1 and 2 for a single slot."""
    if isinstance(size, Fixed):
        cells = min(max(0, size.cells), available)
        return _Allocation(_Kind.RIGID, cells, cells, cells)
    if isinstance(size, Percent):
        cells = min(max(0, math.floor(available * size.percent / 100)), available)
        return _Allocation(_Kind.RIGID, cells, cells, cells)
    if isinstance(size, Auto):
        minimum, maximum = measure(index, slot, available).normalize().clamp_max(available)
        return _Allocation(_Kind.AUTO, maximum, minimum, maximum)
    if isinstance(size, Fractional):
        return _Allocation(_Kind.FRACTION, 0, 0, math.inf, size.weight)
    if isinstance(size, MinMax):
        allocation = _resolve_size(size.inner, index, slot, available, measure)
        low, high = size.minimum, size.maximum
        allocation.floor = min(max(allocation.floor, low), high)
        allocation.ceiling = min(max(allocation.ceiling, low), high)
        allocation.size = min(max(allocation.size, low), high)
        return allocation
    raise TypeError(f"Unknown slot size: {size!r}")


def allocate(
    available: int,
    slots: Sequence[LayoutSlot],
    measure: Optional[MeasureFunc] = None,
) -> list[int]:
    """
    Compute the width in cells of every slot.

    Args:
        available: Cells available to the whole layout
        slots: Slots in layout order
        measure: Called as ``measure(index, slot, available)`` for Auto
            slots; defaults to measuring ``slot.content``

    Returns:
        One width per slot, in order. Slots hidden at this width get 0.
        The total never exceeds available unless the rigid sizes and
        minimums alone already do.
    """
    available = max(0, available)
    measure = measure or _default_measure

    # Phases 0-2
    allocations: list[Optional[_Allocation]] = []
    for index, slot in enumerate(slots):
        size = slot.effective_size(available)
        if size is None:
            allocations.append(None)
        else:
            allocations.append(_resolve_size(size, index, slot, available, measure))
    active = [allocation for allocation in allocations if allocation is not None]
    autos = [a for a in active if a.kind == _Kind.AUTO]
    fractions = [a for a in active if a.kind == _Kind.FRACTION]

    # Phase 3
    remaining = available - sum(a.size for a in active if a.kind != _Kind.FRACTION)
    shares = apportion(remaining, [a.weight for a in fractions])
    for allocation, share in zip(fractions, shares):
        allocation.size = int(min(max(share, allocation.floor), allocation.ceiling))

    # Phase 4
    total = sum(a.size for a in active)
    if total > available:
        excess = total - available
        for group, weights in (
            (autos, [a.slack for a in autos]),
            (fractions, [a.weight for a in fractions]),
        ):
            taken = _distribute(excess, weights, [a.slack for a in group])
            for allocation, cells in zip(group, taken):
                allocation.size -= cells
            excess -= sum(taken)
        if excess:
            logger.debug("Layout over budget by %d cells at width %d", excess, available)
    elif total < available:
        surplus = available - total
        for group, weights in (
            (autos, [a.room for a in autos]),
            (fractions, [a.weight for a in fractions]),
        ):
            given = _distribute(surplus, weights, [a.room for a in group])
            for allocation, cells in zip(group, given):
                allocation.size += cells
            surplus -= sum(given)

    return [allocation.size if allocation is not None else 0 for allocation in allocations]


def responsive(breakpoints: Breakpoints, available: int) -> list[LayoutSlot]:
    """
    Pick the slot list for the current width.

    Args:
        breakpoints: ``(threshold, slots)`` pairs (or a mapping) in
            strictly increasing threshold order
        available: Current width

    Returns:
        The slots of the largest threshold not above available

    Raises:
        InvalidBreakpoints: If thresholds are not strictly increasing
        NoMatchingBreakpoint: If every threshold is above available;
            include a threshold of 0 as a catch-all
    """
    items = list(breakpoints.items()) if isinstance(breakpoints, Mapping) else list(breakpoints)
    thresholds = [threshold for threshold, _ in items]
    for previous, threshold in zip(thresholds, thresholds[1:]):
        if threshold <= previous:
            raise InvalidBreakpoints(
                f"Breakpoint thresholds must be strictly increasing, got {thresholds}"
            )

    chosen: Optional[Sequence[LayoutSlot]] = None
    chosen_threshold = None
    for threshold, slots in items:
        if threshold <= available:
            chosen, chosen_threshold = slots, threshold
    if chosen is None:
        raise NoMatchingBreakpoint(f"No breakpoint at or below width {available}: {thresholds}")
    logger.debug("Width %d selected breakpoint %d", available, chosen_threshold)
    return list(chosen)


def allocate_responsive(
    breakpoints: Breakpoints,
    available: int,
    measure: Optional[MeasureFunc] = None,
) -> tuple[list[LayoutSlot], list[int]]:
    """Select slots with ``responsive`` and allocate them."""
    slots = responsive(breakpoints, available)
    return slots, allocate(available, slots, measure)
