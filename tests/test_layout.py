"""Tests for layout allocation."""

import pytest

from cellframe.compose.lines import line_length
from cellframe.core.segment import Segment
from cellframe.errors import ConfigurationError, InvalidBreakpoints, NoMatchingBreakpoint
from cellframe.layout.allocator import allocate, allocate_responsive, apportion, responsive
from cellframe.layout.measurement import Measurement
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
)


def slots(*sizes) -> list[LayoutSlot]:
    return [LayoutSlot(size) for size in sizes]


class TestApportion:
    """Tests for largest-remainder apportionment."""

    def test_exact(self) -> None:
        assert apportion(40, [1, 1]) == [20, 20]

    def test_remainder_goes_to_largest_fraction(self) -> None:
        assert apportion(41, [1, 2]) == [14, 27]

    def test_ties_go_to_earlier_slot(self) -> None:
        assert apportion(10, [1, 1, 1]) == [4, 3, 3]
        assert apportion(2, [1, 1, 1]) == [1, 1, 0]

    def test_sums_exactly(self) -> None:
        for total in range(0, 50):
            assert sum(apportion(total, [3, 1.5, 2, 0.25])) == total

    def test_zero_weights(self) -> None:
        assert apportion(10, [0, 0]) == [0, 0]
        assert apportion(10, [0, 1]) == [0, 10]

    def test_non_positive_total(self) -> None:
        assert apportion(0, [1, 2]) == [0, 0]
        assert apportion(-5, [1, 2]) == [0, 0]


class TestAllocate:
    """Tests for allocate."""

    def test_fixed_and_fractions(self) -> None:
        assert allocate(60, slots(Fixed(20), Fractional(1), Fractional(1))) == [20, 20, 20]

    def test_fraction_ratio(self) -> None:
        widths = allocate(61, slots(Fixed(20), Fractional(1), Fractional(2)))
        assert sum(widths) == 61
        assert widths == [20, 14, 27]
        assert abs(widths[2] - 2 * 41 / 3) <= 1

    def test_all_fixed(self) -> None:
        assert allocate(100, slots(Fixed(10), Fixed(30), Fixed(5))) == [10, 30, 5]

    def test_all_fixed_over_budget_kept(self) -> None:
        assert allocate(20, slots(Fixed(15), Fixed(15))) == [15, 15]

    def test_fixed_clamped_to_available(self) -> None:
        assert allocate(10, slots(Fixed(50))) == [10]
        assert allocate(10, slots(Fixed(-5))) == [0]

    def test_percent(self) -> None:
        assert allocate(61, slots(Percent(50), Fractional(1))) == [30, 31]

    def test_auto_takes_maximum(self) -> None:
        layout = [LayoutSlot(Auto(), content="hello world"), LayoutSlot(Fractional(1))]
        assert allocate(40, layout) == [11, 29]

    def test_auto_shrinks_toward_minimum(self) -> None:
        layout = [
            LayoutSlot(Auto(), content="aaaa bbbb cccc"),
            LayoutSlot(Fixed(10)),
        ]
        assert allocate(18, layout) == [8, 10]

    def test_auto_never_below_minimum(self) -> None:
        layout = [LayoutSlot(Auto(), content="abcdefgh ij"), LayoutSlot(Fixed(10))]
        assert allocate(12, layout) == [8, 10]

    def test_auto_shrinks_proportional_to_slack(self) -> None:
        def measure(index: int, slot: LayoutSlot, available: int) -> Measurement:
            return [Measurement(0, 20), Measurement(0, 40)][index]

        widths = allocate(45, slots(Auto(), Auto()), measure)
        assert widths == [15, 30]

    def test_fraction_gets_nothing_when_autos_fill(self) -> None:
        layout = [LayoutSlot(Auto(), content="x" * 30), LayoutSlot(Fractional(1))]
        assert allocate(20, layout) == [20, 0]

    def test_custom_measure_receives_available(self) -> None:
        seen = []

        def measure(index: int, slot: LayoutSlot, available: int) -> Measurement:
            seen.append((index, available))
            return Measurement(1, 5)

        allocate(33, slots(Fixed(3), Auto()), measure)
        assert seen == [(1, 33)]

    def test_minmax_clamps_fraction(self) -> None:
        widths = allocate(100, slots(MinMax(10, 20, Fractional(1)), Fractional(1)))
        assert widths == [20, 80]

    def test_minmax_floor_holds(self) -> None:
        widths = allocate(30, slots(MinMax(25, 40, Fractional(1)), Fractional(3)))
        assert widths == [25, 5]

    def test_minmax_fixed_inner(self) -> None:
        assert allocate(100, slots(MinMax(5, 8, Fixed(20)))) == [8]

    def test_minmax_invalid(self) -> None:
        with pytest.raises(ConfigurationError):
            MinMax(10, 5)

    def test_invalid_weight(self) -> None:
        with pytest.raises(ValueError):
            Fractional(-1)

    def test_hidden_below(self) -> None:
        layout = [
            LayoutSlot(Fixed(20), visibility=HiddenBelow(80)),
            LayoutSlot(Fractional(1)),
        ]
        assert allocate(100, layout) == [20, 80]
        assert allocate(60, layout) == [0, 60]

    def test_collapse_to(self) -> None:
        layout = [
            LayoutSlot(Fixed(30), visibility=CollapseTo(80, Fixed(5))),
            LayoutSlot(Fractional(1)),
        ]
        assert allocate(100, layout) == [30, 70]
        assert allocate(50, layout) == [5, 45]

    def test_empty(self) -> None:
        assert allocate(80, []) == []

    def test_negative_available(self) -> None:
        assert allocate(-10, slots(Fractional(1), Fixed(4))) == [0, 0]

    @pytest.mark.parametrize("available", [0, 1, 7, 33, 80, 121])
    def test_flexible_layout_within_budget(self, available: int) -> None:
        layout = [
            LayoutSlot(Fractional(2)),
            LayoutSlot(Auto(), content="some content here"),
            LayoutSlot(Fractional(1)),
            LayoutSlot(Percent(10)),
        ]
        widths = allocate(available, layout)
        assert len(widths) == 4
        assert all(width >= 0 for width in widths)
        assert sum(widths) <= available


class TestResponsive:
    """Tests for breakpoint selection."""

    def test_selects_largest_threshold_not_above(self) -> None:
        narrow = slots(Fractional(1))
        wide = slots(Fixed(20), Fractional(1))
        breakpoints = [(0, narrow), (100, wide)]
        assert responsive(breakpoints, 99) == narrow
        assert responsive(breakpoints, 100) == wide
        assert responsive(breakpoints, 500) == wide

    def test_mapping(self) -> None:
        narrow = slots(Fractional(1))
        assert responsive({0: narrow, 80: slots(Fixed(1))}, 10) == narrow

    def test_no_match(self) -> None:
        with pytest.raises(NoMatchingBreakpoint):
            responsive([(40, slots(Fixed(1)))], 39)

    def test_non_increasing(self) -> None:
        with pytest.raises(InvalidBreakpoints):
            responsive([(0, []), (80, []), (80, [])], 100)
        with pytest.raises(ConfigurationError):
            responsive([(50, []), (10, [])], 100)

    def test_allocate_responsive(self) -> None:
        breakpoints = [(0, slots(Fractional(1))), (100, slots(Fixed(20), Fractional(1)))]
        chosen, widths = allocate_responsive(breakpoints, 120)
        assert len(chosen) == 2
        assert widths == [20, 100]


class TestFitSlot:
    """Tests for fitting content with an overflow policy."""

    def test_clip(self) -> None:
        lines = fit_slot("hello world", LayoutSlot(overflow=Overflow.CLIP), 5)
        assert lines == [[Segment("hello")]]

    def test_clip_pads(self) -> None:
        lines = fit_slot("hi", LayoutSlot(), 4)
        assert lines == [[Segment("hi"), Segment("  ")]]

    def test_wrap(self) -> None:
        lines = fit_slot("hello world", LayoutSlot(overflow=Overflow.WRAP), 5)
        assert ["".join(s.text for s in line) for line in lines] == ["hello", "world"]

    @pytest.mark.parametrize(
        "content, width",
        [("ab \u0301", 2), ("ab \x07", 2), ("a\u200b", 1), ("abc \u0301", 3), ("a \u0301", 1)],
    )
    def test_wrap_zero_width_words(self, content: str, width: int) -> None:
        lines = fit_slot(content, LayoutSlot(overflow=Overflow.WRAP), width)
        assert lines
        assert all(line_length(line) == width for line in lines)

    def test_wrap_drops_whitespace_at_break(self) -> None:
        lines = fit_slot("aa      bb", LayoutSlot(overflow=Overflow.WRAP), 2)
        assert lines == [[Segment("aa")], [Segment("bb")]]

    def test_ellipsis(self) -> None:
        lines = fit_slot("hello world", LayoutSlot(overflow=Overflow.ELLIPSIS), 6)
        assert "".join(s.text for s in lines[0]) == "hello…"
        assert line_length(lines[0]) == 6

    def test_ellipsis_when_fits(self) -> None:
        lines = fit_slot("hi", LayoutSlot(overflow=Overflow.ELLIPSIS), 3)
        assert lines == [[Segment("hi"), Segment(" ")]]

    def test_hidden(self) -> None:
        slot = LayoutSlot(overflow=Overflow.HIDDEN)
        assert fit_slot("too long", slot, 3) == [[Segment("   ")]]
        assert fit_slot("ok", slot, 3) == [[Segment("ok"), Segment(" ")]]

    def test_height(self) -> None:
        lines = fit_slot("a b c", LayoutSlot(overflow=Overflow.WRAP), 1, height=2)
        assert lines == [[Segment("a")], [Segment("b")]]

    @pytest.mark.parametrize("overflow", list(Overflow))
    def test_every_line_exact_width(self, overflow: Overflow) -> None:
        content = [Segment("漢字 mixed"), Segment.line(), Segment("content that is long")]
        for width in range(0, 12):
            lines = fit_slot(content, LayoutSlot(overflow=overflow), width)
            assert all(line_length(line) == width for line in lines)
