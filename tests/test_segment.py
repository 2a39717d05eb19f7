"""Tests for Segment and Style."""

from cellframe.core.color import Color
from cellframe.core.segment import ControlType, Segment, SegmentKind
from cellframe.core.style import Style


class TestSegment:
    """Tests for Segment."""

    def test_default_segment(self) -> None:
        segment = Segment()
        assert segment.text == ""
        assert segment.style is None
        assert segment.kind == SegmentKind.TEXT

    def test_cell_length(self) -> None:
        assert Segment("hi").cell_length == 2
        assert Segment("漢字").cell_length == 4
        assert Segment.line().cell_length == 0
        assert Segment.control(ControlType.HOME).cell_length == 0

    def test_kinds(self) -> None:
        assert Segment("x").is_text
        assert Segment.line().is_line_break
        control = Segment.control(ControlType.CURSOR_MOVE_TO, 3, 4)
        assert control.is_control
        assert control.code == ControlType.CURSOR_MOVE_TO
        assert control.params == (3, 4)

    def test_equality(self) -> None:
        assert Segment("a", Style(bold=True)) == Segment("a", Style(bold=True))
        assert Segment("a") != Segment("a", Style(bold=True))

    def test_split_cells(self) -> None:
        left, right = Segment("hello", Style(bold=True)).split_cells(2)
        assert left == Segment("he", Style(bold=True))
        assert right == Segment("llo", Style(bold=True))

    def test_split_cells_bisecting_wide(self) -> None:
        left, right = Segment("a漢b").split_cells(2)
        assert left == Segment("a ")
        assert right == Segment(" b")
        assert left.cell_length + right.cell_length == 4

    def test_split_cells_edges(self) -> None:
        segment = Segment("abc")
        assert segment.split_cells(0) == (Segment(""), segment)
        assert segment.split_cells(3) == (segment, Segment(""))
        assert segment.split_cells(10) == (segment, Segment(""))


class TestStyle:
    """Tests for Style overlay."""

    def test_null(self) -> None:
        assert Style().is_null
        assert Style.null() == Style()
        assert not Style(bold=True).is_null

    def test_add_explicit_wins(self) -> None:
        base = Style(fg=Color.WHITE, bg=Color.BLUE, bold=True)
        combined = base + Style(fg=Color.RED, bold=False)
        assert combined.fg == Color.RED
        assert combined.bg == Color.BLUE
        assert combined.bold is False

    def test_add_unset_inherits(self) -> None:
        combined = Style(italic=True) + Style(underline=True)
        assert combined.italic is True
        assert combined.underline is True

    def test_add_none(self) -> None:
        style = Style(bold=True)
        assert style + None == style
        assert Style.null() + style == style

    def test_without_color(self) -> None:
        style = Style(fg=Color.RED, bg=Color.BLUE, bold=True).without_color()
        assert style == Style(bold=True)

    def test_enabled_attributes(self) -> None:
        assert Style(bold=True, italic=False, strike=True).enabled_attributes() == ["bold", "strike"]
