"""Render shaped lines to terminal-compatible escape sequences."""

from __future__ import annotations

from typing import Iterable, Optional

from cellframe.core.constants import CSI, RESET
from cellframe.core.segment import ControlType, Segment
from cellframe.core.style import ATTRIBUTE_SGR, Style
from cellframe.terminal.profile import TerminalProfile
from cellframe.terminal.resolver import resolve


def control_sequence(code: ControlType, params: tuple[int, ...] = ()) -> str:
    """Escape sequence for a control code."""
    count = params[0] if params else 1
    if code == ControlType.BELL:
        return "\x07"
    if code == ControlType.CARRIAGE_RETURN:
        return "\r"
    if code == ControlType.HOME:
        return f"{CSI}H"
    if code == ControlType.CLEAR:
        return f"{CSI}2J"
    if code == ControlType.SHOW_CURSOR:
        return f"{CSI}?25h"
    if code == ControlType.HIDE_CURSOR:
        return f"{CSI}?25l"
    if code == ControlType.CURSOR_UP:
        return f"{CSI}{count}A"
    if code == ControlType.CURSOR_DOWN:
        return f"{CSI}{count}B"
    if code == ControlType.CURSOR_FORWARD:
        return f"{CSI}{count}C"
    if code == ControlType.CURSOR_BACKWARD:
        return f"{CSI}{count}D"
    if code == ControlType.CURSOR_MOVE_TO_COLUMN:
        column = params[0] if params else 0
        return f"{CSI}{column + 1}G"
    if code == ControlType.CURSOR_MOVE_TO:
        x, y = (params + (0, 0))[:2]
        return f"{CSI}{y + 1};{x + 1}H"
    if code == ControlType.ERASE_IN_LINE:
        mode = params[0] if params else 0
        return f"{CSI}{mode}K"
    return ""


class AnsiRenderer:
    """
    Render Lines to ANSI escape sequences for one terminal profile.

    Colors are resolved against the profile's color depth as each segment
    is written. SGR codes are only emitted when the style changes, and
    every line ends with all attributes reset.
    """

    def __init__(self, profile: TerminalProfile, reset_at_end: bool = True):
        self.profile = profile
        self.reset_at_end = reset_at_end

    def style_sgr(self, style: Optional[Style]) -> str:
        """SGR parameters for a style, or '' if it changes nothing."""
        if style is None:
            return ""
        params = [ATTRIBUTE_SGR[name] for name in style.enabled_attributes()]
        depth = self.profile.color_depth
        fg = resolve(style.fg, depth)
        if not fg.is_default:
            params.append(fg.to_sgr_fg())
        bg = resolve(style.bg, depth)
        if not bg.is_default:
            params.append(bg.to_sgr_bg())
        return ";".join(params)

    def render_line(self, line: Iterable[Segment]) -> str:
        """Render one line to a string."""
        parts: list[str] = []
        last_sgr = ""
        for segment in line:
            if segment.is_control:
                assert segment.code is not None
                parts.append(control_sequence(segment.code, segment.params))
                continue
            if not segment.is_text:
                continue
            sgr = self.style_sgr(segment.style)
            if sgr != last_sgr:
                parts.append(f"{CSI}0;{sgr}m" if sgr else RESET)
                last_sgr = sgr
            parts.append(segment.text)

        # Reset at end of each line to prevent color bleeding into clear-to-EOL
        if last_sgr:
            parts.append(RESET)
        return "".join(parts)

    def render(self, lines: Iterable[Iterable[Segment]]) -> str:
        """Render lines joined by newlines."""
        result = "\n".join(self.render_line(line) for line in lines)
        if self.reset_at_end:
            result += RESET
        return result
