"""Terminal capability detection from an injected environment lookup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional

from cellframe.core.color import Color, ColorDepth, ResolvedColor
from cellframe.terminal.resolver import resolve

logger = logging.getLogger(__name__)

EnvironmentLookup = Callable[[str], Optional[str]]

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 25

TRUECOLOR_TERMINALS = frozenset({
    "xterm-kitty",
    "alacritty",
    "xterm-ghostty",
    "wezterm",
    "foot",
    "contour",
})

TRUECOLOR_PROGRAMS = frozenset({
    "iTerm.app",
    "WezTerm",
    "vscode",
    "ghostty",
    "Hyper",
    "Tabby",
    "rio",
})


def detect_color_depth(lookup: EnvironmentLookup) -> ColorDepth:
    """
    Work out a terminal's color depth from its environment.

    Checked in order, first match wins:
        1. NO_COLOR set (to anything) -> NO_COLOR
        2. COLORTERM of truecolor/24bit -> TRUE_COLOR
        3. TERM ending in 256color -> EIGHT_BIT; TERM=dumb -> NO_COLOR
        4. A terminal known to support true color -> TRUE_COLOR
        5. Otherwise STANDARD (16 colors)
    """
    if lookup("NO_COLOR") is not None:
        return ColorDepth.NO_COLOR

    colorterm = (lookup("COLORTERM") or "").strip().lower()
    if colorterm in ("truecolor", "24bit"):
        return ColorDepth.TRUE_COLOR

    term = (lookup("TERM") or "").strip().lower()
    if term.endswith("256color"):
        return ColorDepth.EIGHT_BIT
    if term == "dumb":
        return ColorDepth.NO_COLOR

    if term in TRUECOLOR_TERMINALS:
        return ColorDepth.TRUE_COLOR
    if (lookup("TERM_PROGRAM") or "").strip() in TRUECOLOR_PROGRAMS:
        return ColorDepth.TRUE_COLOR
    if lookup("WT_SESSION"):
        return ColorDepth.TRUE_COLOR

    return ColorDepth.STANDARD


def _dimension(lookup: EnvironmentLookup, key: str, default: int) -> int:
    value = lookup(key)
    try:
        parsed = int(value) if value is not None else default
    except ValueError:
        return default
    return parsed if parsed > 0 else default


@dataclass(frozen=True)
class TerminalProfile:
    """
    Snapshot of what a terminal can display.

    Created once when the backend starts and passed explicitly into
    rendering. Nothing re-polls the environment during a render; a new
    profile is made with ``refresh`` when the backend reconnects.
    """
    color_depth: ColorDepth = ColorDepth.STANDARD
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    @classmethod
    def from_lookup(cls, lookup: EnvironmentLookup) -> TerminalProfile:
        """Build a profile from an environment lookup function."""
        profile = cls(
            color_depth=detect_color_depth(lookup),
            width=_dimension(lookup, "COLUMNS", DEFAULT_WIDTH),
            height=_dimension(lookup, "LINES", DEFAULT_HEIGHT),
        )
        logger.debug("Detected terminal profile: %s", profile)
        return profile

    @classmethod
    def from_environment(cls) -> TerminalProfile:
        """Build a profile from the process environment."""
        return cls.from_lookup(os.environ.get)

    def refresh(self, lookup: Optional[EnvironmentLookup] = None) -> TerminalProfile:
        """Return a new profile re-detected after a reconnect; self is unchanged."""
        profile = type(self).from_lookup(lookup or os.environ.get)
        if profile.color_depth != self.color_depth:
            logger.debug(
                "Color depth changed from %s to %s",
                self.color_depth.name,
                profile.color_depth.name,
            )
        return profile

    @property
    def supports_color(self) -> bool:
        return self.color_depth > ColorDepth.NO_COLOR

    def resolve(self, color: Optional[Color]) -> ResolvedColor:
        """Resolve a color for this terminal."""
        return resolve(color, self.color_depth)
