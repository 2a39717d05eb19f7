"""Color resolution - downgrading abstract colors to what a terminal can show."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from cellframe.core.color import (
    Color,
    ColorDepth,
    ColorType,
    ResolvedColor,
    normalize_color_name,
    parse_hex,
)
from cellframe.core.constants import NAMED_COLORS
from cellframe.core.style import Style
from cellframe.terminal.palette import PALETTE_256, RGB, rgb_to_8, rgb_to_16, rgb_to_256

logger = logging.getLogger(__name__)


def _resolve_index(index: int, depth: ColorDepth) -> ResolvedColor:
    if depth >= ColorDepth.EIGHT_BIT:
        return ResolvedColor.index(index)
    limit = 16 if depth == ColorDepth.STANDARD else 8
    if index < limit:
        return ResolvedColor.index(index)
    rgb = PALETTE_256[index]
    return ResolvedColor.index(rgb_to_16(rgb) if limit == 16 else rgb_to_8(rgb))


def _resolve_rgb(rgb: RGB, depth: ColorDepth) -> ResolvedColor:
    if depth == ColorDepth.TRUE_COLOR:
        return ResolvedColor.from_rgb(rgb)
    if depth == ColorDepth.EIGHT_BIT:
        return ResolvedColor.index(rgb_to_256(rgb))
    if depth == ColorDepth.STANDARD:
        return ResolvedColor.index(rgb_to_16(rgb))
    return ResolvedColor.index(rgb_to_8(rgb))


def _is_rgb(value: object) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 3
        and all(isinstance(channel, int) and 0 <= channel <= 255 for channel in value)
    )


def resolve(color: Optional[Color], depth: ColorDepth) -> ResolvedColor:
    """
    Resolve a color for a terminal of the given depth.

    Never fails: the default color, anything under NO_COLOR, malformed
    hex values and payloads that do not match their color type all
    resolve to ``ResolvedColor.DEFAULT``. Colors the terminal cannot
    show are replaced by the nearest palette entry.
    """
    if color is None or color.type == ColorType.DEFAULT or depth == ColorDepth.NO_COLOR:
        return ResolvedColor.DEFAULT

    value = color.value
    if color.type == ColorType.NAMED and isinstance(value, str):
        entry = NAMED_COLORS.get(normalize_color_name(value))
        if entry is not None:
            return _resolve_index(entry[0], depth)
    elif color.type == ColorType.ANSI and isinstance(value, int) and 0 <= value <= 255:
        return _resolve_index(value, depth)
    elif color.type == ColorType.HEX and isinstance(value, str):
        rgb = parse_hex(value)
        if rgb is not None:
            return _resolve_rgb(rgb, depth)
    elif color.type == ColorType.RGB and _is_rgb(value):
        return _resolve_rgb(value, depth)  # type: ignore[arg-type]

    logger.debug("Unusable color %r, using default", color)
    return ResolvedColor.DEFAULT


def resolve_style(style: Optional[Style], depth: ColorDepth) -> Style:
    """Return style with both colors rewritten for depth (unset under NO_COLOR)."""
    if style is None:
        return Style.null()
    if depth == ColorDepth.NO_COLOR:
        return style.without_color()
    return replace(
        style,
        fg=resolve(style.fg, depth).to_color(),
        bg=resolve(style.bg, depth).to_color(),
    )
