"""Style - colors and text attributes with explicit-wins overlay semantics."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Optional

from cellframe.core.color import Color

# SGR parameter for each boolean attribute
ATTRIBUTE_SGR = {
    "bold": "1",
    "dim": "2",
    "italic": "3",
    "underline": "4",
    "blink": "5",
    "reverse": "7",
    "strike": "9",
}


@dataclass(frozen=True)
class Style:
    """
    Foreground, background and text attributes for a run of text.

    Every field is optional: ``None`` means "not set here", so a style can
    be laid over another without forcing values it never specified.

    Example:
        >>> base = Style(fg=Color.WHITE, bold=True)
        >>> (base + Style(fg=Color.RED)).fg == Color.RED
        True
        >>> (base + Style(fg=Color.RED)).bold
        True
    """
    fg: Optional[Color] = None
    bg: Optional[Color] = None
    bold: Optional[bool] = None
    dim: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[bool] = None
    blink: Optional[bool] = None
    reverse: Optional[bool] = None
    strike: Optional[bool] = None

    @classmethod
    def null(cls) -> Style:
        """A style with nothing set."""
        return _NULL_STYLE

    @property
    def is_null(self) -> bool:
        return self == _NULL_STYLE

    def __add__(self, other: Optional[Style]) -> Style:
        """Overlay other onto this style; attributes set in other win."""
        if other is None or other.is_null:
            return self
        if self.is_null:
            return other
        return Style(**{
            f.name: (
                getattr(other, f.name)
                if getattr(other, f.name) is not None
                else getattr(self, f.name)
            )
            for f in fields(self)
        })

    def without_color(self) -> Style:
        """Copy of this style with both colors unset."""
        return replace(self, fg=None, bg=None)

    def enabled_attributes(self) -> list[str]:
        """Names of boolean attributes explicitly switched on."""
        return [name for name in ATTRIBUTE_SGR if getattr(self, name)]


_NULL_STYLE = Style()
