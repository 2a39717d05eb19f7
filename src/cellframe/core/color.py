"""Color representation: abstract color specs, terminal depths and resolved values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar, Optional, Union

from cellframe.core.constants import COLORS_16, NAMED_COLORS

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_ANSI_PATTERN = re.compile(r"^color\((\d{1,3})\)$")
_RGB_PATTERN = re.compile(r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$")

ColorValue = Union[int, str, tuple[int, int, int], None]


class ColorType(Enum):
    """Kind of abstract color specification."""
    DEFAULT = "default"
    NAMED = "named"
    ANSI = "ansi"
    RGB = "rgb"
    HEX = "hex"


class ColorDepth(IntEnum):
    """Color capability of a terminal, ordered from least to most capable."""
    NO_COLOR = 0
    BASIC = 1       # 8 colors (SGR 30-37, 40-47)
    STANDARD = 2    # 16 colors (adds SGR 90-97, 100-107)
    EIGHT_BIT = 3   # 256 colors (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = 4  # 24-bit (SGR 38;2;r;g;b, 48;2;r;g;b)


def normalize_color_name(name: str) -> str:
    """Normalize a color name: 'Bright Red' / 'bright-red' -> 'bright_red'."""
    return re.sub(r"[\s\-]+", "_", name.strip().lower())


def parse_hex(text: str) -> Optional[tuple[int, int, int]]:
    """Parse '#rrggbb' or '#rgb' to an RGB tuple, or None if malformed."""
    match = _HEX_PATTERN.match(text.strip())
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        # Short form: F0F -> FF00FF
        digits = digits[0] * 2 + digits[1] * 2 + digits[2] * 2
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


@dataclass(frozen=True)
class Color:
    """
    An abstract color specification.

    Colors are not tied to any terminal: they are resolved to something
    displayable by ``cellframe.terminal.resolve`` once the terminal's
    color depth is known.
    """
    type: ColorType
    value: ColorValue = None

    # Standard 16 colors
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    BRIGHT_BLACK: ClassVar["Color"]
    BRIGHT_RED: ClassVar["Color"]
    BRIGHT_GREEN: ClassVar["Color"]
    BRIGHT_YELLOW: ClassVar["Color"]
    BRIGHT_BLUE: ClassVar["Color"]
    BRIGHT_MAGENTA: ClassVar["Color"]
    BRIGHT_CYAN: ClassVar["Color"]
    BRIGHT_WHITE: ClassVar["Color"]

    # Terminal default color
    DEFAULT: ClassVar["Color"]

    @classmethod
    def default(cls) -> "Color":
        """The terminal's own default foreground/background."""
        return cls(ColorType.DEFAULT)

    @classmethod
    def named(cls, name: str) -> "Color":
        """Create a Color from one of the 16 standard color names."""
        key = normalize_color_name(name)
        if key not in NAMED_COLORS:
            raise ValueError(f"Unknown color name: {name!r}")
        return cls(ColorType.NAMED, key)

    @classmethod
    def ansi(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorType.ANSI, index)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorType.RGB, (r, g, b))

    @classmethod
    def hex(cls, text: str) -> "Color":
        """
        Create a Color from a hex string.

        The string is stored as given and only parsed on resolution, where
        a malformed value degrades to the default color.
        """
        return cls(ColorType.HEX, text)

    @classmethod
    def parse(cls, text: str) -> "Color":
        """
        Parse a color string.

        Accepts:
            - "default"
            - Named colors: "red", "bright_blue", "Bright Blue"
            - 256-color indices: "color(196)"
            - Hex colors: "#FF00FF", "#F0F"
            - RGB: "rgb(255, 0, 255)"
        """
        original = text
        text = text.strip().lower()
        if text == "default":
            return cls.default()
        if normalize_color_name(text) in NAMED_COLORS:
            return cls.named(text)
        if text.startswith("#"):
            return cls.hex(text)
        match = _ANSI_PATTERN.match(text)
        if match:
            return cls.ansi(int(match.group(1)))
        match = _RGB_PATTERN.match(text)
        if match:
            r, g, b = (int(group) for group in match.groups())
            return cls.rgb(r, g, b)
        raise ValueError(f"Cannot parse color: {original!r}")

    @property
    def is_default(self) -> bool:
        return self.type == ColorType.DEFAULT


# Initialize class-level color constants
for _name in COLORS_16:
    setattr(Color, _name.upper(), Color(ColorType.NAMED, _name))
Color.DEFAULT = Color.default()
del _name


class ResolvedType(Enum):
    """Kind of depth-appropriate output color."""
    DEFAULT = "default"
    ANSI_INDEX = "index"
    RGB = "rgb"


@dataclass(frozen=True)
class ResolvedColor:
    """A color expressed in terms a specific color depth can render."""
    type: ResolvedType
    value: Union[int, tuple[int, int, int], None] = None

    DEFAULT: ClassVar["ResolvedColor"]

    @classmethod
    def index(cls, index: int) -> "ResolvedColor":
        return cls(ResolvedType.ANSI_INDEX, index)

    @classmethod
    def from_rgb(cls, rgb: tuple[int, int, int]) -> "ResolvedColor":
        return cls(ResolvedType.RGB, rgb)

    @property
    def is_default(self) -> bool:
        return self.type == ResolvedType.DEFAULT

    def to_color(self) -> Optional[Color]:
        """Convert back to an explicit Color (None for the default)."""
        if self.type == ResolvedType.ANSI_INDEX:
            assert isinstance(self.value, int)
            return Color.ansi(self.value)
        if self.type == ResolvedType.RGB:
            assert isinstance(self.value, tuple)
            return Color.rgb(*self.value)
        return None

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        if self.type == ResolvedType.ANSI_INDEX:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(30 + self.value)
            elif self.value < 16:
                return str(90 + self.value - 8)
            return f"38;5;{self.value}"
        elif self.type == ResolvedType.RGB:
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"38;2;{r};{g};{b}"
        return "39"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color."""
        if self.type == ResolvedType.ANSI_INDEX:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(40 + self.value)
            elif self.value < 16:
                return str(100 + self.value - 8)
            return f"48;5;{self.value}"
        elif self.type == ResolvedType.RGB:
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"48;2;{r};{g};{b}"
        return "49"


ResolvedColor.DEFAULT = ResolvedColor(ResolvedType.DEFAULT)
