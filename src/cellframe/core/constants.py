"""Shared constants for terminal composition."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Half-block characters for pixel rendering
UPPER_HALF = "▀"  # FG = top pixel, BG = bottom pixel
LOWER_HALF = "▄"  # FG = bottom pixel, BG = top pixel

ELLIPSIS = "…"

# Standard 16-color ANSI palette RGB values (VGA)
PALETTE_16: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),        # 0 - Black
    (170, 0, 0),      # 1 - Red
    (0, 170, 0),      # 2 - Green
    (170, 85, 0),     # 3 - Yellow/Brown
    (0, 0, 170),      # 4 - Blue
    (170, 0, 170),    # 5 - Magenta
    (0, 170, 170),    # 6 - Cyan
    (170, 170, 170),  # 7 - White
    (85, 85, 85),     # 8 - Bright Black
    (255, 85, 85),    # 9 - Bright Red
    (85, 255, 85),    # 10 - Bright Green
    (255, 255, 85),   # 11 - Bright Yellow
    (85, 85, 255),    # 12 - Bright Blue
    (255, 85, 255),   # 13 - Bright Magenta
    (85, 255, 255),   # 14 - Bright Cyan
    (255, 255, 255),  # 15 - Bright White
)

# Standard 16-color names (SGR 30-37 fg / 40-47 bg, then 90-97 / 100-107)
COLORS_16 = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "bright_black": 8,
    "bright_red": 9,
    "bright_green": 10,
    "bright_yellow": 11,
    "bright_blue": 12,
    "bright_magenta": 13,
    "bright_cyan": 14,
    "bright_white": 15,
}

# name -> (palette index, rgb)
NAMED_COLORS: dict[str, tuple[int, tuple[int, int, int]]] = {
    name: (index, PALETTE_16[index]) for name, index in COLORS_16.items()
}
