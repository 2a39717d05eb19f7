"""Cell width classification - how many terminal cells a character occupies.

Widths come from a static, ordered table of ``(start, end, width)``
code-point ranges searched with ``bisect``. Anything not in the table is
one cell wide, including unassigned code points and unpaired surrogates,
so measurement never fails on malformed input.
"""

from __future__ import annotations

from bisect import bisect_right
from functools import lru_cache

# (first code point, last code point, width); sorted and non-overlapping
CELL_WIDTHS: tuple[tuple[int, int, int], ...] = (
    (0x0000, 0x001F, 0),    # C0 controls
    (0x007F, 0x009F, 0),    # DEL and C1 controls
    (0x0300, 0x036F, 0),    # combining diacritical marks
    (0x0483, 0x0489, 0),
    (0x0591, 0x05BD, 0),
    (0x0610, 0x061A, 0),
    (0x064B, 0x065F, 0),
    (0x0E34, 0x0E3A, 0),
    (0x0E47, 0x0E4E, 0),
    (0x1100, 0x115F, 2),    # Hangul Jamo leading consonants
    (0x1AB0, 0x1AFF, 0),
    (0x1DC0, 0x1DFF, 0),
    (0x200B, 0x200F, 0),    # zero width space / joiners / direction marks
    (0x2028, 0x202E, 0),
    (0x2060, 0x2064, 0),
    (0x20D0, 0x20FF, 0),    # combining marks for symbols
    (0x231A, 0x231B, 2),
    (0x2329, 0x232A, 2),
    (0x23E9, 0x23EC, 2),
    (0x23F0, 0x23F0, 2),
    (0x23F3, 0x23F3, 2),
    (0x25FD, 0x25FE, 2),
    (0x2614, 0x2615, 2),
    (0x2648, 0x2653, 2),
    (0x267F, 0x267F, 2),
    (0x2693, 0x2693, 2),
    (0x26A1, 0x26A1, 2),
    (0x26AA, 0x26AB, 2),
    (0x26BD, 0x26BE, 2),
    (0x26C4, 0x26C5, 2),
    (0x26CE, 0x26CE, 2),
    (0x26D4, 0x26D4, 2),
    (0x26EA, 0x26EA, 2),
    (0x26F2, 0x26F3, 2),
    (0x26F5, 0x26F5, 2),
    (0x26FA, 0x26FA, 2),
    (0x26FD, 0x26FD, 2),
    (0x2705, 0x2705, 2),
    (0x270A, 0x270B, 2),
    (0x2728, 0x2728, 2),
    (0x274C, 0x274C, 2),
    (0x274E, 0x274E, 2),
    (0x2753, 0x2755, 2),
    (0x2757, 0x2757, 2),
    (0x2795, 0x2797, 2),
    (0x27B0, 0x27B0, 2),
    (0x27BF, 0x27BF, 2),
    (0x2B1B, 0x2B1C, 2),
    (0x2B50, 0x2B50, 2),
    (0x2B55, 0x2B55, 2),
    (0x2E80, 0x3029, 2),    # CJK radicals, Kangxi, CJK symbols
    (0x302A, 0x302D, 0),    # ideographic tone marks
    (0x302E, 0x303E, 2),
    (0x3041, 0x3096, 2),    # Hiragana
    (0x3099, 0x309A, 0),    # combining kana voiced marks
    (0x309B, 0x33FF, 2),    # Katakana, Bopomofo, CJK compatibility
    (0x3400, 0x4DBF, 2),    # CJK extension A
    (0x4E00, 0x9FFF, 2),    # CJK unified ideographs
    (0xA000, 0xA4CF, 2),    # Yi
    (0xA960, 0xA97F, 2),
    (0xAC00, 0xD7A3, 2),    # Hangul syllables
    (0xF900, 0xFAFF, 2),    # CJK compatibility ideographs
    (0xFE00, 0xFE0F, 0),    # variation selectors
    (0xFE10, 0xFE19, 2),
    (0xFE20, 0xFE2F, 0),
    (0xFE30, 0xFE6F, 2),
    (0xFEFF, 0xFEFF, 0),    # byte order mark
    (0xFF00, 0xFF60, 2),    # fullwidth forms
    (0xFFE0, 0xFFE6, 2),
    (0x16FE0, 0x16FE4, 2),
    (0x17000, 0x187F7, 2),  # Tangut
    (0x1B000, 0x1B2FF, 2),  # Kana supplement / extended
    (0x1F004, 0x1F004, 2),
    (0x1F0CF, 0x1F0CF, 2),
    (0x1F18E, 0x1F18E, 2),
    (0x1F191, 0x1F19A, 2),
    (0x1F200, 0x1F202, 2),
    (0x1F210, 0x1F23B, 2),
    (0x1F240, 0x1F248, 2),
    (0x1F250, 0x1F251, 2),
    (0x1F300, 0x1F320, 2),  # emoji
    (0x1F32D, 0x1F335, 2),
    (0x1F337, 0x1F37C, 2),
    (0x1F37E, 0x1F393, 2),
    (0x1F3A0, 0x1F3CA, 2),
    (0x1F3CF, 0x1F3D3, 2),
    (0x1F3E0, 0x1F3F0, 2),
    (0x1F3F4, 0x1F3F4, 2),
    (0x1F3F8, 0x1F43E, 2),
    (0x1F440, 0x1F440, 2),
    (0x1F442, 0x1F4FC, 2),
    (0x1F4FF, 0x1F53D, 2),
    (0x1F54B, 0x1F54E, 2),
    (0x1F550, 0x1F567, 2),
    (0x1F57A, 0x1F57A, 2),
    (0x1F595, 0x1F596, 2),
    (0x1F5A4, 0x1F5A4, 2),
    (0x1F5FB, 0x1F64F, 2),
    (0x1F680, 0x1F6C5, 2),
    (0x1F6CC, 0x1F6CC, 2),
    (0x1F6D0, 0x1F6D2, 2),
    (0x1F6D5, 0x1F6D7, 2),
    (0x1F6EB, 0x1F6EC, 2),
    (0x1F6F4, 0x1F6FC, 2),
    (0x1F7E0, 0x1F7EB, 2),
    (0x1F90C, 0x1F93A, 2),
    (0x1F93C, 0x1F945, 2),
    (0x1F947, 0x1F9FF, 2),
    (0x1FA70, 0x1FAFF, 2),
    (0x20000, 0x2FFFD, 2),  # CJK extensions B-F
    (0x30000, 0x3FFFD, 2),  # CJK extension G
    (0xE0001, 0xE0001, 0),  # language tag
    (0xE0020, 0xE007F, 0),  # tag characters
    (0xE0100, 0xE01EF, 0),  # variation selectors supplement
)

_RANGE_STARTS: tuple[int, ...] = tuple(start for start, _, _ in CELL_WIDTHS)


@lru_cache(maxsize=4096)
def get_character_width(char: str) -> int:
    """Get the number of cells a single character occupies (0, 1 or 2)."""
    codepoint = ord(char)
    index = bisect_right(_RANGE_STARTS, codepoint) - 1
    if index >= 0:
        _, end, width = CELL_WIDTHS[index]
        if codepoint <= end:
            return width
    return 1


def cell_len(text: str) -> int:
    """Get the number of cells required to display text."""
    if text.isascii() and text.isprintable():
        return len(text)
    return sum(get_character_width(char) for char in text)


def truncate_cells(text: str, max_cells: int) -> tuple[str, int]:
    """
    Take the longest prefix of text that fits in max_cells.

    A wide character that would only half fit is left out rather than
    split, so the consumed width may be one less than max_cells.
    Zero-width characters that follow the last included character are
    kept with it.

    Returns:
        Tuple of (prefix, cells consumed by prefix)
    """
    if max_cells <= 0:
        return "", 0

    total = 0
    for index, char in enumerate(text):
        width = get_character_width(char)
        if total + width > max_cells:
            return text[:index], total
        total += width
    return text, total


def set_cell_size(text: str, total: int) -> str:
    """Crop or pad text so it occupies exactly total cells."""
    if total <= 0:
        return ""
    prefix, used = truncate_cells(text, total)
    return prefix + " " * (total - used)
