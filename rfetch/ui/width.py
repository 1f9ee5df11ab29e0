"""
Visible-width measurement for terminal text.

Logo lines mix box-drawing art, emoji and escape sequences; alignment
needs the number of columns a line occupies, not its length.
"""

from __future__ import annotations

import unicodedata
from typing import Iterable

ESC = "\x1b"

# Ranges measured explicitly before falling back to East Asian Width.
_NARROW_RANGES = (
    (0x2500, 0x257F),   # box drawing
    (0x2580, 0x259F),   # block elements
    (0x25A0, 0x25FF),   # geometric shapes
    (0x2700, 0x27BF),   # dingbats
)
_WIDE_RANGES = (
    (0x2600, 0x26FF),   # miscellaneous symbols
    (0x1F300, 0x1F9FF), # pictographs and emoji
)


def strip_ansi(text: str) -> str:
    """
    Remove escape sequences.

    An ESC, an optional '[', then everything up to and including the next
    ASCII letter is dropped. An unterminated sequence runs to the end.
    """
    out = []
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch != ESC:
            out.append(ch)
            i += 1
            continue
        i += 1
        if i < n and text[i] == "[":
            i += 1
        while i < n:
            c = text[i]
            i += 1
            if c.isascii() and c.isalpha():
                break
    return "".join(out)


def char_width(ch: str) -> int:
    """Terminal columns for a single character (0, 1 or 2)."""
    cp = ord(ch)
    for lo, hi in _NARROW_RANGES:
        if lo <= cp <= hi:
            return 1
    for lo, hi in _WIDE_RANGES:
        if lo <= cp <= hi:
            return 2
    if unicodedata.category(ch) in ("Mn", "Me", "Cf"):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def visual_width(text: str) -> int:
    return sum(char_width(ch) for ch in strip_ansi(text))


def max_visual_width(lines: Iterable[str]) -> int:
    return max((visual_width(line) for line in lines), default=0)
