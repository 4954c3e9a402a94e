"""Display-width measurement and clipping for unstyled text."""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two, and control characters are rendered as one replacement cell.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def printable(text: str) -> str:
    """Replace control characters (newlines in file names...) with ``?``."""
    return "".join(ch if ch.isprintable() else "?" for ch in text)


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        width = char_display_width(ch)
        if col + width > max_cols:
            break
        out.append(ch)
        col += width
    return "".join(out)


def clip_left(text: str, max_cols: int, marker: str = "…") -> str:
    """Keep the tail of ``text`` within ``max_cols``, prefixing ``marker`` when cut."""
    if display_width(text) <= max_cols:
        return text
    if max_cols <= display_width(marker):
        return clip_text(marker, max_cols)
    budget = max_cols - display_width(marker)
    tail: list[str] = []
    col = 0
    for ch in reversed(text):
        width = char_display_width(ch)
        if col + width > budget:
            break
        tail.append(ch)
        col += width
    return marker + "".join(reversed(tail))
