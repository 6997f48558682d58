"""ANSI-aware text measurement.

Item lines carry color codes under the colorful theme, so widths are measured
on the visible characters only.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def strip_ansi(text: str) -> str:
    """Remove CSI escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies on one row."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def line_widths(texts: list[str]) -> list[int]:
    """Return display widths of every physical line in ``texts``.

    Multi-line texts contribute one width per embedded line.
    """
    widths: list[int] = []
    for text in texts:
        for line in text.split("\n"):
            widths.append(display_width(line))
    return widths


__all__ = [
    "ANSI_ESCAPE_RE",
    "TAB_STOP",
    "strip_ansi",
    "char_display_width",
    "display_width",
    "line_widths",
]
