"""Display-width helpers for fixed-width grid cells.

File names can hold wide characters, combining marks, and control bytes.
These helpers measure and shape names in terminal cells so grid columns align.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TRUNCATION_MARK = "~"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one printable character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies, ignoring ANSI codes."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def sanitize_name(name: str) -> str:
    """Replace control characters so a file name cannot emit terminal codes."""
    return "".join("?" if unicodedata.category(ch) == "Cc" else ch for ch in name)


def fit_to_width(text: str, width: int) -> str:
    """Truncate or pad ``text`` to exactly ``width`` display columns.

    Truncated text ends with ``TRUNCATION_MARK``. A wide character that would
    straddle the boundary is dropped and the gap is padded with spaces.
    """
    if width <= 0:
        return ""
    text = sanitize_name(text)
    if display_width(text) <= width:
        return text + " " * (width - display_width(text))

    limit = width - len(TRUNCATION_MARK)
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > limit:
            break
        out.append(ch)
        col += w
    clipped = "".join(out) + TRUNCATION_MARK[: max(0, width - col)]
    return clipped + " " * (width - display_width(clipped))


__all__ = [
    "ANSI_ESCAPE_RE",
    "TRUNCATION_MARK",
    "char_display_width",
    "display_width",
    "strip_ansi",
    "sanitize_name",
    "fit_to_width",
]
