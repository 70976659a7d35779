"""ANSI-aware text measurement and cell fitting.

Pane renderers compose styled strings and then fit each one to an exact cell
width, so escape sequences must not count toward the width.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two, and control characters are dropped by callers.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Visible width of ``text`` in terminal cells."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        if ch in "\r\n\t" or ord(ch) < 0x20:
            ch = " "
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def fit_ansi_line(text: str, width: int, reset: str = "\033[0m") -> str:
    """Clip ``text`` to ``width`` cells and pad the rest with spaces.

    A reset sequence is appended whenever the clipped text carries styling so
    colors never bleed into the padding or the next pane.
    """
    if width <= 0:
        return ""
    clipped = clip_ansi_line(text, width)
    pad = width - display_width(clipped)
    if "\x1b" in clipped and reset:
        clipped += reset
    return clipped + " " * max(0, pad)


def sanitize_terminal_text(text: str) -> str:
    """Replace control characters (e.g. in odd file names) with ``?``."""
    return "".join("?" if (ord(ch) < 0x20 or ord(ch) == 0x7F) else ch for ch in text)
