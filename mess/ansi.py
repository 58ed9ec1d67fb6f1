"""Display-width measurement and clipping for terminal rows.

Plain text is measured in terminal cells so that truncation and padding stay
aligned when wide characters or tabs are present. Styled rows produced by the
renderer carry SGR sequences, which never count toward width.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


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


def display_width(text: str, start_col: int = 0) -> int:
    """Return the number of cells ``text`` occupies when drawn at ``start_col``."""
    col = start_col
    for ch in text:
        col += char_display_width(ch, col)
    return col - start_col


def ansi_display_width(text: str) -> int:
    """Return display width after removing ANSI escape sequences."""
    return display_width(ANSI_ESCAPE_RE.sub("", text))


def clip_text(text: str, max_cols: int, start_col: int = 0) -> str:
    """Trim plain text to at most ``max_cols`` cells drawn from ``start_col``.

    A wide character that would straddle the limit is dropped entirely.
    Tabs are kept as tabs when they fit.
    """
    if max_cols <= 0 or not text:
        return ""

    col = start_col
    limit = start_col + max_cols
    for idx, ch in enumerate(text):
        w = char_display_width(ch, col)
        if col + w > limit:
            return text[:idx]
        col += w
    return text


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
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
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1

    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip a styled line to ``width`` cells and right-pad it with spaces."""
    clipped = clip_ansi_line(text, width)
    used = ansi_display_width(clipped)
    if used >= width:
        return clipped
    return clipped + " " * (width - used)
