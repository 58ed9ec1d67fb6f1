"""Frame composition for the pager screen.

Turns a ``VisibleFrame`` into one ANSI string: a title bar, the content rows
of one or two panes, and a status line. Writing the string to the terminal is
left to the caller.
"""

from __future__ import annotations

from ..ansi import pad_ansi_line, clip_ansi_line
from ..layout import DisplayLine, StyleKind
from ..runtime.session import SIDE_BY_SIDE_RENDERED_WIDTH, PaneView, VisibleFrame
from ..runtime.view_mode import ViewMode
from .help import render_help_page
from .theme import UITheme, resolve_theme

FOOTER_CYCLE_HINTS: dict[ViewMode, str] = {
    ViewMode.RENDERED: "TAB: Source",
    ViewMode.SOURCE: "TAB: Side-by-side",
    ViewMode.SIDE_BY_SIDE: "TAB: Rendered",
}
FOOTER_COMMON_HINT = "↑↓: Scroll | q: Quit | Ctrl+h: Help"
CHROME_ROWS = 2


def content_rows_for_height(term_lines: int) -> int:
    """Rows left for document content once the title and status bars are drawn."""
    return max(1, term_lines - CHROME_ROWS)


def scroll_percent(text_start: int, total_lines: int, visible_rows: int) -> float:
    """Compute vertical scroll position as percentage of scrollable range."""
    if total_lines <= 0:
        return 0.0
    max_start = max(0, total_lines - max(1, visible_rows))
    if max_start <= 0:
        return 0.0
    clamped_start = max(0, min(text_start, max_start))
    return (clamped_start / max_start) * 100.0


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    usable = max(1, width)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def render_display_line(line: DisplayLine, width: int, theme: UITheme, *, pad: bool = True) -> str:
    """Render one display line as ANSI text clipped to ``width`` columns."""
    if width <= 0:
        return ""
    if line.style.kind is StyleKind.RULE:
        return f"{theme.rule}{'─' * width}{theme.reset}"

    parts: list[str] = []
    for span in line.spans:
        if not span.text:
            continue
        sgr = theme.style_sgr(span.style)
        parts.append(f"{sgr}{span.text}{theme.reset}" if sgr else span.text)
    text = "".join(parts)
    row = pad_ansi_line(text, width) if pad else clip_ansi_line(text, width)
    # Clipping can drop a span's trailing reset.
    return f"{row}{theme.reset}" if "\x1b" in row else row


def pane_rows(view: PaneView, width: int, theme: UITheme, *, pad: bool = True) -> list[str]:
    """Render a pane's visible lines, filling the viewport with blank rows."""
    rows = [render_display_line(line, width, theme, pad=pad) for line in view.lines]
    filler = " " * width if pad else ""
    rows.extend(filler for _ in range(view.viewport_height - len(rows)))
    return rows


def side_by_side_widths(columns: int, rendered_width: int) -> tuple[int, int]:
    """Return ``(left, right)`` pane widths around a one-column divider."""
    left = max(1, min(rendered_width, columns - 2))
    right = max(1, columns - left - 1)
    return left, right


def content_rows(
    frame: VisibleFrame,
    columns: int,
    theme: UITheme,
    *,
    side_by_side_width: int = SIDE_BY_SIDE_RENDERED_WIDTH,
    pad: bool = True,
) -> list[str]:
    if frame.mode is ViewMode.SIDE_BY_SIDE and len(frame.panes) == 2:
        left_width, right_width = side_by_side_widths(columns, side_by_side_width)
        left = pane_rows(frame.panes[0], left_width, theme, pad=True)
        right = pane_rows(frame.panes[1], right_width, theme, pad=pad)
        divider = f"{theme.divider}│{theme.reset}"
        return [f"{left_row}{divider}{right_row}" for left_row, right_row in zip(left, right)]
    return pane_rows(frame.primary, columns, theme, pad=pad)


def status_text(view: PaneView) -> str:
    """Visible line range and scroll percentage, e.g. ``1-20/120  0%``."""
    total = view.total_lines
    if total == 0:
        return "0/0"
    first = view.offset + 1
    last = min(total, view.offset + view.viewport_height)
    percent = scroll_percent(view.offset, total, view.viewport_height)
    return f"{first}-{last}/{total} {percent:3.0f}%"


def footer_hint(mode: ViewMode, can_cycle: bool) -> str:
    if not can_cycle:
        return FOOTER_COMMON_HINT
    return f"{FOOTER_CYCLE_HINTS[mode]} | {FOOTER_COMMON_HINT}"


def compose_frame(
    frame: VisibleFrame,
    *,
    title: str,
    columns: int,
    lines: int,
    theme: UITheme,
    can_cycle: bool = True,
    side_by_side_width: int = SIDE_BY_SIDE_RENDERED_WIDTH,
) -> str:
    """Compose a full-screen ANSI frame for ``frame``."""
    if frame.help_visible:
        return render_help_page(columns, lines, theme)

    # Keep off the last column so terminals never auto-wrap.
    width = max(1, columns - 1)
    header = build_status_line(f" mess - {title}", width, f"{frame.mode.label} ")
    footer = build_status_line(f" {status_text(frame.primary)}", width, f"{footer_hint(frame.mode, can_cycle)} ")
    rows = [
        f"{theme.reverse}{theme.status}{header}{theme.reset}",
        *content_rows(frame, width, theme, side_by_side_width=side_by_side_width),
        f"{theme.reverse}{footer}{theme.reset}",
    ]
    return "\033[H\033[J" + "\r\n".join(rows[: max(1, lines)])


def render_document_text(
    frame: VisibleFrame,
    *,
    columns: int,
    theme: UITheme,
    side_by_side_width: int = SIDE_BY_SIDE_RENDERED_WIDTH,
) -> str:
    """Render a whole-document frame for non-interactive output."""
    if frame.primary.total_lines == 0:
        return ""
    rows = content_rows(frame, columns, theme, side_by_side_width=side_by_side_width, pad=False)
    return "".join(f"{row.rstrip(' ')}\n" for row in rows)


__all__ = [
    "CHROME_ROWS",
    "build_status_line",
    "compose_frame",
    "content_rows",
    "content_rows_for_height",
    "footer_hint",
    "pane_rows",
    "render_display_line",
    "render_document_text",
    "render_help_page",
    "resolve_theme",
    "scroll_percent",
    "side_by_side_widths",
    "status_text",
]
