"""Static help screen content and full-screen help modal rendering.

Rendering helpers here are presentation-only and side-effect free: they
return the frame text and leave writing it to the caller.
"""

from __future__ import annotations

from ..ansi import clip_ansi_line
from .theme import UITheme

HELP_TITLE = "mess help"
HELP_SUBTITLE = "A less-like viewer with markdown support"

# (keys, description); ``None`` keys start a section heading.
HELP_ENTRIES: tuple[tuple[str | None, str], ...] = (
    (None, "Keyboard Shortcuts"),
    ("Tab", "cycle view (rendered / source / side-by-side)"),
    ("Up/Down  k/j", "scroll one line"),
    ("PgUp/PgDn  b/Space", "scroll one page"),
    ("Home/End  g/G", "go to beginning / end of file"),
    ("Ctrl+h  ?", "show this help"),
    ("q/Esc", "quit"),
    (None, "View Modes (markdown files)"),
    ("Rendered", "styled headers, emphasis, lists, quotes, code"),
    ("Source", "raw markdown source"),
    ("Side-by-side", "rendered and source, scrolled together"),
)


def help_lines(theme: UITheme) -> list[str]:
    """Return styled help body rows."""
    lines = [f"{theme.help_dim}{HELP_SUBTITLE}{theme.reset}", ""]
    for keys, description in HELP_ENTRIES:
        if keys is None:
            if len(lines) > 2:
                lines.append("")
            lines.append(f"{theme.help_heading}{description}{theme.reset}")
            continue
        lines.append(f"  {theme.help_key}{keys:<20}{theme.reset} {description}")
    lines.append("")
    lines.append(f"{theme.help_dim}Press any key to continue...{theme.reset}")
    return lines


def render_help_page(width: int, height: int, theme: UITheme) -> str:
    """Compose a centered help modal over a dimmed backdrop."""
    width = max(1, width)
    height = max(1, height)
    out: list[str] = ["\033[H\033[J"]

    lines = help_lines(theme)
    modal_w = min(72, max(24, width - 4))
    modal_h = min(len(lines) + 3, max(6, height - 2))
    x = max(0, (width - modal_w) // 2)
    y = max(0, (height - modal_h) // 2)
    inner_w = max(1, modal_w - 2)
    inner_h = max(1, modal_h - 2)
    border = theme.help_modal_border

    for row in range(height):
        out.append(f"\033[{row + 1};1H{theme.help_backdrop}")
        out.append(" " * max(1, width - 1))
        out.append(theme.reset)

    out.append(f"\033[{y + 1};{x + 1}H{border}╭")
    out.append("─" * inner_w)
    out.append(f"╮{theme.reset}")
    for i in range(inner_h):
        out.append(f"\033[{y + 2 + i};{x + 1}H{border}│{theme.reset}")
        out.append(" " * inner_w)
        out.append(f"{border}│{theme.reset}")
    out.append(f"\033[{y + modal_h};{x + 1}H{border}╰")
    out.append("─" * inner_w)
    out.append(f"╯{theme.reset}")

    title_x = x + max(2, (modal_w - 2 - len(HELP_TITLE)) // 2)
    out.append(f"\033[{y + 1};{title_x + 1}H")
    out.append(f"{theme.help_modal_title}{HELP_TITLE}{theme.reset}")

    body_rows = min(len(lines), inner_h - 1)
    for i in range(body_rows):
        out.append(f"\033[{y + 2 + i};{x + 3}H")
        out.append(clip_ansi_line(lines[i], inner_w - 2))
        out.append(theme.reset)

    return "".join(out)
