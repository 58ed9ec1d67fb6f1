"""Layout engines that turn logical lines into addressable display lines.

``layout_source`` and ``layout_markdown`` both produce one display line per
logical line, which is what lets the two views scroll in lockstep.
"""

from .markdown import BlockState, layout_line, layout_markdown
from .source import layout_source
from .spans import style_line
from .types import (
    BOLD,
    CODE,
    ITALIC,
    PLAIN,
    QUOTE,
    RULE,
    DisplayLine,
    LayoutResult,
    SpanStyle,
    StyledSpan,
    StyleKind,
    truncate_line,
)

__all__ = [
    "BOLD",
    "CODE",
    "ITALIC",
    "PLAIN",
    "QUOTE",
    "RULE",
    "BlockState",
    "DisplayLine",
    "LayoutResult",
    "SpanStyle",
    "StyledSpan",
    "StyleKind",
    "layout_line",
    "layout_markdown",
    "layout_source",
    "style_line",
    "truncate_line",
]
