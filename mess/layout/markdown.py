"""Rendered layout for markdown documents.

Each logical line becomes exactly one display line; nothing is wrapped or
reflowed, so the rendered and source layouts always have the same length and
index ``i`` of one corresponds to index ``i`` of the other. Block structure
(open code fence, open blockquote) is carried forward through a single scan
as an explicit ``BlockState`` value.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .spans import style_line
from .types import (
    CODE,
    PLAIN,
    QUOTE,
    RULE,
    DisplayLine,
    LayoutResult,
    SpanStyle,
    StyledSpan,
)

FENCE_MARKER = "```"
HEADER_RE = re.compile(r"^(#{1,3}) (.*)$")
QUOTE_RE = re.compile(r"^> ?")
LIST_MARKER_RE = re.compile(r"^(\s*(?:[-*]|\d+\.))(?: |$)")
RULE_RE = re.compile(r"^ {0,3}([-*_])(?: *\1){2,} *$")


@dataclass(frozen=True)
class BlockState:
    """Block context left open by the previous line."""

    in_fence: bool = False
    in_quote: bool = False


def _is_opening_fence(line: str) -> bool:
    stripped = line.strip()
    return stripped.startswith(FENCE_MARKER) and "`" not in stripped[len(FENCE_MARKER) :]


def _is_closing_fence(line: str) -> bool:
    return line.strip() == FENCE_MARKER


def _marker_span(marker: str, style: SpanStyle) -> StyledSpan:
    """Zero-width span that keeps a stripped block marker in the line's markup."""
    return StyledSpan("", style, markup=marker)


def layout_line(raw: str, index: int, state: BlockState) -> tuple[DisplayLine, BlockState]:
    """Lay out one logical line and return it with the state for the next line."""
    source_range = (index, index)

    if state.in_fence:
        closing = _is_closing_fence(raw)
        line = DisplayLine(style_line(raw, in_fence=True), source_range, CODE)
        return line, BlockState(in_fence=not closing)

    if _is_opening_fence(raw):
        line = DisplayLine(style_line(raw, in_fence=True), source_range, CODE)
        return line, BlockState(in_fence=True)

    if not raw.strip():
        return DisplayLine(style_line(raw), source_range), BlockState()

    header = HEADER_RE.match(raw)
    if header is not None:
        style = SpanStyle.header(len(header.group(1)))
        marker = raw[: header.start(2)]
        spans = (_marker_span(marker, style),) + style_line(header.group(2), plain_style=style)
        return DisplayLine(spans, source_range, style), BlockState()

    if RULE_RE.match(raw):
        return DisplayLine((_marker_span(raw, RULE),), source_range, RULE), BlockState()

    quote = QUOTE_RE.match(raw)
    if quote is not None:
        marker = quote.group(0)
        spans = (_marker_span(marker, QUOTE),) + style_line(raw[quote.end() :], plain_style=QUOTE)
        return DisplayLine(spans, source_range, QUOTE), BlockState(in_quote=True)

    list_item = LIST_MARKER_RE.match(raw)
    if list_item is not None:
        marker = list_item.group(1)
        spans = (StyledSpan(marker, PLAIN),) + style_line(raw[len(marker) :])
        return DisplayLine(spans, source_range), BlockState()

    if state.in_quote:
        # Lazy continuation of the quote paragraph.
        return DisplayLine(style_line(raw, plain_style=QUOTE), source_range, QUOTE), state

    return DisplayLine(style_line(raw), source_range), BlockState()


def layout_markdown(lines: Sequence[str]) -> LayoutResult:
    """Build the rendered layout for ``lines``.

    An unterminated fence simply runs to the end of the document.
    """
    state = BlockState()
    out: list[DisplayLine] = []
    for index, raw in enumerate(lines):
        line, state = layout_line(raw, index, state)
        out.append(line)
    return LayoutResult(tuple(out))
