"""Data model shared by the layout engines and the presenter.

A layout turns logical source lines into display lines: ordered styled spans
plus the inclusive range of logical lines each row derives from.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import Enum

from ..ansi import clip_text, display_width


class StyleKind(Enum):
    """Presentation tag carried by spans and display lines."""

    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    HEADER = "header"
    CODE = "code"
    QUOTE = "quote"
    RULE = "rule"


@dataclass(frozen=True)
class SpanStyle:
    """Style tag; ``level`` is only meaningful for headers (1-3)."""

    kind: StyleKind
    level: int = 0

    @classmethod
    def header(cls, level: int) -> SpanStyle:
        return cls(StyleKind.HEADER, max(1, min(3, level)))

    @property
    def is_plain(self) -> bool:
        return self.kind is StyleKind.PLAIN


PLAIN = SpanStyle(StyleKind.PLAIN)
BOLD = SpanStyle(StyleKind.BOLD)
ITALIC = SpanStyle(StyleKind.ITALIC)
CODE = SpanStyle(StyleKind.CODE)
QUOTE = SpanStyle(StyleKind.QUOTE)
RULE = SpanStyle(StyleKind.RULE)


@dataclass(frozen=True)
class StyledSpan:
    """One contiguous run of displayed text.

    ``markup`` holds the raw characters the span was produced from, including
    any delimiters that ``text`` drops. It defaults to ``text``.
    """

    text: str
    style: SpanStyle = PLAIN
    markup: str | None = None

    @property
    def source_text(self) -> str:
        return self.text if self.markup is None else self.markup


@dataclass(frozen=True)
class DisplayLine:
    """One terminal row worth of styled spans."""

    spans: tuple[StyledSpan, ...]
    source_range: tuple[int, int]
    style: SpanStyle = PLAIN

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)

    @property
    def markup(self) -> str:
        return "".join(span.source_text for span in self.spans)

    @property
    def display_width(self) -> int:
        return display_width(self.text)

    @property
    def first_source_line(self) -> int:
        return self.source_range[0]


def truncate_line(line: DisplayLine, width: int) -> DisplayLine:
    """Clip ``line`` to at most ``width`` display columns.

    Style and ``source_range`` are preserved; spans past the limit are dropped
    and the span crossing it is shortened. Wide characters are never split.
    """
    width = max(0, width)
    if line.display_width <= width:
        return line

    kept: list[StyledSpan] = []
    col = 0
    for span in line.spans:
        if col >= width:
            break
        clipped = clip_text(span.text, width - col, start_col=col)
        if clipped != span.text:
            if clipped:
                kept.append(StyledSpan(clipped, span.style))
            break
        kept.append(span)
        col += display_width(span.text, col)
    return replace(line, spans=tuple(kept))


@dataclass(frozen=True)
class LayoutResult:
    """Immutable, ordered display lines for one view of a document."""

    lines: tuple[DisplayLine, ...]

    @property
    def total_lines(self) -> int:
        return len(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> DisplayLine:
        return self.lines[index]

    def __iter__(self) -> Iterator[DisplayLine]:
        return iter(self.lines)

    def window(self, offset: int, height: int) -> tuple[DisplayLine, ...]:
        """Return the visible slice starting at ``offset`` of at most ``height`` rows."""
        start = max(0, offset)
        return self.lines[start : start + max(0, height)]
