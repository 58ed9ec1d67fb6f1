"""Source layout: one plain display line per logical line, verbatim."""

from __future__ import annotations

from collections.abc import Sequence

from .types import PLAIN, DisplayLine, LayoutResult, StyledSpan


def layout_source(lines: Sequence[str]) -> LayoutResult:
    return LayoutResult(
        tuple(
            DisplayLine((StyledSpan(raw, PLAIN),), (index, index))
            for index, raw in enumerate(lines)
        )
    )
