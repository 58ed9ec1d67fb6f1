"""Inline styling for one logical line.

Scans left to right and, at each position, takes the first construct that
matches: ``**bold**``, then ``*italic*``, then ```code```. Anything else is
plain text. An opening delimiter without a closing one on the same line turns
the rest of the line into plain text.
"""

from __future__ import annotations

from .types import BOLD, CODE, ITALIC, PLAIN, SpanStyle, StyledSpan

# Delimiter, style; order is match precedence at a given position.
INLINE_DELIMITERS: tuple[tuple[str, SpanStyle], ...] = (
    ("**", BOLD),
    ("*", ITALIC),
    ("`", CODE),
)
_SPECIAL_CHARS = frozenset(delim[0] for delim, _ in INLINE_DELIMITERS)


def _next_special(line: str, start: int) -> int:
    for idx in range(start, len(line)):
        if line[idx] in _SPECIAL_CHARS:
            return idx
    return len(line)


def style_line(
    line: str,
    *,
    in_fence: bool = False,
    plain_style: SpanStyle = PLAIN,
) -> tuple[StyledSpan, ...]:
    """Split ``line`` into styled spans.

    Joining each span's ``source_text`` reproduces ``line`` exactly. Inside a
    code fence the whole line is one verbatim code span. ``plain_style`` is
    used for unstyled runs, so header and quote bodies keep their block tag.
    """
    if not line:
        return ()
    if in_fence:
        return (StyledSpan(line, CODE),)

    spans: list[StyledSpan] = []
    pending_plain: list[str] = []

    def flush_plain() -> None:
        if pending_plain:
            spans.append(StyledSpan("".join(pending_plain), plain_style))
            pending_plain.clear()

    i = 0
    n = len(line)
    while i < n:
        for delimiter, style in INLINE_DELIMITERS:
            if not line.startswith(delimiter, i):
                continue
            body_start = i + len(delimiter)
            end = line.find(delimiter, body_start)
            if end < 0:
                # Unterminated: the remainder is plain.
                pending_plain.append(line[i:])
                i = n
                break
            flush_plain()
            spans.append(
                StyledSpan(
                    line[body_start:end],
                    style,
                    markup=line[i : end + len(delimiter)],
                )
            )
            i = end + len(delimiter)
            break
        else:
            stop = _next_special(line, i + 1)
            pending_plain.append(line[i:stop])
            i = stop

    flush_plain()
    return tuple(spans)
