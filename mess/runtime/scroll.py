"""Viewport scroll state and clamped navigation primitives.

Every operation leaves ``0 <= offset <= max(0, total_lines - viewport_height)``.
Out-of-range requests clamp silently; nothing here can fail.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_PAGE_LINES = 10


class ScrollDirection(Enum):
    UP = -1
    DOWN = 1


def max_scroll_offset(total_lines: int, viewport_height: int) -> int:
    """Return the largest offset that still fills the viewport from the top."""
    return max(0, total_lines - max(1, viewport_height))


@dataclass
class ScrollState:
    """Scroll offset of one pane over a layout of ``total_lines`` rows."""

    total_lines: int = 0
    viewport_height: int = 1
    offset: int = 0

    def __post_init__(self) -> None:
        self.total_lines = max(0, self.total_lines)
        self.viewport_height = max(1, self.viewport_height)
        self.clamp()

    @property
    def max_offset(self) -> int:
        return max_scroll_offset(self.total_lines, self.viewport_height)

    @property
    def visible_range(self) -> tuple[int, int]:
        """Half-open ``(start, end)`` range of rows currently shown."""
        return self.offset, min(self.total_lines, self.offset + self.viewport_height)

    def clamp(self) -> int:
        self.offset = max(0, min(self.offset, self.max_offset))
        return self.offset

    def scroll_to(self, offset: int) -> int:
        self.offset = offset
        return self.clamp()

    def scroll_by(self, delta: int) -> int:
        return self.scroll_to(self.offset + delta)

    def scroll_page(self, direction: ScrollDirection, lines_per_page: int = DEFAULT_PAGE_LINES) -> int:
        return self.scroll_by(direction.value * max(1, lines_per_page))

    def scroll_home(self) -> int:
        return self.scroll_to(0)

    def scroll_end(self) -> int:
        return self.scroll_to(self.max_offset)

    def set_viewport_height(self, viewport_height: int) -> int:
        """Apply a terminal resize and re-clamp the offset."""
        self.viewport_height = max(1, viewport_height)
        return self.clamp()
