"""Pager session: the document, its layouts, scroll state, and view mode.

The session is the only mutable state of a running pager. It changes only in
response to abstract actions and resizes, and exposes the visible window(s)
for the presenter to draw.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..document import RawDocument
from ..layout import DisplayLine, LayoutResult, layout_markdown, layout_source, truncate_line
from .scroll import DEFAULT_PAGE_LINES, ScrollDirection, ScrollState
from .view_mode import Pane, ViewMode, initial_view_mode, next_view_mode

logger = logging.getLogger(__name__)

SIDE_BY_SIDE_RENDERED_WIDTH = 50


class Action(Enum):
    """Closed set of user intents, independent of physical keys."""

    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    CYCLE_VIEW = "cycle_view"
    QUIT = "quit"
    SHOW_HELP = "show_help"


@dataclass(frozen=True)
class PaneView:
    """Visible slice of one pane."""

    pane: Pane
    lines: tuple[DisplayLine, ...]
    offset: int
    total_lines: int
    viewport_height: int


@dataclass(frozen=True)
class VisibleFrame:
    """Everything the presenter needs for one redraw."""

    mode: ViewMode
    panes: tuple[PaneView, ...]
    help_visible: bool = False

    @property
    def primary(self) -> PaneView:
        return self.panes[0]


class Session:
    """Owns one document for the lifetime of the pager.

    In side-by-side mode both panes hold their own ``ScrollState`` but every
    scroll operation is applied to both in the same call, so their offsets are
    always numerically equal.
    """

    def __init__(
        self,
        document: RawDocument,
        viewport_height: int = 1,
        *,
        initial_mode: ViewMode | None = None,
        page_lines: int = DEFAULT_PAGE_LINES,
        side_by_side_width: int = SIDE_BY_SIDE_RENDERED_WIDTH,
    ) -> None:
        self.document = document
        self.source_layout: LayoutResult = layout_source(document.lines)
        self.rendered_layout: LayoutResult | None = (
            layout_markdown(document.lines) if document.is_markdown else None
        )
        self.page_lines = max(1, page_lines)
        self.side_by_side_width = max(1, side_by_side_width)
        self.viewport_height = max(1, viewport_height)
        self.help_visible = False
        self.mode = initial_view_mode(
            has_rendered_layout=self.has_rendered_layout,
            requested=initial_mode,
        )
        self.scroll_states: dict[Pane, ScrollState] = self._scroll_states_for(self.mode, offset=0)

    @property
    def has_rendered_layout(self) -> bool:
        return self.rendered_layout is not None

    def layout_for(self, pane: Pane) -> LayoutResult:
        if pane is Pane.RENDERED and self.rendered_layout is not None:
            return self.rendered_layout
        return self.source_layout

    @property
    def active_scroll(self) -> ScrollState:
        return self.scroll_states[self.mode.panes[0]]

    @property
    def offset(self) -> int:
        return self.active_scroll.offset

    def _scroll_states_for(self, mode: ViewMode, offset: int) -> dict[Pane, ScrollState]:
        return {
            pane: ScrollState(
                total_lines=self.layout_for(pane).total_lines,
                viewport_height=self.viewport_height,
                offset=offset,
            )
            for pane in mode.panes
        }

    def cycle(self) -> ViewMode:
        """Advance to the next view mode, carrying the current offset along.

        Entering side-by-side seeds both panes with the active pane's offset;
        leaving it keeps the surviving pane's own offset. Documents without a
        rendered layout never leave Source.
        """
        target = next_view_mode(self.mode, has_rendered_layout=self.has_rendered_layout)
        if target is self.mode:
            return self.mode
        surviving = self.scroll_states.get(target.panes[0], self.active_scroll)
        logger.debug("view mode %s -> %s at offset %d", self.mode.value, target.value, surviving.offset)
        self.scroll_states = self._scroll_states_for(target, offset=surviving.offset)
        self.mode = target
        return self.mode

    def _scroll_all(self, step: Callable[[ScrollState], int]) -> int:
        for state in self.scroll_states.values():
            step(state)
        return self.offset

    def scroll_by(self, delta: int) -> int:
        return self._scroll_all(lambda state: state.scroll_by(delta))

    def scroll_page(self, direction: ScrollDirection, lines_per_page: int | None = None) -> int:
        page = self.page_lines if lines_per_page is None else lines_per_page
        return self._scroll_all(lambda state: state.scroll_page(direction, page))

    def scroll_home(self) -> int:
        return self._scroll_all(ScrollState.scroll_home)

    def scroll_end(self) -> int:
        return self._scroll_all(ScrollState.scroll_end)

    def resize(self, viewport_height: int) -> None:
        """Apply a new viewport height and re-clamp every pane."""
        viewport_height = max(1, viewport_height)
        if viewport_height == self.viewport_height:
            return
        self.viewport_height = viewport_height
        before = self.offset
        self._scroll_all(lambda state: state.set_viewport_height(viewport_height))
        if self.offset != before:
            logger.debug("resize to %d rows clamped offset %d -> %d", viewport_height, before, self.offset)

    def dismiss_help(self) -> None:
        self.help_visible = False

    def dispatch(self, action: Action) -> bool:
        """Apply one action and return ``True`` when the pager should quit.

        While help is showing, any action only dismisses it.
        """
        if self.help_visible:
            self.dismiss_help()
            return False
        if action is Action.QUIT:
            return True
        if action is Action.SHOW_HELP:
            self.help_visible = True
        elif action is Action.CYCLE_VIEW:
            self.cycle()
        elif action is Action.SCROLL_UP:
            self.scroll_by(-1)
        elif action is Action.SCROLL_DOWN:
            self.scroll_by(1)
        elif action is Action.PAGE_UP:
            self.scroll_page(ScrollDirection.UP)
        elif action is Action.PAGE_DOWN:
            self.scroll_page(ScrollDirection.DOWN)
        elif action is Action.HOME:
            self.scroll_home()
        elif action is Action.END:
            self.scroll_end()
        return False

    def _pane_lines(self, pane: Pane, offset: int, height: int) -> tuple[DisplayLine, ...]:
        lines = self.layout_for(pane).window(offset, height)
        if pane is Pane.RENDERED and self.mode is ViewMode.SIDE_BY_SIDE:
            lines = tuple(truncate_line(line, self.side_by_side_width) for line in lines)
        return lines

    def pane_view(self, pane: Pane) -> PaneView:
        state = self.scroll_states[pane]
        lines = self._pane_lines(pane, state.offset, state.viewport_height)
        return PaneView(
            pane=pane,
            lines=lines,
            offset=state.offset,
            total_lines=state.total_lines,
            viewport_height=state.viewport_height,
        )

    def visible_frame(self) -> VisibleFrame:
        return VisibleFrame(
            mode=self.mode,
            panes=tuple(self.pane_view(pane) for pane in self.mode.panes),
            help_visible=self.help_visible,
        )

    def document_frame(self) -> VisibleFrame:
        """Return a frame covering the whole document in the current mode."""
        panes: list[PaneView] = []
        for pane in self.mode.panes:
            total = self.layout_for(pane).total_lines
            panes.append(
                PaneView(
                    pane=pane,
                    lines=self._pane_lines(pane, 0, total),
                    offset=0,
                    total_lines=total,
                    viewport_height=max(1, total),
                )
            )
        return VisibleFrame(mode=self.mode, panes=tuple(panes))
