"""View modes, their cyclic order, and the rendered-layout capability guard."""

from __future__ import annotations

from enum import Enum


class Pane(Enum):
    """One scrollable column of the screen."""

    RENDERED = "rendered"
    SOURCE = "source"


class ViewMode(Enum):
    RENDERED = "rendered"
    SOURCE = "source"
    SIDE_BY_SIDE = "side-by-side"

    @property
    def successor(self) -> ViewMode:
        return _SUCCESSORS[self]

    @property
    def panes(self) -> tuple[Pane, ...]:
        """Panes shown in this mode; the first one drives single-pane scrolling."""
        return _PANES[self]

    @property
    def needs_rendered_layout(self) -> bool:
        return Pane.RENDERED in self.panes

    @property
    def label(self) -> str:
        return _LABELS[self]


_SUCCESSORS: dict[ViewMode, ViewMode] = {
    ViewMode.RENDERED: ViewMode.SOURCE,
    ViewMode.SOURCE: ViewMode.SIDE_BY_SIDE,
    ViewMode.SIDE_BY_SIDE: ViewMode.RENDERED,
}

_PANES: dict[ViewMode, tuple[Pane, ...]] = {
    ViewMode.RENDERED: (Pane.RENDERED,),
    ViewMode.SOURCE: (Pane.SOURCE,),
    ViewMode.SIDE_BY_SIDE: (Pane.RENDERED, Pane.SOURCE),
}

_LABELS: dict[ViewMode, str] = {
    ViewMode.RENDERED: "RENDERED VIEW",
    ViewMode.SOURCE: "SOURCE VIEW",
    ViewMode.SIDE_BY_SIDE: "SIDE-BY-SIDE VIEW",
}


def next_view_mode(mode: ViewMode, *, has_rendered_layout: bool) -> ViewMode:
    """Return the mode after ``mode``; documents without a rendered layout stay in Source."""
    if not has_rendered_layout:
        return ViewMode.SOURCE
    return mode.successor


def initial_view_mode(*, has_rendered_layout: bool, requested: ViewMode | None = None) -> ViewMode:
    """Markdown starts Rendered unless another mode is requested; everything else is Source."""
    if not has_rendered_layout:
        return ViewMode.SOURCE
    return requested if requested is not None else ViewMode.RENDERED


def parse_view_mode(name: str | None) -> ViewMode | None:
    """Map a user-facing mode name (``rendered``, ``source``, ``side-by-side``) to a mode."""
    if not name:
        return None
    candidate = name.strip().lower().replace("_", "-")
    if candidate in {"sbs", "side"}:
        candidate = ViewMode.SIDE_BY_SIDE.value
    for mode in ViewMode:
        if mode.value == candidate:
            return mode
    return None
