"""Public runtime entry points.

This package groups the scroll and view-mode state machine, the session
aggregate, and the interactive pager bootstrap (`run_pager`).
"""

from __future__ import annotations

from .scroll import DEFAULT_PAGE_LINES, ScrollDirection, ScrollState, max_scroll_offset
from .session import Action, PaneView, Session, VisibleFrame
from .view_mode import Pane, ViewMode, next_view_mode


def run_pager(*args, **kwargs):
    """Lazily import pager entrypoint to avoid terminal bootstrap on import."""
    from .app import run_pager as _run_pager

    return _run_pager(*args, **kwargs)


__all__ = [
    "Action",
    "DEFAULT_PAGE_LINES",
    "Pane",
    "PaneView",
    "ScrollDirection",
    "ScrollState",
    "Session",
    "ViewMode",
    "VisibleFrame",
    "max_scroll_offset",
    "next_view_mode",
    "run_pager",
]
