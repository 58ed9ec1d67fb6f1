"""Runtime composition layer for mess.

Builds the session from a loaded document, resolves presentation settings,
and either prints the document or starts the interactive loop.
"""

from __future__ import annotations

import logging
import os
import sys

from ..document import RawDocument
from ..input import default_key_registry
from ..render import content_rows_for_height, render_document_text
from ..render.theme import resolve_theme
from .config import PagerSettings, load_settings
from .loop import RuntimeLoopOptions, run_main_loop
from .session import Session
from .terminal import TerminalController
from .view_mode import ViewMode

logger = logging.getLogger(__name__)


def build_session(
    document: RawDocument,
    settings: PagerSettings,
    *,
    initial_mode: ViewMode | None = None,
    viewport_height: int = 1,
) -> Session:
    return Session(
        document,
        viewport_height,
        initial_mode=initial_mode,
        page_lines=settings.page_lines,
        side_by_side_width=settings.side_by_side_width,
    )


def print_document(session: Session, *, columns: int, no_color: bool, theme_name: str | None) -> str:
    """Return the whole document rendered in the session's current view mode."""
    theme = resolve_theme(theme_name, no_color=no_color)
    return render_document_text(
        session.document_frame(),
        columns=columns,
        theme=theme,
        side_by_side_width=session.side_by_side_width,
    )


def run_pager(
    document: RawDocument,
    *,
    theme_name: str | None = None,
    no_color: bool = False,
    nopager: bool = False,
    initial_mode: ViewMode | None = None,
) -> None:
    """Show ``document`` interactively, or print it when paging is not possible."""
    settings = load_settings()
    no_color = no_color or "NO_COLOR" in os.environ
    theme_name = theme_name or settings.theme
    interactive = not nopager and sys.stdin.isatty() and sys.stdout.isatty()
    columns, lines = TerminalController.size()
    session = build_session(
        document,
        settings,
        initial_mode=initial_mode,
        viewport_height=content_rows_for_height(lines),
    )

    if not interactive:
        logger.debug("printing %s without pager", document.display_name)
        sys.stdout.write(
            print_document(
                session,
                columns=columns,
                no_color=no_color or not sys.stdout.isatty(),
                theme_name=theme_name,
            )
        )
        sys.stdout.flush()
        return

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    options = RuntimeLoopOptions(
        title=document.display_name,
        theme=resolve_theme(theme_name, no_color=no_color),
        side_by_side_width=session.side_by_side_width,
    )
    logger.debug("starting pager for %s in %s mode", document.display_name, session.mode.value)
    run_main_loop(session, terminal, stdin_fd, default_key_registry(), options)
