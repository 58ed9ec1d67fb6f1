"""Main interactive event loop for the terminal UI.

One blocking key read, one state transition, one redraw. Terminal resizes are
polled between key reads and applied as viewport-height changes.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..input import KeyComboRegistry, read_key
from ..render import compose_frame, content_rows_for_height
from ..render.theme import UITheme
from .session import SIDE_BY_SIDE_RENDERED_WIDTH, Session
from .terminal import TerminalController

RESIZE_POLL_MS = 200


@dataclass(frozen=True)
class RuntimeLoopOptions:
    """Presentation settings fixed for the lifetime of the loop."""

    title: str
    theme: UITheme
    side_by_side_width: int = SIDE_BY_SIDE_RENDERED_WIDTH
    resize_poll_ms: int = RESIZE_POLL_MS


def handle_key(session: Session, registry: KeyComboRegistry, key: str) -> bool:
    """Dispatch one key token and return ``True`` when the pager should quit.

    Any key dismisses the help screen; unbound keys are otherwise ignored.
    """
    if session.help_visible:
        session.dismiss_help()
        return False
    action = registry.resolve(key)
    if action is None:
        return False
    return session.dispatch(action)


def run_main_loop(
    session: Session,
    terminal: TerminalController,
    stdin_fd: int,
    registry: KeyComboRegistry,
    options: RuntimeLoopOptions,
) -> None:
    """Run the interactive loop until a quit action occurs."""
    last_size: tuple[int, int] | None = None
    dirty = True
    with terminal.raw_mode():
        while True:
            size = terminal.size()
            if size != last_size:
                last_size = size
                session.resize(content_rows_for_height(size[1]))
                dirty = True

            if dirty:
                columns, lines = size
                terminal.write(
                    compose_frame(
                        session.visible_frame(),
                        title=options.title,
                        columns=columns,
                        lines=lines,
                        theme=options.theme,
                        can_cycle=session.has_rendered_layout,
                        side_by_side_width=options.side_by_side_width,
                    )
                )
                dirty = False

            key = read_key(stdin_fd, timeout_ms=options.resize_poll_ms)
            if not key:
                continue
            if handle_key(session, registry, key):
                break
            dirty = True
