"""Pager bootstrap tests: printing fallback and interactive loop wiring."""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from mess.document import RawDocument
from mess.render.theme import OCEAN_THEME, PLAIN_THEME
from mess.runtime import app
from mess.runtime.config import CONFIG_ENV_VAR
from mess.runtime.view_mode import ViewMode


class _FakeStdout(io.StringIO):
    def __init__(self, tty: bool) -> None:
        super().__init__()
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty

    def fileno(self) -> int:
        return 1


class RunPagerTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        env = {key: value for key, value in os.environ.items() if key != "NO_COLOR"}
        env[CONFIG_ENV_VAR] = str(Path(tmp.name) / "config.json")
        for patcher in (
            mock.patch.dict(os.environ, env, clear=True),
            mock.patch("mess.runtime.app.TerminalController.size", return_value=(80, 24)),
        ):
            patcher.start()
            self.addCleanup(patcher.stop)
        self.document = RawDocument.from_text("# Title\n*x*\n", is_markdown=True, path=Path("doc.md"))

    def test_nopager_prints_rendered_document(self) -> None:
        stdout = _FakeStdout(tty=False)
        with mock.patch("sys.stdout", stdout), mock.patch("mess.runtime.app.run_main_loop") as loop:
            app.run_pager(self.document, nopager=True)
        loop.assert_not_called()
        self.assertEqual(stdout.getvalue(), "Title\nx\n")

    def test_non_tty_stdout_prints_requested_view(self) -> None:
        stdout = _FakeStdout(tty=False)
        stdin = mock.Mock()
        stdin.isatty.return_value = True
        with mock.patch("sys.stdout", stdout), mock.patch("sys.stdin", stdin):
            app.run_pager(self.document, initial_mode=ViewMode.SOURCE)
        self.assertEqual(stdout.getvalue(), "# Title\n*x*\n")

    def test_interactive_session_starts_main_loop(self) -> None:
        stdout = _FakeStdout(tty=True)
        stdin = mock.Mock()
        stdin.isatty.return_value = True
        stdin.fileno.return_value = 0
        with (
            mock.patch("sys.stdout", stdout),
            mock.patch("sys.stdin", stdin),
            mock.patch("mess.runtime.app.TerminalController") as terminal_cls,
            mock.patch("mess.runtime.app.run_main_loop") as loop,
        ):
            terminal_cls.size.return_value = (80, 24)
            app.run_pager(self.document, theme_name="ocean", initial_mode=ViewMode.SIDE_BY_SIDE)

        terminal_cls.assert_called_once_with(0, 1)
        loop.assert_called_once()
        session, terminal, stdin_fd, _registry, options = loop.call_args.args
        self.assertIs(terminal, terminal_cls.return_value)
        self.assertEqual(stdin_fd, 0)
        self.assertIs(session.mode, ViewMode.SIDE_BY_SIDE)
        self.assertEqual(session.viewport_height, 22)
        self.assertEqual(options.title, "doc.md")
        self.assertIs(options.theme, OCEAN_THEME)
        self.assertEqual(stdout.getvalue(), "")

    def test_no_color_env_selects_plain_theme(self) -> None:
        stdout = _FakeStdout(tty=True)
        stdin = mock.Mock()
        stdin.isatty.return_value = True
        stdin.fileno.return_value = 0
        with (
            mock.patch.dict(os.environ, {"NO_COLOR": "1"}),
            mock.patch("sys.stdout", stdout),
            mock.patch("sys.stdin", stdin),
            mock.patch("mess.runtime.app.TerminalController") as terminal_cls,
            mock.patch("mess.runtime.app.run_main_loop") as loop,
        ):
            terminal_cls.size.return_value = (80, 24)
            app.run_pager(self.document)

        options = loop.call_args.args[4]
        self.assertIs(options.theme, PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
