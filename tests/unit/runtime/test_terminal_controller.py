"""Tests for terminal mode transitions.

Raw mode must always be undone, even when the loop inside it raises.
"""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from mess.runtime.terminal import TerminalController


class TerminalControllerTests(unittest.TestCase):
    def test_enable_and_disable_use_alternate_screen(self) -> None:
        saved_state = [1, 2, 3]
        with (
            mock.patch("mess.runtime.terminal.termios.tcgetattr", return_value=saved_state),
            mock.patch("mess.runtime.terminal.tty.setraw") as setraw_mock,
            mock.patch("mess.runtime.terminal.os.write") as write_mock,
            mock.patch("mess.runtime.terminal.termios.tcsetattr") as setattr_mock,
        ):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            controller.write("frame ✓")
            controller.disable_tui_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(
            [call.args for call in write_mock.call_args_list],
            [
                (1, b"\x1b[?1049h\x1b[?25l"),
                (1, "frame ✓".encode("utf-8")),
                (1, b"\x1b[?25h\x1b[?1049l"),
            ],
        )
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("mess.runtime.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with (
            mock.patch.object(controller, "enable_tui_mode") as enable_mock,
            mock.patch.object(controller, "disable_tui_mode") as disable_mock,
        ):
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_size_falls_back_to_80x24(self) -> None:
        with mock.patch("mess.runtime.terminal.shutil.get_terminal_size", return_value=mock.Mock(columns=80, lines=24)) as size:
            self.assertEqual(TerminalController.size(), (80, 24))
        size.assert_called_once_with((80, 24))


if __name__ == "__main__":
    unittest.main()
