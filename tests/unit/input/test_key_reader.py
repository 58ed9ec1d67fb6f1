"""Key decoding and key-binding resolution tests.

Bytes are written to a pipe and decoded through ``read_key`` exactly as they
would arrive from a raw-mode terminal.
"""

from __future__ import annotations

import os
import unittest

from mess.input import reader
from mess.input.key_registry import KeyComboBinding, KeyComboRegistry
from mess.input.keys import default_key_registry
from mess.input.reader import read_key
from mess.runtime.session import Action


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.read_fd, self.write_fd = os.pipe()
        self.addCleanup(os.close, self.read_fd)
        self.addCleanup(os.close, self.write_fd)
        reader._PENDING_BYTES.clear()
        self.addCleanup(reader._PENDING_BYTES.clear)

    def _keys(self, data: bytes, count: int) -> list[str]:
        os.write(self.write_fd, data)
        return [read_key(self.read_fd, timeout_ms=50) for _ in range(count)]

    def test_plain_and_control_keys(self) -> None:
        self.assertEqual(self._keys(b"q\t\x08\x7f\r", 5), ["q", "TAB", "CTRL_H", "BACKSPACE", "ENTER_CR"])

    def test_arrow_and_navigation_sequences(self) -> None:
        data = b"\x1b[A\x1b[B\x1bOA\x1b[5~\x1b[6~\x1b[H\x1b[F\x1b[1~\x1b[4~"
        self.assertEqual(
            self._keys(data, 9),
            ["UP", "DOWN", "UP", "PAGE_UP", "PAGE_DOWN", "HOME", "END", "HOME", "END"],
        )

    def test_lone_escape_times_out_to_esc(self) -> None:
        self.assertEqual(self._keys(b"\x1b", 1), ["ESC"])

    def test_escape_followed_by_plain_byte_keeps_the_byte(self) -> None:
        self.assertEqual(self._keys(b"\x1bx", 2), ["ESC", "x"])

    def test_multibyte_utf8_character(self) -> None:
        self.assertEqual(self._keys("é".encode("utf-8"), 1), ["é"])

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(read_key(self.read_fd, timeout_ms=0), "")


class KeyRegistryTests(unittest.TestCase):
    def test_default_bindings(self) -> None:
        registry = default_key_registry()
        expected = {
            "q": Action.QUIT,
            "ESC": Action.QUIT,
            "TAB": Action.CYCLE_VIEW,
            "UP": Action.SCROLL_UP,
            "DOWN": Action.SCROLL_DOWN,
            "PAGE_UP": Action.PAGE_UP,
            "PAGE_DOWN": Action.PAGE_DOWN,
            " ": Action.PAGE_DOWN,
            "HOME": Action.HOME,
            "END": Action.END,
            "CTRL_H": Action.SHOW_HELP,
        }
        for key, action in expected.items():
            self.assertIs(registry.resolve(key), action, key)
        self.assertIsNone(registry.resolve("x"))

    def test_normalizer_is_applied_before_lookup(self) -> None:
        registry = KeyComboRegistry(normalize=str.lower)
        registry.register_binding(KeyComboBinding(("x",), Action.QUIT))
        self.assertIs(registry.resolve("X"), Action.QUIT)


if __name__ == "__main__":
    unittest.main()
