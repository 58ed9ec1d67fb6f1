"""Document loading tests: line splitting, sanitization, and markdown detection."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from mess.document import (
    RawDocument,
    is_markdown_path,
    load_document,
    read_text,
    sanitize_terminal_text,
    split_logical_lines,
)


class SplitLinesTests(unittest.TestCase):
    def test_line_terminators(self) -> None:
        self.assertEqual(split_logical_lines("a\r\nb\rc\nd"), ("a", "b", "c", "d"))

    def test_trailing_terminator_adds_no_line(self) -> None:
        self.assertEqual(split_logical_lines("a\nb\n"), ("a", "b"))
        self.assertEqual(split_logical_lines("a\n\n"), ("a", ""))
        self.assertEqual(split_logical_lines("\n"), ("",))

    def test_empty_text_has_no_lines(self) -> None:
        self.assertEqual(split_logical_lines(""), ())
        self.assertEqual(RawDocument.from_text("").line_count, 0)


class SanitizeTests(unittest.TestCase):
    def test_control_bytes_are_escaped(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\x1b[2Jb\x07"), "a\\x1b[2Jb\\x07")

    def test_whitespace_controls_are_kept(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\tb\n"), "a\tb\n")


class MarkdownDetectionTests(unittest.TestCase):
    def test_suffixes(self) -> None:
        self.assertTrue(is_markdown_path(Path("README.md")))
        self.assertTrue(is_markdown_path(Path("notes.MARKDOWN")))
        self.assertFalse(is_markdown_path(Path("main.py")))
        self.assertFalse(is_markdown_path(Path("Makefile")))

    def test_detection_is_driven_by_the_lexer_lookup(self) -> None:
        markdown_lexer = mock.Mock()
        markdown_lexer.name = "Markdown"
        with mock.patch("mess.document.find_lexer_class_for_filename", return_value=None) as lookup:
            self.assertFalse(is_markdown_path(Path("README.MD")))
        lookup.assert_called_once_with("readme.md")
        with mock.patch("mess.document.find_lexer_class_for_filename", return_value=markdown_lexer):
            self.assertTrue(is_markdown_path(Path("notes.txt")))


class LoadDocumentTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)

    def test_load_markdown_file(self) -> None:
        path = self.root / "doc.md"
        path.write_text("# Title\r\nbody\r\n", encoding="utf-8")
        doc = load_document(path)
        self.assertEqual(doc.lines, ("# Title", "body"))
        self.assertTrue(doc.is_markdown)
        self.assertEqual(doc.display_name, "doc.md")

    def test_load_plain_file(self) -> None:
        path = self.root / "notes.txt"
        path.write_text("**not styled**\n", encoding="utf-8")
        doc = load_document(path)
        self.assertFalse(doc.is_markdown)
        self.assertEqual(doc.line_count, 1)

    def test_bom_is_dropped_and_latin1_falls_back(self) -> None:
        bom = self.root / "bom.txt"
        bom.write_bytes(b"\xef\xbb\xbfhello\n")
        self.assertEqual(read_text(bom), "hello\n")

        latin = self.root / "latin.txt"
        latin.write_bytes(b"caf\xe9\n")
        self.assertEqual(read_text(latin), "café\n")

    def test_stdin_display_name(self) -> None:
        self.assertEqual(RawDocument.from_text("x").display_name, "<stdin>")


if __name__ == "__main__":
    unittest.main()
