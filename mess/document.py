"""Document loading, sanitization, and markdown detection.

Files are decoded with a small encoding fallback chain, terminal control bytes
are neutralized, and the text is split into immutable logical lines.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from pygments.lexers import find_lexer_class_for_filename

logger = logging.getLogger(__name__)

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
MARKDOWN_LEXER_NAME = "Markdown"


def read_text(path: Path) -> str:
    """Decode ``path`` as UTF-8 (dropping a BOM), falling back to latin-1."""
    data = path.read_bytes()
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.debug("%s is not valid UTF-8, decoding as latin-1", path)
        return data.decode("latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def split_logical_lines(text: str) -> tuple[str, ...]:
    """Split on CRLF, CR, or LF; a trailing terminator adds no empty line."""
    if not text:
        return ()
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = normalized.split("\n")
    if normalized.endswith("\n"):
        lines.pop()
    return tuple(lines)


def is_markdown_path(path: Path) -> bool:
    """Return whether ``path`` names a markdown file, judged by its name only."""
    lexer_cls = find_lexer_class_for_filename(path.name.lower())
    return lexer_cls is not None and lexer_cls.name == MARKDOWN_LEXER_NAME


@dataclass(frozen=True)
class RawDocument:
    """Immutable logical lines of one loaded file."""

    lines: tuple[str, ...]
    is_markdown: bool = False
    path: Path | None = None

    @classmethod
    def from_text(cls, text: str, *, is_markdown: bool = False, path: Path | None = None) -> RawDocument:
        return cls(split_logical_lines(sanitize_terminal_text(text)), is_markdown, path)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def display_name(self) -> str:
        return self.path.name if self.path is not None else "<stdin>"


def load_document(path: Path) -> RawDocument:
    """Read ``path`` and classify it as markdown by file name."""
    text = read_text(path)
    is_markdown = is_markdown_path(path)
    logger.debug("loaded %s (%d chars, markdown=%s)", path, len(text), is_markdown)
    return RawDocument.from_text(text, is_markdown=is_markdown, path=path)
