"""Command-line front door for mess.

Parses CLI options, resolves the target path, and loads the document.
Then dispatches into the interactive pager runtime or prints a rendering.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .document import RawDocument, load_document
from .render.theme import available_theme_names, normalize_theme_name
from .runtime import run_pager
from .runtime.app import build_session, print_document
from .runtime.config import load_settings, save_theme
from .runtime.view_mode import ViewMode, parse_view_mode

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _view_mode(value: str) -> ViewMode:
    """argparse type for ``--view`` names."""
    mode = parse_view_mode(value)
    if mode is None:
        choices = ", ".join(m.value for m in ViewMode)
        raise argparse.ArgumentTypeError(f"unknown view {value!r} (choose from {choices})")
    return mode


def _default_render_width() -> int:
    """Resolve default render width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def configure_logging(log_file: str | None) -> None:
    """Send debug logs to ``log_file``; the terminal itself is never logged to."""
    if not log_file:
        return
    logging.basicConfig(filename=log_file, level=logging.DEBUG, format=LOG_FORMAT)


def _load_existing_file(raw_path: str) -> RawDocument:
    path = Path(raw_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if path.is_dir():
        raise SystemExit(f"Not a file: {path}")
    try:
        return load_document(path)
    except OSError as exc:
        raise SystemExit(f"Failed to read file '{path}': {exc}") from exc


def render_view(
    document: RawDocument,
    mode: ViewMode | None,
    theme: str | None,
    no_color: bool,
    max_cols: int,
) -> str:
    """Render the whole document in ``mode`` as it would appear in the pager."""
    session = build_session(document, load_settings(), initial_mode=mode)
    return print_document(session, columns=max_cols, no_color=no_color, theme_name=theme)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mess",
        description="A less-like viewer with markdown support.",
    )
    parser.add_argument("path", nargs="?", default=None, help="File to view.")
    parser.add_argument(
        "--view",
        type=_view_mode,
        default=None,
        help="Initial view for markdown files (rendered, source, side-by-side).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--save-theme", action="store_true", help="Remember --theme as the default.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--nopager", action="store_true", help="Print output directly without interactive paging.")
    parser.add_argument("--render", metavar="PATH", help="Render the view for PATH and exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch mess on a file."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file)

    if args.save_theme:
        if args.theme is None:
            raise SystemExit("--save-theme requires --theme.")
        save_theme(normalize_theme_name(args.theme))

    if args.render is not None:
        if args.path is not None:
            raise SystemExit("Cannot combine positional path with --render.")
        document = _load_existing_file(args.render)
        max_cols = args.max_cols if args.max_cols is not None else _default_render_width()
        sys.stdout.write(render_view(document, args.view, args.theme, args.no_color, max_cols))
        return

    if args.path is None:
        if args.save_theme:
            return
        parser.error("the following arguments are required: path")

    document = _load_existing_file(args.path)
    run_pager(
        document,
        theme_name=args.theme,
        no_color=args.no_color,
        nopager=args.nopager,
        initial_mode=args.view,
    )


if __name__ == "__main__":
    main()
