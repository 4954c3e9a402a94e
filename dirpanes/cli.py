"""Command-line front door for dirpanes.

Parses CLI options, reads the starting directory into every pane, runs the
interactive loop, and writes the active pane's directory for a shell wrapper
on exit.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .editor import launch_editor, open_path
from .pane import Views
from .runtime import Session, run_main_loop
from .runtime import config
from .runtime.logs import configure_logging
from .runtime.terminal import TerminalController
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _pane_count(value: str) -> int:
    """argparse type for the pane count (1..9)."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if not 1 <= parsed <= config.MAX_PANE_COUNT:
        raise argparse.ArgumentTypeError(f"value must be between 1 and {config.MAX_PANE_COUNT}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirpanes",
        description="Browse directories in several independent keyboard-driven panes.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Starting directory. Defaults to current directory.")
    parser.add_argument("--panes", type=_pane_count, default=None, help="Number of panes (default: config or 4).")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--last-dir-file",
        type=Path,
        default=None,
        help="Where to write the final directory on exit (default: user cache dir).",
    )
    parser.add_argument("--no-last-dir", action="store_true", help="Do not write the final directory on exit.")
    parser.add_argument("--log-level", default=None, help="Enable file logging at this level (e.g. debug).")
    return parser


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the browser.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. An unreadable starting directory ends the process.
    """
    args = build_parser().parse_args(argv)
    log_path = configure_logging(args.log_level)
    if log_path is not None:
        logger.info("logging to %s", log_path)

    if default_path is None:
        default_path = Path.cwd()
    start_dir = Path(args.path).expanduser() if args.path else default_path
    start_dir = start_dir.absolute()
    if not start_dir.is_dir():
        raise SystemExit(f"Not a directory: {start_dir}")

    pane_count = args.panes if args.panes is not None else config.load_pane_count()
    try:
        views = Views.open(start_dir, count=pane_count)
    except OSError as exc:
        raise SystemExit(f"Cannot read directory {start_dir}: {exc.strerror or exc}") from exc

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("dirpanes needs an interactive terminal.")

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    editor_command = config.load_editor_command()
    opener_command = config.load_opener_command()
    session = Session(
        views,
        edit_path=lambda target: launch_editor(
            target,
            terminal.disable_tui_mode,
            terminal.enable_tui_mode,
            editor_command=editor_command,
        ),
        open_target_path=lambda target: open_path(target, opener_command=opener_command),
    )
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color or "NO_COLOR" in os.environ)

    try:
        run_main_loop(session, terminal, stdin_fd, theme)
    finally:
        final_dir = session.exit_directory()
        logger.info("session ended in %s", final_dir)
        if not args.no_last_dir:
            config.save_last_directory(final_dir, args.last_dir_file)


if __name__ == "__main__":
    main()
