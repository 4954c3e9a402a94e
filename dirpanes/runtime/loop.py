"""Main interactive event loop: render, block for one key, dispatch.

There are no timers or background work; the loop sleeps inside ``read_key``
until input arrives and stops once the session asks to quit or stdin closes.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable

from ..input import read_key
from ..render import render_frame, viewport_height_for_rows
from ..ui_theme import UITheme
from .session import Session
from .terminal import TerminalController


def _terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


def run_main_loop(
    session: Session,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
    *,
    read: Callable[[int], str] = read_key,
    draw: Callable[..., None] = render_frame,
    terminal_size: Callable[[], tuple[int, int]] = _terminal_size,
) -> None:
    """Run until a quit action or end of input."""
    with terminal.raw_mode():
        while not session.quit_requested:
            columns, rows = terminal_size()
            session.set_viewport_height(viewport_height_for_rows(rows))
            draw(session, columns, rows, theme)
            key = read(stdin_fd)
            if key == "":
                break
            session.handle_key(key)


__all__ = ["run_main_loop"]
