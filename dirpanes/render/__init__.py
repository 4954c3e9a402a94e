"""ANSI frame rendering for the session.

A frame is one header row (pane tabs and the active directory), the active
pane's listing window, and one footer row (command prompt or status).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..pane import Row
from ..ui_theme import UITheme
from .text import clip_left, clip_text, display_width, printable

if TYPE_CHECKING:
    from ..runtime.session import Session

# Header row, footer row, and the inclusive listing window.
CHROME_ROWS = 3


def viewport_height_for_rows(rows: int) -> int:
    """Viewport height for a terminal ``rows`` tall (window holds height + 1 rows)."""
    return max(0, rows - CHROME_ROWS)


def format_row(row: Row, theme: UITheme, width: int) -> str:
    """Render one listing row clipped to ``width`` columns."""
    out: list[str] = []
    remaining = width
    for segment in row:
        text = clip_text(printable(segment.text), remaining)
        if not text:
            break
        out.append(f"{theme.style(segment.style)}{text}{theme.reset}")
        remaining -= display_width(text)
    return "".join(out)


def header_line(session: Session, theme: UITheme, width: int) -> str:
    views = session.views
    tabs: list[str] = []
    used = 0
    for index in range(views.count):
        label = f" {index + 1} "
        style = theme.tab_active if index == views.active_index else theme.tab_inactive
        tabs.append(f"{style}{label}{theme.reset}")
        used += len(label)
    path_width = max(0, width - used - 1)
    path = clip_left(printable(str(session.active.current_dir)), path_width)
    return "".join(tabs) + f" {theme.header_path}{path}{theme.reset}"


def footer_line(session: Session, theme: UITheme, width: int) -> str:
    command_text = session.mode.command_text
    if command_text is not None:
        prompt = clip_left(printable(session.mode.trigger_key + command_text), width)
        return f"{theme.command_prompt}{prompt}{theme.reset}"
    if session.status_message:
        return f"{theme.status}{clip_text(printable(session.status_message), width)}{theme.reset}"
    pane = session.active
    total = len(pane.directory)
    position = pane.position + 1 if pane.target() is not None else 0
    summary = f"{position}/{total}"
    if pane.marks:
        summary += f"  {len(pane.marks)} marked"
    if pane.show_hidden:
        summary += "  hidden shown"
    return f"{theme.status}{clip_text(summary, width)}{theme.reset}"


def render_frame_lines(session: Session, columns: int, rows: int, theme: UITheme) -> list[str]:
    """Compose the frame as a list of ``rows`` styled lines."""
    listing_rows = max(0, rows - 2)
    lines = [header_line(session, theme, columns)]
    listing = session.active.listing()[:listing_rows]
    lines.extend(format_row(row, theme, columns) for row in listing)
    lines.extend("" for _ in range(listing_rows - len(listing)))
    lines.append(footer_line(session, theme, columns))
    return lines[: max(1, rows)]


def _write_stdout(data: str) -> None:
    os.write(sys.stdout.fileno(), data.encode("utf-8", errors="replace"))


def render_frame(
    session: Session,
    columns: int,
    rows: int,
    theme: UITheme,
    write: Callable[[str], None] = _write_stdout,
) -> None:
    """Clear the screen and draw the full frame."""
    lines = render_frame_lines(session, columns, rows, theme)
    write("\033[H\033[J" + "\r\n".join(lines))


__all__ = [
    "CHROME_ROWS",
    "viewport_height_for_rows",
    "format_row",
    "header_line",
    "footer_line",
    "render_frame_lines",
    "render_frame",
]
