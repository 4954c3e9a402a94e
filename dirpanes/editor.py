"""Editor and open-handler launchers for the current target path.

Both return an error message string instead of raising so the session can show
it in the status line.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)


def _noop() -> None:
    return None


def default_opener_command() -> str:
    if sys.platform == "darwin":
        return "open"
    if sys.platform.startswith("win"):
        return "explorer"
    return "xdg-open"


def launch_editor(
    target: Path,
    disable_tui_mode: Callable[[], None] = _noop,
    enable_tui_mode: Callable[[], None] = _noop,
    editor_command: str | None = None,
) -> str | None:
    """Run the editor on ``target`` in the foreground, outside TUI mode."""
    editor_env = (editor_command or os.environ.get("EDITOR", "")).strip()
    if not editor_env:
        return "Cannot edit: $EDITOR is not set."
    cmd = shlex.split(editor_env)
    if not cmd:
        return "Cannot edit: $EDITOR is empty."

    logger.info("launching editor %s on %s", cmd[0], target)
    disable_tui_mode()
    try:
        subprocess.run([*cmd, str(target)], check=False)
    except Exception as exc:
        return f"Failed to launch editor: {exc}"
    finally:
        enable_tui_mode()
    return None


def open_path(target: Path, opener_command: str | None = None) -> str | None:
    """Hand ``target`` to the platform open handler without waiting for it."""
    cmd = shlex.split(opener_command or default_opener_command())
    if not cmd:
        return "Cannot open: opener command is empty."
    logger.info("opening %s with %s", target, cmd[0])
    try:
        subprocess.Popen(
            [*cmd, str(target)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except Exception as exc:
        return f"Failed to open: {exc}"
    return None
