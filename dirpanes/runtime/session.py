"""Interactive session: pane set, mode controller, status line and exit hook.

Key tokens enter through ``handle_key``. Navigation that cannot happen
(entering a file, no target) is ignored; filesystem errors leave the pane
untouched and show up in the status line.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..editor import launch_editor, open_path
from ..errors import NavigationError
from ..input.key_normal import NormalKeyContext, NormalKeyHandler
from ..input.modes import ModeController
from ..pane import Pane, Views
from .commands import CommandContext, CommandError, build_command_table

logger = logging.getLogger(__name__)

PathAction = Callable[[Path], str | None]


class Session:
    """Owns the pane set and routes keystrokes through the mode controller."""

    def __init__(
        self,
        views: Views,
        *,
        edit_path: PathAction | None = None,
        open_target_path: PathAction | None = None,
    ) -> None:
        self.views = views
        self.status_message = ""
        self.quit_requested = False
        self._edit_path = edit_path if edit_path is not None else launch_editor
        self._open_path = open_target_path if open_target_path is not None else open_path
        self.normal_keys = NormalKeyHandler(
            NormalKeyContext(
                cursor_up=lambda amount: self._guard(lambda: self.active.cursor_up(amount)),
                cursor_down=lambda amount: self._guard(lambda: self.active.cursor_down(amount)),
                half_page=self.half_page,
                enter_target=lambda: self._guard(self.active.enter_child),
                leave_to_parent=lambda: self._guard(self.active.leave_to_parent),
                toggle_hidden=lambda: self._guard(self.active.toggle_hidden),
                toggle_mark=self.toggle_mark,
                switch_pane=lambda index: self._guard(lambda: self.views.switch_to(index)),
                next_pane=lambda: self._guard(self.views.next),
                previous_pane=lambda: self._guard(self.views.previous),
                edit_target=self.edit_target,
                open_target=self.open_target,
                request_quit=self.request_quit,
            )
        )
        self.commands = build_command_table(
            CommandContext(
                change_dir=lambda path: self.active.change_dir(path),
                switch_pane=self.views.switch_to,
                toggle_hidden=lambda: self.active.toggle_hidden(),
                toggle_mark=self.toggle_mark,
                clear_marks=lambda: self.active.clear_marks(),
                edit_target=self.edit_target,
                open_target=self.open_target,
                request_quit=self.request_quit,
            )
        )
        self.mode = ModeController(self.handle_normal_key, self.execute_command)

    @property
    def active(self) -> Pane:
        return self.views.active

    def half_page(self) -> int:
        return max(1, (self.active.viewport_height + 1) // 2)

    def set_viewport_height(self, height: int) -> None:
        self.views.set_viewport_height(height)

    def exit_directory(self) -> Path:
        """Directory of the active pane, for persisting on shutdown."""
        return self.active.current_dir

    # Dispatch

    def handle_key(self, key: str) -> None:
        self.mode.handle_key(key)

    def handle_normal_key(self, key: str) -> bool:
        if key != "":
            self.status_message = ""
        return self.normal_keys.handle(key)

    def _guard(self, action: Callable[[], object]) -> None:
        try:
            action()
        except NavigationError as exc:
            logger.debug("ignored navigation request: %s", exc)
        except OSError as exc:
            logger.warning("filesystem error in %s: %s", self.active.current_dir, exc)
            self.status_message = _describe_os_error(exc)

    def execute_command(self, text: str) -> None:
        logger.debug("executing command %r", text)
        try:
            self.commands.run(text)
        except CommandError as exc:
            self.status_message = str(exc)
        except NavigationError as exc:
            self.status_message = str(exc)
        except OSError as exc:
            logger.warning("command %r failed: %s", text, exc)
            self.status_message = _describe_os_error(exc)

    # Actions

    def request_quit(self) -> None:
        self.quit_requested = True

    def toggle_mark(self) -> None:
        marked = self.active.toggle_mark()
        if marked is None:
            logger.debug("no target to mark in %s", self.active.current_dir)

    def edit_target(self) -> None:
        target = self.active.target_path()
        if target is None:
            return
        error = self._edit_path(target)
        if error:
            self.status_message = error
        self._guard(self.active.refresh)

    def open_target(self) -> None:
        target = self.active.target_path()
        if target is None:
            return
        error = self._open_path(target)
        if error:
            self.status_message = error


def _describe_os_error(exc: OSError) -> str:
    reason = exc.strerror or exc.__class__.__name__
    if exc.filename is not None:
        return f"{reason}: {exc.filename}"
    return reason


__all__ = [
    "PathAction",
    "Session",
]
