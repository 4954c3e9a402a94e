"""Pane state: one directory snapshot plus cursor, scroll and marks.

The cursor indexes the visible window ``directory[scroll : scroll + viewport_height + 1]``
so the absolute position of the target is ``scroll + cursor``. Directory
changes are all-or-nothing: the new listing is read before any pane state is
touched, so a failed read leaves the pane where it was.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from ..errors import NotADirectory
from ..listing import Entry, read_directory
from .memory import BufferState, DirectoryMemory
from .rows import Row, entry_row

logger = logging.getLogger(__name__)

# Scroll jump used when the cursor runs off the window, independent of the
# requested move amount.
PAGE_STEP = 10
DEFAULT_VIEWPORT_HEIGHT = 20

DirectoryReader = Callable[[Path, bool], list[Entry]]


class Pane:
    """Independent directory-browsing context."""

    def __init__(
        self,
        current_dir: Path,
        *,
        viewport_height: int = DEFAULT_VIEWPORT_HEIGHT,
        reader: DirectoryReader = read_directory,
    ) -> None:
        """Create an unread pane; call ``refresh`` (or use ``open``) to load it."""
        self.current_dir = Path(os.path.normpath(Path(current_dir).absolute()))
        self.directory: list[Entry] = []
        self.cursor = 0
        self.scroll = 0
        self.viewport_height = max(0, int(viewport_height))
        self.marks: set[Path] = set()
        self.memory = DirectoryMemory()
        self._reader = reader

    @classmethod
    def open(
        cls,
        current_dir: Path,
        *,
        viewport_height: int = DEFAULT_VIEWPORT_HEIGHT,
        reader: DirectoryReader = read_directory,
    ) -> Pane:
        """Create a pane and read its directory, propagating ``OSError``."""
        pane = cls(current_dir, viewport_height=viewport_height, reader=reader)
        pane.refresh()
        return pane

    @property
    def show_hidden(self) -> bool:
        return self.memory.show_hidden(self.current_dir)

    @property
    def position(self) -> int:
        """Absolute index of the cursor into ``directory``."""
        return self.scroll + self.cursor

    # Memory

    def save_buffer(self) -> None:
        self.memory.save(
            self.current_dir,
            BufferState(
                cursor=self.cursor,
                scroll=self.scroll,
                show_hidden=self.show_hidden,
                marks=self.marks,
            ),
        )

    def restore_buffer(self) -> None:
        state = self.memory.get(self.current_dir)
        if state is None:
            self.cursor = 0
            self.scroll = 0
            self.marks = set()
            return
        self.cursor = state.cursor
        self.scroll = state.scroll
        self.marks = set(state.marks)

    # Reading

    def refresh(self) -> None:
        """Re-read the current directory under its hidden toggle."""
        self.directory = self._reader(self.current_dir, self.show_hidden)
        self.clamp_cursor()

    def _move_to(self, new_dir: Path) -> None:
        directory = self._reader(new_dir, self.memory.show_hidden(new_dir))
        self.save_buffer()
        logger.debug("pane moving %s -> %s", self.current_dir, new_dir)
        self.current_dir = new_dir
        self.directory = directory
        self.restore_buffer()
        self.clamp_cursor()

    # Navigation

    def _child_named(self, name: str) -> Entry | None:
        for entry in self.directory:
            if entry.name == name:
                return entry
        return None

    def enter_child(self, name: str | None = None) -> None:
        """Enter child directory ``name`` (default: the current target)."""
        entry = self.target() if name is None else self._child_named(name)
        if entry is None or not entry.is_dir:
            raise NotADirectory(entry.path if entry is not None else self.current_dir / (name or ""))
        self._move_to(self.current_dir / entry.name)

    def leave_to_parent(self) -> None:
        """Move to the parent directory; at the root only the listing is re-read."""
        self._move_to(self.current_dir.parent)

    def change_dir(self, path: Path | str) -> None:
        """Move to an arbitrary directory, relative paths resolved from ``current_dir``."""
        candidate = Path(path).expanduser()
        if not candidate.is_absolute():
            candidate = self.current_dir / candidate
        candidate = Path(os.path.normpath(candidate))
        if candidate.exists() and not candidate.is_dir():
            raise NotADirectory(candidate)
        self._move_to(candidate)

    def toggle_hidden(self) -> None:
        """Flip the hidden toggle for ``current_dir`` and re-read."""
        self.save_buffer()
        state = self.memory.ensure(self.current_dir)
        flipped = not state.show_hidden
        directory = self._reader(self.current_dir, flipped)
        state.show_hidden = flipped
        self.directory = directory
        self.restore_buffer()
        self.clamp_cursor()

    # Cursor

    def _page_step(self) -> int:
        return max(1, min(PAGE_STEP, self.viewport_height))

    def cursor_up(self, amount: int = 1) -> None:
        if amount <= 0:
            return
        if self.cursor < amount and self.scroll > 0:
            step = min(self._page_step(), self.scroll)
            self.scroll -= step
            self.cursor = min(self.cursor + step, self.viewport_height)
        else:
            self.cursor = max(0, self.cursor - amount)

    def cursor_down(self, amount: int = 1) -> None:
        if amount <= 0:
            return
        last = len(self.directory) - 1
        if self.position >= last:
            self.clamp_position()
            return
        if self.cursor + amount > self.viewport_height:
            step = self._page_step()
            self.cursor -= min(step, self.cursor)
            self.scroll += step
        else:
            self.cursor += amount
        self.clamp_position()

    def clamp_position(self) -> None:
        """Pull ``scroll + cursor`` back to the last entry when it runs past it."""
        last = len(self.directory) - 1
        if last < 0:
            self.cursor = 0
            self.scroll = 0
            return
        if self.position <= last:
            return
        if self.scroll > last:
            self.scroll = last
            self.cursor = 0
        else:
            self.cursor = last - self.scroll

    def clamp_cursor(self) -> None:
        """Reset to the top page when nothing sits under the cursor."""
        if self.target() is None:
            self.scroll = 0
            self.cursor = max(0, len(self.visible_entries()) - 1)

    def set_viewport_height(self, height: int) -> None:
        """Resize the viewport, keeping the absolute position when it still fits."""
        height = max(0, int(height))
        self.viewport_height = height
        if self.cursor > height:
            self.scroll += self.cursor - height
            self.cursor = height
        self.clamp_cursor()

    # Queries

    def visible_entries(self) -> list[Entry]:
        return self.directory[self.scroll : self.scroll + self.viewport_height + 1]

    def target(self) -> Entry | None:
        """Return the entry under the cursor, or ``None`` when there is none."""
        if self.cursor > self.viewport_height:
            return None
        index = self.position
        if 0 <= index < len(self.directory):
            return self.directory[index]
        return None

    def target_path(self) -> Path | None:
        target = self.target()
        return target.path if target is not None else None

    # Marks

    def toggle_mark(self, path: Path | str | None = None) -> bool | None:
        """Flip the mark on ``path`` (default: the target).

        Returns the new marked state, or ``None`` when there is nothing to mark.
        """
        marked_path = self._mark_key(path) if path is not None else self.target_path()
        if marked_path is None:
            return None
        if marked_path in self.marks:
            self.marks.discard(marked_path)
            return False
        self.marks.add(marked_path)
        return True

    def _mark_key(self, path: Path | str) -> Path:
        """Absolute, normalized form of ``path``; relative paths resolve from ``current_dir``."""
        return Path(os.path.normpath(self.current_dir / path))

    def is_marked(self, path: Path | str) -> bool:
        return self._mark_key(path) in self.marks

    def clear_marks(self) -> None:
        self.marks.clear()

    # Output

    def listing(self) -> list[Row]:
        """Return styled rows for the visible window; row index is the window line."""
        return [
            entry_row(entry, highlight=line == self.cursor, marked=entry.path in self.marks)
            for line, entry in enumerate(self.visible_entries())
        ]


__all__ = [
    "PAGE_STEP",
    "DEFAULT_VIEWPORT_HEIGHT",
    "DirectoryReader",
    "Pane",
]
