"""Per-directory memory of browsing position.

Each pane owns one ``DirectoryMemory`` mapping a normalized directory path to
the cursor, scroll, hidden toggle and marks last seen there. Entries are
created lazily and kept for the lifetime of the pane.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class BufferState:
    """Remembered viewport state for one directory."""

    cursor: int = 0
    scroll: int = 0
    show_hidden: bool = False
    marks: set[Path] = field(default_factory=set)

    def copy(self) -> BufferState:
        return BufferState(
            cursor=self.cursor,
            scroll=self.scroll,
            show_hidden=self.show_hidden,
            marks=set(self.marks),
        )


def normalize_directory(path: Path) -> Path:
    """Return the memory key for ``path``: resolved when possible, else absolute."""
    try:
        return path.resolve()
    except (OSError, RuntimeError):
        return path.absolute()


class DirectoryMemory:
    """Path-keyed store of ``BufferState`` values."""

    def __init__(self) -> None:
        self._states: dict[Path, BufferState] = {}

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, directory: object) -> bool:
        if not isinstance(directory, Path):
            return False
        return normalize_directory(directory) in self._states

    def get(self, directory: Path) -> BufferState | None:
        """Return the stored state for ``directory`` or ``None`` when never saved."""
        return self._states.get(normalize_directory(directory))

    def ensure(self, directory: Path) -> BufferState:
        """Return the stored state for ``directory``, creating defaults if absent."""
        key = normalize_directory(directory)
        state = self._states.get(key)
        if state is None:
            state = BufferState()
            self._states[key] = state
        return state

    def save(self, directory: Path, state: BufferState) -> None:
        """Store a copy of ``state`` under ``directory``."""
        self._states[normalize_directory(directory)] = state.copy()

    def show_hidden(self, directory: Path) -> bool:
        """Return the hidden toggle for ``directory`` (``False`` when unknown)."""
        state = self.get(directory)
        return state.show_hidden if state is not None else False


__all__ = [
    "BufferState",
    "DirectoryMemory",
    "normalize_directory",
]
