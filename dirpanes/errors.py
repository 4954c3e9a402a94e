"""Navigation error taxonomy.

Filesystem failures are plain ``OSError`` and propagate unchanged.
A missing target is ``None``, never an exception.
"""

from __future__ import annotations


class NavigationError(Exception):
    """Base class for navigation requests that cannot be honored."""


class NotADirectory(NavigationError):
    """Raised when navigation targets an entry that is not a directory."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Not a directory: {path}")
        self.path = path


class PaneIndexError(NavigationError, IndexError):
    """Raised for a pane index outside the fixed pane range."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"Pane index {index} out of range 0..{count - 1}")
        self.index = index
        self.count = count


__all__ = [
    "NavigationError",
    "NotADirectory",
    "PaneIndexError",
]
