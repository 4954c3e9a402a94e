"""Fixed-size set of independent panes with one active pane."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from ..errors import PaneIndexError
from ..listing import read_directory
from .context import DEFAULT_VIEWPORT_HEIGHT, DirectoryReader, Pane

logger = logging.getLogger(__name__)

DEFAULT_PANE_COUNT = 4


class Views:
    """Owns ``count`` panes and routes operations to the active one."""

    def __init__(self, panes: Sequence[Pane]) -> None:
        if not panes:
            raise ValueError("Views needs at least one pane")
        self._panes: tuple[Pane, ...] = tuple(panes)
        self.active_index = 0

    @classmethod
    def open(
        cls,
        start_dir: Path,
        *,
        count: int = DEFAULT_PANE_COUNT,
        viewport_height: int = DEFAULT_VIEWPORT_HEIGHT,
        reader: DirectoryReader = read_directory,
    ) -> Views:
        """Create ``count`` panes rooted at ``start_dir`` and read each of them.

        A failed startup read propagates; callers treat it as fatal.
        """
        panes = [
            Pane.open(start_dir, viewport_height=viewport_height, reader=reader)
            for _ in range(max(1, count))
        ]
        return cls(panes)

    @property
    def count(self) -> int:
        return len(self._panes)

    @property
    def panes(self) -> tuple[Pane, ...]:
        return self._panes

    def pane(self, index: int) -> Pane:
        """Return pane ``index``; out-of-range indices raise ``PaneIndexError``."""
        if not 0 <= index < len(self._panes):
            raise PaneIndexError(index, len(self._panes))
        return self._panes[index]

    @property
    def active(self) -> Pane:
        return self.pane(self.active_index)

    def switch_to(self, index: int) -> None:
        """Activate pane ``index`` and re-read its directory."""
        pane = self.pane(index)
        self.active_index = index
        logger.debug("switched to pane %d (%s)", index, pane.current_dir)
        pane.refresh()

    def next(self) -> None:
        self.switch_to((self.active_index + 1) % len(self._panes))

    def previous(self) -> None:
        self.switch_to((self.active_index - 1) % len(self._panes))

    def set_viewport_height(self, height: int) -> None:
        for pane in self._panes:
            pane.set_viewport_height(height)


__all__ = [
    "DEFAULT_PANE_COUNT",
    "Views",
]
