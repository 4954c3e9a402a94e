"""Pane state, per-directory memory, pane set, and listing rows."""

from __future__ import annotations

from .memory import BufferState, DirectoryMemory, normalize_directory
from .rows import Row, Segment, StyleTag, entry_row, row_text
from .context import DEFAULT_VIEWPORT_HEIGHT, PAGE_STEP, DirectoryReader, Pane
from .views import DEFAULT_PANE_COUNT, Views

__all__ = [
    "BufferState",
    "DirectoryMemory",
    "normalize_directory",
    "Row",
    "Segment",
    "StyleTag",
    "entry_row",
    "row_text",
    "DEFAULT_VIEWPORT_HEIGHT",
    "PAGE_STEP",
    "DirectoryReader",
    "Pane",
    "DEFAULT_PANE_COUNT",
    "Views",
]
