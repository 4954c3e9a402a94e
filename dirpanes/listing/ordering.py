"""Ordering and hidden-entry filtering for directory listings.

Directories come first, then non-hidden before hidden names, then names in
byte-wise order. Hidden names are dropped unless ``show_hidden`` is set.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .fs import list_entries
from .types import Entry


def is_hidden(name: str) -> bool:
    """Return whether ``name`` is a dot-file name."""
    return name.startswith(".")


def entry_sort_key(entry: Entry) -> tuple[bool, bool, bytes]:
    return (not entry.is_dir, is_hidden(entry.name), os.fsencode(entry.name))


def order_entries(entries: Iterable[Entry], show_hidden: bool) -> list[Entry]:
    """Filter and sort ``entries`` into pane display order."""
    visible = [entry for entry in entries if show_hidden or not is_hidden(entry.name)]
    visible.sort(key=entry_sort_key)
    return visible


def read_directory(directory: Path, show_hidden: bool) -> list[Entry]:
    """List ``directory`` and return its children in display order."""
    return order_entries(list_entries(directory), show_hidden)


__all__ = [
    "is_hidden",
    "entry_sort_key",
    "order_entries",
    "read_directory",
]
