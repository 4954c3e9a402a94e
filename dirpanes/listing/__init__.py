"""Directory listing primitives: entry type, filesystem lister, ordering policy."""

from __future__ import annotations

from .types import Entry
from .fs import classify_is_dir, list_entries
from .ordering import entry_sort_key, is_hidden, order_entries, read_directory

__all__ = [
    "Entry",
    "classify_is_dir",
    "list_entries",
    "entry_sort_key",
    "is_hidden",
    "order_entries",
    "read_directory",
]
