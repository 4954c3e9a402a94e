"""Styled listing rows handed to renderers.

A row is a tuple of ``Segment`` values; each segment carries display text and
an abstract ``StyleTag`` that the renderer maps to terminal attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..listing import Entry


class StyleTag(str, Enum):
    FILE = "file"
    FILE_HIGHLIGHTED = "file-highlighted"
    DIRECTORY = "directory"
    DIRECTORY_HIGHLIGHTED = "directory-highlighted"
    MARKED = "marked"
    PLAIN = "plain"


@dataclass(frozen=True)
class Segment:
    text: str
    style: StyleTag


Row = tuple[Segment, ...]


def entry_row(entry: Entry, *, highlight: bool, marked: bool = False) -> Row:
    """Build the row for one entry.

    Directories get a plain trailing ``/``. The cursor highlight wins over the
    mark style.
    """
    if entry.is_dir:
        style = StyleTag.DIRECTORY_HIGHLIGHTED if highlight else StyleTag.DIRECTORY
    else:
        style = StyleTag.FILE_HIGHLIGHTED if highlight else StyleTag.FILE
    if marked and not highlight:
        style = StyleTag.MARKED
    if entry.is_dir:
        return (Segment(entry.name, style), Segment("/", StyleTag.PLAIN))
    return (Segment(entry.name, style),)


def row_text(row: Row) -> str:
    """Return the unstyled text of ``row``."""
    return "".join(segment.text for segment in row)


__all__ = [
    "StyleTag",
    "Segment",
    "Row",
    "entry_row",
    "row_text",
]
