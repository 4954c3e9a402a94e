"""Filesystem scanning for immediate directory children."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import Entry

logger = logging.getLogger(__name__)


def classify_is_dir(child: os.DirEntry) -> bool:
    """Return whether ``child`` resolves to a directory.

    Symlinks are followed. A child whose resolution fails (dangling link,
    symlink loop, removed mid-scan) is reported as a file.
    """
    try:
        return child.is_dir(follow_symlinks=True)
    except OSError:
        logger.debug("could not classify %s, treating as file", child.path)
        return False


def list_entries(directory: Path) -> list[Entry]:
    """Return the immediate children of ``directory`` in scan order.

    ``OSError`` from opening the directory (missing, permission denied, not a
    directory) propagates unchanged. No partial result is returned.
    """
    entries: list[Entry] = []
    with os.scandir(directory) as children:
        for child in children:
            entries.append(
                Entry(
                    path=Path(child.path),
                    name=child.name,
                    is_dir=classify_is_dir(child),
                )
            )
    return entries


__all__ = [
    "classify_is_dir",
    "list_entries",
]
