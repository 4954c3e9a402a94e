"""Domain datatype for one directory child."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """Immediate child of a directory as observed at read time."""

    path: Path
    name: str
    is_dir: bool


__all__ = ["Entry"]
