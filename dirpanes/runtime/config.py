"""Persistent JSON config and last-directory helpers.

Config holds the pane count, editor/opener commands and theme name, and is
only read here. Missing or malformed config falls back to defaults; nothing
here raises.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_cache_dir, user_config_dir

APP_NAME = "dirpanes"
CONFIG_FILENAME = "config.json"
LAST_DIR_FILENAME = "last_dir"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LAST_DIR_PATH = Path(user_cache_dir(APP_NAME, appauthor=False)) / LAST_DIR_FILENAME

DEFAULT_PANE_COUNT = 4
MAX_PANE_COUNT = 9


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def load_pane_count() -> int:
    """Return the configured pane count, defaulting to 4.

    Booleans, non-integers, and values outside ``1..9`` are ignored.
    """
    value = load_config().get("pane_count")
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_PANE_COUNT
    if not 1 <= value <= MAX_PANE_COUNT:
        return DEFAULT_PANE_COUNT
    return value


def _load_command(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_editor_command() -> str | None:
    """Editor command overriding ``$EDITOR``, or ``None`` when unset."""
    return _load_command("editor")


def load_opener_command() -> str | None:
    """Open-handler command overriding the platform default, or ``None``."""
    return _load_command("opener")


def load_theme_name() -> str | None:
    return _load_command("theme")


def save_last_directory(directory: Path, target: Path | None = None) -> bool:
    """Write ``directory`` for a shell wrapper to ``cd`` into after exit.

    Returns ``False`` when the file cannot be written.
    """
    destination = target if target is not None else LAST_DIR_PATH
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(str(directory), encoding="utf-8")
    except OSError:
        return False
    return True
