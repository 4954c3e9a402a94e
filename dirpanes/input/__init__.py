"""Input layer: key decoding, the normal-mode key table, and mode routing."""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key
from .key_normal import NormalKeyContext, NormalKeyHandler, build_normal_bindings
from .modes import COMMAND_TRIGGER_KEY, CommandMode, ModeController, NormalMode

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "read_key",
    "NormalKeyContext",
    "NormalKeyHandler",
    "build_normal_bindings",
    "COMMAND_TRIGGER_KEY",
    "CommandMode",
    "ModeController",
    "NormalMode",
]
