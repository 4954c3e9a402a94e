"""Normal / Command mode state machine for keystroke routing.

``NormalMode`` hands keys to the normal-mode handler. ``CommandMode`` carries
the command text being typed; the text only exists while in that state.
``ENTER`` runs the command and ``ESC`` abandons it; both return to normal mode.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

COMMAND_TRIGGER_KEY = ":"


@dataclass(frozen=True)
class NormalMode:
    pass


@dataclass(frozen=True)
class CommandMode:
    text: str = ""


Mode = NormalMode | CommandMode


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is a literal character rather than a token name."""
    return len(key) == 1 and key.isprintable()


class ModeController:
    """Route key tokens according to the current mode."""

    def __init__(
        self,
        handle_normal_key: Callable[[str], object],
        execute_command: Callable[[str], object],
        trigger_key: str = COMMAND_TRIGGER_KEY,
    ) -> None:
        self._handle_normal_key = handle_normal_key
        self._execute_command = execute_command
        self.trigger_key = trigger_key
        self.mode: Mode = NormalMode()

    @property
    def in_command_mode(self) -> bool:
        return isinstance(self.mode, CommandMode)

    @property
    def command_text(self) -> str | None:
        """Text typed so far in command mode; ``None`` in normal mode."""
        if isinstance(self.mode, CommandMode):
            return self.mode.text
        return None

    def handle_key(self, key: str) -> None:
        if isinstance(self.mode, CommandMode):
            self._handle_command_key(self.mode, key)
            return
        if key == self.trigger_key:
            self.mode = CommandMode()
            return
        self._handle_normal_key(key)

    def _handle_command_key(self, mode: CommandMode, key: str) -> None:
        if key == "ENTER":
            self.mode = NormalMode()
            self._execute_command(mode.text)
        elif key == "ESC":
            self.mode = NormalMode()
        elif key == "BACKSPACE":
            self.mode = CommandMode(mode.text[:-1])
        elif key == "CTRL_U":
            self.mode = CommandMode()
        elif is_text_key(key):
            self.mode = CommandMode(mode.text + key)


__all__ = [
    "COMMAND_TRIGGER_KEY",
    "NormalMode",
    "CommandMode",
    "Mode",
    "is_text_key",
    "ModeController",
]
