"""Runtime shell around the navigation core: session, loop, terminal, config."""

from __future__ import annotations

from .commands import CommandContext, CommandError, CommandTable, build_command_table
from .session import Session
from .loop import run_main_loop

__all__ = [
    "CommandContext",
    "CommandError",
    "CommandTable",
    "build_command_table",
    "Session",
    "run_main_loop",
]
