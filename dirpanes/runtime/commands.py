"""Command-mode language.

Command text is split shell-style; the first word names the command and the
rest are its arguments. Failures surface as ``CommandError`` with a message
meant for the status line.
"""

from __future__ import annotations

import shlex
from collections.abc import Callable, Sequence
from dataclasses import dataclass


class CommandError(Exception):
    """Command text that cannot be parsed or run."""


CommandHandler = Callable[[Sequence[str]], None]


@dataclass(frozen=True)
class CommandSpec:
    names: tuple[str, ...]
    handler: CommandHandler
    usage: str
    min_args: int = 0
    max_args: int = 0


@dataclass(frozen=True)
class CommandContext:
    """Session operations reachable from the command line."""

    change_dir: Callable[[str], None]
    switch_pane: Callable[[int], None]
    toggle_hidden: Callable[[], None]
    toggle_mark: Callable[[], None]
    clear_marks: Callable[[], None]
    edit_target: Callable[[], None]
    open_target: Callable[[], None]
    request_quit: Callable[[], None]


class CommandTable:
    """Name-to-command lookup with argument-count checks."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> CommandTable:
        for name in spec.names:
            self._commands[name] = spec
        return self

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._commands))

    def run(self, text: str) -> bool:
        """Run ``text``; return ``False`` when it was blank."""
        try:
            words = shlex.split(text)
        except ValueError as exc:
            raise CommandError(f"Cannot parse command: {exc}") from exc
        if not words:
            return False
        name, args = words[0], words[1:]
        spec = self._commands.get(name)
        if spec is None:
            raise CommandError(f"Unknown command: {name}")
        if not spec.min_args <= len(args) <= spec.max_args:
            raise CommandError(f"Usage: {spec.usage}")
        spec.handler(args)
        return True


def _pane_number(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise CommandError(f"Not a pane number: {raw}") from exc


def build_command_table(context: CommandContext) -> CommandTable:
    """Return the command table bound to ``context``."""

    def no_args(action: Callable[[], None]) -> CommandHandler:
        return lambda _args: action()

    table = CommandTable()
    table.register(CommandSpec(("cd",), lambda args: context.change_dir(args[0] if args else "~"), "cd [PATH]", 0, 1))
    table.register(CommandSpec(("pane",), lambda args: context.switch_pane(_pane_number(args[0]) - 1), "pane N", 1, 1))
    table.register(CommandSpec(("hidden",), no_args(context.toggle_hidden), "hidden"))
    table.register(CommandSpec(("mark",), no_args(context.toggle_mark), "mark"))
    table.register(CommandSpec(("unmark-all",), no_args(context.clear_marks), "unmark-all"))
    table.register(CommandSpec(("e", "edit"), no_args(context.edit_target), "edit"))
    table.register(CommandSpec(("open",), no_args(context.open_target), "open"))
    table.register(CommandSpec(("q", "quit"), no_args(context.request_quit), "quit"))
    return table


__all__ = [
    "CommandError",
    "CommandSpec",
    "CommandContext",
    "CommandTable",
    "build_command_table",
]
