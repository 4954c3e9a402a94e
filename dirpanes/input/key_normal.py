"""Normal-mode keyboard handling."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


PANE_KEYS = tuple(str(number) for number in range(1, 10))


@dataclass(frozen=True)
class NormalKeyContext:
    """Bound session operations reachable from normal mode."""

    cursor_up: Callable[[int], None]
    cursor_down: Callable[[int], None]
    half_page: Callable[[], int]
    enter_target: Callable[[], None]
    leave_to_parent: Callable[[], None]
    toggle_hidden: Callable[[], None]
    toggle_mark: Callable[[], None]
    switch_pane: Callable[[int], None]
    next_pane: Callable[[], None]
    previous_pane: Callable[[], None]
    edit_target: Callable[[], None]
    open_target: Callable[[], None]
    request_quit: Callable[[], None]


def build_normal_bindings(context: NormalKeyContext) -> dict[str, Callable[[], None]]:
    """Return the normal-mode key table bound to ``context``."""
    bindings: dict[str, Callable[[], None]] = {}

    def bind(keys: tuple[str, ...], action: Callable[[], None]) -> None:
        for key in keys:
            bindings[key] = action

    def switch_pane_action(number: int) -> Callable[[], None]:
        return lambda: context.switch_pane(number - 1)

    bind(("q", "CTRL_C"), context.request_quit)
    bind(("UP", "k"), lambda: context.cursor_up(1))
    bind(("DOWN", "j"), lambda: context.cursor_down(1))
    bind(("CTRL_U", "PAGE_UP"), lambda: context.cursor_up(context.half_page()))
    bind(("CTRL_D", "PAGE_DOWN"), lambda: context.cursor_down(context.half_page()))
    bind(("LEFT", "h"), context.leave_to_parent)
    bind(("RIGHT", "l", "ENTER"), context.enter_target)
    bind((".",), context.toggle_hidden)
    bind((" ",), context.toggle_mark)
    bind(("TAB",), context.next_pane)
    bind(("SHIFT_TAB",), context.previous_pane)
    bind(("e",), context.edit_target)
    bind(("o",), context.open_target)
    for key in PANE_KEYS:
        bind((key,), switch_pane_action(int(key)))
    return bindings


class NormalKeyHandler:
    """Reusable normal-mode handler with bound session operations."""

    def __init__(self, context: NormalKeyContext) -> None:
        self.context = context
        self.bindings = build_normal_bindings(context)

    def handle(self, key: str) -> bool:
        """Handle one key; return ``True`` when it was bound."""
        action = self.bindings.get(key)
        if action is None:
            return False
        action()
        return True


__all__ = [
    "PANE_KEYS",
    "NormalKeyContext",
    "NormalKeyHandler",
    "build_normal_bindings",
]
