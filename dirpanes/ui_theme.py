"""UI theme definitions and selection helpers.

Themes map the abstract listing style tags and the chrome rows (pane tabs,
status line, command prompt) to ANSI SGR sequences.
"""

from __future__ import annotations

from dataclasses import dataclass

from .pane.rows import StyleTag


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    file: str
    file_highlighted: str
    directory: str
    directory_highlighted: str
    marked: str
    plain: str
    tab_active: str
    tab_inactive: str
    header_path: str
    status: str
    command_prompt: str

    def style(self, tag: StyleTag) -> str:
        """Return the SGR prefix for a listing style tag."""
        return {
            StyleTag.FILE: self.file,
            StyleTag.FILE_HIGHLIGHTED: self.file_highlighted,
            StyleTag.DIRECTORY: self.directory,
            StyleTag.DIRECTORY_HIGHLIGHTED: self.directory_highlighted,
            StyleTag.MARKED: self.marked,
            StyleTag.PLAIN: self.plain,
        }[tag]


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    file="\033[37m",
    file_highlighted="\033[30;47m",
    directory="\033[1;34m",
    directory_highlighted="\033[1;30;44m",
    marked="\033[1;33m",
    plain="\033[0m",
    tab_active="\033[1;30;42m",
    tab_inactive="\033[2m",
    header_path="\033[92m",
    status="\033[2;37m",
    command_prompt="\033[1;38;5;81m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    file="\033[38;5;252m",
    file_highlighted="\033[38;5;16;48;5;153m",
    directory="\033[1;38;5;45m",
    directory_highlighted="\033[1;38;5;16;48;5;45m",
    marked="\033[1;38;5;215m",
    plain="\033[0m",
    tab_active="\033[1;38;5;16;48;5;39m",
    tab_inactive="\033[2;38;5;110m",
    header_path="\033[38;5;117m",
    status="\033[2;38;5;110m",
    command_prompt="\033[1;38;5;45m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    file="",
    file_highlighted="\033[7m",
    directory="",
    directory_highlighted="\033[7m",
    marked="\033[4m",
    plain="",
    tab_active="\033[7m",
    tab_inactive="",
    header_path="",
    status="",
    command_prompt="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, no_color: bool = False) -> UITheme:
    """Return the theme to render with; ``no_color`` forces the plain palette."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]
