"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the browser grid: one foreground color per entry
kind, plus styles for the status line, the cursor cell, and the key legend.
Kind colors come from ``pygments.console`` and are distinct per kind.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pygments.console import codes

from .dir_model import EntryKind

RESET = "\033[0m"
REVERSE = "\033[7m"


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the grid renderer."""

    name: str
    kind_colors: dict[EntryKind, str] = field(default_factory=dict)
    cursor: str = REVERSE
    status: str = ""
    message: str = ""
    legend: str = ""
    reset: str = RESET

    def color_for(self, kind: EntryKind) -> str:
        return self.kind_colors.get(kind, "")


DEFAULT_THEME = UITheme(
    name="default",
    kind_colors={
        EntryKind.REGULAR: codes["gray"],
        EntryKind.DIRECTORY: codes["blue"],
        EntryKind.SYMLINK: codes["cyan"],
        EntryKind.CHAR_DEVICE: codes["yellow"],
        EntryKind.BLOCK_DEVICE: codes["magenta"],
        EntryKind.FIFO: codes["green"],
        EntryKind.SOCKET: codes["red"],
        EntryKind.UNKNOWN: codes["brightblack"],
    },
    status="\033[1;30;47m",
    message=codes["bold"] + codes["yellow"],
    legend=codes["faint"],
)

BRIGHT_THEME = UITheme(
    name="bright",
    kind_colors={
        EntryKind.REGULAR: codes["white"],
        EntryKind.DIRECTORY: codes["brightblue"],
        EntryKind.SYMLINK: codes["brightcyan"],
        EntryKind.CHAR_DEVICE: codes["brightyellow"],
        EntryKind.BLOCK_DEVICE: codes["brightmagenta"],
        EntryKind.FIFO: codes["brightgreen"],
        EntryKind.SOCKET: codes["brightred"],
        EntryKind.UNKNOWN: codes["gray"],
    },
    status="\033[1;97;44m",
    message=codes["bold"] + codes["brightyellow"],
    legend=codes["faint"],
)

# No colors, but the cursor keeps reverse video so it stays visible.
PLAIN_THEME = UITheme(name="plain")

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    BRIGHT_THEME.name: BRIGHT_THEME,
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


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "RESET",
    "REVERSE",
    "UITheme",
    "DEFAULT_THEME",
    "BRIGHT_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
