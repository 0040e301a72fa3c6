"""Browser configuration defaults.

Everything lives in code; there is no config file. The CLI can override the
grid geometry through ``BrowserConfig.with_overrides``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

DEFAULT_COLUMNS = 4
DEFAULT_NAME_WIDTH = 20
DEFAULT_MAX_ENTRIES = 200
DEFAULT_NEW_DIRECTORY_NAME = "new_directory"
DEFAULT_NEW_DIRECTORY_MODE = 0o755


@dataclass(frozen=True)
class Keymap:
    """Single-byte key bindings for browser actions."""

    right: str = "d"
    left: str = "a"
    up: str = "w"
    down: str = "s"
    enter: str = "e"
    quit: str = "q"
    delete: str = "z"
    create: str = "n"

    def __post_init__(self) -> None:
        keys = self.as_dict()
        for action, key in keys.items():
            if len(key) != 1 or not key.isascii():
                raise ValueError(f"key for {action!r} must be one ASCII character, got {key!r}")
        if len(set(keys.values())) != len(keys):
            raise ValueError("key bindings must be distinct")

    def as_dict(self) -> dict[str, str]:
        """Return ``action -> key`` in declaration order."""
        return {
            "right": self.right,
            "left": self.left,
            "up": self.up,
            "down": self.down,
            "enter": self.enter,
            "quit": self.quit,
            "delete": self.delete,
            "create": self.create,
        }


@dataclass(frozen=True)
class BrowserConfig:
    """Grid geometry, snapshot limits, and create-action defaults."""

    columns: int = DEFAULT_COLUMNS
    name_width: int = DEFAULT_NAME_WIDTH
    max_entries: int = DEFAULT_MAX_ENTRIES
    new_directory_name: str = DEFAULT_NEW_DIRECTORY_NAME
    new_directory_mode: int = DEFAULT_NEW_DIRECTORY_MODE
    include_dot_entries: bool = True
    keymap: Keymap = field(default_factory=Keymap)

    def __post_init__(self) -> None:
        if self.columns < 1:
            raise ValueError("columns must be >= 1")
        if self.name_width < 1:
            raise ValueError("name_width must be >= 1")
        if self.max_entries < 0:
            raise ValueError("max_entries must be >= 0")
        if self.include_dot_entries and self.max_entries < 2:
            raise ValueError("max_entries must leave room for . and ..")
        if not self.new_directory_name or "/" in self.new_directory_name:
            raise ValueError("new_directory_name must be a plain file name")

    def with_overrides(self, columns: int | None = None, name_width: int | None = None) -> BrowserConfig:
        """Return a copy with CLI-provided values applied; ``None`` keeps defaults."""
        changes: dict[str, int] = {}
        if columns is not None:
            changes["columns"] = columns
        if name_width is not None:
            changes["name_width"] = name_width
        if not changes:
            return self
        return replace(self, **changes)


__all__ = [
    "DEFAULT_COLUMNS",
    "DEFAULT_NAME_WIDTH",
    "DEFAULT_MAX_ENTRIES",
    "DEFAULT_NEW_DIRECTORY_NAME",
    "DEFAULT_NEW_DIRECTORY_MODE",
    "Keymap",
    "BrowserConfig",
]
