"""Input-layer public API: keymap dispatch for the browser loop."""

from .key_registry import KeyBinding, KeyComboRegistry

__all__ = [
    "KeyBinding",
    "KeyComboRegistry",
]
