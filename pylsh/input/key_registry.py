"""Key dispatch table for browser actions."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from ..config import Keymap


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one action name and its key to a callback."""

    action: str
    key: str
    handler: Callable[[], object]


class KeyComboRegistry:
    """Exact-match dispatch from single-character keys to action callbacks."""

    def __init__(self) -> None:
        self._bindings: dict[str, KeyBinding] = {}

    @classmethod
    def from_keymap(cls, keymap: Keymap, handlers: Mapping[str, Callable[[], object]]) -> KeyComboRegistry:
        """Bind every action in ``keymap`` to the handler of the same name.

        Raises ``KeyError`` when an action has no handler.
        """
        registry = cls()
        for action, key in keymap.as_dict().items():
            registry.register(KeyBinding(action=action, key=key, handler=handlers[action]))
        return registry

    def register(self, binding: KeyBinding) -> KeyComboRegistry:
        """Register one binding, overwriting any existing handler for its key."""
        self._bindings[binding.key] = binding
        return self

    def action_for(self, key: str) -> str | None:
        binding = self._bindings.get(key)
        return binding.action if binding is not None else None

    def dispatch(self, key: str) -> bool:
        """Invoke the handler bound to ``key``; return whether one was bound."""
        binding = self._bindings.get(key)
        if binding is None:
            return False
        binding.handler()
        return True
