"""Builtin commands and the registry the shell dispatches through.

The registry is built once at startup and handed to the shell; handlers are
small objects with a ``name``, a one-line ``summary`` and ``run``.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from ..config import BrowserConfig
from ..runtime import run_browser
from ..ui_theme import DEFAULT_THEME, UITheme

if TYPE_CHECKING:
    from .repl import Shell


class Builtin(Protocol):
    name: str
    summary: str

    def run(self, shell: Shell, args: list[str]) -> int: ...


class CdBuiltin:
    name = "cd"
    summary = "change the working directory"

    def run(self, shell: Shell, args: list[str]) -> int:
        if len(args) < 2:
            shell.report('expected argument to "cd"')
            return 1
        try:
            os.chdir(args[1])
        except OSError as exc:
            shell.report(f"{args[1]}: {exc.strerror or exc}")
            return 1
        return 0


class HelpBuiltin:
    name = "help"
    summary = "list builtin commands"

    def run(self, shell: Shell, args: list[str]) -> int:
        shell.write("pylsh, a minimal shell\n")
        shell.write("Type program names and arguments, and hit enter.\n")
        shell.write("The following are built in:\n")
        for builtin in shell.builtins:
            shell.write(f"  {builtin.name:<8} {builtin.summary}\n")
        shell.write("Use the man command for information on other programs.\n")
        return 0


class ExitBuiltin:
    name = "exit"
    summary = "leave the shell"

    def run(self, shell: Shell, args: list[str]) -> int:
        shell.running = False
        return 0


@dataclass
class BrowseBuiltin:
    """Open the interactive directory browser in the working directory."""

    config: BrowserConfig = field(default_factory=BrowserConfig)
    theme: UITheme = DEFAULT_THEME
    runner: Callable[[BrowserConfig, UITheme], None] = run_browser
    name: str = "browse"
    summary: str = "browse the working directory interactively"

    def run(self, shell: Shell, args: list[str]) -> int:
        if len(args) > 1:
            shell.report("browse takes no arguments")
            return 1
        self.runner(self.config, self.theme)
        return 0


class BuiltinRegistry:
    """Ordered mapping from command names to builtin handlers."""

    def __init__(self, builtins: tuple[Builtin, ...] = ()) -> None:
        self._builtins: dict[str, Builtin] = {}
        for builtin in builtins:
            self.register(builtin)

    def register(self, builtin: Builtin) -> BuiltinRegistry:
        self._builtins[builtin.name] = builtin
        return self

    def get(self, name: str) -> Builtin | None:
        return self._builtins.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(self._builtins)

    def __contains__(self, name: object) -> bool:
        return name in self._builtins

    def __iter__(self) -> Iterator[Builtin]:
        return iter(self._builtins.values())

    def __len__(self) -> int:
        return len(self._builtins)


def default_builtins(config: BrowserConfig | None = None, theme: UITheme = DEFAULT_THEME) -> BuiltinRegistry:
    """Return the standard registry: ``cd``, ``help``, ``exit``, ``browse``."""
    return BuiltinRegistry(
        (
            CdBuiltin(),
            HelpBuiltin(),
            ExitBuiltin(),
            BrowseBuiltin(config=config if config is not None else BrowserConfig(), theme=theme),
        )
    )


__all__ = [
    "Builtin",
    "CdBuiltin",
    "HelpBuiltin",
    "ExitBuiltin",
    "BrowseBuiltin",
    "BuiltinRegistry",
    "default_builtins",
]
