"""Shell collaborator: builtin registry and read-eval loop."""

from .builtins import (
    BrowseBuiltin,
    Builtin,
    BuiltinRegistry,
    CdBuiltin,
    ExitBuiltin,
    HelpBuiltin,
    default_builtins,
)
from .repl import PROMPT, Shell, split_line

__all__ = [
    "Builtin",
    "BuiltinRegistry",
    "BrowseBuiltin",
    "CdBuiltin",
    "ExitBuiltin",
    "HelpBuiltin",
    "default_builtins",
    "PROMPT",
    "Shell",
    "split_line",
]
