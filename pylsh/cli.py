"""Command-line front door for pylsh.

Parses CLI options, builds the browser config and builtin registry once,
then runs either a single ``-c`` command or the interactive shell loop.
"""

from __future__ import annotations

import argparse
import sys

from .config import BrowserConfig
from .errors import TerminalModeError
from .shell import Shell, default_builtins
from .ui_theme import available_theme_names, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pylsh",
        description="Minimal shell with an interactive directory browser (the 'browse' builtin).",
    )
    parser.add_argument("-c", dest="command", metavar="COMMAND", help="Run one command line and exit.")
    parser.add_argument("--no-color", action="store_true", help="Disable entry colors in the browser.")
    parser.add_argument(
        "--theme",
        type=str.lower,
        choices=available_theme_names(),
        default=None,
        help="Browser color theme.",
    )
    parser.add_argument("--columns", type=_positive_int, default=None, help="Entries per browser grid row.")
    parser.add_argument("--name-width", type=_positive_int, default=None, help="Display width of entry names.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the shell; exits with the last command status."""
    args = build_parser().parse_args(argv)
    config = BrowserConfig().with_overrides(columns=args.columns, name_width=args.name_width)
    theme = resolve_theme(args.theme, no_color=args.no_color)
    shell = Shell(default_builtins(config, theme))

    try:
        if args.command is not None:
            status = shell.execute_line(args.command)
        else:
            status = shell.loop()
    except TerminalModeError as exc:
        # Terminal may still be in key mode.
        sys.stderr.write(f"pylsh: fatal: {exc}\npylsh: run 'stty sane' to recover the terminal\n")
        raise SystemExit(1) from exc
    raise SystemExit(status)


if __name__ == "__main__":
    main()
