"""Read-eval loop: tokenize a line, run a builtin or an external program."""

from __future__ import annotations

import shlex
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from ..errors import LaunchFailure
from ..launcher import run_command
from .builtins import BuiltinRegistry

PROMPT = "> "


def split_line(line: str) -> list[str]:
    """Split a command line into arguments using POSIX shell quoting."""
    return shlex.split(line)


class Shell:
    def __init__(
        self,
        builtins: BuiltinRegistry,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        launch: Callable[[Sequence[str]], int] = run_command,
        prompt: str = PROMPT,
    ) -> None:
        self.builtins = builtins
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self._launch = launch
        self.prompt = prompt
        self.running = True
        self.last_status = 0

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def report(self, message: str) -> None:
        self.stderr.write(f"pylsh: {message}\n")
        self.stderr.flush()

    def execute(self, args: list[str]) -> int:
        """Run one tokenized command; an empty command is a no-op."""
        if not args:
            return self.last_status
        builtin = self.builtins.get(args[0])
        if builtin is not None:
            status = builtin.run(self, args)
        else:
            try:
                status = self._launch(args)
            except LaunchFailure as exc:
                self.report(str(exc))
                status = 127
        self.last_status = status
        return status

    def execute_line(self, line: str) -> int:
        try:
            args = split_line(line)
        except ValueError as exc:
            self.report(f"syntax error: {exc}")
            self.last_status = 2
            return self.last_status
        return self.execute(args)

    def loop(self) -> int:
        """Prompt and execute lines until ``exit`` or end of input."""
        while self.running:
            self.write(self.prompt)
            try:
                line = self.stdin.readline()
                if not line:
                    self.write("\n")
                    break
                self.execute_line(line)
            except KeyboardInterrupt:
                # Ctrl+C abandons the current line and re-prompts.
                self.write("\n")
                self.last_status = 130
        return self.last_status
