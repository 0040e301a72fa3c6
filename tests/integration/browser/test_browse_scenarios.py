"""End-to-end browser scenarios driven by keystrokes on a pipe.

Uses the real terminal reader (which falls back to plain reads on a pipe),
real snapshots of a temporary directory, and captured frames.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from pylsh.config import BrowserConfig
from pylsh.render import CLEAR_SCREEN
from pylsh.runtime import BrowserSession
from pylsh.terminal import TerminalController


class BrowseScenarioTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self._previous_cwd = os.getcwd()
        os.chdir(self.root)
        self.frames: list[str] = []
        self.launched: list[str] = []

    def tearDown(self) -> None:
        os.chdir(self._previous_cwd)
        self._tmp.cleanup()

    def _run(self, keys: bytes, **config_kwargs) -> BrowserSession:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, keys)
            os.close(write_fd)
            session = BrowserSession(
                TerminalController(read_fd),
                BrowserConfig(**config_kwargs),
                launch=lambda name: self.launched.append(name) or 0,
                write_frame=self.frames.append,
                now=lambda: 0.0,
            )
            session.run()
        finally:
            os.close(read_fd)
        return session

    def test_move_right_then_enter_directory(self) -> None:
        (self.root / "a.txt").write_text("", encoding="utf-8")
        (self.root / "sub").mkdir()
        (self.root / "sub" / "deep.txt").write_text("", encoding="utf-8")

        session = self._run(b"deq")

        self.assertEqual(Path.cwd(), (self.root / "sub").resolve())
        self.assertEqual(session.cursor, 0)
        self.assertEqual(session.snapshot.names()[0], "deep.txt")
        self.assertIn(f"Path : {self.root / 'sub'}", self.frames[-1])

    def test_enter_dot_dot_returns_to_parent(self) -> None:
        (self.root / "sub").mkdir()
        # sub, ".", ".." -> enter sub, then right to "..", enter.
        self._run(b"e" + b"d" + b"e" + b"q")

        self.assertEqual(Path.cwd(), self.root)

    def test_create_twice_then_delete(self) -> None:
        session = self._run(b"nnzq", include_dot_entries=False)

        self.assertFalse((self.root / "new_directory").exists())
        self.assertEqual(session.snapshot.names(), [])
        self.assertTrue(any("cannot create" in frame for frame in self.frames))

    def test_launch_non_directory_entry(self) -> None:
        (self.root / "run.sh").write_text("#!/bin/sh\n", encoding="utf-8")

        self._run(b"eq", include_dot_entries=False)

        self.assertEqual(self.launched, ["run.sh"])
        self.assertIn("run.sh exited with status 0", self.frames[-1])

    def test_every_iteration_renders_a_full_frame(self) -> None:
        (self.root / "a").write_text("", encoding="utf-8")

        self._run(b"xyzq", include_dot_entries=False)

        self.assertTrue(all(frame.startswith(CLEAR_SCREEN) for frame in self.frames))
        self.assertEqual(len(self.frames), 4)


if __name__ == "__main__":
    unittest.main()
