"""Tests for the browser session: key dispatch, rebuilds and error surfacing."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from pylsh.config import BrowserConfig
from pylsh.errors import AlreadyExists, DirectoryNotEmpty, LaunchFailure, TerminalModeError
from pylsh.render import EMPTY_MARKER
from pylsh.runtime import BrowserSession


class _FakeTerminal:
    def __init__(self, keys: bytes = b"", mode_error: TerminalModeError | None = None) -> None:
        self._keys = [bytes([b]) for b in keys]
        self.mode_error = mode_error
        self.reads = 0

    def read_key(self) -> bytes:
        self.reads += 1
        if not self._keys:
            return b""
        return self._keys.pop(0)


class _SessionTestCase(unittest.TestCase):
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

    def _launch(self, name: str) -> int:
        self.launched.append(name)
        return 0

    def make_session(self, keys: bytes = b"", **config_kwargs) -> BrowserSession:
        config_kwargs.setdefault("include_dot_entries", False)
        return BrowserSession(
            _FakeTerminal(keys),
            BrowserConfig(**config_kwargs),
            launch=self._launch,
            write_frame=self.frames.append,
            now=lambda: 0.0,
        )


class SessionMoveTests(_SessionTestCase):
    def test_moves_change_only_the_cursor(self) -> None:
        for name in ("a", "b", "c", "d", "e", "f"):
            (self.root / name).write_text("", encoding="utf-8")
        session = self.make_session(columns=4)
        snapshot_before = session.snapshot

        session.move_right()
        self.assertEqual(session.cursor, 1)
        session.move_down()
        self.assertEqual(session.cursor, 5)
        session.move_left()
        self.assertEqual(session.cursor, 4)
        session.move_up()
        self.assertEqual(session.cursor, 0)

        self.assertIs(session.snapshot, snapshot_before)
        self.assertEqual(sorted(p.name for p in self.root.iterdir()), ["a", "b", "c", "d", "e", "f"])

    def test_out_of_range_move_is_kept_until_render_then_clamped(self) -> None:
        (self.root / "a").write_text("", encoding="utf-8")
        (self.root / "b").write_text("", encoding="utf-8")
        session = self.make_session()

        session.move_left()
        self.assertEqual(session.cursor, -1)
        session.frame()
        self.assertEqual(session.cursor, 0)

        session.move_down()
        self.assertEqual(session.cursor, 4)
        session.frame()
        self.assertEqual(session.cursor, 1)

    def test_unbound_key_changes_nothing(self) -> None:
        (self.root / "a").write_text("", encoding="utf-8")
        session = self.make_session()

        session.handle_key(b"x")

        self.assertTrue(session.running)
        self.assertEqual(session.cursor, 0)
        self.assertEqual(session.state.status_message, "")

    def test_keys_are_case_sensitive(self) -> None:
        (self.root / "a").write_text("", encoding="utf-8")
        session = self.make_session()

        session.handle_key(b"Q")

        self.assertTrue(session.running)


class SessionActionTests(_SessionTestCase):
    def test_enter_directory_changes_cwd_rebuilds_and_resets_cursor(self) -> None:
        (self.root / "a.txt").write_text("", encoding="utf-8")
        (self.root / "sub").mkdir()
        (self.root / "sub" / "inner.txt").write_text("", encoding="utf-8")
        session = self.make_session()

        session.handle_key(b"d")
        self.assertEqual(session.cursor, 1)
        session.frame()
        session.handle_key(b"e")

        self.assertEqual(Path.cwd(), (self.root / "sub").resolve())
        self.assertEqual(session.snapshot.names(), ["inner.txt"])
        self.assertEqual(session.cursor, 0)

    def test_enter_parent_dot_entry_navigates_up(self) -> None:
        (self.root / "sub").mkdir()
        os.chdir(self.root / "sub")
        session = self.make_session(include_dot_entries=True)
        parent_index = session.snapshot.names().index("..")

        session.move(parent_index)
        session.enter()

        self.assertEqual(Path.cwd(), self.root)
        self.assertIn("sub", session.snapshot.names())

    def test_enter_non_directory_launches_without_rebuild(self) -> None:
        (self.root / "tool.sh").write_text("#!/bin/sh\n", encoding="utf-8")
        session = self.make_session()
        snapshot_before = session.snapshot

        session.enter()

        self.assertEqual(self.launched, ["tool.sh"])
        self.assertIs(session.snapshot, snapshot_before)
        self.assertIn("exited with status 0", session.state.status_message)

    def test_launch_failure_is_reported_and_loop_continues(self) -> None:
        (self.root / "data.bin").write_text("", encoding="utf-8")

        def failing_launch(name: str) -> int:
            raise LaunchFailure(f"{name}: Permission denied", name)

        session = BrowserSession(
            _FakeTerminal(b"eq"),
            BrowserConfig(include_dot_entries=False),
            launch=failing_launch,
            write_frame=self.frames.append,
            now=lambda: 0.0,
        )

        error = session.enter()

        self.assertIsInstance(error, LaunchFailure)
        self.assertIn("Permission denied", session.state.status_message)
        self.assertTrue(session.running)

    def test_interrupted_launch_is_reported_and_loop_continues(self) -> None:
        (self.root / "job.sh").write_text("#!/bin/sh\n", encoding="utf-8")

        def interrupted_launch(name: str) -> int:
            raise KeyboardInterrupt

        session = BrowserSession(
            _FakeTerminal(b"eq"),
            BrowserConfig(include_dot_entries=False),
            launch=interrupted_launch,
            write_frame=self.frames.append,
            now=lambda: 0.0,
        )

        session.run()

        self.assertFalse(session.running)
        self.assertEqual(len(self.frames), 2)
        self.assertIn("job.sh interrupted", self.frames[-1])

    def test_create_twice_fails_with_already_exists_and_adds_one_entry(self) -> None:
        (self.root / "a").write_text("", encoding="utf-8")
        session = self.make_session()
        count_before = len(session.snapshot)

        self.assertIsNone(session.create_directory())
        session.move_right()
        error = session.create_directory()

        self.assertIsInstance(error, AlreadyExists)
        self.assertEqual(len(session.snapshot), count_before + 1)
        self.assertTrue((self.root / "new_directory").is_dir())
        self.assertEqual(session.cursor, 1)
        self.assertTrue(session.running)

    def test_create_then_delete_round_trip(self) -> None:
        session = self.make_session()

        session.create_directory()
        self.assertEqual(session.snapshot.names(), ["new_directory"])
        self.assertEqual(session.cursor, 0)
        session.delete()

        self.assertEqual(session.snapshot.names(), [])
        self.assertFalse((self.root / "new_directory").exists())

    def test_delete_non_empty_directory_fails_and_keeps_snapshot(self) -> None:
        (self.root / "full").mkdir()
        (self.root / "full" / "child").write_text("", encoding="utf-8")
        (self.root / "z.txt").write_text("", encoding="utf-8")
        session = self.make_session()
        snapshot_before = session.snapshot
        session.move_right()
        session.move_left()

        error = session.delete()

        self.assertIsInstance(error, DirectoryNotEmpty)
        self.assertIs(session.snapshot, snapshot_before)
        self.assertTrue((self.root / "full" / "child").exists())
        self.assertIn("not empty", session.state.status_message)

    def test_delete_file_rebuilds_and_resets_cursor(self) -> None:
        for name in ("a", "b", "c"):
            (self.root / name).write_text("", encoding="utf-8")
        session = self.make_session()
        session.move(2)

        session.delete()

        self.assertEqual(session.snapshot.names(), ["a", "b"])
        self.assertEqual(session.cursor, 0)

    def test_delete_vanished_entry_is_reported(self) -> None:
        (self.root / "a").write_text("", encoding="utf-8")
        session = self.make_session()
        (self.root / "a").unlink()

        error = session.delete()

        self.assertIsNotNone(error)
        self.assertTrue(session.state.status_message)
        self.assertTrue(session.running)

    def test_actions_on_empty_snapshot_are_no_ops(self) -> None:
        session = self.make_session()

        self.assertIsNone(session.enter())
        self.assertIsNone(session.delete())
        self.assertEqual(self.launched, [])
        self.assertEqual(session.cursor, 0)


class SessionLoopTests(_SessionTestCase):
    def test_run_renders_before_each_read_and_stops_on_quit(self) -> None:
        (self.root / "a").write_text("", encoding="utf-8")
        (self.root / "b").write_text("", encoding="utf-8")
        session = self.make_session(keys=b"dxq")

        session.run()

        self.assertFalse(session.running)
        self.assertEqual(len(self.frames), 3)
        self.assertEqual(session.terminal.reads, 3)

    def test_end_of_input_quits(self) -> None:
        session = self.make_session(keys=b"")

        session.run()

        self.assertFalse(session.running)
        self.assertEqual(len(self.frames), 1)

    def test_empty_directory_frame_has_status_line_and_marker(self) -> None:
        session = self.make_session()

        frame = session.frame()

        self.assertIn(f"Path : {self.root}", frame)
        self.assertIn("File Count : 0", frame)
        self.assertIn(EMPTY_MARKER, frame)

    def test_error_message_shows_on_next_frame_and_clears_after_next_key(self) -> None:
        (self.root / "full").mkdir()
        (self.root / "full" / "child").write_text("", encoding="utf-8")
        session = self.make_session(keys=b"zxq")

        session.step()
        session.step()
        self.assertIn("not empty", self.frames[-1])
        session.step()

        self.assertEqual(session.state.status_message, "")
        self.assertFalse(session.running)

    def test_scan_error_is_reported_as_status(self) -> None:
        for i in range(4):
            (self.root / f"f{i}").write_text("", encoding="utf-8")

        session = self.make_session(max_entries=2)

        self.assertEqual(len(session.snapshot), 2)
        self.assertIn("exceed the limit", session.state.status_message)

    def test_non_fatal_mode_error_is_reported_once(self) -> None:
        session = BrowserSession(
            _FakeTerminal(b"xx", mode_error=TerminalModeError("cannot read terminal attributes")),
            BrowserConfig(include_dot_entries=False),
            launch=self._launch,
            write_frame=self.frames.append,
            now=lambda: 0.0,
        )

        session.step()
        self.assertIn("line mode", session.state.status_message)
        session.step()
        self.assertEqual(session.state.status_message, "")

    def test_fatal_mode_error_propagates(self) -> None:
        class _BrokenTerminal(_FakeTerminal):
            def read_key(self) -> bytes:
                raise TerminalModeError("cannot restore terminal attributes", fatal=True)

        session = BrowserSession(
            _BrokenTerminal(),
            BrowserConfig(include_dot_entries=False),
            write_frame=self.frames.append,
        )

        with self.assertRaises(TerminalModeError):
            session.run()

    def test_keyboard_interrupt_during_read_is_ignored(self) -> None:
        class _InterruptOnce(_FakeTerminal):
            def read_key(self) -> bytes:
                if self.reads == 0:
                    self.reads += 1
                    raise KeyboardInterrupt
                return super().read_key()

        session = BrowserSession(
            _InterruptOnce(b"q"),
            BrowserConfig(include_dot_entries=False),
            write_frame=self.frames.append,
        )

        session.run()

        self.assertEqual(len(self.frames), 2)
        self.assertFalse(session.running)

    def test_navigation_persists_after_session_ends(self) -> None:
        (self.root / "sub").mkdir()
        session = self.make_session(keys=b"eq")

        session.run()

        self.assertEqual(Path.cwd(), (self.root / "sub").resolve())


if __name__ == "__main__":
    unittest.main()
