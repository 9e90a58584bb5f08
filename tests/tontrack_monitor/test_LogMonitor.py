import os
from pathlib import Path
import tempfile
import time
import unittest
from unittest.mock import Mock, patch

from tontrack_data import TerrorData
from tontrack_helper.exceptions import (
    ConfigUnavailable,
    IoTransient,
    PersistenceFailed,
    SidecarIoError,
    StateLockError,
)
from tontrack_overlay import Clear, UpdateTerrors

from tontrack_monitor.ClipboardNotifier import ClipboardNotifier
from tontrack_monitor.EventBus import EventBus, ROUND_ENDED, ROUND_STARTED, STATE_UPDATED
from tontrack_monitor.LogMonitor import (
    LogMonitor,
    find_latest_log_file,
    resolve_log_dir,
    split_lines,
)
from tontrack_monitor.LogPatterns import WORLD_ID
from tontrack_monitor.MonitorContext import MonitorContext
from tontrack_monitor.RoundStateMachine import RoundStateMachine
from tontrack_monitor.Settings import Settings
from tontrack_monitor.dataclasses import AppData

PREFIX = "2024.05.01 21:15:03 Debug      -  "
ROUND_START = PREFIX + "This round is taking place at Hotel and the round type is Classic"
KILLERS = PREFIX + "Killers have been set - 1 2 0 // Round type is Classic"
ROUND_END = PREFIX + "Verified Round End"
MARKER = f"{PREFIX}[Behaviour] Joining {WORLD_ID}:1234"


class TestSplitLines(unittest.TestCase):
    def test_complete_lines(self):
        self.assertEqual(split_lines(b"", b"a\nb\n"), (["a", "b"], b""))

    def test_trailing_partial_line(self):
        self.assertEqual(split_lines(b"", b"a\nb"), (["a"], b"b"))

    def test_pending_is_prepended(self):
        self.assertEqual(split_lines(b"par", b"tial\nnext"), (["partial"], b"next"))

    def test_crlf_and_invalid_utf8(self):
        lines, remainder = split_lines(b"", b"one\r\n\xff\n")

        self.assertEqual(lines, ["one", "�"])
        self.assertEqual(remainder, b"")


class TestLogFiles(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_latest_file_by_mtime(self):
        older = self.dir / "output_log_1.txt"
        newer = self.dir / "output_log_2.txt"
        older.write_text("a")
        newer.write_text("b")
        os.utime(older, (1000, 1000))
        os.utime(newer, (2000, 2000))

        self.assertEqual(find_latest_log_file(self.dir), newer)

    def test_tie_goes_to_first_name(self):
        for name in ("b.txt", "a.txt"):
            (self.dir / name).write_text("x")
            os.utime(self.dir / name, (1000, 1000))

        self.assertEqual(find_latest_log_file(self.dir), self.dir / "a.txt")

    def test_directories_are_ignored(self):
        (self.dir / "sub").mkdir()

        self.assertIsNone(find_latest_log_file(self.dir))

    def test_missing_directory(self):
        with self.assertRaises(IoTransient):
            find_latest_log_file(self.dir / "missing")

    def test_resolve_configured_dir(self):
        self.assertEqual(resolve_log_dir("/logs"), Path("/logs"))

    @patch("tontrack_monitor.LogMonitor.default_log_dir", return_value=None)
    def test_resolve_without_default(self, _):
        with self.assertRaises(ConfigUnavailable):
            resolve_log_dir(None)

    @patch("tontrack_monitor.LogMonitor.default_log_dir", return_value=Path("/default"))
    def test_resolve_default(self, _):
        self.assertEqual(resolve_log_dir(""), Path("/default"))


class TestLogMonitor(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name) / "logs"
        self.dir.mkdir()

        self.settings = Settings(os.path.join(self.tmpdir.name, "settings.toml"))
        self.settings.set("log_dir", str(self.dir))
        self.context = MonitorContext(self.settings, AppData())

        self.clipboard = Mock()
        self.clipboard.set_text.return_value = True
        self.store = Mock()
        self.events = EventBus()
        self.received = []
        for event in (STATE_UPDATED, ROUND_STARTED, ROUND_ENDED):
            self.events.subscribe(event, lambda payload, event=event: self.received.append(event))
        self.overlay = Mock()

        terror_data = TerrorData()
        self.monitor = LogMonitor(
            self.context,
            RoundStateMachine(terror_data),
            ClipboardNotifier(self.clipboard),
            self.store,
            self.events,
            terror_data,
            self.overlay,
            interval=0.01
        )
        self.log = self.dir / "output_log_1.txt"

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, text, path=None):
        with open(path or self.log, "ab") as f:
            f.write(text.encode("utf-8"))

    def write_lines(self, *lines, path=None):
        self.write("".join(line + "\n" for line in lines), path)

    def start_tailing(self):
        self.write_lines(PREFIX + "old line")
        self.monitor.tick()

    def sent(self):
        return [call.args[0] for call in self.overlay.send.call_args_list]

    def test_tick_without_log_dir(self):
        self.settings.set("log_dir", None)

        with patch("tontrack_monitor.LogMonitor.default_log_dir", return_value=None):
            result = self.monitor.tick()

        self.assertFalse(result.changed)

    def test_tick_with_missing_directory(self):
        self.settings.set("log_dir", str(self.dir / "missing"))

        self.assertFalse(self.monitor.tick().changed)

    def test_tick_with_empty_directory(self):
        self.assertFalse(self.monitor.tick().changed)

    def test_existing_content_is_skipped(self):
        self.write_lines(ROUND_START, PREFIX + "[START]1111[END]")

        result = self.monitor.tick()

        self.assertFalse(result.changed)
        with self.context.locked() as state:
            self.assertEqual(state.runtime.last_log_path, self.log)
            self.assertEqual(state.runtime.last_offset, self.log.stat().st_size)
            self.assertEqual(state.data.history, [])

    def test_appended_lines_are_processed(self):
        self.start_tailing()
        self.write_lines(ROUND_START, KILLERS)

        result = self.monitor.tick()

        self.assertTrue(result.round_started)
        self.assertTrue(result.killers_changed)
        snapshot = self.context.snapshot()
        self.assertTrue(snapshot.current_round.is_active)
        self.assertEqual(snapshot.current_round.killers, [1, 2])

    def test_partial_line_waits_for_newline(self):
        self.start_tailing()
        self.write(ROUND_START[:-3])

        self.assertFalse(self.monitor.tick().changed)

        self.write(ROUND_START[-3:] + "\n")
        result = self.monitor.tick()

        self.assertTrue(result.round_started)
        self.assertEqual(self.context.snapshot().current_round.round_type, "Classic")

    def test_switch_to_newer_file(self):
        self.start_tailing()
        os.utime(self.log, (1000, 1000))

        newer = self.dir / "output_log_2.txt"
        self.write_lines(ROUND_START, path=newer)
        os.utime(newer, (2000, 2000))

        self.assertFalse(self.monitor.tick().changed)

        self.write_lines(ROUND_END, path=newer)
        os.utime(newer, (3000, 3000))
        result = self.monitor.tick()

        self.assertTrue(result.round_ended)
        with self.context.locked() as state:
            self.assertEqual(state.runtime.last_log_path, newer)

    def test_truncated_file_is_reread(self):
        self.write_lines(PREFIX + "x" * 200)
        self.monitor.tick()

        self.log.write_text(ROUND_START + "\n", encoding="utf-8")
        result = self.monitor.tick()

        self.assertTrue(result.round_started)

    def test_state_updated_event_and_persistence(self):
        self.start_tailing()
        self.write_lines(PREFIX + "[START]1234[END]")

        self.monitor.tick()

        self.assertEqual(self.received, [STATE_UPDATED])
        saved = self.store.save.call_args.args[0]
        self.assertEqual(saved.history[0].code, "1234")

    def test_unchanged_poll_does_not_save(self):
        self.start_tailing()
        self.write_lines(PREFIX + "nothing interesting")

        self.monitor.tick()

        self.store.save.assert_not_called()
        self.assertEqual(self.received, [])

    def test_persistence_failure_is_logged(self):
        self.store.save.side_effect = PersistenceFailed("disk full")
        self.start_tailing()
        self.write_lines(ROUND_START)

        with self.assertLogs(level="ERROR") as logs:
            result = self.monitor.tick()

        self.assertTrue(result.changed)
        self.assertIn("disk full", logs.output[0])
        self.assertTrue(self.context.snapshot().current_round.is_active)

    def test_round_events_with_auto_switch(self):
        self.settings.set("auto_switch_tab", True)
        self.start_tailing()

        self.write_lines(ROUND_START)
        self.monitor.tick()
        self.write_lines(ROUND_END)
        self.monitor.tick()

        self.assertEqual(self.received, [STATE_UPDATED, ROUND_STARTED, STATE_UPDATED, ROUND_ENDED])

    def test_no_round_events_without_auto_switch(self):
        self.start_tailing()

        self.write_lines(ROUND_START, ROUND_END)
        self.monitor.tick()

        self.assertEqual(self.received, [STATE_UPDATED])

    def test_code_copied_once_on_marker_lines(self):
        self.start_tailing()

        self.write_lines(PREFIX + "[START]1234[END]", MARKER, MARKER)
        self.monitor.tick()
        self.write_lines(MARKER)
        self.monitor.tick()

        self.clipboard.set_text.assert_called_once_with("1234")
        with self.context.locked() as state:
            self.assertEqual(state.runtime.last_copied_code, "1234")

    def test_overlay_receives_killers_and_clear(self):
        self.settings.set("vr_overlay_enabled", True)
        self.start_tailing()

        self.write_lines(ROUND_START, KILLERS)
        self.monitor.tick()
        self.write_lines(ROUND_END)
        self.monitor.tick()

        sent = self.sent()
        self.assertEqual(len(sent), 2)
        self.assertIsInstance(sent[0], UpdateTerrors)
        self.assertEqual(
            [terror["name"] for terror in sent[0].terrors],
            ["Corrupted Toys", "Demented Spongebob"]
        )
        self.assertEqual(sent[1], Clear())

    def test_overlay_disabled_receives_nothing(self):
        self.start_tailing()

        self.write_lines(ROUND_START, KILLERS, ROUND_END)
        self.monitor.tick()

        self.overlay.send.assert_not_called()

    def test_overlay_write_failure_is_logged(self):
        self.settings.set("vr_overlay_enabled", True)
        self.overlay.send.side_effect = SidecarIoError("broken pipe")
        self.start_tailing()
        self.write_lines(ROUND_START, KILLERS)

        with self.assertLogs(level="ERROR"):
            result = self.monitor.tick()

        self.assertTrue(result.killers_changed)

    def test_overlay_is_polled_every_tick_while_enabled(self):
        self.settings.set("vr_overlay_enabled", True)

        self.monitor.tick()
        self.monitor.tick()

        self.assertEqual(self.overlay.poll.call_count, 2)

    def test_overlay_is_not_polled_while_disabled(self):
        self.monitor.tick()

        self.overlay.poll.assert_not_called()

    def test_lock_failure_skips_the_tick(self):
        self.start_tailing()
        self.write_lines(ROUND_START)

        with patch.object(self.context, "locked", side_effect=StateLockError("state lock failed")):
            with self.assertLogs(level="ERROR"):
                result = self.monitor.tick()

        self.assertFalse(result.changed)

        result = self.monitor.tick()

        self.assertTrue(result.round_started)

    def test_thread_survives_lock_failure(self):
        self.settings.set("vr_overlay_enabled", True)
        real_locked = self.context.locked
        failures = [StateLockError("state lock failed")]

        def locked():
            if failures:
                raise failures.pop()
            return real_locked()

        with patch.object(self.context, "locked", side_effect=locked):
            with self.assertLogs(level="ERROR"):
                self.monitor.start()
                time.sleep(0.1)

            self.assertTrue(self.monitor.is_alive())
            self.monitor.stop()
            self.monitor.join(timeout=1)

        self.assertGreater(self.overlay.poll.call_count, 0)

    def test_run_and_stop(self):
        self.settings.set("vr_overlay_enabled", True)

        self.monitor.start()
        time.sleep(0.05)
        self.monitor.stop()
        self.monitor.join(timeout=1)

        self.assertFalse(self.monitor.is_alive())
        self.assertGreater(self.overlay.poll.call_count, 0)


if __name__ == "__main__":
    unittest.main()
