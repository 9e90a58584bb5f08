import unittest
from unittest.mock import Mock

from tontrack_monitor.ClipboardNotifier import ClipboardNotifier
from tontrack_monitor.LogPatterns import WORLD_ID
from tontrack_monitor.MonitorContext import MonitorState
from tontrack_monitor.dataclasses import CodeEntry

MARKER = f"2024.05.01 21:15:03 Debug      -  [Behaviour] Joining {WORLD_ID}:1234"


class TestClipboardNotifier(unittest.TestCase):
    def setUp(self):
        self.clipboard = Mock()
        self.clipboard.set_text.return_value = True
        self.notifier = ClipboardNotifier(self.clipboard)
        self.state = MonitorState(Mock())

    def add_code(self, code):
        self.state.data.history.append(CodeEntry(code=code, timestamp=""))

    def deliver(self, line):
        code = self.notifier.check_line(line, self.state)
        if code is not None and self.notifier.copy(code):
            self.notifier.mark_copied(code, self.state)
        return code

    def test_no_history_no_copy(self):
        self.assertIsNone(self.deliver(MARKER))
        self.clipboard.set_text.assert_not_called()

    def test_other_lines_do_not_copy(self):
        self.add_code("1234")

        self.assertIsNone(self.deliver("2024.05.01 21:15:03 Something else"))
        self.clipboard.set_text.assert_not_called()

    def test_copies_latest_code_once(self):
        self.add_code("1111")
        self.add_code("2222")

        for _ in range(5):
            self.deliver(MARKER)

        self.clipboard.set_text.assert_called_once_with("2222")
        self.assertEqual(self.state.runtime.last_copied_code, "2222")

    def test_new_code_is_copied_again(self):
        self.add_code("1111")
        self.deliver(MARKER)

        self.add_code("2222")
        self.deliver(MARKER)

        self.assertEqual(
            [call.args[0] for call in self.clipboard.set_text.call_args_list],
            ["1111", "2222"]
        )

    def test_failed_copy_is_retried(self):
        self.add_code("1111")
        self.clipboard.set_text.return_value = False

        self.deliver(MARKER)
        self.assertIsNone(self.state.runtime.last_copied_code)

        self.clipboard.set_text.return_value = True
        self.deliver(MARKER)

        self.assertEqual(self.clipboard.set_text.call_count, 2)
        self.assertEqual(self.state.runtime.last_copied_code, "1111")

    def test_check_line_does_not_mark(self):
        self.add_code("1111")

        self.assertEqual(self.notifier.check_line(MARKER, self.state), "1111")
        self.assertEqual(self.notifier.check_line(MARKER, self.state), "1111")
        self.assertIsNone(self.state.runtime.last_copied_code)


if __name__ == "__main__":
    unittest.main()
