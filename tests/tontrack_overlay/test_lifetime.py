import unittest
from unittest.mock import Mock, patch

from tontrack_overlay import lifetime


class TestLifetime(unittest.TestCase):
    @patch("tontrack_overlay.lifetime.sys.platform", "darwin")
    def test_no_death_signal_off_linux(self):
        self.assertIsNone(lifetime.parent_death_signal())

    @patch("tontrack_overlay.lifetime.sys.platform", "linux")
    @patch("tontrack_overlay.lifetime._load_libc")
    def test_death_signal_on_linux(self, mock_load):
        libc = Mock()
        mock_load.return_value = libc

        preexec = lifetime.parent_death_signal()
        preexec()

        libc.prctl.assert_called_once_with(lifetime.PR_SET_PDEATHSIG, lifetime.signal.SIGTERM, 0, 0, 0)

    @patch("tontrack_overlay.lifetime.sys.platform", "linux")
    @patch("tontrack_overlay.lifetime._load_libc", return_value=None)
    def test_death_signal_without_libc(self, _):
        with self.assertLogs(level="WARNING"):
            self.assertIsNone(lifetime.parent_death_signal())

    @unittest.skipIf(lifetime.os.name == "nt", "job objects are used on Windows")
    def test_no_job_object_off_windows(self):
        self.assertIsNone(lifetime.assign_to_job_object(Mock()))


if __name__ == "__main__":
    unittest.main()
