import os
import tempfile
import unittest

import tomllib

from tontrack_helper import OverlayPosition

from tontrack_monitor.Settings import Settings


class TestSettings(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "settings.toml")

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_defaults_when_file_missing(self):
        settings = Settings(self.path)

        self.assertIsNone(settings.get("log_dir"))
        self.assertFalse(settings.get("auto_switch_tab"))
        self.assertFalse(settings.get("vr_overlay_enabled"))
        self.assertEqual(settings.get("vr_overlay_position"), "RightHand")
        self.assertEqual(settings.section("api")["port"], 5125)
        self.assertFalse(os.path.exists(self.path))

    def test_save_and_reload(self):
        settings = Settings(self.path)
        settings.set("log_dir", "C:/logs")
        settings.set("vr_overlay_enabled", True)
        settings.save()

        reloaded = Settings(self.path)

        self.assertEqual(reloaded.get("log_dir"), "C:/logs")
        self.assertTrue(reloaded.get("vr_overlay_enabled"))

    def test_none_values_are_not_written(self):
        settings = Settings(self.path)
        settings.save()

        with open(self.path, "rb") as f:
            raw = tomllib.load(f)

        self.assertNotIn("log_dir", raw)
        self.assertNotIn("executable", raw["overlay"])

    def test_partial_file_is_merged_with_defaults(self):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write('auto_switch_tab = true\n[overlay]\ngrace_period = 0.5\n')

        settings = Settings(self.path)

        self.assertTrue(settings.get("auto_switch_tab"))
        self.assertEqual(settings.section("overlay")["grace_period"], 0.5)
        self.assertEqual(settings.section("overlay")["log_path"], "logs/vr-overlay.log")

    def test_save_creates_parent_directory(self):
        path = os.path.join(self.tmpdir.name, "config", "settings.toml")
        Settings(path).save()

        self.assertTrue(os.path.exists(path))

    def test_overlay_position(self):
        settings = Settings(self.path)
        settings.set("vr_overlay_position", "Above")
        self.assertEqual(settings.overlay_position, OverlayPosition.ABOVE)

        settings.set("vr_overlay_position", "Nowhere")
        self.assertEqual(settings.overlay_position, OverlayPosition.RIGHT_HAND)

    def test_to_dict_is_a_copy(self):
        settings = Settings(self.path)
        copied = settings.to_dict()
        copied["api"]["port"] = 1

        self.assertEqual(settings.section("api")["port"], 5125)

    def test_section_of_scalar_is_empty(self):
        settings = Settings(self.path)

        self.assertEqual(settings.section("auto_switch_tab"), {})


if __name__ == "__main__":
    unittest.main()
