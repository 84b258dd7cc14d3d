import unittest
from pathlib import Path

from core.config import DEFAULT_DATA_PATH, Settings, load_settings


class TestLoadSettings(unittest.TestCase):

    def test_defaults(self):
        self.assertEqual(load_settings({}), Settings())
        self.assertEqual(load_settings({}).data_path, DEFAULT_DATA_PATH)

    def test_environment_overrides(self):
        settings = load_settings({
            "STATESCORES_DATA": "/tmp/us.geojson",
            "STATESCORES_STRICT": "Yes",
            "STATESCORES_LOG_LEVEL": "debug",
        })
        self.assertEqual(settings.data_path, Path("/tmp/us.geojson"))
        self.assertTrue(settings.strict)
        self.assertEqual(settings.log_level, "DEBUG")

    def test_strict_flag_values(self):
        for value, expected in (("1", True), ("on", True), ("0", False), ("", False), ("no", False)):
            with self.subTest(value=value):
                self.assertEqual(load_settings({"STATESCORES_STRICT": value}).strict, expected)


if __name__ == "__main__":
    unittest.main(verbosity=2)
