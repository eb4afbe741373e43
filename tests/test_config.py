import importlib
import os
import unittest
from unittest.mock import patch


class SettingsTests(unittest.TestCase):
    def _reload_config(self):
        mod = importlib.import_module("zkcheck.config")
        return importlib.reload(mod)

    def tearDown(self) -> None:
        self._reload_config()

    def test_log_level_is_upper_cased(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "info"}):
            config = self._reload_config()

        self.assertEqual(config.settings.LOG_LEVEL, "INFO")

    def test_log_level_default(self) -> None:
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("LOG_LEVEL", None)
            config = self._reload_config()

        self.assertEqual(config.settings.LOG_LEVEL, "INFO")


if __name__ == "__main__":
    unittest.main()
