"""Tests for config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from mediatree import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_or_malformed_config_loads_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("mediatree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{oops", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_retention_defaults_and_sanitizes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("mediatree.config.CONFIG_PATH", config_path):
                default_seconds = config.DEFAULT_SNAPSHOT_RETENTION_HOURS * 3600
                self.assertEqual(config.load_snapshot_retention_seconds(), default_seconds)

                for bad in (-1, 0, True, "12"):
                    config.save_config({"snapshot_retention_hours": bad})
                    self.assertEqual(config.load_snapshot_retention_seconds(), default_seconds)

                config.save_config({"snapshot_retention_hours": 1.5})
                self.assertEqual(config.load_snapshot_retention_seconds(), 5400.0)

    def test_show_hidden_round_trip_and_strict_bool(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("mediatree.config.CONFIG_PATH", config_path):
                self.assertFalse(config.load_show_hidden())
                self.assertTrue(config.save_show_hidden(True))
                self.assertTrue(config.load_show_hidden())
                self.assertTrue(config.save_show_hidden(True))
                config.save_config({"show_hidden": "yes"})
                self.assertFalse(config.load_show_hidden())

    def test_save_config_reports_failure(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("mediatree.config.CONFIG_PATH", blocker / "config.json"):
                self.assertFalse(config.save_config({"show_hidden": True}))
                self.assertFalse(config.save_show_hidden(True))


if __name__ == "__main__":
    unittest.main()
