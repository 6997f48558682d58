"""Tests for picker config defaults and the read-only user defaults file.

Ensures malformed defaults data is safely ignored on load.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filepicker import config
from filepicker.listing import AnyEntry, Folder


class PickerConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = config.PickerConfig.create()

        self.assertEqual(cfg.file_type, AnyEntry())
        self.assertIsNone(cfg.prompt)
        self.assertFalse(cfg.report)
        self.assertTrue(cfg.clear)
        self.assertIsNone(cfg.page_capacity)
        self.assertEqual(cfg.start_directory(), Path.cwd())

    def test_prompt_turns_report_on_unless_overridden(self) -> None:
        self.assertTrue(config.PickerConfig.create(prompt="Pick").report)
        self.assertFalse(config.PickerConfig.create(prompt="Pick", report=False).report)
        self.assertTrue(config.PickerConfig.create(report=True).report)

    def test_max_length_reserves_two_rows(self) -> None:
        cfg = config.PickerConfig.create(Folder(), max_length=10, initial_folder="/tmp")

        self.assertEqual(cfg.page_capacity, 12)
        self.assertEqual(cfg.start_directory(), Path("/tmp"))

    def test_non_positive_max_length_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            config.PickerConfig.create(max_length=0)


class DefaultsFileTests(unittest.TestCase):
    def _with_defaults(self, payload: str):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        config_path.write_text(payload, encoding="utf-8")
        patcher = mock.patch("filepicker.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_missing_file_yields_empty_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("filepicker.config.CONFIG_PATH", Path(tmp) / "absent.json"):
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_theme_name())
                self.assertIsNone(config.load_max_length())
                self.assertTrue(config.load_clear())

    def test_valid_values_are_loaded(self) -> None:
        self._with_defaults(json.dumps({"theme": " ocean ", "max_length": 8, "clear": False}))

        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertEqual(config.load_max_length(), 8)
        self.assertFalse(config.load_clear())

    def test_invalid_values_are_ignored(self) -> None:
        self._with_defaults(json.dumps({"theme": 3, "max_length": True, "clear": "no"}))

        self.assertIsNone(config.load_theme_name())
        self.assertIsNone(config.load_max_length())
        self.assertTrue(config.load_clear())

    def test_malformed_json_falls_back(self) -> None:
        self._with_defaults("{not json")
        self.assertEqual(config.load_config(), {})

    def test_top_level_list_falls_back(self) -> None:
        self._with_defaults("[1, 2]")
        self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
