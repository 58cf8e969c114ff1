"""
Unit tests for local storage of the pasted schedule text.

Storage contract:
- Missing/invalid file -> None
- JSON schema: {"raw_text": "..."}
"""

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tests.helpers import MATH_ROW
from weekview import config
from weekview.storage import load_saved_text, save_raw_text


class TestStorage(unittest.TestCase):
    def test_load_missing_file_returns_none(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "missing.json"
            self.assertIsNone(load_saved_text(p))

    def test_save_and_load_roundtrip(self) -> None:
        # Tabs and newlines must survive unchanged
        text = MATH_ROW + "\n" + MATH_ROW
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "nested" / "saved_schedule.json"
            save_raw_text(text, p)
            self.assertEqual(load_saved_text(p), text)

            data = json.loads(p.read_text(encoding="utf-8"))
            self.assertEqual(data, {"raw_text": text})

    def test_corrupt_file_returns_none(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "saved_schedule.json"
            p.write_text("{not json", encoding="utf-8")
            self.assertIsNone(load_saved_text(p))

            p.write_text(json.dumps({"raw_text": 42}), encoding="utf-8")
            self.assertIsNone(load_saved_text(p))

            p.write_text(json.dumps(["raw_text"]), encoding="utf-8")
            self.assertIsNone(load_saved_text(p))

    def test_default_path_comes_from_config(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "default.json"
            with mock.patch.object(config, "DEFAULT_STORE_PATH", p):
                save_raw_text("hello")
                self.assertTrue(p.exists())
                self.assertEqual(load_saved_text(), "hello")


if __name__ == "__main__":
    unittest.main()
