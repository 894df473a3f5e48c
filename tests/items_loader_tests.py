"""Unit tests for the ^-delimited catalog loader (input_loader.load_catalog).

Format reminder:
- first line is a header and is skipped
- every other non-blank line is label^cost^benefit
- wrong field count aborts the load; bad numbers/values skip the record
"""
from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from typing import List

from datatypes import Item
from errors import CatalogLoadError
from input_loader import load_catalog

SAMPLE_CATALOG = os.path.join(os.path.dirname(__file__), "..", "inputs", "catalog-1.txt")


def _write_catalog(lines: List[str]) -> tuple[Path, tempfile.TemporaryDirectory]:
    """Write ``lines`` to a temporary catalog file; returns the path and its directory handle."""
    tmpdir = tempfile.TemporaryDirectory()
    p = Path(tmpdir.name) / "catalog.txt"
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return p, tmpdir


class TestLoadCatalog(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp: List[tempfile.TemporaryDirectory] = []

    def tearDown(self) -> None:
        for t in self._tmp:
            t.cleanup()

    def _load(self, lines: List[str]) -> List[Item]:
        path, tmp = _write_catalog(lines)
        self._tmp.append(tmp)
        return load_catalog(path)

    def test_loads_records_in_file_order_skipping_header(self) -> None:
        items = self._load([
            "description^cost^benefit",
            "iron helmet^10^60",
            "steel shield^20.5^100.25",
        ])
        self.assertEqual(items, [Item("iron helmet", 10.0, 60.0), Item("steel shield", 20.5, 100.25)])

    def test_header_is_skipped_even_if_it_looks_like_data(self) -> None:
        items = self._load(["a^1^2", "b^3^4"])
        self.assertEqual([it.label for it in items], ["b"])

    def test_wrong_field_count_aborts_load(self) -> None:
        with self.assertRaises(CatalogLoadError) as ctx:
            self._load(["h^h^h", "ok^1^1", "broken^1", "later^2^2"])
        self.assertIn("line 3", str(ctx.exception))

        with self.assertRaises(CatalogLoadError):
            self._load(["h^h^h", "too^many^fields^here"])

    def test_non_numeric_record_is_skipped_with_warning(self) -> None:
        with self.assertLogs("input_loader", level="WARNING") as logs:
            items = self._load(["h^h^h", "ok^1^1", "bad^cheap^5", "also ok^2^3"])
        self.assertEqual([it.label for it in items], ["ok", "also ok"])
        self.assertTrue(any("non-numeric" in msg for msg in logs.output))

    def test_invalid_values_are_skipped(self) -> None:
        with self.assertLogs("input_loader", level="WARNING"):
            items = self._load([
                "h^h^h",
                "^1^1",          # empty label
                "free^0^5",      # cost must be > 0
                "debt^2^-1",     # benefit must be >= 0
                "good^2^0",
            ])
        self.assertEqual(items, [Item("good", 2.0, 0.0)])

    def test_infinite_values_are_skipped(self) -> None:
        with self.assertLogs("input_loader", level="WARNING"):
            items = self._load(["h^h^h", "big^inf^5", "huge^1^inf", "ok^3^4"])
        self.assertEqual(items, [Item("ok", 3.0, 4.0)])

    def test_blank_lines_ignored(self) -> None:
        items = self._load(["h^h^h", "", "a^1^1", "   ", "b^2^2"])
        self.assertEqual([it.label for it in items], ["a", "b"])

    def test_header_only_gives_empty_catalog(self) -> None:
        self.assertEqual(self._load(["description^cost^benefit"]), [])

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_catalog("nonexistent-catalog.txt")

    def test_sample_catalog_loads(self) -> None:
        items = load_catalog(SAMPLE_CATALOG)
        self.assertEqual(len(items), 80)
        for it in items:
            self.assertIsInstance(it, Item)
            self.assertGreater(it.cost, 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
