"""Tests for size and duration labels."""

from __future__ import annotations

import unittest

from mediatree.formatting import format_duration, format_file_size


class FormatFileSizeTests(unittest.TestCase):
    def test_small_and_unit_boundaries(self) -> None:
        self.assertEqual(format_file_size(0), "0 B")
        self.assertEqual(format_file_size(512), "512 B")
        self.assertEqual(format_file_size(1024), "1 KB")
        self.assertEqual(format_file_size(1536), "1.5 KB")
        self.assertEqual(format_file_size(1024**2), "1 MB")
        self.assertEqual(format_file_size(int(2.25 * 1024**3)), "2.25 GB")

    def test_two_decimal_rounding(self) -> None:
        self.assertEqual(format_file_size(1234567), "1.18 MB")

    def test_huge_sizes_stay_in_terabytes(self) -> None:
        self.assertEqual(format_file_size(2048 * 1024**4), "2048 TB")


class FormatDurationTests(unittest.TestCase):
    def test_minutes_and_hours(self) -> None:
        self.assertEqual(format_duration(0), "00:00")
        self.assertEqual(format_duration(65.9), "01:05")
        self.assertEqual(format_duration(3600), "01:00:00")
        self.assertEqual(format_duration(3723), "01:02:03")

    def test_missing_or_nan(self) -> None:
        self.assertEqual(format_duration(None), "00:00")
        self.assertEqual(format_duration(float("nan")), "00:00")


if __name__ == "__main__":
    unittest.main()
