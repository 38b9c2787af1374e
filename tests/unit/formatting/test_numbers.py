"""Tests for digit grouping and hex rendering."""

from __future__ import annotations

import unittest
from unittest import mock

from showfileinfo.formatting import group_digits, hex_string


def _conventions(thousands_sep: str, grouping: list[int]) -> dict[str, object]:
    return {
        "decimal_point": ".",
        "thousands_sep": thousands_sep,
        "grouping": grouping,
        "mon_thousands_sep": thousands_sep,
        "mon_grouping": grouping,
    }


class GroupDigitsTests(unittest.TestCase):
    def test_comma_grouping_locale(self) -> None:
        with mock.patch("locale.localeconv", return_value=_conventions(",", [3, 0])):
            self.assertEqual(group_digits(1234567), "1,234,567")

    def test_other_separator_follows_locale(self) -> None:
        with mock.patch("locale.localeconv", return_value=_conventions(".", [3, 0])):
            self.assertEqual(group_digits(1234567), "1.234.567")

    def test_c_locale_falls_back_to_commas(self) -> None:
        with mock.patch("locale.localeconv", return_value=_conventions("", [])):
            self.assertEqual(group_digits(1234567), "1,234,567")
            self.assertEqual(group_digits(999), "999")
            self.assertEqual(group_digits(0), "0")


class HexStringTests(unittest.TestCase):
    def test_lower_case_without_prefix(self) -> None:
        self.assertEqual(hex_string(300), "12c")
        self.assertEqual(hex_string(0), "0")
        self.assertEqual(hex_string(0xDEADBEEF), "deadbeef")


if __name__ == "__main__":
    unittest.main()
