"""Tests for per-entry reports and run totals."""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from datetime import timedelta, timezone
from pathlib import Path
from unittest import mock

from showfileinfo.fs import EntryKind
from showfileinfo.inspector import PROTECTED_CONTENTS, EntryInspector, RunTotals, report_line

CEST = timezone(timedelta(hours=2), "CEST")
STAMP_NS = 1_660_140_000_123_000_000


def _inspector(out: io.StringIO) -> EntryInspector:
    return EntryInspector(out, local_tz=CEST, now_millis=0)


class EntryInspectorTests(unittest.TestCase):
    def test_file_report_counts_one_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "report.bin"
            target.write_bytes(b"x" * 300)
            os.utime(target, ns=(STAMP_NS, STAMP_NS))

            out = io.StringIO()
            totals = RunTotals()
            kind = _inspector(out).inspect(str(target), totals)

            self.assertIs(kind, EntryKind.FILE)
            self.assertEqual(totals, RunTotals(files=1, folders=0))
            lines = out.getvalue().splitlines()
            self.assertEqual(lines[0], "")
            self.assertIn(report_line("file name", "report.bin"), lines)
            self.assertIn(report_line("in folder", root), lines)
            self.assertIn(report_line("size (bytes)", "300 or 0x12c"), lines)
            self.assertIn(report_line("UTC time zone", "2022-08-10 14:00:00.123 UTC"), lines)
            self.assertIn(report_line("local time zone", "2022-08-10 16:00:00.123 CEST (+0200)"), lines)
            self.assertIn(report_line("adjust for DST", "2022-08-10 16:00:00.123"), lines)
            self.assertTrue(lines[-1].strip().startswith("attributes: hidden false, read true, write true"))

    def test_labels_are_right_aligned(self) -> None:
        self.assertEqual(report_line("file name", "a.txt"), "       file name: a.txt")
        self.assertEqual(report_line("time stamp (ms)", "0"), " time stamp (ms): 0")

    def test_directory_report_summarizes_immediate_children(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            for name, size in (("a.txt", 10), ("b.txt", 20), ("c.txt", 30)):
                (root / name).write_bytes(b"x" * size)
            (root / "sub").mkdir()

            out = io.StringIO()
            totals = RunTotals()
            kind = _inspector(out).inspect(str(root), totals)

            self.assertIs(kind, EntryKind.DIRECTORY)
            self.assertEqual(totals, RunTotals(files=0, folders=1))
            text = out.getvalue()
            self.assertIn("contains: 3 files with 60 bytes and 1 subfolders.", text)
            self.assertIn(report_line("folder name", root.name), text)
            self.assertIn(report_line("full path", root), text)
            self.assertIn("UTC time zone: ", text)

    def test_protected_directory_skips_summary_and_timestamps(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            out = io.StringIO()
            totals = RunTotals()
            with mock.patch("showfileinfo.fs.os.scandir", side_effect=PermissionError("denied")):
                _inspector(out).inspect(str(root), totals)

            text = out.getvalue()
            self.assertEqual(totals.folders, 1)
            self.assertIn(report_line("contents", PROTECTED_CONTENTS), text)
            self.assertNotIn("contains:", text)
            self.assertNotIn("time stamp (ms)", text)

    def test_missing_path_echoes_original_argument(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            given = os.path.join(tmp, "Missing", "..", "Nope.TXT")
            out = io.StringIO()
            totals = RunTotals()
            kind = _inspector(out).inspect(given, totals)

            self.assertIs(kind, EntryKind.NEITHER)
            self.assertEqual(totals, RunTotals())
            self.assertEqual(out.getvalue(), f"\nNot a file or folder: {given}\n")

    def test_relative_path_is_reported_canonically(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            (root / "sub" / "f.txt").write_text("hi", encoding="utf-8")
            previous_cwd = Path.cwd()
            try:
                os.chdir(root / "sub")
                out = io.StringIO()
                _inspector(out).inspect(os.path.join("..", "sub", "f.txt"), RunTotals())
            finally:
                os.chdir(previous_cwd)

            self.assertIn(report_line("in folder", root / "sub"), out.getvalue())


class RunTotalsTests(unittest.TestCase):
    def test_summary_line(self) -> None:
        self.assertEqual(RunTotals(files=2, folders=1).summary(), "Found 2 files and 1 folders.")

    def test_found_anything(self) -> None:
        self.assertFalse(RunTotals().found_anything())
        self.assertTrue(RunTotals(folders=1).found_anything())


if __name__ == "__main__":
    unittest.main()
