"""Per-entry inspection and report printing.

``EntryInspector`` turns one path argument into a report block on its output
stream and records what it found in a ``RunTotals`` passed in by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from typing import TextIO

from . import fs
from .fs import EntryKind
from .formatting import (
    DEFAULT_DST_PATTERN,
    DEFAULT_LOCAL_PATTERN,
    DEFAULT_UTC_PATTERN,
    DateFormatter,
    Zone,
    current_millis,
    dst_adjusted_millis,
    group_digits,
    hex_string,
)

LABEL_WIDTH = 16
PROTECTED_CONTENTS = "unknown, protected by system"


@dataclass
class RunTotals:
    """Files and folders found across one run."""

    files: int = 0
    folders: int = 0

    def found_anything(self) -> bool:
        return self.files > 0 or self.folders > 0

    def summary(self) -> str:
        return f"Found {self.files} files and {self.folders} folders."


def report_line(label: str, value: object) -> str:
    return f"{label:>{LABEL_WIDTH}}: {value}"


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


class EntryInspector:
    """Print metadata reports for files and folders."""

    def __init__(
        self,
        out: TextIO,
        utc_pattern: str = DEFAULT_UTC_PATTERN,
        local_pattern: str = DEFAULT_LOCAL_PATTERN,
        dst_pattern: str = DEFAULT_DST_PATTERN,
        local_tz: tzinfo | None = None,
        now_millis: int | None = None,
    ) -> None:
        self.out = out
        self.local_tz = local_tz
        self.now_millis = now_millis
        self.utc_formatter = DateFormatter(Zone.UTC, utc_pattern)
        self.local_formatter = DateFormatter(Zone.LOCAL, local_pattern, local_tz)
        self.dst_formatter = DateFormatter(Zone.LOCAL, dst_pattern, local_tz)

    def _print(self, line: str = "") -> None:
        self.out.write(line + "\n")

    def _line(self, label: str, value: object) -> None:
        self._print(report_line(label, value))

    def inspect(self, given_name: str, totals: RunTotals) -> EntryKind:
        """Report on ``given_name`` and update ``totals``; never raises for bad paths."""
        given = Path(given_name)
        target = fs.safe_resolve(given)
        kind = fs.classify(target)

        self._print()
        if kind is EntryKind.DIRECTORY:
            totals.folders += 1
            self._report_directory(target)
        elif kind is EntryKind.FILE:
            totals.files += 1
            self._report_file(target)
        else:
            self._print(f"Not a file or folder: {given_name}")
        return kind

    def _report_directory(self, target: Path) -> None:
        self._line("folder name", target.name)
        self._line("full path", target)

        children, scan_error = fs.list_directory_children(target)
        if scan_error is not None:
            self._line("contents", PROTECTED_CONTENTS)
            return

        contents = fs.summarize_directory(children)
        self._line(
            "contains",
            f"{group_digits(contents.files)} files with "
            f"{group_digits(contents.total_bytes)} bytes and "
            f"{group_digits(contents.subfolders)} subfolders.",
        )
        self.report_timestamp(target)

    def _report_file(self, target: Path) -> None:
        size = fs.file_size(target)
        self._line("file name", target.name)
        self._line("in folder", target.parent)
        self._line("size (bytes)", f"{group_digits(size)} or 0x{hex_string(size)}")
        self.report_timestamp(target)

    def report_timestamp(self, target: Path) -> None:
        """Print the modification instant in every rendering, then attributes.

        An instant of exactly zero often means the system is withholding the
        real time; it is printed like any other value.
        """
        millis = fs.modified_millis(target)
        now = self.now_millis if self.now_millis is not None else current_millis()
        adjusted = dst_adjusted_millis(millis, self.local_tz, now)

        self._line("time stamp (ms)", group_digits(millis))
        self._line("UTC time zone", self.utc_formatter.format(millis))
        self._line("local time zone", self.local_formatter.format(millis))
        self._line("adjust for DST", self.dst_formatter.format(adjusted))
        self._line(
            "attributes",
            f"hidden {_bool_text(fs.is_hidden(target))}, "
            f"read {_bool_text(fs.is_readable(target))}, "
            f"write {_bool_text(fs.is_writable(target))}",
        )


__all__ = [
    "LABEL_WIDTH",
    "PROTECTED_CONTENTS",
    "RunTotals",
    "EntryInspector",
    "report_line",
]
