"""Filesystem queries backing the per-entry report.

Every helper here is non-fatal: resolution, listing and stat failures are
mapped to fallback values or returned errors so one bad path never aborts a
run.
"""

from __future__ import annotations

import enum
import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_FILE_ATTRIBUTE_HIDDEN = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2)


class EntryKind(enum.Enum):
    """Classification of one path at report time."""

    DIRECTORY = "directory"
    FILE = "file"
    NEITHER = "neither"


@dataclass(frozen=True)
class DirectoryChild:
    """One immediate directory child and its observed metadata."""

    name: str
    path: Path
    kind: EntryKind
    file_size: int = 0


@dataclass(frozen=True)
class DirectoryContents:
    """Counts for the immediate children of one directory."""

    files: int = 0
    total_bytes: int = 0
    subfolders: int = 0


def safe_resolve(path: Path) -> Path:
    """Return the canonical form of ``path``, or ``path`` itself on failure."""
    try:
        return path.resolve(strict=False)
    except (OSError, RuntimeError, ValueError) as exc:
        logger.debug("could not resolve %s: %s", path, exc)
        return path


def classify(path: Path) -> EntryKind:
    """Classify ``path`` following symlinks; directory-ness is checked first.

    Any stat failure (missing, permission-hidden, over-long name) means
    ``NEITHER``.
    """
    try:
        if path.is_dir():
            return EntryKind.DIRECTORY
        if path.is_file():
            return EntryKind.FILE
    except (OSError, ValueError) as exc:
        logger.debug("could not classify %s: %s", path, exc)
    return EntryKind.NEITHER


def _classify_dir_entry(entry: os.DirEntry) -> EntryKind:
    try:
        if entry.is_dir():
            return EntryKind.DIRECTORY
        if entry.is_file():
            return EntryKind.FILE
    except OSError:
        pass
    return EntryKind.NEITHER


def list_directory_children(directory: Path) -> tuple[list[DirectoryChild], Exception | None]:
    """List immediate children in enumeration order, unsorted and unfiltered.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be enumerated, which callers must keep distinct from an
    empty directory.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                kind = _classify_dir_entry(entry)
                size = 0
                if kind is EntryKind.FILE:
                    try:
                        size = int(entry.stat().st_size)
                    except OSError:
                        kind = EntryKind.NEITHER
                children.append(
                    DirectoryChild(
                        name=entry.name,
                        path=Path(entry.path),
                        kind=kind,
                        file_size=size,
                    )
                )
    except OSError as exc:
        logger.debug("could not list %s: %s", directory, exc)
        return [], exc
    return children, None


def summarize_directory(children: list[DirectoryChild]) -> DirectoryContents:
    """Count child files (with their byte total) and child subfolders."""
    files = 0
    total_bytes = 0
    subfolders = 0
    for child in children:
        if child.kind is EntryKind.DIRECTORY:
            subfolders += 1
        elif child.kind is EntryKind.FILE:
            files += 1
            total_bytes += child.file_size
    return DirectoryContents(files=files, total_bytes=total_bytes, subfolders=subfolders)


def _safe_stat(path: Path) -> os.stat_result | None:
    try:
        return path.stat()
    except OSError as exc:
        logger.debug("could not stat %s: %s", path, exc)
        return None


def file_size(path: Path) -> int:
    """Return the size of ``path`` in bytes, or ``0`` on stat failure."""
    st = _safe_stat(path)
    return int(st.st_size) if st is not None else 0


def modified_millis(path: Path) -> int:
    """Return the last-modified instant as epoch milliseconds (``0`` on failure)."""
    st = _safe_stat(path)
    if st is None:
        return 0
    return int(st.st_mtime_ns) // 1_000_000


def is_hidden(path: Path) -> bool:
    """Hidden attribute on Windows, dot-prefixed name elsewhere."""
    if os.name == "nt":
        st = _safe_stat(path)
        attributes = getattr(st, "st_file_attributes", 0) if st is not None else 0
        return bool(attributes & _FILE_ATTRIBUTE_HIDDEN)
    return path.name.startswith(".")


def is_readable(path: Path) -> bool:
    return os.access(path, os.R_OK)


def is_writable(path: Path) -> bool:
    return os.access(path, os.W_OK)


__all__ = [
    "EntryKind",
    "DirectoryChild",
    "DirectoryContents",
    "safe_resolve",
    "classify",
    "list_directory_children",
    "summarize_directory",
    "file_size",
    "modified_millis",
    "is_hidden",
    "is_readable",
    "is_writable",
]
