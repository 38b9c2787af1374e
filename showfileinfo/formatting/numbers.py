"""Digit grouping for byte counts and timestamps.

Grouping follows whatever ``LC_NUMERIC`` the process has adopted; the CLI
adopts the host's locale once at startup.
"""

from __future__ import annotations

import locale


def group_digits(value: int) -> str:
    """Format ``value`` with the current numeric locale's digit grouping.

    The POSIX "C" locale defines no grouping at all, in which case a comma
    every three digits is used instead.
    """
    conventions = locale.localeconv()
    if conventions.get("thousands_sep") and conventions.get("grouping"):
        return locale.format_string("%d", value, grouping=True)
    return f"{value:,}"


def hex_string(value: int) -> str:
    """Lower-case hex digits without prefix; negative values keep their sign."""
    return format(value, "x")


__all__ = ["group_digits", "hex_string"]
