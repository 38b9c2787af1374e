"""Number and date formatting used by entry reports.

Kept apart from inspection logic so the number/date libraries can change
without touching how entries are examined:
- locale-aware digit grouping
- epoch-millisecond date rendering in UTC or local time
- the best-effort DST adjustment for local renderings
"""

from __future__ import annotations

from .dates import (
    DEFAULT_DST_PATTERN,
    DEFAULT_LOCAL_PATTERN,
    DEFAULT_UTC_PATTERN,
    DateFormatter,
    Zone,
    current_millis,
    dst_adjusted_millis,
    millis_to_datetime,
)
from .numbers import group_digits, hex_string

__all__ = [
    "DEFAULT_DST_PATTERN",
    "DEFAULT_LOCAL_PATTERN",
    "DEFAULT_UTC_PATTERN",
    "DateFormatter",
    "Zone",
    "current_millis",
    "dst_adjusted_millis",
    "millis_to_datetime",
    "group_digits",
    "hex_string",
]
