"""Epoch-millisecond date rendering in UTC and local time.

Patterns are ``strftime`` patterns with one extension: ``%L`` expands to the
zero-padded millisecond field. Millisecond arithmetic is done on integers so
instants before 1970 and exact millisecond boundaries render without float
rounding.
"""

from __future__ import annotations

import enum
import re
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)
_PERCENT_TOKEN = re.compile(r"%[%L]")

DEFAULT_UTC_PATTERN = "%Y-%m-%d %H:%M:%S.%L UTC"
DEFAULT_LOCAL_PATTERN = "%Y-%m-%d %H:%M:%S.%L %Z (%z)"
DEFAULT_DST_PATTERN = "%Y-%m-%d %H:%M:%S.%L"


class Zone(enum.Enum):
    UTC = "utc"
    LOCAL = "local"


def current_millis() -> int:
    return time.time_ns() // 1_000_000


def millis_to_datetime(millis: int, tz: tzinfo | None = None) -> datetime:
    """Convert epoch milliseconds to an aware datetime in ``tz``.

    ``tz=None`` means the host's local time zone.
    """
    instant = EPOCH + timedelta(milliseconds=millis)
    return instant.astimezone(tz)


def _expand_millis(pattern: str, moment: datetime) -> str:
    """Replace ``%L`` with milliseconds; ``%%`` escapes are left for strftime."""
    millis = f"{moment.microsecond // 1000:03d}"
    return _PERCENT_TOKEN.sub(lambda match: millis if match.group() == "%L" else "%%", pattern)


@dataclass(frozen=True)
class DateFormatter:
    """Render epoch milliseconds with a fixed pattern in one zone.

    ``local_tz`` replaces the host zone for ``Zone.LOCAL`` when set.
    """

    zone: Zone
    pattern: str
    local_tz: tzinfo | None = None

    def zone_info(self) -> tzinfo | None:
        if self.zone is Zone.UTC:
            return timezone.utc
        return self.local_tz

    def to_datetime(self, millis: int) -> datetime:
        return millis_to_datetime(millis, self.zone_info())

    def format(self, millis: int) -> str:
        moment = self.to_datetime(millis)
        return moment.strftime(_expand_millis(self.pattern, moment))


def dst_adjusted_millis(millis: int, local_tz: tzinfo | None = None, now_millis: int | None = None) -> int:
    """Shift ``millis`` by the difference between its UTC offset and today's.

    Some systems (notably Windows) present stored file times using the
    daylight saving rule in effect *now* rather than the rule in effect at
    the recorded instant. Subtracting ``offset(instant) - offset(now)``
    mimics that presentation. This is a best-effort heuristic: it is only
    meaningful for local renderings and will drift whenever the host or the
    runtime changes how it applies time-zone rules.
    """
    if now_millis is None:
        now_millis = current_millis()
    offset_then = millis_to_datetime(millis, local_tz).utcoffset() or timedelta(0)
    offset_now = millis_to_datetime(now_millis, local_tz).utcoffset() or timedelta(0)
    return millis - (offset_then - offset_now) // ONE_MILLISECOND


__all__ = [
    "EPOCH",
    "DEFAULT_UTC_PATTERN",
    "DEFAULT_LOCAL_PATTERN",
    "DEFAULT_DST_PATTERN",
    "Zone",
    "DateFormatter",
    "current_millis",
    "millis_to_datetime",
    "dst_adjusted_millis",
]
