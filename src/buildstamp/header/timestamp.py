"""Local wall-clock capture for the DATE define."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_DATE_RE = re.compile(
    r"(?P<year>\d+)-(?P<month>\d{2})-(?P<day>\d{2}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2}) "
    r"(?P<offset>-?\d+) \((?P<zone>[^)]*)\)"
)


@dataclass(frozen=True)
class BuildTimestamp:
    """A single local-time sample.

    The UTC offset and zone abbreviation are always taken from the same
    ``struct_time`` as the calendar fields, so they cannot disagree.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    utc_offset: int
    zone: str

    @classmethod
    def from_struct_time(cls, tm: time.struct_time) -> BuildTimestamp:
        return cls(
            year=tm.tm_year,
            month=tm.tm_mon,
            day=tm.tm_mday,
            hour=tm.tm_hour,
            minute=tm.tm_min,
            second=tm.tm_sec,
            utc_offset=tm.tm_gmtoff or 0,
            zone=tm.tm_zone or "",
        )

    @classmethod
    def capture(cls) -> BuildTimestamp:
        """Sample the local clock once."""
        return cls.from_struct_time(time.localtime())

    def format(self) -> str:
        """Render as ``YYYY-MM-DD hh:mm:ss <offset> (<zone>)``.

        The offset is in seconds, zero-padded to a width of four with any
        minus sign counted in the width (``0000``, ``3600``, ``-060``).
        """
        return (
            f"{self.year}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d} "
            f"{self.utc_offset:04d} ({self.zone})"
        )

    def to_datetime(self) -> datetime:
        """Return the sample as a timezone-aware datetime."""
        offset = timedelta(seconds=self.utc_offset)
        tz = timezone(offset, self.zone) if self.zone else timezone(offset)
        return datetime(
            self.year, self.month, self.day,
            self.hour, self.minute, self.second,
            tzinfo=tz,
        )

    @classmethod
    def parse(cls, text: str) -> BuildTimestamp:
        """Parse a string produced by :meth:`format`.

        Raises:
            ValueError: If *text* is not a formatted timestamp.
        """
        m = _DATE_RE.fullmatch(text)
        if not m:
            raise ValueError(f"Not a build timestamp: {text!r}")
        return cls(
            year=int(m["year"]),
            month=int(m["month"]),
            day=int(m["day"]),
            hour=int(m["hour"]),
            minute=int(m["minute"]),
            second=int(m["second"]),
            utc_offset=int(m["offset"]),
            zone=m["zone"],
        )
