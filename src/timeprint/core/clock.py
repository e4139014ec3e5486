"""Clock and filesystem timestamp access.

Thin wrapper over the ``time`` and ``os`` modules. Everything above this
layer works with whole seconds since the Unix epoch and CalendarTime
breakdowns, so tests can replace the clock with a fake.
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path

from .types import CalendarTime, FileTimeKind, TimeZoneOffset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileTimes:
    """A file's timestamps, in whole seconds since the epoch."""

    access: int
    creation: int
    modification: int

    def get(self, kind: FileTimeKind) -> int:
        if kind is FileTimeKind.ACCESS:
            return self.access
        if kind is FileTimeKind.CREATION:
            return self.creation
        return self.modification


class SystemClock:
    """Time source backed by the process clock and timezone."""

    def now(self) -> int:
        return int(time.time())

    def local_breakdown(self, instant: int) -> CalendarTime:
        return CalendarTime.from_struct_time(time.localtime(instant))

    def utc_breakdown(self, instant: int) -> CalendarTime:
        return CalendarTime.from_struct_time(time.gmtime(instant))

    def to_instant(self, calendar: CalendarTime) -> int:
        """Interpret *calendar* as local time and return the epoch seconds."""
        return int(time.mktime(calendar.to_struct_time()))

    def local_utc_offset(self, instant: int) -> TimeZoneOffset:
        return TimeZoneOffset.from_seconds(time.localtime(instant).tm_gmtoff)

    def file_times(self, path: Path) -> FileTimes:
        """Stat *path*. Raises OSError if the file can't be examined."""
        st = os.stat(path)
        # st_birthtime only exists on some platforms; st_ctime is creation time on Windows
        creation = getattr(st, "st_birthtime", st.st_ctime)
        return FileTimes(
            access=int(st.st_atime),
            creation=int(creation),
            modification=int(st.st_mtime),
        )

    def set_timezone(self, zone: str) -> None:
        """Switch the process to a legacy TZ string such as ``PST8PDT``."""
        os.environ["TZ"] = zone
        if hasattr(time, "tzset"):
            time.tzset()
        else:
            logger.warning("time.tzset() unavailable; TZ=%s may not take effect", zone)
