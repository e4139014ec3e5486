"""Type definitions for time resolution and rendering."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class CalendarTime:
    """A broken-down calendar time.

    Field conventions follow ``time.struct_time``: ``weekday`` is 0-6 with
    Monday as 0, ``yearday`` is 1-366, and ``isdst`` is -1 when unknown.
    ``zone`` and ``utc_offset`` are only set when the breakdown came from
    the platform clock.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    weekday: int = 0
    yearday: int = 1
    isdst: int = -1
    zone: str | None = None
    utc_offset: int | None = None

    @classmethod
    def normalized(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> CalendarTime:
        """Build a CalendarTime, carrying out-of-range fields into larger ones.

        ``month=13`` becomes January of the following year, ``day=0`` the
        last day of the previous month, ``hour=25`` 01:00 of the next day,
        and so on. Raises ValueError or OverflowError when the result falls
        outside the years 1-9999.
        """
        carry, month_index = divmod(month - 1, 12)
        base = datetime(year + carry, month_index + 1, 1)
        moment = base + timedelta(
            days=day - 1, hours=hour, minutes=minute, seconds=second
        )
        return cls.from_datetime(moment)

    @classmethod
    def from_datetime(cls, moment: datetime) -> CalendarTime:
        return cls(
            year=moment.year,
            month=moment.month,
            day=moment.day,
            hour=moment.hour,
            minute=moment.minute,
            second=moment.second,
            weekday=moment.weekday(),
            yearday=moment.timetuple().tm_yday,
        )

    @classmethod
    def from_struct_time(cls, st: time.struct_time) -> CalendarTime:
        return cls(
            year=st.tm_year,
            month=st.tm_mon,
            day=st.tm_mday,
            hour=st.tm_hour,
            minute=st.tm_min,
            second=st.tm_sec,
            weekday=st.tm_wday,
            yearday=st.tm_yday,
            isdst=st.tm_isdst,
            zone=st.tm_zone,
            utc_offset=st.tm_gmtoff,
        )

    def to_struct_time(self) -> time.struct_time:
        return time.struct_time(
            (
                self.year,
                self.month,
                self.day,
                self.hour,
                self.minute,
                self.second,
                self.weekday,
                self.yearday,
                self.isdst,
                self.zone,
                self.utc_offset,
            )
        )


@dataclass(frozen=True)
class TimeZoneOffset:
    """Local-minus-UTC offset. Both fields carry the offset's sign."""

    hours: int
    minutes: int

    @classmethod
    def from_seconds(cls, seconds: int) -> TimeZoneOffset:
        sign = -1 if seconds < 0 else 1
        hours, minutes = divmod(abs(seconds) // 60, 60)
        return cls(hours=sign * hours, minutes=sign * minutes)

    @property
    def seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60


class FileTimeKind(str, Enum):
    """Which filesystem timestamp a FileTime refers to."""

    ACCESS = "access"
    CREATION = "creation"
    MODIFICATION = "modification"


@dataclass(frozen=True)
class Now:
    """The current time, as captured once at the start of a run."""


@dataclass(frozen=True)
class ExplicitTime:
    """An ISO-8601-style time string such as ``2018-02-24T20:58:46-0800``."""

    text: str


@dataclass(frozen=True)
class FileTime:
    """One of a file's access, creation, or modification timestamps."""

    kind: FileTimeKind
    path: Path


TimeSpec = Now | ExplicitTime | FileTime


@dataclass(frozen=True)
class AbsoluteTime:
    """A single resolved instant.

    ``%_`` delta codes see the instant's seconds since the Unix epoch.
    """

    instant: int
    calendar: CalendarTime

    @property
    def delta_seconds(self) -> int:
        return self.instant


@dataclass(frozen=True)
class ElapsedTime:
    """The absolute difference between two resolved instants."""

    seconds: int
    calendar: CalendarTime
    # +1 when the first time is not earlier than the second, -1 otherwise
    ordering: int = 1

    @property
    def delta_seconds(self) -> int:
        return self.seconds


ResolvedResult = AbsoluteTime | ElapsedTime
