"""Shared fakes: a deterministic clock and a calendar formatter stub."""

import calendar
import time
from dataclasses import replace
from pathlib import Path

import pytest

from timeprint.core.clock import FileTimes, SystemClock
from timeprint.core.types import CalendarTime, TimeZoneOffset


class FakeClock(SystemClock):
    """A clock with a fixed "now" and a fixed local offset from UTC."""

    def __init__(self, now: int, offset: int = 0, files: dict | None = None):
        self._now = now
        self.offset = offset
        self.files: dict[Path, FileTimes] = {Path(p): t for p, t in (files or {}).items()}
        self.now_calls = 0
        self.zones: list[str] = []

    def now(self) -> int:
        self.now_calls += 1
        return self._now

    def local_breakdown(self, instant: int) -> CalendarTime:
        cal = CalendarTime.from_struct_time(time.gmtime(instant + self.offset))
        return replace(cal, zone="TST", utc_offset=self.offset)

    def to_instant(self, cal: CalendarTime) -> int:
        fields = (cal.year, cal.month, cal.day, cal.hour, cal.minute, cal.second)
        return calendar.timegm(fields) - self.offset

    def local_utc_offset(self, instant: int) -> TimeZoneOffset:
        return TimeZoneOffset.from_seconds(self.offset)

    def file_times(self, path: Path) -> FileTimes:
        try:
            return self.files[Path(path)]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", str(path)) from None

    def set_timezone(self, zone: str) -> None:
        self.zones.append(zone)


class FakeFormatter:
    """Calendar formatter that echoes tokens, with a few fixed names."""

    NAMES = {"%A": "Saturday", "%a": "Sat", "%B": "February"}

    def __init__(self):
        self.tokens: list[str] = []

    def format(self, token: str, cal: CalendarTime) -> str:
        self.tokens.append(token)
        return self.NAMES.get(token, f"<{token}>")


# 2026-10-17 09:30:15 UTC
NOW = calendar.timegm((2026, 10, 17, 9, 30, 15))


@pytest.fixture
def fake_clock():
    return FakeClock(NOW)


@pytest.fixture
def fake_formatter():
    return FakeFormatter()


requires_tzset = pytest.mark.skipif(
    not hasattr(time, "tzset"), reason="time.tzset() is POSIX-only"
)


@pytest.fixture
def process_zone(monkeypatch):
    """Set the process timezone for a test and restore it afterwards."""

    def set_zone(zone: str) -> None:
        monkeypatch.setenv("TZ", zone)
        time.tzset()

    yield set_zone
    monkeypatch.undo()
    time.tzset()
