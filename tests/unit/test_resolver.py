"""Tests for resolving time specifications to instants and durations."""

import calendar
from pathlib import Path

import pytest
from conftest import NOW, FakeClock

from timeprint.core.clock import FileTimes
from timeprint.core.context import Context
from timeprint.core.errors import FileStatError, PreEpochDateError, UnrecognizedTimeError
from timeprint.core.types import (
    AbsoluteTime,
    ElapsedTime,
    ExplicitTime,
    FileTime,
    FileTimeKind,
    Now,
)
from timeprint.resolver import resolve, resolve_run

T0 = calendar.timegm((2026, 10, 15, 21, 27, 58))
LOG = Path("/var/log/build.log")


def make_ctx(offset: int = 0, now: int = NOW) -> Context:
    files = {LOG: FileTimes(access=T0 + 10, creation=T0 - 10, modification=T0)}
    return Context.capture(FakeClock(now, offset, files))


class TestResolve:
    """Tests for resolve()."""

    def test_now_is_the_snapshot(self):
        """Now resolves to the captured instant, not a fresh clock read."""
        ctx = make_ctx()
        assert resolve(Now(), ctx) == NOW
        assert resolve(Now(), ctx) == NOW
        assert ctx.clock.now_calls == 1

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (FileTimeKind.ACCESS, T0 + 10),
            (FileTimeKind.CREATION, T0 - 10),
            (FileTimeKind.MODIFICATION, T0),
        ],
    )
    def test_file_times(self, kind, expected):
        assert resolve(FileTime(kind, LOG), make_ctx()) == expected

    def test_missing_file(self):
        missing = Path("/nonexistent/file.txt")
        with pytest.raises(FileStatError) as exc_info:
            resolve(FileTime(FileTimeKind.MODIFICATION, missing), make_ctx())
        assert exc_info.value.path == missing
        assert "/nonexistent/file.txt" in str(exc_info.value)

    def test_explicit_utc(self):
        expected = calendar.timegm((2018, 2, 25, 4, 58, 46))
        assert resolve(ExplicitTime("2018-02-25T04:58:46Z"), make_ctx()) == expected

    @pytest.mark.parametrize("offset", [0, -8 * 3600, 19800])
    def test_offset_and_utc_forms_are_the_same_instant(self, offset):
        ctx = make_ctx(offset)
        a = resolve(ExplicitTime("2018-02-24T20:58:46-0800"), ctx)
        b = resolve(ExplicitTime("2018-02-25T04:58:46Z"), ctx)
        assert a == b == calendar.timegm((2018, 2, 25, 4, 58, 46))

    def test_explicit_local_time_uses_local_offset(self):
        """Times without a zone are local wall-clock times."""
        ctx = make_ctx(offset=-8 * 3600)
        instant = resolve(ExplicitTime("2018-02-24T20:58:46"), ctx)
        assert instant == calendar.timegm((2018, 2, 25, 4, 58, 46))

    def test_explicit_errors_propagate(self):
        ctx = make_ctx()
        with pytest.raises(PreEpochDateError):
            resolve(ExplicitTime("1969-12-31"), ctx)
        with pytest.raises(UnrecognizedTimeError):
            resolve(ExplicitTime("yesterday"), ctx)

    def test_not_a_spec(self):
        with pytest.raises(TypeError):
            resolve("now", make_ctx())


class TestResolveRun:
    """Tests for resolve_run()."""

    def test_single_time_is_absolute(self):
        ctx = make_ctx(offset=3600)
        result = resolve_run(ctx, Now())
        assert isinstance(result, AbsoluteTime)
        assert result.instant == NOW
        assert result.delta_seconds == NOW
        # local breakdown: 10:30:15 at UTC+1
        assert (result.calendar.hour, result.calendar.minute) == (10, 30)

    def test_file_to_now(self):
        ctx = make_ctx(now=T0 + 129797)
        result = resolve_run(ctx, FileTime(FileTimeKind.MODIFICATION, LOG), Now())
        assert isinstance(result, ElapsedTime)
        assert result.delta_seconds == 129797
        assert result.ordering == -1

    def test_elapsed_calendar_is_utc_breakdown(self):
        ctx = make_ctx(offset=-8 * 3600, now=T0 + 129797)
        result = resolve_run(ctx, Now(), FileTime(FileTimeKind.MODIFICATION, LOG))
        cal = result.calendar
        assert (cal.year, cal.month, cal.day) == (1970, 1, 2)
        assert (cal.hour, cal.minute, cal.second) == (12, 3, 17)
        assert result.ordering == 1

    def test_now_twice_is_zero(self):
        result = resolve_run(make_ctx(), Now(), Now())
        assert result.delta_seconds == 0

    def test_magnitude_is_symmetric(self):
        """Swapping the two times changes only the ordering sign."""
        ctx = make_ctx()
        a = resolve_run(ctx, ExplicitTime("2018-02-24"), ExplicitTime("2018-03-01"))
        b = resolve_run(ctx, ExplicitTime("2018-03-01"), ExplicitTime("2018-02-24"))
        assert a.delta_seconds == b.delta_seconds == 5 * 86400
        assert (a.ordering, b.ordering) == (-1, 1)

    def test_second_spec_errors_propagate(self):
        with pytest.raises(FileStatError):
            resolve_run(make_ctx(), Now(), FileTime(FileTimeKind.ACCESS, Path("/missing")))
