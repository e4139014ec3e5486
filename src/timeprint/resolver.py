"""Turn time specifications into instants and elapsed durations."""

from __future__ import annotations

import logging

from .core.context import Context
from .core.errors import FileStatError
from .core.types import (
    AbsoluteTime,
    ElapsedTime,
    ExplicitTime,
    FileTime,
    Now,
    ResolvedResult,
    TimeSpec,
)
from .parsing.explicit import parse_explicit

logger = logging.getLogger(__name__)


def resolve(spec: TimeSpec, ctx: Context) -> int:
    """Resolve one time specification to seconds since the epoch.

    Raises:
        FileStatError: A FileTime's path can't be examined.
        UnrecognizedTimeError: An ExplicitTime doesn't parse.
        PreEpochDateError: An ExplicitTime falls before 1970.
    """
    if isinstance(spec, Now):
        instant = ctx.now
    elif isinstance(spec, FileTime):
        try:
            times = ctx.clock.file_times(spec.path)
        except OSError as e:
            raise FileStatError(spec.path, e.strerror or str(e)) from e
        instant = times.get(spec.kind)
    elif isinstance(spec, ExplicitTime):
        calendar = parse_explicit(spec.text, ctx.local_now, ctx.local_offset)
        instant = ctx.clock.to_instant(calendar)
    else:
        raise TypeError(f"Not a time specification: {spec!r}")

    logger.debug("Resolved %r to %d", spec, instant)
    return instant


def resolve_run(
    ctx: Context, time1: TimeSpec, time2: TimeSpec | None = None
) -> ResolvedResult:
    """Resolve a run's one or two time specifications.

    With one spec the result is that instant, broken down in local time.
    With two it's the absolute difference in seconds; its ``calendar`` is
    that duration broken down as a UTC time, so ``%H:%M:%S`` shows the
    elapsed time of day.
    """
    t1 = resolve(time1, ctx)
    if time2 is None:
        return AbsoluteTime(instant=t1, calendar=ctx.clock.local_breakdown(t1))

    t2 = resolve(time2, ctx)
    seconds = abs(t1 - t2)
    logger.debug("Elapsed %d seconds between %d and %d", seconds, t1, t2)
    return ElapsedTime(
        seconds=seconds,
        calendar=ctx.clock.utc_breakdown(seconds),
        ordering=1 if t1 >= t2 else -1,
    )
