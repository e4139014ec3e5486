"""Per-run snapshot of the current time and local timezone offset."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .clock import SystemClock
from .types import CalendarTime, TimeZoneOffset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Context:
    """The current time as seen once, at the start of a run.

    Every ``Now`` spec in the run resolves to ``now``, so a run that uses
    the current time on both sides of a difference always yields zero.
    """

    clock: SystemClock
    now: int
    local_now: CalendarTime
    local_offset: TimeZoneOffset

    @classmethod
    def capture(
        cls, clock: SystemClock | None = None, time_zone: str | None = None
    ) -> Context:
        """Apply the optional timezone override, then sample the clock."""
        clock = clock or SystemClock()
        if time_zone:
            clock.set_timezone(time_zone)

        now = clock.now()
        ctx = cls(
            clock=clock,
            now=now,
            local_now=clock.local_breakdown(now),
            local_offset=clock.local_utc_offset(now),
        )
        logger.debug(
            "Captured now=%d (local offset %+ds)", now, ctx.local_offset.seconds
        )
        return ctx
