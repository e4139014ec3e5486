"""Parse ISO-8601-style explicit times into local calendar times.

Accepted forms are ``<date>``, ``<time>``, and ``<date>T<time>``.

Dates, in priority order::

    --MM-DD       month and day of the current year
    YYYY-MM-DD    full date (dashes optional)
    YYYY-DDD      year and ordinal day
    YYYY-MM       year and month (dash required)
    YYYY          year only

Times, in priority order, each optionally followed by a timezone of ``Z``,
``+HH:MM``, or ``+HH`` (either sign, colons optional)::

    HH:MM:SS
    HH:MM
    HH

Fields the text doesn't mention keep their values from the current local
time. A string without a ``T`` is tried as a time before it is tried as a
date, so ``2018`` reads as 20:18 today, not as the year 2018.

``Z`` and explicit offsets are converted to local time with the offset in
effect *now*, not on the parsed date. When the two dates fall on different
sides of a daylight saving change, the result is off by the DST shift: in
summer under PST8PDT, ``2018-02-25T04:58:46Z`` resolves one hour late.
"""

from __future__ import annotations

from ..core.errors import PreEpochDateError, UnrecognizedTimeError
from ..core.types import CalendarTime, TimeZoneOffset
from .matcher import match, match_all

DATE_FORMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("==##-##", ("month", "day")),
    ("####-##-##", ("year", "month", "day")),
    ("####-###", ("year", "yearday")),
    ("####=##", ("year", "month")),
    ("####", ("year",)),
)

TIME_FORMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("##:##:##", ("hour", "minute", "second")),
    ("##:##", ("hour", "minute")),
    ("##", ("hour",)),
)

ZONE_FORMS = ("+##:##", "+##")

EPOCH_YEAR = 1970


def parse_date(text: str) -> dict[str, int] | None:
    """Return the date fields named by *text*, or None if it isn't a date."""
    for pattern, names in DATE_FORMS:
        captures = match_all(pattern, text)
        if captures is None:
            continue
        fields = dict(zip(names, captures))
        if "yearday" in fields:
            # January 1 plus (yearday - 1) days; normalization finds the month
            fields["month"] = 1
            fields["day"] = fields.pop("yearday")
        return fields
    return None


def parse_time(
    text: str, local_offset: TimeZoneOffset
) -> tuple[dict[str, int], int] | None:
    """Return ``(fields, shift)`` for a time of day, or None.

    *shift* is the number of seconds to add to the parsed wall-clock value
    to express it in local time.
    """
    for pattern, names in TIME_FORMS:
        result = match(pattern, text)
        if result is None:
            continue
        end, captures = result
        shift = _parse_zone(text[end:], local_offset)
        if shift is not None:
            return dict(zip(names, captures)), shift
    return None


def _parse_zone(text: str, local_offset: TimeZoneOffset) -> int | None:
    if not text:
        return 0
    if text == "Z":
        return local_offset.seconds
    for pattern in ZONE_FORMS:
        captures = match_all(pattern, text)
        if captures is None:
            continue
        sign, hours, *rest = captures
        minutes = rest[0] if rest else 0
        stated = sign * (hours * 3600 + minutes * 60)
        return local_offset.seconds - stated
    return None


def parse_explicit(
    text: str, current_local: CalendarTime, local_offset: TimeZoneOffset
) -> CalendarTime:
    """Parse *text* into a normalized local CalendarTime.

    Args:
        text: The explicit time, e.g. ``2018-02-24T20:58:46-0800``.
        current_local: Supplies every field *text* leaves unspecified.
        local_offset: The local timezone's offset from UTC, used to convert
            times given in UTC or with an explicit offset.

    Raises:
        UnrecognizedTimeError: *text* matches none of the accepted forms.
        PreEpochDateError: The result falls before 1970.
    """
    fields = {
        "year": current_local.year,
        "month": current_local.month,
        "day": current_local.day,
        "hour": current_local.hour,
        "minute": current_local.minute,
        "second": current_local.second,
    }
    shift = 0

    date_text, separator, time_text = text.partition("T")
    if separator:
        date_fields = parse_date(date_text)
        time_result = parse_time(time_text, local_offset)
        if date_fields is None or time_result is None:
            raise UnrecognizedTimeError(text)
        fields.update(date_fields)
        fields.update(time_result[0])
        shift = time_result[1]
    else:
        time_result = parse_time(text, local_offset)
        if time_result is not None:
            fields.update(time_result[0])
            shift = time_result[1]
        else:
            date_fields = parse_date(text)
            if date_fields is None:
                raise UnrecognizedTimeError(text)
            fields.update(date_fields)

    fields["second"] += shift
    try:
        calendar = CalendarTime.normalized(**fields)
    except (ValueError, OverflowError):
        if fields["year"] < EPOCH_YEAR:
            raise PreEpochDateError(text) from None
        raise UnrecognizedTimeError(text) from None

    if calendar.year < EPOCH_YEAR:
        raise PreEpochDateError(text)
    return calendar
