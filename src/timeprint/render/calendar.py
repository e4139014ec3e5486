"""Calendar format codes rendered through the platform's strftime."""

from __future__ import annotations

import time

from ..core.types import CalendarTime

# Codes the template renderer hands to a calendar formatter
CALENDAR_CODES = frozenset("aAbBcCdDeFgGhHIjmMnprRStTuUVwWxXyYzZ%")

# Codes whose leading zeros the # flag removes
UNPADDED_CODES = frozenset("dHIjmMSUwWyY")

# Long forms selected by the # flag; {day} is the unpadded day of month
LONG_FORMS = {
    "c": "%A, %B {day}, %Y %H:%M:%S",
    "x": "%A, %B {day}, %Y",
}


class StrftimeFormatter:
    """Formats ``%X`` and ``%#X`` tokens with ``time.strftime``.

    Locale-dependent codes (``%a``, ``%c``, ``%x``, ...) follow the process
    locale. The ``#`` flag is handled here rather than passed through,
    because platforms disagree on what it means.
    """

    def format(self, token: str, calendar: CalendarTime) -> str:
        code = token[-1]
        st = calendar.to_struct_time()
        if token.startswith("%#"):
            if code in LONG_FORMS:
                return time.strftime(LONG_FORMS[code].format(day=calendar.day), st)
            if code in UNPADDED_CODES:
                return time.strftime("%" + code, st).lstrip("0") or "0"
        return time.strftime("%" + code, st)
