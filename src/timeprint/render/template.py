"""Render a format template against a resolved time.

Templates mix literal text with:

- backslash escapes ``\\n \\t \\b \\r \\a`` (any other escaped character
  stands for itself), unless the code character is itself a backslash;
- calendar codes such as ``%Y`` or ``%#d``, rendered by a calendar
  formatter;
- elapsed-time codes starting with ``%_`` (see :mod:`timeprint.render.delta`).

Malformed codes are copied to the output as written, so a typo in a
template never suppresses the rest of it.
"""

from __future__ import annotations

from ..core.types import CalendarTime
from .calendar import CALENDAR_CODES, StrftimeFormatter
from .delta import DeltaFormatError, format_delta
from .scanner import Scanner

ESCAPES = {
    "n": "\n",
    "t": "\t",
    "b": "\b",
    "r": "\r",
    "a": "\a",
}


class TemplateRenderer:
    """Expands templates for one code character and calendar formatter.

    Args:
        formatter: Object with a ``format(token, calendar)`` method. Defaults
            to :class:`StrftimeFormatter`.
        code_char: The character that introduces codes.
        weekday_truncation: Accept ``%<N>a`` for the first N characters of
            the full weekday name.
    """

    def __init__(
        self,
        formatter: StrftimeFormatter | None = None,
        code_char: str = "%",
        weekday_truncation: bool = True,
    ) -> None:
        if len(code_char) != 1:
            raise ValueError(f"Code character must be a single character, got {code_char!r}")
        self.formatter = formatter or StrftimeFormatter()
        self.code_char = code_char
        self.weekday_truncation = weekday_truncation

    def render(self, template: str, calendar: CalendarTime, delta_seconds: int) -> str:
        """Return the expanded template, terminated with a newline."""
        scanner = Scanner(template)
        out: list[str] = []
        escapes = self.code_char != "\\"

        while not scanner.at_end:
            ch = scanner.advance()
            if escapes and ch == "\\":
                out.append(self._escape(scanner))
            elif ch == self.code_char:
                out.append(self._code(scanner, calendar, delta_seconds))
            else:
                out.append(ch)

        out.append("\n")
        return "".join(out)

    def _escape(self, scanner: Scanner) -> str:
        ch = scanner.advance()
        if not ch:
            return "\\"
        return ESCAPES.get(ch, ch)

    def _code(self, scanner: Scanner, calendar: CalendarTime, delta_seconds: int) -> str:
        ch = scanner.peek()

        if ch == "_":
            scanner.advance()
            restart = scanner.mark()
            try:
                return format_delta(scanner, delta_seconds)
            except DeltaFormatError:
                scanner.reset(restart)
                return self.code_char + "_"

        if self.weekday_truncation and "1" <= ch <= "9":
            truncated = self._truncated_weekday(scanner, calendar)
            if truncated is not None:
                return truncated

        if ch == "#" and scanner.peek(1) in CALENDAR_CODES:
            scanner.advance()
            return self.formatter.format("%#" + scanner.advance(), calendar)

        if ch in CALENDAR_CODES:
            scanner.advance()
            return self.formatter.format("%" + ch, calendar)

        # Unrecognized: echo the code as written
        literal = self.code_char + scanner.advance()
        if ch == "#":
            literal += scanner.advance()
        return literal

    def _truncated_weekday(self, scanner: Scanner, calendar: CalendarTime) -> str | None:
        mark = scanner.mark()
        digits = scanner.take_digits()
        if scanner.peek() == "a":
            scanner.advance()
            return self.formatter.format("%A", calendar)[: int(digits)]
        scanner.reset(mark)
        return None


def render(
    template: str,
    calendar: CalendarTime,
    delta_seconds: int = 0,
    code_char: str = "%",
    formatter: StrftimeFormatter | None = None,
) -> str:
    """Render *template* with a one-off :class:`TemplateRenderer`."""
    return TemplateRenderer(formatter, code_char).render(template, calendar, delta_seconds)
