"""Elapsed-time codes: the ``%_`` mini-language.

A delta code has the shape::

    %_ ['TD] [u[0]] U [.[N]]

``'TD``
    Numeric format. ``T`` is the thousands separator (``0`` for none) and
    ``D`` the decimal point. Without it there is no separator and the
    decimal point is ``.``.
``u``
    Next greater unit, one of ``y`` (365-day year), ``t`` (tropical year,
    365.2425 days), ``d``, ``h``, or ``m``. The elapsed seconds are taken
    modulo this unit before scaling. A following ``0`` zero-pads the result
    to the widest value the modulus allows.
``U``
    Unit, one of ``Y T D H M S``. The next greater unit must be coarser:
    ``Y`` and ``T`` take none, ``D`` takes ``t y``, ``H`` takes ``t y d``,
    ``M`` takes ``t y d h``, and ``S`` takes ``t y d h m``.
``.N``
    Decimal places (not for ``S``). A bare ``.`` picks a precision of about
    one second for the unit. With no ``.`` the value is rounded down to a
    whole number.

Examples, for 129797 seconds (1 day, 12:03:17)::

    %_S      129797
    %_H      36
    %_dH     12
    %_h0M    03
    %_D.     1.50228
    %_',.S   129,797
"""

from __future__ import annotations

from dataclasses import dataclass

from .scanner import Scanner

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
NOMINAL_YEAR = 365 * DAY
# 365 + 97/400 days: the Gregorian calendar's average year length
TROPICAL_YEAR = (365 * 400 + 97) * DAY // 400

UNIT_SECONDS = {
    "Y": NOMINAL_YEAR,
    "T": TROPICAL_YEAR,
    "D": DAY,
    "H": HOUR,
    "M": MINUTE,
    "S": 1,
}

MODULUS_SECONDS = {
    "y": NOMINAL_YEAR,
    "t": TROPICAL_YEAR,
    "d": DAY,
    "h": HOUR,
    "m": MINUTE,
}

ALLOWED_MODULI = {
    "Y": "",
    "T": "",
    "D": "ty",
    "H": "tyd",
    "M": "tydh",
    "S": "tydhm",
}

DEFAULT_PRECISION = {"Y": 8, "T": 8, "D": 5, "H": 4, "M": 2}


class DeltaFormatError(ValueError):
    """A malformed ``%_`` code. Callers echo the code text instead."""


@dataclass(frozen=True)
class DeltaFormatSpec:
    """One parsed ``%_`` code."""

    unit: str
    modulus: str | None = None
    zero_pad: bool = False
    precision: int | None = None
    thousands: str | None = None
    decimal: str = "."

    @classmethod
    def parse(cls, scanner: Scanner) -> DeltaFormatSpec:
        """Parse a delta code starting just after the ``_``.

        On success the scanner is left just past the code. On failure it is
        left wherever parsing stopped; the caller restores its own mark.

        Raises:
            DeltaFormatError: The text isn't a valid delta code.
        """
        thousands: str | None = None
        decimal = "."
        if scanner.peek() == "'":
            scanner.advance()
            thousands = scanner.advance()
            decimal = scanner.advance()
            if not decimal:
                raise DeltaFormatError("numeric format needs two characters")
            if thousands == "0":
                thousands = None

        modulus: str | None = None
        zero_pad = False
        if scanner.peek() in MODULUS_SECONDS:
            modulus = scanner.advance()
            if scanner.peek() == "0":
                scanner.advance()
                zero_pad = True

        unit = scanner.advance()
        if unit not in UNIT_SECONDS:
            raise DeltaFormatError(f"unknown unit {unit!r}")
        if modulus is not None and modulus not in ALLOWED_MODULI[unit]:
            raise DeltaFormatError(f"{modulus!r} is not a greater unit than {unit!r}")

        precision: int | None = None
        if unit != "S" and scanner.peek() == ".":
            scanner.advance()
            digits = scanner.take_digits()
            precision = int(digits) if digits else DEFAULT_PRECISION[unit]

        return cls(
            unit=unit,
            modulus=modulus,
            zero_pad=zero_pad,
            precision=precision,
            thousands=thousands,
            decimal=decimal,
        )

    def render(self, seconds: int) -> str:
        """Render *seconds* (non-negative) according to this code."""
        divisor = UNIT_SECONDS[self.unit]
        value = seconds % MODULUS_SECONDS[self.modulus] if self.modulus else seconds

        if self.precision is None:
            text = str(value // divisor)
        else:
            text = f"{value / divisor:.{self.precision}f}"

        if self.zero_pad and self.modulus:
            width = len(str((MODULUS_SECONDS[self.modulus] - 1) // divisor))
            if self.precision:
                width += 1 + self.precision
            text = text.rjust(width, "0")

        whole, point, fraction = text.partition(".")
        if self.thousands:
            whole = group_digits(whole, self.thousands)
        if point:
            return whole + self.decimal + fraction
        return whole


def group_digits(digits: str, separator: str) -> str:
    """Insert *separator* every three digits, counting from the right."""
    pos = len(digits)
    while pos > 3:
        pos -= 3
        digits = digits[:pos] + separator + digits[pos:]
    return digits


def format_delta(scanner: Scanner, seconds: int) -> str:
    """Parse the delta code at *scanner* and render *seconds* with it."""
    return DeltaFormatSpec.parse(scanner).render(seconds)
