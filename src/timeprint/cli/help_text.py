"""Help topic bodies for ``timeprint --help-topic``."""

from __future__ import annotations

CODES = """\
Format codes

Format templates take backslash escapes \\n (newline), \\t (tab),
\\b (backspace), \\r (carriage return) and \\a (alert). Any other escaped
character stands for itself. Backslash escapes are disabled when the code
character (-c) is itself a backslash.

    %a     Abbreviated weekday name *
    %<N>a  First N characters of the full weekday name *
    %A     Full weekday name *
    %b     Abbreviated month name *
    %B     Full month name *
    %c     Date and time representation *
    %C     Year divided by 100 and truncated to integer (00-99)
    %d     Day of month as decimal number (01-31)
    %D     Short MM/DD/YY date, equivalent to %m/%d/%y
    %e     Day of the month, space-padded ( 1-31)
    %F     Short YYYY-MM-DD date, equivalent to %Y-%m-%d
    %g     Week-based year, last two digits (00-99)
    %G     Week-based year
    %h     Abbreviated month name (same as %b) *
    %H     Hour in 24-hour format (00-23)
    %I     Hour in 12-hour format (01-12)
    %j     Day of year as decimal number (001-366)
    %m     Month as decimal number (01-12)
    %M     Minute as decimal number (00-59)
    %n     New line character (same as '\\n')
    %p     AM or PM designation
    %r     12-hour clock time *
    %R     24-hour HH:MM time, equivalent to %H:%M
    %S     Seconds as a decimal number (00-59)
    %t     Horizontal tab character (same as '\\t')
    %T     ISO 8601 time format (HH:MM:SS) equivalent to %H:%M:%S
    %u     ISO 8601 weekday as number with Monday=1 (1-7)
    %U     Week number, first Sunday = week 1 day 1 (00-53)
    %V     ISO 8601 week number (01-53)
    %w     Weekday as decimal number, Sunday = 0 (0-6)
    %W     Week of year, decimal, Monday = week 1 day 1 (00-53)
    %x     Date representation *
    %X     Time representation *
    %y     Year without century, as decimal number (00-99)
    %Y     Year with century, as decimal number
    %z     ISO 8601 offset from UTC in timezone (1 minute=1, 1 hour=100)
    %Z     Time-zone name or abbreviation, empty for unrecognized zones *
    %_...  Elapsed time (see --help-topic delta)
    %%     Percent sign

    * Locale-dependent.

The # flag changes some codes:

    %#c    Long date and time, e.g. "Tuesday, March 14, 1995 12:41:29"
    %#x    Long date, e.g. "Tuesday, March 14, 1995"
    %#d, %#H, %#I, %#j, %#m, %#M, %#S, %#U, %#w, %#W, %#y, %#Y
           Remove any leading zeros.

It is ignored for all other codes. Unrecognized codes are printed as written.
"""

DELTA = """\
Elapsed time codes

    %_['TD][u[0]]U[.[N]]

'TD   Optional numeric format: T is the thousands separator (0 for none)
      and D the decimal point. The default is no separator and '.'.

u     Optional next greater unit: y (365-day year), t (tropical year of
      365.2425 days), d (day), h (hour), m (minute). The elapsed time is
      taken modulo this unit. A trailing 0 zero-pads the result.

U     Unit: Y (year), T (tropical year), D (day), H (hour), M (minute),
      S (second). D allows t/y; H allows t/y/d; M allows t/y/d/h;
      S allows t/y/d/h/m. Y and T allow none.

.N    Decimal places (not for S). A bare '.' picks about one second of
      precision. Without '.' the value is rounded down.

With one time, elapsed codes measure from 1970-01-01 00:00:00 UTC. With two
times they measure the difference between them.

    %_S        Total seconds                   129797
    %_H        Total whole hours               36
    %_D.       Total days                      1.50228
    %_dH:%_h0M Hours and minutes of the day    12:03
    %_',.S     Seconds with separators         129,797
"""

TIME = """\
Time specifications

    -n, --now               The current time (the default)
    -t, --time TIME         An explicit time, see below
    -a, --access-time FILE  A file's last access time
    -r, --creation-time FILE
                            A file's creation time
    -m, --mod-time FILE     A file's last modification time

Give one time to print it, or two to print the difference between them.

Explicit times are <date>, <time>, or <date>T<time>:

    Dates:  --MM-DD  YYYY-MM-DD  YYYY-DDD  YYYY-MM  YYYY
    Times:  HH:MM:SS  HH:MM  HH  (colons optional)

A time may end with Z (UTC) or an offset such as -08:00, +0530, or -08.
Without one it is local time. Unspecified fields come from the current time.
A value without a T is read as a time before it is read as a date, so
"2018" means 20:18 today. Dates before 1970 are rejected.
"""

EXAMPLES = """\
Examples

    > timeprint
    Sunday, July 20, 2003 17:02:39

    > timeprint %H:%M:%S
    17:03:17

    > timeprint -z UTC
    Monday, July 21, 2003 00:03:47

    > timeprint Building endzones [%Y-%m-%d %#I:%M:%S %p].
    Building endzones [2003-07-20 5:06:09 PM].

    > timeprint -m timestamp.txt -n Elapsed: %_D days, %H:%M:%S
    Elapsed: 1 days, 12:03:17

    > timeprint -m timestamp.txt -n %_S seconds
    129797 seconds

    > timeprint -t 2018-02-24T20:58:46-0800 -t 2018-02-25T04:58:46Z %_S
    0
"""

TOPICS = {
    "codes": CODES,
    "delta": DELTA,
    "time": TIME,
    "examples": EXAMPLES,
}
