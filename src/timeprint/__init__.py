"""timeprint: print times, dates, and elapsed durations through a format template."""

__version__ = "3.0.0"
