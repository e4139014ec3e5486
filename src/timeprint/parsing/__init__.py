"""Explicit ISO-8601-style time parsing."""
