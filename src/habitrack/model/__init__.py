"""Habit model.

Exports the ``Habit`` value type and the date helpers used to move
completion dates to and from their ``YYYY-MM-DD`` text form.
"""
from __future__ import annotations

from habitrack.model.habit import DATE_FORMAT, Habit, format_date, parse_date

__all__ = [
    "DATE_FORMAT",
    "Habit",
    "format_date",
    "parse_date",
]
