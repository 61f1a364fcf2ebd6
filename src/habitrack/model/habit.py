"""The ``Habit`` value type and calendar-date helpers.

A ``Habit`` is a frozen dataclass: recording a completion produces a new
``Habit`` rather than mutating the existing one, so a ``Tracker`` can hand
out habits without callers being able to corrupt its log.

Completion dates are held as ``datetime.date`` objects in memory and are
only rendered as ``YYYY-MM-DD`` strings at the serialization boundary.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"

_DATE_SHAPE: Final[re.Pattern[str]] = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string into a ``date``.

    ``strptime`` alone accepts unpadded fields such as ``2024-1-5``; the
    shape check keeps the on-disk format canonical.

    Raises
    ------
    ValueError
        If ``value`` is not a zero-padded ISO calendar date.
    """
    if not _DATE_SHAPE.fullmatch(value):
        raise ValueError(f"{value!r} is not a YYYY-MM-DD date")
    return datetime.strptime(value, DATE_FORMAT).date()


def format_date(value: date) -> str:
    """Render a ``date`` as ``YYYY-MM-DD``."""
    return value.strftime(DATE_FORMAT)


@dataclass(frozen=True, slots=True)
class Habit:
    """A named recurring activity and the days it was completed.

    Parameters
    ----------
    name:
        Unique, non-blank identifier of the habit.
    completions:
        Completion dates in the order they were recorded. Never contains
        the same date twice.
    """

    name: str
    completions: tuple[date, ...] = field(default=())

    @property
    def total(self) -> int:
        """Number of recorded completions."""
        return len(self.completions)

    @property
    def last_done(self) -> date | None:
        """Most recent completion date, or ``None`` for a fresh habit."""
        return max(self.completions) if self.completions else None

    def has_completion(self, day: date) -> bool:
        """Return True if ``day`` is already recorded."""
        return day in self.completions

    def with_completion(self, day: date) -> "Habit":
        """Return a copy of this habit with ``day`` appended to the log.

        The caller is responsible for rejecting duplicates; see
        ``Tracker.mark_done``.
        """
        return Habit(name=self.name, completions=(*self.completions, day))

    def __repr__(self) -> str:
        return f"Habit({self.name!r}, total={self.total})"
