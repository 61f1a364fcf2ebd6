"""Streak computation over a log of completion dates.

A streak is a run of consecutive calendar days that each have a
completion. Both functions work on ``datetime.date`` values and step with
``timedelta(days=1)``, so month and year boundaries need no special
handling.
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta
from typing import Final

ONE_DAY: Final[timedelta] = timedelta(days=1)


def current_streak(completions: Iterable[date], today: date) -> int:
    """Count consecutive completed days ending at ``today``.

    The walk starts at ``today`` and moves back one day at a time until
    it reaches a day with no completion. A habit not yet done today
    therefore has a current streak of 0, even if yesterday was done.
    Completions dated after ``today`` are ignored.

    Parameters
    ----------
    completions:
        Completion dates in any order.
    today:
        The reference date the streak must end on.

    Returns
    -------
    int
        Length of the run ending at ``today``.
    """
    done = {d for d in completions if d <= today}
    streak = 0
    cursor = today
    while cursor in done:
        streak += 1
        cursor -= ONE_DAY
    return streak


def longest_streak(completions: Iterable[date]) -> int:
    """Return the length of the longest run of consecutive days."""
    ordered = sorted(set(completions))
    if not ordered:
        return 0

    best = run = 1
    for previous, current in zip(ordered, ordered[1:]):
        if current - previous == ONE_DAY:
            run += 1
            best = max(best, run)
        else:
            run = 1
    return best
