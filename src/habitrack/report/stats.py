"""Per-habit statistics for display.

``build_stats`` flattens a ``Tracker`` into one ``HabitStats`` row per
habit so the CLI can render a table without knowing how streaks are
computed.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from habitrack.tracker import Tracker, current_streak, longest_streak


@dataclass(frozen=True)
class HabitStats:
    """Summary of one habit as of a reference date.

    Parameters
    ----------
    name:
        Habit name.
    total:
        Number of recorded completions.
    current_streak:
        Consecutive completed days ending on the reference date.
    longest_streak:
        Longest run of consecutive completed days ever recorded.
    last_done:
        Most recent completion date, if any.
    done_today:
        Whether the reference date itself is completed.
    """

    name: str
    total: int
    current_streak: int
    longest_streak: int
    last_done: date | None
    done_today: bool


def build_stats(tracker: Tracker, today: date) -> list[HabitStats]:
    """Return one ``HabitStats`` row per habit, sorted by name."""
    rows = [
        HabitStats(
            name=habit.name,
            total=habit.total,
            current_streak=current_streak(habit.completions, today),
            longest_streak=longest_streak(habit.completions),
            last_done=habit.last_done,
            done_today=habit.has_completion(today),
        )
        for habit in tracker
    ]
    return sorted(rows, key=lambda row: row.name)
