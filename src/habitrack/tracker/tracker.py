"""In-memory habit tracker.

``Tracker`` owns the collection of habits for one backing file. It
enforces the per-habit invariants (unique names, at most one completion
per day) and derives the statistics shown by the CLI. Persistence lives
in ``habitrack.store``; a ``Tracker`` never touches the filesystem.

Usage
-----
::

    from datetime import date
    from habitrack.tracker import Tracker

    tracker = Tracker()
    tracker.add_habit("workout")
    tracker.mark_done("workout", date(2024, 1, 3))
    tracker.current_streak("workout", date(2024, 1, 3))  # 1
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date

from habitrack.errors import (
    AlreadyDoneError,
    DuplicateHabitError,
    InvalidHabitNameError,
    UnknownHabitError,
)
from habitrack.model import Habit
from habitrack.tracker import streaks

logger = logging.getLogger(__name__)


class Tracker:
    """Mapping from habit name to ``Habit``.

    Parameters
    ----------
    habits:
        Initial habits, typically produced by the store. Names must be
        unique.

    Raises
    ------
    DuplicateHabitError
        If two of the initial habits share a name.
    """

    def __init__(self, habits: Iterable[Habit] = ()) -> None:
        self._habits: dict[str, Habit] = {}
        for habit in habits:
            if habit.name in self._habits:
                raise DuplicateHabitError(habit.name)
            self._habits[habit.name] = habit

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_habit(self, name: str) -> Habit:
        """Start tracking a new habit with an empty completion log.

        Surrounding whitespace is stripped from ``name``.

        Raises
        ------
        InvalidHabitNameError
            If ``name`` is blank.
        DuplicateHabitError
            If a habit with this name already exists.
        """
        cleaned = name.strip()
        if not cleaned:
            raise InvalidHabitNameError(name)
        if cleaned in self._habits:
            raise DuplicateHabitError(cleaned)

        habit = Habit(name=cleaned)
        self._habits[cleaned] = habit
        logger.debug("Added habit %r", cleaned)
        return habit

    def mark_done(self, name: str, today: date) -> Habit:
        """Record a completion of ``name`` on ``today``.

        Returns
        -------
        Habit
            The updated habit.

        Raises
        ------
        UnknownHabitError
            If the habit is not tracked.
        AlreadyDoneError
            If ``today`` is already recorded for this habit.
        """
        habit = self.get(name)
        if habit.has_completion(today):
            raise AlreadyDoneError(habit.name, today)

        updated = habit.with_completion(today)
        self._habits[habit.name] = updated
        logger.debug("Recorded completion of %r on %s", habit.name, today.isoformat())
        return updated

    # ------------------------------------------------------------------
    # Lookup and statistics
    # ------------------------------------------------------------------

    def get(self, name: str) -> Habit:
        """Return the habit called ``name``.

        Surrounding whitespace is ignored, matching ``add_habit``.

        Raises
        ------
        UnknownHabitError
            If no such habit is tracked.
        """
        try:
            return self._habits[name.strip()]
        except KeyError:
            raise UnknownHabitError(name) from None

    def list_habits(self) -> list[str]:
        """Return all habit names in alphabetical order."""
        return sorted(self._habits)

    def total_completions(self, name: str) -> int:
        """Return how many days ``name`` has been completed."""
        return self.get(name).total

    def current_streak(self, name: str, today: date) -> int:
        """Return the run of consecutive completed days ending at ``today``.

        See ``habitrack.tracker.streaks.current_streak`` for the policy
        when ``today`` itself has not been completed.
        """
        return streaks.current_streak(self.get(name).completions, today)

    def longest_streak(self, name: str) -> int:
        """Return the longest run of consecutive completed days for ``name``."""
        return streaks.longest_streak(self.get(name).completions)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._habits

    def __len__(self) -> int:
        return len(self._habits)

    def __iter__(self) -> Iterator[Habit]:
        """Iterate over habits in insertion order."""
        return iter(self._habits.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tracker):
            return NotImplemented
        return self._habits == other._habits

    def __repr__(self) -> str:
        return f"Tracker(habits={self.list_habits()})"
