"""habitrack — a personal habit tracker backed by a local JSON file.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    from datetime import date

    import habitrack

    tracker = habitrack.load("habits.json")
    tracker.add_habit("reading")
    tracker.mark_done("reading", date.today())
    habitrack.save(tracker, "habits.json")

    for row in habitrack.stats(tracker, date.today()):
        print(row.name, row.total, row.current_streak)

    habitrack.__version__
    '0.1.0'
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from datetime import date

    from habitrack.report import HabitStats
    from habitrack.tracker import Tracker


def load(path: str | Path = "habits.json") -> "Tracker":
    """Load the tracker stored at ``path``.

    Parameters
    ----------
    path:
        Backing JSON file. A missing file yields an empty tracker.

    Returns
    -------
    Tracker
        The habits recorded in the file.

    Raises
    ------
    habitrack.errors.CorruptDataError
        If the file exists but is not a valid tracker document.
    habitrack.errors.StoreIOError
        If the file exists but cannot be read.
    """
    from habitrack.store import HabitStore

    return HabitStore(path).load()


def save(tracker: "Tracker", path: str | Path = "habits.json") -> None:
    """Write ``tracker`` to ``path``, replacing the file's contents.

    Raises
    ------
    habitrack.errors.StoreIOError
        If the file cannot be written.
    """
    from habitrack.store import HabitStore

    HabitStore(path).save(tracker)


def stats(tracker: "Tracker", today: "date") -> list["HabitStats"]:
    """Summarize every habit in ``tracker`` as of ``today``.

    Returns
    -------
    list[HabitStats]
        One row per habit, sorted by name.
    """
    from habitrack.report import build_stats

    return build_stats(tracker, today)


__all__ = [
    "__version__",
    "load",
    "save",
    "stats",
]
