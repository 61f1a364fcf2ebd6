"""Tracker module.

Exports the ``Tracker`` class and the streak functions it is built on.
"""
from __future__ import annotations

from habitrack.tracker.streaks import current_streak, longest_streak
from habitrack.tracker.tracker import Tracker

__all__ = [
    "Tracker",
    "current_streak",
    "longest_streak",
]
