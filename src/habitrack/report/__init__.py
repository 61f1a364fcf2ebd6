"""Report module.

Exports ``HabitStats`` and ``build_stats``.
"""
from __future__ import annotations

from habitrack.report.stats import HabitStats, build_stats

__all__ = [
    "HabitStats",
    "build_stats",
]
