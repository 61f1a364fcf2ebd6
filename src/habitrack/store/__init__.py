"""Store module.

Exports ``HabitStore`` (the backing file) and ``TrackerSerializer``
(the document format it reads and writes).
"""
from __future__ import annotations

from habitrack.store.serializer import TrackerSerializer
from habitrack.store.store import DEFAULT_DATA_FILE, HabitStore

__all__ = [
    "DEFAULT_DATA_FILE",
    "HabitStore",
    "TrackerSerializer",
]
