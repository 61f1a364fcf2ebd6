"""Error types raised by the habitrack core.

Every error derives from ``HabitrackError`` so the CLI can recover all of
them at a single boundary. Each also derives from the closest built-in
exception, so library callers can catch ``KeyError``, ``ValueError`` or
``OSError`` without importing this module.
"""
from __future__ import annotations

from datetime import date
from pathlib import Path


class HabitrackError(Exception):
    """Base class for every error reported by the habitrack core."""


# ---------------------------------------------------------------------------
# Tracker errors
# ---------------------------------------------------------------------------


class UnknownHabitError(HabitrackError, KeyError):
    """Raised when an operation names a habit that is not tracked."""

    def __init__(self, name: str) -> None:
        self.habit_name = name
        super().__init__(
            f"Habit {name!r} not found. Add it first with 'habitrack add {name}'."
        )

    # KeyError.__str__ would repr() the message.
    def __str__(self) -> str:
        return str(self.args[0])


class DuplicateHabitError(HabitrackError, ValueError):
    """Raised when adding a habit whose name is already tracked."""

    def __init__(self, name: str) -> None:
        self.habit_name = name
        super().__init__(f"Habit {name!r} already exists.")


class AlreadyDoneError(HabitrackError, ValueError):
    """Raised when a habit is marked done twice on the same day."""

    def __init__(self, name: str, day: date) -> None:
        self.habit_name = name
        self.day = day
        super().__init__(
            f"Habit {name!r} is already marked done for {day.isoformat()}."
        )


class InvalidHabitNameError(HabitrackError, ValueError):
    """Raised when a habit name is empty or whitespace only."""

    def __init__(self, name: str) -> None:
        self.habit_name = name
        super().__init__(f"Invalid habit name {name!r}: names must not be blank.")


# ---------------------------------------------------------------------------
# Store errors
# ---------------------------------------------------------------------------


class CorruptDataError(HabitrackError, ValueError):
    """Raised when the backing file exists but does not hold a tracker.

    Parameters
    ----------
    message:
        What is wrong with the document.
    path:
        The offending file, when the data came from disk.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        self.detail = message
        where = f" in {path}" if path is not None else ""
        super().__init__(f"Corrupt habit data{where}: {message}")


class StoreIOError(HabitrackError, OSError):
    """Raised when the backing file cannot be read or written.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, action: str, path: Path, reason: str) -> None:
        self.action = action
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot {action} {path}: {reason}")
