"""File-backed persistence for a ``Tracker``.

``HabitStore`` owns one JSON file. Each CLI invocation loads it, mutates
the in-memory ``Tracker`` and saves it back in full. The file is neither
locked nor replaced atomically; only one process is expected to use it at
a time.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from habitrack.errors import CorruptDataError, StoreIOError
from habitrack.store.serializer import TrackerSerializer
from habitrack.tracker import Tracker

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE: Final[str] = "habits.json"


class HabitStore:
    """Loads and saves a ``Tracker`` at a fixed path.

    Parameters
    ----------
    path:
        Location of the backing JSON file. Defaults to ``habits.json``
        in the current working directory.
    """

    def __init__(self, path: str | Path = DEFAULT_DATA_FILE) -> None:
        self._path = Path(path)
        self._serializer = TrackerSerializer()

    @property
    def path(self) -> Path:
        """The backing file location."""
        return self._path

    @property
    def exists(self) -> bool:
        """Return True if the backing file is present."""
        return self._path.is_file()

    def load(self) -> Tracker:
        """Read the backing file into a ``Tracker``.

        A missing file is not an error: it yields an empty ``Tracker``.

        Raises
        ------
        CorruptDataError
            If the file exists but does not hold a valid tracker document.
        StoreIOError
            If the file exists but cannot be read.
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No data file at %s; starting with an empty tracker", self._path)
            return Tracker()
        except UnicodeDecodeError as exc:
            raise CorruptDataError(f"not UTF-8 text ({exc.reason})", self._path) from exc
        except OSError as exc:
            raise StoreIOError("read", self._path, exc.strerror or str(exc)) from exc

        try:
            tracker = self._serializer.from_json(text)
        except CorruptDataError as exc:
            raise CorruptDataError(exc.detail, self._path) from exc

        logger.debug("Loaded %d habit(s) from %s", len(tracker), self._path)
        return tracker

    def save(self, tracker: Tracker) -> None:
        """Write ``tracker`` to the backing file, replacing its contents.

        Missing parent directories are created.

        Raises
        ------
        StoreIOError
            If the file cannot be written.
        """
        text = self._serializer.to_json(tracker, indent=2) + "\n"
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StoreIOError("write", self._path, exc.strerror or str(exc)) from exc

        logger.debug("Saved %d habit(s) to %s", len(tracker), self._path)

    def __repr__(self) -> str:
        return f"HabitStore(path={str(self._path)!r})"
