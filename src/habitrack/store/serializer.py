"""Serialization of a ``Tracker`` to and from plain Python data.

The document shape is::

    {
      "habits": {
        "<name>": {"name": "<name>", "completions": ["YYYY-MM-DD", ...]},
        ...
      }
    }

``from_dict`` is the single place where untrusted data is checked against
that shape. Any deviation raises ``CorruptDataError`` naming the offending
key, so a damaged file is reported instead of silently dropped.

Usage
-----
::

    from habitrack.store.serializer import TrackerSerializer

    serializer = TrackerSerializer()
    text = serializer.to_json(tracker)
    assert serializer.from_json(text) == tracker
"""
from __future__ import annotations

import json
from datetime import date
from typing import Any

import yaml

from habitrack.errors import CorruptDataError
from habitrack.model import Habit, format_date, parse_date
from habitrack.tracker import Tracker


class TrackerSerializer:
    """Converts between ``Tracker`` objects and JSON-compatible dicts."""

    # ------------------------------------------------------------------
    # Serialization (Tracker → dict)
    # ------------------------------------------------------------------

    def to_dict(self, tracker: Tracker) -> dict[str, Any]:
        """Serialize a ``Tracker`` to a JSON-compatible dict."""
        return {"habits": {habit.name: self._habit_to_dict(habit) for habit in tracker}}

    def _habit_to_dict(self, habit: Habit) -> dict[str, Any]:
        return {
            "name": habit.name,
            "completions": [format_date(d) for d in habit.completions],
        }

    # ------------------------------------------------------------------
    # Deserialization (dict → Tracker)
    # ------------------------------------------------------------------

    def from_dict(self, data: object) -> Tracker:
        """Build a ``Tracker`` from a parsed document.

        Raises
        ------
        CorruptDataError
            If ``data`` does not have the expected structure.
        """
        if not isinstance(data, dict):
            raise CorruptDataError(
                f"expected a top-level object, got {type(data).__name__}"
            )
        habits = data.get("habits")
        if not isinstance(habits, dict):
            raise CorruptDataError("missing or invalid 'habits' object")

        return Tracker(self._habit_from_dict(key, value) for key, value in habits.items())

    def _habit_from_dict(self, key: str, data: object) -> Habit:
        if not isinstance(data, dict):
            raise CorruptDataError(f"habit {key!r} is not an object")

        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise CorruptDataError(f"habit {key!r} has a missing or blank 'name'")
        if name != key:
            raise CorruptDataError(f"habit {key!r} is stored under name {name!r}")

        raw = data.get("completions")
        if not isinstance(raw, list):
            raise CorruptDataError(f"habit {key!r} has no 'completions' list")

        completions = tuple(self._date_from_value(key, value) for value in raw)
        if len(set(completions)) != len(completions):
            raise CorruptDataError(f"habit {key!r} has duplicate completion dates")
        return Habit(name=name, completions=completions)

    def _date_from_value(self, key: str, value: object) -> date:
        if not isinstance(value, str):
            raise CorruptDataError(f"habit {key!r} has a non-string completion {value!r}")
        try:
            return parse_date(value)
        except ValueError:
            raise CorruptDataError(
                f"habit {key!r} has an invalid completion date {value!r}"
            ) from None

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, tracker: Tracker, indent: int = 2) -> str:
        """Serialize a ``Tracker`` to a JSON string."""
        return json.dumps(self.to_dict(tracker), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Tracker:
        """Deserialize a ``Tracker`` from a JSON string.

        Raises
        ------
        CorruptDataError
            If ``text`` is not valid JSON or has the wrong structure.
        """
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as exc:
            raise CorruptDataError(f"invalid JSON ({exc})") from exc
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, tracker: Tracker) -> str:
        """Serialize a ``Tracker`` to a YAML string."""
        return yaml.safe_dump(
            self.to_dict(tracker),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
