"""Unit tests for habitrack.model.habit — Habit value type and date helpers."""
from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from habitrack.model import Habit, format_date, parse_date


# ===========================================================================
# parse_date / format_date
# ===========================================================================


class TestParseDate:
    def test_valid_date(self) -> None:
        assert parse_date("2024-01-03") == date(2024, 1, 3)

    def test_leap_day(self) -> None:
        assert parse_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize("value", [
        "",
        "2024-1-3",
        "2024/01/03",
        "03-01-2024",
        "2024-13-01",
        "2023-02-29",
        "2024-01-03T00:00:00",
        " 2024-01-03",
        "yesterday",
        "\u0662\u0660\u0662\u0664-\u0660\u0661-\u0660\u0663",
    ])
    def test_rejects_malformed(self, value: str) -> None:
        with pytest.raises(ValueError):
            parse_date(value)


class TestFormatDate:
    def test_zero_padded(self) -> None:
        assert format_date(date(2024, 1, 3)) == "2024-01-03"

    def test_parse_accepts_formatted_output(self) -> None:
        day = date(1999, 12, 31)
        assert parse_date(format_date(day)) == day


# ===========================================================================
# Habit
# ===========================================================================


class TestHabit:
    def test_new_habit_has_no_completions(self) -> None:
        habit = Habit(name="workout")
        assert habit.completions == ()
        assert habit.total == 0
        assert habit.last_done is None

    def test_with_completion_returns_new_habit(self) -> None:
        habit = Habit(name="workout")
        updated = habit.with_completion(date(2024, 1, 1))
        assert updated is not habit
        assert habit.completions == ()
        assert updated.completions == (date(2024, 1, 1),)

    def test_with_completion_preserves_insertion_order(self) -> None:
        habit = (
            Habit(name="workout")
            .with_completion(date(2024, 1, 2))
            .with_completion(date(2024, 1, 1))
        )
        assert habit.completions == (date(2024, 1, 2), date(2024, 1, 1))

    def test_last_done_is_latest_date(self) -> None:
        habit = Habit(
            name="workout",
            completions=(date(2024, 1, 5), date(2024, 1, 2)),
        )
        assert habit.last_done == date(2024, 1, 5)

    def test_has_completion(self) -> None:
        habit = Habit(name="workout", completions=(date(2024, 1, 1),))
        assert habit.has_completion(date(2024, 1, 1))
        assert not habit.has_completion(date(2024, 1, 2))

    def test_is_frozen(self) -> None:
        habit = Habit(name="workout")
        with pytest.raises(dataclasses.FrozenInstanceError):
            habit.name = "running"  # type: ignore[misc]

    def test_equality_by_content(self) -> None:
        a = Habit(name="workout", completions=(date(2024, 1, 1),))
        b = Habit(name="workout", completions=(date(2024, 1, 1),))
        assert a == b

    def test_repr_contains_name_and_total(self) -> None:
        habit = Habit(name="workout", completions=(date(2024, 1, 1),))
        assert repr(habit) == "Habit('workout', total=1)"
