#!/usr/bin/env python3
"""Example: Quickstart — habitrack

Minimal working example: add habits, log a week of completions,
save them to a JSON file and print totals and streaks.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install habitrack
"""
from __future__ import annotations

import tempfile
from datetime import date, timedelta
from pathlib import Path

import habitrack
from habitrack.errors import AlreadyDoneError


def main() -> None:
    print(f"habitrack version: {habitrack.__version__}")

    with tempfile.TemporaryDirectory() as tmp:
        data_file = Path(tmp) / "habits.json"

        # Step 1: Load (a missing file gives an empty tracker)
        tracker = habitrack.load(data_file)
        tracker.add_habit("workout")
        tracker.add_habit("reading")

        # Step 2: Log a week, skipping reading on day 5
        today = date(2024, 1, 7)
        for offset in range(6, -1, -1):
            day = today - timedelta(days=offset)
            tracker.mark_done("workout", day)
            if offset != 2:
                tracker.mark_done("reading", day)

        # Step 3: Completions are idempotent per day
        try:
            tracker.mark_done("workout", today)
        except AlreadyDoneError as exc:
            print(f"Rejected: {exc}")

        # Step 4: Save, reload and report
        habitrack.save(tracker, data_file)
        reloaded = habitrack.load(data_file)
        assert reloaded == tracker

        for row in habitrack.stats(reloaded, today):
            print(
                f"{row.name:<10} total={row.total} "
                f"current={row.current_streak} longest={row.longest_streak}"
            )


if __name__ == "__main__":
    main()
