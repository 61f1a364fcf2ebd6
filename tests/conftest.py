"""Shared test fixtures for habitrack.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from habitrack.tracker import Tracker


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "habitrack"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    """Return a not-yet-existing backing file path inside ``tmp_path``."""
    return tmp_path / "habits.json"


@pytest.fixture()
def sample_tracker() -> Tracker:
    """Two habits: 'workout' done three days running, 'reading' with a gap."""
    tracker = Tracker()
    tracker.add_habit("workout")
    tracker.add_habit("reading")
    for day in (1, 2, 3):
        tracker.mark_done("workout", date(2024, 1, day))
    for day in (1, 3):
        tracker.mark_done("reading", date(2024, 1, day))
    return tracker
