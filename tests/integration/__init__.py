"""Integration tests.

Integration tests drive the Click application end to end against a
data file in a temporary directory. They are kept in a separate
directory so they can be excluded from the fast unit-test run with
``pytest tests/unit/``.
"""
from __future__ import annotations
