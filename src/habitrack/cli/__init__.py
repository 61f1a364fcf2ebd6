"""CLI package.

The ``cli`` sub-package contains the Click application and all command
implementations. Commands report core failures as a one-line error on
stderr and exit with status 1.
"""
from __future__ import annotations
