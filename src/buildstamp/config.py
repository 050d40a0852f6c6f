"""Canonical generator constants — single source of truth.

The version string baked into every header lives here and nowhere else.
It is not read from package metadata or source control.
"""

from __future__ import annotations

VERSION_LOGICIEL = "1.0"

INCLUDE_GUARD = "VERSION_H"

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_DIRECTORY = 1
EXIT_OUTPUT = 1
