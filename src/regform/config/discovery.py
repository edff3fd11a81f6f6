"""Locate ``regform.toml``; reading it is RegformSettings' job.

Lookup order: the ``REGFORM_CONFIG`` env var, then the nearest
``regform.toml`` in the working directory or any of its parents.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "regform.toml"
CONFIG_ENV_VAR = "REGFORM_CONFIG"


def _search_dirs(start: Path) -> Iterator[Path]:
    """*start* and each of its ancestors, nearest first."""
    start = start.resolve()
    yield start
    yield from start.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect, or None.

    An env var pointing at a missing file disables discovery rather than
    falling back to the walk-up search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
