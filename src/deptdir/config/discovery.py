"""Locate deptdir.toml.

Resolution order: explicit ``--config`` path, the DEPTDIR_CONFIG env var,
then a walk up from the starting directory (like git finding .git/).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "deptdir.toml"
CONFIG_ENV_VAR = "DEPTDIR_CONFIG"


def find_config(start: Path | None = None, explicit: str | None = None) -> Path | None:
    """Return the config file to load, or None when there is none.

    An *explicit* path or DEPTDIR_CONFIG that does not point at a file
    yields None rather than falling back to discovery.
    """
    override = explicit or os.environ.get(CONFIG_ENV_VAR)
    if override:
        p = Path(override)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
