"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, deptdir.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class DirectoryConfig(BaseModel):
    """[directory] section."""

    model_config = {"frozen": True}

    sort_departments: bool = True
    confirm_inserts: bool = False


class ShellConfig(BaseModel):
    """[shell] section."""

    model_config = {"frozen": True}

    prompt: str = "> "
