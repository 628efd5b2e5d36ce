"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DEPTDIR_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``deptdir.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from deptdir.config.discovery import find_config
from deptdir.config.models import DirectoryConfig, ShellConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered ``deptdir.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class DeptdirSettings(BaseSettings):
    """Frozen settings for one deptdir invocation.

    Stored on the :class:`AppContext` created by the root CLI group.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DEPTDIR_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    directory: DirectoryConfig = Field(default_factory=DirectoryConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        directory: dict[str, Any] | None = None,
        **cli_flags: Any,
    ) -> DeptdirSettings:
        """Construct settings from a CLI invocation.

        *directory* holds ``[directory]`` overrides given as flags. They are
        merged over the TOML section so unset keys keep their file values.
        """
        toml_path = find_config(start, explicit=config_path)

        _tls.toml_path = toml_path
        try:
            if directory:
                base = cls(config_path=toml_path, **cli_flags).directory
                cli_flags["directory"] = base.model_copy(update=directory)
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
