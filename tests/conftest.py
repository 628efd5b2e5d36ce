"""Shared pytest fixtures for deptdir tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from deptdir.domain.directory import Directory
from deptdir.services.dispatch import Dispatcher


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def directory() -> Directory:
    return Directory()


@pytest.fixture
def dispatcher(directory: Directory) -> Dispatcher:
    """Dispatcher with default settings over the ``directory`` fixture."""
    return Dispatcher(directory)


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DEPTDIR_* and color variables from the developer's shell out of tests."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("DEPTDIR_CONFIG", raising=False)
    monkeypatch.delenv("DEPTDIR_DIRECTORY__SORT_DEPARTMENTS", raising=False)
    monkeypatch.delenv("DEPTDIR_DIRECTORY__CONFIRM_INSERTS", raising=False)
    monkeypatch.delenv("DEPTDIR_SHELL__PROMPT", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the root-logger changes made by configure_logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("deptdir")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no deptdir.toml is discovered."""
    monkeypatch.chdir(tmp_path)
