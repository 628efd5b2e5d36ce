"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from deptdir.config.logging import PACKAGE_LOGGER, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("deptdir").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("deptdir").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("deptdir.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "deptdir.test"
        assert "timestamp" in parsed

    def test_stdlib_module_logger_is_structured(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        from deptdir.domain.directory import Directory

        configure_logging(verbose=True, log_json=True)
        Directory().insert("Sales", "Amir")

        parsed = json.loads(capfd.readouterr().err.strip().splitlines()[-1])
        assert parsed["event"] == "Created department Sales with Amir"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "deptdir.domain.directory"

    def test_debug_hidden_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        from deptdir.domain.grammar import classify

        configure_logging(verbose=False, log_json=True)
        classify("show")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Repeated configuration does not stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_command_bound_to_records(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True, command="run")
        logging.getLogger("deptdir.services.dispatch").debug("dispatch record")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["command"] == "run"

    def test_rebinding_replaces_command(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True, command="run")
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("deptdir.test").debug("plain")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert "command" not in parsed

    def test_package_logger_name(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
