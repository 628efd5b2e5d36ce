"""Tests for the classify command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from deptdir.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestClassifyCommand:
    def test_add(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["classify", "add Sally to Engineering"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "kind": "insert_employee",
            "employee": "Sally",
            "department": "Engineering",
        }

    def test_show_all(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["classify", "show"])
        assert json.loads(result.stdout) == {"kind": "list_all"}

    def test_unrecognized(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["classify", "add Sally to"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"kind": "unrecognized", "text": "add Sally to"}
