"""Dispatcher — executes classified commands against a Directory.

Pipeline for one line: CLASSIFY → EXECUTE → RENDER.

INVARIANT: Only ``InsertEmployee`` mutates the directory. Unrecognized
input and unknown departments are reported as failed results, never
raised.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from deptdir.config.models import DirectoryConfig
from deptdir.domain.commands import (
    Command,
    InsertEmployee,
    ListAll,
    ListDepartment,
    Unrecognized,
)
from deptdir.domain.directory import DepartmentNotFoundError, Directory
from deptdir.domain.grammar import classify
from deptdir.domain.types import ErrorCode
from deptdir.output.renderers import render_result
from deptdir.services.result import ServiceResult

logger = logging.getLogger(__name__)

INVALID_COMMAND_MESSAGE = "invalid command"
DEPARTMENT_NOT_FOUND_MESSAGE = "no department by that name"


class Dispatcher:
    """Applies commands to the directory it was handed.

    The directory is owned by the caller; one Dispatcher per directory
    keeps every command of a session working on the same data.
    """

    def __init__(self, directory: Directory, config: DirectoryConfig | None = None) -> None:
        self._directory = directory
        self._config = config or DirectoryConfig()
        self._handlers: dict[type[Any], Callable[[Any], ServiceResult]] = {
            InsertEmployee: self._insert_employee,
            ListDepartment: self._list_department,
            ListAll: self._list_all,
            Unrecognized: self._unrecognized,
        }

    @property
    def directory(self) -> Directory:
        return self._directory

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute(self, command: Command) -> ServiceResult:
        """Apply *command* and return its structured outcome."""
        return self._handlers[type(command)](command)

    def dispatch(self, command: Command, *, verbose: bool = False) -> str:
        """Apply *command* and return the text to show the user."""
        return render_result(
            self.execute(command),
            verbose=verbose,
            confirm_inserts=self._config.confirm_inserts,
        )

    def run_line(self, line: str) -> ServiceResult:
        """Classify one raw input line and execute it."""
        return self.execute(classify(line))

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _insert_employee(self, command: InsertEmployee) -> ServiceResult:
        self._directory.insert(command.department, command.employee)
        return ServiceResult(
            ok=True,
            op="insert_employee",
            data={"employee": command.employee, "department": command.department},
        )

    def _list_department(self, command: ListDepartment) -> ServiceResult:
        op = "list_department"
        try:
            employees = self._directory.list_department(command.department)
        except DepartmentNotFoundError:
            logger.debug("No department named %s", command.department)
            return ServiceResult.failure(
                op,
                ErrorCode.DEPARTMENT_NOT_FOUND,
                DEPARTMENT_NOT_FOUND_MESSAGE,
                department=command.department,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"department": command.department, "employees": list(employees)},
        )

    def _list_all(self, _command: ListAll) -> ServiceResult:
        snapshot = self._directory.list_all()
        names = sorted(snapshot) if self._config.sort_departments else list(snapshot)
        return ServiceResult(
            ok=True,
            op="list_all",
            data={"departments": {name: list(snapshot[name]) for name in names}},
        )

    def _unrecognized(self, command: Unrecognized) -> ServiceResult:
        return ServiceResult.failure(
            "classify",
            ErrorCode.INVALID_COMMAND,
            INVALID_COMMAND_MESSAGE,
            input=command.text,
        )
