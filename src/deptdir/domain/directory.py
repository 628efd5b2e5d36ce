"""Directory — department name to sorted roster.

INVARIANT: a department key exists iff at least one insertion targeted it.
Lookups never create keys.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from deptdir.domain.roster import Department

logger = logging.getLogger(__name__)


class DepartmentNotFoundError(KeyError):
    """Raised when a department has never received an insertion."""

    def __init__(self, department: str) -> None:
        super().__init__(department)
        self.department = department


class Directory:
    """In-memory mapping of department names to their rosters."""

    def __init__(self) -> None:
        self._departments: dict[str, Department] = {}

    def insert(self, department: str, employee: str) -> None:
        """Add *employee* to *department*, creating the department if needed."""
        roster = self._departments.get(department)
        if roster is None:
            self._departments[department] = Department([employee])
            logger.debug("Created department %s with %s", department, employee)
            return
        index = roster.insert(employee)
        logger.debug("Inserted %s into %s at %d", employee, department, index)

    def list_department(self, department: str) -> tuple[str, ...]:
        """Return the sorted roster of *department*.

        Raises:
            DepartmentNotFoundError: if the department does not exist.
        """
        roster = self._departments.get(department)
        if roster is None:
            raise DepartmentNotFoundError(department)
        return roster.names

    def list_all(self) -> dict[str, tuple[str, ...]]:
        """Snapshot of every department, in department creation order."""
        return {name: roster.names for name, roster in self._departments.items()}

    def departments(self) -> Iterator[str]:
        return iter(self._departments)

    def __contains__(self, department: object) -> bool:
        return department in self._departments

    def __len__(self) -> int:
        return len(self._departments)
