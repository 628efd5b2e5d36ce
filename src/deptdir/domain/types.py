"""Command kinds and error codes.

``CommandKind`` members are declared in classification priority order.
"""

from __future__ import annotations

from enum import StrEnum


class CommandKind(StrEnum):
    """Grammar names, highest priority first."""

    ADD_EMPLOYEE = "add_employee"
    SHOW_DEPARTMENT = "show_department"
    SHOW_ALL = "show_all"


class ErrorCode(StrEnum):
    """Codes carried by failed service results."""

    INVALID_COMMAND = "INVALID_COMMAND"
    DEPARTMENT_NOT_FOUND = "DEPARTMENT_NOT_FOUND"
