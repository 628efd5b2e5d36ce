"""ServiceResult and ServiceError — what the Dispatcher hands back.

Human rendering and ``--json`` output both consume this type, so every
command outcome, including unrecognized input, is expressed as one.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of executing one command.

    Attributes:
        ok: Whether the command succeeded.
        op: Operation name (``"insert_employee"``, ``"list_all"``, ...).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
