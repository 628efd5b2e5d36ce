"""Structured commands produced by the classifier.

A closed set of frozen models discriminated by ``kind``. ``Unrecognized``
is the explicit no-match case, so ``classify`` always returns a ``Command``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter


class InsertEmployee(BaseModel):
    """``add <employee> to <department>``."""

    model_config = {"frozen": True}

    kind: Literal["insert_employee"] = "insert_employee"
    employee: str = Field(min_length=1)
    department: str = Field(min_length=1)


class ListDepartment(BaseModel):
    """``show <department>``."""

    model_config = {"frozen": True}

    kind: Literal["list_department"] = "list_department"
    department: str = Field(min_length=1)


class ListAll(BaseModel):
    """``show``."""

    model_config = {"frozen": True}

    kind: Literal["list_all"] = "list_all"


class Unrecognized(BaseModel):
    """Input that matched none of the grammars."""

    model_config = {"frozen": True}

    kind: Literal["unrecognized"] = "unrecognized"
    text: str = ""


Command = Annotated[
    InsertEmployee | ListDepartment | ListAll | Unrecognized,
    Field(discriminator="kind"),
]

COMMAND_ADAPTER: TypeAdapter[Command] = TypeAdapter(Command)
