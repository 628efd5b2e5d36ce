"""Command grammars and the line classifier.

Each grammar is an anchored pattern with named capture slots. A line is
tested against every grammar; when more than one matches, the first in
``CommandKind`` order wins.

INVARIANT: ``classify`` is total and pure. Any ``str`` yields a Command,
and ``Unrecognized`` is returned instead of raising.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from deptdir.domain.commands import (
    Command,
    InsertEmployee,
    ListAll,
    ListDepartment,
    Unrecognized,
)
from deptdir.domain.types import CommandKind

logger = logging.getLogger(__name__)

GRAMMARS: dict[CommandKind, re.Pattern[str]] = {
    CommandKind.ADD_EMPLOYEE: re.compile(r"add (?P<employee>\w+) to (?P<department>\w+)"),
    CommandKind.SHOW_DEPARTMENT: re.compile(r"show (?P<department>\w+)"),
    CommandKind.SHOW_ALL: re.compile(r"show"),
}

_BUILDERS: dict[CommandKind, Callable[[re.Match[str]], Command]] = {
    CommandKind.ADD_EMPLOYEE: lambda m: InsertEmployee(
        employee=m["employee"], department=m["department"]
    ),
    CommandKind.SHOW_DEPARTMENT: lambda m: ListDepartment(department=m["department"]),
    CommandKind.SHOW_ALL: lambda m: ListAll(),
}

GRAMMAR_USAGE: dict[CommandKind, str] = {
    CommandKind.ADD_EMPLOYEE: "add <employee> to <department>",
    CommandKind.SHOW_DEPARTMENT: "show <department>",
    CommandKind.SHOW_ALL: "show",
}


def match_kinds(line: str) -> list[CommandKind]:
    """Return every grammar that matches *line*, in priority order."""
    text = line.strip()
    return [kind for kind, pattern in GRAMMARS.items() if pattern.fullmatch(text)]


def classify(line: str) -> Command:
    """Classify one raw input line into a structured command.

    Surrounding whitespace, including a trailing line terminator, is
    ignored. Literals are case-sensitive; captured names keep their case.
    """
    text = line.strip()
    for kind, pattern in GRAMMARS.items():
        match = pattern.fullmatch(text)
        if match is not None:
            logger.debug("Classified %r as %s", text, kind)
            return _BUILDERS[kind](match)

    logger.debug("Unrecognized input %r", text)
    return Unrecognized(text=text)
