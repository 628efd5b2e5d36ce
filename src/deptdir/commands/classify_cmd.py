"""Command: show how a line is classified, without executing it."""

from __future__ import annotations

import click

from deptdir.commands._base import DeptCommand
from deptdir.domain.commands import COMMAND_ADAPTER
from deptdir.domain.grammar import classify, match_kinds


@click.command(
    "classify",
    cls=DeptCommand,
    examples="""\
  deptdir classify "add Sally to Engineering"
  deptdir classify show""",
)
@click.argument("line")
def classify_cmd(line: str) -> None:
    """Print the structured command LINE parses to, as JSON."""
    command = classify(line)
    click.echo(COMMAND_ADAPTER.dump_json(command).decode())
    kinds = match_kinds(line)
    if len(kinds) > 1:
        click.echo(f"also matched: {', '.join(kinds[1:])}", err=True)
