"""Command: execute a batch of commands against one directory."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from deptdir.commands._base import DeptCommand

if TYPE_CHECKING:
    from deptdir.commands._context import AppContext


@click.command(
    cls=DeptCommand,
    list_grammars=True,
    examples="""\
  deptdir run "add Sally to Engineering" "add Amir to Sales" show
  deptdir run --file commands.txt
  deptdir --json run --file - < commands.txt
  deptdir run --strict 'show Marketing'""",
)
@click.argument("commands", nargs=-1)
@click.option(
    "--file",
    "source",
    type=click.File("r", encoding="utf-8", errors="replace"),
    default=None,
    help="Read commands from a file, one per line ('-' for stdin).",
)
@click.option("--strict", is_flag=True, help="Exit with code 1 if any command fails.")
@click.pass_obj
def run(
    app: AppContext,
    commands: tuple[str, ...],
    source: TextIO | None,
    strict: bool,
) -> None:
    """Run COMMANDS in order, then any lines from --file.

    Blank lines in the file are skipped.
    """
    lines = list(commands)
    if source is not None:
        lines.extend(line for line in source if line.strip())

    failures = 0
    for line in lines:
        if not app.execute_line(line).ok:
            failures += 1

    if strict and failures:
        raise SystemExit(1)
