"""Command: interactive read-eval-print loop."""

from __future__ import annotations

import io
import logging
import sys
from typing import TYPE_CHECKING, TextIO

import click

from deptdir.commands._base import DeptCommand

if TYPE_CHECKING:
    from deptdir.commands._context import AppContext

logger = logging.getLogger(__name__)


def _lenient_stdin() -> TextIO:
    """Return stdin with undecodable bytes replaced instead of raising."""
    stdin = sys.stdin
    if isinstance(stdin, io.TextIOWrapper):
        stdin.reconfigure(errors="replace")
    return stdin


@click.command(
    cls=DeptCommand,
    list_grammars=True,
    examples="""\
  deptdir shell
  deptdir shell --prompt 'dir> '
  printf 'add Sally to Engineering\\nshow\\n' | deptdir shell --prompt ''""",
)
@click.option("--prompt", default=None, help="Prompt printed before each line.")
@click.pass_obj
def shell(app: AppContext, prompt: str | None) -> None:
    """Read commands line by line until end of input."""
    if prompt is None:
        prompt = app.settings.shell.prompt
    if app.settings.json_output:
        prompt = ""

    stream = _lenient_stdin()
    count = 0
    while True:
        if prompt:
            click.echo(prompt, nl=False)
        try:
            line = stream.readline()
        except KeyboardInterrupt:
            line = ""
        if not line:
            if prompt:
                click.echo()
            break
        app.execute_line(line)
        count += 1

    logger.debug("Shell finished after %d lines", count)
