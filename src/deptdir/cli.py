"""Root CLI group for deptdir with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click

from deptdir import __version__
from deptdir.commands import register_commands
from deptdir.commands._base import DeptGroup
from deptdir.commands._context import AppContext
from deptdir.config.settings import DeptdirSettings


@click.group(
    cls=DeptGroup,
    invoke_without_command=True,
    examples="""\
  deptdir shell
  deptdir run "add Sally to Engineering" "show Engineering"
  deptdir --no-sort-departments run "add Zed to Sales" "add Amir to Admin" show
  deptdir --json run --file commands.txt""",
)
@click.version_option(version=__version__, prog_name="deptdir")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--sort-departments/--no-sort-departments",
    default=None,
    help="List departments alphabetically (default) or in creation order.",
)
@click.option(
    "--confirm-inserts",
    is_flag=True,
    help="Print a confirmation line after each add.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    sort_departments: bool | None,
    confirm_inserts: bool,
) -> None:
    """deptdir — keep department rosters with short text commands."""
    ctx.ensure_object(dict)
    overrides: dict[str, Any] = {}
    if sort_departments is not None:
        overrides["sort_departments"] = sort_departments
    if confirm_inserts:
        overrides["confirm_inserts"] = True
    settings = DeptdirSettings.from_cli(
        config_path=config_path,
        directory=overrides,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings, command=ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
