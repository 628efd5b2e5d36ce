"""Subcommand modules for deptdir.

Provides register_commands() which defers imports until registration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from deptdir.commands.classify_cmd import classify_cmd
    from deptdir.commands.run import run
    from deptdir.commands.shell import shell

    cli.add_command(shell)
    cli.add_command(run)
    cli.add_command(classify_cmd)
