"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns the process-wide Directory and routes results
to stdout or stderr.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deptdir.domain.directory import Directory
from deptdir.output.renderers import render_json, render_result
from deptdir.services.dispatch import Dispatcher

if TYPE_CHECKING:
    from deptdir.config.settings import DeptdirSettings
    from deptdir.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The directory lives as long as this object, which is one CLI
    invocation. Every subcommand dispatches through :attr:`dispatcher`.
    """

    def __init__(self, settings: DeptdirSettings, *, command: str | None = None) -> None:
        self.settings = settings
        self.directory = Directory()
        self.dispatcher = Dispatcher(self.directory, settings.directory)

        from deptdir.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            command=command,
        )

    def execute_line(self, line: str) -> ServiceResult:
        """Classify and execute one line, emitting its output."""
        result = self.dispatcher.run_line(line)
        self.emit(result)
        return result

    def emit(self, result: ServiceResult) -> None:
        """Write a result without ending the process.

        * Success: written to stdout. Empty renders (silent inserts) write nothing.
        * Failure: written to stderr, so diagnostics never mix with listings.
        """
        if self.settings.json_output:
            output = render_json(result)
        else:
            output = render_result(
                result,
                verbose=self.settings.verbose,
                confirm_inserts=self.settings.directory.confirm_inserts,
            )
        if not output:
            return
        click.echo(output, err=not result.ok)
