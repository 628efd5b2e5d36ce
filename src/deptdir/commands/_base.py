"""Click base classes for deptdir commands.

``DeptCommand`` and ``DeptGroup`` accept an ``examples`` parameter; passing
``--examples`` prints them and exits, keeping ``--help`` short. Commands that
read directory commands pass ``list_grammars=True`` so their help ends with
the accepted command shapes.
"""

from __future__ import annotations

from typing import Any

import click

from deptdir.domain.grammar import GRAMMAR_USAGE


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


def grammar_epilog() -> str:
    """Help epilog listing every accepted command, highest priority first."""
    lines = ["\b", "Commands:"]
    lines.extend(f"  {usage}" for usage in GRAMMAR_USAGE.values())
    return "\n".join(lines)


class DeptCommand(click.Command):
    """Click Command with ``--examples`` and an optional grammar epilog."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        list_grammars: bool = False,
        **kwargs: Any,
    ) -> None:
        if list_grammars and not kwargs.get("epilog"):
            kwargs["epilog"] = grammar_epilog()
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class DeptGroup(click.Group):
    """Click Group whose subcommands default to :class:`DeptCommand`."""

    command_class = DeptCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
