"""Custom Click base classes with --examples support.

``FdCommand`` and ``FdGroup`` accept an ``examples`` parameter. Passing
``--examples`` prints them and exits, which keeps ``--help`` short.
"""

from __future__ import annotations

from typing import Any

import click

from framedeps.domain.platforms import Platform


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


class FdCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class FdGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = FdCommand`` so subcommands accept ``examples``
    without an explicit ``cls=``.
    """

    command_class = FdCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class PlatformType(click.ParamType):
    """Click parameter converting ``iOS``/``mac``/``tvOS``… to :class:`Platform`."""

    name = "platform"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Platform:
        if isinstance(value, Platform):
            return value
        try:
            return Platform.parse(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


PLATFORM = PlatformType()
