"""Root CLI group for framedeps with global flags and command registration."""

from __future__ import annotations

import click

from framedeps import __version__
from framedeps.commands import register_commands
from framedeps.commands._base import FdGroup
from framedeps.commands._context import AppContext
from framedeps.config.settings import FramedepsSettings


@click.group(cls=FdGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="framedeps")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Bare items, one per line.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """framedeps — build order and embedded-framework inference."""
    ctx.ensure_object(dict)
    settings = FramedepsSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
