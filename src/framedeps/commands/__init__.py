"""Subcommand modules for framedeps.

Provides register_commands() which uses deferred imports to keep
``framedeps --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from framedeps.commands.archive import archive
    from framedeps.commands.infer import infer
    from framedeps.commands.links import links
    from framedeps.commands.order import order
    from framedeps.commands.search_paths import search_paths
    from framedeps.commands.unarchive import unarchive

    cli.add_command(order)
    cli.add_command(infer)
    cli.add_command(search_paths)
    cli.add_command(links)
    cli.add_command(archive)
    cli.add_command(unarchive)
