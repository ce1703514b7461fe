"""Command: zip built frameworks for a binary release."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from framedeps.commands._base import FdCommand

if TYPE_CHECKING:
    from framedeps.commands._context import AppContext


@click.command(
    cls=FdCommand,
    examples="""\
  framedeps archive
  framedeps archive Alamofire
  framedeps archive Alamofire AlamofireImage --output dist/""",
)
@click.argument("names", nargs=-1)
@click.option(
    "--output",
    default=None,
    help="Archive path, or a directory (trailing /) for <first framework>.zip.",
)
@click.pass_obj
def archive(app: AppContext, names: tuple[str, ...], output: str | None) -> None:
    """Archive the built NAMES (default: every built framework) with their dSYMs."""
    from framedeps.services.archive import ArchiveService

    app.emit(ArchiveService(app.project).archive(names, output=output))
