"""Command: unpack a downloaded framework archive."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from framedeps.commands._base import FdCommand

if TYPE_CHECKING:
    from framedeps.commands._context import AppContext


@click.command(
    cls=FdCommand,
    examples="""\
  framedeps unarchive Alamofire.framework.zip
  framedeps --quiet unarchive Frameworks.tar.gz""",
)
@click.argument("archive", type=click.Path(dir_okay=False))
@click.pass_obj
def unarchive(app: AppContext, archive: str) -> None:
    """Extract ARCHIVE (zip or tarball) into a temporary directory and list its frameworks."""
    from framedeps.services.archive import ArchiveService

    app.emit(ArchiveService(app.project).unarchive(archive))
