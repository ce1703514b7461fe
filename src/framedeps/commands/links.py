"""Command: frameworks linked by a binary."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from framedeps.commands._base import FdCommand

if TYPE_CHECKING:
    from framedeps.commands._context import AppContext


@click.command(
    cls=FdCommand,
    examples="""\
  framedeps links Carthage/Build/iOS/Alamofire.framework
  framedeps --json links build/App.app/App""",
)
@click.argument("binary", type=click.Path())
@click.pass_obj
def links(app: AppContext, binary: str) -> None:
    """Print the framework names BINARY links against."""
    from framedeps.services.inference import InferenceService

    app.emit(InferenceService(app.project).links(binary))
