"""Command: show the framework search paths in effect."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from framedeps.commands._base import PLATFORM, FdCommand

if TYPE_CHECKING:
    from framedeps.commands._context import AppContext
    from framedeps.domain.platforms import Platform


@click.command(
    name="search-paths",
    cls=FdCommand,
    examples="""\
  framedeps search-paths
  framedeps search-paths --platform macOS --search-path Vendor/Frameworks""",
)
@click.option(
    "--search-path",
    "search_paths",
    multiple=True,
    type=click.Path(file_okay=False),
    help="Extra framework search path (repeatable).",
)
@click.option("--platform", type=PLATFORM, default=None, help="Target platform (default from config).")
@click.pass_obj
def search_paths(app: AppContext, search_paths: tuple[str, ...], platform: Platform | None) -> None:
    """Print the de-duplicated framework search paths, default last."""
    from framedeps.services.inference import InferenceService

    app.emit(InferenceService(app.project).search_paths(platform, search_paths))
