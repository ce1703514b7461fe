"""Command: infer the frameworks a binary must embed."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from framedeps.commands._base import PLATFORM, FdCommand

if TYPE_CHECKING:
    from framedeps.commands._context import AppContext
    from framedeps.domain.platforms import Platform


@click.command(
    cls=FdCommand,
    examples="""\
  framedeps infer build/App.app/App
  framedeps infer build/App.app/App --platform iOS --search-path Frameworks
  framedeps infer App --input-file Carthage/Build/iOS/Alamofire.framework
  framedeps --quiet infer App | xargs -I{} cp -R {} App.app/Frameworks/""",
)
@click.argument("root", type=click.Path())
@click.option(
    "--input-file",
    "input_files",
    multiple=True,
    type=click.Path(),
    help="Framework already copied by the caller; followed but never listed (repeatable).",
)
@click.option(
    "--search-path",
    "search_paths",
    multiple=True,
    type=click.Path(file_okay=False),
    help="Extra framework search path, searched before the default (repeatable).",
)
@click.option("--platform", type=PLATFORM, default=None, help="Target platform (default from config).")
@click.pass_obj
def infer(
    app: AppContext,
    root: str,
    input_files: tuple[str, ...],
    search_paths: tuple[str, ...],
    platform: Platform | None,
) -> None:
    """List every built framework ROOT links against, directly or transitively."""
    from framedeps.services.inference import InferenceService

    svc = InferenceService(app.project)
    app.emit(svc.input_files(root, input_files, platform=platform, search_paths=search_paths))
