"""Command: build order for a dependency graph file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from framedeps.commands._base import FdCommand

if TYPE_CHECKING:
    from framedeps.commands._context import AppContext


@click.command(
    cls=FdCommand,
    examples="""\
  framedeps order graph.toml
  framedeps order graph.json --node ReactiveTask
  framedeps --quiet order graph.toml --node Commandant --node ReactiveTask""",
)
@click.argument("graph_file", type=click.Path(dir_okay=False))
@click.option(
    "--node",
    "nodes",
    multiple=True,
    help="Only order this node and its transitive dependencies (repeatable).",
)
@click.pass_obj
def order(app: AppContext, graph_file: str, nodes: tuple[str, ...]) -> None:
    """Print the dependencies of GRAPH_FILE in build order.

    GRAPH_FILE maps each name to the list of names it depends on,
    as a JSON object or a TOML table.
    """
    from framedeps.services.ordering import OrderService

    app.emit(OrderService(app.project).order_file(graph_file, nodes))
