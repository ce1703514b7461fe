"""Output mode selection for ServiceResult.

The CLI renders results for humans (Rich), for machines (``--json``), or
as bare items one per line (``--quiet``, handy in shell pipelines).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from framedeps.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from framedeps.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Global output flags relevant to formatting."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output flags; takes precedence over *json_output*.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    settings = settings or OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
