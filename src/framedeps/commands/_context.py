"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Project initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from framedeps.config.logging import bind_context, configure_logging
from framedeps.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from framedeps.config.settings import FramedepsSettings
    from framedeps.infrastructure.project import Project
    from framedeps.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The project is created on first use so ``--help`` and ``--version``
    never touch the filesystem beyond config discovery.
    """

    def __init__(self, settings: FramedepsSettings) -> None:
        self.settings = settings
        self._project: Project | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        bind_context(project=str(settings.project_root))

    @property
    def project(self) -> Project:
        """The project instance (created lazily on first access)."""
        if self._project is None:
            from framedeps.infrastructure.project import Project

            self._project = Project(self.settings)
        return self._project

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
