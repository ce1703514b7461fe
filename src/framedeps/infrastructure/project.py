"""Project — the settings-bound handle injected into every service.

Owns the project directory and turns configuration into the concrete
collaborators the services need: the merged framework search paths, the
built-framework enumerator, and the linker tool. Nothing is touched on
the filesystem until a service asks for it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING

from framedeps.infrastructure.frameworks import enumerate_frameworks
from framedeps.infrastructure.linker import LinkerTool
from framedeps.infrastructure.search_paths import all_search_paths

if TYPE_CHECKING:
    from framedeps.config.settings import FramedepsSettings
    from framedeps.domain.platforms import Platform


class Project:
    """A project directory together with its framedeps settings."""

    def __init__(self, settings: FramedepsSettings) -> None:
        self.settings = settings
        self._linker: LinkerTool | None = None

    @property
    def root(self) -> Path:
        return self.settings.project_root

    @property
    def build_folder(self) -> str:
        return self.settings.build.folder

    @property
    def build_directory(self) -> Path:
        """``<project>/<build folder>``, holding one folder per platform."""
        return self.root / self.build_folder

    @property
    def linker(self) -> LinkerTool:
        """Link-name resolver configured from ``[linker]`` (created lazily)."""
        if self._linker is None:
            cfg = self.settings.linker
            self._linker = LinkerTool(cfg.command, timeout=cfg.timeout)
        return self._linker

    def search_paths(
        self,
        platform: Platform,
        extra: Iterable[str | PathLike[str]] = (),
    ) -> list[Path]:
        """Configured search paths, then *extra*, then the default location.

        Relative paths from the config file are taken relative to the
        project root; *extra* paths relative to the working directory.
        """
        configured = [self.root / p for p in self.settings.inference.search_paths]
        return all_search_paths(
            self.root,
            platform,
            [*configured, *extra],
            build_folder=self.build_folder,
        )

    def built_frameworks(self, search_paths: Iterable[Path]) -> Iterator[Path]:
        """Every framework bundle found under *search_paths*, in search order."""
        return enumerate_frameworks(search_paths)
