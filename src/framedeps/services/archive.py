"""ArchiveService — zip built frameworks (and their dSYMs) for a release, and
unpack downloaded framework archives.

Collects every platform's copy of the requested frameworks from the build
folder, checks that each one was found, and hands the relative paths to
``zip``. Without explicit names, every framework in the build folder is
archived.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from framedeps.domain.links import artifact_name
from framedeps.infrastructure.archive import (
    ArchiveError,
    archive_output_path,
    bundle_file_name,
    collect_framework_paths,
    unarchive as extract_archive,
    zip_paths,
)
from framedeps.services.base import BaseService
from framedeps.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ArchiveService(BaseService):
    """Packs built frameworks into a zip archive."""

    def archive(self, names: Iterable[str] = (), *, output: str | None = None) -> ServiceResult:
        """Archive *names* (or every built framework) into a zip file.

        Args:
            names: Framework names, with or without ``.framework``.
            output: Archive path, or a directory to receive
                ``<first framework>.zip``. Defaults to the project root.
        """
        op = "archive"
        if output is not None and not output.strip():
            return ServiceResult.failure(op, "INVALID_ARGUMENT", "Custom archive output path should not be empty")

        root = self._project.root
        frameworks = sorted({bundle_file_name(n) for n in names}) or self._built_bundle_names()
        if not frameworks:
            return ServiceResult.failure(
                op,
                "NOT_FOUND",
                f"No built frameworks found in {self._project.build_directory}",
            )

        paths = collect_framework_paths(
            root,
            frameworks,
            build_folder=self._project.build_folder,
            on_found=lambda path: logger.info("Found %s", path),
        )
        found = {Path(p).name for p in paths if p.endswith(".framework")}
        missing = [f for f in frameworks if f not in found]
        if missing:
            return ServiceResult.failure(
                op,
                "NOT_FOUND",
                f"Could not find any copies of {', '.join(missing)}. "
                "Make sure the frameworks have already been built.",
                missing=missing,
            )

        # A relative output path is taken from the working directory.
        target = archive_output_path(output or root, frameworks).resolve()
        target.unlink(missing_ok=True)
        target.parent.mkdir(parents=True, exist_ok=True)

        try:
            zip_paths(paths, target, root)
        except ArchiveError as exc:
            return ServiceResult.failure(op, "ARCHIVE_FAILED", str(exc))

        logger.debug("Archived %d paths into %s", len(paths), target)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(target),
                "frameworks": [artifact_name(f) for f in frameworks],
                "count": len(paths),
                "items": paths,
            },
        )

    def unarchive(self, archive: str | PathLike[str]) -> ServiceResult:
        """Extract a downloaded *archive* into a fresh temporary directory.

        ``items`` lists the framework bundles found in the extracted tree.
        """
        op = "unarchive"
        source = Path(archive)
        if not source.is_file():
            return ServiceResult.failure(op, "NOT_FOUND", f"No such archive: {source}", path=str(source))

        try:
            destination = extract_archive(source)
        except ArchiveError as exc:
            return ServiceResult.failure(op, "ARCHIVE_FAILED", str(exc), path=str(source))

        bundles = list(self._project.built_frameworks([destination]))
        logger.debug("Extracted %s into %s", source, destination)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "archive": str(source),
                "path": str(destination),
                "count": len(bundles),
                "items": [str(b) for b in bundles],
            },
        )

    def _built_bundle_names(self) -> list[str]:
        bundles = self._project.built_frameworks([self._project.build_directory])
        return sorted({b.name for b in bundles})
