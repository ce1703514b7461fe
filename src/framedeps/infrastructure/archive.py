"""Release archive packing and unpacking through external tools.

Compression itself is left to ``zip``, ``unzip`` and ``tar``. This module
decides which files go into a framework archive, where the archive is
written, and which tool unpacks a downloaded archive.
"""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from collections.abc import Callable, Sequence
from os import PathLike
from pathlib import Path

from framedeps.domain.links import FRAMEWORK_EXTENSION
from framedeps.domain.platforms import Platform

logger = logging.getLogger(__name__)

_TAR_EXTENSIONS = frozenset({".gz", ".tgz", ".bz2", ".xz"})


class ArchiveError(RuntimeError):
    """An archive tool could not be run or exited with an error."""


def _run(args: Sequence[str], *, cwd: Path | None = None) -> None:
    logger.debug("Running %s", " ".join(args))
    try:
        subprocess.run(list(args), cwd=cwd, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as exc:
        reason = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        msg = f"{args[0]} failed: {reason}"
        raise ArchiveError(msg) from exc
    except OSError as exc:
        msg = f"{args[0]} could not be run: {exc}"
        raise ArchiveError(msg) from exc


# ---------------------------------------------------------------------------
# Unpacking
# ---------------------------------------------------------------------------


def unarchive(archive: str | PathLike[str]) -> Path:
    """Extract *archive* into a new temporary directory and return it.

    The extension picks the tool: tarballs (``.gz``, ``.tgz``, ``.bz2``,
    ``.xz``) go through ``tar``, anything else through ``unzip``.
    """
    source = Path(archive)
    destination = Path(tempfile.mkdtemp(prefix="framedeps-"))
    if source.suffix in _TAR_EXTENSIONS:
        return untar(source, destination)
    return unzip(source, destination)


def unzip(archive: Path, destination: Path) -> Path:
    """Unzip *archive* into the existing *destination* directory."""
    _run(["unzip", "-uo", "-qq", "-d", str(destination), str(archive)])
    return destination


def untar(archive: Path, destination: Path) -> Path:
    """Untar *archive* into the existing *destination* directory."""
    _run(["tar", "-xf", str(archive), "-C", str(destination)])
    return destination


# ---------------------------------------------------------------------------
# Packing
# ---------------------------------------------------------------------------


def zip_paths(paths: Sequence[str], into: Path, working_directory: Path) -> Path:
    """Zip *paths* (relative to *working_directory*) recursively into *into*."""
    if not paths:
        msg = "Nothing to archive"
        raise ValueError(msg)
    _run(["zip", "-q", "-r", "--symlinks", str(into), *paths], cwd=working_directory)
    return into


def archive_output_path(base: str | PathLike[str], frameworks: Sequence[str]) -> Path:
    """Where the archive for *frameworks* is written.

    A directory (existing, or spelled with a trailing separator) receives
    ``<first framework>.zip``; any other path is used as the file name.
    """
    path = Path(base)
    if path.is_dir() or os.fspath(base).endswith(("/", os.sep)):
        return path / f"{frameworks[0]}.zip"
    return path


def collect_framework_paths(
    directory: Path,
    frameworks: Sequence[str],
    *,
    build_folder: str,
    on_found: Callable[[str], None] | None = None,
) -> list[str]:
    """Relative paths of every built copy of *frameworks*, with their dSYMs.

    *frameworks* are bundle names (``Alamofire.framework``). Every supported
    platform folder is checked; missing copies are skipped. *on_found* is
    called with each path as it is found.
    """
    paths: list[str] = []
    for platform in Platform:
        for framework in frameworks:
            relative = f"{build_folder}/{platform.relative_path}/{framework}"
            if not (directory / relative).exists():
                continue
            found = [relative]
            dsym = f"{relative}.dSYM"
            if (directory / dsym).exists():
                found.append(dsym)
            for path in found:
                if on_found is not None:
                    on_found(path)
            paths.extend(found)
    return paths


def bundle_file_name(name: str) -> str:
    """``Alamofire`` → ``Alamofire.framework``; bundle names pass through."""
    if name.endswith(FRAMEWORK_EXTENSION):
        return name
    return f"{name}{FRAMEWORK_EXTENSION}"
