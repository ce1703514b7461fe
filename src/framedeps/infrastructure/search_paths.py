"""Framework search paths for a project and target platform.

The default location is the platform folder inside the project's build
output (``<project>/Carthage/Build/<platform>``). Explicit search paths keep
their order; the default is appended only when it is not already listed.
"""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from framedeps.domain.platforms import Platform

DEFAULT_BUILD_FOLDER = "Carthage/Build"


def default_search_path(
    project_directory: str | PathLike[str],
    platform: Platform,
    *,
    build_folder: str = DEFAULT_BUILD_FOLDER,
) -> Path:
    """Return ``<project_directory>/<build_folder>/<platform folder>``."""
    return Path(project_directory) / build_folder / platform.relative_path


def canonicalize(path: str | PathLike[str]) -> Path:
    """Absolute path with symlinks resolved; the path need not exist."""
    return Path(path).expanduser().resolve()


def all_search_paths(
    project_directory: str | PathLike[str],
    platform: Platform,
    search_paths: Iterable[str | PathLike[str]] = (),
    *,
    build_folder: str = DEFAULT_BUILD_FOLDER,
) -> list[Path]:
    """Merge explicit *search_paths* with the default search path.

    Every path is canonicalized first. Later duplicates are dropped, the
    first occurrence keeps its position, and the default path is appended
    at the end unless it already appears somewhere in the list.
    """
    merged: dict[Path, None] = {}
    for path in search_paths:
        merged.setdefault(canonicalize(path), None)

    default = canonicalize(default_search_path(project_directory, platform, build_folder=build_folder))
    merged.setdefault(default, None)
    return list(merged)
