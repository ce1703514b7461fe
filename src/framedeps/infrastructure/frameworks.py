"""Framework bundle discovery and executable lookup on the filesystem.

Supplies the two filesystem-backed collaborators of input-files inference:
the enumerator of already-built framework bundles and the mapping from a
bundle (or bare binary) to the executable image that carries its link table.
"""

from __future__ import annotations

import logging
import os
import plistlib
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path
from xml.parsers.expat import ExpatError

from framedeps.domain.links import FRAMEWORK_EXTENSION

logger = logging.getLogger(__name__)

# Info.plist locations: flat (iOS, tvOS, watchOS) then versioned (macOS).
_INFO_PLISTS = ("Info.plist", "Resources/Info.plist", "Versions/Current/Resources/Info.plist")


def enumerate_frameworks(search_paths: Iterable[str | PathLike[str]]) -> Iterator[Path]:
    """Yield every ``*.framework`` bundle below each search path.

    Search paths are walked in the given order, children in sorted order.
    Bundles are not descended into, so embedded frameworks are not reported
    separately. Missing directories are skipped.
    """
    for search_path in search_paths:
        root = Path(search_path)
        if not root.is_dir():
            logger.debug("Skipping missing search path %s", root)
            continue
        for dirpath, dirnames, _filenames in os.walk(root):
            dirnames.sort()
            bundles = [name for name in dirnames if name.endswith(FRAMEWORK_EXTENSION)]
            for name in bundles:
                yield Path(dirpath) / name
            dirnames[:] = [name for name in dirnames if name not in bundles]


def bundle_executable_name(bundle: Path) -> str:
    """``CFBundleExecutable`` from the bundle's Info.plist, else the bundle stem."""
    for relative in _INFO_PLISTS:
        plist = bundle / relative
        if not plist.is_file():
            continue
        try:
            with plist.open("rb") as fh:
                info = plistlib.load(fh)
        except (OSError, plistlib.InvalidFileException, ValueError, ExpatError) as exc:
            logger.debug("Unreadable Info.plist %s: %s", plist, exc)
            continue
        name = info.get("CFBundleExecutable") if isinstance(info, dict) else None
        if isinstance(name, str) and name:
            return name
    return bundle.stem


def executable_path(location: str | PathLike[str]) -> Path:
    """Path of the executable image for a framework bundle or bare binary.

    ``X.framework`` maps to ``X.framework/X`` (flat layout) or
    ``X.framework/Versions/Current/X`` when only the versioned binary exists.
    Anything that is not a bundle is returned unchanged. Never raises.
    """
    path = Path(location)
    if path.suffix != FRAMEWORK_EXTENSION:
        return path

    name = bundle_executable_name(path)
    flat = path / name
    versioned = path / "Versions" / "Current" / name
    if not flat.exists() and versioned.exists():
        return versioned
    return flat
