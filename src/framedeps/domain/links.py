"""Link-table parsing — framework names from ``otool -L`` style listings.

Pure functions, no infrastructure dependencies. Consumed by the linker
tool wrapper and by the input-files inference traversal.
"""

from __future__ import annotations

import re
from os import PathLike
from pathlib import PurePath

FRAMEWORK_EXTENSION = ".framework"

# <prefix>/<Name>.framework/<...>; group 1 is the bundle base name.
_FRAMEWORK_PATTERN = re.compile(r"(?:^|/)([^/]+)\.framework(?=/)")


def linked_frameworks(linker_output: str) -> list[str]:
    """Extract the distinct framework names from a linked-images listing.

    The listing holds one linked image per line, e.g.::

        App:
            @rpath/Alamofire.framework/Alamofire (compatibility version 1.0.0, ...)
            @rpath/Mac.framework/Versions/A/Mac (compatibility version 1.2.2, ...)
            /usr/lib/libobjc.A.dylib (compatibility version 1.0.0, ...)

    Header lines (``<binary>:``) and flat shared libraries are skipped.
    The bundle name is taken, never the trailing binary component, so
    versioned layouts resolve to the bundle. Names keep first-seen order.
    """
    names: dict[str, None] = {}
    for raw in linker_output.splitlines():
        line = raw.strip()
        if not line or line.endswith(":"):
            continue
        image = line.split(" (compatibility version", 1)[0]
        matches = _FRAMEWORK_PATTERN.findall(image)
        if matches:
            names.setdefault(matches[-1], None)
    return list(names)


def artifact_name(location: str | PathLike[str]) -> str:
    """Name an artifact location is matched by.

    ``/Build/iOS/Alamofire.framework`` → ``Alamofire``; a bare binary
    path keeps its last component (``/App/App`` → ``App``).
    """
    path = PurePath(location)
    if path.suffix == FRAMEWORK_EXTENSION:
        return path.stem
    return path.name


class LinkResolutionError(RuntimeError):
    """The linked images of an executable could not be determined."""

    def __init__(self, executable: str | PathLike[str], reason: str) -> None:
        self.executable = str(executable)
        self.reason = reason
        super().__init__(f"Could not read linked frameworks of {self.executable}: {reason}")
