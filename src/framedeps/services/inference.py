"""Input-files inference — which built frameworks a binary must embed.

Starting from a root binary, reads its linked framework names, finds a
location for each name, and repeats for every location found until no new
names turn up. Two sources supply locations, tried in order:

1. **User input files** — frameworks the caller already copies itself.
   They are traversed (their own dependencies are real) but never emitted.
2. **Built frameworks** — bundles found under the framework search paths.
   These are emitted.

Names found in neither source (system frameworks, frameworks managed by
the consumer) are dropped. Every name is processed at most once, so cyclic
and diamond-shaped link graphs terminate and emit each framework once.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, TypeAlias

from framedeps.domain.links import LinkResolutionError, artifact_name
from framedeps.domain.platforms import Platform
from framedeps.infrastructure.frameworks import executable_path
from framedeps.services.base import BaseService
from framedeps.services.result import ServiceResult

logger = logging.getLogger(__name__)

BuiltFrameworks: TypeAlias = Callable[[], Iterable[Path]]
LinkedFrameworksResolver: TypeAlias = Callable[[Path], Iterable[str]]
ExecutableResolver: TypeAlias = Callable[[Path], Path]


# ---------------------------------------------------------------------------
# Location sources and precedence
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LocationSource:
    """A name → location index for one source of framework locations.

    Attributes:
        label: Human-readable source name for diagnostics.
        locations: First location seen for each framework name.
        emit: Whether frameworks resolved here belong in the output.
    """

    label: str
    locations: Mapping[str, Path] = field(default_factory=dict)
    emit: bool = True

    @classmethod
    def from_locations(
        cls,
        label: str,
        locations: Iterable[str | PathLike[str]],
        *,
        emit: bool,
    ) -> LocationSource:
        """Index *locations* by framework name; the earliest location wins."""
        index: dict[str, Path] = {}
        for location in locations:
            index.setdefault(artifact_name(location), Path(location))
        return cls(label=label, locations=index, emit=emit)

    def lookup(self, name: str) -> Path | None:
        return self.locations.get(name)


def resolve_location(
    name: str,
    sources: Sequence[LocationSource],
) -> tuple[Path, LocationSource] | None:
    """First ``(location, source)`` that knows *name*, trying *sources* in order."""
    for source in sources:
        location = source.lookup(name)
        if location is not None:
            return location, source
    return None


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


class InputFilesInferrer:
    """Infers the frameworks a root binary needs, from its link table down.

    All collaborators are injected so the traversal never touches real
    binaries on its own:

    Args:
        built_frameworks: Returns every known built framework location.
            Called once per :meth:`input_files` run.
        linked_frameworks_resolver: Names linked by an executable. Raises
            :class:`LinkResolutionError` when they cannot be read.
        executable_resolver: Maps a bundle (or the root path) to the
            executable image that holds the link table. Must not fail.
    """

    def __init__(
        self,
        built_frameworks: BuiltFrameworks,
        linked_frameworks_resolver: LinkedFrameworksResolver,
        executable_resolver: ExecutableResolver = executable_path,
    ) -> None:
        self._built_frameworks = built_frameworks
        self._resolve_links = linked_frameworks_resolver
        self.executable_resolver = executable_resolver

    def input_files(
        self,
        root: str | PathLike[str],
        user_input_files: Iterable[str | PathLike[str]] = (),
        *,
        on_unresolved: Callable[[str], None] | None = None,
    ) -> Iterator[Path]:
        """Lazily yield every built framework *root* depends on, each once.

        Neither *root* nor anything in *user_input_files* is ever yielded.
        Nothing is enumerated or resolved before the first ``next()``.

        Raises:
            LinkResolutionError: the root's own linked names cannot be read.
                Failures for any other framework only stop the walk below it.
        """
        root = Path(root)
        sources = (
            LocationSource.from_locations("user input files", user_input_files, emit=False),
            LocationSource.from_locations("built frameworks", self._built_frameworks(), emit=True),
        )

        # Owned by this generator alone; the root's name counts as visited.
        visited: set[str] = {artifact_name(root)}
        queue: deque[Path] = deque()
        names = self._linked_names(root, is_root=True)

        while True:
            for name in names:
                if name in visited:
                    continue
                visited.add(name)

                resolved = resolve_location(name, sources)
                if resolved is None:
                    logger.debug("No location for linked framework %s", name)
                    if on_unresolved is not None:
                        on_unresolved(name)
                    continue

                location, source = resolved
                logger.debug("Resolved %s to %s (%s)", name, location, source.label)
                if source.emit and location != root:
                    yield location
                queue.append(location)

            if not queue:
                return
            names = self._linked_names(queue.popleft(), is_root=False)

    def _linked_names(self, location: Path, *, is_root: bool) -> list[str]:
        executable = self.executable_resolver(location)
        try:
            return list(self._resolve_links(executable))
        except LinkResolutionError as exc:
            if is_root:
                raise
            logger.warning("Skipping dependencies of %s: %s", location, exc.reason)
            return []


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class InferenceService(BaseService):
    """Search paths, linked names, and inferred input files for a project."""

    def search_paths(
        self,
        platform: Platform | None = None,
        search_paths: Iterable[str | PathLike[str]] = (),
    ) -> ServiceResult:
        """Merged framework search paths for *platform*."""
        platform = platform or self._project.settings.inference.platform
        paths = self._project.search_paths(platform, search_paths)
        return ServiceResult(
            ok=True,
            op="search_paths",
            data={
                "platform": platform.value,
                "count": len(paths),
                "items": [str(p) for p in paths],
            },
        )

    def links(self, binary: str | PathLike[str]) -> ServiceResult:
        """Framework names linked by *binary* (a bundle or an executable)."""
        path = Path(binary)
        if not path.exists():
            return ServiceResult.failure("links", "NOT_FOUND", f"No such file: {path}", path=str(path))

        executable = executable_path(path)
        try:
            names = self._project.linker(executable)
        except LinkResolutionError as exc:
            return ServiceResult.failure(
                "links",
                "LINK_RESOLUTION_FAILED",
                str(exc),
                executable=exc.executable,
            )
        return ServiceResult(
            ok=True,
            op="links",
            data={"executable": str(executable), "count": len(names), "items": names},
        )

    def input_files(
        self,
        root: str | PathLike[str],
        user_input_files: Iterable[str | PathLike[str]] = (),
        *,
        platform: Platform | None = None,
        search_paths: Iterable[str | PathLike[str]] = (),
    ) -> ServiceResult:
        """Built frameworks that must be embedded alongside *root*.

        Items are sorted by framework name. Linked names with no known
        location are listed under ``unresolved``; they never fail the call.
        """
        op = "input_files"
        root_path = Path(root)
        if not root_path.exists():
            return ServiceResult.failure(op, "NOT_FOUND", f"No such file: {root_path}", path=str(root_path))

        platform = platform or self._project.settings.inference.platform
        paths = self._project.search_paths(platform, search_paths)
        inferrer = InputFilesInferrer(
            built_frameworks=lambda: self._project.built_frameworks(paths),
            linked_frameworks_resolver=self._project.linker,
        )

        unresolved: list[str] = []
        try:
            found = list(inferrer.input_files(root_path, user_input_files, on_unresolved=unresolved.append))
        except LinkResolutionError as exc:
            return ServiceResult.failure(op, "LINK_RESOLUTION_FAILED", str(exc), executable=exc.executable)

        found.sort(key=lambda p: (artifact_name(p), str(p)))
        data: dict[str, Any] = {
            "root": str(root_path),
            "platform": platform.value,
            "search_paths": [str(p) for p in paths],
            "count": len(found),
            "items": [str(p) for p in found],
            "unresolved": sorted(unresolved),
        }
        return ServiceResult(ok=True, op=op, data=data)
