"""Shared pytest fixtures and test helpers for framedeps tests."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Generator, Iterable, Mapping
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from framedeps.config.settings import FramedepsSettings
from framedeps.domain.links import LinkResolutionError
from framedeps.infrastructure.project import Project


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's FRAMEDEPS_* environment out of the tests."""
    for var in ("FRAMEDEPS_CONFIG", "FRAMEDEPS_PROJECT_ROOT", "FRAMEDEPS_QUIET", "FRAMEDEPS_VERBOSE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fd = logging.getLogger("framedeps")
    fd_level = fd.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    fd.setLevel(fd_level)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory with an empty iOS build folder."""
    (tmp_path / "Carthage" / "Build" / "iOS").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def project(project_root: Path) -> Project:
    """Project bound to the temporary project directory."""
    return Project(FramedepsSettings.from_cli(project_root=project_root))


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temporary project so the CLI picks it up.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers (exposed as factory fixtures below)
# ---------------------------------------------------------------------------


def _make_framework(directory: Path, name: str, *, versioned: bool = False) -> Path:
    """Create an empty ``<name>.framework`` bundle with its binary file."""
    bundle = directory / f"{name}.framework"
    if versioned:
        binary = bundle / "Versions" / "A" / name
        binary.parent.mkdir(parents=True)
        binary.write_bytes(b"")
        (bundle / "Versions" / "Current").symlink_to("A")
    else:
        bundle.mkdir(parents=True)
        (bundle / name).write_bytes(b"")
    return bundle


def _fake_linker(
    links: Mapping[str, Iterable[str]],
    *,
    failing: Iterable[str] = (),
) -> Callable[[Path], list[str]]:
    """Link-name resolver keyed by executable file name.

    Names listed in *failing* raise LinkResolutionError; unknown names
    link nothing.
    """
    broken = set(failing)

    def resolve(executable: Path) -> list[str]:
        if executable.name in broken:
            raise LinkResolutionError(executable, "not a Mach-O file")
        return list(links.get(executable.name, ()))

    return resolve


@pytest.fixture
def make_framework() -> Callable[..., Path]:
    """Factory: ``make_framework(directory, name, versioned=False) -> bundle``."""
    return _make_framework


@pytest.fixture
def fake_linker() -> Callable[..., Callable[[Path], list[str]]]:
    """Factory: ``fake_linker({"Root": ["A"]}, failing=["B"]) -> resolver``."""
    return _fake_linker


@pytest.fixture
def fake_otool(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Factory: replace the external linker tool with canned ``otool -L`` listings.

    ``fake_otool({"App": ["Argo"]}, failing=["Argo"])`` answers by the
    executable's file name; names in *failing* exit non-zero.
    """

    def install(links: Mapping[str, Iterable[str]], *, failing: Iterable[str] = ()) -> None:
        broken = set(failing)

        def run(args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
            executable = args[-1]
            name = Path(executable).name
            if name in broken:
                raise subprocess.CalledProcessError(1, args, stderr=f"{executable}: is not an object file")
            lines = [f"{executable}:"]
            lines += [
                f"\t@rpath/{linked}.framework/{linked} (compatibility version 1.0.0, current version 1.0.0)"
                for linked in links.get(name, ())
            ]
            lines.append("\t/usr/lib/libSystem.B.dylib (compatibility version 1.0.0, current version 1311.0.0)")
            return subprocess.CompletedProcess(args, 0, stdout="\n".join(lines) + "\n", stderr="")

        monkeypatch.setattr(subprocess, "run", run)

    return install
