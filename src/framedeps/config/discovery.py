"""Config file discovery and loading.

``framedeps.toml`` marks a project root, the same way a ``Cartfile`` does:
the finder walks up from the working directory and the directory holding
the file becomes the project directory. ``FRAMEDEPS_CONFIG`` (or
``--config``) pins a file explicitly.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from framedeps.config.models import FramedepsConfig

CONFIG_FILENAME = "framedeps.toml"
CONFIG_ENV_VAR = "FRAMEDEPS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest framedeps.toml at or above *start* (default: cwd).

    An explicit FRAMEDEPS_CONFIG wins; when it names a missing file no
    walk-up is attempted.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        pinned = Path(env_path)
        return pinned if pinned.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def project_root_for(config_path: Path | None, fallback: Path | None = None) -> Path:
    """Project directory implied by *config_path* (its parent), else *fallback* or cwd."""
    if config_path is not None:
        return config_path.parent.resolve()
    return (fallback or Path.cwd()).resolve()


def load_config(path: Path | None = None, cwd: Path | None = None) -> FramedepsConfig:
    """Load and validate the TOML sections without env or CLI overrides.

    Returns the defaults when no config file is found.
    """
    path = path or find_config(cwd)
    if path is None:
        return FramedepsConfig()
    with path.open("rb") as fh:
        return FramedepsConfig.model_validate(tomllib.load(fh))
