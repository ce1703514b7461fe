"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``FRAMEDEPS_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``framedeps.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`framedeps.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from framedeps.config.discovery import find_config, project_root_for
from framedeps.config.models import BuildConfig, InferenceConfig, LinkerConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``framedeps.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path is chosen per from_cli() call, but pydantic-settings asks
# for sources on the class; hand it over thread-locally.
_tls = threading.local()


class FramedepsSettings(BaseSettings):
    """Settings for one framedeps invocation.

    Frozen after construction and stored on the Click context object.

    Attributes:
        project_root: Project directory (parent of ``framedeps.toml``,
            or CWD if no config found). Relative paths in the config
            file are resolved against it.
        config_path: The config file in effect, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FRAMEDEPS_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    build: BuildConfig = Field(default_factory=BuildConfig)
    inference: InferenceConfig = Field(default_factory=InferenceConfig)
    linker: LinkerConfig = Field(default_factory=LinkerConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> FramedepsSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* must exist. Otherwise ``framedeps.toml``
        is discovered by walking up from *project_root* (or the CWD).
        """
        toml_path: Path | None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root or project_root_for(toml_path)

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
