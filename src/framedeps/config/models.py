"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, framedeps.toml only contains
overrides. A project that uses the conventional build folder needs no
config file at all.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from framedeps.domain.platforms import Platform

# --- framedeps.toml sections ---


class BuildConfig(BaseModel):
    """[build] section."""

    model_config = {"frozen": True}

    folder: str = "Carthage/Build"


class InferenceConfig(BaseModel):
    """[inference] section."""

    model_config = {"frozen": True}

    platform: Platform = Platform.IOS
    search_paths: list[str] = Field(default_factory=list)

    @field_validator("platform", mode="before")
    @classmethod
    def _parse_platform(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Platform.parse(value)
        return value


class LinkerConfig(BaseModel):
    """[linker] section."""

    model_config = {"frozen": True}

    command: list[str] = Field(default_factory=lambda: ["xcrun", "otool", "-L"])
    timeout: float = 30.0


class FramedepsConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    build: BuildConfig = Field(default_factory=BuildConfig)
    inference: InferenceConfig = Field(default_factory=InferenceConfig)
    linker: LinkerConfig = Field(default_factory=LinkerConfig)
