"""Target platforms and their build-output folder names."""

from __future__ import annotations

from enum import StrEnum


class Platform(StrEnum):
    """Apple platforms a framework can be built for."""

    IOS = "iOS"
    MACOS = "macOS"
    TVOS = "tvOS"
    WATCHOS = "watchOS"

    @property
    def relative_path(self) -> str:
        """Folder name of this platform inside the build-output folder."""
        return _RELATIVE_PATHS[self]

    @classmethod
    def parse(cls, value: str) -> Platform:
        """Case-insensitive lookup accepting the ``mac``/``osx`` aliases."""
        key = value.strip().lower()
        platform = _ALIASES.get(key)
        if platform is None:
            supported = ", ".join(p.value for p in cls)
            msg = f"Unknown platform {value!r} (supported: {supported})"
            raise ValueError(msg)
        return platform


_RELATIVE_PATHS: dict[Platform, str] = {
    Platform.IOS: "iOS",
    Platform.MACOS: "Mac",
    Platform.TVOS: "tvOS",
    Platform.WATCHOS: "watchOS",
}

_ALIASES: dict[str, Platform] = {
    **{p.value.lower(): p for p in Platform},
    "mac": Platform.MACOS,
    "osx": Platform.MACOS,
}
