"""Tests for the Platform enum."""

from __future__ import annotations

import pytest

from framedeps.domain.platforms import Platform


class TestPlatform:
    @pytest.mark.parametrize(
        ("platform", "folder"),
        [
            (Platform.IOS, "iOS"),
            (Platform.MACOS, "Mac"),
            (Platform.TVOS, "tvOS"),
            (Platform.WATCHOS, "watchOS"),
        ],
    )
    def test_relative_path(self, platform: Platform, folder: str) -> None:
        assert platform.relative_path == folder

    @pytest.mark.parametrize("value", ["iOS", "ios", " IOS "])
    def test_parse_case_insensitive(self, value: str) -> None:
        assert Platform.parse(value) is Platform.IOS

    @pytest.mark.parametrize("value", ["mac", "osx", "macOS"])
    def test_parse_mac_aliases(self, value: str) -> None:
        assert Platform.parse(value) is Platform.MACOS

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="supported: iOS, macOS, tvOS, watchOS"):
            Platform.parse("android")
