"""Tests for framework search path resolution."""

from __future__ import annotations

from pathlib import Path

from framedeps.domain.platforms import Platform
from framedeps.infrastructure.search_paths import all_search_paths, canonicalize, default_search_path

PROJECT = Path("/Project/Directory")


class TestDefaultSearchPath:
    def test_combines_project_and_platform_folder(self) -> None:
        path = default_search_path(PROJECT, Platform.IOS)
        assert path == Path("/Project/Directory/Carthage/Build/iOS")

    def test_mac_folder(self) -> None:
        path = default_search_path(PROJECT, Platform.MACOS)
        assert path == Path("/Project/Directory/Carthage/Build/Mac")

    def test_custom_build_folder(self) -> None:
        path = default_search_path(PROJECT, Platform.TVOS, build_folder="out/frameworks")
        assert path == Path("/Project/Directory/out/frameworks/tvOS")


class TestAllSearchPaths:
    def test_preserves_order_when_default_included(self, tmp_path: Path) -> None:
        paths = [
            tmp_path / "Frameworks",
            tmp_path / "Carthage" / "Build" / "iOS",
            tmp_path / "External",
        ]
        result = all_search_paths(tmp_path, Platform.IOS, paths)
        assert result == [canonicalize(p) for p in paths]

    def test_appends_default_when_missing(self, tmp_path: Path) -> None:
        paths = [tmp_path / "Frameworks", tmp_path / "External"]
        result = all_search_paths(tmp_path, Platform.IOS, paths)
        assert result == [
            canonicalize(tmp_path / "Frameworks"),
            canonicalize(tmp_path / "External"),
            canonicalize(tmp_path / "Carthage" / "Build" / "iOS"),
        ]

    def test_no_explicit_paths(self, tmp_path: Path) -> None:
        result = all_search_paths(tmp_path, Platform.WATCHOS)
        assert result == [canonicalize(tmp_path / "Carthage" / "Build" / "watchOS")]

    def test_resolves_symlinks(self, tmp_path: Path) -> None:
        real = tmp_path / "private" / "path"
        real.mkdir(parents=True)
        alias = tmp_path / "alias"
        alias.symlink_to(real)

        result = all_search_paths(tmp_path, Platform.IOS, [alias])

        assert result[0] == real.resolve()

    def test_excludes_duplicates_keeping_first_occurrence(self, tmp_path: Path) -> None:
        real = tmp_path / "private" / "path"
        real.mkdir(parents=True)
        alias = tmp_path / "path"
        alias.symlink_to(real)
        frameworks = tmp_path / "Frameworks"

        result = all_search_paths(tmp_path, Platform.IOS, [frameworks, alias, real, frameworks])

        assert result == [
            canonicalize(frameworks),
            real.resolve(),
            canonicalize(tmp_path / "Carthage" / "Build" / "iOS"),
        ]

    def test_default_reached_through_symlink_is_not_repeated(self, tmp_path: Path) -> None:
        default = tmp_path / "Carthage" / "Build" / "iOS"
        default.mkdir(parents=True)
        link = tmp_path / "ios-build"
        link.symlink_to(default)

        result = all_search_paths(tmp_path, Platform.IOS, [link, tmp_path / "Other"])

        assert result == [default.resolve(), canonicalize(tmp_path / "Other")]

    def test_normalizes_dot_segments(self, tmp_path: Path) -> None:
        result = all_search_paths(tmp_path, Platform.IOS, [tmp_path / "a" / ".." / "b"])
        assert result[0] == canonicalize(tmp_path / "b")
