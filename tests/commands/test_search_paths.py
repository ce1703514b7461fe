"""Tests for the search-paths command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from framedeps.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestSearchPathsCommand:
    def test_default(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "search-paths"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == [str((project_root / "Carthage" / "Build" / "iOS").resolve())]

    def test_platform_and_extra_paths(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "search-paths", "--platform", "mac", "--search-path", "Vendor", "--search-path", "Vendor"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["platform"] == "macOS"
        assert data["items"] == [
            str((project_root / "Vendor").resolve()),
            str((project_root / "Carthage" / "Build" / "Mac").resolve()),
        ]

    def test_config_file_settings(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "framedeps.toml").write_text(
            '[build]\nfolder = "out"\n[inference]\nplatform = "tvOS"\nsearch_paths = ["Vendor"]\n'
        )

        result = cli_runner.invoke(cli, ["-q", "search-paths"])

        assert result.stdout.splitlines() == [
            str((project_root / "Vendor").resolve()),
            str((project_root / "out" / "tvOS").resolve()),
        ]
