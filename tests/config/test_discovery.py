"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from framedeps.config.discovery import CONFIG_FILENAME, find_config, load_config, project_root_for
from framedeps.config.models import FramedepsConfig
from framedeps.domain.platforms import Platform


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[build]\nfolder = "out"\n')
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv("FRAMEDEPS_CONFIG", str(config_file))
        assert find_config(tmp_path) == config_file

    def test_env_var_missing_file_disables_walk_up(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv("FRAMEDEPS_CONFIG", str(tmp_path / "gone.toml"))
        assert find_config(tmp_path) is None


class TestProjectRootFor:
    def test_parent_of_config(self, tmp_path: Path) -> None:
        assert project_root_for(tmp_path / CONFIG_FILENAME) == tmp_path.resolve()

    def test_fallback(self, tmp_path: Path) -> None:
        assert project_root_for(None, tmp_path) == tmp_path.resolve()


class TestLoadConfig:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[build]\nfolder = "out"\n[inference]\nplatform = "mac"\n')
        cfg = load_config(config_file)
        assert cfg.build.folder == "out"
        assert cfg.inference.platform is Platform.MACOS
        assert cfg.linker.command == ["xcrun", "otool", "-L"]  # default

    def test_returns_defaults_when_no_file(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == FramedepsConfig()

    def test_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert load_config(config_file) == FramedepsConfig()
