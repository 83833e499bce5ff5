"""Tests for timetraveller.toml discovery."""

from pathlib import Path

import pytest

from timetraveller.config.discovery import CONFIG_ENV_VAR, find_config


class TestFindConfig:
    def test_in_start_dir(self, tmp_path: Path) -> None:
        toml = tmp_path / "timetraveller.toml"
        toml.write_text("")
        assert find_config(tmp_path) == toml.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        toml = tmp_path / "timetraveller.toml"
        toml.write_text("")
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        assert find_config(deep) == toml.resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "timetraveller.toml").write_text("")
        other = tmp_path / "elsewhere.toml"
        other.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None
