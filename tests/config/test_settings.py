"""Tests for DeptSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from deptctl.config.settings import DeptSettings


class TestDeptSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = DeptSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.company.name == "Giggle, Inc."
        assert settings.repl.prompt == "> "

    def test_frozen(self, tmp_path: Path) -> None:
        settings = DeptSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "deptctl.toml"
        toml.write_text('[company]\nname = "Testers, Inc."\n')
        settings = DeptSettings.from_cli(start=tmp_path)
        assert settings.company.name == "Testers, Inc."
        assert settings.config_path == toml
        assert settings.repl.banner is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[repl]\nbanner = false\n')
        settings = DeptSettings.from_cli(config_path=str(custom))
        assert settings.repl.banner is False
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = DeptSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.company.name == "Giggle, Inc."

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "deptctl.toml").write_text("[company\nname=")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DeptSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "deptctl.toml").write_text('[company]\nname = "From TOML"\n')
        monkeypatch.setenv("DEPTCTL_COMPANY__NAME", "From Env")
        settings = DeptSettings.from_cli(start=tmp_path)
        assert settings.company.name == "From Env"

    def test_cli_flags_beat_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEPTCTL_QUIET", "false")
        settings = DeptSettings.from_cli(start=tmp_path, quiet=True)
        assert settings.quiet is True
