"""Tests for the root CLI group and its global flags."""

import pytest
from click.testing import CliRunner

from regform import __version__
from regform.cli import cli


@pytest.mark.usefixtures("_isolated_root")
class TestRootGroup:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "registration form" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_args_shows_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage" in result.output

    @pytest.mark.parametrize("name", ["validate", "age", "register", "show", "counter"])
    def test_commands_registered(self, cli_runner: CliRunner, name: str) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert name in result.output

    @pytest.mark.parametrize("name", ["validate", "age", "register", "show", "counter"])
    def test_examples_flag(self, cli_runner: CliRunner, name: str) -> None:
        result = cli_runner.invoke(cli, [name, "--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output
        assert f"regform {name}" in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestConfigFile:
    def test_config_minimum_age_applies(self, cli_runner: CliRunner, tmp_path) -> None:
        (tmp_path / "regform.toml").write_text("[form]\nminimum_age = 21\n", encoding="utf-8")
        result = cli_runner.invoke(
            cli, ["--json", "validate", "birth", "2006-01-01", "--on", "2026-10-19"]
        )
        assert result.exit_code == 1
        assert "Must be at least 21 years old" in result.output

    def test_env_overrides_config(
        self, cli_runner: CliRunner, tmp_path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "regform.toml").write_text("[form]\nminimum_age = 21\n", encoding="utf-8")
        monkeypatch.setenv("REGFORM_FORM__MINIMUM_AGE", "18")
        result = cli_runner.invoke(
            cli, ["--json", "validate", "birth", "2006-01-01", "--on", "2026-10-19"]
        )
        assert result.exit_code == 0, result.output

    def test_invalid_toml_is_reported(self, cli_runner: CliRunner, tmp_path) -> None:
        (tmp_path / "regform.toml").write_text("[form\n", encoding="utf-8")
        result = cli_runner.invoke(cli, ["counter"])
        assert result.exit_code != 0
        assert "Invalid TOML" in result.output

    def test_verbose_json_includes_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-v", "age", "1991-11-07", "--on", "2026-12-01"])
        assert result.exit_code == 0, result.output
        assert '"telemetry"' in result.output
        assert "FieldService.age" in result.output
