"""Tests for ``regform counter``."""

import json

import pytest
from click.testing import CliRunner

from regform.cli import cli


@pytest.mark.usefixtures("_isolated_root")
class TestCounterCommand:
    def test_default_single_click(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["counter"])
        assert result.exit_code == 0
        assert result.output.strip() == "Count: 1"

    def test_many_clicks(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["counter", "--clicks", "3"])
        assert result.output.strip() == "Count: 3"

    def test_zero_clicks(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "counter", "--clicks", "0"])
        assert result.output.strip() == "Count: 0"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "counter", "--clicks", "2"])
        assert json.loads(result.output)["data"] == {"count": 2, "label": "Count: 2"}

    def test_negative_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["counter", "--clicks", "-1"])
        assert result.exit_code == 2
