"""Tests for the azpay CLI commands."""

import json

import pytest
from click.testing import CliRunner

from azpay import __version__
from azpay.cli.__main__ import cli


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Isolated settings directory with no settings.json."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("AZPAY_CONFIG_PATH", str(config_dir))
    return config_dir


@pytest.fixture
def runner():
    return CliRunner()


class TestCalculationCommands:

    def test_gross_to_net_json(self, runner, isolated_config):
        result = runner.invoke(cli, ["gross-to-net", "1000", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["net_salary"] == 839.0
        assert data["income_tax"] == 30.0
        assert data["social_security"]["dsmf"] == 106.0

    def test_gross_to_net_table(self, runner, isolated_config):
        result = runner.invoke(cli, ["gross-to-net", "1000"])

        assert result.exit_code == 0, result.output
        assert "Net salary" in result.output
        assert "839,00 ₼" in result.output
        assert "161,00 ₼" in result.output
        assert "Up to 2500 AZN: 3% tax" in result.output

    def test_net_to_gross_json(self, runner, isolated_config):
        result = runner.invoke(cli, ["net-to-gross", "839", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert abs(data["net_salary"] - 839) < 0.01
        assert round(data["gross_salary"]) == 1000

    def test_non_positive_amount(self, runner, isolated_config):
        result = runner.invoke(cli, ["gross-to-net", "0"])

        assert result.exit_code == 0
        assert "Enter a positive amount" in result.output

    @pytest.mark.parametrize("command", ["gross-to-net", "net-to-gross"])
    @pytest.mark.parametrize("amount", ["nan", "inf"])
    def test_non_finite_amount(self, runner, isolated_config, command, amount):
        result = runner.invoke(cli, [command, amount, "--format", "json"])

        assert result.exit_code == 0, result.output
        assert result.exception is None
        assert "Enter a positive amount" in result.output

    def test_non_numeric_amount_rejected(self, runner, isolated_config):
        result = runner.invoke(cli, ["gross-to-net", "abc"])
        assert result.exit_code == 2

    def test_output_format_setting(self, runner, isolated_config):
        (isolated_config / "settings.json").write_text(json.dumps({"output_format": "json"}))

        result = runner.invoke(cli, ["gross-to-net", "1000"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["net_salary"] == 839.0


class TestCalcCommand:

    def test_defaults_to_gross_to_net(self, runner, isolated_config):
        result = runner.invoke(cli, ["calc", "1000", "--format", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["net_salary"] == 839.0

    def test_uses_default_mode_setting(self, runner, isolated_config):
        (isolated_config / "settings.json").write_text(json.dumps({"default_mode": "net-to-gross"}))

        result = runner.invoke(cli, ["calc", "839", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert abs(data["net_salary"] - 839) < 0.01
        assert round(data["gross_salary"]) == 1000

    def test_mode_option_wins(self, runner, isolated_config):
        (isolated_config / "settings.json").write_text(json.dumps({"default_mode": "net-to-gross"}))

        result = runner.invoke(cli, ["calc", "1000", "--mode", "gross-to-net", "--format", "json"])

        assert json.loads(result.output)["net_salary"] == 839.0


class TestBracketCommands:

    def test_bracket(self, runner):
        result = runner.invoke(cli, ["bracket", "2500"])

        assert result.exit_code == 0
        assert result.output.strip() == "2500-8000 AZN: 10% of amount in this range"

    def test_bracket_negative(self, runner):
        result = runner.invoke(cli, ["bracket", "--", "-1"])

        assert result.exit_code == 1
        assert "No tax bracket covers" in result.output

    def test_brackets_listing(self, runner):
        result = runner.invoke(cli, ["brackets"])

        assert result.exit_code == 0, result.output
        assert "Income tax 2026" in result.output
        assert "DSMF" in result.output


class TestSettingsCommands:

    def test_show_defaults(self, runner, isolated_config):
        result = runner.invoke(cli, ["settings", "show"])

        assert result.exit_code == 0
        assert "No settings configured" in result.output
        assert "default_mode: gross-to-net (default)" in result.output

    def test_set_and_unset(self, runner, isolated_config):
        result = runner.invoke(cli, ["settings", "set", "default_mode", "net-to-gross"])
        assert result.exit_code == 0
        saved = json.loads((isolated_config / "settings.json").read_text())
        assert saved == {"default_mode": "net-to-gross"}

        result = runner.invoke(cli, ["settings", "unset", "default_mode"])
        assert result.exit_code == 0
        assert "Cleared default_mode" in result.output

    def test_set_invalid_value(self, runner, isolated_config):
        result = runner.invoke(cli, ["settings", "set", "default_mode", "sideways"])

        assert result.exit_code == 1
        assert "Invalid value" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert __version__ in result.output
