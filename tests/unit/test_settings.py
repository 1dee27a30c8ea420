"""Tests for settings.json management.

Uses isolated directories via tmp_path and AZPAY_CONFIG_PATH
to avoid touching real settings.
"""

import json

import pytest

from azpay.sdk import (
    SettingsError,
    get_config_dir,
    get_setting,
    get_settings_path,
    load_settings,
    set_setting,
    unset_setting,
)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point settings at an empty temp config directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("AZPAY_CONFIG_PATH", str(config_dir))
    return config_dir


class TestConfigDir:

    def test_env_override(self, isolated_config):
        assert get_config_dir() == isolated_config
        assert get_settings_path() == isolated_config / "settings.json"

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("AZPAY_CONFIG_PATH", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / "azpay"


class TestSettings:

    def test_missing_file_gives_defaults(self, isolated_config):
        assert load_settings() == {}
        assert get_setting("default_mode") == "gross-to-net"
        assert get_setting("output_format") == "table"

    def test_set_and_get(self, isolated_config):
        path = set_setting("default_mode", "net-to-gross")

        assert path == isolated_config / "settings.json"
        assert json.loads(path.read_text()) == {"default_mode": "net-to-gross"}
        assert get_setting("default_mode") == "net-to-gross"

    def test_invalid_value_rejected(self, isolated_config):
        with pytest.raises(SettingsError, match="Invalid value"):
            set_setting("output_format", "xml")
        assert not get_settings_path().exists()

    def test_unknown_key_rejected(self, isolated_config):
        with pytest.raises(SettingsError, match="Unknown setting"):
            set_setting("tax_year", "2027")

    def test_stored_invalid_value_ignored(self, isolated_config):
        isolated_config.mkdir()
        (isolated_config / "settings.json").write_text(json.dumps({"default_mode": "sideways"}))
        assert get_setting("default_mode") == "gross-to-net"

    def test_unset(self, isolated_config):
        set_setting("output_format", "json")

        assert unset_setting("output_format") is True
        assert unset_setting("output_format") is False
        assert get_setting("output_format") == "table"
