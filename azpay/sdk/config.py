"""Settings management for azpay.

Settings live in settings.json inside the config directory:

Config directory resolution:
1. AZPAY_CONFIG_PATH environment variable (if set)
2. ~/.config/azpay/ (XDG_CONFIG_HOME fallback)

Known settings:
- default_mode: "gross-to-net" or "net-to-gross" (used by 'azpay calc')
- output_format: "table" or "json"

Tax rules are not configurable here; they ship with the package.
"""

import json
import os
from pathlib import Path
from typing import Any

APP_NAME = "azpay"
SETTINGS_FILENAME = "settings.json"

MODES = ("gross-to-net", "net-to-gross")
OUTPUT_FORMATS = ("table", "json")

# key -> (allowed values, default)
KNOWN_SETTINGS = {
    "default_mode": (MODES, "gross-to-net"),
    "output_format": (OUTPUT_FORMATS, "table"),
}


class SettingsError(ValueError):
    """Raised for unknown setting keys or invalid values."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. AZPAY_CONFIG_PATH environment variable
    2. ~/.config/azpay/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("AZPAY_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def validate_setting(key: str, value: Any) -> None:
    """Raise SettingsError unless key is known and value is allowed."""
    if key not in KNOWN_SETTINGS:
        raise SettingsError(
            f"Unknown setting '{key}'. Known settings: {', '.join(sorted(KNOWN_SETTINGS))}"
        )
    allowed, _ = KNOWN_SETTINGS[key]
    if value not in allowed:
        raise SettingsError(f"Invalid value '{value}' for {key}. Choose from: {', '.join(allowed)}")


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value, falling back to the built-in default for known keys.

    A stored value that is no longer valid is ignored in favour of the default.
    """
    value = load_settings().get(key)
    if key in KNOWN_SETTINGS:
        allowed, builtin_default = KNOWN_SETTINGS[key]
        if value not in allowed:
            return builtin_default if default is None else default
        return value
    return default if value is None else value


def set_setting(key: str, value: Any) -> Path:
    """Validate and store a setting.

    Returns:
        Path to the saved settings file
    """
    validate_setting(key, value)
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was present."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True
