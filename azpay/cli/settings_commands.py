"""Settings CLI commands for azpay.

Manages settings.json - default calculation mode and output format.
"""

import click

from azpay.sdk import (
    KNOWN_SETTINGS,
    SettingsError,
    get_setting,
    get_settings_path,
    load_settings,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - default_mode: gross-to-net | net-to-gross
    - output_format: table | json
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their effective values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
        click.echo()

    click.echo("Effective settings:")
    for key in KNOWN_SETTINGS:
        suffix = "" if key in current else " (default)"
        click.echo(f"  {key}: {get_setting(key)}{suffix}")


@settings.command("set")
@click.argument("key")
@click.argument("value")
def settings_set(key, value):
    """Set KEY to VALUE.

    Examples:
        azpay settings set default_mode net-to-gross
        azpay settings set output_format json
    """
    try:
        path = set_setting(key, value)
    except SettingsError as e:
        raise click.ClickException(str(e))
    click.echo(f"Set {key}: {value}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key")
def settings_unset(key):
    """Remove KEY, reverting it to the default."""
    if unset_setting(key):
        click.echo(f"Cleared {key}. Now: {get_setting(key)} (default)")
    else:
        click.echo(f"{key} was not set.")
