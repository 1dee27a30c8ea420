"""azpay CLI - Command-line interface for Azerbaijan salary calculations."""

import json
import math

import click
from rich.console import Console

from azpay import __version__
from azpay.sdk import (
    MODES,
    OUTPUT_FORMATS,
    get_setting,
    get_tax_bracket_info,
    gross_to_net,
    load_tax_rules,
    net_to_gross,
)

from .renderers.breakdown_renderer import render_breakdown, render_rules
from .settings_commands import settings as settings_group


@click.group()
@click.version_option(version=__version__, prog_name="azpay")
def cli():
    """azpay - Azerbaijan salary calculator (2026 tax law).

    Converts monthly gross salary to net and back, showing income tax,
    DSMF, unemployment and medical insurance deductions.

    Settings are loaded from (in order):

    \b
    1. AZPAY_CONFIG_PATH environment variable
    2. ~/.config/azpay/settings.json (XDG default)

    Run 'azpay settings show' to see current settings.
    """
    pass


cli.add_command(settings_group)

format_option = click.option(
    "--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None,
    help="Output format (default: output_format setting, else table)",
)


def _show_result(amount: float, mode: str, output_format: str) -> None:
    """Calculate and print a breakdown for the given mode."""
    if output_format is None:
        output_format = get_setting("output_format")

    if not math.isfinite(amount) or amount <= 0:
        click.echo("Enter a positive amount to calculate.")
        return

    breakdown = gross_to_net(amount) if mode == "gross-to-net" else net_to_gross(amount)

    if output_format == "json":
        click.echo(json.dumps(breakdown.model_dump(), indent=2))
        return

    info = get_tax_bracket_info(breakdown.gross_salary)
    render_breakdown(Console(), breakdown, mode, info.description if info else None)


@cli.command("gross-to-net")
@click.argument("amount", type=float)
@format_option
def gross_to_net_cmd(amount, output_format):
    """Calculate net salary from a monthly gross AMOUNT (AZN).

    \b
    Examples:
      azpay gross-to-net 1000
      azpay gross-to-net 1000 --format json
    """
    _show_result(amount, "gross-to-net", output_format)


@cli.command("net-to-gross")
@click.argument("amount", type=float)
@format_option
def net_to_gross_cmd(amount, output_format):
    """Calculate the gross salary needed for a monthly net AMOUNT (AZN).

    \b
    Examples:
      azpay net-to-gross 839
    """
    _show_result(amount, "net-to-gross", output_format)


@cli.command("calc")
@click.argument("amount", type=float)
@click.option("--mode", type=click.Choice(MODES), default=None,
              help="Direction of the calculation (default: default_mode setting)")
@format_option
def calc(amount, mode, output_format):
    """Calculate in the default direction.

    Uses the default_mode setting unless --mode is given.
    """
    if mode is None:
        mode = get_setting("default_mode")
    _show_result(amount, mode, output_format)


@cli.command("bracket")
@click.argument("amount", type=float)
def bracket(amount):
    """Show the income tax bracket a gross AMOUNT falls into."""
    info = get_tax_bracket_info(amount)
    if info is None:
        raise click.ClickException(f"No tax bracket covers {amount:.2f}")
    click.echo(info.description)


@cli.command("brackets")
def brackets():
    """List the income tax brackets and social security rates."""
    render_rules(Console(), load_tax_rules())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
