"""Rich renderer for salary breakdowns.

Transforms SDK output into formatted Rich tables.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from azpay.sdk import SalaryBreakdown, TaxRules, format_currency, describe_bracket


def render_breakdown(
    console: Console,
    breakdown: SalaryBreakdown,
    mode: str,
    bracket_description: Optional[str] = None,
) -> None:
    """Render a salary breakdown as a Rich table.

    Args:
        console: Rich Console instance
        breakdown: Result of gross_to_net() / net_to_gross()
        mode: "gross-to-net" or "net-to-gross"; picks the headline figure
        bracket_description: Marginal bracket text shown as the caption
    """
    if mode == "net-to-gross":
        headline_label, headline = "Gross salary", breakdown.gross_salary
        other_label, other = "Net salary", breakdown.net_salary
    else:
        headline_label, headline = "Net salary", breakdown.net_salary
        other_label, other = "Gross salary", breakdown.gross_salary

    ss = breakdown.social_security

    table = Table(box=box.SIMPLE, show_header=False, caption=bracket_description)
    table.add_column("item")
    table.add_column("amount", justify="right")

    table.add_row(f"[bold]{headline_label}[/bold]", f"[bold green]{format_currency(headline)}[/bold green]")
    table.add_row(other_label, format_currency(other))
    table.add_section()
    table.add_row("Income tax", f"[red]{format_currency(breakdown.income_tax)}[/red]")
    table.add_row("DSMF", f"[red]{format_currency(ss.dsmf)}[/red]")
    table.add_row("Unemployment insurance", f"[red]{format_currency(ss.unemployment)}[/red]")
    table.add_row("Medical insurance", f"[red]{format_currency(ss.medical)}[/red]")
    table.add_section()
    table.add_row("[bold]Total deductions[/bold]", f"[bold red]{format_currency(breakdown.total_deductions)}[/bold red]")

    title = "Gross → Net" if mode == "gross-to-net" else "Net → Gross"
    console.print(Panel(table, title=title, border_style="cyan", expand=False))


def render_rules(console: Console, rules: TaxRules) -> None:
    """Render the bracket schedule and contribution rates."""
    brackets = Table(title=f"Income tax {rules.tax_year}", box=box.SIMPLE_HEAD)
    brackets.add_column("From", justify="right")
    brackets.add_column("To", justify="right")
    brackets.add_column("Rate", justify="right")
    brackets.add_column("Description", style="dim")

    for bracket in rules.tax_brackets:
        upper = "—" if bracket.upper is None else format_currency(bracket.upper)
        brackets.add_row(
            format_currency(bracket.lower),
            upper,
            f"{bracket.rate * 100:g}%",
            describe_bracket(bracket, rules.currency),
        )
    console.print(brackets)

    ss = rules.social_security
    contributions = Table(title="Social security", box=box.SIMPLE_HEAD)
    contributions.add_column("Contribution")
    contributions.add_column("Rule")
    contributions.add_row(
        "DSMF",
        f"0 up to {format_currency(ss.dsmf.threshold)}, then "
        f"{format_currency(ss.dsmf.fixed_fee)} + {ss.dsmf.rate * 100:g}% of gross",
    )
    contributions.add_row("Unemployment insurance", f"{ss.unemployment.rate * 100:g}% of gross")
    contributions.add_row("Medical insurance", f"{ss.medical.rate * 100:g}% of gross")
    console.print(contributions)
