"""Display formatting for salary breakdowns.

The calculator returns plain floats; these helpers turn them into AZN
strings for the CLI and MCP output.
"""

from typing import Any, Dict

from .salary import SalaryBreakdown

CURRENCY_SYMBOL = "₼"


def format_currency(amount: float) -> str:
    """Format an amount the az-AZ way: '1.234,56 ₼'."""
    sign = "-" if amount < 0 else ""
    # Python groups with ',' and uses '.' for decimals; swap them.
    text = f"{abs(amount):,.2f}".replace(",", " ").replace(".", ",").replace(" ", ".")
    return f"{sign}{text} {CURRENCY_SYMBOL}"


def _money(amount: float) -> Dict[str, Any]:
    return {"amount": amount, "formatted": format_currency(amount)}


def format_breakdown(breakdown: SalaryBreakdown) -> Dict[str, Any]:
    """Pair every monetary field with its formatted string.

    Returns:
        Dict mirroring SalaryBreakdown where each amount becomes
        {"amount": float, "formatted": str}
    """
    ss = breakdown.social_security
    return {
        "gross_salary": _money(breakdown.gross_salary),
        "income_tax": _money(breakdown.income_tax),
        "social_security": {
            "dsmf": _money(ss.dsmf),
            "unemployment": _money(ss.unemployment),
            "medical": _money(ss.medical),
            "total": _money(ss.total),
        },
        "total_deductions": _money(breakdown.total_deductions),
        "net_salary": _money(breakdown.net_salary),
    }
