"""Progressive income tax and bracket lookup."""

from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple, Optional, Sequence

from .rules import get_tax_brackets, load_tax_rules
from .schemas import TaxBracket

_CENT = Decimal("0.01")


def round_cents(amount: float) -> float:
    """Round to 2 decimal places, half-up at the cent.

    Goes through the float's shortest repr so that 2.675 -> 2.68 rather
    than the binary-float artefact 2.67.
    """
    return float(Decimal(repr(amount)).quantize(_CENT, rounding=ROUND_HALF_UP))


def calculate_income_tax(gross_salary: float, brackets: Optional[Sequence[TaxBracket]] = None) -> float:
    """Calculate monthly income tax by walking the bracket schedule.

    Each bracket taxes min(remaining salary, bracket width) at its rate; the
    unbounded top bracket takes whatever is left.

    Args:
        gross_salary: Gross salary (zero or negative yields 0)
        brackets: Ordered brackets (defaults to the bundled schedule)

    Returns:
        Income tax rounded to cents
    """
    if gross_salary <= 0:
        return 0.0

    if brackets is None:
        brackets = get_tax_brackets()

    total_tax = 0.0
    remaining = gross_salary

    for bracket in brackets:
        if remaining <= 0:
            break

        taxable_amount = min(remaining, bracket.width)
        if taxable_amount > 0:
            total_tax += taxable_amount * bracket.rate
            remaining -= taxable_amount

    return round_cents(total_tax)


class TaxBracketInfo(NamedTuple):
    bracket: TaxBracket
    description: str


def _format_number(value: float) -> str:
    """Render 2500.0 as '2500' and 0.14 * 100 as '14'."""
    return f"{round(value, 6):g}"


def describe_bracket(bracket: TaxBracket, currency: Optional[str] = None) -> str:
    """Human-readable description of a tax bracket.

    Examples:
        Up to 2500 AZN: 3% tax
        2500-8000 AZN: 10% of amount in this range
        Above 8000 AZN: 14% of excess amount
    """
    if currency is None:
        currency = load_tax_rules().currency
    pct = _format_number(bracket.rate * 100)

    if bracket.lower == 0 and not bracket.is_unbounded:
        return f"Up to {_format_number(bracket.upper)} {currency}: {pct}% tax"
    elif bracket.is_unbounded:
        return f"Above {_format_number(bracket.lower)} {currency}: {pct}% of excess amount"
    else:
        return (
            f"{_format_number(bracket.lower)}-{_format_number(bracket.upper)} {currency}: "
            f"{pct}% of amount in this range"
        )


def get_tax_bracket_info(salary: float, brackets: Optional[Sequence[TaxBracket]] = None) -> Optional[TaxBracketInfo]:
    """Find the bracket a salary falls into (first match wins).

    Returns:
        TaxBracketInfo, or None if no bracket covers the salary (e.g. negative)
    """
    if brackets is None:
        brackets = get_tax_brackets()

    for bracket in brackets:
        if bracket.contains(salary):
            return TaxBracketInfo(bracket=bracket, description=describe_bracket(bracket))
    return None
