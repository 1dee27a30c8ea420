"""Employee social security contributions (DSMF, unemployment, medical)."""

from typing import Dict, Optional

from .income_tax import round_cents
from .rules import load_tax_rules
from .schemas import SocialSecurityRules


def _rules(rules: Optional[SocialSecurityRules]) -> SocialSecurityRules:
    return rules if rules is not None else load_tax_rules().social_security


def calculate_dsmf(gross_salary: float, rules: Optional[SocialSecurityRules] = None) -> float:
    """State Social Protection Fund contribution (unrounded).

    Nothing is due at or below the threshold. Above it the fixed fee is
    charged plus the rate on the whole gross salary, not just the excess.
    """
    dsmf = _rules(rules).dsmf
    if gross_salary <= dsmf.threshold:
        return 0.0
    return dsmf.fixed_fee + gross_salary * dsmf.rate


def calculate_unemployment_insurance(gross_salary: float, rules: Optional[SocialSecurityRules] = None) -> float:
    """Unemployment insurance contribution (unrounded)."""
    return gross_salary * _rules(rules).unemployment.rate


def calculate_medical_insurance(gross_salary: float, rules: Optional[SocialSecurityRules] = None) -> float:
    """Mandatory medical insurance contribution (unrounded)."""
    return gross_salary * _rules(rules).medical.rate


def calculate_social_security(gross_salary: float, rules: Optional[SocialSecurityRules] = None) -> Dict[str, float]:
    """Calculate all social security contributions.

    Args:
        gross_salary: Gross salary for the month
        rules: Contribution rates (defaults to the bundled rules)

    Returns:
        Dict with dsmf, unemployment, medical and total, each rounded to
        cents. The total is the sum of the already-rounded components,
        rounded once more.
    """
    dsmf = round_cents(calculate_dsmf(gross_salary, rules))
    unemployment = round_cents(calculate_unemployment_insurance(gross_salary, rules))
    medical = round_cents(calculate_medical_insurance(gross_salary, rules))

    return {
        "dsmf": dsmf,
        "unemployment": unemployment,
        "medical": medical,
        "total": round_cents(dsmf + unemployment + medical),
    }
