"""taxes - Azerbaijan income tax and social security rules.

Scope:
- Income tax brackets and DSMF/unemployment/medical rates (tax_rules/2026.yaml)
- Progressive income tax calculation and bracket lookup
- Social security contributions on gross salary

Constraints:
- Pure calculation - receives a salary, returns amounts
- Rules are bundled with the package, loaded once and immutable

Modules:
- schemas: Pydantic models validating the rules file
- rules: Loading and caching of the rules
- income_tax: Bracket walk, cent rounding, bracket lookup/description
- social_security: DSMF, unemployment and medical contributions

Usage:
    from azpay.sdk.taxes import calculate_income_tax, calculate_social_security

    tax = calculate_income_tax(1000)           # 30.0
    ss = calculate_social_security(1000)       # {"dsmf": 106.0, ...}
"""

from .schemas import TaxBracket, TaxRules, SocialSecurityRules, DsmfRules

from .rules import load_tax_rules, get_tax_brackets, TAX_YEAR

from .income_tax import (
    round_cents,
    calculate_income_tax,
    describe_bracket,
    get_tax_bracket_info,
    TaxBracketInfo,
)

from .social_security import (
    calculate_dsmf,
    calculate_unemployment_insurance,
    calculate_medical_insurance,
    calculate_social_security,
)

__all__ = [
    # Schemas
    "TaxBracket",
    "TaxRules",
    "SocialSecurityRules",
    "DsmfRules",
    # Rules
    "load_tax_rules",
    "get_tax_brackets",
    "TAX_YEAR",
    # Income tax
    "round_cents",
    "calculate_income_tax",
    "describe_bracket",
    "get_tax_bracket_info",
    "TaxBracketInfo",
    # Social security
    "calculate_dsmf",
    "calculate_unemployment_insurance",
    "calculate_medical_insurance",
    "calculate_social_security",
]
