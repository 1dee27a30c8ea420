"""azpay SDK - Azerbaijan gross/net salary calculations."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    validate_setting,
    SettingsError,
    KNOWN_SETTINGS,
    MODES,
    OUTPUT_FORMATS,
)

from .taxes import (
    TaxBracket,
    TaxRules,
    TaxBracketInfo,
    load_tax_rules,
    round_cents,
    calculate_income_tax,
    calculate_social_security,
    describe_bracket,
    get_tax_bracket_info,
)

from .salary import (
    SalaryBreakdown,
    SocialSecurityBreakdown,
    gross_to_net,
    net_to_gross,
    MAX_ITERATIONS,
    TOLERANCE,
)

from .formatting import format_currency, format_breakdown

__all__ = [
    # Settings
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "validate_setting",
    "SettingsError",
    "KNOWN_SETTINGS",
    "MODES",
    "OUTPUT_FORMATS",
    # Tax rules
    "TaxBracket",
    "TaxRules",
    "TaxBracketInfo",
    "load_tax_rules",
    "round_cents",
    "calculate_income_tax",
    "calculate_social_security",
    "describe_bracket",
    "get_tax_bracket_info",
    # Salary conversion
    "SalaryBreakdown",
    "SocialSecurityBreakdown",
    "gross_to_net",
    "net_to_gross",
    "MAX_ITERATIONS",
    "TOLERANCE",
    # Formatting
    "format_currency",
    "format_breakdown",
]
