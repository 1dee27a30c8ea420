"""Tax rules loading.

The 2026 schedule ships with the package as tax_rules/2026.yaml. It is read
and validated once per process; callers always get the same immutable
TaxRules instance.
"""

import logging
from functools import lru_cache
from pathlib import Path

import yaml

from .schemas import TaxBracket, TaxRules

logger = logging.getLogger(__name__)

TAX_YEAR = 2026


def _get_tax_rules_dir() -> Path:
    """Get the tax_rules directory path."""
    package_root = Path(__file__).parent.parent.parent  # taxes -> sdk -> azpay
    return package_root / "tax_rules"


@lru_cache(maxsize=None)
def load_tax_rules() -> TaxRules:
    """Load and validate the bundled tax rules (cached)."""
    config_file = _get_tax_rules_dir() / f"{TAX_YEAR}.yaml"
    if not config_file.exists():
        raise FileNotFoundError(f"Tax rules file not found for year {TAX_YEAR}: {config_file}")

    with open(config_file, "r") as f:
        raw = yaml.safe_load(f)

    rules = TaxRules.model_validate(raw)
    logger.debug(f"Loaded {len(rules.tax_brackets)} tax brackets from {config_file.name}")
    return rules


def get_tax_brackets() -> tuple[TaxBracket, ...]:
    """Ordered income tax brackets for the bundled tax year."""
    return load_tax_rules().tax_brackets
