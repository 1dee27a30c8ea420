"""Pydantic schemas for tax rules validation.

These schemas validate the tax_rules/*.yaml file and provide typed access
to the income tax brackets and social security rates.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TaxBracket(BaseModel):
    """Single income tax bracket: [lower, upper) taxed at rate."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    lower: float = Field(..., ge=0, description="Lower bound (inclusive)")
    upper: Optional[float] = Field(default=None, description="Upper bound (exclusive, None if unbounded)")
    rate: float = Field(..., ge=0, le=1, description="Tax rate as decimal")

    @property
    def is_unbounded(self) -> bool:
        return self.upper is None

    @property
    def width(self) -> float:
        """Amount of salary this bracket covers (inf for the top bracket)."""
        if self.upper is None:
            return float("inf")
        return self.upper - self.lower

    def contains(self, salary: float) -> bool:
        upper = float("inf") if self.upper is None else self.upper
        return self.lower <= salary < upper

    @model_validator(mode="after")
    def check_bounds(self):
        if self.upper is not None and self.upper <= self.lower:
            raise ValueError(f"Bracket upper bound {self.upper} must exceed lower bound {self.lower}")
        return self


class DsmfRules(BaseModel):
    """State Social Protection Fund contribution."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    fixed_fee: float = Field(..., ge=0, description="Flat fee once gross exceeds the threshold")
    rate: float = Field(..., ge=0, le=1, description="Rate applied to the full gross salary")
    threshold: float = Field(..., ge=0, description="Gross at or below which no DSMF is due")


class RateRules(BaseModel):
    """Flat-rate contribution on gross salary."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    rate: float = Field(..., ge=0, le=1)


class SocialSecurityRules(BaseModel):
    """Employee social security contributions."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    dsmf: DsmfRules
    unemployment: RateRules
    medical: RateRules


class TaxRules(BaseModel):
    """Complete payroll rules for the tax year."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    tax_year: int
    currency: str = "AZN"
    tax_brackets: tuple[TaxBracket, ...]
    social_security: SocialSecurityRules

    @model_validator(mode="after")
    def check_brackets(self):
        """Brackets must run contiguously from 0 with only the last one unbounded."""
        if not self.tax_brackets:
            raise ValueError("tax_brackets must not be empty")

        expected_lower = 0.0
        for i, bracket in enumerate(self.tax_brackets):
            if bracket.lower != expected_lower:
                raise ValueError(
                    f"Bracket {i} starts at {bracket.lower}, expected {expected_lower}"
                )
            is_last = i == len(self.tax_brackets) - 1
            if bracket.is_unbounded != is_last:
                raise ValueError("Only the last tax bracket may (and must) be unbounded")
            expected_lower = bracket.upper
        return self
