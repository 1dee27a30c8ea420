"""Gross/net salary conversion.

Builds a SalaryBreakdown from a gross salary (income tax plus social
security), and inverts that mapping for a target net salary.

The inverse has no closed form: the bracket schedule is piecewise linear
and DSMF jumps by its fixed fee at the threshold. net_to_gross therefore
iterates guess += (target - net(guess)), a fixed-point correction with unit
gain. Marginal deductions stay well below 100%, so the residual shrinks by
a constant factor each round and the cap of 100 iterations is never reached
for realistic salaries. If it is, the last guess is used as-is.
"""

import logging
import math
import os

from pydantic import BaseModel, ConfigDict, Field

from .taxes import calculate_income_tax, calculate_social_security, round_cents

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)

MAX_ITERATIONS = 100
TOLERANCE = 0.01


class SocialSecurityBreakdown(BaseModel):
    """Social security contributions, each rounded to cents."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    dsmf: float = Field(default=0.0, ge=0)
    unemployment: float = Field(default=0.0, ge=0)
    medical: float = Field(default=0.0, ge=0)
    total: float = Field(default=0.0, ge=0)


class SalaryBreakdown(BaseModel):
    """Result of a salary calculation."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    gross_salary: float = Field(default=0.0, ge=0)
    income_tax: float = Field(default=0.0, ge=0)
    social_security: SocialSecurityBreakdown = Field(default_factory=SocialSecurityBreakdown)
    total_deductions: float = Field(default=0.0, ge=0)
    net_salary: float = Field(default=0.0, ge=0)


def gross_to_net(gross_salary: float) -> SalaryBreakdown:
    """Calculate net salary from gross salary.

    Args:
        gross_salary: Monthly gross salary in AZN

    Returns:
        SalaryBreakdown; all zeros when gross_salary is not a positive
        finite number
    """
    if not math.isfinite(gross_salary) or gross_salary <= 0:
        return SalaryBreakdown()

    income_tax = calculate_income_tax(gross_salary)
    social_security = SocialSecurityBreakdown(**calculate_social_security(gross_salary))
    total_deductions = round_cents(income_tax + social_security.total)
    # Net derives from the rounded gross so net == gross - deductions holds.
    gross = round_cents(gross_salary)

    return SalaryBreakdown(
        gross_salary=gross,
        income_tax=income_tax,
        social_security=social_security,
        total_deductions=total_deductions,
        net_salary=round_cents(gross - total_deductions),
    )


def net_to_gross(
    net_salary: float,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = TOLERANCE,
) -> SalaryBreakdown:
    """Calculate the gross salary that yields a target net salary.

    Args:
        net_salary: Target monthly net salary in AZN
        max_iterations: Iteration cap for the solver
        tolerance: Stop once |computed net - target| is below this

    Returns:
        SalaryBreakdown for the solved gross; gross_to_net(0) when
        net_salary is not a positive finite number. Hitting the iteration
        cap is not an error - the breakdown of the last guess is returned.
    """
    if not math.isfinite(net_salary) or net_salary <= 0:
        return gross_to_net(0)

    gross_salary = net_salary
    converged = False

    for iteration in range(max_iterations):
        computed_net = gross_to_net(gross_salary).net_salary
        difference = net_salary - computed_net
        logger.debug(
            "net_to_gross[%d]: gross=%.4f net=%.2f diff=%.4f",
            iteration, gross_salary, computed_net, difference,
        )

        if abs(difference) < tolerance:
            converged = True
            break

        gross_salary += difference

    if not converged:
        logger.warning(
            f"net_to_gross: no convergence for net {net_salary:.2f} after {max_iterations} iterations; "
            f"using gross {gross_salary:.2f}"
        )

    return gross_to_net(gross_salary)
