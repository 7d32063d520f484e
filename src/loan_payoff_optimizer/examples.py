"""
Loan Payoff Optimizer - Worked Examples

**Version**: 0.1.0
**Last Updated**: 2026-10-19
**Status**: Active

Named numerical scenarios with inputs and expected outputs. The verification
tests run every public entry point against every example.

Structure:
  (1) LoanParameters   - loan inputs (from models)
  (2) PlanInputs       - follow-on minimum and custom maximum payments
  (3) ExpectedOutcome  - published or hand-derived results

Expected currency figures are in cents. Fields left as None are not checked.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict

from .models import LoanParameters


# =============================================================================
# (2) PLAN INPUTS - payments chosen by the borrower
# =============================================================================

@dataclass
class PlanInputs:
    """Payments supplied by the caller on top of the loan parameters."""
    actual_minimum_payment: Optional[float] = None   # follow-on payment (m)
    custom_max_payment: Optional[float] = None       # custom maximum (C)


# =============================================================================
# (3) EXPECTED OUTCOME
# =============================================================================

@dataclass
class ExpectedOutcome:
    """Results an implementation must reproduce for the example."""
    baseline_payment: Optional[float] = None     # level payment over the original duration
    auto_min_payment: Optional[float] = None     # level payment over the desired duration
    auto_max_payment: Optional[float] = None     # month-1 AutoMax figure
    baseline_entries: Optional[int] = None       # length of the Standard(baseline) schedule
    feasible: Optional[bool] = None              # custom plan search outcome
    plan_entries: Optional[int] = None           # length of the custom plan schedule
    transition_month: Optional[int] = None       # months paid at the custom maximum (k)
    transition_payment: Optional[float] = None   # month k+1 payment
    tolerance: float = 0.01                      # absolute tolerance for payment figures


# =============================================================================
# EXAMPLE - Combines all three components
# =============================================================================

@dataclass
class PlanExample:
    """Sample loan with inputs and expected outputs."""
    id: str
    description: str
    loan: LoanParameters
    inputs: PlanInputs = field(default_factory=PlanInputs)
    expected: ExpectedOutcome = field(default_factory=ExpectedOutcome)

    @property
    def has_custom_plan(self) -> bool:
        """True if the example exercises the custom plan search."""
        return (self.inputs.actual_minimum_payment is not None
                and self.inputs.custom_max_payment is not None)


# =============================================================================
# EXAMPLES
# =============================================================================

# 10,000 at 6% over 5 years: the textbook level payment.
BASELINE_60 = PlanExample(
    id="BASELINE-60",
    description=(
        "A 10,000 loan at 6.0% over 60 months. The standard amortization "
        "payment quoted by financial calculators is 193.33."
    ),
    loan=LoanParameters(
        principal=10_000.0,
        annual_rate_percent=6.0,
        original_duration_months=60,
        desired_duration_months=60,
    ),
    expected=ExpectedOutcome(
        baseline_payment=193.33,
        auto_min_payment=193.33,
        baseline_entries=60,
    ),
)

# Zero interest: every figure is straight-line arithmetic.
ZERO_RATE_10 = PlanExample(
    id="ZERO-RATE-10",
    description=(
        "A 10,000 loan at 0% over 10 months. The level payment is exactly "
        "1,000.00; with a 1,000.00 follow-on payment AutoMax is also 1,000.00."
    ),
    loan=LoanParameters(
        principal=10_000.0,
        annual_rate_percent=0.0,
        original_duration_months=10,
        desired_duration_months=10,
    ),
    inputs=PlanInputs(actual_minimum_payment=1_000.0),
    expected=ExpectedOutcome(
        baseline_payment=1_000.0,
        auto_min_payment=1_000.0,
        auto_max_payment=1_000.0,
        baseline_entries=10,
    ),
)

# Front-loaded plan that fits: two months at 1,000, one transition month,
# nine months at 300.
CUSTOM_PLAN_12 = PlanExample(
    id="CUSTOM-PLAN-12",
    description=(
        "A 5,000 loan at 5.0% to be repaid in 12 months with a 300 minimum and "
        "a 1,000 custom maximum. Paying 1,000 for three or more months overpays "
        "the loan, so the plan pays 1,000 for two months, about 405.64 in month "
        "3 and 300 for the remaining nine months."
    ),
    loan=LoanParameters(
        principal=5_000.0,
        annual_rate_percent=5.0,
        original_duration_months=24,
        desired_duration_months=12,
    ),
    inputs=PlanInputs(actual_minimum_payment=300.0, custom_max_payment=1_000.0),
    expected=ExpectedOutcome(
        feasible=True,
        plan_entries=12,
        transition_month=2,
        transition_payment=405.64,
        tolerance=0.1,
    ),
)

# Custom maximum barely above the minimum: the transition payment would have
# to exceed the custom maximum for every month count.
CUSTOM_MAX_TOO_LOW = PlanExample(
    id="CUSTOM-MAX-TOO-LOW",
    description=(
        "The same 5,000 loan at 5.0% over 12 months with a 300 minimum but only "
        "a 350 custom maximum. No month count leaves a transition payment at "
        "or below 350, so no plan exists."
    ),
    loan=LoanParameters(
        principal=5_000.0,
        annual_rate_percent=5.0,
        original_duration_months=24,
        desired_duration_months=12,
    ),
    inputs=PlanInputs(actual_minimum_payment=300.0, custom_max_payment=350.0),
    expected=ExpectedOutcome(feasible=False, plan_entries=0),
)

# A two-month horizon leaves no month for the custom maximum.
HORIZON_TOO_SHORT = PlanExample(
    id="HORIZON-TOO-SHORT",
    description=(
        "A 2,000 loan at 4.0% with a desired duration of 2 months. One month "
        "is reserved for the transition payment and one for the minimum tail, "
        "so no month is left for the custom maximum."
    ),
    loan=LoanParameters(
        principal=2_000.0,
        annual_rate_percent=4.0,
        original_duration_months=12,
        desired_duration_months=2,
    ),
    inputs=PlanInputs(actual_minimum_payment=500.0, custom_max_payment=1_500.0),
    expected=ExpectedOutcome(feasible=False, plan_entries=0),
)


PLAN_EXAMPLES: Dict[str, PlanExample] = {
    ex.id: ex
    for ex in (BASELINE_60, ZERO_RATE_10, CUSTOM_PLAN_12, CUSTOM_MAX_TOO_LOW, HORIZON_TOO_SHORT)
}
