# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
"""
Entry points for callers (forms, reports, services).

Every function is a pure computation over its arguments: nothing is cached
and no state survives between calls, so a caller simply re-invokes the
functions whose inputs changed. Inputs are assumed valid; LoanParameters and
the policy dataclasses enforce that at construction.
"""
from __future__ import annotations

import logging
import warnings

from .annuity import front_max_payment, minimum_payment_for
from .config import CURRENCY_DECIMALS, DEFAULT_SEARCH_CONFIG, SearchConfig
from .models import (
    AutoMax,
    CustomMax,
    LoanParameters,
    PaymentPolicy,
    PlanComparison,
    Schedule,
    SearchResult,
    Standard,
)
from .schedule import build_schedule
from .search import search_bisection, search_discrete

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


# =============================================================================
# Scalar Figures
# =============================================================================

def compute_baseline_payment(
        principal: float,
        annual_rate_percent: float,
        duration_months: int
) -> float:
    """
    Minimum level payment for the loan's original duration, rounded to cents.

    Example:
        >>> compute_baseline_payment(10_000, 6.0, 60)
        193.33
    """
    return round(minimum_payment_for(principal, annual_rate_percent, duration_months), CURRENCY_DECIMALS)


def compute_auto_min(
        principal: float,
        annual_rate_percent: float,
        desired_duration_months: int
) -> float:
    """Level payment that repays the loan over the desired duration, rounded to cents."""
    return round(
        minimum_payment_for(principal, annual_rate_percent, desired_duration_months),
        CURRENCY_DECIMALS
    )


def compute_auto_max(
        principal: float,
        annual_rate_percent: float,
        desired_duration_months: int,
        actual_minimum_payment: float
) -> float:
    """
    Largest month-1 payment after which ``actual_minimum_payment`` repays the
    loan in exactly the desired duration, rounded to cents.

    Warns:
        UserWarning: If the figure is <= 0, meaning the minimum payment alone
            already repays the loan within the desired duration.
    """
    auto_max = round(
        front_max_payment(principal, annual_rate_percent, desired_duration_months, actual_minimum_payment),
        CURRENCY_DECIMALS
    )
    if auto_max <= 0:
        warnings.warn(
            f"AutoMax payment is {auto_max:.2f}: a minimum payment of {actual_minimum_payment:.2f} "
            f"already repays the loan within {desired_duration_months} months",
            UserWarning
        )
    return auto_max


# =============================================================================
# Schedules and Plans
# =============================================================================

def search_custom_plan(
        loan: LoanParameters,
        actual_minimum_payment: float,
        custom_max_payment: float,
        config: SearchConfig | None = None
) -> SearchResult:
    """
    Find a "custom maximum, one transition payment, then minimum" plan that
    repays the loan in exactly loan.desired_duration_months.

    The discrete search is used unless config.strategy is "bisection".
    Infeasibility is returned as SearchResult.infeasible(), never raised.
    """
    config = config or DEFAULT_SEARCH_CONFIG
    logger.debug("custom plan search: strategy=%s principal=%.2f rate=%.4f%% N=%d m=%.2f C=%.2f",
                 config.strategy, loan.principal, loan.annual_rate_percent,
                 loan.desired_duration_months, actual_minimum_payment, custom_max_payment)
    if config.strategy == "bisection":
        return search_bisection(
            loan.principal,
            loan.monthly_rate,
            loan.desired_duration_months,
            actual_minimum_payment,
            custom_max_payment,
            transition_month=config.transition_month,
            tolerance=config.tolerance,
            max_iterations=config.max_iterations,
        )
    return search_discrete(
        loan.principal,
        loan.monthly_rate,
        loan.desired_duration_months,
        actual_minimum_payment,
        custom_max_payment,
        descending=(config.direction == "descending"),
    )


def compute_schedule(
        loan: LoanParameters,
        policy: PaymentPolicy,
        config: SearchConfig | None = None
) -> Schedule:
    """
    Build the authoritative schedule for ``loan`` under ``policy``.

    Standard(payment)
        Level ``payment`` over the original duration, balanced on the last month.
    AutoMax(minimum_payment)
        The AutoMax figure in month 1, then ``minimum_payment`` to the desired
        duration. This is the transition-only plan (k = 0), so a figure <= 0
        yields an empty schedule.
    CustomMax(payment, minimum_payment)
        The schedule found by search_custom_plan (empty when infeasible).

    Raises:
        TypeError: If policy is not one of the three policy types
    """
    match policy:
        case Standard(payment=payment):
            return build_schedule(
                loan.principal, loan.monthly_rate, loan.original_duration_months, payment
            )
        case AutoMax(minimum_payment=minimum_payment):
            first_payment = front_max_payment(
                loan.principal, loan.annual_rate_percent, loan.desired_duration_months, minimum_payment
            )
            return build_schedule(
                loan.principal, loan.monthly_rate, loan.desired_duration_months, minimum_payment,
                transition_payment=first_payment
            )
        case CustomMax(payment=payment, minimum_payment=minimum_payment):
            return search_custom_plan(loan, minimum_payment, payment, config).schedule
    raise TypeError(f"unsupported payment policy: {policy!r}")


def compare_plans(
        loan: LoanParameters,
        plan: Schedule
) -> PlanComparison:
    """
    Compare ``plan`` with the original loan repaid at its baseline payment.

    The original schedule is Standard(baseline payment) over the original
    duration. Totals are in cents; total paid is principal plus interest. An
    empty plan (infeasible search) reports zero plan totals and no savings.
    """
    baseline = minimum_payment_for(
        loan.principal, loan.annual_rate_percent, loan.original_duration_months
    )
    original = build_schedule(
        loan.principal, loan.monthly_rate, loan.original_duration_months,
        round(baseline, CURRENCY_DECIMALS)
    )
    original_interest = original.total_interest
    if not plan:
        return PlanComparison(
            original_total_interest=original_interest,
            plan_total_interest=0.0,
            original_total_paid=round(loan.principal + original_interest, CURRENCY_DECIMALS),
            plan_total_paid=0.0,
            interest_saved=0.0,
        )
    plan_interest = plan.total_interest
    return PlanComparison(
        original_total_interest=original_interest,
        plan_total_interest=plan_interest,
        original_total_paid=round(loan.principal + original_interest, CURRENCY_DECIMALS),
        plan_total_paid=round(loan.principal + plan_interest, CURRENCY_DECIMALS),
        interest_saved=round(original_interest - plan_interest, CURRENCY_DECIMALS),
    )
