# Requires Python 3.12+
"""
Loan Payoff Optimizer - amortization schedules and front-loaded payoff plans.

Computes level and present-value annuity figures, month-by-month schedules
under several payment policies, and searches for a "custom maximum, one
transition payment, then minimum" plan that repays a loan in a chosen number
of months.
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Annuity formulas and solvers
from loan_payoff_optimizer.annuity import (
    monthly_rate,
    level_payment,
    present_value_of_annuity,
    present_value_of_annuity_vector,
    minimum_payment_for,
    front_max_payment,
    transition_payment_for,
)

# Configuration
from loan_payoff_optimizer.config import (
    SearchConfig,
    DEFAULT_SEARCH_CONFIG,
    INFEASIBLE_PLAN_MESSAGE,
)

# Data model
from loan_payoff_optimizer.models import (
    LoanParameters,
    Standard,
    AutoMax,
    CustomMax,
    PaymentPolicy,
    ScheduleEntry,
    Schedule,
    SearchResult,
    PlanComparison,
)

# Schedule builder and searches
from loan_payoff_optimizer.schedule import (
    build_schedule,
    project_balances,
    projected_final_balance,
)
from loan_payoff_optimizer.search import (
    is_valid_plan,
    search_discrete,
    search_bisection,
    default_transition_month,
)

# Entry points
from loan_payoff_optimizer.planner import (
    compute_baseline_payment,
    compute_auto_min,
    compute_auto_max,
    compute_schedule,
    search_custom_plan,
    compare_plans,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Annuity formulas
    "monthly_rate",
    "level_payment",
    "present_value_of_annuity",
    "present_value_of_annuity_vector",
    "minimum_payment_for",
    "front_max_payment",
    "transition_payment_for",
    # Configuration
    "SearchConfig",
    "DEFAULT_SEARCH_CONFIG",
    "INFEASIBLE_PLAN_MESSAGE",
    # Data model
    "LoanParameters",
    "Standard",
    "AutoMax",
    "CustomMax",
    "PaymentPolicy",
    "ScheduleEntry",
    "Schedule",
    "SearchResult",
    "PlanComparison",
    # Schedule and searches
    "build_schedule",
    "project_balances",
    "projected_final_balance",
    "is_valid_plan",
    "search_discrete",
    "search_bisection",
    "default_transition_month",
    # Entry points
    "compute_baseline_payment",
    "compute_auto_min",
    "compute_auto_max",
    "compute_schedule",
    "search_custom_plan",
    "compare_plans",
]
