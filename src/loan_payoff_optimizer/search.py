# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import logging
import math
import warnings

import numpy as np
from scipy.optimize import bisect

from .annuity import present_value_of_annuity_vector
from .config import BALANCE_TOLERANCE, CURRENCY_DECIMALS, MAX_BISECTION_ITERATIONS
from .models import Schedule, SearchResult
from .schedule import build_schedule, project_balances, projected_final_balance

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


# =============================================================================
# Custom Plan Search
# =============================================================================
#
# Problem: given a horizon N, a custom maximum payment C and a minimum
# follow-on payment m, find k (months paid at C) and a transition payment t
# so that
#
#     C for months 1..k,  t in month k+1,  m for months k+2..N
#
# fills exactly N months and repays the loan, with 0 < t <= C and the last
# recorded payment <= m.
#
# Two strategies solve it:
#
#   search_discrete   walks k and prices t in closed form (canonical)
#   search_bisection  fixes k and root-finds t on the final balance
#
# Both hand their answer to build_schedule, whose output is authoritative,
# and both report failure as SearchResult.infeasible() rather than raising.
# =============================================================================

def is_valid_plan(
        schedule: Schedule,
        horizon_months: int,
        minimum_payment: float
) -> bool:
    """
    True if ``schedule`` fills exactly ``horizon_months`` months and its last
    recorded payment lies in [0, minimum_payment].

    The balance is not required to fall every month: a transition payment
    below that month's interest raises the balance once, and the plan is
    still valid if the tail repays it on time.

    Recorded payments are in cents, so the minimum is rounded to cents before
    the comparison. A minimum such as 299.996 therefore accepts a recorded
    300.00; for cent-valued minimums the check is exactly <= m.
    """
    if len(schedule) != horizon_months:
        return False
    last_payment = schedule[-1].payment
    return 0 <= last_payment <= round(minimum_payment, CURRENCY_DECIMALS)


def search_discrete(
        principal: float,
        monthly_rate: float,
        horizon_months: int,
        minimum_payment: float,
        custom_max_payment: float,
        descending: bool = True
) -> SearchResult:
    """
    Find the plan by enumerating the number of months k paid at the custom maximum.

    ALGORITHM:
    ----------
    For k from N-2 down to 1 (at least one month is reserved for the transition
    payment and one for the minimum-payment tail):

    1. Project the balance B_k after k payments of C (project_balances).
    2. Price the payment in month k+1 that lets the remaining N-k-1 payments
       of m repay the loan exactly:

           t_k = B_k (1+r) - PV(m, r, N-k-1)

    3. Accept k only if 0 < t_k <= C, build the full schedule and validate it
       (length N, last payment in [0, m]). The first k that validates wins.

    Steps 1-2 are vectorized over every k at once (step 2 is
    transition_payment_for in array form); only candidates that pass the
    price check are built. Visiting the largest k first prefers more months
    at the higher payment, which minimizes interest. ``descending=False``
    reverses the walk for callers with the opposite preference.

    Args:
        principal: Loan principal
        monthly_rate: Monthly rate as decimal
        horizon_months: Desired duration N
        minimum_payment: Follow-on payment m
        custom_max_payment: Custom maximum payment C
        descending: Visit k from N-2 down to 1 (default) or 1 up to N-2

    Returns:
        SearchResult; infeasible when no k in 1..N-2 validates
    """
    max_front_months = horizon_months - 2
    if max_front_months < 1:
        logger.debug("horizon of %d months leaves no room for a transition month", horizon_months)
        return SearchResult.infeasible()

    # candidate k = 1..N-2, so the tail is always at least one month long
    front_months = np.arange(1, max_front_months + 1)
    balances = project_balances(principal, monthly_rate, custom_max_payment, max_front_months)
    tail_pv = present_value_of_annuity_vector(
        minimum_payment, monthly_rate, horizon_months - front_months - 1
    )
    transition_payments = balances[front_months] * (1.0 + monthly_rate) - tail_pv

    order = front_months[::-1] if descending else front_months
    for k in order:
        k = int(k)
        t = float(transition_payments[k - 1])
        if not 0 < t <= custom_max_payment:
            logger.debug("k=%d rejected: transition payment %.2f outside (0, %.2f]",
                         k, t, custom_max_payment)
            continue
        schedule = build_schedule(
            principal, monthly_rate, horizon_months, minimum_payment,
            front_payment=custom_max_payment, front_months=k, transition_payment=t
        )
        if is_valid_plan(schedule, horizon_months, minimum_payment):
            logger.debug("k=%d accepted: transition payment %.2f", k, t)
            return SearchResult(
                schedule=schedule,
                transition_payment=round(t, CURRENCY_DECIMALS),
                transition_month=k,
                feasible=True,
            )
        logger.debug("k=%d rejected: built schedule failed validation", k)

    return SearchResult.infeasible()


def default_transition_month(
        principal: float,
        monthly_rate: float,
        horizon_months: int,
        minimum_payment: float,
        custom_max_payment: float
) -> int | None:
    """
    Largest k in 1..N-2 for which paying the minimum in month k+1 still
    underpays, i.e. the final balance at t = m is >= 0.

    For that k the exact transition payment lies in [m, C), so the bisection
    bracket contains a root. Returns None when no such k exists.
    """
    for k in range(horizon_months - 2, 0, -1):
        final_balance = projected_final_balance(
            principal, monthly_rate, horizon_months, minimum_payment,
            custom_max_payment, k, minimum_payment
        )
        if final_balance >= 0:
            return k
    return None


def search_bisection(
        principal: float,
        monthly_rate: float,
        horizon_months: int,
        minimum_payment: float,
        custom_max_payment: float,
        transition_month: int | None = None,
        tolerance: float = BALANCE_TOLERANCE,
        max_iterations: int = MAX_BISECTION_ITERATIONS
) -> SearchResult:
    """
    Find the transition payment by bisection for a fixed transition month.

    The objective is the unclamped balance left after month N (see
    projected_final_balance) as a function of the transition payment t on
    the bracket [m, C]:

        f(t) > 0   underpaid, raise the low bound
        f(t) < 0   overpaid, lower the high bound

    Bisection is delegated to scipy.optimize.bisect. Its x-tolerance is left
    at the scipy default, far below a cent, so the iteration cap ends the
    search and the final payment rounds cleanly to the minimum. Then
    every evaluated candidate is tracked and the one with smallest |f| is
    kept as a fallback when the cap is hit or the bracket has no sign change.

    The chosen t is built into a schedule and validated exactly as in
    search_discrete.

    Args:
        principal: Loan principal
        monthly_rate: Monthly rate as decimal
        horizon_months: Desired duration N
        minimum_payment: Follow-on payment m (low bound)
        custom_max_payment: Custom maximum payment C (high bound)
        transition_month: Months paid at C before the transition (k).
            None uses default_transition_month.
        tolerance: Accepted |final balance|
        max_iterations: Bisection iteration cap

    Returns:
        SearchResult; infeasible when no k is available, the bracket is empty,
        or the best candidate fails validation

    Warns:
        UserWarning: If no candidate met the tolerance and the best one seen
            is used instead.
    """
    if custom_max_payment < minimum_payment:
        logger.debug("empty bracket: custom maximum %.2f below minimum %.2f",
                     custom_max_payment, minimum_payment)
        return SearchResult.infeasible()

    k = transition_month
    if k is None:
        k = default_transition_month(
            principal, monthly_rate, horizon_months, minimum_payment, custom_max_payment
        )
    if k is None or not 1 <= k <= horizon_months - 2:
        logger.debug("no usable transition month for a %d month horizon", horizon_months)
        return SearchResult.infeasible()

    best = {"payment": math.nan, "residual": math.inf}

    def objective(transition_payment: float) -> float:
        """Final balance for a candidate; records the best candidate seen."""
        residual = projected_final_balance(
            principal, monthly_rate, horizon_months, minimum_payment,
            custom_max_payment, k, transition_payment
        )
        if abs(residual) < best["residual"]:
            best["payment"] = transition_payment
            best["residual"] = abs(residual)
        return residual

    try:
        bisect(
            objective,
            minimum_payment, custom_max_payment,
            maxiter=max_iterations,
            full_output=True,
            disp=False,
        )
    except ValueError as e:
        # bisect raises ValueError when f(m) and f(C) share a sign
        logger.debug("bisection bracket [%.2f, %.2f] has no root: %s",
                     minimum_payment, custom_max_payment, e)

    if math.isnan(best["payment"]):
        return SearchResult.infeasible()
    if best["residual"] > tolerance:
        warnings.warn(
            f"bisection did not reach tolerance {tolerance} within {max_iterations} iterations; "
            f"using best candidate {best['payment']:.2f} (final balance off by {best['residual']:.4f})",
            UserWarning
        )

    t = best["payment"]
    schedule = build_schedule(
        principal, monthly_rate, horizon_months, minimum_payment,
        front_payment=custom_max_payment, front_months=k, transition_payment=t
    )
    if not is_valid_plan(schedule, horizon_months, minimum_payment):
        logger.debug("k=%d bisection candidate %.2f failed validation", k, t)
        return SearchResult.infeasible()
    return SearchResult(
        schedule=schedule,
        transition_payment=round(t, CURRENCY_DECIMALS),
        transition_month=k,
        feasible=True,
    )
