# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import numpy as np

from .models import Schedule, ScheduleEntry

__version__ = "0.1.0"


# =============================================================================
# Schedule Builder
# =============================================================================
#
# A schedule is generated by a three-phase state machine. Each phase is
# optional and they are always traversed in this order:
#
#   FRONT       months 1..k         paid at front_payment
#   TRANSITION  month k+1           paid at transition_payment (if given)
#   TAIL        months k+2..N       paid at minimum_payment, month N balanced
#
# Every month:
#   interest  = balance × r
#   principal = payment - interest
#
# Overpayment clamp (all phases): if principal > balance the principal is cut
# to the balance and the PAYMENT is lowered to principal + interest. The
# balance is then exactly zero and the schedule ends early, whatever the
# phases still had to run.
#
# Forced balancing (tail only): on month N the principal is set to the whole
# balance and payment = principal + interest, whether that is above or below
# the minimum payment. A schedule that reaches month N therefore always ends
# at zero on month N.
# =============================================================================

def _pay_month(
        balance: float,
        monthly_rate: float,
        payment: float,
        force_payoff: bool = False
) -> tuple[float, float, float, float]:
    """
    Apply one payment to ``balance``.

    Returns:
        (payment, interest, principal, ending_balance), unrounded
    """
    interest = balance * monthly_rate
    principal = payment - interest
    if force_payoff or principal > balance:
        principal = balance
        payment = principal + interest
        return payment, interest, principal, 0.0
    return payment, interest, principal, balance - principal


def build_schedule(
        principal: float,
        monthly_rate: float,
        horizon_months: int,
        minimum_payment: float,
        front_payment: float = 0.0,
        front_months: int = 0,
        transition_payment: float | None = None
) -> Schedule:
    """
    Generate a month-by-month schedule for a fixed per-phase payment policy.

    Args:
        principal: Starting balance
        monthly_rate: Monthly rate as decimal
        horizon_months: Last month of the schedule (N); the tail is balanced here
        minimum_payment: Payment for the tail phase
        front_payment: Payment for the front phase
        front_months: Length of the front phase (k); 0 skips it
        transition_payment: Payment for month k+1; None skips the phase

    Returns:
        Schedule of at most horizon_months entries. Empty when
        transition_payment is <= 0 (an infeasible candidate, not an error).

    Example (10,000 at 0%, ten payments of 1,000):
        >>> s = build_schedule(10_000, 0.0, 10, 1_000)
        >>> len(s), s[-1].remaining_balance
        (10, 0.0)
    """
    if transition_payment is not None and transition_payment <= 0:
        return Schedule()

    balance = principal
    entries: list[ScheduleEntry] = []
    month = 1

    # Front phase
    while month <= front_months and month <= horizon_months:
        payment, interest, paid, balance = _pay_month(balance, monthly_rate, front_payment)
        entries.append(ScheduleEntry.record(month, payment, interest, paid, balance))
        if balance <= 0:
            return Schedule(tuple(entries))
        month += 1

    # Transition month
    if transition_payment is not None and month <= horizon_months:
        payment, interest, paid, balance = _pay_month(balance, monthly_rate, transition_payment)
        entries.append(ScheduleEntry.record(month, payment, interest, paid, balance))
        if balance <= 0:
            return Schedule(tuple(entries))
        month += 1

    # Tail phase
    while month <= horizon_months:
        payment, interest, paid, balance = _pay_month(
            balance, monthly_rate, minimum_payment, force_payoff=(month == horizon_months)
        )
        entries.append(ScheduleEntry.record(month, payment, interest, paid, balance))
        if balance <= 0:
            break
        month += 1

    return Schedule(tuple(entries))


# =============================================================================
# Balance Projections
# =============================================================================
#
# Lightweight forward projections used by the plan searches. They do not
# record entries or round anything.
#
# project_balances     age-indexed balance path at a constant payment, with
#                      the overpayment clamp (balance stays at 0 once repaid)
# projected_final_balance
#                      unclamped balance after month N for a front/transition/
#                      tail policy; positive = underpaid, negative = overpaid
# =============================================================================

def project_balances(
        principal: float,
        monthly_rate: float,
        payment: float,
        num_months: int
) -> np.ndarray[float]:
    """
    Balance after each of ``num_months`` payments of ``payment``.

    INDEXING CONVENTION:
        balances[0] = principal          (before any payment)
        balances[k] = balance after month k

    Once a payment would overpay, the balance is set to 0 and stays there.

    Args:
        principal: Starting balance
        monthly_rate: Monthly rate as decimal
        payment: Constant payment
        num_months: Number of months to project (>= 0)

    Returns:
        ndarray of length num_months + 1
    """
    balances = np.zeros(max(num_months, 0) + 1)
    balances[0] = principal
    for k in range(1, num_months + 1):
        balance = balances[k - 1]
        if balance <= 0:
            break
        principal_paid = payment - balance * monthly_rate
        balances[k] = 0.0 if principal_paid > balance else balance - principal_paid
    return balances


def projected_final_balance(
        principal: float,
        monthly_rate: float,
        horizon_months: int,
        minimum_payment: float,
        front_payment: float,
        front_months: int,
        transition_payment: float
) -> float:
    """
    Balance left after month N when no clamping or final balancing is applied.

    Months 1..k are paid at front_payment, month k+1 at transition_payment and
    months k+2..N at minimum_payment. The result is linear and decreasing in
    transition_payment, which makes it a well-behaved root-finding objective.
    """
    balance = principal
    for month in range(1, horizon_months + 1):
        if month <= front_months:
            payment = front_payment
        elif month == front_months + 1:
            payment = transition_payment
        else:
            payment = minimum_payment
        balance = balance * (1.0 + monthly_rate) - payment
    return balance
