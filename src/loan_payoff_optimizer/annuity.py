# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import numpy as np

__version__ = "0.1.0"


# =============================================================================
# Annuity Formulas
# =============================================================================
#
# Everything in the package is built on two closed forms for a level-payment
# loan at a fixed monthly rate r:
#
#   PMT(B, r, n) = B × r (1+r)^n / [(1+r)^n - 1]      level payment
#   PV(p, r, n)  = p × [1 - (1+r)^-n] / r             present value of annuity
#
# They are inverses of one another: PV(PMT(B, r, n), r, n) = B. With r = 0
# both reduce to straight-line arithmetic (B / n and p × n).
#
# Inputs are validated by the caller. These functions never raise for r = 0.
# Nothing here rounds; rounding happens only when a schedule entry or a
# caller-facing figure is recorded.
# =============================================================================

def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual rate in percent (e.g. 6.0 for 6%) to a monthly decimal rate."""
    return annual_rate_percent / 100.0 / 12.0


def level_payment(
        balance: float,
        monthly_rate: float,
        n: int
) -> float:
    """
    Level monthly payment that amortizes ``balance`` to zero over ``n`` months.

    Formula:
        PMT = B × r (1+r)^n / [(1+r)^n - 1]

    Where:
        B = balance
        r = monthly rate (decimal)
        n = number of monthly payments

    When r = 0 the payment is straight-line: B / n.

    Args:
        balance: Balance to amortize (currency units)
        monthly_rate: Monthly interest rate as decimal (e.g. 0.005 for 6%/yr)
        n: Number of payments (positive)

    Returns:
        Unrounded level payment

    Example:
        >>> round(level_payment(10_000, 0.005, 60), 2)
        193.33
    """
    if monthly_rate == 0:
        return balance / n
    factor = (1.0 + monthly_rate) ** n
    return balance * monthly_rate * factor / (factor - 1.0)


def present_value_of_annuity(
        payment: float,
        monthly_rate: float,
        n: int
) -> float:
    """
    Present value of ``n`` equal monthly payments discounted at ``monthly_rate``.

    Formula:
        PV = p × [1 - (1+r)^-n] / r

    PV answers "what balance today is exactly repaid by n payments of p?".
    When r = 0 it is simply p × n, and n = 0 gives 0 for every rate.

    Args:
        payment: Amount of each payment
        monthly_rate: Monthly interest rate as decimal
        n: Number of payments (non-negative)

    Returns:
        Unrounded present value
    """
    if monthly_rate == 0:
        return payment * n
    return payment * (1.0 - (1.0 + monthly_rate) ** (-n)) / monthly_rate


def present_value_of_annuity_vector(
        payment: float,
        monthly_rate: float,
        n_vector: list[int] | np.ndarray[int]
) -> np.ndarray[float]:
    """
    Vectorized present_value_of_annuity over many payment counts at once.

    Used by the discrete plan search to price the minimum-payment tail for
    every candidate month count in one pass.

    Args:
        payment: Amount of each payment
        monthly_rate: Monthly interest rate as decimal
        n_vector: Payment counts (non-negative integers)

    Returns:
        ndarray of present values, same length as n_vector
    """
    n = np.asarray(n_vector, dtype=float)
    if monthly_rate == 0:
        return payment * n
    return payment * (1.0 - np.power(1.0 + monthly_rate, -n)) / monthly_rate


# =============================================================================
# Duration Target and Front-Max Solvers
# =============================================================================

def minimum_payment_for(
        principal: float,
        annual_rate_percent: float,
        duration_months: int
) -> float:
    """
    Level payment that repays ``principal`` over exactly ``duration_months``.

    Called with the original duration this is the baseline minimum payment;
    called with the desired (shorter) duration it is the "auto-min" payment.

    Args:
        principal: Loan principal
        annual_rate_percent: Annual rate as percentage (e.g. 6.0 for 6%)
        duration_months: Number of monthly payments

    Returns:
        Unrounded level payment
    """
    return level_payment(principal, monthly_rate(annual_rate_percent), duration_months)


def front_max_payment(
        principal: float,
        annual_rate_percent: float,
        horizon_months: int,
        follow_on_payment: float
) -> float:
    """
    Largest first-month payment M that still leaves a loan repaid by exactly
    ``horizon_months - 1`` follow-on payments of ``follow_on_payment``.

    DERIVATION:
    -----------
    After paying M in month 1 the balance is B₁ = P(1+r) - M. For the remaining
    n-1 level payments p to amortize B₁ exactly, B₁ must equal their present
    value:

        P(1+r) - M = PV(p, r, n-1)

    so

        M = P(1+r) - PV(p, r, n-1)

    With r = 0 this is M = P - p(n-1).

    The result is a suggestion (the "AutoMax" figure); it is <= 0 whenever the
    follow-on payment alone already repays the loan within n-1 months.

    Args:
        principal: Loan principal (P)
        annual_rate_percent: Annual rate as percentage
        horizon_months: Target horizon (n), including month 1
        follow_on_payment: Payment for months 2..n (p)

    Returns:
        Unrounded first-month payment
    """
    r = monthly_rate(annual_rate_percent)
    remaining = horizon_months - 1
    if r == 0:
        return principal - follow_on_payment * remaining
    return principal * (1.0 + r) - present_value_of_annuity(follow_on_payment, r, remaining)


def transition_payment_for(
        balance: float,
        monthly_rate: float,
        follow_on_payment: float,
        remaining_months: int
) -> float:
    """
    Payment due now on ``balance`` so that ``remaining_months`` further payments
    of ``follow_on_payment`` leave exactly zero.

    This is front_max_payment applied to an arbitrary balance in mid-schedule:

        t = B(1+r) - PV(m, r, remaining)

    Scalar reference form of the candidate pricing in search.search_discrete,
    which evaluates the same expression for every k at once with
    present_value_of_annuity_vector.
    """
    return balance * (1.0 + monthly_rate) - present_value_of_annuity(
        follow_on_payment, monthly_rate, remaining_months
    )
