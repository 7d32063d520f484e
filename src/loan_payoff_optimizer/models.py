# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from .annuity import monthly_rate
from .config import CURRENCY_DECIMALS, INFEASIBLE_PLAN_MESSAGE

__version__ = "0.1.0"


# =============================================================================
# Loan Inputs
# =============================================================================

@dataclass(frozen=True)
class LoanParameters:
    """
    Inputs shared by every computation for one loan.

    Rate convention: annual_rate_percent is a percentage (6.0 for 6%);
    monthly_rate is the decimal monthly rate derived from it.

    Instances are immutable and created fresh for each computation.
    """
    principal: float
    annual_rate_percent: float
    original_duration_months: int
    desired_duration_months: int

    def __post_init__(self) -> None:
        """Reject inputs the calculations are not defined for."""
        if self.principal <= 0:
            raise ValueError(f"principal must be positive, got {self.principal}")
        if self.annual_rate_percent < 0:
            raise ValueError(f"annual_rate_percent must be non-negative, got {self.annual_rate_percent}")
        if self.original_duration_months <= 0:
            raise ValueError(
                f"original_duration_months must be positive, got {self.original_duration_months}"
            )
        if self.desired_duration_months <= 0:
            raise ValueError(
                f"desired_duration_months must be positive, got {self.desired_duration_months}"
            )

    @property
    def monthly_rate(self) -> float:
        """Monthly rate as decimal (annual_rate_percent / 1200)."""
        return monthly_rate(self.annual_rate_percent)


# =============================================================================
# Payment Policies
# =============================================================================
#
# A policy is a tagged choice of how the first month(s) are paid; the rest of
# the schedule is always paid at a minimum (level) payment.
#
#   Standard(payment)                   level payment over the original duration
#   AutoMax(minimum_payment)            AutoMax figure in month 1, then the minimum
#   CustomMax(payment, minimum_payment) custom-plan search
# =============================================================================

@dataclass(frozen=True)
class Standard:
    """Pay ``payment`` every month over the original duration."""
    payment: float

    def __post_init__(self) -> None:
        if self.payment <= 0:
            raise ValueError(f"payment must be positive, got {self.payment}")


@dataclass(frozen=True)
class AutoMax:
    """Pay the AutoMax figure in month 1, then ``minimum_payment`` to the desired duration."""
    minimum_payment: float

    def __post_init__(self) -> None:
        if self.minimum_payment <= 0:
            raise ValueError(f"minimum_payment must be positive, got {self.minimum_payment}")


@dataclass(frozen=True)
class CustomMax:
    """Search for a plan paying ``payment`` up front, one transition payment, then ``minimum_payment``."""
    payment: float
    minimum_payment: float

    def __post_init__(self) -> None:
        if self.payment < 0:
            raise ValueError(f"payment must be non-negative, got {self.payment}")
        if self.minimum_payment <= 0:
            raise ValueError(f"minimum_payment must be positive, got {self.minimum_payment}")


PaymentPolicy = Standard | AutoMax | CustomMax


# =============================================================================
# Schedule
# =============================================================================

@dataclass(frozen=True)
class ScheduleEntry:
    """
    One month of a schedule. Currency fields are rounded to cents when the
    entry is recorded, so interest_paid + principal_paid equals payment to
    within 0.01.
    """
    month: int
    payment: float
    interest_paid: float
    principal_paid: float
    remaining_balance: float

    @classmethod
    def record(
            cls,
            month: int,
            payment: float,
            interest: float,
            principal: float,
            balance: float
    ) -> ScheduleEntry:
        """Round the raw month figures to cents and clamp the balance at zero."""
        return cls(
            month=month,
            payment=round(payment, CURRENCY_DECIMALS),
            interest_paid=round(interest, CURRENCY_DECIMALS),
            principal_paid=round(principal, CURRENCY_DECIMALS),
            remaining_balance=round(max(balance, 0.0), CURRENCY_DECIMALS),
        )


@dataclass(frozen=True)
class Schedule:
    """
    Ordered month-by-month schedule (months 1..N, no gaps).

    An empty schedule is the "no valid schedule" signal returned by the
    builder and the searches.
    """
    entries: tuple[ScheduleEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ScheduleEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> ScheduleEntry:
        return self.entries[index]

    def __bool__(self) -> bool:
        return bool(self.entries)

    @property
    def total_interest(self) -> float:
        return round(sum(e.interest_paid for e in self.entries), CURRENCY_DECIMALS)

    @property
    def total_principal(self) -> float:
        return round(sum(e.principal_paid for e in self.entries), CURRENCY_DECIMALS)

    @property
    def total_paid(self) -> float:
        return round(sum(e.payment for e in self.entries), CURRENCY_DECIMALS)

    @property
    def final_balance(self) -> float:
        """Remaining balance after the last entry (0.0 for an empty schedule)."""
        return self.entries[-1].remaining_balance if self.entries else 0.0

    @property
    def is_paid_off(self) -> bool:
        return bool(self.entries) and self.entries[-1].remaining_balance == 0.0

    def to_arrays(self) -> dict[str, np.ndarray]:
        """
        Column view of the schedule as numpy arrays, keyed by field name.

        Returns:
            {'month', 'payment', 'interest_paid', 'principal_paid',
             'remaining_balance'} -> ndarray of length len(self)
        """
        return {
            "month": np.array([e.month for e in self.entries], dtype=int),
            "payment": np.array([e.payment for e in self.entries], dtype=float),
            "interest_paid": np.array([e.interest_paid for e in self.entries], dtype=float),
            "principal_paid": np.array([e.principal_paid for e in self.entries], dtype=float),
            "remaining_balance": np.array([e.remaining_balance for e in self.entries], dtype=float),
        }


# =============================================================================
# Search and Comparison Results
# =============================================================================

@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a custom-plan search.

    transition_month is the number of months paid at the custom maximum (k);
    the transition payment itself falls in month k+1.

    When feasible is False the schedule is empty, transition_payment and
    transition_month are zero, and message says why. This is the
    caller-visible error signal; it is never raised.
    """
    schedule: Schedule
    transition_payment: float
    transition_month: int
    feasible: bool
    message: str = ""

    @classmethod
    def infeasible(cls, message: str = INFEASIBLE_PLAN_MESSAGE) -> SearchResult:
        return cls(
            schedule=Schedule(),
            transition_payment=0.0,
            transition_month=0,
            feasible=False,
            message=message,
        )


@dataclass(frozen=True)
class PlanComparison:
    """Totals for the original loan against a repayment plan (cents)."""
    original_total_interest: float
    plan_total_interest: float
    original_total_paid: float
    plan_total_paid: float
    interest_saved: float = 0.0
