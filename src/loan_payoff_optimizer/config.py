# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
"""
Package-wide constants and search configuration defaults.

All tuneable defaults live here so there is a single place to adjust them.
"""
from __future__ import annotations

from dataclasses import dataclass

__version__ = "0.1.0"


# =============================================================================
# Currency and Tolerances
# =============================================================================

CURRENCY_DECIMALS: int = 2          # entries and caller-facing scalars are rounded to cents
BALANCE_TOLERANCE: float = 0.01     # |final balance| accepted as paid off by the bisection search

# =============================================================================
# Search Parameters
# =============================================================================

MAX_BISECTION_ITERATIONS: int = 20

SEARCH_STRATEGIES: frozenset[str] = frozenset({"discrete", "bisection"})
SEARCH_DIRECTIONS: frozenset[str] = frozenset({"descending", "ascending"})

INFEASIBLE_PLAN_MESSAGE: str = (
    "no feasible schedule for the given custom maximum payment and desired duration"
)


@dataclass(frozen=True)
class SearchConfig:
    """
    Selects and tunes the custom-plan search.

    strategy:
        "discrete" (default) walks the number of months paid at the custom
        maximum; "bisection" root-finds the transition payment for a fixed
        transition month.
    direction:
        Order in which the discrete search visits month counts. "descending"
        starts from N-2 and so prefers more months at the higher payment
        (least interest); "ascending" starts from 1.
    tolerance:
        Absolute final-balance tolerance for the bisection search.
    max_iterations:
        Bisection iteration cap.
    transition_month:
        Bisection only. Number of months paid at the custom maximum before the
        transition payment. None derives it from the loan.
    """
    strategy: str = "discrete"
    direction: str = "descending"
    tolerance: float = BALANCE_TOLERANCE
    max_iterations: int = MAX_BISECTION_ITERATIONS
    transition_month: int | None = None

    def __post_init__(self) -> None:
        if self.strategy not in SEARCH_STRATEGIES:
            raise ValueError(
                f"strategy must be one of {sorted(SEARCH_STRATEGIES)}, got {self.strategy!r}"
            )
        if self.direction not in SEARCH_DIRECTIONS:
            raise ValueError(
                f"direction must be one of {sorted(SEARCH_DIRECTIONS)}, got {self.direction!r}"
            )
        if self.tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        if self.transition_month is not None and self.transition_month < 1:
            raise ValueError(f"transition_month must be at least 1, got {self.transition_month}")


DEFAULT_SEARCH_CONFIG = SearchConfig()
