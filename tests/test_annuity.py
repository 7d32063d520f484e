"""
Unit tests for the annuity formulas and closed-form solvers.

Checks the level payment and present value formulas against textbook figures,
their zero-rate branches, and the identities tying the solvers together.

Version: 0.1.0
Last Updated: 2026-10-19
Status: Active

================================================================================
NOTATION
================================================================================

    B = balance, r = monthly rate (decimal), n = number of payments
    level(B, r, n) = B r (1+r)^n / ((1+r)^n - 1)      (B / n at r = 0)
    PV(p, r, n)    = p (1 - (1+r)^-n) / r             (p n at r = 0)

    Identities:
        PV(level(B, r, n), r, n) = B
        front_max(P, n, level(P, r, n)) = level(P, r, n)
        transition(B, r, m, n) = B (1+r) - PV(m, r, n)

================================================================================
"""

import unittest
import numpy as np

from loan_payoff_optimizer.annuity import (
    monthly_rate,
    level_payment,
    present_value_of_annuity,
    present_value_of_annuity_vector,
    minimum_payment_for,
    front_max_payment,
    transition_payment_for,
)


# =============================================================================
# Test Parameters
# =============================================================================

DECIMAL_PLACES_FOR_ASSERTIONS: int = 8

TEST_SCENARIOS: list[dict[str, float | int]] = []


def setUpModule():
    """Pre-compute balance/rate/term combinations."""
    TEST_SCENARIOS.clear()
    for balance in [1_000.0, 25_000.0, 400_000.0]:
        for annual_rate in [0.0, 3.5, 6.0, 18.0]:
            for n in [1, 12, 60, 360]:
                TEST_SCENARIOS.append({
                    'balance': balance,
                    'annual_rate': annual_rate,
                    'r': monthly_rate(annual_rate),
                    'n': n,
                })

    if not TEST_SCENARIOS:
        raise RuntimeError("setUpModule failed: No test scenarios were created")


# =============================================================================
# Test Classes
# =============================================================================

class TestMonthlyRate(unittest.TestCase):

    def test_percent_to_monthly_decimal(self):
        self.assertAlmostEqual(monthly_rate(6.0), 0.005)
        self.assertAlmostEqual(monthly_rate(12.0), 0.01)
        self.assertEqual(monthly_rate(0.0), 0.0)


class TestLevelPayment(unittest.TestCase):
    """level_payment against known figures and its zero-rate branch."""

    def test_textbook_figure(self):
        # 10,000 at 6% over 60 months
        self.assertAlmostEqual(level_payment(10_000, 0.005, 60), 193.33, places=2)

    def test_zero_rate_is_straight_line(self):
        self.assertEqual(level_payment(10_000, 0.0, 10), 1_000.0)
        self.assertEqual(level_payment(1_234.56, 0.0, 1), 1_234.56)

    def test_single_payment_includes_one_month_of_interest(self):
        self.assertAlmostEqual(level_payment(1_000, 0.01, 1), 1_010.0)

    def test_minimum_payment_for_takes_annual_percent(self):
        self.assertAlmostEqual(
            minimum_payment_for(10_000, 6.0, 60), level_payment(10_000, 0.005, 60)
        )

    def test_higher_rate_means_higher_payment(self):
        low = minimum_payment_for(50_000, 3.0, 120)
        high = minimum_payment_for(50_000, 9.0, 120)
        self.assertGreater(high, low)


class TestPresentValue(unittest.TestCase):
    """present_value_of_annuity and its vector form."""

    def test_pv_of_level_payment_recovers_balance(self):
        for s in TEST_SCENARIOS:
            with self.subTest(**s):
                payment = level_payment(s['balance'], s['r'], s['n'])
                self.assertAlmostEqual(
                    present_value_of_annuity(payment, s['r'], s['n']) / s['balance'], 1.0,
                    places=DECIMAL_PLACES_FOR_ASSERTIONS
                )

    def test_zero_rate(self):
        self.assertEqual(present_value_of_annuity(150.0, 0.0, 8), 1_200.0)

    def test_zero_payments_have_no_value(self):
        self.assertEqual(present_value_of_annuity(150.0, 0.01, 0), 0.0)

    def test_vector_matches_scalar(self):
        n_vector = np.arange(0, 37)
        for r in [0.0, 0.004, 0.015]:
            with self.subTest(r=r):
                vec = present_value_of_annuity_vector(250.0, r, n_vector)
                self.assertEqual(vec.shape, n_vector.shape)
                for n, value in zip(n_vector, vec):
                    self.assertAlmostEqual(
                        value, present_value_of_annuity(250.0, r, int(n)),
                        places=DECIMAL_PLACES_FOR_ASSERTIONS
                    )


class TestFrontMaxPayment(unittest.TestCase):
    """front_max_payment (the AutoMax figure before rounding)."""

    def test_known_figure(self):
        # 10,000 at 6%, 12 months, 500 follow-on payments
        self.assertAlmostEqual(front_max_payment(10_000, 6.0, 12, 500), 4_711.49, delta=0.05)

    def test_level_follow_on_returns_level_payment(self):
        for s in TEST_SCENARIOS:
            if s['n'] < 2:
                continue
            with self.subTest(**s):
                level = minimum_payment_for(s['balance'], s['annual_rate'], s['n'])
                self.assertAlmostEqual(
                    front_max_payment(s['balance'], s['annual_rate'], s['n'], level) / level, 1.0,
                    places=DECIMAL_PLACES_FOR_ASSERTIONS
                )

    def test_zero_rate(self):
        self.assertEqual(front_max_payment(10_000, 0.0, 10, 1_000), 1_000.0)

    def test_non_positive_when_follow_on_alone_repays(self):
        self.assertEqual(front_max_payment(1_000, 0.0, 10, 200), -800.0)
        self.assertLess(front_max_payment(1_000, 5.0, 10, 200), 0.0)

    def test_single_month_horizon_repays_everything(self):
        # no follow-on payments: month 1 carries the balance plus interest
        self.assertAlmostEqual(front_max_payment(1_000, 12.0, 1, 200), 1_010.0)


class TestTransitionPayment(unittest.TestCase):

    def test_matches_front_max_on_the_principal(self):
        for s in TEST_SCENARIOS:
            if s['n'] < 2:
                continue
            with self.subTest(**s):
                m = 0.5 * minimum_payment_for(s['balance'], s['annual_rate'], s['n'])
                self.assertAlmostEqual(
                    transition_payment_for(s['balance'], s['r'], m, s['n'] - 1),
                    front_max_payment(s['balance'], s['annual_rate'], s['n'], m),
                    places=6
                )

    def test_zero_rate(self):
        # 200 left, one more payment of 150 after this one
        self.assertEqual(transition_payment_for(200.0, 0.0, 150.0, 1), 50.0)


if __name__ == '__main__':
    unittest.main()
