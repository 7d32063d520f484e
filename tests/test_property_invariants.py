"""
Schedule and search invariants over randomly generated loans.

Every schedule produced by the entry points must hold these regardless of
inputs:
    - months run 1..len with no gaps
    - interest + principal matches the payment to within a cent
    - the remaining balance never rises, except in a custom plan's transition
      month, and ends at zero on a full schedule
A feasible custom plan must also fill the desired duration exactly, pay the
custom maximum up front, and end on a payment no larger than the minimum.

Version: 0.1.0
Last Updated: 2026-10-19
Status: Active
"""

import unittest
import warnings
import numpy as np

from loan_payoff_optimizer import (
    Standard,
    AutoMax,
    SearchConfig,
    compute_baseline_payment,
    compute_auto_max,
    compute_schedule,
    search_custom_plan,
    compare_plans,
)
from tests.utilities import generate_random_loans


CENT_TOLERANCE: float = 0.01 + 1e-9
NUM_RANDOM_LOANS: int = 60

TEST_LOANS = []


def setUpModule():
    """Generate the random loan pool once."""
    TEST_LOANS[:] = generate_random_loans(NUM_RANDOM_LOANS)
    if not TEST_LOANS:
        raise RuntimeError("setUpModule failed: No test loans were created")


class ScheduleInvariantsMixin:

    def assert_schedule_invariants(self, schedule, transition_month=None):
        arrays = schedule.to_arrays()
        np.testing.assert_array_equal(arrays["month"], np.arange(1, len(schedule) + 1))
        residual = np.abs(arrays["payment"] - (arrays["interest_paid"] + arrays["principal_paid"]))
        self.assertTrue(np.all(residual <= CENT_TOLERANCE))
        rises = np.diff(arrays["remaining_balance"]) > 0
        if transition_month is not None:
            # a transition payment below interest may raise month k+1's balance
            rises[transition_month - 1] = False
        self.assertFalse(np.any(rises))
        self.assertTrue(np.all(arrays["remaining_balance"] >= 0))


class TestStandardScheduleInvariants(ScheduleInvariantsMixin, unittest.TestCase):

    def test_baseline_schedule_repays_on_last_month(self):
        for t in TEST_LOANS:
            loan = t.loan
            with self.subTest(loan_id=t.loan_id):
                baseline = compute_baseline_payment(
                    loan.principal, loan.annual_rate_percent, loan.original_duration_months
                )
                schedule = compute_schedule(loan, Standard(baseline))
                self.assertEqual(len(schedule), loan.original_duration_months)
                self.assertTrue(schedule.is_paid_off)
                self.assert_schedule_invariants(schedule)
                self.assertAlmostEqual(schedule.total_principal, loan.principal, delta=0.01 * len(schedule))


class TestAutoMaxScheduleInvariants(ScheduleInvariantsMixin, unittest.TestCase):

    def test_auto_max_schedule(self):
        for t in TEST_LOANS:
            loan = t.loan
            with self.subTest(loan_id=t.loan_id):
                with warnings.catch_warnings():
                    warnings.simplefilter("ignore")
                    auto_max = compute_auto_max(
                        loan.principal, loan.annual_rate_percent,
                        loan.desired_duration_months, t.minimum_payment
                    )
                schedule = compute_schedule(loan, AutoMax(t.minimum_payment))
                if auto_max <= 0:
                    self.assertEqual(len(schedule), 0)
                    continue
                self.assertEqual(len(schedule), loan.desired_duration_months)
                self.assertTrue(schedule.is_paid_off)
                self.assertAlmostEqual(schedule[0].payment, auto_max, delta=0.01)
                self.assert_schedule_invariants(schedule)


class TestCustomPlanInvariants(ScheduleInvariantsMixin, unittest.TestCase):

    def check_plan(self, t, result):
        loan = t.loan
        if not result.feasible:
            self.assertEqual(len(result.schedule), 0)
            self.assertEqual(result.transition_month, 0)
            self.assertTrue(result.message)
            return
        schedule = result.schedule
        k = result.transition_month
        self.assertEqual(len(schedule), loan.desired_duration_months)
        self.assertTrue(1 <= k <= loan.desired_duration_months - 2)
        self.assertTrue(0 < result.transition_payment <= t.custom_max_payment)
        for e in schedule[:k]:
            self.assertEqual(e.payment, t.custom_max_payment)
        self.assertLessEqual(schedule[-1].payment, round(t.minimum_payment, 2))
        self.assertTrue(schedule.is_paid_off)
        self.assert_schedule_invariants(schedule, transition_month=k)

    def test_discrete_plans(self):
        for t in TEST_LOANS:
            with self.subTest(loan_id=t.loan_id):
                result = search_custom_plan(t.loan, t.minimum_payment, t.custom_max_payment)
                self.check_plan(t, result)

    def test_bisection_plans(self):
        config = SearchConfig(strategy="bisection")
        for t in TEST_LOANS:
            with self.subTest(loan_id=t.loan_id):
                with warnings.catch_warnings():
                    warnings.simplefilter("ignore")
                    result = search_custom_plan(t.loan, t.minimum_payment, t.custom_max_payment, config)
                self.check_plan(t, result)

    def test_feasible_plans_never_cost_more_interest_than_original(self):
        for t in TEST_LOANS:
            result = search_custom_plan(t.loan, t.minimum_payment, t.custom_max_payment)
            if not result.feasible:
                continue
            with self.subTest(loan_id=t.loan_id):
                comparison = compare_plans(t.loan, result.schedule)
                self.assertGreaterEqual(comparison.interest_saved, 0.0)


if __name__ == '__main__':
    unittest.main()
