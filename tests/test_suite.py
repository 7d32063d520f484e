"""
Loan Payoff Optimizer Test Suite

Runs every test module in dependency order (formulas, builder, searches,
entry points, worked examples, random invariants) using unittest's standard
`load_tests` protocol.

Usage:
    # Run all tests in order (recommended)
    python -m unittest tests.test_suite

    # Or use unittest discovery from the repository root
    python -m unittest discover -s tests -t . -p "test_*.py" -v

    # Or run an individual module
    python -m unittest tests.test_search

Note:
    load_tests enforces MODULE order only. Tests within a module still run in
    alphabetical order.

Version: 0.1.0
Last Updated: 2026-10-19
"""

import unittest
import sys


# =============================================================================
# Test Suite Definition (using unittest's load_tests protocol)
# =============================================================================

def load_tests(loader, standard_tests, pattern):
    """
    Build the suite from the test modules in execution order.

    setUpModule() is called here as well, because unittest does not call it
    while a suite is being constructed and the scenario lists must be filled
    before the tests that read them are loaded.

    Args:
        loader: TestLoader instance
        standard_tests: Tests that would be loaded by default discovery
        pattern: Pattern used to match test files (ignored here)

    Returns:
        unittest.TestSuite with every module's tests in order
    """
    test_modules = [
        'tests.test_annuity',
        'tests.test_schedule',
        'tests.test_search',
        'tests.test_planner',
        'tests.test_examples_verification',
        'tests.test_property_invariants',
    ]

    suite = unittest.TestSuite()

    for module_name in test_modules:
        try:
            module = __import__(module_name, fromlist=[''])
            if hasattr(module, 'setUpModule'):
                try:
                    module.setUpModule()
                except Exception as e:
                    print(f"WARNING: setUpModule() failed for {module_name}: {e}",
                          file=sys.stderr)
            suite.addTest(loader.loadTestsFromModule(module))
        except ImportError as e:
            print(f"WARNING: Failed to import test module {module_name}: {e}",
                  file=sys.stderr)

    return suite


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
