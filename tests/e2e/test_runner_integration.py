"""End-to-end coverage: helpers used from a real test runner.

Failed checks must surface as ordinary test failures (not errors) so the runner
records the test as failed and carries on with the remaining tests.
"""

from __future__ import annotations

import io
import unittest

import lib_assertions
from lib_assertions import (
    assert_contains,
    assert_false,
    assert_gt,
    assert_instance_of,
    assert_lte,
    assert_throws,
    assert_true,
    fail,
)


def _sample_case() -> type[unittest.TestCase]:
    """Build the sample case lazily so pytest does not collect it directly."""

    class Sample(unittest.TestCase):
        def test_passes(self) -> None:
            assert_gt(5, 6)
            assert_lte(5, 5)
            assert_instance_of(int, 5)
            exc = assert_throws(ValueError, lambda: int("x"))
            assert_contains("invalid literal", str(exc))
            assert_true(1)
            assert_false(0)

        def test_ordering_fails(self) -> None:
            assert_gt(5, 5)

        def test_missing_exception_fails(self) -> None:
            assert_throws(ValueError, lambda: None)

        def test_wrong_exception_fails(self) -> None:
            assert_throws(ValueError, lambda: {}["missing"])

        def test_truthiness_fails(self) -> None:
            assert_false(1)

        def test_explicit_fail(self) -> None:
            fail("not implemented yet")

    return Sample


def _run_sample() -> unittest.TestResult:
    suite = unittest.defaultTestLoader.loadTestsFromTestCase(_sample_case())
    runner = unittest.TextTestRunner(stream=io.StringIO(), verbosity=0)
    return runner.run(suite)


def test_failures_are_recorded_and_run_continues() -> None:
    result = _run_sample()

    assert result.testsRun == 6
    assert result.errors == []
    failed = sorted(test.id().rsplit(".", 1)[-1] for test, _ in result.failures)
    assert failed == [
        "test_explicit_fail",
        "test_missing_exception_fails",
        "test_ordering_fails",
        "test_truthiness_fails",
        "test_wrong_exception_fails",
    ]


def test_failure_messages_reach_the_report() -> None:
    result = _run_sample()

    reports = {test.id().rsplit(".", 1)[-1]: report for test, report in result.failures}
    assert "5 is not a number > 5" in reports["test_ordering_fails"]
    assert "No exception was thrown (expected ValueError)" in reports["test_missing_exception_fails"]
    assert "Bad exception type KeyError (expected ValueError)" in reports["test_wrong_exception_fails"]
    assert "1 is not falsy" in reports["test_truthiness_fails"]
    assert "not implemented yet" in reports["test_explicit_fail"]


def test_public_surface() -> None:
    for name in lib_assertions.__all__:
        assert hasattr(lib_assertions, name), name
