"""Ordering matcher backing ``assert_gt`` and friends.

Purpose
-------
Provide the single custom matcher the library needs: a testtools
:class:`~testtools.matchers.Matcher` comparing a number against an expected
value with a relational operator. Everything else delegates to the stock
testtools matchers.

Contents
--------
* :class:`OrderingMatcher` – immutable ``(expected, predicate, symbol)`` triple.
* :func:`greater_than` / :func:`at_least` / :func:`less_than` /
  :func:`at_most` – factories used by :mod:`lib_assertions.core`.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable

from testtools.matchers import Matcher, Mismatch


@dataclass(frozen=True)
class OrderingMatcher(Matcher):
    """Match numbers standing in a relation to ``expected``.

    ``predicate`` receives the three-way comparison of the matchee against
    ``expected`` (``-1``, ``0`` or ``1``). The matchee must be an instance of
    ``type(expected)`` and orderable against it.

    Examples
    --------
    >>> matcher = greater_than(5)
    >>> str(matcher)
    'a number > 5'
    >>> matcher.match(6) is None
    True
    >>> matcher.match(5).describe()
    '5 is not a number > 5'
    """

    expected: numbers.Number
    predicate: Callable[[int], bool]
    symbol: str

    def __str__(self) -> str:
        return f"a number {self.symbol} {self.expected!r}"

    def match(self, actual: Any) -> Mismatch | None:
        expected_type = type(self.expected)
        if not isinstance(actual, expected_type):
            return Mismatch(
                f"{actual!r} is not {self} (expected an instance of {expected_type.__name__}, "
                f"got {type(actual).__name__})"
            )
        cmp = _compare(actual, self.expected)
        if cmp is None:
            return Mismatch(f"{actual!r} is not {self} (values are not orderable)")
        if not self.predicate(cmp):
            return Mismatch(f"{actual!r} is not {self}")
        return None


def greater_than(expected: numbers.Number) -> OrderingMatcher:
    """Matcher for ``actual > expected``, used by ``assert_gt``."""

    return OrderingMatcher(expected, lambda cmp: cmp > 0, ">")


def at_least(expected: numbers.Number) -> OrderingMatcher:
    """Matcher for ``actual >= expected``, used by ``assert_gte``."""

    return OrderingMatcher(expected, lambda cmp: cmp >= 0, ">=")


def less_than(expected: numbers.Number) -> OrderingMatcher:
    """Matcher for ``actual < expected``, used by ``assert_lt``."""

    return OrderingMatcher(expected, lambda cmp: cmp < 0, "<")


def at_most(expected: numbers.Number) -> OrderingMatcher:
    """Matcher for ``actual <= expected``, used by ``assert_lte``.

    Examples
    --------
    >>> at_most(5).match(5) is None
    True
    >>> str(at_most(5))
    'a number <= 5'
    """

    return OrderingMatcher(expected, lambda cmp: cmp <= 0, "<=")


def _compare(actual: Any, expected: Any) -> int | None:
    """Return ``-1``, ``0`` or ``1`` like ``compareTo``; ``None`` when unordered.

    NaN compares false against everything, so it is reported as unordered
    instead of silently comparing equal.
    """

    if _is_nan(actual) or _is_nan(expected):
        return None
    try:
        return (actual > expected) - (actual < expected)
    except (TypeError, ArithmeticError):
        return None


def _is_nan(value: Any) -> bool:
    """Detect NaN, including ``Decimal`` signaling NaN, which refuses ``float()``."""

    if isinstance(value, Decimal):
        return value.is_nan()
    try:
        return math.isnan(value)
    except (TypeError, ValueError, OverflowError):
        return False
