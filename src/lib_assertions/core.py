"""Convenience checks layered on testtools matchers.

Purpose
-------
Provide the flat set of named checks test code calls directly. Each check
either returns silently or raises an :class:`~lib_assertions.domain.errors.AssertionFailure`
subclass with a descriptive message. All matcher-based checks funnel through
:func:`assert_that`, the single place where mismatches become failures and are
logged.

Contents
--------
* :func:`assert_that` – evaluate any testtools matcher.
* :func:`assert_equals` – primitive equality.
* :func:`assert_gt` / :func:`assert_gte` / :func:`assert_lt` /
  :func:`assert_lte` – ordering comparisons.
* :func:`assert_contains` – literal substring containment.
* :func:`assert_instance_of` – type-instance check.
* :func:`fail`, :func:`assert_true`, :func:`assert_false`, :func:`assert_none`,
  :func:`assert_not_none`, :func:`assert_not_equals` – base primitives.
* :func:`assert_throws` / :func:`capture_throws` – re-exported from
  :mod:`lib_assertions.raises`.
"""

from __future__ import annotations

import numbers
from typing import Any, NoReturn

from testtools.matchers import Annotate, Contains, Equals, Is, IsInstance, Matcher, Not, NotEquals

from . import settings
from .domain.errors import AssertionFailure, MatchFailure
from .matchers import at_least, at_most, greater_than, less_than
from .observability import log_debug, make_event
from .raises import Raised, assert_throws, capture_throws

_PRIMITIVES = (bool, numbers.Number, str, bytes)


def assert_that(matchee: Any, matcher: Matcher, message: str = "") -> None:
    """Assert that ``matchee`` is matched by ``matcher``.

    ``message``, when non-empty, is appended to the mismatch description.

    Raises
    ------
    MatchFailure
        When the matcher reports a mismatch.

    Examples
    --------
    >>> assert_that(3, Equals(3))
    """

    annotated = Annotate.if_message(message, matcher)
    mismatch = annotated.match(matchee)
    if not mismatch:
        return
    log_debug("check_failed", **make_event("assert_that", str(matcher), {"mismatch": mismatch.describe()}))
    raise MatchFailure(matchee, annotated, mismatch, settings.config.verbose)


def fail(message: str = "") -> NoReturn:
    """Raise :class:`AssertionFailure` unconditionally."""

    log_debug("check_failed", **make_event("fail", None, {"reason": message}))
    raise AssertionFailure(message)


def assert_true(value: Any, message: str = "") -> None:
    """Assert that ``value`` is truthy.

    What
        Fails through :func:`fail`, using ``message`` when given and a
        rendering of ``value`` otherwise.
    """

    if not value:
        fail(message or f"{value!r} is not truthy")


def assert_false(value: Any, message: str = "") -> None:
    """Assert that ``value`` is falsy; the counterpart of :func:`assert_true`."""

    if value:
        fail(message or f"{value!r} is not falsy")


def assert_none(value: Any, message: str = "") -> None:
    """Assert that ``value`` is ``None`` (identity, not equality)."""

    assert_that(value, Is(None), message)


def assert_not_none(value: Any, message: str = "") -> None:
    """Assert that ``value`` is not ``None``; falsy values such as ``0`` pass."""

    assert_that(value, Not(Is(None)), message)


def assert_equals(expected: Any, actual: Any, message: str = "") -> None:
    """Assert that ``actual == expected`` for a primitive ``expected``.

    ``expected`` must be a ``bool``, a number, a ``str`` or ``bytes``;
    ``actual`` may be anything.

    Examples
    --------
    >>> assert_equals(5, 5)
    >>> assert_equals("a", "a")
    """

    if not isinstance(expected, _PRIMITIVES):
        raise TypeError(
            f"assert_equals expects a primitive expected value (bool, number, str, bytes), "
            f"got {type(expected).__name__}"
        )
    assert_that(actual, Equals(expected), message)


def assert_not_equals(unexpected: Any, actual: Any, message: str = "") -> None:
    """Assert that ``actual != unexpected``.

    Why
        Unlike :func:`assert_equals` any value may be passed as ``unexpected``;
        the check is a plain inequality with no primitive restriction.
    """

    assert_that(actual, NotEquals(unexpected), message)


def assert_gt(expected: numbers.Number, actual: Any, message: str = "") -> None:
    """Assert ``actual > expected``; ``actual`` must share ``expected``'s type.

    Examples
    --------
    >>> assert_gt(5, 6)
    """

    assert_that(actual, greater_than(_require_number(expected)), message)


def assert_gte(expected: numbers.Number, actual: Any, message: str = "") -> None:
    """Assert ``actual >= expected``; ``actual`` must share ``expected``'s type."""

    assert_that(actual, at_least(_require_number(expected)), message)


def assert_lt(expected: numbers.Number, actual: Any, message: str = "") -> None:
    """Assert ``actual < expected``; ``actual`` must share ``expected``'s type."""

    assert_that(actual, less_than(_require_number(expected)), message)


def assert_lte(expected: numbers.Number, actual: Any, message: str = "") -> None:
    """Assert ``actual <= expected``; ``actual`` must share ``expected``'s type.

    Examples
    --------
    >>> assert_lte(5, 5)
    """

    assert_that(actual, at_most(_require_number(expected)), message)


def assert_contains(sub: str, actual: Any, message: str = "") -> None:
    """Assert that the string ``actual`` contains ``sub`` literally.

    Examples
    --------
    >>> assert_contains("abc", "xxabcyy")
    """

    if not isinstance(sub, str):
        raise TypeError(f"assert_contains expects a str substring, got {type(sub).__name__}")
    assert_that(actual, IsInstance(str), message)
    assert_that(actual, Contains(sub), message)


def assert_instance_of(expected_type: type | tuple[type, ...], obj: Any, message: str = "") -> None:
    """Assert that ``obj`` is an instance of ``expected_type`` or a subtype.

    Examples
    --------
    >>> import numbers
    >>> assert_instance_of(numbers.Number, 5)
    """

    types = expected_type if isinstance(expected_type, tuple) else (expected_type,)
    assert_that(obj, IsInstance(*types), message)


def _require_number(expected: Any) -> numbers.Number:
    if not isinstance(expected, numbers.Number):
        raise TypeError(f"expected must be a number, got {type(expected).__name__}")
    return expected


__all__ = [
    "Raised",
    "assert_contains",
    "assert_equals",
    "assert_false",
    "assert_gt",
    "assert_gte",
    "assert_instance_of",
    "assert_lt",
    "assert_lte",
    "assert_none",
    "assert_not_equals",
    "assert_not_none",
    "assert_that",
    "assert_throws",
    "assert_true",
    "capture_throws",
    "fail",
]
