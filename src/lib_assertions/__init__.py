"""Public package surface for ``lib_assertions``.

Re-exports the check functions from :mod:`lib_assertions.core`, the failure
taxonomy, and the logging hooks so test code only ever needs
``from lib_assertions import ...``.
"""

from __future__ import annotations

from . import settings
from .core import (
    Raised,
    assert_contains,
    assert_equals,
    assert_false,
    assert_gt,
    assert_gte,
    assert_instance_of,
    assert_lt,
    assert_lte,
    assert_none,
    assert_not_equals,
    assert_not_none,
    assert_that,
    assert_throws,
    assert_true,
    capture_throws,
    fail,
)
from .domain.errors import AssertionFailure, MatchFailure, NothingRaised, WrongExceptionType
from .observability import bind_test_id, get_logger

__all__ = [
    "AssertionFailure",
    "MatchFailure",
    "NothingRaised",
    "Raised",
    "WrongExceptionType",
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
    "bind_test_id",
    "capture_throws",
    "fail",
    "get_logger",
    "settings",
]
