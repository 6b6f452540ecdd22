"""Domain-level failure hierarchy.

Purpose
-------
Expose the stable failure taxonomy raised by every check in
``lib_assertions``. All types derive from :class:`AssertionError` so pytest and
``unittest`` record them as ordinary test failures rather than errors.

Contents
--------
* :class:`AssertionFailure` – umbrella base class for all failed checks.
* :class:`MatchFailure` – a testtools matcher rejected its matchee.
* :class:`NothingRaised` – the callable handed to ``assert_throws`` returned
  normally.
* :class:`WrongExceptionType` – the callable raised an exception of another
  kind.

System Role
-----------
Check functions raise these types; nothing inside the library catches them.
Callers catch :class:`AssertionFailure` to handle all library failures
uniformly.
"""

from __future__ import annotations

from testtools.matchers import MismatchError


class AssertionFailure(AssertionError):
    """Base type for all failures emitted by ``lib_assertions``.

    Why
    ----
    Provide a single catch-all type for callers that do not need fine-grained
    handling, while staying an :class:`AssertionError` for test runners.
    """


class MatchFailure(AssertionFailure, MismatchError):
    """Raised when a matcher reports a mismatch.

    Carries ``matchee``, ``matcher`` and ``mismatch`` exactly like
    :class:`testtools.matchers.MismatchError`, which renders the message. With
    ``verbose`` set the message also shows the matchee and the matcher.
    """


class NothingRaised(AssertionFailure):
    """Raised when an ``assert_throws`` target completes without raising."""


class WrongExceptionType(AssertionFailure):
    """Raised when an ``assert_throws`` target raises an unexpected kind.

    The exception actually raised is attached as ``__cause__``.
    """
