"""Assert that a callable raises an expected exception type.

Purpose
-------
Run a target callable inside a capturing boundary and classify whatever it
raises against the expected kind. A matching exception is handed back for
inspection; anything else becomes an assertion failure.

Contents
--------
* :class:`Raised` – result value holding the caught exception.
* :func:`capture_throws` – classify and return a :class:`Raised`.
* :func:`assert_throws` – classify, optionally feed a consumer, return the
  caught exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .domain.errors import NothingRaised, WrongExceptionType
from .observability import log_debug, make_event

ExpectedKind = type[BaseException] | tuple[type[BaseException], ...]


@dataclass(frozen=True)
class Raised:
    """Exception caught by :func:`capture_throws`.

    Attributes
    ----------
    expected:
        The kind the caller asked for.
    exception:
        The caught instance; always an instance of ``expected``.

    Examples
    --------
    >>> def boom():
    ...     raise KeyError("missing")
    >>> raised = capture_throws(LookupError, boom)
    >>> raised.exception.args
    ('missing',)
    >>> raised.then(lambda exc: None) is raised
    True
    """

    expected: ExpectedKind
    exception: BaseException

    def then(self, consumer: Callable[[BaseException], Any]) -> Raised:
        """Call ``consumer`` with the caught exception and return ``self``.

        Whatever ``consumer`` raises propagates to the caller.
        """

        consumer(self.exception)
        return self


def capture_throws(expected: ExpectedKind, fn: Callable[[], Any]) -> Raised:
    """Call ``fn`` and return the exception it raised when it matches ``expected``.

    Raises
    ------
    NothingRaised
        ``fn`` returned normally.
    WrongExceptionType
        ``fn`` raised an :class:`Exception` that is not an instance of
        ``expected``; the original is chained as ``__cause__``.
    TypeError
        ``expected`` is not an exception class or a tuple of them.

    Exceptions outside the :class:`Exception` hierarchy (``KeyboardInterrupt``,
    ``SystemExit``...) that do not match propagate untouched.
    """

    kind = _describe_kind(expected)
    try:
        fn()
    except BaseException as exc:
        if isinstance(exc, expected):
            return Raised(expected, exc)
        if not isinstance(exc, Exception):
            raise
        message = f"Bad exception type {_type_name(type(exc))} (expected {kind})"
        log_debug("check_failed", **make_event("assert_throws", kind, {"actual": _type_name(type(exc))}))
        raise WrongExceptionType(message) from exc
    message = f"No exception was thrown (expected {kind})"
    log_debug("check_failed", **make_event("assert_throws", kind, {"actual": None}))
    raise NothingRaised(message)


def assert_throws(
    expected: ExpectedKind,
    fn: Callable[[], Any],
    consumer: Callable[[BaseException], Any] | None = None,
) -> BaseException:
    """Assert that ``fn()`` raises an instance of ``expected`` and return it.

    ``consumer``, when given, receives the caught exception so its details
    (message, attributes) can be checked inline. Without a consumer the caught
    exception is reported on the package logger at DEBUG level.

    Examples
    --------
    >>> def parse():
    ...     int("x")
    >>> exc = assert_throws(ValueError, parse)
    >>> "invalid literal" in str(exc)
    True
    """

    raised = capture_throws(expected, fn)
    if consumer is None:
        log_debug(
            "exception_captured",
            **make_event("assert_throws", _describe_kind(expected), {"exception": repr(raised.exception)}),
        )
        return raised.exception
    return raised.then(consumer).exception


def _describe_kind(expected: ExpectedKind) -> str:
    """Render ``expected`` for failure messages, validating it on the way."""

    kinds = expected if isinstance(expected, tuple) else (expected,)
    if not kinds or not all(isinstance(kind, type) and issubclass(kind, BaseException) for kind in kinds):
        raise TypeError(f"expected an exception class or a tuple of exception classes, got {expected!r}")
    return " or ".join(_type_name(kind) for kind in kinds)


def _type_name(cls: type) -> str:
    """Return ``module.QualName``, leaving builtins unqualified.

    Examples
    --------
    >>> _type_name(ValueError)
    'ValueError'
    >>> import json
    >>> _type_name(json.JSONDecodeError)
    'json.decoder.JSONDecodeError'
    """

    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
