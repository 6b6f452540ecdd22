"""Structured logging helpers for assertion diagnostics.

Purpose
    Keep every emission of logging data predictable and contextual without
    forcing test suites to adopt a specific logging backend.

Contents
    - ``TEST_ID``: context variable storing the active test identifier.
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``bind_test_id``: binds or clears the active test identifier.
    - ``log_debug``: emit structured entries via a single private emitter.
    - ``make_event``: convenience builder for structured event payloads.

System Integration
    Used by the check functions to record failures and captured exceptions.
    pytest's ``caplog`` picks the records up when a suite raises the
    ``lib_assertions`` logger level.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TEST_ID: ContextVar[str | None] = ContextVar("lib_assertions_test_id", default=None)
"""Identifier of the test currently running, attached to every log record."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_assertions")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so test suites may attach handlers.

    Why
        Leaves the library silent by default while giving the host suite full
        control over handler and formatter configuration.
    """

    return _LOGGER


def bind_test_id(test_id: str | None) -> None:
    """Bind or clear the active test identifier.

    What
        Stores ``test_id`` in :data:`TEST_ID`; ``None`` clears the binding.
        A pytest ``autouse`` fixture can bind ``request.node.nodeid`` here.

    Examples
    --------
    >>> bind_test_id('tests/unit/test_core.py::test_gt')
    >>> TEST_ID.get()
    'tests/unit/test_core.py::test_gt'
    >>> bind_test_id(None)
    >>> TEST_ID.get() is None
    True
    """

    TEST_ID.set(test_id)


def log_debug(message: str, /, **fields: Any) -> None:
    """Emit a structured debug log entry that includes the test context.

    ``message`` is positional-only so event payloads may carry a field of the
    same name.
    """

    _emit(logging.DEBUG, message, fields)


def make_event(
    check: str,
    expected: Any,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured logging payload for a check invocation.

    What
        Returns a dictionary with ``check`` and ``expected`` keys plus any
        optional payload fields. ``expected`` is stored as its ``repr`` so the
        record stays serialisable.

    Examples
    --------
    >>> make_event('assert_gt', 5, {'symbol': '>'})
    {'check': 'assert_gt', 'expected': '5', 'symbol': '>'}
    """

    event = {"check": check, "expected": repr(expected)}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": _with_test_id(fields)})


def _with_test_id(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Attach the current test identifier to the provided structured fields."""

    context = {"test_id": TEST_ID.get()}
    context.update(fields)
    return context
