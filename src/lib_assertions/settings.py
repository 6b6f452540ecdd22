"""Process-wide options controlling how failures are rendered.

Contents
    - ``Settings``: mutable record of rendering options.
    - ``config``: the shared instance read by the check functions.
    - ``override``: context manager applying temporary changes.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, fields
from typing import Any, Iterator


@dataclass
class Settings:
    """Rendering options shared by every check.

    Attributes
    ----------
    verbose:
        When ``True``, matcher failures include the matchee and the matcher
        description next to the difference.
    """

    verbose: bool = False


config = Settings()


@contextmanager
def override(**changes: Any) -> Iterator[Settings]:
    """Apply ``changes`` to :data:`config` and restore the previous values on exit.

    Raises ``TypeError`` for names that are not :class:`Settings` fields.

    Examples
    --------
    >>> with override(verbose=True) as current:
    ...     current.verbose
    True
    >>> config.verbose
    False
    """

    known = {field.name for field in fields(Settings)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(unknown)}")
    previous = {name: getattr(config, name) for name in changes}
    try:
        for name, value in changes.items():
            setattr(config, name, value)
        yield config
    finally:
        for name, value in previous.items():
            setattr(config, name, value)
