"""Process-wide switch for the shape checks run by problem constructors."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

ENV_VAR = "SCIPROBLEM_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    environ = os.environ if environ is None else environ
    return environ.get(ENV_VAR, "").strip().lower() in _TRUTHY


_enabled: bool = _flag_from_env()


def is_debug_enabled() -> bool:
    """Return True while problem constructors check the shapes of their data."""
    return _enabled


def set_debug_enabled(enabled: bool) -> bool:
    """
    Turn the constructor shape checks on or off.

    Returns
    -------
    bool
        The previous setting, so callers can restore it.
    """
    global _enabled
    previous = _enabled
    _enabled = bool(enabled)
    return previous


def reload_from_environment(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Re-read ``SCIPROBLEM_DEBUG`` and apply it; return the new setting."""
    set_debug_enabled(_flag_from_env(environ))
    return _enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[bool]:
    """
    Apply a debug setting for the duration of a ``with`` block.

    Example
    -------
    >>> with debug_context(True):
    ...     LinearProblem(np.eye(3), np.ones(2))  # raises ValueError
    """
    previous = set_debug_enabled(enabled)
    try:
        yield bool(enabled)
    finally:
        set_debug_enabled(previous)
