"""Exception types raised by sciproblem.

Every class derives from the builtin exception a caller would expect, so
``except ValueError`` keeps working for code that does not know about the
specific subclass.
"""

from __future__ import annotations


class NullParameterIndexError(LookupError):
    """Raised when a parameter is requested from ``NullParameters``."""

    def __init__(self, key: object = None) -> None:
        message = (
            "Parameters were indexed but the parameters are `NullParameters`. "
            "This usually means a parameter object was not passed when the "
            "problem was constructed."
        )
        if key is not None:
            message = f"{message} (requested key: {key!r})"
        super().__init__(message)
        self.key = key


class InPlaceInferenceError(TypeError):
    """Raised when a callable cannot be classified as in-place or out-of-place."""


class BoundsMismatchError(ValueError):
    """Raised when only one of ``lb``/``ub`` is supplied."""

    def __init__(self) -> None:
        super().__init__("If any of `lb` or `ub` is provided, both must be provided.")


class UnknownOptionError(TypeError):
    """Raised when a solver option name is not recognized."""

    def __init__(self, unknown: list[str], supported: list[str]) -> None:
        super().__init__(
            f"Unknown solver option(s) {sorted(unknown)}. "
            f"Supported options: {sorted(supported)}"
        )
        self.unknown = list(unknown)
        self.supported = list(supported)


class WrapperConflictError(ValueError):
    """Raised when re-wrapping a function wrapper contradicts its in-place flag."""


__all__ = [
    "NullParameterIndexError",
    "InPlaceInferenceError",
    "BoundsMismatchError",
    "UnknownOptionError",
    "WrapperConflictError",
]
