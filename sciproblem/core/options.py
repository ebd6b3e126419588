"""Typed solver options carried by every problem record."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Mapping, Optional

from sciproblem.errors import UnknownOptionError


@dataclass(frozen=True)
class SolverOptions:
    """
    Options a problem forwards to the solver that eventually consumes it.

    Only the names declared here are accepted; an unknown name raises
    :class:`~sciproblem.errors.UnknownOptionError` when the problem is built
    instead of being passed silently to the solver.

    Args:
        abstol: Absolute tolerance. Must be positive when set.
        reltol: Relative tolerance. Must be positive when set.
        maxiters: Maximum number of solver iterations. Must be a positive int.
        maxtime: Wall-clock budget in seconds. Must be positive when set.
        verbose: Whether the solver should report progress.
        callback: Callable invoked by the solver after each iteration.
        save_best: Whether the solver should keep the best iterate seen.
    """

    abstol: Optional[float] = None
    reltol: Optional[float] = None
    maxiters: Optional[int] = None
    maxtime: Optional[float] = None
    verbose: bool = False
    callback: Optional[Callable[..., Any]] = None
    save_best: bool = False

    def __post_init__(self) -> None:
        """Validate option values."""
        for name in ("abstol", "reltol", "maxtime"):
            value = getattr(self, name)
            if value is not None and not value > 0:
                raise ValueError(f"{name} must be positive, got {value!r}")
        if self.maxiters is not None:
            if isinstance(self.maxiters, bool) or not isinstance(
                self.maxiters, numbers.Integral
            ):
                raise ValueError(f"maxiters must be an int, got {self.maxiters!r}")
            if self.maxiters < 1:
                raise ValueError(f"maxiters must be >= 1, got {self.maxiters}")
        if self.callback is not None and not callable(self.callback):
            raise ValueError("callback must be callable")

    @classmethod
    def names(cls) -> list[str]:
        """Return the recognized option names."""
        return [f.name for f in fields(cls)]

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> SolverOptions:
        """Build options from keyword arguments, rejecting unknown names."""
        supported = cls.names()
        unknown = [key for key in kwargs if key not in supported]
        if unknown:
            raise UnknownOptionError(unknown, supported)
        return cls(**kwargs)

    def as_dict(self) -> dict[str, Any]:
        """Return the options that differ from their defaults."""
        defaults = SolverOptions()
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not getattr(defaults, f.name)
        }

    def merge(self, other: SolverOptions | Mapping[str, Any] | None) -> SolverOptions:
        """Return new options where everything set in ``other`` overrides ``self``."""
        overrides = coerce_options(other).as_dict()
        return replace(self, **overrides)


def coerce_options(value: SolverOptions | Mapping[str, Any] | None) -> SolverOptions:
    """Normalize ``None``, a mapping or :class:`SolverOptions` into options."""
    if value is None:
        return SolverOptions()
    if isinstance(value, SolverOptions):
        return value
    if isinstance(value, Mapping):
        return SolverOptions.from_kwargs(**value)
    raise TypeError(
        f"options must be a SolverOptions instance or a mapping, got {type(value).__name__}"
    )


__all__ = ["SolverOptions", "coerce_options"]
