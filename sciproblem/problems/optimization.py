"""Optimization problems: minimize or maximize ``f(x, p)``."""

from __future__ import annotations

from dataclasses import KW_ONLY, dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from sciproblem.core.options import SolverOptions, coerce_options
from sciproblem.core.parameters import NULL_PARAMETERS
from sciproblem.diagnostics import (
    check_bounds_shapes,
    check_constraint_bounds,
    is_debug_enabled,
)
from sciproblem.errors import BoundsMismatchError
from sciproblem.functions.optimization import OptimizationFunction

from .base import AbstractProblem


class Sense(Enum):
    """Direction of optimization."""

    MIN = "min"
    MAX = "max"


@dataclass(frozen=True, eq=False)
class OptimizationProblem(AbstractProblem):
    """
    Optimization of ``f(x, p)`` from the initial point ``u0``.

    A raw objective is wrapped in :class:`OptimizationFunction` with
    ``NoAD()`` and in-place derivatives; the problem's in-place flag is read
    from the wrapper and cannot be passed directly.

    Box bounds ``lb``/``ub`` must be given together or not at all.
    Constraint bounds ``lcons``/``ucons`` and ``sense`` are stored as given.

    Raises
    ------
    BoundsMismatchError
        If exactly one of ``lb`` and ``ub`` is supplied.
    """

    _object_field = "f"

    f: OptimizationFunction
    u0: Any
    p: Any = NULL_PARAMETERS
    _: KW_ONLY
    lb: Any = None
    ub: Any = None
    lcons: Any = None
    ucons: Any = None
    sense: Optional[Sense] = None
    options: SolverOptions | Mapping[str, Any] | None = None
    inplace: bool = field(init=False)

    def __post_init__(self) -> None:
        if (self.lb is None) != (self.ub is None):
            raise BoundsMismatchError()
        func = OptimizationFunction.wrap(self.f)
        object.__setattr__(self, "f", func)
        object.__setattr__(self, "inplace", func.inplace)
        object.__setattr__(self, "options", coerce_options(self.options))
        if is_debug_enabled():
            check_bounds_shapes(self.lb, self.ub, self.u0)
            check_constraint_bounds(self.lcons, self.ucons)

    @property
    def has_bounds(self) -> bool:
        return self.lb is not None

    @property
    def has_constraint_bounds(self) -> bool:
        return self.lcons is not None or self.ucons is not None


__all__ = ["Sense", "OptimizationProblem"]
