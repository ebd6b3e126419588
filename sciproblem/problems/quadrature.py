"""Quadrature problems: integrate ``f`` over ``[lb, ub]``."""

from __future__ import annotations

import numbers
from dataclasses import KW_ONLY, dataclass
from typing import Any, Callable, Mapping, Optional

import numpy as np

from sciproblem.core.inplace import resolve_inplace
from sciproblem.core.options import SolverOptions, coerce_options
from sciproblem.core.parameters import NULL_PARAMETERS
from sciproblem.diagnostics import check_bounds_shapes, is_debug_enabled

from .base import AbstractProblem


def _is_integer(value: Any) -> bool:
    # NumPy integer scalars register as numbers.Integral; bool does too.
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


@dataclass(frozen=True, eq=False)
class QuadratureProblem(AbstractProblem):
    """
    Integral of ``f`` over the box ``[lb, ub]``.

    ``f`` is ``f(x, p)`` out of place or ``f(dx, x, p)`` in place.

    Args:
        f: Integrand.
        lb: Lower bound, a number or a vector.
        ub: Upper bound, a number or a vector.
        p: Parameters; defaults to ``NULL_PARAMETERS``.
        nout: Output size of ``f``. Defaults to 1, a scalar integral.
        batch: Preferred number of points per call. When nonzero each column
            ``x[:, i]`` is a separate point and the output is
            ``nout x batchsize``. This is a hint; solvers may use another
            batch size.
        inplace: Explicit in-place flag; inferred when None.
        options: Solver options as ``SolverOptions`` or a mapping.
    """

    _object_field = "f"

    f: Callable[..., Any]
    lb: Any
    ub: Any
    p: Any = NULL_PARAMETERS
    _: KW_ONLY
    nout: int = 1
    batch: int = 0
    inplace: Optional[bool] = None
    options: SolverOptions | Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if not _is_integer(self.nout) or self.nout < 1:
            raise ValueError(f"nout must be an int >= 1, got {self.nout!r}")
        if not _is_integer(self.batch) or self.batch < 0:
            raise ValueError(f"batch must be an int >= 0, got {self.batch!r}")
        object.__setattr__(self, "inplace", resolve_inplace(self.f, 3, self.inplace))
        object.__setattr__(self, "options", coerce_options(self.options))
        if is_debug_enabled():
            check_bounds_shapes(self.lb, self.ub)


__all__ = ["QuadratureProblem"]
