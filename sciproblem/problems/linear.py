"""Linear systems ``A u = b``."""

from __future__ import annotations

from dataclasses import KW_ONLY, dataclass
from typing import Any, Mapping, Optional

from sciproblem.core.inplace import resolve_inplace
from sciproblem.core.options import SolverOptions, coerce_options
from sciproblem.core.parameters import NULL_PARAMETERS
from sciproblem.diagnostics import check_linear_shapes, is_debug_enabled

from .base import AbstractProblem


@dataclass(frozen=True, eq=False)
class LinearProblem(AbstractProblem):
    """
    Linear system ``A u = b``.

    ``A`` is either a concrete matrix (NumPy, PyTorch or SciPy sparse), a
    scalar, or a matrix-free operator evaluated as ``A(u, p, t)`` or in
    place as ``A(du, u, p, t)``. Matrices are in place, scalars are not, and
    operators are classified by the convention they declare or, failing
    that, by their signature. Pass ``inplace`` to pin the flag.

    Args:
        A: Matrix, scalar or operator.
        b: Right-hand side.
        p: Parameters; defaults to ``NULL_PARAMETERS``.
        u0: Optional initial guess for iterative solvers.
        inplace: Explicit in-place flag; inferred when None.
        options: Solver options as ``SolverOptions`` or a mapping.
    """

    _object_field = "A"

    A: Any
    b: Any
    p: Any = NULL_PARAMETERS
    _: KW_ONLY
    u0: Any = None
    inplace: Optional[bool] = None
    options: SolverOptions | Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "inplace", resolve_inplace(self.A, 4, self.inplace))
        object.__setattr__(self, "options", coerce_options(self.options))
        if is_debug_enabled():
            check_linear_shapes(self.A, self.b, self.u0)


__all__ = ["LinearProblem"]
