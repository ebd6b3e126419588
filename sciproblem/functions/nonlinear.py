"""Function wrapper for nonlinear systems ``f(u, p) = 0``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from sciproblem.core.inplace import isinplace
from sciproblem.errors import WrapperConflictError
from sciproblem.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class NonlinearFunction:
    """
    Residual function of a nonlinear system with optional Jacobian data.

    ``f`` is either out of place, ``f(u, p) -> residual``, or in place,
    ``f(du, u, p)``. When ``inplace`` is not given it is inferred from the
    signature of ``f`` at construction and fixed afterwards.

    Wrapping an existing ``NonlinearFunction`` collapses to a single wrapper:
    the inner callable is stored, the inner in-place flag is inherited, and
    derivative fields not given explicitly are taken from the inner wrapper.

    Args:
        f: Residual callable, or another ``NonlinearFunction``.
        inplace: Explicit calling convention; inferred when None.
        jac: Optional Jacobian callable, same convention as ``f``.
        jac_prototype: Optional sparsity prototype of the Jacobian.
    """

    f: Callable[..., Any]
    inplace: Optional[bool] = None
    jac: Optional[Callable[..., Any]] = None
    jac_prototype: Any = None

    def __post_init__(self) -> None:
        inner = self.f
        if isinstance(inner, NonlinearFunction):
            if self.inplace is not None and self.inplace != inner.inplace:
                raise WrapperConflictError(
                    f"Cannot re-wrap a NonlinearFunction with inplace={inner.inplace} "
                    f"as inplace={self.inplace}"
                )
            object.__setattr__(self, "f", inner.f)
            object.__setattr__(self, "inplace", inner.inplace)
            if self.jac is None:
                object.__setattr__(self, "jac", inner.jac)
            if self.jac_prototype is None:
                object.__setattr__(self, "jac_prototype", inner.jac_prototype)
            logger.debug("Collapsed nested NonlinearFunction around %r", inner.f)
            return

        if not callable(inner):
            raise TypeError(f"f must be callable, got {type(inner).__name__}")
        if self.inplace is None:
            object.__setattr__(self, "inplace", isinplace(inner, 3))
        else:
            object.__setattr__(self, "inplace", bool(self.inplace))

    @classmethod
    def wrap(cls, f: Any, inplace: Optional[bool] = None) -> NonlinearFunction:
        """Return ``f`` if it already is a compatible wrapper, else wrap it."""
        if isinstance(f, cls) and (inplace is None or inplace == f.inplace):
            return f
        return cls(f, inplace=inplace)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.f(*args, **kwargs)

    @property
    def has_jac(self) -> bool:
        return self.jac is not None


__all__ = ["NonlinearFunction"]
