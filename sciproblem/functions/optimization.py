"""Objective wrapper bundling derivative providers for optimization problems."""

from __future__ import annotations

from dataclasses import KW_ONLY, dataclass, fields
from typing import Any, Callable, Optional

from sciproblem.errors import WrapperConflictError
from sciproblem.logging import get_logger

from .adtypes import AbstractADType, NoAD

logger = get_logger(__name__)

_DERIVATIVE_FIELDS = (
    "grad",
    "hess",
    "hv",
    "cons",
    "cons_j",
    "cons_h",
    "hess_prototype",
    "cons_jac_prototype",
    "cons_hess_prototype",
)


@dataclass(frozen=True, eq=False)
class OptimizationFunction:
    """
    Objective ``f(x, p)`` together with optional derivative providers.

    The wrapper adds metadata only: calling it forwards every argument to
    ``f`` unchanged. Every derivative field defaults to None ("not
    provided"). The in-place flag describes how the derivative callables
    write their output; it defaults to True and is never inferred, because
    the shape of ``f`` alone says nothing about ``grad`` or ``hess``.

    Args:
        f: Objective callable, or another ``OptimizationFunction``.
        adtype: Differentiation capability marker. Defaults to ``NoAD()``.
        grad: Gradient callable.
        hess: Hessian callable.
        hv: Hessian-vector product callable.
        cons: Constraint function.
        cons_j: Constraint Jacobian callable.
        cons_h: Constraint Hessian callable.
        hess_prototype: Sparsity prototype for the Hessian.
        cons_jac_prototype: Sparsity prototype for the constraint Jacobian.
        cons_hess_prototype: Sparsity prototype for the constraint Hessians.
        inplace: Calling convention of the derivative callables.
    """

    f: Callable[..., Any]
    adtype: AbstractADType = NoAD()
    _: KW_ONLY
    grad: Optional[Callable[..., Any]] = None
    hess: Optional[Callable[..., Any]] = None
    hv: Optional[Callable[..., Any]] = None
    cons: Optional[Callable[..., Any]] = None
    cons_j: Optional[Callable[..., Any]] = None
    cons_h: Optional[Callable[..., Any]] = None
    hess_prototype: Any = None
    cons_jac_prototype: Any = None
    cons_hess_prototype: Any = None
    inplace: Optional[bool] = None

    def __post_init__(self) -> None:
        if not isinstance(self.adtype, AbstractADType):
            raise TypeError(
                f"adtype must be an AbstractADType instance, got {self.adtype!r}"
            )

        inner = self.f
        if isinstance(inner, OptimizationFunction):
            self._collapse(inner)
            return

        if not callable(inner):
            raise TypeError(f"f must be callable, got {type(inner).__name__}")
        object.__setattr__(
            self, "inplace", True if self.inplace is None else bool(self.inplace)
        )

    def _collapse(self, inner: OptimizationFunction) -> None:
        if self.inplace is not None and self.inplace != inner.inplace:
            raise WrapperConflictError(
                f"Cannot re-wrap an OptimizationFunction with inplace={inner.inplace} "
                f"as inplace={self.inplace}"
            )
        object.__setattr__(self, "f", inner.f)
        object.__setattr__(self, "inplace", inner.inplace)
        if self.adtype == NoAD():
            object.__setattr__(self, "adtype", inner.adtype)
        for name in _DERIVATIVE_FIELDS:
            if getattr(self, name) is None:
                object.__setattr__(self, name, getattr(inner, name))
        logger.debug("Collapsed nested OptimizationFunction around %r", inner.f)

    @classmethod
    def wrap(cls, f: Any) -> OptimizationFunction:
        """Return ``f`` if it already is a wrapper, else wrap it with ``NoAD()``."""
        if isinstance(f, cls):
            return f
        return cls(f, NoAD(), inplace=True)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.f(*args, **kwargs)

    @property
    def has_grad(self) -> bool:
        return self.grad is not None

    @property
    def has_hess(self) -> bool:
        return self.hess is not None

    @property
    def has_constraints(self) -> bool:
        return self.cons is not None

    def provided(self) -> list[str]:
        """Return the names of the derivative fields that were supplied."""
        return [
            f.name
            for f in fields(self)
            if f.name in _DERIVATIVE_FIELDS and getattr(self, f.name) is not None
        ]


__all__ = ["OptimizationFunction"]
