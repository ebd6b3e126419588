"""Nonlinear systems ``f(u, p) = 0``."""

from __future__ import annotations

from dataclasses import KW_ONLY, dataclass
from typing import Any, Mapping, Optional

from sciproblem.core.inplace import isinplace
from sciproblem.core.options import SolverOptions, coerce_options
from sciproblem.core.parameters import NULL_PARAMETERS
from sciproblem.functions.nonlinear import NonlinearFunction

from .base import AbstractProblem


@dataclass(frozen=True, eq=False)
class NonlinearProblem(AbstractProblem):
    """
    Root-finding problem ``f(u, p) = 0`` with initial guess ``u0``.

    ``f`` is always stored as a :class:`NonlinearFunction`; a raw callable is
    wrapped and its convention inferred from the signature (``f(u, p)`` out
    of place, ``f(du, u, p)`` in place) unless ``inplace`` is given.
    ``u0`` may be a number or an array of any shape.
    """

    _object_field = "f"

    f: NonlinearFunction
    u0: Any
    p: Any = NULL_PARAMETERS
    _: KW_ONLY
    inplace: Optional[bool] = None
    options: SolverOptions | Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        func = NonlinearFunction.wrap(self.f, inplace=self.inplace)
        object.__setattr__(self, "f", func)
        object.__setattr__(self, "inplace", func.inplace)
        object.__setattr__(self, "options", coerce_options(self.options))

    @classmethod
    def from_problem(cls, prob: Any) -> NonlinearProblem:
        """
        Build a nonlinear problem from another problem record.

        ``prob`` must expose ``f``, ``u0`` and ``p``. The function, initial
        guess and parameters are shared with ``prob``, not copied.
        """
        return cls(prob.f, prob.u0, prob.p, inplace=isinplace(prob))


__all__ = ["NonlinearProblem"]
