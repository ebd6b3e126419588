"""Problem records handed to numerical solvers."""

from .base import AbstractProblem
from .linear import LinearProblem
from .nonlinear import NonlinearProblem
from .optimization import OptimizationProblem, Sense
from .quadrature import QuadratureProblem

__all__ = [
    "AbstractProblem",
    "LinearProblem",
    "NonlinearProblem",
    "QuadratureProblem",
    "OptimizationProblem",
    "Sense",
]
