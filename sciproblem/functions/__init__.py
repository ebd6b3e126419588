"""Function wrappers and differentiation capability markers."""

from .adtypes import AbstractADType, AutoFiniteDiff, AutoTorch, NoAD
from .nonlinear import NonlinearFunction
from .optimization import OptimizationFunction

__all__ = [
    "AbstractADType",
    "NoAD",
    "AutoFiniteDiff",
    "AutoTorch",
    "NonlinearFunction",
    "OptimizationFunction",
]
