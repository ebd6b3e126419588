"""sciproblem - immutable problem descriptions for numerical solvers."""

__version__ = "0.1.0"

from .core import (
    NULL_PARAMETERS,
    DeclaresInPlace,
    NullParameters,
    ObjectKind,
    SolverOptions,
    classify,
    has_parameters,
    isinplace,
)
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled
from .errors import (
    BoundsMismatchError,
    InPlaceInferenceError,
    NullParameterIndexError,
    UnknownOptionError,
    WrapperConflictError,
)
from .functions import (
    AbstractADType,
    AutoFiniteDiff,
    AutoTorch,
    NoAD,
    NonlinearFunction,
    OptimizationFunction,
)
from .logging import configure_logging, get_logger, set_log_level
from .problems import (
    AbstractProblem,
    LinearProblem,
    NonlinearProblem,
    OptimizationProblem,
    QuadratureProblem,
    Sense,
)

__all__ = [
    "__version__",
    # Parameters and options
    "NULL_PARAMETERS",
    "NullParameters",
    "has_parameters",
    "SolverOptions",
    # In-place inference
    "ObjectKind",
    "DeclaresInPlace",
    "classify",
    "isinplace",
    # Function wrappers
    "AbstractADType",
    "NoAD",
    "AutoFiniteDiff",
    "AutoTorch",
    "NonlinearFunction",
    "OptimizationFunction",
    # Problems
    "AbstractProblem",
    "LinearProblem",
    "NonlinearProblem",
    "QuadratureProblem",
    "OptimizationProblem",
    "Sense",
    # Errors
    "NullParameterIndexError",
    "InPlaceInferenceError",
    "BoundsMismatchError",
    "UnknownOptionError",
    "WrapperConflictError",
    # Diagnostics and logging
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
