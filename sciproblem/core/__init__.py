"""Building blocks shared by all problem types."""

from .inplace import (
    DeclaresInPlace,
    ObjectKind,
    classify,
    declared_inplace,
    isinplace,
    numargs,
    resolve_inplace,
)
from .options import SolverOptions, coerce_options
from .parameters import NULL_PARAMETERS, NullParameters, has_parameters

__all__ = [
    "NULL_PARAMETERS",
    "NullParameters",
    "has_parameters",
    "SolverOptions",
    "coerce_options",
    "ObjectKind",
    "DeclaresInPlace",
    "classify",
    "declared_inplace",
    "isinplace",
    "numargs",
    "resolve_inplace",
]
