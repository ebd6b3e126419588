"""
Classification of mathematical objects and in-place inference.

A problem constructor needs to know whether the object it wraps writes its
result into a caller-provided buffer (in place) or returns a fresh value (out
of place). The decision is made once, at construction:

1. an explicit ``inplace=`` argument always wins;
2. plain arrays (NumPy, PyTorch, SciPy sparse) are in place, scalars are not;
3. objects that declare their own convention through a boolean ``inplace``
   attribute are trusted;
4. remaining callables are classified from their signature. A callable
   accepting ``nargs`` positional arguments is in place, one accepting
   ``nargs - 1`` is out of place. The callable is never invoked.
"""

from __future__ import annotations

import inspect
import math
import numbers
from enum import Enum
from typing import Any, Optional, Protocol

import numpy as np
import scipy.sparse
import torch

from sciproblem.errors import InPlaceInferenceError
from sciproblem.logging import get_logger

logger = get_logger(__name__)


class ObjectKind(Enum):
    """Kind of mathematical object handed to a problem constructor."""

    ARRAY = "array"
    SCALAR = "scalar"
    OPERATOR = "operator"


class DeclaresInPlace(Protocol):
    """
    Protocol for operators and functions that state their calling convention.

    Implementations evaluate either as ``op(du, u, p, t)`` (in place) or as
    ``op(u, p, t)`` (out of place) and say which through ``inplace``.
    """

    @property
    def inplace(self) -> bool:
        """Return True if the object writes into an output argument."""
        ...

    def __call__(self, *args: Any) -> Any:
        ...


def classify(obj: Any) -> ObjectKind:
    """Return the :class:`ObjectKind` of ``obj``."""
    if isinstance(obj, (np.ndarray, torch.Tensor)) or scipy.sparse.issparse(obj):
        return ObjectKind.ARRAY
    # Nested lists and tuples are the plain-Python matrix form.
    if isinstance(obj, (list, tuple)) and not callable(obj):
        return ObjectKind.ARRAY
    if isinstance(obj, (numbers.Number, np.number, np.bool_)):
        return ObjectKind.SCALAR
    return ObjectKind.OPERATOR


def numargs(f: Any) -> tuple[int, float]:
    """
    Return the range of positional-argument counts accepted by ``f``.

    Returns
    -------
    tuple[int, float]
        ``(minimum, maximum)``; the maximum is ``math.inf`` when ``f`` takes
        ``*args``.

    Raises
    ------
    InPlaceInferenceError
        If ``f`` is not callable, has no inspectable signature, or requires
        keyword-only arguments a solver could not supply.
    """
    if not callable(f):
        raise InPlaceInferenceError(f"{f!r} is not callable")
    try:
        sig = inspect.signature(f)
    except (TypeError, ValueError) as exc:
        raise InPlaceInferenceError(
            f"Cannot inspect the signature of {f!r}; pass inplace=True or "
            "inplace=False explicitly."
        ) from exc

    required = 0
    maximum: float = 0
    for param in sig.parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            maximum += 1
            if param.default is param.empty:
                required += 1
        elif param.kind is param.VAR_POSITIONAL:
            maximum = math.inf
        elif param.kind is param.KEYWORD_ONLY and param.default is param.empty:
            raise InPlaceInferenceError(
                f"{f!r} requires keyword-only argument '{param.name}' and "
                "cannot be called by a solver."
            )
    return required, maximum


def _accepts(bounds: tuple[int, float], count: int) -> bool:
    low, high = bounds
    return low <= count <= high


def declared_inplace(obj: Any) -> Optional[bool]:
    """Return the convention ``obj`` declares about itself, or None."""
    flag = getattr(obj, "inplace", None)
    if isinstance(flag, bool):
        return flag
    return None


def isinplace(obj: Any, nargs: Optional[int] = None) -> bool:
    """
    Determine whether ``obj`` is evaluated in place.

    Parameters
    ----------
    obj:
        A problem record, a function wrapper, an operator declaring its
        convention, or a plain callable.
    nargs:
        Number of positional arguments of the in-place form, e.g. 4 for
        ``A(du, u, p, t)``. Required when ``obj`` declares nothing.

    Raises
    ------
    InPlaceInferenceError
        If neither ``nargs`` nor ``nargs - 1`` positional arguments are
        accepted, or ``nargs`` is missing for an undeclared callable.
    """
    declared = declared_inplace(obj)
    if declared is not None:
        return declared
    if nargs is None:
        raise InPlaceInferenceError(
            f"{obj!r} does not declare an in-place convention and no argument "
            "count was given to infer one."
        )

    bounds = numargs(obj)
    if _accepts(bounds, nargs):
        return True
    if _accepts(bounds, nargs - 1):
        return False
    raise InPlaceInferenceError(
        f"{obj!r} must accept either {nargs} positional arguments (in-place "
        f"form) or {nargs - 1} (out-of-place form); its signature accepts "
        f"between {bounds[0]} and {bounds[1]}."
    )


def resolve_inplace(obj: Any, nargs: int, inplace: Optional[bool] = None) -> bool:
    """
    Decide the in-place flag for a problem constructor.

    An explicit ``inplace`` is returned as given. Otherwise arrays are in
    place, scalars are not, and anything else goes through :func:`isinplace`.
    """
    if inplace is not None:
        return bool(inplace)

    kind = classify(obj)
    if kind is ObjectKind.ARRAY:
        result = True
    elif kind is ObjectKind.SCALAR:
        result = False
    else:
        result = isinplace(obj, nargs)
    logger.debug("Resolved inplace=%s for %s object %r", result, kind.value, obj)
    return result


__all__ = [
    "ObjectKind",
    "DeclaresInPlace",
    "classify",
    "numargs",
    "declared_inplace",
    "isinplace",
    "resolve_inplace",
]
