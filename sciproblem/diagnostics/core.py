"""Shape and consistency checks run by problem constructors in debug mode."""

from __future__ import annotations

from typing import Any, Optional, Tuple

import numpy as np
import torch


def shape_of(x: Any) -> Optional[Tuple[int, ...]]:
    """
    Return the shape of an array-like value, or None if it has none.

    Scalars report ``()``. Objects exposing ``.shape`` (NumPy, PyTorch, SciPy
    sparse) report it as a tuple; lists and tuples are measured through NumPy.
    Operators and other opaque objects report None.
    """
    if x is None:
        return None
    shape = getattr(x, "shape", None)
    if shape is not None:
        return tuple(int(n) for n in shape)
    if isinstance(x, (list, tuple)) or np.isscalar(x):
        return tuple(np.shape(x))
    return None


def _as_numpy(x: Any) -> np.ndarray:
    if isinstance(x, torch.Tensor):
        return x.detach().cpu().numpy()
    return np.asarray(x)


def check_linear_shapes(A: Any, b: Any, u0: Any = None) -> None:
    """
    Check that ``A``, ``b`` and ``u0`` describe a consistent system ``A u = b``.

    Only two-dimensional ``A`` are checked; operators and scalars pass.

    Raises
    ------
    ValueError
        If the row count of ``A`` differs from the length of ``b``, or the
        column count differs from the length of ``u0``.
    """
    a_shape = shape_of(A)
    if a_shape is None or len(a_shape) != 2:
        return
    b_shape = shape_of(b)
    if b_shape and b_shape[0] != a_shape[0]:
        raise ValueError(
            f"A has {a_shape[0]} rows but b has leading dimension {b_shape[0]}"
        )
    u_shape = shape_of(u0)
    if u_shape and u_shape[0] != a_shape[1]:
        raise ValueError(
            f"A has {a_shape[1]} columns but u0 has leading dimension {u_shape[0]}"
        )


def check_bounds_shapes(lb: Any, ub: Any, u0: Any = None) -> None:
    """
    Check that box bounds match each other and, when given, the initial point.

    Raises
    ------
    ValueError
        If the shapes differ or any lower bound exceeds its upper bound.
    """
    if lb is None or ub is None:
        return
    lb_shape = shape_of(lb)
    ub_shape = shape_of(ub)
    if lb_shape != ub_shape:
        raise ValueError(f"lb has shape {lb_shape} but ub has shape {ub_shape}")
    u_shape = shape_of(u0)
    if u_shape is not None and lb_shape is not None and u_shape != lb_shape:
        raise ValueError(f"bounds have shape {lb_shape} but u0 has shape {u_shape}")
    if np.any(_as_numpy(lb) > _as_numpy(ub)):
        raise ValueError("lb must be element-wise less than or equal to ub")


def check_constraint_bounds(lcons: Any, ucons: Any) -> None:
    """
    Check that constraint bound vectors agree when both are supplied.

    Raises
    ------
    ValueError
        If the shapes differ or any lower bound exceeds its upper bound.
    """
    if lcons is None or ucons is None:
        return
    l_shape = shape_of(lcons)
    u_shape = shape_of(ucons)
    if l_shape != u_shape:
        raise ValueError(f"lcons has shape {l_shape} but ucons has shape {u_shape}")
    if np.any(_as_numpy(lcons) > _as_numpy(ucons)):
        raise ValueError("lcons must be element-wise less than or equal to ucons")
