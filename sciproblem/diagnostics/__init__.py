"""Diagnostics and debugging utilities for sciproblem."""

from .core import (
    check_bounds_shapes,
    check_constraint_bounds,
    check_linear_shapes,
    shape_of,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    reload_from_environment,
    set_debug_enabled,
)

__all__ = [
    "shape_of",
    "check_linear_shapes",
    "check_bounds_shapes",
    "check_constraint_bounds",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "reload_from_environment",
]
