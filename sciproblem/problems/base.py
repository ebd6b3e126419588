"""Behaviour shared by every problem record."""

from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, ClassVar

from sciproblem.core.options import SolverOptions


class AbstractProblem:
    """
    Mixin for the frozen problem dataclasses.

    Subclasses set ``_object_field`` to the name of the field holding the
    mathematical object (``"A"`` or ``"f"``), and carry a resolved boolean
    ``inplace`` plus typed ``options``.
    """

    _object_field: ClassVar[str]
    inplace: bool
    options: SolverOptions

    @property
    def isinplace(self) -> bool:
        return self.inplace

    def solver_kwargs(self) -> dict[str, Any]:
        """Return the options a solver should receive for this problem."""
        return self.options.as_dict()

    def remake(self, **changes: Any) -> Any:
        """
        Return a new problem with ``changes`` applied.

        The new record goes through the same validation as a fresh one. When
        the mathematical object is replaced and no ``inplace`` is given, the
        flag is inferred again for the new object.
        """
        init_names = {f.name for f in fields(self) if f.init}  # type: ignore[arg-type]
        if (
            self._object_field in changes
            and "inplace" in init_names
            and "inplace" not in changes
        ):
            changes["inplace"] = None
        return replace(self, **changes)  # type: ignore[type-var]


__all__ = ["AbstractProblem"]
