"""The empty-parameters singleton threaded through problems without ``p``."""

from __future__ import annotations

from typing import Any, NoReturn

from sciproblem.errors import NullParameterIndexError


class NullParameters:
    """
    Marker for "no parameters were supplied".

    There is exactly one instance, :data:`NULL_PARAMETERS`; calling the class
    returns it. Downstream code may probe for it with ``is`` or
    :func:`has_parameters`, but any indexed access or iteration raises
    :class:`~sciproblem.errors.NullParameterIndexError` instead of an opaque
    lookup failure.
    """

    _instance: NullParameters | None = None
    __slots__ = ()

    def __new__(cls) -> NullParameters:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __getitem__(self, key: Any) -> NoReturn:
        raise NullParameterIndexError(key)

    def __iter__(self) -> NoReturn:
        raise NullParameterIndexError()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NullParameters()"

    def __copy__(self) -> NullParameters:
        return self

    def __deepcopy__(self, memo: dict) -> NullParameters:
        return self

    def __reduce__(self) -> tuple:
        return (NullParameters, ())


NULL_PARAMETERS = NullParameters()


def has_parameters(p: Any) -> bool:
    """Return False when ``p`` is the empty-parameters singleton or ``None``."""
    return p is not None and p is not NULL_PARAMETERS


__all__ = ["NullParameters", "NULL_PARAMETERS", "has_parameters"]
