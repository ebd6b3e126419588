"""Capability markers describing how derivatives should be obtained."""

from __future__ import annotations


class AbstractADType:
    """
    Base class for differentiation capability markers.

    Markers carry no data. Two instances of the same marker class are equal
    and hash alike, so ``adtype == NoAD()`` is the idiomatic check.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NoAD(AbstractADType):
    """No automatic differentiation: derivatives come from the user or nowhere."""

    __slots__ = ()


class AutoFiniteDiff(AbstractADType):
    """Request derivatives by finite differences."""

    __slots__ = ()


class AutoTorch(AbstractADType):
    """Request derivatives through PyTorch autograd."""

    __slots__ = ()


__all__ = ["AbstractADType", "NoAD", "AutoFiniteDiff", "AutoTorch"]
