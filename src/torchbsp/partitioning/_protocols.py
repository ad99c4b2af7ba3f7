"""Capability contracts consumed by the traversal engine."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Point(Protocol):
    """A point in some space.

    Concrete types (Euclidean vectors, points on the circle, ...) share no
    state, only this behavior.

    Attributes
    ----------
    dimension : int
        Number of dimensions of the space. Fixed per concrete type.
    """

    @property
    def dimension(self) -> int: ...

    def is_nan(self) -> bool: ...

    def is_infinite(self) -> bool:
        """Return True if any coordinate is infinite and none is NaN."""
        ...

    def distance(self, other) -> float: ...


@runtime_checkable
class Hyperplane(Protocol):
    """A hyperplane splitting a space into a minus and a plus side."""

    def offset(self, point) -> float:
        """Signed offset of ``point``.

        Positive on the plus side, negative on the minus side and zero on
        the hyperplane itself.
        """
        ...
