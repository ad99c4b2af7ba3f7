"""Points in Euclidean space."""

from __future__ import annotations

from typing import Sequence, Union

import torch
from torch import Tensor


class Vector:
    """Immutable point in N-dimensional Euclidean space.

    Coordinates are stored as a 1-D float64 tensor. All vectors with at
    least one NaN coordinate compare equal to each other.

    Parameters
    ----------
    coordinates : Tensor or sequence of float
        Coordinates, shape (dimension,).

    Raises
    ------
    ValueError
        If ``coordinates`` is not 1-D or is empty.

    Examples
    --------
    >>> a = Vector.of(0.0, 0.0)
    >>> b = Vector.of(3.0, 4.0)
    >>> a.distance(b)
    5.0
    >>> Vector.of(float("nan"), 1.0) == Vector.of(2.0, float("nan"))
    True
    """

    __slots__ = ("_coordinates",)

    def __init__(self, coordinates: Union[Tensor, Sequence[float]]) -> None:
        coordinates = torch.as_tensor(coordinates, dtype=torch.float64)
        if coordinates.dim() != 1:
            raise ValueError(
                f"coordinates must be 1D, got {coordinates.dim()}D"
            )
        if coordinates.numel() == 0:
            raise ValueError("coordinates must not be empty")
        self._coordinates = coordinates.detach().clone()

    @classmethod
    def of(cls, *coordinates: float) -> Vector:
        return cls(list(coordinates))

    @property
    def coordinates(self) -> Tensor:
        """Copy of the coordinates, shape (dimension,)."""
        return self._coordinates.clone()

    @property
    def dimension(self) -> int:
        return self._coordinates.shape[0]

    def is_nan(self) -> bool:
        return bool(torch.isnan(self._coordinates).any())

    def is_infinite(self) -> bool:
        return not self.is_nan() and bool(
            torch.isinf(self._coordinates).any()
        )

    def distance(self, other: Vector) -> float:
        """Euclidean distance to ``other``."""
        if other.dimension != self.dimension:
            raise ValueError(
                f"dimension mismatch: {self.dimension} vs {other.dimension}"
            )
        return float(
            torch.linalg.vector_norm(self._coordinates - other._coordinates)
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vector):
            return NotImplemented
        if other.is_nan():
            return self.is_nan()
        return torch.equal(self._coordinates, other._coordinates)

    def __hash__(self) -> int:
        if self.is_nan():
            return 857
        return hash(tuple(self._coordinates.tolist()))

    def __repr__(self) -> str:
        values = ", ".join(repr(x) for x in self._coordinates.tolist())
        return f"Vector({values})"
