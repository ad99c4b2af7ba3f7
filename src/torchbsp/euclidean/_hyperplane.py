"""Oriented hyperplanes in Euclidean space."""

from __future__ import annotations

from typing import Sequence, Union

import torch
from torch import Tensor

from ._exceptions import DegenerateInputError
from ._vector import Vector


class Hyperplane:
    r"""Oriented hyperplane :math:`n \cdot x + d = 0` with unit normal.

    The plus side is the side the normal points to. In one dimension a
    hyperplane is an oriented point, in two a line, in three a plane.

    Parameters
    ----------
    normal : Tensor or sequence of float
        Normal direction, shape (dimension,). Normalized on construction.
    origin_offset : float, default=0.0
        Signed offset :math:`d` of the origin from the hyperplane.

    Raises
    ------
    DegenerateInputError
        If ``normal`` has zero or non-finite length.
    ValueError
        If ``normal`` is not a non-empty 1D sequence.

    Examples
    --------
    >>> plane = Hyperplane.from_point_and_normal(
    ...     Vector.of(0.0, 0.0, 1.0), [0.0, 0.0, 2.0]
    ... )
    >>> plane.offset(Vector.of(5.0, -3.0, 4.0))
    3.0
    >>> Hyperplane.from_location(2.0, positive_facing=False).offset(
    ...     Vector.of(5.0)
    ... )
    -3.0
    """

    __slots__ = ("_normal", "_origin_offset")

    def __init__(
        self,
        normal: Union[Tensor, Sequence[float]],
        origin_offset: float = 0.0,
    ) -> None:
        normal = Vector(normal)._coordinates
        norm = torch.linalg.vector_norm(normal)
        if not bool(torch.isfinite(norm)) or float(norm) == 0.0:
            raise DegenerateInputError(
                f"normal must have finite non-zero length, got {float(norm)}"
            )
        self._normal = normal / norm
        self._origin_offset = float(origin_offset)

    @classmethod
    def from_point_and_normal(
        cls, point: Vector, normal: Union[Tensor, Sequence[float]]
    ) -> Hyperplane:
        """Hyperplane through ``point`` with the given normal."""
        plane = cls(normal)
        plane._check_dimension(point)
        plane._origin_offset = -float(
            torch.dot(plane._normal, point._coordinates)
        )
        return plane

    @classmethod
    def from_location(
        cls, location: float, positive_facing: bool = True
    ) -> Hyperplane:
        """One dimensional hyperplane at ``location``.

        With ``positive_facing`` the plus side holds the values greater
        than ``location``.
        """
        return cls.from_point_and_normal(
            Vector.of(location), [1.0 if positive_facing else -1.0]
        )

    @property
    def normal(self) -> Tensor:
        """Copy of the unit normal, shape (dimension,)."""
        return self._normal.clone()

    @property
    def origin_offset(self) -> float:
        return self._origin_offset

    @property
    def dimension(self) -> int:
        return self._normal.shape[0]

    def _check_dimension(self, point: Vector) -> None:
        if point.dimension != self.dimension:
            raise ValueError(
                f"point has dimension {point.dimension}, hyperplane has "
                f"dimension {self.dimension}"
            )

    def offset(self, point: Vector) -> float:
        """Signed distance from the hyperplane to ``point``."""
        self._check_dimension(point)
        return (
            float(torch.dot(self._normal, point._coordinates))
            + self._origin_offset
        )

    def reverse(self) -> Hyperplane:
        """Same hyperplane with the plus and minus sides exchanged."""
        plane = Hyperplane.__new__(Hyperplane)
        plane._normal = -self._normal
        plane._origin_offset = -self._origin_offset
        return plane

    def __repr__(self) -> str:
        return (
            f"Hyperplane(normal={self._normal.tolist()}, "
            f"origin_offset={self._origin_offset})"
        )
