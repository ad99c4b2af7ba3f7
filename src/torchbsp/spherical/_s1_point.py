"""Points on the circle."""

from __future__ import annotations

import math

import torch
from torch import Tensor

_TWO_PI = 2.0 * math.pi


def normalize_azimuth(azimuth: float) -> float:
    """Map a finite angle in radians into ``[0, 2 pi)``.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(azimuth):
        return azimuth
    normalized = azimuth - _TWO_PI * math.floor(azimuth / _TWO_PI)
    # floor rounding can land exactly on 2 pi for tiny negative inputs
    if normalized >= _TWO_PI:
        return 0.0
    return normalized


class S1Point:
    """Immutable point on the unit circle (the 1-sphere).

    Parameters
    ----------
    azimuth : float
        Angle in radians. Finite angles are normalized into ``[0, 2 pi)``.

    Examples
    --------
    >>> a = S1Point(0.1)
    >>> b = S1Point(2.0 * math.pi - 0.1)
    >>> round(a.distance(b), 12)
    0.2
    >>> S1Point(-math.pi / 2).azimuth == 1.5 * math.pi
    True
    """

    __slots__ = ("_azimuth", "_vector")

    def __init__(self, azimuth: float) -> None:
        self._azimuth = normalize_azimuth(float(azimuth))
        if math.isfinite(self._azimuth):
            self._vector = torch.tensor(
                [math.cos(self._azimuth), math.sin(self._azimuth)],
                dtype=torch.float64,
            )
        else:
            self._vector = torch.full((2,), math.nan, dtype=torch.float64)

    @property
    def azimuth(self) -> float:
        return self._azimuth

    @property
    def vector(self) -> Tensor:
        """Copy of the unit vector ``(cos, sin)``, shape (2,)."""
        return self._vector.clone()

    @property
    def dimension(self) -> int:
        return 1

    def is_nan(self) -> bool:
        return math.isnan(self._azimuth)

    def is_infinite(self) -> bool:
        return not self.is_nan() and math.isinf(self._azimuth)

    def distance(self, other: S1Point) -> float:
        """Angular separation from ``other``, in ``[0, pi]``."""
        cross = self._vector[0] * other._vector[1] - (
            self._vector[1] * other._vector[0]
        )
        dot = torch.dot(self._vector, other._vector)
        return float(torch.atan2(cross.abs(), dot))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, S1Point):
            return NotImplemented
        if other.is_nan():
            return self.is_nan()
        return self._azimuth == other._azimuth

    def __hash__(self) -> int:
        if self.is_nan():
            return 542
        return hash(self._azimuth)

    def __repr__(self) -> str:
        return f"S1Point({self._azimuth!r})"
