"""Hyperplanes of the circle."""

from __future__ import annotations

from ._s1_point import S1Point


class CutAngle:
    """Oriented hyperplane of the circle, located at a single azimuth.

    Offsets are differences of normalized azimuths, so points with an
    azimuth in ``(cut, 2 pi)`` lie on the plus side of a positive facing
    cut and points in ``[0, cut)`` on its minus side.

    Parameters
    ----------
    point : S1Point or float
        Location of the cut; a float is taken as an azimuth in radians.
    positive_facing : bool, default=True
        If False, the plus and minus sides are exchanged.

    Raises
    ------
    ValueError
        If the location is NaN or infinite.

    Examples
    --------
    >>> cut = CutAngle(1.0)
    >>> cut.offset(S1Point(1.5))
    0.5
    >>> cut.reverse().offset(S1Point(1.5))
    -0.5
    """

    __slots__ = ("_point", "_positive_facing")

    def __init__(self, point, positive_facing: bool = True) -> None:
        if not isinstance(point, S1Point):
            point = S1Point(point)
        if point.is_nan() or point.is_infinite():
            raise ValueError(f"cut location must be finite, got {point!r}")
        self._point = point
        self._positive_facing = bool(positive_facing)

    @property
    def point(self) -> S1Point:
        return self._point

    @property
    def positive_facing(self) -> bool:
        return self._positive_facing

    @property
    def azimuth(self) -> float:
        return self._point.azimuth

    def offset(self, point: S1Point) -> float:
        """Signed azimuth difference between ``point`` and the cut."""
        difference = point.azimuth - self._point.azimuth
        return difference if self._positive_facing else -difference

    def reverse(self) -> CutAngle:
        return CutAngle(self._point, not self._positive_facing)

    def __repr__(self) -> str:
        return (
            f"CutAngle(azimuth={self.azimuth!r}, "
            f"positive_facing={self._positive_facing})"
        )
