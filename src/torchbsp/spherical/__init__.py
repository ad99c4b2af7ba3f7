"""Points and hyperplanes of the circle (the 1-sphere)."""

from ._cut_angle import CutAngle
from ._s1_point import S1Point, normalize_azimuth

__all__ = [
    "CutAngle",
    "S1Point",
    "normalize_azimuth",
]
