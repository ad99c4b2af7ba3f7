"""Euclidean points and hyperplanes in any number of dimensions.

Coordinates are stored as float64 tensors. These types satisfy the
point and hyperplane contracts of :mod:`torchbsp.partitioning`.
"""

from ._exceptions import DegenerateInputError, GeometryError
from ._hyperplane import Hyperplane
from ._vector import Vector

__all__ = [
    "DegenerateInputError",
    "GeometryError",
    "Hyperplane",
    "Vector",
]
