"""torchbsp: binary space partitioning tree traversal for PyTorch."""

from . import (
    euclidean,
    partitioning,
    spherical,
)

__all__ = [
    "euclidean",
    "partitioning",
    "spherical",
]

__version__ = "0.1.0"
