"""Hypothesis strategies for BSP tree testing."""

from ._bsp_trees import bsp_trees
from ._hyperplanes import hyperplanes
from ._vectors import vectors

__all__ = [
    "bsp_trees",
    "hyperplanes",
    "vectors",
]
