"""Binary space partitioning tree traversal.

This module provides a read-only traversal engine for BSP trees that is
independent of the geometry being partitioned:
- Visitor-selected visit orders per internal node, with subtree skipping
- Early termination that halts the whole walk
- Closest-first and farthest-first orders derived from a target point
- Iterative (default) and recursive drivers with identical visit sequences

Any point type with ``dimension``, ``is_nan()``, ``is_infinite()`` and
``distance()`` and any hyperplane type with a signed ``offset(point)``
can be used; see :mod:`torchbsp.euclidean` and :mod:`torchbsp.spherical`.
"""

from ._exceptions import (
    DepthLimitExceededError,
    InvalidTreeError,
    PartitioningError,
)
from ._node import Node, Tree
from ._protocols import Hyperplane, Point
from ._traverse import traverse
from ._tree_structure import (
    TreeStructure,
    node_count,
    tree_height,
    tree_structure,
)
from ._visit_order import VisitOrder, VisitResult
from ._visitor import (
    TargetPointVisitor,
    Visitor,
    closest_first_order,
    closest_first_visitor,
    farthest_first_order,
    farthest_first_visitor,
)

__all__ = [
    "DepthLimitExceededError",
    "Hyperplane",
    "InvalidTreeError",
    "Node",
    "PartitioningError",
    "Point",
    "TargetPointVisitor",
    "Tree",
    "TreeStructure",
    "VisitOrder",
    "VisitResult",
    "Visitor",
    "closest_first_order",
    "closest_first_visitor",
    "farthest_first_order",
    "farthest_first_visitor",
    "node_count",
    "traverse",
    "tree_height",
    "tree_structure",
]
