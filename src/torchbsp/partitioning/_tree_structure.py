"""Read-only tree statistics and a flattened tensor view of tree shape."""

from __future__ import annotations

from typing import Any, Dict, List

import torch
from tensordict import tensorclass
from torch import Tensor

from ._traverse import traverse
from ._visit_order import VisitResult
from ._visitor import Visitor


@tensorclass
class TreeStructure:
    """Shape of a BSP tree as flat index tensors.

    Nodes are numbered in pre-order, minus subtree before plus subtree,
    so index 0 is the root and every parent precedes its children.

    Attributes
    ----------
    minus : Tensor
        Index of the minus child (-1 for leaves), shape (n_nodes,).
    plus : Tensor
        Index of the plus child (-1 for leaves), shape (n_nodes,).
    parent : Tensor
        Index of the parent (-1 for the root), shape (n_nodes,).
    node_depth : Tensor
        Edges between each node and the root, shape (n_nodes,).
    leaf_mask : Tensor
        Leaf mask, shape (n_nodes,).
    """

    minus: Tensor
    plus: Tensor
    parent: Tensor
    node_depth: Tensor
    leaf_mask: Tensor

    @property
    def num_nodes(self) -> int:
        return self.minus.shape[-1]

    @property
    def height(self) -> int:
        return int(self.node_depth.max())


class _Collector(Visitor):
    """Records nodes in the default visit order along with their depth."""

    def __init__(self, root: Any) -> None:
        self.nodes: List[Any] = []
        self.depth: Dict[int, int] = {id(root): 0}

    def visit(self, node) -> VisitResult:
        depth = self.depth[id(node)]
        if node.cut is not None:
            self.depth[id(node.minus)] = depth + 1
            self.depth[id(node.plus)] = depth + 1
        self.nodes.append(node)
        return VisitResult.CONTINUE


def node_count(root) -> int:
    """Number of nodes, leaves and internal, in the subtree at ``root``."""
    count = 0

    def _count(node) -> VisitResult:
        nonlocal count
        count += 1
        return VisitResult.CONTINUE

    traverse(root, _count)
    return count


def tree_height(root) -> int:
    """Longest path, in edges, from ``root`` down to a leaf.

    A single leaf has height 0.
    """
    collector = _Collector(root)
    traverse(root, collector)
    return max(collector.depth.values())


def tree_structure(root) -> TreeStructure:
    """Flatten the subtree at ``root`` into index tensors.

    Parameters
    ----------
    root : Node
        Root of the tree or subtree to flatten.

    Returns
    -------
    TreeStructure
        Batch size ``[n_nodes]``; all index tensors are int64.

    Examples
    --------
    >>> from torchbsp.euclidean import Hyperplane
    >>> from torchbsp.partitioning import Node
    >>> root = Node(
    ...     cut=Hyperplane.from_location(0.0),
    ...     minus=Node(classification="A"),
    ...     plus=Node(classification="B"),
    ... )
    >>> structure = tree_structure(root)
    >>> structure.minus
    tensor([ 1, -1, -1])
    >>> structure.parent
    tensor([-1,  0,  0])
    """
    collector = _Collector(root)
    traverse(root, collector)

    nodes = collector.nodes
    n = len(nodes)
    index = {id(node): i for i, node in enumerate(nodes)}

    minus = [-1] * n
    plus = [-1] * n
    parent = [-1] * n
    node_depth = [collector.depth[id(node)] for node in nodes]
    leaf_mask = [node.cut is None for node in nodes]

    for i, node in enumerate(nodes):
        if node.cut is not None:
            m = index[id(node.minus)]
            p = index[id(node.plus)]
            minus[i] = m
            plus[i] = p
            parent[m] = i
            parent[p] = i

    return TreeStructure(
        minus=torch.tensor(minus, dtype=torch.int64),
        plus=torch.tensor(plus, dtype=torch.int64),
        parent=torch.tensor(parent, dtype=torch.int64),
        node_depth=torch.tensor(node_depth, dtype=torch.int64),
        leaf_mask=torch.tensor(leaf_mask, dtype=torch.bool),
        batch_size=[n],
    )
