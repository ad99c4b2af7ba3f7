"""Visitor base class and target point order strategies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ._visit_order import VisitOrder, VisitResult

OrderStrategy = Callable[[Any, Any], VisitOrder]


class Visitor:
    """Base class for BSP tree visitors.

    Subclasses implement :meth:`visit` and may override
    :meth:`visit_order`. Any object with the same methods, or a plain
    callable taking a node, can be passed to :func:`traverse` as well.
    """

    def visit(self, node) -> VisitResult:
        """Visit ``node``, leaf or internal.

        Return ``VisitResult.TERMINATE`` to stop the whole traversal.
        """
        raise NotImplementedError

    def visit_order(self, node) -> VisitOrder:
        """Choose the visit order for the internal ``node``.

        Called before ``node`` or its subtrees are visited; never called
        for leaves. Returning ``VisitOrder.NONE`` skips the node and all
        of its descendants.
        """
        return VisitOrder.NODE_MINUS_PLUS


def closest_first_order(cut, target) -> VisitOrder:
    """Visit the side of ``cut`` containing ``target`` first.

    Ties (``target`` on the hyperplane) and NaN offsets favor the minus
    side.
    """
    if cut.offset(target) > 0.0:
        return VisitOrder.PLUS_NODE_MINUS
    return VisitOrder.MINUS_NODE_PLUS


def farthest_first_order(cut, target) -> VisitOrder:
    """Visit the side of ``cut`` opposite ``target`` first.

    Ties (``target`` on the hyperplane) and NaN offsets favor the minus
    side.
    """
    if cut.offset(target) < 0.0:
        return VisitOrder.PLUS_NODE_MINUS
    return VisitOrder.MINUS_NODE_PLUS


@dataclass(frozen=True)
class TargetPointVisitor:
    """Visitor whose visit order is derived from a fixed target point.

    Attributes
    ----------
    target : Point
        Point the traversal is oriented around.
    strategy : callable
        ``strategy(cut, target) -> VisitOrder``, applied to the cut
        hyperplane of every internal node.
    callback : callable
        ``callback(node) -> VisitResult``, called for every visited node.
    """

    target: Any
    strategy: OrderStrategy
    callback: Callable[[Any], VisitResult]

    def visit(self, node) -> VisitResult:
        return self.callback(node)

    def visit_order(self, node) -> VisitOrder:
        return self.strategy(node.cut, self.target)


def closest_first_visitor(
    target, callback: Callable[[Any], VisitResult]
) -> TargetPointVisitor:
    """Create a visitor that reaches the regions nearest ``target`` first.

    At each internal node the subtree on the same side of the cut as
    ``target`` is visited, then the node, then the other subtree.

    Parameters
    ----------
    target : Point
        Target point of the traversal.
    callback : callable
        ``callback(node) -> VisitResult``.

    Returns
    -------
    TargetPointVisitor

    Examples
    --------
    >>> from torchbsp.euclidean import Hyperplane, Vector
    >>> from torchbsp.partitioning import Node, VisitResult, traverse
    >>> root = Node(
    ...     cut=Hyperplane.from_location(0.0),
    ...     minus=Node(classification="A"),
    ...     plus=Node(classification="B"),
    ... )
    >>> leaves = []
    >>> def first_leaf(node):
    ...     if node.is_leaf:
    ...         leaves.append(node.classification)
    ...         return VisitResult.TERMINATE
    ...     return VisitResult.CONTINUE
    >>> traverse(root, closest_first_visitor(Vector.of(1.0), first_leaf))
    <VisitResult.TERMINATE: 'terminate'>
    >>> leaves
    ['B']
    """
    return TargetPointVisitor(target, closest_first_order, callback)


def farthest_first_visitor(
    target, callback: Callable[[Any], VisitResult]
) -> TargetPointVisitor:
    """Create a visitor that reaches the regions farthest from ``target``.

    The mirror of :func:`closest_first_visitor`: the subtree on the
    opposite side of the cut from ``target`` is visited first.
    """
    return TargetPointVisitor(target, farthest_first_order, callback)
