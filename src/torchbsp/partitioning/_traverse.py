"""Depth-first traversal of BSP trees."""

from __future__ import annotations

import warnings
from typing import Any, Callable, Literal, Optional, Set, Tuple

from ._exceptions import DepthLimitExceededError, InvalidTreeError
from ._visit_order import VisitOrder, VisitResult

_NODE = "node"
_SUBTREE = "subtree"


def _default_visit_order(node: Any) -> VisitOrder:
    return VisitOrder.NODE_MINUS_PLUS


def _visitor_functions(visitor: Any) -> Tuple[Callable, Callable]:
    """Split a visitor into its ``visit`` and ``visit_order`` callables."""
    visit = getattr(visitor, "visit", None)
    if visit is None:
        if not callable(visitor):
            raise TypeError(
                f"visitor must define visit() or be callable, got "
                f"{type(visitor).__name__}"
            )
        visit = visitor
    visit_order = getattr(visitor, "visit_order", None)
    if visit_order is None:
        visit_order = _default_visit_order
    return visit, visit_order


def _resolve_order(order: Any, stacklevel: int) -> VisitOrder:
    """Map a visit_order result to a VisitOrder, warning on bad values.

    ``stacklevel`` counts frames from this function up to the caller of
    :func:`traverse`.
    """
    if isinstance(order, VisitOrder):
        return order
    if order is not None:
        warnings.warn(
            f"visit_order returned {order!r}, which is not a VisitOrder; "
            f"skipping the subtree",
            RuntimeWarning,
            stacklevel=stacklevel,
        )
    return VisitOrder.NONE


def _enter(
    node: Any,
    depth: int,
    maximum_depth: Optional[int],
    seen: Set[int],
) -> bool:
    """Validate ``node`` on entry and return True if it is internal."""
    if node is None:
        raise InvalidTreeError("internal node is missing a child")
    if maximum_depth is not None and depth > maximum_depth:
        raise DepthLimitExceededError(
            f"node at depth {depth} exceeds maximum_depth={maximum_depth}"
        )
    key = id(node)
    if key in seen:
        raise InvalidTreeError(
            f"{node!r} reached twice; the tree contains a cycle or a "
            f"shared node"
        )
    seen.add(key)

    if node.cut is None:
        if node.minus is not None or node.plus is not None:
            raise InvalidTreeError(f"leaf {node!r} has children")
        return False
    return True


def _traverse_recursive(
    node: Any,
    visit: Callable,
    visit_order: Callable,
    depth: int,
    maximum_depth: Optional[int],
    seen: Set[int],
) -> VisitResult:
    if not _enter(node, depth, maximum_depth, seen):
        if visit(node) is VisitResult.TERMINATE:
            return VisitResult.TERMINATE
        return VisitResult.CONTINUE

    order = _resolve_order(visit_order(node), 4 + depth)
    for step in order.steps:
        if step == _NODE:
            result = visit(node)
        else:
            result = _traverse_recursive(
                getattr(node, step),
                visit,
                visit_order,
                depth + 1,
                maximum_depth,
                seen,
            )
        if result is VisitResult.TERMINATE:
            return VisitResult.TERMINATE
    return VisitResult.CONTINUE


def _traverse_iterative(
    root: Any,
    visit: Callable,
    visit_order: Callable,
    maximum_depth: Optional[int],
    seen: Set[int],
) -> VisitResult:
    # Pending steps, popped from the end; a subtree entry expands into
    # its node's steps pushed in reverse execution order.
    stack = [(_SUBTREE, root, 0)]
    while stack:
        kind, node, depth = stack.pop()

        if kind == _SUBTREE and _enter(node, depth, maximum_depth, seen):
            order = _resolve_order(visit_order(node), 4)
            for step in reversed(order.steps):
                if step == _NODE:
                    stack.append((_NODE, node, depth))
                else:
                    stack.append((_SUBTREE, getattr(node, step), depth + 1))
            continue

        if visit(node) is VisitResult.TERMINATE:
            return VisitResult.TERMINATE
    return VisitResult.CONTINUE


def traverse(
    root: Any,
    visitor: Any,
    *,
    method: Literal["iterative", "recursive"] = "iterative",
    maximum_depth: Optional[int] = None,
) -> VisitResult:
    r"""Walk a BSP tree depth-first, in the order chosen by a visitor.

    For every leaf reached, ``visitor.visit(leaf)`` is called. For every
    internal node reached, ``visitor.visit_order(node)`` chooses how to
    interleave ``visitor.visit(node)`` with the walks of the ``minus``
    and ``plus`` subtrees; :attr:`VisitOrder.NONE` skips the node and
    all of its descendants.

    As soon as any ``visit`` call returns :attr:`VisitResult.TERMINATE`
    the whole walk stops: no further node anywhere in the tree is
    visited and ``TERMINATE`` is returned.

    Parameters
    ----------
    root : Node
        Root of the tree or of any subtree.
    visitor : Visitor or callable
        Object with a ``visit(node)`` method and, optionally, a
        ``visit_order(node)`` method (default
        :attr:`VisitOrder.NODE_MINUS_PLUS`). A plain callable is used as
        ``visit`` with the default order.
    method : {"iterative", "recursive"}, default="iterative"
        ``"iterative"`` uses an explicit work-list and handles trees of
        any height. ``"recursive"`` recurses once per tree level and is
        bounded by the interpreter recursion limit. Both call the visitor
        in exactly the same sequence.
    maximum_depth : int, optional
        Largest node depth (edges from ``root``) allowed in the walk.

    Returns
    -------
    VisitResult
        ``TERMINATE`` if a visit requested termination, else ``CONTINUE``.

    Raises
    ------
    InvalidTreeError
        If ``root`` is None, an internal node lacks a child, a leaf has
        children, or a node is reached twice.
    DepthLimitExceededError
        If a node deeper than ``maximum_depth`` is reached.
    ValueError
        If ``method`` or ``maximum_depth`` is invalid.

    Notes
    -----
    Exceptions raised by the visitor propagate unchanged and end the
    walk. The tree is never modified, and all traversal state is local to
    the call, so concurrent traversals of one tree need no locking.

    A ``visit_order`` result that is ``None`` or not a
    :class:`VisitOrder` skips the subtree like ``NONE``; values other
    than ``None`` also emit a ``RuntimeWarning``.

    Examples
    --------
    >>> from torchbsp.euclidean import Hyperplane
    >>> from torchbsp.partitioning import Node, VisitResult, traverse
    >>> root = Node(
    ...     cut=Hyperplane.from_location(0.0),
    ...     minus=Node(classification="A"),
    ...     plus=Node(classification="B"),
    ... )
    >>> seen = []
    >>> def record(node):
    ...     seen.append(node.classification or "root")
    ...     return VisitResult.CONTINUE
    >>> traverse(root, record)
    <VisitResult.CONTINUE: 'continue'>
    >>> seen
    ['root', 'A', 'B']
    """
    if method not in ("iterative", "recursive"):
        raise ValueError(
            f"method must be 'iterative' or 'recursive', got {method!r}"
        )
    if maximum_depth is not None and maximum_depth < 0:
        raise ValueError(
            f"maximum_depth must be >= 0, got {maximum_depth}"
        )

    if root is None:
        raise InvalidTreeError("root must be a Node, got None")

    visit, visit_order = _visitor_functions(visitor)
    seen: Set[int] = set()

    if method == "recursive":
        return _traverse_recursive(
            root, visit, visit_order, 0, maximum_depth, seen
        )
    return _traverse_iterative(root, visit, visit_order, maximum_depth, seen)
