"""BSP tree nodes and the tree handle."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Optional

from ._exceptions import InvalidTreeError
from ._traverse import traverse

if TYPE_CHECKING:
    from ._protocols import Hyperplane
    from ._visit_order import VisitResult


class Node:
    """Vertex of a binary space partitioning tree.

    A node is internal if and only if it has a cut hyperplane, in which
    case it exclusively owns exactly two children: ``minus`` (the subtree
    on the negative side of ``cut``) and ``plus``. A leaf has neither cut
    nor children and carries an opaque ``classification`` describing its
    region.

    Nodes are immutable once built. Each node records a weak, non-owning
    reference to its parent, so a node can belong to at most one parent.

    Parameters
    ----------
    cut : Hyperplane, optional
        Cut hyperplane of an internal node.
    minus, plus : Node, optional
        Children of an internal node. Required together with ``cut``.
    classification : Any, optional
        Caller-defined region classification. Never inspected here.

    Raises
    ------
    InvalidTreeError
        If ``cut`` is given without both children, children are given
        without ``cut``, a child already has a parent, or a child is
        reused.

    Examples
    --------
    >>> from torchbsp.euclidean import Hyperplane
    >>> from torchbsp.partitioning import Node
    >>> root = Node(
    ...     cut=Hyperplane.from_location(0.0),
    ...     minus=Node(classification="inside"),
    ...     plus=Node(classification="outside"),
    ... )
    >>> root.minus.classification
    'inside'
    >>> root.plus.depth
    1
    """

    __slots__ = (
        "_cut",
        "_minus",
        "_plus",
        "_classification",
        "_parent",
        "__weakref__",
    )

    def __init__(
        self,
        *,
        cut: Optional[Hyperplane] = None,
        minus: Optional[Node] = None,
        plus: Optional[Node] = None,
        classification: Any = None,
    ) -> None:
        if cut is None:
            if minus is not None or plus is not None:
                raise InvalidTreeError("leaf nodes cannot have children")
        else:
            if minus is None or plus is None:
                raise InvalidTreeError(
                    "internal nodes require both a minus and a plus child"
                )
            if minus is plus:
                raise InvalidTreeError(
                    "minus and plus children must be distinct nodes"
                )
            for child in (minus, plus):
                if child.parent is not None:
                    raise InvalidTreeError(
                        f"{child!r} already belongs to another parent"
                    )

        self._cut = cut
        self._minus = minus
        self._plus = plus
        self._classification = classification
        self._parent = None

        if cut is not None:
            minus._parent = weakref.ref(self)
            plus._parent = weakref.ref(self)

    @property
    def cut(self) -> Optional[Hyperplane]:
        return self._cut

    @property
    def minus(self) -> Optional[Node]:
        return self._minus

    @property
    def plus(self) -> Optional[Node]:
        return self._plus

    @property
    def classification(self) -> Any:
        return self._classification

    @property
    def is_leaf(self) -> bool:
        return self._cut is None

    @property
    def is_internal(self) -> bool:
        return self._cut is not None

    @property
    def parent(self) -> Optional[Node]:
        """Parent node, or None for a root (or a collected parent)."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def depth(self) -> int:
        """Number of edges between this node and its root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"Node(classification={self._classification!r})"
        return f"Node(cut={self._cut!r})"


class Tree:
    """Handle over the root node of a BSP tree.

    A tree is treated as immutable once built; any number of threads may
    traverse it at the same time.

    Parameters
    ----------
    root : Node
        Root node. Must not already be the child of another node.

    Raises
    ------
    InvalidTreeError
        If ``root`` has a parent.
    """

    __slots__ = ("_root",)

    def __init__(self, root: Node) -> None:
        if root.parent is not None:
            raise InvalidTreeError(
                "root node already belongs to another parent"
            )
        self._root = root

    @property
    def root(self) -> Node:
        return self._root

    def accept(self, visitor, **kwargs) -> VisitResult:
        """Traverse the tree from its root.

        Keyword arguments are forwarded to :func:`traverse`.
        """
        return traverse(self._root, visitor, **kwargs)

    def __repr__(self) -> str:
        return f"Tree(root={self._root!r})"
