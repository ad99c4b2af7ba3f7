"""Visit orders and visit results."""

from __future__ import annotations

import enum
from typing import Tuple

_MIRROR = {"minus": "plus", "plus": "minus", "node": "node"}


class VisitOrder(enum.Enum):
    """Order in which a node and its two subtrees are visited.

    The member name lists the three steps in execution order. ``NONE``
    skips the node and every node below it.

    Examples
    --------
    >>> VisitOrder.PLUS_NODE_MINUS.steps
    ('plus', 'node', 'minus')
    >>> VisitOrder.PLUS_NODE_MINUS.mirrored()
    <VisitOrder.MINUS_NODE_PLUS: 'minus_node_plus'>
    """

    PLUS_MINUS_NODE = "plus_minus_node"
    PLUS_NODE_MINUS = "plus_node_minus"
    MINUS_PLUS_NODE = "minus_plus_node"
    MINUS_NODE_PLUS = "minus_node_plus"
    NODE_PLUS_MINUS = "node_plus_minus"
    NODE_MINUS_PLUS = "node_minus_plus"
    NONE = "none"

    @property
    def steps(self) -> Tuple[str, ...]:
        """Traversal steps in execution order, empty for ``NONE``."""
        if self is VisitOrder.NONE:
            return ()
        return tuple(self.value.split("_"))

    def mirrored(self) -> "VisitOrder":
        """Return the order with the minus and plus steps exchanged."""
        if self is VisitOrder.NONE:
            return self
        return VisitOrder("_".join(_MIRROR[step] for step in self.steps))


class VisitResult(enum.Enum):
    """Result of visiting a single node."""

    CONTINUE = "continue"
    TERMINATE = "terminate"
