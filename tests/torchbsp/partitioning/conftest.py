"""Test fixtures for partitioning tests."""

import pytest

from torchbsp.euclidean import Hyperplane, Vector
from torchbsp.partitioning import Node, VisitOrder, VisitResult, Visitor


class RecordingVisitor(Visitor):
    """Visitor that records the name of every node it visits.

    Node names are looked up in ``names`` (keyed by ``id``), falling back
    to the node classification.

    Parameters
    ----------
    names : dict, optional
        Mapping from ``id(node)`` to a display name.
    order : VisitOrder or callable, optional
        Fixed order for every internal node, or ``order(node)``.
    terminate_on : str, optional
        Name of the node whose visit returns ``TERMINATE``.
    """

    def __init__(self, names=None, order=None, terminate_on=None):
        self.names = names or {}
        self.order = order
        self.terminate_on = terminate_on
        self.visited = []
        self.ordered = []

    def name(self, node):
        return self.names.get(id(node), node.classification)

    def visit(self, node):
        name = self.name(node)
        self.visited.append(name)
        if self.terminate_on is not None and name == self.terminate_on:
            return VisitResult.TERMINATE
        return VisitResult.CONTINUE

    def visit_order(self, node):
        self.ordered.append(self.name(node))
        if self.order is None:
            return super().visit_order(node)
        if callable(self.order) and not isinstance(self.order, VisitOrder):
            return self.order(node)
        return self.order


def _interval(location):
    return Hyperplane.from_location(location)


@pytest.fixture
def three_node_tree():
    """Fixture: root cut at x=0 with minus leaf "A" and plus leaf "B"."""
    root = Node(
        cut=_interval(0.0),
        minus=Node(classification="A"),
        plus=Node(classification="B"),
    )
    return root, {id(root): "root"}


@pytest.fixture
def seven_node_tree():
    """Fixture: complete tree of height 2 over the real line.

    Structure (cuts at x=0, x=-1, x=1)::

                  root
               /        \\
            left         right
           /    \\       /     \\
         "A"    "B"   "C"     "D"
    """
    left = Node(
        cut=_interval(-1.0),
        minus=Node(classification="A"),
        plus=Node(classification="B"),
    )
    right = Node(
        cut=_interval(1.0),
        minus=Node(classification="C"),
        plus=Node(classification="D"),
    )
    root = Node(cut=_interval(0.0), minus=left, plus=right)
    names = {id(root): "root", id(left): "left", id(right): "right"}
    return root, names


@pytest.fixture
def recorder():
    """Fixture: factory for :class:`RecordingVisitor`."""
    return RecordingVisitor


@pytest.fixture
def target():
    """Fixture: factory for one dimensional target points."""
    return Vector.of
