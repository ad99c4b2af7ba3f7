import itertools

import hypothesis.strategies

from torchbsp.partitioning import Node

from ._hyperplanes import hyperplanes


@hypothesis.strategies.composite
def bsp_trees(
    draw: hypothesis.strategies.DrawFn,
    dimension: int = 3,
    maximum_depth: int = 5,
) -> Node:
    """Strategy for valid BSP trees with Euclidean cut hyperplanes.

    Leaves are classified with distinct integers in creation order;
    internal nodes have no classification.
    """
    labels = itertools.count()

    def build(depth: int) -> Node:
        split = depth < maximum_depth and draw(
            hypothesis.strategies.booleans()
        )
        if not split:
            return Node(classification=next(labels))
        cut = draw(hyperplanes(dimension))
        return Node(cut=cut, minus=build(depth + 1), plus=build(depth + 1))

    return build(0)
