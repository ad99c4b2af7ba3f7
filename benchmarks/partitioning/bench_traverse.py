"""Benchmarks for BSP tree traversal.

This module times the iterative and recursive traversal drivers on balanced
and degenerate trees, and closest-first queries that stop at the first leaf.
"""

from __future__ import annotations

import sys
import time
from typing import Any, Callable

import numpy as np
import torch

from torchbsp.euclidean import Hyperplane, Vector
from torchbsp.partitioning import (
    Node,
    VisitResult,
    closest_first_visitor,
    traverse,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics:
        - 'mean': Mean time in seconds
        - 'std': Standard deviation in seconds
        - 'min': Minimum time in seconds
        - 'max': Maximum time in seconds
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    times: dict[str, dict[str, float]],
) -> None:
    """Print benchmark comparison results for multiple methods."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_name = min(times.keys(), key=lambda k: times[k]["mean"])
    fastest_time = times[fastest_name]["mean"]

    for method_name, timing in times.items():
        slowdown = timing["mean"] / fastest_time
        if slowdown > 1.01:
            suffix = f" ({slowdown:.2f}x slower)"
        else:
            suffix = " (fastest)"
        print(
            f"  {method_name}: {format_time(timing['mean'])} "
            f"+/- {format_time(timing['std'])}{suffix}"
        )


def balanced_tree(height: int, dimension: int = 3, seed: int = 0) -> Node:
    """Complete tree of the given height with random cut hyperplanes."""
    generator = torch.Generator().manual_seed(seed)
    labels = iter(range(2**height))

    def build(depth: int) -> Node:
        if depth == height:
            return Node(classification=next(labels))
        normal = torch.randn(dimension, generator=generator)
        point = torch.randn(dimension, generator=generator)
        return Node(
            cut=Hyperplane.from_point_and_normal(Vector(point), normal),
            minus=build(depth + 1),
            plus=build(depth + 1),
        )

    return build(0)


def chain_tree(height: int) -> Node:
    """Degenerate tree whose plus children form a single path."""
    node = Node(classification=height)
    for i in range(height - 1, -1, -1):
        node = Node(
            cut=Hyperplane.from_location(float(i)),
            minus=Node(classification=-i - 1),
            plus=node,
        )
    return node


def _continue(node: Node) -> VisitResult:
    return VisitResult.CONTINUE


def _first_leaf(node: Node) -> VisitResult:
    if node.is_leaf:
        return VisitResult.TERMINATE
    return VisitResult.CONTINUE


class BenchTraverse:
    """Benchmarks for tree traversal."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        """Initialize benchmark runner.

        Parameters
        ----------
        warmup : int, optional
            Number of warmup iterations. Default is 3.
        iterations : int, optional
            Number of timed iterations. Default is 10.
        """
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        """Run benchmark with configured settings."""
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def run_full_traversal(self) -> None:
        """Visit every node of balanced trees with both drivers."""
        for height in [8, 12, 14]:
            root = balanced_tree(height)
            times = {
                method: self._bench(traverse, root, _continue, method=method)
                for method in ["iterative", "recursive"]
            }
            print_comparison(f"Full traversal, height={height}", times)

    def run_deep_chain(self) -> None:
        """Visit a chain shallower than the recursion limit."""
        height = sys.getrecursionlimit() // 2
        root = chain_tree(height)
        times = {
            method: self._bench(traverse, root, _continue, method=method)
            for method in ["iterative", "recursive"]
        }
        print_comparison(f"Chain traversal, height={height}", times)

    def run_closest_leaf(self) -> None:
        """Find the leaf containing a random target point."""
        root = balanced_tree(14)
        target = Vector(torch.randn(3))
        visitor = closest_first_visitor(target, _first_leaf)
        times = {
            method: self._bench(traverse, root, visitor, method=method)
            for method in ["iterative", "recursive"]
        }
        print_comparison("Closest-first leaf query, height=14", times)

    def run_all(self) -> None:
        self.run_full_traversal()
        self.run_deep_chain()
        self.run_closest_leaf()


if __name__ == "__main__":
    bench = BenchTraverse(warmup=3, iterations=10)
    bench.run_all()
