"""Partitioning module exceptions."""


class PartitioningError(Exception):
    """Base exception for BSP tree operations."""

    pass


class InvalidTreeError(PartitioningError):
    """Tree structure is malformed (missing child, cycle, shared node)."""

    pass


class DepthLimitExceededError(InvalidTreeError):
    """Traversal reached a node deeper than the requested maximum depth."""

    pass
