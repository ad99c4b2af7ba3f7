"""Euclidean geometry exceptions."""


class GeometryError(Exception):
    """Base exception for geometry operations."""

    pass


class DegenerateInputError(GeometryError):
    """Input is degenerate (e.g., a zero-length hyperplane normal)."""

    pass
