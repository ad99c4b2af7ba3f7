import math

import pytest
import torch
import torch.testing

from torchbsp.euclidean import Vector
from torchbsp.partitioning import Point


class TestVectorConstruction:
    """Tests for Vector construction."""

    def test_of(self):
        v = Vector.of(1.0, 2.0, 3.0)
        assert v.dimension == 3
        torch.testing.assert_close(
            v.coordinates, torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)
        )

    def test_from_tensor_is_copied(self):
        """Later changes to the input do not affect the vector."""
        coordinates = torch.tensor([1.0, 2.0])
        v = Vector(coordinates)
        coordinates[0] = 10.0
        v.coordinates[1] = 20.0

        assert v == Vector.of(1.0, 2.0)
        assert v.coordinates.dtype == torch.float64

    def test_rejects_2d(self):
        with pytest.raises(ValueError, match="1D"):
            Vector(torch.zeros(2, 2))

    def test_rejects_empty(self):
        with pytest.raises(ValueError, match="empty"):
            Vector([])

    def test_satisfies_point_protocol(self):
        assert isinstance(Vector.of(0.0), Point)


class TestVectorPredicates:
    """Tests for NaN and infinity predicates."""

    def test_finite(self):
        v = Vector.of(1.0, -2.0)
        assert not v.is_nan()
        assert not v.is_infinite()

    def test_nan(self):
        v = Vector.of(1.0, math.nan)
        assert v.is_nan()
        assert not v.is_infinite()

    def test_infinite(self):
        assert Vector.of(math.inf, 0.0).is_infinite()
        assert Vector.of(-math.inf).is_infinite()

    def test_nan_wins_over_infinite(self):
        v = Vector.of(math.inf, math.nan)
        assert v.is_nan()
        assert not v.is_infinite()


class TestVectorDistance:
    """Tests for Vector.distance."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ((0.0,), (-3.0,), 3.0),
            ((0.0, 0.0), (3.0, 4.0), 5.0),
            ((1.0, 2.0, 3.0), (1.0, 2.0, 3.0), 0.0),
            ((1.0, 1.0, 1.0, 1.0), (0.0, 0.0, 0.0, 0.0), 2.0),
        ],
    )
    def test_values(self, a, b, expected):
        assert Vector.of(*a).distance(Vector.of(*b)) == pytest.approx(expected)

    def test_symmetric(self):
        a = Vector.of(1.0, -5.0, 2.5)
        b = Vector.of(-4.0, 0.5, 7.0)
        assert a.distance(b) == b.distance(a)

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError, match="dimension"):
            Vector.of(0.0).distance(Vector.of(0.0, 0.0))


class TestVectorEquality:
    """Tests for equality and hashing."""

    def test_equal(self):
        assert Vector.of(1.0, 2.0) == Vector.of(1.0, 2.0)
        assert hash(Vector.of(1.0, 2.0)) == hash(Vector.of(1.0, 2.0))

    def test_not_equal(self):
        assert Vector.of(1.0, 2.0) != Vector.of(2.0, 1.0)
        assert Vector.of(1.0) != Vector.of(1.0, 0.0)
        assert Vector.of(1.0) != 1.0

    def test_all_nan_vectors_equal(self):
        a = Vector.of(math.nan, 0.0)
        b = Vector.of(1.0, math.nan)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Vector.of(1.0, 0.0)

    def test_repr(self):
        assert repr(Vector.of(1.0, 2.5)) == "Vector(1.0, 2.5)"
