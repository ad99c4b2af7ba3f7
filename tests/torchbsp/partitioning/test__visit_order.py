import pytest

from torchbsp.partitioning import VisitOrder, VisitResult


class TestVisitOrder:
    """Tests for VisitOrder."""

    def test_seven_members(self):
        assert len(VisitOrder) == 7

    @pytest.mark.parametrize(
        "order, steps",
        [
            (VisitOrder.PLUS_MINUS_NODE, ("plus", "minus", "node")),
            (VisitOrder.PLUS_NODE_MINUS, ("plus", "node", "minus")),
            (VisitOrder.MINUS_PLUS_NODE, ("minus", "plus", "node")),
            (VisitOrder.MINUS_NODE_PLUS, ("minus", "node", "plus")),
            (VisitOrder.NODE_PLUS_MINUS, ("node", "plus", "minus")),
            (VisitOrder.NODE_MINUS_PLUS, ("node", "minus", "plus")),
            (VisitOrder.NONE, ()),
        ],
    )
    def test_steps(self, order, steps):
        """Steps follow the member name."""
        assert order.steps == steps

    @pytest.mark.parametrize(
        "order, mirrored",
        [
            (VisitOrder.PLUS_MINUS_NODE, VisitOrder.MINUS_PLUS_NODE),
            (VisitOrder.PLUS_NODE_MINUS, VisitOrder.MINUS_NODE_PLUS),
            (VisitOrder.NODE_PLUS_MINUS, VisitOrder.NODE_MINUS_PLUS),
            (VisitOrder.NONE, VisitOrder.NONE),
        ],
    )
    def test_mirrored(self, order, mirrored):
        """Mirroring swaps minus and plus and is an involution."""
        assert order.mirrored() is mirrored
        assert mirrored.mirrored() is order


class TestVisitResult:
    """Tests for VisitResult."""

    def test_members(self):
        assert [r.name for r in VisitResult] == ["CONTINUE", "TERMINATE"]
