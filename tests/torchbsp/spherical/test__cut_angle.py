import math

import pytest

from torchbsp.spherical import CutAngle, S1Point


class TestCutAngle:
    """Tests for CutAngle."""

    def test_from_float(self):
        cut = CutAngle(-math.pi / 2)
        assert cut.azimuth == pytest.approx(1.5 * math.pi)
        assert cut.positive_facing

    @pytest.mark.parametrize(
        "azimuth, expected",
        [
            (1.5, 0.5),
            (0.5, -0.5),
            (1.0, 0.0),
            (2.0 * math.pi + 1.5, 0.5),
        ],
    )
    def test_offset(self, azimuth, expected):
        cut = CutAngle(1.0)
        assert cut.offset(S1Point(azimuth)) == pytest.approx(expected)

    def test_negative_facing(self):
        cut = CutAngle(S1Point(1.0), positive_facing=False)
        assert cut.offset(S1Point(1.5)) == pytest.approx(-0.5)

    def test_reverse(self):
        cut = CutAngle(1.0)
        reversed_cut = cut.reverse()

        assert not reversed_cut.positive_facing
        assert reversed_cut.point == cut.point
        assert reversed_cut.offset(S1Point(3.0)) == -cut.offset(S1Point(3.0))

    @pytest.mark.parametrize("azimuth", [math.nan, math.inf])
    def test_non_finite_rejected(self, azimuth):
        with pytest.raises(ValueError, match="finite"):
            CutAngle(azimuth)
