"""Tests for unit conversion and compass labels."""

import pytest

from surfcast.conditions.units import (
    COMPASS_POINTS,
    compass_label,
    meters_to_feet,
    round_half_up,
    round_or_none,
)


class TestMetersToFeet:
    def test_none_passes_through(self):
        assert meters_to_feet(None) is None

    def test_zero(self):
        assert meters_to_feet(0) == 0.0

    def test_one_meter(self):
        assert meters_to_feet(1.0) == pytest.approx(3.3)

    def test_rounds_to_one_decimal(self):
        # 0.92 m = 3.0183 ft
        assert meters_to_feet(0.92) == pytest.approx(3.0)
        # 2.8 m = 9.1864 ft
        assert meters_to_feet(2.8) == pytest.approx(9.2)

    def test_round_half_up(self):
        assert round_half_up(12.5) == 13
        assert round_half_up(-0.5) == 0


class TestRoundOrNone:
    def test_none(self):
        assert round_or_none(None) is None

    def test_half_up(self):
        assert round_or_none(12.5) == 13
        assert round_or_none(4.5) == 5

    def test_down(self):
        assert round_or_none(12.4) == 12


class TestCompassLabel:
    def test_none(self):
        assert compass_label(None) is None

    @pytest.mark.parametrize(
        "degrees,label",
        [
            (0, "N"),
            (22.5, "NNE"),
            (45, "NE"),
            (90, "E"),
            (135, "SE"),
            (180, "S"),
            (225, "SW"),
            (270, "W"),
            (315, "NW"),
            (337.5, "NNW"),
        ],
    )
    def test_cardinal_and_intercardinal(self, degrees, label):
        assert compass_label(degrees) == label

    def test_bucket_centered_on_bearing(self):
        assert compass_label(11.2) == "N"
        assert compass_label(348.8) == "N"
        assert compass_label(33.7) == "NNE"

    def test_exact_half_bucket_rounds_clockwise(self):
        assert compass_label(11.25) == "NNE"
        assert compass_label(348.75) == "N"

    def test_wraps_at_360(self):
        assert compass_label(360) == "N"
        assert compass_label(359.9) == "N"

    def test_periodic(self):
        for d in range(0, 360, 7):
            assert compass_label(d) == compass_label(d + 360)

    def test_always_one_of_sixteen(self):
        for tenth in range(0, 3600):
            assert compass_label(tenth / 10) in COMPASS_POINTS
