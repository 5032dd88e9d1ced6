from __future__ import annotations

import pytest

from src.api.wind import COMPASS_POINTS, compass_to_degrees, degrees_to_compass, pressure_quality
from src.config import COLOR_PRESSURE_HIGH, COLOR_PRESSURE_LOW, COLOR_PRESSURE_NORMAL


@pytest.mark.parametrize(
    "degrees,label",
    [(0, "N"), (360, "N"), (11, "N"), (12, "NNE"), (11.25, "NNE"), (45, "NE"), (90, "E"),
     (180, "S"), (270, "W"), (348, "NNW"), (349, "N"), (720, "N")],
)
def test_degrees_to_compass(degrees, label):
    assert degrees_to_compass(degrees) == label


def test_compass_round_trip():
    for i, point in enumerate(COMPASS_POINTS):
        assert compass_to_degrees(point) == i * 22.5
        assert degrees_to_compass(compass_to_degrees(point)) == point


@pytest.mark.parametrize("label", ["", "X", "n", "230°"])
def test_unknown_label_points_north(label):
    assert compass_to_degrees(label) == 0.0


def test_pressure_quality_buckets():
    assert pressure_quality(1025) == ("High pressure - stable weather", COLOR_PRESSURE_HIGH)
    assert pressure_quality(1020)[1] == COLOR_PRESSURE_NORMAL
    assert pressure_quality(1000.5)[1] == COLOR_PRESSURE_NORMAL
    assert pressure_quality(1000)[1] == COLOR_PRESSURE_LOW
