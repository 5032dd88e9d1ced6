from __future__ import annotations

import random

from src.api import simulated as sim
from src.api.weather_assembler import assemble_weather_record


def _record(temp=20, humidity=50, wind_mps=5, pressure=1013):
    return assemble_weather_record(
        {
            "current": {
                "temperature_2m": temp,
                "relative_humidity_2m": humidity,
                "wind_speed_10m": wind_mps,
                "surface_pressure": pressure,
            }
        },
        0,
        0,
    )


def test_random_trend_source_picks_from_fixed_sets():
    source = sim.RandomTrendSource(random.Random(1))
    for _ in range(50):
        assert source.trend() in sim.TRENDS
        assert source.recent_change() in sim.RECENT_CHANGES


def test_random_trend_source_is_seedable():
    a = sim.RandomTrendSource(random.Random(42))
    b = sim.RandomTrendSource(random.Random(42))
    assert [a.trend() for _ in range(10)] == [b.trend() for _ in range(10)]


def test_module_helpers_accept_injected_source():
    class Fixed:
        def trend(self):
            return "Stable"

        def recent_change(self):
            return "No change"

    assert sim.get_trend(Fixed()) == "Stable"
    assert sim.get_recent_change(Fixed()) == "No change"
    assert sim.get_trend() in sim.TRENDS


def test_daily_trend_shape_and_bounds():
    df = sim.simulate_daily_trend(_record(temp=20, humidity=50), random.Random(0))

    assert list(df.columns) == ["time", "temperature", "humidity", "feels_like"]
    assert len(df) == 24
    assert df["time"].iloc[0] == "00:00"
    assert df["time"].iloc[23] == "23:00"
    assert df["temperature"].between(14, 26).all()
    assert df["humidity"].between(37, 63).all()


def test_wind_rose_never_negative():
    df = sim.simulate_wind_rose(_record(wind_mps=0), random.Random(3))

    assert list(df["direction"]) == list(sim.WIND_ROSE_DIRECTIONS)
    assert (df["speed"] >= 0).all()
    assert (df["speed"] <= 5).all()


def test_pressure_trend_follows_base():
    df = sim.simulate_pressure_trend(_record(pressure=1000), random.Random(5))

    assert len(df) == 12
    assert df["time"].iloc[1] == "02:00"
    assert df["tendency"].iloc[0] == 1000
    assert df["pressure"].between(990, 1010).all()
