"""Tests for weather observation validation."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from weatherfit.common.errors import InvalidObservation
from weatherfit.weather.observation import WeatherObservation


def test_optional_readings_default_to_zero() -> None:
    observation = WeatherObservation(temperature=-50, humidity=100, wind_speed=0)

    assert observation.uv_index == 0
    assert observation.pm25 == 0
    assert observation.rain_1h == 0
    assert not observation.has_rain


@pytest.mark.parametrize(
    "readings",
    [
        {"temperature": 61, "humidity": 50, "wind_speed": 1},
        {"temperature": -50.1, "humidity": 50, "wind_speed": 1},
        {"temperature": 20, "humidity": 100.5, "wind_speed": 1},
        {"temperature": 20, "humidity": -1, "wind_speed": 1},
        {"temperature": 20, "humidity": 50, "wind_speed": -0.1},
        {"temperature": 20, "humidity": 50, "wind_speed": 1, "pm10": -3},
        {"temperature": 20, "humidity": 50, "wind_speed": 1, "rain_1h": -0.5},
        {"temperature": math.nan, "humidity": 50, "wind_speed": 1},
        {"temperature": 20, "humidity": 50, "wind_speed": math.inf},
        {"temperature": True, "humidity": 50, "wind_speed": 1},
        {"temperature": "20", "humidity": 50, "wind_speed": 1},
        {"humidity": 50, "wind_speed": 1},
    ],
)
def test_invalid_readings_are_rejected(readings: dict[str, object]) -> None:
    with pytest.raises(InvalidObservation):
        WeatherObservation(**readings)


def test_observations_are_immutable() -> None:
    observation = WeatherObservation(temperature=20, humidity=50, wind_speed=1)

    with pytest.raises(ValidationError):
        observation.temperature = 25


def test_from_mapping_treats_unreported_readings_as_zero() -> None:
    payload = {"temperature": 12.5, "humidity": 70, "wind_speed": 3, "uv_index": None, "pm25": 40, "station": "AWS-108"}

    observation = WeatherObservation.from_mapping(payload)

    assert observation.uv_index == 0
    assert observation.pm25 == 40
    assert observation.pm10 == 0


def test_from_mapping_requires_core_readings() -> None:
    with pytest.raises(InvalidObservation):
        WeatherObservation.from_mapping({"temperature": None, "humidity": 70, "wind_speed": 3})
