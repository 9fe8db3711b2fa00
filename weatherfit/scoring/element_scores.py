"""Per-element comfort subscores for a single weather observation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from weatherfit.weather.observation import WeatherObservation

OPTIMAL_TEMPERATURE = 22.0
TEMPERATURE_SIGMA = 8.0

HUMIDITY_OPTIMAL_MIN = 40.0
HUMIDITY_OPTIMAL_MAX = 60.0

WIND_OPTIMAL_MIN = 2.0
WIND_OPTIMAL_MAX = 3.0
WIND_STRONG = 6.0

PM25_RATIO = 0.7
PM10_RATIO = 0.3

# (inclusive upper bound, score)
UV_SCORES: tuple[tuple[float, float], ...] = ((2, 100.0), (5, 80.0), (7, 60.0), (10, 40.0))
PM25_SCORES: tuple[tuple[float, float], ...] = ((15, 100.0), (35, 80.0), (75, 60.0))
PM10_SCORES: tuple[tuple[float, float], ...] = ((30, 100.0), (80, 80.0), (150, 60.0))


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _stepped(value: float, table: tuple[tuple[float, float], ...], fallback: float) -> float:
    for upper, score in table:
        if value <= upper:
            return score
    return fallback


def temperature_score(temperature: float) -> float:
    deviation = (temperature - OPTIMAL_TEMPERATURE) ** 2
    return _clamp(100 * math.exp(-deviation / (2 * TEMPERATURE_SIGMA**2)))


def humidity_score(humidity: float) -> float:
    h = humidity
    if HUMIDITY_OPTIMAL_MIN <= h <= HUMIDITY_OPTIMAL_MAX:
        score = 100.0
    elif 30 <= h <= HUMIDITY_OPTIMAL_MIN or HUMIDITY_OPTIMAL_MAX <= h <= 70:
        distance = HUMIDITY_OPTIMAL_MIN - h if h < HUMIDITY_OPTIMAL_MIN else h - HUMIDITY_OPTIMAL_MAX
        score = 100 - distance * 3
    elif 20 <= h <= 30 or 70 <= h <= 80:
        distance = 30 - h if h < 30 else h - 70
        score = 70 - distance * 2
    else:
        score = max(0.0, 50 - abs(h - 50) * 2)
    return _clamp(score)


def wind_score(wind_speed: float) -> float:
    w = wind_speed
    if WIND_OPTIMAL_MIN <= w <= WIND_OPTIMAL_MAX:
        return 100.0
    if 1.0 <= w <= WIND_OPTIMAL_MIN or WIND_OPTIMAL_MAX <= w <= 4.0:
        return 85.0
    if 0.5 <= w <= 1.0 or 4.0 <= w <= WIND_STRONG:
        return 70.0
    if w < 0.5:
        return 60.0
    if WIND_STRONG <= w <= 10.0:
        return 50.0
    return 20.0


def uv_score(uv_index: float) -> float:
    return _stepped(uv_index, UV_SCORES, 20.0)


def air_quality_score(pm25: float, pm10: float) -> float:
    pm25_part = _stepped(pm25, PM25_SCORES, 30.0)
    pm10_part = _stepped(pm10, PM10_SCORES, 30.0)
    return _clamp(pm25_part * PM25_RATIO + pm10_part * PM10_RATIO)


@dataclass(frozen=True, slots=True)
class ElementScores:
    """Five comfort subscores in [0, 100]."""

    temperature: float
    humidity: float
    wind: float
    uv: float
    air_quality: float

    def as_dict(self) -> dict[str, float]:
        return {
            "temperature": self.temperature,
            "humidity": self.humidity,
            "wind": self.wind,
            "uv": self.uv,
            "air_quality": self.air_quality,
        }


class ElementScoreCalculator:
    """Converts an observation into independent per-element scores."""

    def calculate(self, observation: WeatherObservation) -> ElementScores:
        return ElementScores(
            temperature=temperature_score(observation.temperature),
            humidity=humidity_score(observation.humidity),
            wind=wind_score(observation.wind_speed),
            uv=uv_score(observation.uv_index),
            air_quality=air_quality_score(observation.pm25, observation.pm10),
        )
