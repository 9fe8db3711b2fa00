"""Personalised perception model derived from a comfort profile."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from weatherfit.profile.comfort_profile import (
    ComfortProfile,
    Element,
    Priority,
    ReactionLevel,
)
from weatherfit.weather.observation import WeatherObservation

logger = logging.getLogger(__name__)

WIND_CHILL_MAX_TEMPERATURE = 10.0
WIND_CHILL_MIN_WIND = 1.34
HEAT_INDEX_MIN_TEMPERATURE = 27.0
HEAT_INDEX_MIN_HUMIDITY = 40.0

SENSITIVE_WEIGHT = 70
COLD_SENSITIVE_COMFORT = 22
HEAT_SENSITIVE_COMFORT = 16
HIGH_SENSITIVITY_SIGNALS = 3

# (lower humidity bound, correction in °C), checked top-down.
HUMIDITY_CORRECTION_BANDS: tuple[tuple[float, float], ...] = (
    (85.0, 3.0),
    (75.0, 2.0),
    (65.0, 1.0),
    (40.0, 0.0),
    (30.0, -0.5),
)
DRY_AIR_CORRECTION = -1.0

REACTION_MULTIPLIERS = {
    ReactionLevel.HIGH: 1.5,
    ReactionLevel.MEDIUM: 1.0,
    ReactionLevel.LOW: 0.5,
}


def wind_chill(temperature: float, wind_speed: float) -> float:
    factor = wind_speed**0.16
    return 13.12 + 0.6215 * temperature - 11.37 * factor + 0.3965 * temperature * factor


def heat_index(temperature: float, humidity: float) -> float:
    """Rothfusz regression evaluated in °F and returned in °C."""

    tf = temperature * 9 / 5 + 32
    h = humidity
    hi = (
        -42.379
        + 2.04901523 * tf
        + 10.14333127 * h
        - 0.22475541 * tf * h
        - 0.00683783 * tf * tf
        - 0.05481717 * h * h
        + 0.00122874 * tf * tf * h
        + 0.00085282 * tf * h * h
        - 0.00000199 * tf * tf * h * h
    )
    return (hi - 32) * 5 / 9


@dataclass(frozen=True, slots=True)
class ComfortModel:
    """Answers perception questions for one user's calibration state."""

    profile: ComfortProfile

    # ---- feels-like temperature ----

    def humidity_correction(self, humidity: float) -> float:
        base = DRY_AIR_CORRECTION
        for lower_bound, correction in HUMIDITY_CORRECTION_BANDS:
            if humidity >= lower_bound:
                base = correction
                break
        multiplier = REACTION_MULTIPLIERS.get(self.profile.humidity_reaction, 1.0)
        return base * multiplier

    def feels_like(self, temperature: float, wind_speed: float, humidity: float) -> float:
        """Return the personalised perceived temperature in °C."""

        if temperature <= WIND_CHILL_MAX_TEMPERATURE and wind_speed >= WIND_CHILL_MIN_WIND:
            perceived = wind_chill(temperature, wind_speed)
        elif temperature >= HEAT_INDEX_MIN_TEMPERATURE and humidity >= HEAT_INDEX_MIN_HUMIDITY:
            perceived = heat_index(temperature, humidity)
        else:
            perceived = temperature

        result = perceived + self.humidity_correction(humidity) + self.profile.personal_temp_correction
        logger.debug(
            "feels-like %.2f (actual=%.1f, wind=%.1f, humidity=%.0f)",
            result,
            temperature,
            wind_speed,
            humidity,
        )
        return result

    def feels_like_for(self, observation: WeatherObservation) -> float:
        return self.feels_like(observation.temperature, observation.wind_speed, observation.humidity)

    # ---- sensitivity predicates ----

    def weight(self, element: Element | str) -> int:
        return self.profile.weights.get(element)

    @property
    def cold_sensitive(self) -> bool:
        return (
            self.profile.comfort_temperature >= COLD_SENSITIVE_COMFORT
            or self.profile.is_priority(Priority.COLD)
        )

    @property
    def heat_sensitive(self) -> bool:
        return (
            self.profile.comfort_temperature <= HEAT_SENSITIVE_COMFORT
            or self.profile.is_priority(Priority.HEAT)
        )

    @property
    def humidity_sensitive(self) -> bool:
        return (
            self.profile.is_priority(Priority.HUMIDITY)
            or self.profile.humidity_reaction is ReactionLevel.HIGH
            or self.weight(Element.HUMIDITY) >= SENSITIVE_WEIGHT
        )

    @property
    def wind_sensitive(self) -> bool:
        return self.profile.is_priority(Priority.WIND) or self.weight(Element.WIND) >= SENSITIVE_WEIGHT

    @property
    def uv_sensitive(self) -> bool:
        return (
            self.profile.is_priority(Priority.UV)
            or self.profile.skin_reaction is ReactionLevel.HIGH
            or self.weight(Element.UV) >= SENSITIVE_WEIGHT
        )

    @property
    def air_quality_sensitive(self) -> bool:
        return (
            self.profile.is_priority(Priority.POLLUTION)
            or self.weight(Element.AIR_QUALITY) >= SENSITIVE_WEIGHT
        )

    @property
    def high_sensitivity(self) -> bool:
        signals = (
            self.profile.skin_reaction is ReactionLevel.HIGH,
            self.profile.humidity_reaction is ReactionLevel.HIGH,
            self.weight(Element.TEMPERATURE) >= SENSITIVE_WEIGHT,
            self.weight(Element.HUMIDITY) >= SENSITIVE_WEIGHT,
            self.weight(Element.UV) >= SENSITIVE_WEIGHT,
        )
        return sum(signals) >= HIGH_SENSITIVITY_SIGNALS

    def personality_traits(self) -> list[Priority]:
        """Sensitivities in display order, expressed as priority tags."""

        checks = (
            (self.cold_sensitive, Priority.COLD),
            (self.heat_sensitive, Priority.HEAT),
            (self.humidity_sensitive, Priority.HUMIDITY),
            (self.uv_sensitive, Priority.UV),
            (self.wind_sensitive, Priority.WIND),
            (self.air_quality_sensitive, Priority.POLLUTION),
        )
        return [trait for matched, trait in checks if matched]
