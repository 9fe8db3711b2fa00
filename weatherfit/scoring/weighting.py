"""Personal weighting, priority penalties and grading of comfort scores."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from weatherfit.profile.comfort_profile import ComfortProfile, Element, Priority
from weatherfit.scoring.element_scores import ElementScoreCalculator, ElementScores
from weatherfit.weather.observation import WeatherObservation

logger = logging.getLogger(__name__)

NEUTRAL_WEIGHT = 50.0

HEAT_THRESHOLD = 30.0
COLD_THRESHOLD = 5.0
HUMIDITY_THRESHOLD = 75.0
WIND_THRESHOLD = 6.0
UV_THRESHOLD = 8.0
PM25_THRESHOLD = 75.0
PM10_THRESHOLD = 150.0

PRIORITY_ELEMENTS = {
    Priority.HEAT: Element.TEMPERATURE,
    Priority.COLD: Element.TEMPERATURE,
    Priority.HUMIDITY: Element.HUMIDITY,
    Priority.WIND: Element.WIND,
    Priority.UV: Element.UV,
    Priority.POLLUTION: Element.AIR_QUALITY,
}


class WeatherGrade(str, Enum):
    """Total-score bands; each band's lower bound is inclusive."""

    PERFECT = "PERFECT"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"
    TERRIBLE = "TERRIBLE"

    @property
    def symbol(self) -> str:
        return _GRADE_SYMBOLS[self]

    @property
    def description(self) -> str:
        return _GRADE_DESCRIPTIONS[self]

    @classmethod
    def from_score(cls, score: float) -> "WeatherGrade":
        for lower_bound, grade in _GRADE_BANDS:
            if score >= lower_bound:
                return grade
        return cls.TERRIBLE


_GRADE_BANDS = (
    (90.0, WeatherGrade.PERFECT),
    (70.0, WeatherGrade.GOOD),
    (50.0, WeatherGrade.FAIR),
    (30.0, WeatherGrade.POOR),
)
_GRADE_SYMBOLS = {
    WeatherGrade.PERFECT: "😊",
    WeatherGrade.GOOD: "😌",
    WeatherGrade.FAIR: "😐",
    WeatherGrade.POOR: "😰",
    WeatherGrade.TERRIBLE: "😵",
}
_GRADE_DESCRIPTIONS = {
    WeatherGrade.PERFECT: "Perfect weather",
    WeatherGrade.GOOD: "Good weather",
    WeatherGrade.FAIR: "Average weather",
    WeatherGrade.POOR: "Disappointing weather",
    WeatherGrade.TERRIBLE: "Rough weather",
}


@dataclass(frozen=True, slots=True)
class ScoreResult:
    """Outcome of scoring one observation for one profile."""

    element_scores: ElementScores
    weighted_scores: ElementScores
    total_score: float
    grade: WeatherGrade
    applied_weights: Mapping[str, int]


def _priority_triggered(priority: Priority, observation: WeatherObservation) -> bool:
    if priority is Priority.HEAT:
        return observation.temperature >= HEAT_THRESHOLD
    if priority is Priority.COLD:
        return observation.temperature <= COLD_THRESHOLD
    if priority is Priority.HUMIDITY:
        return observation.humidity >= HUMIDITY_THRESHOLD
    if priority is Priority.WIND:
        return observation.wind_speed >= WIND_THRESHOLD
    if priority is Priority.UV:
        return observation.uv_index >= UV_THRESHOLD
    return observation.pm25 >= PM25_THRESHOLD or observation.pm10 >= PM10_THRESHOLD


class PersonalWeightingStage:
    """Turns base element scores into a personalised total score and grade."""

    def __init__(self, calculator: ElementScoreCalculator | None = None) -> None:
        self._calculator = calculator or ElementScoreCalculator()

    def apply_weights(self, base: ElementScores, profile: ComfortProfile) -> ElementScores:
        weights = profile.weights
        adjusted = {
            name: max(0.0, min(100.0, score * (weights.get(name) / NEUTRAL_WEIGHT)))
            for name, score in base.as_dict().items()
        }
        return ElementScores(**adjusted)

    def apply_priority_penalties(
        self,
        scores: ElementScores,
        profile: ComfortProfile,
        observation: WeatherObservation,
    ) -> ElementScores:
        penalised = scores
        for priority in profile.priorities:
            if not _priority_triggered(priority, observation):
                continue
            field_name = PRIORITY_ELEMENTS[priority].value
            factor = profile.priority_penalty(priority)
            current = getattr(penalised, field_name)
            penalised = replace(penalised, **{field_name: current * factor})
            logger.debug("priority %s triggered, %s x %.1f", priority.value, field_name, factor)
        return penalised

    def weighted_average(self, scores: ElementScores, profile: ComfortProfile) -> float:
        weights = profile.weights.as_dict()
        denominator = sum(weights.values())
        if denominator == 0:
            return 0.0
        numerator = sum(score * weights[name] for name, score in scores.as_dict().items())
        return max(0.0, min(100.0, numerator / denominator))

    def score(self, observation: WeatherObservation, profile: ComfortProfile) -> ScoreResult:
        """Run the full scoring pipeline for one observation and profile."""

        base = self._calculator.calculate(observation)
        weighted = self.apply_weights(base, profile)
        penalised = self.apply_priority_penalties(weighted, profile, observation)
        total = self.weighted_average(penalised, profile)
        return ScoreResult(
            element_scores=base,
            weighted_scores=penalised,
            total_score=total,
            grade=WeatherGrade.from_score(total),
            applied_weights=MappingProxyType(profile.weights.as_dict()),
        )
