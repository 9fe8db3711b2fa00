"""Aggregate views over a user's feedback history."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from weatherfit.feedback.events import FeedbackEvent, FeedbackType
from weatherfit.feedback.learner import PreferenceLearner

MIN_EVENTS_FOR_TREND = 3
TREND_MARGIN = 0.1
INSUFFICIENT_DATA = "insufficient data"


class LearningTrend(str, Enum):
    """Direction of recommendation accuracy over the history."""

    IMPROVING = "IMPROVING"
    STABLE = "STABLE"
    DECLINING = "DECLINING"

    @property
    def description(self) -> str:
        return _TREND_DESCRIPTIONS[self]


_TREND_DESCRIPTIONS = {
    LearningTrend.IMPROVING: "Recommendations are getting more accurate",
    LearningTrend.STABLE: "Recommendation accuracy is steady",
    LearningTrend.DECLINING: "Re-learning to follow the change of season",
}


@dataclass(frozen=True, slots=True)
class FeedbackDistribution:
    perfect: int = 0
    cold: int = 0
    hot: int = 0
    strong: int = 0
    with_comments: int = 0


@dataclass(frozen=True, slots=True)
class LearningProgress:
    total_adjustment: float = 0.0
    average_adjustment: float = 0.0
    trend: LearningTrend = LearningTrend.STABLE
    accuracy: float = 0.0


@dataclass(frozen=True, slots=True)
class TemperatureAnalysis:
    average_difference: float = 0.0
    cold_bias: float = 0.0
    hot_bias: float = 0.0
    optimal_range: str = INSUFFICIENT_DATA


@dataclass(frozen=True, slots=True)
class FeedbackStatistics:
    """Summary of a feedback history ordered from oldest to newest."""

    total: int
    distribution: FeedbackDistribution
    average_reliability: float
    progress: LearningProgress
    temperature: TemperatureAnalysis


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _perfect_ratio(events: Sequence[FeedbackEvent]) -> float:
    return sum(1 for event in events if event.feedback_type is FeedbackType.PERFECT) / len(events)


def distribution(events: Sequence[FeedbackEvent]) -> FeedbackDistribution:
    return FeedbackDistribution(
        perfect=sum(1 for event in events if event.feedback_type is FeedbackType.PERFECT),
        cold=sum(1 for event in events if event.feedback_type.is_cold),
        hot=sum(1 for event in events if event.feedback_type.is_hot),
        strong=sum(1 for event in events if event.feedback_type.is_strong),
        with_comments=sum(1 for event in events if event.has_comment),
    )


def accuracy(events: Sequence[FeedbackEvent]) -> float:
    """Share of PERFECT ratings as a percentage."""

    if not events:
        return 0.0
    return _perfect_ratio(events) * 100


def trend(events: Sequence[FeedbackEvent]) -> LearningTrend:
    """Compare PERFECT ratios of the older and the newer half.

    With an odd number of events the middle one belongs to neither half.
    """

    if len(events) < MIN_EVENTS_FOR_TREND:
        return LearningTrend.STABLE
    half = len(events) // 2
    earlier = _perfect_ratio(events[:half])
    recent = _perfect_ratio(events[-half:])
    if recent > earlier + TREND_MARGIN:
        return LearningTrend.IMPROVING
    if recent < earlier - TREND_MARGIN:
        return LearningTrend.DECLINING
    return LearningTrend.STABLE


def optimal_range(events: Sequence[FeedbackEvent]) -> str:
    temperatures = [event.actual_temperature for event in events if event.feedback_type is FeedbackType.PERFECT]
    if not temperatures:
        return INSUFFICIENT_DATA
    low, high = int(min(temperatures)), int(max(temperatures))
    if low == high:
        return f"{low}°C"
    return f"{low}°C ~ {high}°C"


def summarize(events: Sequence[FeedbackEvent], learner: PreferenceLearner | None = None) -> FeedbackStatistics:
    """Build the full statistics view for ``events``."""

    learner = learner or PreferenceLearner()
    adjustments = [float(event.feedback_type.score) for event in events]
    progress = LearningProgress(
        total_adjustment=sum(adjustments),
        average_adjustment=_mean(adjustments),
        trend=trend(events),
        accuracy=accuracy(events),
    )
    temperature = TemperatureAnalysis(
        average_difference=_mean([event.temperature_difference for event in events]),
        cold_bias=_mean([float(event.feedback_type.score) for event in events if event.feedback_type.is_cold]),
        hot_bias=_mean([float(event.feedback_type.score) for event in events if event.feedback_type.is_hot]),
        optimal_range=optimal_range(events),
    )
    return FeedbackStatistics(
        total=len(events),
        distribution=distribution(events),
        average_reliability=_mean([learner.reliability(event) for event in events]),
        progress=progress,
        temperature=temperature,
    )
