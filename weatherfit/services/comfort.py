"""Comfort pipeline that coordinates scoring, recommendation and learning."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from weatherfit.common.errors import WeatherfitError
from weatherfit.config.settings import Settings, get_settings
from weatherfit.feedback.events import FeedbackEvent
from weatherfit.feedback.learner import LearningUpdate, PreferenceLearner
from weatherfit.feedback.statistics import FeedbackStatistics, summarize
from weatherfit.metrics import prometheus_exporter
from weatherfit.profile.comfort_model import ComfortModel
from weatherfit.profile.comfort_profile import ComfortProfile
from weatherfit.recommender.category_selector import CategorySelection, CategorySelector
from weatherfit.recommender.messages import learning_trend_message, personal_tip, personalized_message
from weatherfit.scoring.weighting import PersonalWeightingStage, ScoreResult
from weatherfit.weather.observation import WeatherObservation

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ComfortReport:
    """Everything shown to a user for one observation."""

    score: ScoreResult
    selection: CategorySelection
    message: str
    tip: str


class ComfortService:
    """Stateless facade over the comfort core for transport and storage layers."""

    def __init__(
        self,
        *,
        weighting: PersonalWeightingStage | None = None,
        selector: CategorySelector | None = None,
        learner: PreferenceLearner | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._weighting = weighting or PersonalWeightingStage()
        self._selector = selector or CategorySelector()
        self._learner = learner or PreferenceLearner()
        self._settings = settings or get_settings()

    @property
    def _metrics_enabled(self) -> bool:
        return self._settings.metrics_enabled

    def score(self, observation: WeatherObservation, profile: ComfortProfile) -> ScoreResult:
        result = self._weighting.score(observation, profile)
        if self._metrics_enabled:
            prometheus_exporter.comfort_evaluations_total.inc()
            prometheus_exporter.comfort_score.observe(result.total_score)
        return result

    def recommend(
        self,
        observation: WeatherObservation,
        profile: ComfortProfile,
        total_score: float,
    ) -> CategorySelection:
        selection = self._selector.select(observation, ComfortModel(profile), total_score)
        if self._metrics_enabled:
            prometheus_exporter.outfit_recommendations_total.labels(
                top_category=selection.top_category.value,
            ).inc()
        return selection

    def evaluate(self, observation: WeatherObservation, profile: ComfortProfile) -> ComfortReport:
        """
        Score the observation and build the matching recommendation.

        The returned report also carries the personalised message and tip.
        """

        result = self.score(observation, profile)
        selection = self.recommend(observation, profile, result.total_score)
        logger.debug(
            "evaluated observation: score=%.1f grade=%s top=%s",
            result.total_score,
            result.grade.value,
            selection.top_category.value,
        )
        return ComfortReport(
            score=result,
            selection=selection,
            message=personalized_message(result, profile),
            tip=personal_tip(result, ComfortModel(profile)),
        )

    def evaluate_payload(self, payload: Mapping[str, Any], profile: ComfortProfile) -> ComfortReport:
        """Validate a raw observation payload and evaluate it."""

        try:
            observation = WeatherObservation.from_mapping(payload)
        except WeatherfitError as exc:
            logger.warning("rejected observation payload: %s", exc)
            raise
        return self.evaluate(observation, profile)

    def submit_feedback(self, event: FeedbackEvent, profile: ComfortProfile) -> LearningUpdate:
        """Run one learning step; the caller persists ``update.profile``."""

        update = self._learner.learn(event, profile)
        if self._metrics_enabled:
            prometheus_exporter.feedback_events_total.labels(feedback_type=event.feedback_type.value).inc()
            if update.applied:
                prometheus_exporter.learning_updates_applied_total.inc()
        return update

    def feedback_statistics(self, events: Sequence[FeedbackEvent]) -> FeedbackStatistics:
        return summarize(events, self._learner)

    def learning_trend(self, events: Sequence[FeedbackEvent]) -> str:
        return learning_trend_message(self.feedback_statistics(events).progress.average_adjustment)
