"""Feedback-driven updates of a user's comfort profile."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from weatherfit.feedback.events import FeedbackEvent, FeedbackType
from weatherfit.profile.comfort_profile import (
    MAX_COMFORT_TEMPERATURE,
    MIN_COMFORT_TEMPERATURE,
    UPDATE_MAX_WEIGHT,
    UPDATE_MIN_WEIGHT,
    ComfortProfile,
)

logger = logging.getLogger(__name__)

UNCONFIRMED_FACTOR = 0.7
INTENSITY_FACTORS = {2: 1.0, 1: 0.8, 0: 0.5}
COMMENT_FACTOR = 1.1
DIFFERENCE_PENALTY_PER_DEGREE = 0.1
MAX_DIFFERENCE_PENALTY = 0.5

RELIABLE_THRESHOLD = 0.5
RELIABLE_RATE = 0.22
UNRELIABLE_RATE = 0.05
MIN_LEARNING_RATE = 0.01

MAX_TEMPERATURE_STEP = 1.0
WEIGHT_STEP = 2


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True, slots=True)
class LearningUpdate:
    """What one feedback event did, or would do, to a profile."""

    previous: ComfortProfile
    profile: ComfortProfile
    reliability: float = 0.0
    learning_rate: float = 0.0
    raw_delta: float = 0.0
    temperature_delta: int = 0
    weight_delta: int = 0

    @property
    def applied(self) -> bool:
        return self.profile != self.previous


class PreferenceLearner:
    """Applies bounded online learning steps based on user feedback."""

    def reliability(self, event: FeedbackEvent) -> float:
        """Trust in ``event`` within [0, 1]."""

        score = 1.0
        if not event.confirmed:
            score *= UNCONFIRMED_FACTOR
        score *= INTENSITY_FACTORS[event.feedback_type.intensity]
        if event.has_comment:
            score *= COMMENT_FACTOR
        penalty = min(MAX_DIFFERENCE_PENALTY, DIFFERENCE_PENALTY_PER_DEGREE * abs(event.temperature_difference))
        score *= 1 - penalty
        return _clamp(score, 0.0, 1.0)

    def learning_rate(self, reliability: float) -> float:
        factor = RELIABLE_RATE if reliability >= RELIABLE_THRESHOLD else UNRELIABLE_RATE
        return reliability * factor

    def learn(self, event: FeedbackEvent, profile: ComfortProfile) -> LearningUpdate:
        """Compute the profile that results from ``event``.

        The input profile is never modified; a no-op update carries it as
        both the previous and the resulting profile.
        """

        if event.feedback_type is FeedbackType.PERFECT:
            return LearningUpdate(previous=profile, profile=profile)

        reliability = self.reliability(event)
        rate = self.learning_rate(reliability)
        if rate < MIN_LEARNING_RATE:
            logger.debug("learning rate %.4f below threshold, feedback ignored", rate)
            return LearningUpdate(previous=profile, profile=profile, reliability=reliability, learning_rate=rate)

        raw = event.feedback_type.score * rate
        temperature_delta = int(_clamp(raw, -MAX_TEMPERATURE_STEP, MAX_TEMPERATURE_STEP))
        if temperature_delta == 0:
            weight_delta = 0
        else:
            weight_delta = WEIGHT_STEP if temperature_delta > 0 else -WEIGHT_STEP

        updated = profile
        if temperature_delta:
            comfort = int(
                _clamp(
                    profile.comfort_temperature + temperature_delta,
                    MIN_COMFORT_TEMPERATURE,
                    MAX_COMFORT_TEMPERATURE,
                ),
            )
            weight = int(
                _clamp(profile.weights.temperature + weight_delta, UPDATE_MIN_WEIGHT, UPDATE_MAX_WEIGHT),
            )
            updated = profile.with_updates(comfort_temperature=comfort, temperature_weight=weight)

        logger.debug(
            "feedback %s: reliability=%.3f rate=%.3f raw=%.3f delta=%d",
            event.feedback_type.value,
            reliability,
            rate,
            raw,
            temperature_delta,
        )
        update = LearningUpdate(
            previous=profile,
            profile=updated,
            reliability=reliability,
            learning_rate=rate,
            raw_delta=raw,
            temperature_delta=temperature_delta,
            weight_delta=weight_delta,
        )
        if update.applied:
            logger.info(
                "comfort temperature %d -> %d after %s feedback",
                profile.comfort_temperature,
                updated.comfort_temperature,
                event.feedback_type.value,
            )
        return update

    def apply(self, event: FeedbackEvent, profile: ComfortProfile) -> ComfortProfile:
        return self.learn(event, profile).profile
