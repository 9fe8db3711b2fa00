"""Tests for feedback-driven profile learning."""

from __future__ import annotations

import pytest
import pytest_mock

from weatherfit.common.errors import InvalidFeedback
from weatherfit.feedback.events import FeedbackEvent, FeedbackType
from weatherfit.feedback.learner import PreferenceLearner
from weatherfit.profile.comfort_profile import ComfortProfile


def _event(feedback_type: FeedbackType, **overrides: object) -> FeedbackEvent:
    values: dict[str, object] = {
        "feedback_type": feedback_type,
        "feels_like_temperature": 11.0,
        "actual_temperature": 10.0,
        "weather_score": 60,
    }
    values.update(overrides)
    return FeedbackEvent(**values)


def test_perfect_feedback_leaves_profile_untouched() -> None:
    profile = ComfortProfile(comfort_temperature=23)

    update = PreferenceLearner().learn(_event(FeedbackType.PERFECT), profile)

    assert update.profile is profile
    assert not update.applied
    assert update.temperature_delta == 0


def test_single_strong_feedback_is_truncated_to_no_change() -> None:
    profile = ComfortProfile()

    update = PreferenceLearner().learn(_event(FeedbackType.TOO_COLD), profile)

    assert update.reliability == pytest.approx(0.9)
    assert update.learning_rate == pytest.approx(0.198)
    assert update.raw_delta == pytest.approx(-0.396)
    assert update.temperature_delta == 0
    assert update.weight_delta == 0
    assert update.profile == profile
    assert not update.applied


def test_reliability_factors() -> None:
    learner = PreferenceLearner()
    mild_unconfirmed = _event(
        FeedbackType.SLIGHTLY_HOT,
        confirmed=False,
        comment="sweaty at noon",
        feels_like_temperature=10.0,
    )
    far_off = _event(FeedbackType.TOO_HOT, feels_like_temperature=30.0, actual_temperature=20.0)

    assert learner.reliability(mild_unconfirmed) == pytest.approx(0.7 * 0.8 * 1.1)
    assert learner.reliability(far_off) == pytest.approx(0.5)
    assert learner.reliability(_event(FeedbackType.PERFECT, feels_like_temperature=10.0)) == pytest.approx(0.5)


def test_blank_comment_does_not_raise_reliability() -> None:
    learner = PreferenceLearner()

    assert learner.reliability(_event(FeedbackType.TOO_COLD, comment="   ")) == pytest.approx(0.9)


def test_learning_rate_depends_on_reliability() -> None:
    learner = PreferenceLearner()

    assert learner.learning_rate(0.5) == pytest.approx(0.11)
    assert learner.learning_rate(0.4) == pytest.approx(0.02)
    assert learner.learning_rate(0.1) == pytest.approx(0.005)


def test_low_learning_rate_is_ignored(mocker: pytest_mock.MockerFixture) -> None:
    mocker.patch.object(PreferenceLearner, "learning_rate", return_value=0.005)
    profile = ComfortProfile()

    update = PreferenceLearner().learn(_event(FeedbackType.TOO_HOT), profile)

    assert update.profile is profile
    assert update.raw_delta == 0.0


def test_large_step_moves_comfort_and_weight(mocker: pytest_mock.MockerFixture) -> None:
    mocker.patch.object(PreferenceLearner, "learning_rate", return_value=0.6)
    profile = ComfortProfile()

    update = PreferenceLearner().learn(_event(FeedbackType.TOO_HOT), profile)

    assert update.raw_delta == pytest.approx(1.2)
    assert update.temperature_delta == 1
    assert update.weight_delta == 2
    assert update.profile.comfort_temperature == 21
    assert update.profile.weights.temperature == 52
    assert update.profile.personal_temp_correction == pytest.approx(0.5)
    assert update.applied
    assert profile.comfort_temperature == 20


def test_learning_respects_bounds(mocker: pytest_mock.MockerFixture) -> None:
    mocker.patch.object(PreferenceLearner, "learning_rate", return_value=0.6)
    learner = PreferenceLearner()
    coldest = ComfortProfile.create_from_setup(comfort_temperature=10, temperature_weight=26)
    hottest = ComfortProfile.create_from_setup(comfort_temperature=30, temperature_weight=75)

    cooled = learner.apply(_event(FeedbackType.TOO_COLD), coldest)
    heated = learner.learn(_event(FeedbackType.TOO_HOT), hottest)

    assert cooled.comfort_temperature == 10
    assert cooled.weights.temperature == 25
    assert heated.profile.comfort_temperature == 30
    assert heated.profile.weights.temperature == 75
    assert not heated.applied


def test_feedback_event_validation() -> None:
    with pytest.raises(InvalidFeedback):
        _event(FeedbackType.TOO_COLD, weather_score=101)
    with pytest.raises(InvalidFeedback):
        _event(FeedbackType.TOO_COLD, actual_temperature=61.0)
    with pytest.raises(InvalidFeedback):
        _event("FREEZING")

    assert _event("too_hot").feedback_type is FeedbackType.TOO_HOT


def test_feedback_type_lookups() -> None:
    assert FeedbackType.from_score(-1) is FeedbackType.SLIGHTLY_COLD
    assert FeedbackType.from_string(" perfect ") is FeedbackType.PERFECT
    assert FeedbackType.TOO_COLD.is_strong and FeedbackType.TOO_COLD.is_cold
    with pytest.raises(InvalidFeedback):
        FeedbackType.from_score(3)


def test_repeated_feedback_stays_within_bounds(mocker: pytest_mock.MockerFixture) -> None:
    mocker.patch.object(PreferenceLearner, "learning_rate", return_value=0.9)
    learner = PreferenceLearner()
    profile = ComfortProfile.create_from_setup(comfort_temperature=20, temperature_weight=100)

    for _ in range(60):
        profile = learner.apply(_event(FeedbackType.TOO_HOT), profile)
        assert 10 <= profile.comfort_temperature <= 30
        assert 25 <= profile.weights.temperature <= 75
    assert profile.comfort_temperature == 30
    assert profile.weights.temperature == 75

    for _ in range(60):
        profile = learner.apply(_event(FeedbackType.TOO_COLD), profile)
        assert 10 <= profile.comfort_temperature <= 30
        assert 25 <= profile.weights.temperature <= 75
    assert profile.comfort_temperature == 10
    assert profile.weights.temperature == 25


def test_feels_like_outside_observation_range_is_accepted() -> None:
    learner = PreferenceLearner()
    scorching = _event(FeedbackType.TOO_HOT, feels_like_temperature=122.56, actual_temperature=45.0)
    frigid = _event(FeedbackType.TOO_COLD, feels_like_temperature=-64.9, actual_temperature=-45.0)

    assert learner.reliability(scorching) == pytest.approx(0.5)
    assert learner.reliability(frigid) == pytest.approx(0.5)
    with pytest.raises(InvalidFeedback):
        _event(FeedbackType.TOO_HOT, feels_like_temperature=float("nan"))
