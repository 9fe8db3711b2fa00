"""Tests for comfort profile validation and updates."""

from __future__ import annotations

import pytest

from weatherfit.common.errors import InvalidProfile
from weatherfit.profile.comfort_profile import ComfortProfile, ElementWeights, Priority, ReactionLevel


def test_setup_accepts_full_weight_range_unclamped() -> None:
    profile = ComfortProfile.create_from_setup(
        comfort_temperature=24,
        priorities=["cold", "wind"],
        skin_reaction="high",
        temperature_weight=100,
        uv_weight=1,
    )

    assert profile.setup_completed
    assert profile.weights.temperature == 100
    assert profile.weights.uv == 1
    assert profile.priorities == (Priority.COLD, Priority.WIND)
    assert profile.skin_reaction is ReactionLevel.HIGH
    assert profile.humidity_reaction is None


@pytest.mark.parametrize("weight", [0, 101])
def test_setup_rejects_out_of_range_weight(weight: int) -> None:
    with pytest.raises(InvalidProfile):
        ComfortProfile.create_from_setup(comfort_temperature=20, wind_weight=weight)


@pytest.mark.parametrize("comfort", [9, 31])
def test_comfort_temperature_outside_range_is_rejected(comfort: int) -> None:
    with pytest.raises(InvalidProfile):
        ComfortProfile(comfort_temperature=comfort)


@pytest.mark.parametrize(
    "priorities",
    [("heat", "cold", "uv"), ("heat", "heat"), ("snow",)],
)
def test_invalid_priorities_are_rejected(priorities: tuple[str, ...]) -> None:
    with pytest.raises(InvalidProfile):
        ComfortProfile(priorities=priorities)


def test_unknown_reaction_level_is_rejected() -> None:
    with pytest.raises(InvalidProfile):
        ComfortProfile(humidity_reaction="extreme")


def test_updates_clamp_weights_to_narrow_range() -> None:
    profile = ComfortProfile.create_from_setup(comfort_temperature=20, temperature_weight=100)

    updated = profile.with_updates(temperature_weight=90, wind_weight=10)

    assert updated.weights.temperature == 75
    assert updated.weights.wind == 25
    assert profile.weights.temperature == 100


def test_updates_reject_weights_outside_setup_range() -> None:
    with pytest.raises(InvalidProfile):
        ComfortProfile().with_updates(humidity_weight=101)


def test_updates_without_changes_return_same_instance() -> None:
    profile = ComfortProfile(comfort_temperature=23)

    assert profile.with_updates() is profile


def test_personal_correction_is_derived_from_comfort_temperature() -> None:
    assert ComfortProfile(comfort_temperature=26).personal_temp_correction == 3.0
    assert ComfortProfile(comfort_temperature=15).personal_temp_correction == -2.5
    assert ComfortProfile(comfort_temperature=26).with_updates(comfort_temperature=20).personal_temp_correction == 0.0


def test_priority_penalties_follow_order() -> None:
    profile = ComfortProfile(priorities=("humidity", "uv"))

    assert profile.first_priority is Priority.HUMIDITY
    assert profile.priority_penalty("humidity") == 0.3
    assert profile.priority_penalty(Priority.UV) == 0.5
    assert profile.priority_penalty("cold") == 1.0


@pytest.mark.parametrize("value", [50.5, "50", True, None])
def test_element_weights_require_integers(value: object) -> None:
    with pytest.raises(InvalidProfile):
        ElementWeights(humidity=value)


def test_element_weights_expose_lookup_and_mapping() -> None:
    weights = ElementWeights(wind=80)

    assert weights.get("wind") == 80
    assert weights.as_dict() == {"temperature": 50, "humidity": 50, "wind": 80, "uv": 50, "air_quality": 50}
    assert not hasattr(weights, "total")
