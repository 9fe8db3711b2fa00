"""Tests for clothing category selection."""

from __future__ import annotations

import pytest

from weatherfit.profile.comfort_model import ComfortModel
from weatherfit.profile.comfort_profile import ComfortProfile
from weatherfit.recommender.category_selector import CategorySelector, confidence_score, round_half_up
from weatherfit.recommender.categories import (
    OUTER_LADDER,
    TOP_LADDER,
    BottomCategory,
    OuterCategory,
    TopCategory,
    band_for,
    suitable_outer,
    warmer,
)
from weatherfit.weather.observation import WeatherObservation


def _select(profile: ComfortProfile, total_score: float = 60.0, **readings: float):
    readings.setdefault("humidity", 50)
    readings.setdefault("wind_speed", 0.5)
    observation = WeatherObservation(**readings)
    return CategorySelector().select(observation, ComfortModel(profile), total_score)


def test_cold_sensitive_user_gets_warmer_layers() -> None:
    selection = _select(ComfortProfile(comfort_temperature=26), total_score=50, temperature=4.3, wind_speed=2)

    assert selection.feels_like_temperature == pytest.approx(7.99, abs=0.01)
    assert selection.top_category is TopCategory.THICK_SWEATER
    assert selection.bottom_category is BottomCategory.THERMAL_PANTS
    assert selection.outer_category is OuterCategory.PADDING
    assert selection.outer_items == ("puffer", "down jacket", "winter jumper", "light puffer")
    assert selection.bottom_items[-1] == "fleece lining"
    assert selection.accessories == ("light scarf", "thin gloves")
    assert selection.confidence_score == 68


def test_mild_day_without_outer_for_neutral_user() -> None:
    selection = _select(ComfortProfile(), temperature=21)

    assert selection.top_category is TopCategory.LONG_SLEEVE
    assert selection.bottom_category is BottomCategory.LIGHT_PANTS
    assert selection.outer_category is None
    assert not selection.has_outer
    assert selection.outer_items == ()
    assert 1 <= len(selection.top_items) <= 4


def test_rain_adds_windbreaker_when_outer_missing() -> None:
    selection = _select(ComfortProfile(), temperature=21, rain_1h=1.0)

    assert selection.outer_category is OuterCategory.WINDBREAKER
    assert selection.outer_items == ("windbreaker", "wind shell", "raincoat", "waterproof shell")
    assert "umbrella" in selection.accessories


def test_rain_keeps_warmer_outer() -> None:
    selection = _select(ComfortProfile(), temperature=10, rain_1h=3.0)

    assert selection.outer_category is OuterCategory.COAT


def test_rain_replaces_lighter_outer() -> None:
    selection = _select(ComfortProfile(), temperature=18, rain_1h=0.5)

    assert selection.outer_category is OuterCategory.WINDBREAKER


def test_strong_wind_adds_windbreaker() -> None:
    selection = _select(ComfortProfile(), temperature=24, wind_speed=8)

    assert selection.adjusted_temperature == pytest.approx(21.0)
    assert selection.top_category is TopCategory.LONG_SLEEVE
    assert selection.outer_category is OuterCategory.WINDBREAKER


def test_heat_sensitive_user_drops_layers() -> None:
    selection = _select(ComfortProfile(comfort_temperature=16), temperature=28, humidity=30)

    assert selection.feels_like_temperature == pytest.approx(25.5)
    assert selection.top_category is TopCategory.T_SHIRT
    assert selection.bottom_category is BottomCategory.SHORTS
    assert selection.outer_category is None


def test_heat_sensitive_user_gets_lighter_outer_when_cool() -> None:
    selection = _select(ComfortProfile(comfort_temperature=16), temperature=17)

    assert selection.top_category is TopCategory.LIGHT_SWEATER
    assert selection.bottom_category is BottomCategory.LIGHT_PANTS
    assert selection.outer_category is OuterCategory.CARDIGAN


def test_cold_sensitive_user_gets_outer_from_suitability_table() -> None:
    selection = _select(ComfortProfile(comfort_temperature=22), temperature=19)

    assert selection.adjusted_temperature == pytest.approx(20.0)
    assert selection.top_category is TopCategory.LIGHT_SWEATER
    assert selection.bottom_category is BottomCategory.JEANS
    assert selection.outer_category is OuterCategory.LIGHT_CARDIGAN


def test_bad_air_covers_bare_arms_for_sensitive_user() -> None:
    profile = ComfortProfile.create_from_setup(comfort_temperature=20, air_quality_weight=80)

    selection = _select(profile, temperature=28, humidity=30, pm25=80)

    assert selection.top_category is TopCategory.LONG_SLEEVE
    assert "KF94 mask" in selection.accessories


def test_weights_scale_situational_adjustments() -> None:
    profile = ComfortProfile.create_from_setup(comfort_temperature=20, humidity_weight=75)

    selection = _select(profile, temperature=15, humidity=85)

    assert selection.feels_like_temperature == pytest.approx(18.0)
    assert selection.adjusted_temperature == pytest.approx(21.0)


def test_items_are_unique_and_capped() -> None:
    profile = ComfortProfile(comfort_temperature=16, priorities=("humidity",))

    selection = _select(profile, temperature=27, humidity=30)

    assert selection.top_category is TopCategory.T_SHIRT
    assert len(selection.top_items) == 4
    assert len(set(selection.top_items)) == 4
    assert selection.top_items[-1] == "mesh t-shirt"


@pytest.mark.parametrize(
    ("temperature", "top"),
    [
        (-60, TopCategory.THICK_SWEATER),
        (-50, TopCategory.THICK_SWEATER),
        (4.99, TopCategory.THICK_SWEATER),
        (5, TopCategory.HOODIE_THICK),
        (29.99, TopCategory.T_SHIRT),
        (30, TopCategory.SLEEVELESS),
        (60, TopCategory.SLEEVELESS),
        (75, TopCategory.SLEEVELESS),
    ],
)
def test_band_lookup_and_boundary_fallback(temperature: float, top: TopCategory) -> None:
    assert band_for(temperature).top is top


def test_ladders_are_clamped_at_the_ends() -> None:
    assert warmer(TOP_LADDER, TopCategory.THICK_SWEATER) is TopCategory.THICK_SWEATER
    assert warmer(OUTER_LADDER, OuterCategory.LIGHT_JACKET) is OuterCategory.WINDBREAKER


def test_outer_suitability_prefers_lowest_priority_number() -> None:
    assert suitable_outer(16) is OuterCategory.LIGHT_CARDIGAN
    assert suitable_outer(9) is OuterCategory.JACKET
    assert suitable_outer(-5) is OuterCategory.PADDING
    assert suitable_outer(25) is None


def test_confidence_score_bands_and_penalty() -> None:
    assert confidence_score(85, 10, 10) == 95
    assert confidence_score(85, 12.25, 10) == 90
    assert confidence_score(60, 10, 10) == 85
    assert confidence_score(30, 0, 20) == 50
    assert round_half_up(2.5) == 3


SWEEP_PROFILES = {
    "neutral": ComfortProfile(),
    "cold": ComfortProfile(comfort_temperature=26, priorities=("cold",)),
    "heat": ComfortProfile.create_from_setup(comfort_temperature=14, priorities=["heat"], air_quality_weight=80),
}
SWEEP_CONDITIONS = [
    {},
    {"rain_1h": 8.0},
    {"wind_speed": 9.0},
    {"pm25": 90.0, "uv_index": 9.0},
    {"humidity": 95.0, "rain_1h": 0.5, "wind_speed": 12.0},
]


@pytest.mark.parametrize("profile_name", sorted(SWEEP_PROFILES))
@pytest.mark.parametrize("conditions", SWEEP_CONDITIONS)
def test_every_temperature_yields_a_complete_outfit(profile_name: str, conditions: dict[str, float]) -> None:
    model = ComfortModel(SWEEP_PROFILES[profile_name])
    selector = CategorySelector()

    for step in range(-100, 121):
        readings = {"temperature": step / 2, "humidity": 50.0, "wind_speed": 1.0, **conditions}
        observation = WeatherObservation(**readings)

        selection = selector.select(observation, model, total_score=55.0)

        assert selection.top_category in TOP_LADDER
        assert selection.bottom_category in BottomCategory
        assert 1 <= len(selection.top_items) <= 4
        assert 1 <= len(selection.bottom_items) <= 4
        if selection.outer_category is None:
            assert selection.outer_items == ()
        else:
            assert 1 <= len(selection.outer_items) <= 4
        assert len(selection.accessories) <= 5
        assert 50 <= selection.confidence_score <= 100
        if observation.has_rain:
            assert selection.outer_category is not None
