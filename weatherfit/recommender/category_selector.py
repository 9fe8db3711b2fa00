"""Clothing category selection on top of the personalised comfort model."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from weatherfit.profile.comfort_model import SENSITIVE_WEIGHT, ComfortModel
from weatherfit.profile.comfort_profile import Element
from weatherfit.recommender.accessory_selector import AccessorySelector
from weatherfit.recommender.catalog import ItemCatalog
from weatherfit.recommender.categories import (
    BARE_TOPS,
    BOTTOM_LADDER,
    OUTER_LADDER,
    TOP_LADDER,
    BottomCategory,
    OuterCategory,
    TopCategory,
    band_for,
    is_lighter,
    lighter,
    suitable_outer,
    warmer,
)
from weatherfit.weather.observation import WeatherObservation

logger = logging.getLogger(__name__)

NEUTRAL_WEIGHT = 50.0

WINDY_SPEED = 5.0
WIND_COOLING = 3.0
MUGGY_HUMIDITY = 80.0
MUGGY_WARMING = 2.0
SUNNY_FEELS_LIKE = 25.0
SUNNY_UV_INDEX = 8.0
SUNNY_WARMING = 2.0

COLD_OUTER_MAX_TEMPERATURE = 20.0
HEAT_DROP_OUTER_MIN_TEMPERATURE = 20.0
WINDBREAKER_MIN_WIND = 7.0
WINDBREAKER_MAX_TEMPERATURE = 25.0
DUST_PM25 = 75.0

# (minimum total score, base confidence), checked top-down.
CONFIDENCE_BANDS: tuple[tuple[float, int], ...] = (
    (80.0, 95),
    (60.0, 85),
    (40.0, 75),
)
LOW_SCORE_CONFIDENCE = 65
CONFIDENCE_PENALTY_PER_DEGREE = 2.0
MIN_CONFIDENCE = 50
MAX_CONFIDENCE = 100


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def confidence_score(total_score: float, feels_like: float, actual: float) -> int:
    """Confidence in [50, 100], lowered as feels-like drifts from the reading."""

    base = LOW_SCORE_CONFIDENCE
    for lower_bound, confidence in CONFIDENCE_BANDS:
        if total_score >= lower_bound:
            base = confidence
            break
    penalty = round_half_up(CONFIDENCE_PENALTY_PER_DEGREE * abs(feels_like - actual))
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, base - penalty))


@dataclass(frozen=True, slots=True)
class CategorySelection:
    """Recommended categories with their concrete items."""

    top_category: TopCategory
    bottom_category: BottomCategory
    outer_category: OuterCategory | None
    top_items: tuple[str, ...]
    bottom_items: tuple[str, ...]
    outer_items: tuple[str, ...]
    accessories: tuple[str, ...] = ()
    confidence_score: int = MAX_CONFIDENCE
    feels_like_temperature: float = 0.0
    adjusted_temperature: float = 0.0

    @property
    def has_outer(self) -> bool:
        return self.outer_category is not None


class CategorySelector:
    """Maps an observation and comfort model to a clothing recommendation."""

    def __init__(
        self,
        catalog: ItemCatalog | None = None,
        accessory_selector: AccessorySelector | None = None,
    ) -> None:
        self._catalog = catalog or ItemCatalog()
        self._accessories = accessory_selector or AccessorySelector()

    def adjusted_temperature(
        self,
        feels_like: float,
        observation: WeatherObservation,
        model: ComfortModel,
    ) -> float:
        """Shift the feels-like temperature for wind, mugginess and strong sun."""

        adjusted = feels_like
        if observation.wind_speed >= WINDY_SPEED:
            adjusted -= WIND_COOLING * model.weight(Element.WIND) / NEUTRAL_WEIGHT
        if observation.humidity >= MUGGY_HUMIDITY:
            adjusted += MUGGY_WARMING * model.weight(Element.HUMIDITY) / NEUTRAL_WEIGHT
        if feels_like >= SUNNY_FEELS_LIKE and observation.uv_index >= SUNNY_UV_INDEX:
            adjusted += SUNNY_WARMING * model.weight(Element.UV) / NEUTRAL_WEIGHT
        return adjusted

    def choose_categories(
        self,
        adjusted: float,
        observation: WeatherObservation,
        model: ComfortModel,
    ) -> tuple[TopCategory, BottomCategory, OuterCategory | None]:
        band = band_for(adjusted)
        top, bottom, outer = band.top, band.bottom, band.outer

        if model.cold_sensitive:
            top = warmer(TOP_LADDER, top)
            bottom = warmer(BOTTOM_LADDER, bottom)
            if adjusted <= COLD_OUTER_MAX_TEMPERATURE:
                if outer is not None:
                    outer = warmer(OUTER_LADDER, outer)
                else:
                    outer = suitable_outer(adjusted) or OuterCategory.LIGHT_CARDIGAN

        if model.heat_sensitive:
            top = lighter(TOP_LADDER, top)
            bottom = lighter(BOTTOM_LADDER, bottom)
            if adjusted >= HEAT_DROP_OUTER_MIN_TEMPERATURE:
                outer = None
            elif outer is not None:
                outer = lighter(OUTER_LADDER, outer)

        if observation.has_rain and (
            outer is None or is_lighter(OUTER_LADDER, outer, OuterCategory.WINDBREAKER)
        ):
            outer = OuterCategory.WINDBREAKER

        if (
            observation.wind_speed >= WINDBREAKER_MIN_WIND
            and outer is None
            and adjusted <= WINDBREAKER_MAX_TEMPERATURE
        ):
            outer = OuterCategory.WINDBREAKER

        if (
            observation.pm25 >= DUST_PM25
            and model.weight(Element.AIR_QUALITY) >= SENSITIVE_WEIGHT
            and top in BARE_TOPS
        ):
            top = TopCategory.LONG_SLEEVE

        return top, bottom, outer

    def select(
        self,
        observation: WeatherObservation,
        model: ComfortModel,
        total_score: float,
    ) -> CategorySelection:
        """Build the full recommendation for one observation.

        ``total_score`` is the personalised comfort score of the same
        observation and only feeds the confidence value.
        """

        feels_like = model.feels_like_for(observation)
        adjusted = self.adjusted_temperature(feels_like, observation, model)
        top, bottom, outer = self.choose_categories(adjusted, observation, model)
        logger.debug(
            "categories for adjusted %.1f: top=%s bottom=%s outer=%s",
            adjusted,
            top.value,
            bottom.value,
            outer.value if outer else None,
        )

        return CategorySelection(
            top_category=top,
            bottom_category=bottom,
            outer_category=outer,
            top_items=self._catalog.top_items(top, model),
            bottom_items=self._catalog.bottom_items(bottom, model, adjusted),
            outer_items=self._catalog.outer_items(outer, adjusted),
            accessories=self._accessories.select(observation, model, feels_like),
            confidence_score=confidence_score(total_score, feels_like, observation.temperature),
            feels_like_temperature=feels_like,
            adjusted_temperature=adjusted,
        )
