"""Threshold rules that add accessories on top of the core outfit."""

from __future__ import annotations

import logging

from weatherfit.profile.comfort_model import SENSITIVE_WEIGHT, ComfortModel
from weatherfit.profile.comfort_profile import Element
from weatherfit.recommender.catalog import unique_capped
from weatherfit.weather.observation import WeatherObservation

logger = logging.getLogger(__name__)

MAX_ACCESSORIES = 5

FREEZING_MAX_TEMPERATURE = 5.0
CHILLY_MAX_TEMPERATURE = 15.0
WARM_MIN_TEMPERATURE = 25.0
STRONG_UV_INDEX = 7.0
UNHEALTHY_PM25 = 75.0
HEAVY_RAIN_MM = 5.0
STRONG_WIND_SPEED = 7.0

FREEZING_ACCESSORIES = ("scarf", "gloves", "hat", "earmuffs")
CHILLY_ACCESSORIES = ("light scarf", "thin gloves")
WARM_ACCESSORIES = ("hat", "sunglasses")
UV_ACCESSORIES = ("wide-brim hat", "sunglasses", "arm sleeves")
UV_SENSITIVE_EXTRAS = ("UV scarf", "UV gloves")
DUST_ACCESSORIES = ("mask",)
DUST_SENSITIVE_EXTRAS = ("KF94 mask", "air purifier necklace")
RAIN_ACCESSORIES = ("umbrella", "water-resistant shoes")
HEAVY_RAIN_EXTRAS = ("long umbrella", "rain boots", "waterproof bag")
WIND_ACCESSORIES = ("windproof cap", "neck scarf")


class AccessorySelector:
    """Collects supplementary items from independent weather rules."""

    def __init__(self, max_accessories: int = MAX_ACCESSORIES) -> None:
        self._max_accessories = max_accessories

    def select(self, observation: WeatherObservation, model: ComfortModel, feels_like: float) -> tuple[str, ...]:
        """Return at most ``max_accessories`` distinct accessories.

        Temperature rules look at the personalised feels-like temperature and
        only the first matching one applies; every other rule is independent.
        """

        items: list[str] = []
        if feels_like <= FREEZING_MAX_TEMPERATURE:
            items.extend(FREEZING_ACCESSORIES)
        elif feels_like <= CHILLY_MAX_TEMPERATURE:
            items.extend(CHILLY_ACCESSORIES)
        elif feels_like >= WARM_MIN_TEMPERATURE:
            items.extend(WARM_ACCESSORIES)

        if observation.uv_index >= STRONG_UV_INDEX:
            items.extend(UV_ACCESSORIES)
            if model.weight(Element.UV) >= SENSITIVE_WEIGHT:
                items.extend(UV_SENSITIVE_EXTRAS)

        if observation.pm25 >= UNHEALTHY_PM25:
            items.extend(DUST_ACCESSORIES)
            if model.weight(Element.AIR_QUALITY) >= SENSITIVE_WEIGHT:
                items.extend(DUST_SENSITIVE_EXTRAS)

        if observation.has_rain:
            items.extend(RAIN_ACCESSORIES)
            if observation.rain_1h > HEAVY_RAIN_MM:
                items.extend(HEAVY_RAIN_EXTRAS)

        if observation.wind_speed >= STRONG_WIND_SPEED:
            items.extend(WIND_ACCESSORIES)

        accessories = unique_capped(items, self._max_accessories)
        logger.debug("accessories for feels-like %.1f: %s", feels_like, accessories)
        return accessories
