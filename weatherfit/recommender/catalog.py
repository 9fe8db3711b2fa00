"""Static item catalog resolving clothing categories to concrete items."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from weatherfit.profile.comfort_model import ComfortModel
from weatherfit.recommender.categories import BottomCategory, OuterCategory, TopCategory

MAX_ITEMS_PER_CATEGORY = 4
THERMAL_BOTTOM_MAX_TEMPERATURE = 15.0

TOP_ITEMS: Mapping[TopCategory, tuple[str, ...]] = MappingProxyType(
    {
        TopCategory.SLEEVELESS: ("sleeveless top", "camisole", "tank top"),
        TopCategory.T_SHIRT: ("short-sleeve t-shirt", "cotton tee", "polo shirt"),
        TopCategory.LINEN_SHIRT: ("linen shirt", "seersucker shirt", "breathable shirt"),
        TopCategory.LONG_SLEEVE: ("long-sleeve tee", "cotton long sleeve", "henley"),
        TopCategory.LIGHT_SWEATER: ("thin knit", "light sweater", "cotton cardigan"),
        TopCategory.SWEATER: ("knit sweater", "crewneck sweater", "wool knit"),
        TopCategory.HOODIE: ("hoodie", "sweatshirt", "brushed hoodie"),
        TopCategory.HOODIE_THICK: ("heavy hoodie", "brushed sweatshirt", "fleece"),
        TopCategory.THICK_SWEATER: ("chunky knit", "wool sweater", "turtleneck"),
    },
)

BOTTOM_ITEMS: Mapping[BottomCategory, tuple[str, ...]] = MappingProxyType(
    {
        BottomCategory.SHORTS: ("shorts", "short pants", "linen shorts"),
        BottomCategory.LIGHT_PANTS: ("thin cotton pants", "linen pants", "chinos"),
        BottomCategory.JEANS: ("jeans", "denim pants", "skinny jeans"),
        BottomCategory.THICK_PANTS: ("heavy cotton pants", "corduroy pants", "wool trousers"),
        BottomCategory.THERMAL_PANTS: ("fleece-lined pants", "winter pants", "fleece-lined jeans"),
    },
)

OUTER_ITEMS: Mapping[OuterCategory, tuple[str, ...]] = MappingProxyType(
    {
        OuterCategory.LIGHT_CARDIGAN: ("thin cardigan", "light knit layer"),
        OuterCategory.CARDIGAN: ("cardigan", "knit cardigan", "button cardigan"),
        OuterCategory.LIGHT_JACKET: ("light jacket", "spring jacket", "light jumper"),
        OuterCategory.WINDBREAKER: ("windbreaker", "wind shell", "raincoat"),
        OuterCategory.JACKET: ("jacket", "blazer", "field jacket"),
        OuterCategory.COAT: ("coat", "trench coat", "wool coat"),
        OuterCategory.PADDING: ("puffer", "down jacket", "winter jumper"),
    },
)

COLD_SENSITIVE_TOP_EXTRAS: Mapping[TopCategory, tuple[str, ...]] = MappingProxyType(
    {
        TopCategory.T_SHIRT: ("brushed short sleeve",),
        TopCategory.LONG_SLEEVE: ("brushed long sleeve",),
        TopCategory.SWEATER: ("turtleneck knit",),
        TopCategory.HOODIE: ("fleece-lined hoodie",),
    },
)

HEAT_SENSITIVE_TOP_EXTRAS: Mapping[TopCategory, tuple[str, ...]] = MappingProxyType(
    {
        TopCategory.T_SHIRT: ("mesh t-shirt", "cooling fabric tee"),
        TopCategory.LONG_SLEEVE: ("thin long sleeve",),
        TopCategory.LIGHT_SWEATER: ("mesh knit",),
    },
)

HUMIDITY_SENSITIVE_TOP_EXTRAS: Mapping[TopCategory, tuple[str, ...]] = MappingProxyType(
    {
        TopCategory.T_SHIRT: ("quick-dry tee", "airy fabric"),
        TopCategory.LONG_SLEEVE: ("quick-dry long sleeve", "mesh fabric"),
        TopCategory.LIGHT_SWEATER: ("breathable knit", "linen blend"),
    },
)
HUMIDITY_SENSITIVE_DEFAULT_EXTRAS: tuple[str, ...] = ("airy fabric",)

HIGH_SENSITIVITY_BOTTOM_EXTRAS: tuple[str, ...] = ("relaxed fit", "stretch fabric")
COLD_SENSITIVE_BOTTOM_EXTRAS: tuple[str, ...] = ("fleece lining", "thermal fabric")

WINDBREAKER_EXTRAS: tuple[str, ...] = ("waterproof shell", "breathable fabric")
# (inclusive upper temperature bound, extras); anything warmer gets the last tier.
PADDING_TIERS: tuple[tuple[float, tuple[str, ...]], ...] = (
    (-10.0, ("expedition puffer", "goose down")),
    (0.0, ("long puffer", "windproof puffer")),
)
PADDING_MILD_EXTRAS: tuple[str, ...] = ("light puffer", "short puffer")


def unique_capped(items: Iterable[str], limit: int) -> tuple[str, ...]:
    """Drop repeated entries while keeping order, then keep the first ``limit``."""

    result: list[str] = []
    for item in items:
        if item not in result:
            result.append(item)
        if len(result) == limit:
            break
    return tuple(result)


class ItemCatalog:
    """Resolves categories to item names with trait-specific extras."""

    def __init__(self, max_items: int = MAX_ITEMS_PER_CATEGORY) -> None:
        self._max_items = max_items

    def top_items(self, category: TopCategory, model: ComfortModel) -> tuple[str, ...]:
        items = list(TOP_ITEMS[category])
        if model.cold_sensitive:
            items.extend(COLD_SENSITIVE_TOP_EXTRAS.get(category, ()))
        if model.heat_sensitive:
            items.extend(HEAT_SENSITIVE_TOP_EXTRAS.get(category, ()))
        if model.humidity_sensitive:
            items.extend(HUMIDITY_SENSITIVE_TOP_EXTRAS.get(category, HUMIDITY_SENSITIVE_DEFAULT_EXTRAS))
        return unique_capped(items, self._max_items)

    def bottom_items(self, category: BottomCategory, model: ComfortModel, temperature: float) -> tuple[str, ...]:
        items = list(BOTTOM_ITEMS[category])
        if model.high_sensitivity:
            items.extend(HIGH_SENSITIVITY_BOTTOM_EXTRAS)
        if model.cold_sensitive and temperature <= THERMAL_BOTTOM_MAX_TEMPERATURE:
            items.extend(COLD_SENSITIVE_BOTTOM_EXTRAS)
        return unique_capped(items, self._max_items)

    def outer_items(self, category: OuterCategory | None, temperature: float) -> tuple[str, ...]:
        if category is None:
            return ()
        items = list(OUTER_ITEMS[category])
        if category is OuterCategory.WINDBREAKER:
            items.extend(WINDBREAKER_EXTRAS)
        elif category is OuterCategory.PADDING:
            items.extend(self._padding_extras(temperature))
        return unique_capped(items, self._max_items)

    @staticmethod
    def _padding_extras(temperature: float) -> tuple[str, ...]:
        for upper, extras in PADDING_TIERS:
            if temperature <= upper:
                return extras
        return PADDING_MILD_EXTRAS
