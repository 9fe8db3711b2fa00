"""Clothing categories, warmth ladders and the temperature band table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, TypeVar


class TopCategory(str, Enum):
    SLEEVELESS = "SLEEVELESS"
    T_SHIRT = "T_SHIRT"
    LINEN_SHIRT = "LINEN_SHIRT"
    LONG_SLEEVE = "LONG_SLEEVE"
    LIGHT_SWEATER = "LIGHT_SWEATER"
    SWEATER = "SWEATER"
    HOODIE = "HOODIE"
    HOODIE_THICK = "HOODIE_THICK"
    THICK_SWEATER = "THICK_SWEATER"


class BottomCategory(str, Enum):
    SHORTS = "SHORTS"
    LIGHT_PANTS = "LIGHT_PANTS"
    JEANS = "JEANS"
    THICK_PANTS = "THICK_PANTS"
    THERMAL_PANTS = "THERMAL_PANTS"


class OuterCategory(str, Enum):
    LIGHT_CARDIGAN = "LIGHT_CARDIGAN"
    CARDIGAN = "CARDIGAN"
    LIGHT_JACKET = "LIGHT_JACKET"
    WINDBREAKER = "WINDBREAKER"
    JACKET = "JACKET"
    COAT = "COAT"
    PADDING = "PADDING"


# Ladders run from lightest to warmest.
TOP_LADDER: tuple[TopCategory, ...] = tuple(TopCategory)
BOTTOM_LADDER: tuple[BottomCategory, ...] = tuple(BottomCategory)
OUTER_LADDER: tuple[OuterCategory, ...] = tuple(OuterCategory)

BARE_TOPS = frozenset({TopCategory.SLEEVELESS, TopCategory.T_SHIRT})

T = TypeVar("T")


def step(ladder: Sequence[T], current: T, offset: int) -> T:
    """Move ``offset`` rungs along ``ladder``; the ends are sticky."""

    index = ladder.index(current) + offset
    return ladder[max(0, min(len(ladder) - 1, index))]


def warmer(ladder: Sequence[T], current: T) -> T:
    return step(ladder, current, 1)


def lighter(ladder: Sequence[T], current: T) -> T:
    return step(ladder, current, -1)


def is_lighter(ladder: Sequence[T], candidate: T, reference: T) -> bool:
    return ladder.index(candidate) < ladder.index(reference)


@dataclass(frozen=True, slots=True)
class TemperatureBand:
    """Half-open band ``[low, high)`` mapped to a base outfit triple."""

    low: float
    high: float
    top: TopCategory
    bottom: BottomCategory
    outer: OuterCategory | None

    def contains(self, temperature: float) -> bool:
        return self.low <= temperature < self.high


TABLE_MIN_TEMPERATURE = -50.0
TABLE_MAX_TEMPERATURE = 60.0

TEMPERATURE_BANDS: tuple[TemperatureBand, ...] = (
    TemperatureBand(-50, 5, TopCategory.THICK_SWEATER, BottomCategory.THERMAL_PANTS, OuterCategory.PADDING),
    TemperatureBand(5, 9, TopCategory.HOODIE_THICK, BottomCategory.THERMAL_PANTS, OuterCategory.COAT),
    TemperatureBand(9, 12, TopCategory.HOODIE, BottomCategory.THICK_PANTS, OuterCategory.COAT),
    TemperatureBand(12, 17, TopCategory.SWEATER, BottomCategory.JEANS, OuterCategory.LIGHT_JACKET),
    TemperatureBand(17, 20, TopCategory.LIGHT_SWEATER, BottomCategory.JEANS, OuterCategory.CARDIGAN),
    TemperatureBand(20, 23, TopCategory.LONG_SLEEVE, BottomCategory.LIGHT_PANTS, None),
    TemperatureBand(23, 26, TopCategory.LINEN_SHIRT, BottomCategory.LIGHT_PANTS, None),
    TemperatureBand(26, 30, TopCategory.T_SHIRT, BottomCategory.SHORTS, None),
    TemperatureBand(30, TABLE_MAX_TEMPERATURE, TopCategory.SLEEVELESS, BottomCategory.SHORTS, None),
)


def band_for(temperature: float) -> TemperatureBand:
    """Return the band containing ``temperature``.

    The table's upper edge is inclusive, and anything outside the table falls
    back to the nearest boundary band.
    """

    if temperature < TABLE_MIN_TEMPERATURE:
        return TEMPERATURE_BANDS[0]
    if temperature >= TABLE_MAX_TEMPERATURE:
        return TEMPERATURE_BANDS[-1]
    for band in TEMPERATURE_BANDS:
        if band.contains(temperature):
            return band
    return TEMPERATURE_BANDS[-1]  # pragma: no cover - bands are contiguous


@dataclass(frozen=True, slots=True)
class OuterSuitability:
    """Inclusive temperature range an outer layer suits; lower priority wins."""

    low: float
    high: float
    outer: OuterCategory
    priority: int

    def contains(self, temperature: float) -> bool:
        return self.low <= temperature <= self.high


# Ranges overlap on purpose; ties resolve on priority, not declaration order.
OUTER_SUITABILITY: tuple[OuterSuitability, ...] = (
    OuterSuitability(8, 20, OuterCategory.WINDBREAKER, 7),
    OuterSuitability(-10, 8, OuterCategory.PADDING, 6),
    OuterSuitability(0, 12, OuterCategory.COAT, 5),
    OuterSuitability(5, 15, OuterCategory.JACKET, 4),
    OuterSuitability(10, 18, OuterCategory.LIGHT_JACKET, 3),
    OuterSuitability(12, 20, OuterCategory.CARDIGAN, 2),
    OuterSuitability(15, 22, OuterCategory.LIGHT_CARDIGAN, 1),
)


def suitable_outer(temperature: float) -> OuterCategory | None:
    matches = [entry for entry in OUTER_SUITABILITY if entry.contains(temperature)]
    if not matches:
        return None
    return min(matches, key=lambda entry: entry.priority).outer
