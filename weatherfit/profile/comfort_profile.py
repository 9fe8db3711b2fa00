"""Per-user calibration profile and its validation rules."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from weatherfit.common.errors import InvalidProfile

MIN_COMFORT_TEMPERATURE = 10
MAX_COMFORT_TEMPERATURE = 30
NEUTRAL_COMFORT_TEMPERATURE = 20
TEMP_CORRECTION_PER_DEGREE = 0.5

# Accepted at setup time.
SETUP_MIN_WEIGHT = 1
SETUP_MAX_WEIGHT = 100
# Every later edit, learning included, is clamped into this range.
UPDATE_MIN_WEIGHT = 25
UPDATE_MAX_WEIGHT = 75
NEUTRAL_WEIGHT = 50

MAX_PRIORITIES = 2
FIRST_PRIORITY_PENALTY = 0.3
SECOND_PRIORITY_PENALTY = 0.5


class Priority(str, Enum):
    """Weather elements a user can flag as most distressing."""

    HEAT = "heat"
    COLD = "cold"
    HUMIDITY = "humidity"
    WIND = "wind"
    UV = "uv"
    POLLUTION = "pollution"


class ReactionLevel(str, Enum):
    """Self-reported reaction strength for skin (sun) and humidity."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Element(str, Enum):
    """The five scored weather elements."""

    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    WIND = "wind"
    UV = "uv"
    AIR_QUALITY = "air_quality"


class ElementWeights(BaseModel):
    """Importance multipliers per element; 50 is neutral."""

    model_config = ConfigDict(frozen=True, strict=True)

    temperature: int = Field(default=NEUTRAL_WEIGHT, ge=SETUP_MIN_WEIGHT, le=SETUP_MAX_WEIGHT)
    humidity: int = Field(default=NEUTRAL_WEIGHT, ge=SETUP_MIN_WEIGHT, le=SETUP_MAX_WEIGHT)
    wind: int = Field(default=NEUTRAL_WEIGHT, ge=SETUP_MIN_WEIGHT, le=SETUP_MAX_WEIGHT)
    uv: int = Field(default=NEUTRAL_WEIGHT, ge=SETUP_MIN_WEIGHT, le=SETUP_MAX_WEIGHT)
    air_quality: int = Field(default=NEUTRAL_WEIGHT, ge=SETUP_MIN_WEIGHT, le=SETUP_MAX_WEIGHT)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidProfile(f"invalid element weights: {exc}") from exc

    def get(self, element: Element | str) -> int:
        return getattr(self, Element(element).value)

    def as_dict(self) -> dict[str, int]:
        return {element.value: self.get(element) for element in Element}


_PATCH_WEIGHT = TypeAdapter(Annotated[int, Field(strict=True, ge=SETUP_MIN_WEIGHT, le=SETUP_MAX_WEIGHT)])


def _clamp_weight(name: str, value: int) -> int:
    """Validate a patched weight against [1, 100], then clamp it to [25, 75]."""

    try:
        checked = _PATCH_WEIGHT.validate_python(value)
    except ValidationError as exc:
        raise InvalidProfile(f"invalid {name} weight: {exc}") from exc
    return max(UPDATE_MIN_WEIGHT, min(UPDATE_MAX_WEIGHT, checked))


class ComfortProfile(BaseModel):
    """Immutable calibration state of one user.

    Profiles are never mutated: explicit edits and learning steps produce a
    new instance through :meth:`with_updates`.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    comfort_temperature: int = Field(
        default=NEUTRAL_COMFORT_TEMPERATURE,
        ge=MIN_COMFORT_TEMPERATURE,
        le=MAX_COMFORT_TEMPERATURE,
    )
    weights: ElementWeights = Field(default_factory=ElementWeights)
    priorities: tuple[Priority, ...] = Field(default=(), strict=False)
    skin_reaction: ReactionLevel | None = Field(default=None, strict=False)
    humidity_reaction: ReactionLevel | None = Field(default=None, strict=False)
    setup_completed: bool = False

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidProfile(f"invalid comfort profile: {exc}") from exc

    @field_validator("priorities")
    @classmethod
    def _distinct_priorities(cls, value: tuple[Priority, ...]) -> tuple[Priority, ...]:
        if len(set(value)) != len(value):
            raise ValueError("priorities must be distinct")
        if len(value) > MAX_PRIORITIES:
            raise ValueError(f"at most {MAX_PRIORITIES} priorities are allowed, got {len(value)}")
        return value

    @classmethod
    def create_from_setup(
        cls,
        *,
        comfort_temperature: int,
        priorities: Iterable[Priority | str] = (),
        skin_reaction: ReactionLevel | str | None = None,
        humidity_reaction: ReactionLevel | str | None = None,
        temperature_weight: int = NEUTRAL_WEIGHT,
        humidity_weight: int = NEUTRAL_WEIGHT,
        wind_weight: int = NEUTRAL_WEIGHT,
        uv_weight: int = NEUTRAL_WEIGHT,
        air_quality_weight: int = NEUTRAL_WEIGHT,
    ) -> "ComfortProfile":
        """Create the initial profile when a user completes onboarding.

        Weights are validated against [1, 100] and stored as given.
        """

        weights = ElementWeights(
            temperature=temperature_weight,
            humidity=humidity_weight,
            wind=wind_weight,
            uv=uv_weight,
            air_quality=air_quality_weight,
        )
        return cls(
            comfort_temperature=comfort_temperature,
            weights=weights,
            priorities=tuple(priorities),
            skin_reaction=skin_reaction,
            humidity_reaction=humidity_reaction,
            setup_completed=True,
        )

    def with_updates(
        self,
        *,
        comfort_temperature: int | None = None,
        priorities: Iterable[Priority | str] | None = None,
        skin_reaction: ReactionLevel | str | None = None,
        humidity_reaction: ReactionLevel | str | None = None,
        temperature_weight: int | None = None,
        humidity_weight: int | None = None,
        wind_weight: int | None = None,
        uv_weight: int | None = None,
        air_quality_weight: int | None = None,
        setup_completed: bool | None = None,
    ) -> "ComfortProfile":
        """Return a validated copy with the non-``None`` fields replaced.

        Patched weights must lie in [1, 100] and are then clamped to [25, 75].
        """

        weight_patch: dict[str, int] = {}
        for name, value in (
            ("temperature", temperature_weight),
            ("humidity", humidity_weight),
            ("wind", wind_weight),
            ("uv", uv_weight),
            ("air_quality", air_quality_weight),
        ):
            if value is not None:
                weight_patch[name] = _clamp_weight(name, value)

        changes: dict[str, object] = {}
        if weight_patch:
            changes["weights"] = ElementWeights(**{**self.weights.as_dict(), **weight_patch})
        if comfort_temperature is not None:
            changes["comfort_temperature"] = comfort_temperature
        if priorities is not None:
            changes["priorities"] = tuple(priorities)
        if skin_reaction is not None:
            changes["skin_reaction"] = skin_reaction
        if humidity_reaction is not None:
            changes["humidity_reaction"] = humidity_reaction
        if setup_completed is not None:
            changes["setup_completed"] = setup_completed
        if not changes:
            return self
        current = {name: getattr(self, name) for name in type(self).model_fields}
        return type(self)(**{**current, **changes})

    @property
    def personal_temp_correction(self) -> float:
        return (self.comfort_temperature - NEUTRAL_COMFORT_TEMPERATURE) * TEMP_CORRECTION_PER_DEGREE

    @property
    def first_priority(self) -> Priority | None:
        return self.priorities[0] if self.priorities else None

    def is_priority(self, priority: Priority | str) -> bool:
        return Priority(priority) in self.priorities

    def priority_penalty(self, priority: Priority | str) -> float:
        """Score multiplier applied when ``priority`` is triggered."""

        priority = Priority(priority)
        if priority not in self.priorities:
            return 1.0
        if self.priorities.index(priority) == 0:
            return FIRST_PRIORITY_PENALTY
        return SECOND_PRIORITY_PENALTY
