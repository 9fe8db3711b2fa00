"""Feedback vocabulary and the event recorded when a user rates an outfit."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from weatherfit.common.errors import InvalidFeedback

MIN_TEMPERATURE = -50.0
MAX_TEMPERATURE = 60.0
MIN_WEATHER_SCORE = 0
MAX_WEATHER_SCORE = 100


class FeedbackType(str, Enum):
    """How the recommended outfit felt, from freezing to overheating."""

    TOO_COLD = "TOO_COLD"
    SLIGHTLY_COLD = "SLIGHTLY_COLD"
    PERFECT = "PERFECT"
    SLIGHTLY_HOT = "SLIGHTLY_HOT"
    TOO_HOT = "TOO_HOT"

    @property
    def score(self) -> int:
        """Signed magnitude: negative for cold, positive for hot."""

        return _SCORES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def is_cold(self) -> bool:
        return self.score < 0

    @property
    def is_hot(self) -> bool:
        return self.score > 0

    @property
    def is_strong(self) -> bool:
        return abs(self.score) == 2

    @property
    def intensity(self) -> int:
        return abs(self.score)

    @classmethod
    def from_string(cls, value: str) -> "FeedbackType":
        try:
            return cls(value.strip().upper())
        except ValueError as exc:
            raise InvalidFeedback(f"unknown feedback type: {value!r}") from exc

    @classmethod
    def from_score(cls, score: int) -> "FeedbackType":
        for feedback_type in cls:
            if feedback_type.score == score:
                return feedback_type
        raise InvalidFeedback(f"feedback score must be within [-2, 2], got {score!r}")


_SCORES = {
    FeedbackType.TOO_COLD: -2,
    FeedbackType.SLIGHTLY_COLD: -1,
    FeedbackType.PERFECT: 0,
    FeedbackType.SLIGHTLY_HOT: 1,
    FeedbackType.TOO_HOT: 2,
}
_DESCRIPTIONS = {
    FeedbackType.TOO_COLD: "Too cold",
    FeedbackType.SLIGHTLY_COLD: "A little cold",
    FeedbackType.PERFECT: "Just right",
    FeedbackType.SLIGHTLY_HOT: "A little warm",
    FeedbackType.TOO_HOT: "Too hot",
}


class FeedbackEvent(BaseModel):
    """One rating together with the conditions it was given under.

    The feels-like temperature is whatever the comfort model reported, so
    only the actual temperature is bounded to the observation range.
    """

    model_config = ConfigDict(frozen=True, strict=True, allow_inf_nan=False)

    feedback_type: FeedbackType = Field(strict=False)
    feels_like_temperature: float
    actual_temperature: float = Field(ge=MIN_TEMPERATURE, le=MAX_TEMPERATURE)
    weather_score: int = Field(ge=MIN_WEATHER_SCORE, le=MAX_WEATHER_SCORE)
    confirmed: bool = True
    comment: str | None = None

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidFeedback(f"invalid feedback event: {exc}") from exc

    @field_validator("feedback_type", mode="before")
    @classmethod
    def _parse_feedback_type(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, FeedbackType):
            return FeedbackType.from_string(value)
        return value

    @property
    def has_comment(self) -> bool:
        return bool(self.comment and self.comment.strip())

    @property
    def temperature_difference(self) -> float:
        """Feels-like minus actual temperature at submission time."""

        return self.feels_like_temperature - self.actual_temperature
