"""Raw weather readings consumed by the comfort core."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from weatherfit.common.errors import InvalidObservation

MIN_TEMPERATURE = -50.0
MAX_TEMPERATURE = 60.0


class WeatherObservation(BaseModel):
    """One ingestion cycle worth of weather and air-quality readings.

    Units: temperature in °C, humidity in %, wind speed in m/s, particulate
    matter in µg/m³ and hourly rain in mm.
    """

    model_config = ConfigDict(frozen=True, strict=True, allow_inf_nan=False)

    temperature: float = Field(ge=MIN_TEMPERATURE, le=MAX_TEMPERATURE)
    humidity: float = Field(ge=0, le=100)
    wind_speed: float = Field(ge=0)
    uv_index: float = Field(default=0.0, ge=0)
    pm25: float = Field(default=0.0, ge=0)
    pm10: float = Field(default=0.0, ge=0)
    rain_1h: float = Field(default=0.0, ge=0)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidObservation(f"invalid weather observation: {exc}") from exc

    @property
    def has_rain(self) -> bool:
        return self.rain_1h > 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "WeatherObservation":
        """Build an observation from a collaborator payload.

        Optional readings that the provider did not report (``None`` or absent)
        are treated as zero.
        """

        readings = {name: value for name, value in data.items() if name in cls.model_fields and value is not None}
        return cls(**readings)
