"""Pydantic schemas for the Weather API gateway."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class WeatherResponse(BaseModel):
    """Normalized weather for a zip code.

    Built once per request and never mutated.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "zip_code": "10001",
                "location": "New York",
                "temperature": 72.5,
                "description": "partly cloudy (demo data)",
                "humidity": 65,
                "wind_speed": 8.2,
            }
        },
    )

    zip_code: str = Field(..., description="Zip code exactly as requested")
    location: str = Field(..., description="Display name of the location")
    temperature: float = Field(..., description="Temperature in fahrenheit")
    description: str = Field(..., description="Weather condition text")
    humidity: int = Field(..., description="Humidity as percentage")
    wind_speed: float = Field(..., description="Wind speed in miles per hour")


class WeatherReading(BaseModel):
    """Weather returned by a provider, before the zip code is attached."""

    model_config = ConfigDict(frozen=True)

    location: str
    temperature: float
    description: str
    humidity: int
    wind_speed: float


class OpenWeatherModel(BaseModel):
    """Lenient decoding: JSON null anywhere leaves the zero value in place."""

    @model_validator(mode="before")
    @classmethod
    def _null_object_is_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("*", mode="before")
    @classmethod
    def _null_field_is_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class OpenWeatherMain(OpenWeatherModel):
    """``main`` block of an OpenWeatherMap response."""

    temp: float = 0.0
    humidity: int = 0


class OpenWeatherCondition(OpenWeatherModel):
    """Entry of the ``weather`` list of an OpenWeatherMap response."""

    description: str = ""


class OpenWeatherWind(OpenWeatherModel):
    """``wind`` block of an OpenWeatherMap response."""

    speed: float = 0.0


class OpenWeatherPayload(OpenWeatherModel):
    """Subset of the OpenWeatherMap current weather response we read.

    Missing or null fields fall back to zero values; unknown fields are
    ignored. A null body decodes as an empty payload.
    """

    name: str = ""
    main: OpenWeatherMain = Field(default_factory=OpenWeatherMain)
    weather: list[OpenWeatherCondition] = Field(default_factory=list)
    wind: OpenWeatherWind = Field(default_factory=OpenWeatherWind)


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., json_schema_extra={"example": "healthy"})
    service: str = Field(..., json_schema_extra={"example": "weather-api"})


class ErrorResponse(BaseModel):
    """Error envelope used by every failing request."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": "zip_code parameter is required"}}
    )

    error: str = Field(..., description="Human-readable error message")


class ServiceInfo(BaseModel):
    """Root endpoint documentation."""

    service: str
    endpoints: dict[str, str]
    example: str
    supported_zip_codes: list[str]
