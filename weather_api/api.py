"""API routes for the Weather API gateway.

The router is mounted twice by the application: at the root and under
``/api/v1``.
"""

from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from weather_api.config import settings
from weather_api.resolver import WeatherResolver, build_resolver
from weather_api.schemas import ErrorResponse, HealthCheckResponse, WeatherResponse
from weather_api.validation import validate_zip_code

router = APIRouter()


@lru_cache
def get_weather_resolver() -> WeatherResolver:
    """Return the process-wide resolver built from settings."""
    return build_resolver(settings)


@router.get(
    "/weather",
    response_model=WeatherResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid zip code or upstream failure"},
    },
    tags=["weather"],
)
async def get_weather(
    request: Request,
    zip_code: Optional[str] = Query(
        None,
        description="US zip code, XXXXX or XXXXX-XXXX",
        examples=["10001", "10001-1234"],
    ),
    resolver: WeatherResolver = Depends(get_weather_resolver),
) -> WeatherResponse:
    """Get current weather for a US zip code.

    In demo mode: returns fixed placeholder values with the city from the
    demo table. In live mode: calls OpenWeatherMap with OPENWEATHER_API_KEY.

    Raises:
        ZipCodeValidationError: If zip_code is missing or malformed
        UpstreamError: If the weather provider call fails
    """
    # First occurrence wins when zip_code is repeated
    values = request.query_params.getlist("zip_code")
    zip_code = validate_zip_code(values[0] if values else None)
    return await resolver.resolve(zip_code)


@router.get("/health", response_model=HealthCheckResponse, tags=["health"])
async def health_check() -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(status="healthy", service=settings.service_name)
