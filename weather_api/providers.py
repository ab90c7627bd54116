"""Upstream weather providers.

A provider turns a 5-digit zip code into a WeatherReading. The resolver only
depends on the WeatherProvider protocol so tests can substitute a fake
without network access.
"""

import logging
from typing import Optional, Protocol

import httpx
from pydantic import ValidationError

from weather_api.errors import UpstreamError
from weather_api.schemas import OpenWeatherPayload, WeatherReading

logger = logging.getLogger(__name__)

OPENWEATHER_API_URL = "http://api.openweathermap.org/data/2.5/weather"

# Used when the provider returns no condition entry
DEFAULT_DESCRIPTION = "clear"


class WeatherProvider(Protocol):
    """Capability to fetch current weather for a zip code."""

    async def fetch(self, zip_code: str) -> WeatherReading:
        """Fetch current weather.

        Raises:
            UpstreamError: If the provider fails to deliver data
        """
        ...


class OpenWeatherProvider:
    """Weather provider backed by the OpenWeatherMap current weather API.

    Issues a single GET per call: no retry, no caching, and the transport's
    default timeout.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the provider.

        Args:
            api_key: OpenWeatherMap API key (never logged)
            base_url: Current weather endpoint
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.api_key = api_key
        self.base_url = base_url
        self.transport = transport

    def _build_params(self, zip_code: str) -> dict[str, str]:
        return {
            "zip": f"{zip_code},US",
            "appid": self.api_key,
            "units": "imperial",  # Fahrenheit, miles per hour
        }

    async def fetch(self, zip_code: str) -> WeatherReading:
        """Fetch current weather for a zip code from OpenWeatherMap.

        Args:
            zip_code: Zip code sent to the provider as ``<zip_code>,US``

        Returns:
            WeatherReading with the provider values, unconverted

        Raises:
            UpstreamError: On transport failure, non-200 status, unreadable
                body or unparseable payload
        """
        params = self._build_params(zip_code)

        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                async with client.stream("GET", self.base_url, params=params) as response:
                    if response.status_code != httpx.codes.OK:
                        logger.warning(
                            "Weather API returned status %s for zip %s",
                            response.status_code,
                            zip_code,
                        )
                        raise UpstreamError(
                            f"weather API returned status: {response.status_code}"
                        )

                    try:
                        body = await response.aread()
                    except httpx.HTTPError as e:
                        logger.warning("Failed to read weather API response: %s", e)
                        raise UpstreamError(f"failed to read response body: {e}") from e
            except httpx.HTTPError as e:
                logger.warning("Failed to reach weather API: %s", e)
                raise UpstreamError(f"failed to fetch weather data: {e}") from e

        return self._parse(body)

    @staticmethod
    def _parse(body: bytes) -> WeatherReading:
        """Map an OpenWeatherMap payload to a WeatherReading."""
        try:
            payload = OpenWeatherPayload.model_validate_json(body)
        except ValidationError as e:
            logger.warning("Failed to parse weather API response: %s", e)
            raise UpstreamError(f"failed to parse weather data: {e}") from e

        description = DEFAULT_DESCRIPTION
        if payload.weather:
            description = payload.weather[0].description

        return WeatherReading(
            location=payload.name,
            temperature=payload.main.temp,
            description=description,
            humidity=payload.main.humidity,
            wind_speed=payload.wind.speed,
        )
