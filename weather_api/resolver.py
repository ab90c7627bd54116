"""Resolve a zip code into a WeatherResponse (demo table or live provider)."""

from typing import Optional

from weather_api.config import Settings
from weather_api.fixtures import get_weather_fixtures
from weather_api.providers import OpenWeatherProvider, WeatherProvider
from weather_api.schemas import WeatherResponse
from weather_api.validation import zip5


class WeatherResolver:
    """Orchestrates demo lookups and provider calls.

    Without a provider the resolver runs in demo mode and never fails. With
    a provider, failures propagate as UpstreamError.
    """

    def __init__(self, provider: Optional[WeatherProvider] = None):
        self.provider = provider

    @property
    def demo_mode(self) -> bool:
        return self.provider is None

    async def resolve(self, zip_code: str) -> WeatherResponse:
        """Resolve weather for an already validated zip code.

        Args:
            zip_code: Zip code in ``XXXXX`` or ``XXXXX-XXXX`` form

        Returns:
            WeatherResponse echoing ``zip_code`` exactly

        Raises:
            UpstreamError: If the provider call fails (live mode only)
        """
        if self.provider is None:
            return WeatherResponse(**get_weather_fixtures(zip_code))

        reading = await self.provider.fetch(zip5(zip_code))
        return WeatherResponse(zip_code=zip_code, **reading.model_dump())


def build_resolver(settings: Settings) -> WeatherResolver:
    """Create a resolver for the configured mode."""
    if settings.demo_mode:
        return WeatherResolver()
    return WeatherResolver(
        OpenWeatherProvider(
            api_key=settings.openweather_api_key,
            base_url=settings.openweather_api_url,
        )
    )
