"""Pytest configuration for Weather API tests.

This module configures pytest to:
1. Load .env.test before the application settings are imported
2. Provide clients wired to demo or fake-provider resolvers
"""

from pathlib import Path
from typing import Generator, Optional

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

from weather_api.errors import UpstreamError
from weather_api.schemas import WeatherReading


def pytest_configure(config):
    """Load .env.test so tests never hit the real weather API."""
    project_root = Path(__file__).parent.parent
    env_test_path = project_root / ".env.test"

    if env_test_path.exists():
        load_dotenv(env_test_path, override=True)
    else:
        print(f"\n⚠️  Warning: {env_test_path} not found")


class FakeWeatherProvider:
    """In-memory WeatherProvider recording the zip codes it is asked for."""

    def __init__(
        self,
        reading: Optional[WeatherReading] = None,
        error: Optional[str] = None,
    ):
        self.reading = reading or WeatherReading(
            location="Springfield",
            temperature=58.3,
            description="light rain",
            humidity=81,
            wind_speed=12.6,
        )
        self.error = error
        self.calls: list[str] = []

    async def fetch(self, zip_code: str) -> WeatherReading:
        self.calls.append(zip_code)
        if self.error:
            raise UpstreamError(self.error)
        return self.reading


@pytest.fixture
def fake_provider() -> FakeWeatherProvider:
    """Fake provider returning a fixed reading."""
    return FakeWeatherProvider()


@pytest.fixture
def failing_provider() -> FakeWeatherProvider:
    """Fake provider reporting an upstream 500."""
    return FakeWeatherProvider(error="weather API returned status: 500")


def _client_with_resolver(resolver) -> Generator[TestClient, None, None]:
    from weather_api.api import get_weather_resolver
    from weather_api.main import app

    app.dependency_overrides[get_weather_resolver] = lambda: resolver
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(get_weather_resolver, None)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client serving demo data."""
    from weather_api.resolver import WeatherResolver

    yield from _client_with_resolver(WeatherResolver())


@pytest.fixture
def live_client(fake_provider: FakeWeatherProvider) -> Generator[TestClient, None, None]:
    """Test client in live mode, backed by the fake provider."""
    from weather_api.resolver import WeatherResolver

    yield from _client_with_resolver(WeatherResolver(fake_provider))


@pytest.fixture
def failing_client(failing_provider: FakeWeatherProvider) -> Generator[TestClient, None, None]:
    """Test client whose provider reports an upstream 500."""
    from weather_api.resolver import WeatherResolver

    yield from _client_with_resolver(WeatherResolver(failing_provider))
