"""Configuration for the Weather API gateway."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Weather API settings.

    Read once at startup from environment variables (or a local ``.env``).
    The absence of ``OPENWEATHER_API_KEY`` is not an error: it switches the
    service to demo mode.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Service settings
    service_name: str = "weather-api"
    environment: str = "production"
    log_level: str = "INFO"

    # Server settings
    host: str = "0.0.0.0"  # nosec B104 (binding to all interfaces for Docker)
    port: int = 8080

    # OpenWeatherMap configuration (live mode)
    openweather_api_key: Optional[str] = None
    openweather_api_url: str = "http://api.openweathermap.org/data/2.5/weather"

    @property
    def demo_mode(self) -> bool:
        """True when no upstream credential is configured."""
        return not self.openweather_api_key


settings = Settings()
