"""Static fixtures for demo mode weather data."""

from types import MappingProxyType

from weather_api.validation import zip5

# zip code -> "City,State,Country"
DEMO_LOCATIONS = MappingProxyType(
    {
        "10001": "New York,NY,US",
        "90210": "Beverly Hills,CA,US",
        "60601": "Chicago,IL,US",
        "94102": "San Francisco,CA,US",
        "77001": "Houston,TX,US",
        "33101": "Miami,FL,US",
        "98101": "Seattle,WA,US",
        "02101": "Boston,MA,US",
        "30301": "Atlanta,GA,US",
        "75201": "Dallas,TX,US",
        "20001": "Washington,DC,US",
        "89101": "Las Vegas,NV,US",
        "80201": "Denver,CO,US",
        "85001": "Phoenix,AZ,US",
        "19101": "Philadelphia,PA,US",
    }
)

SUPPORTED_ZIP_CODES = tuple(DEMO_LOCATIONS)

UNKNOWN_LOCATION = "Unknown Location"

DEMO_TEMPERATURE = 72.5
DEMO_DESCRIPTION = "partly cloudy (demo data)"
DEMO_HUMIDITY = 65
DEMO_WIND_SPEED = 8.2


def get_demo_location(zip_code: str) -> str:
    """Return the display city for a zip code, ignoring any ``-XXXX`` suffix.

    Args:
        zip_code: Validated zip code

    Returns:
        City name, or "Unknown Location" when the zip code is not in the table
    """
    city = DEMO_LOCATIONS.get(zip5(zip_code))
    if city is None:
        return UNKNOWN_LOCATION
    return city.split(",")[0]


def get_weather_fixtures(zip_code: str) -> dict:
    """Return static demo weather data for a zip code.

    Only the location depends on the zip code; every other field is a fixed
    placeholder. The zip code is echoed exactly, extension included.

    Args:
        zip_code: Validated zip code

    Returns:
        Weather data dictionary matching the WeatherResponse schema
    """
    return {
        "zip_code": zip_code,
        "location": get_demo_location(zip_code),
        "temperature": DEMO_TEMPERATURE,
        "description": DEMO_DESCRIPTION,
        "humidity": DEMO_HUMIDITY,
        "wind_speed": DEMO_WIND_SPEED,
    }
