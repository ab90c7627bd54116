"""Weather API - Main application.

Gateway translating a US zip code into current weather data, either from
a static demo table or from OpenWeatherMap.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from weather_api import __version__
from weather_api.api import router
from weather_api.config import settings
from weather_api.errors import WeatherAPIError, create_error_response
from weather_api.fixtures import SUPPORTED_ZIP_CODES
from weather_api.middlewares import (
    cors_middleware,
    json_logging_middleware,
    recovery_middleware,
)
from weather_api.schemas import ServiceInfo

logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"

ENDPOINTS = {
    "GET /weather?zip_code=XXXXX": "Get weather by zip code (5 digits)",
    "GET /health": "Health check endpoint",
    f"GET {API_V1_PREFIX}/weather?zip_code=XXXXX": "Versioned weather endpoint",
    f"GET {API_V1_PREFIX}/health": "Versioned health check endpoint",
}

app = FastAPI(
    title="Weather API Server",
    version=__version__,
    description="Current weather by US zip code (demo data or OpenWeatherMap)",
    redirect_slashes=False,
)


@app.exception_handler(WeatherAPIError)
async def weather_api_exception_handler(request: Request, exc: WeatherAPIError):
    """Render client-facing errors as ``{"error": message}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.message),
    )


# Apply middlewares (order matters: last added = first executed)
# 1. Recovery (innermost, turns handler crashes into 500)
app.middleware("http")(recovery_middleware)
# 2. CORS headers and OPTIONS preflight
app.middleware("http")(cors_middleware)
# 3. JSON logging (first to execute, measures total time)
app.middleware("http")(json_logging_middleware)


app.include_router(router)
app.include_router(router, prefix=API_V1_PREFIX)


@app.get("/", response_model=ServiceInfo, tags=["info"])
async def root() -> ServiceInfo:
    """Root endpoint documenting the available routes."""
    return ServiceInfo(
        service="Weather API Server",
        endpoints=ENDPOINTS,
        example="GET /weather?zip_code=10001",
        supported_zip_codes=list(SUPPORTED_ZIP_CODES),
    )


def run() -> None:
    """Run the server with uvicorn on the configured host and port.

    Failing to bind the port is fatal: uvicorn exits before serving.
    """
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "Starting weather server on port %s (%s mode)",
        settings.port,
        "demo" if settings.demo_mode else "live",
    )
    for endpoint in ENDPOINTS:
        logger.info("  %s", endpoint)

    uvicorn.run(
        "weather_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.environment == "development",
    )


if __name__ == "__main__":
    run()
