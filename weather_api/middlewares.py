"""Middlewares for the Weather API gateway.

This module provides middleware functions for:
- CORS headers and OPTIONS preflight short-circuit
- JSON structured request logging with request_id correlation
- Recovery from unexpected handler exceptions
"""

import json
import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Optional

from fastapi import Request, Response, status
from starlette.responses import JSONResponse

from weather_api.config import settings
from weather_api.errors import create_error_response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"

# Set on every response, preflight included
CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

INTERNAL_ERROR_MESSAGE = "internal server error"


def get_client_ip(request: Request) -> Optional[str]:
    """Return the client address, preferring proxy headers.

    Order: X-Real-IP, then the first X-Forwarded-For entry, then the peer
    address of the connection.
    """
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    if request.client:
        return request.client.host
    return None


async def cors_middleware(request: Request, call_next):
    """Apply JSON content type and CORS headers to every response.

    OPTIONS requests are answered with an empty 200 before routing, so
    preflight works on any path.

    Args:
        request: The incoming HTTP request
        call_next: The next middleware or route handler

    Returns:
        Response with CORS headers set
    """
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

    response: Response = await call_next(request)
    for header_name, header_value in CORS_HEADERS.items():
        if header_name == "Content-Type":
            # Leave non-JSON content (OpenAPI docs) alone
            response.headers.setdefault(header_name, header_value)
        else:
            response.headers[header_name] = header_value
    return response


async def recovery_middleware(request: Request, call_next):
    """Convert an unexpected handler exception into a 500 for that request only.

    The traceback is logged; the client only sees a generic message.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=create_error_response(INTERNAL_ERROR_MESSAGE),
        )


async def json_logging_middleware(request: Request, call_next):
    """Log every request as one JSON line on stdout.

    Generates or propagates the request id from the X-Request-Id header and
    echoes it on the response. Query strings are not logged.

    Args:
        request: The incoming HTTP request
        call_next: The next middleware or route handler

    Returns:
        Response with X-Request-Id header added
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    request.state.request_id = request_id

    start_time = time.time()
    response: Response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000

    log_entry = {
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "service": settings.service_name,
        "request_id": request_id,
        "remote_addr": get_client_ip(request),
        "method": request.method,
        "path": request.url.path,
        "status": response.status_code,
        "duration_ms": round(duration_ms, 2),
    }
    print(json.dumps(log_entry), flush=True)

    response.headers[REQUEST_ID_HEADER] = request_id
    return response
