"""
HTTP middleware — CORS headers and request logging.

Every response carries permissive CORS headers; OPTIONS preflights are answered
here with an empty 200 so they never reach routing.
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable

from fastapi import Request, Response

from backend_arcwallet.arcwallet_logging import get_logger

logger = get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def cors_and_logging_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    start = time.perf_counter()
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        response = await call_next(request)
    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    return response
