"""
FastAPI server — read-only wallet analytics API.

Exposes GET /api/wallet?address=... (and /api/wallet/{address}) returning
balance, volume, activity and gas comparison for an Arc testnet wallet.
Errors are returned as {"error": message}.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend_arcwallet import __version__
from backend_arcwallet.api_server.middleware import cors_and_logging_middleware
from backend_arcwallet.api_server.wallet_api import router as wallet_router
from backend_arcwallet.arcwallet_logging import get_logger

logger = get_logger(__name__)

MSG_METHOD_NOT_ALLOWED = "Method not allowed"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open one shared AsyncClient for upstream calls; close it on shutdown."""
    app.state.http_client = httpx.AsyncClient()
    logger.info("api_http_client_started")
    try:
        yield
    finally:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("api_http_client_closed")


app = FastAPI(
    title="Backend Arc Wallet API",
    description="Read-only wallet analytics for Arc testnet (balance, activity, gas comparison).",
    version=__version__,
    lifespan=lifespan,
)

app.middleware("http")(cors_and_logging_middleware)
app.include_router(wallet_router, prefix="/api", tags=["Wallet"])


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness check: API is up."""
    return {"status": "ok"}


@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Consistent {"error": ...} body for HTTP errors, including routing 404/405."""
    detail: Any = exc.detail
    if exc.status_code == 405:
        detail = MSG_METHOD_NOT_ALLOWED
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=getattr(exc, "headers", None),
    )
