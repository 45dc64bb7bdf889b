"""
Shared HTTP helper for upstream calls: timeout and 429 backoff.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from backend_arcwallet.arcwallet_logging import get_logger

logger = get_logger(__name__)

REQUEST_TIMEOUT = 30.0
MAX_RETRIES = 3
RETRY_BACKOFF = 1.0


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    timeout: float = REQUEST_TIMEOUT,
    max_retries: int = MAX_RETRIES,
    backoff: float = RETRY_BACKOFF,
    **kwargs: Any,
) -> httpx.Response:
    """
    Send a request, retrying 429 responses with exponential backoff.

    Transport errors propagate immediately. After max_retries rate-limited
    attempts the last 429 response is returned for the caller to raise on.
    """
    attempts = max(1, max_retries)
    for attempt in range(attempts - 1):
        response = await client.request(method, url, timeout=timeout, **kwargs)
        if response.status_code != 429:
            return response
        logger.warning("upstream_rate_limited", url=url, attempt=attempt + 1)
        await asyncio.sleep(backoff * (2 ** attempt))
    response = await client.request(method, url, timeout=timeout, **kwargs)
    if response.status_code == 429:
        logger.warning("upstream_rate_limited", url=url, attempt=attempts)
    return response
