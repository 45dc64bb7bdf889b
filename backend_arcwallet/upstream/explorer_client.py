"""
Blockscout explorer client: transaction and token-transfer history.

Uses the Etherscan-compatible `module=account` API with a single bounded
page (offset 10000, ascending). A response whose status is not "1" (which
includes "No transactions found") or an HTTP error status yields an empty
list. Transport errors and undecodable bodies propagate.
"""

from __future__ import annotations

from typing import Any

import httpx

from backend_arcwallet.arcwallet_logging import get_logger
from backend_arcwallet.upstream.http import MAX_RETRIES, REQUEST_TIMEOUT, request_with_retry

logger = get_logger(__name__)

ACTION_TXLIST = "txlist"
ACTION_TOKENTX = "tokentx"
PAGE_SIZE = 10000
END_BLOCK = 99999999


def history_params(address: str, action: str) -> dict[str, Any]:
    return {
        "module": "account",
        "action": action,
        "address": address,
        "startblock": 0,
        "endblock": END_BLOCK,
        "page": 1,
        "offset": PAGE_SIZE,
        "sort": "asc",
    }


async def fetch_account_history(
    client: httpx.AsyncClient,
    api_url: str,
    address: str,
    action: str,
    *,
    timeout: float = REQUEST_TIMEOUT,
    max_retries: int = MAX_RETRIES,
) -> list[dict[str, Any]]:
    """Return the explorer `result` list for action, or [] on HTTP error or status != "1"."""
    r = await request_with_retry(
        client,
        "GET",
        api_url,
        params=history_params(address, action),
        timeout=timeout,
        max_retries=max_retries,
    )
    if r.is_error:
        logger.warning(
            "explorer_status_not_ok",
            action=action,
            http_status=r.status_code,
            url=str(r.url),
        )
        return []
    data = r.json()
    if not isinstance(data, dict):
        return []
    result = data.get("result")
    if str(data.get("status")) == "1" and isinstance(result, list):
        return result
    logger.debug("explorer_status_not_ok", action=action, status=data.get("status"), message=data.get("message"))
    return []


async def get_transactions(client: httpx.AsyncClient, api_url: str, address: str, **kwargs: Any) -> list[dict[str, Any]]:
    return await fetch_account_history(client, api_url, address, ACTION_TXLIST, **kwargs)


async def get_token_transfers(client: httpx.AsyncClient, api_url: str, address: str, **kwargs: Any) -> list[dict[str, Any]]:
    return await fetch_account_history(client, api_url, address, ACTION_TOKENTX, **kwargs)
