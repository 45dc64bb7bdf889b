"""
Arc JSON-RPC client: account balance and nonce.

Returns the raw hex `result` string (or None when the node returns no
result); hex decoding happens in analytics.units.
"""

from __future__ import annotations

from typing import Any

import httpx

from backend_arcwallet.arcwallet_logging import get_logger
from backend_arcwallet.core.exceptions import UpstreamError
from backend_arcwallet.upstream.http import MAX_RETRIES, REQUEST_TIMEOUT, request_with_retry

logger = get_logger(__name__)

BLOCK_TAG = "latest"


async def call_rpc(
    client: httpx.AsyncClient,
    rpc_url: str,
    method: str,
    params: list[Any],
    *,
    timeout: float = REQUEST_TIMEOUT,
    max_retries: int = MAX_RETRIES,
) -> Any:
    """POST one JSON-RPC 2.0 request and return its `result` member."""
    body = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
    r = await request_with_retry(
        client, "POST", rpc_url, json=body, timeout=timeout, max_retries=max_retries
    )
    try:
        r.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("rpc_call_failed", method=method, status=r.status_code)
        raise UpstreamError(f"RPC {method} failed with HTTP {r.status_code}", source="rpc") from e
    data = r.json()
    if isinstance(data, dict) and data.get("error"):
        err = data["error"]
        message = err.get("message") if isinstance(err, dict) else str(err)
        logger.warning("rpc_call_failed", method=method, error=message)
        raise UpstreamError(f"RPC {method} error: {message}", source="rpc")
    return data.get("result") if isinstance(data, dict) else None


async def get_balance(client: httpx.AsyncClient, rpc_url: str, address: str, **kwargs: Any) -> str | None:
    """eth_getBalance -> hex string of base units, or None."""
    return await call_rpc(client, rpc_url, "eth_getBalance", [address, BLOCK_TAG], **kwargs)


async def get_transaction_count(client: httpx.AsyncClient, rpc_url: str, address: str, **kwargs: Any) -> str | None:
    """eth_getTransactionCount -> hex nonce, or None."""
    return await call_rpc(client, rpc_url, "eth_getTransactionCount", [address, BLOCK_TAG], **kwargs)
