"""
Analytics pipeline: fetch wallet data and derive the analytics payload.

build_wallet_stats is the pure part (normalize -> classify/aggregate ->
estimate -> assemble). fetch_wallet_stats validates the address, runs the
four upstream calls concurrently and hands their results to
build_wallet_stats. Any failed call fails the whole request.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import httpx

from backend_arcwallet.analytics.aggregator import aggregate_transactions
from backend_arcwallet.analytics.cost_estimator import CostAssumptions, estimate_gas_savings
from backend_arcwallet.analytics.response_builder import build_response
from backend_arcwallet.analytics.units import parse_hex_quantity
from backend_arcwallet.arcwallet_logging import bind_address
from backend_arcwallet.core.exceptions import validate_address
from backend_arcwallet.upstream import (
    get_balance,
    get_token_transfers,
    get_transaction_count,
    get_transactions,
)

if TYPE_CHECKING:
    from backend_arcwallet.config.settings import Settings


def build_wallet_stats(
    address: str,
    balance_hex: Any,
    nonce_hex: Any,
    transactions: list[dict[str, Any]] | None,
    token_transfers: list[dict[str, Any]] | None,
    assumptions: CostAssumptions | None = None,
) -> dict[str, Any]:
    """
    Derive the analytics payload from already-fetched upstream data.

    balance_hex / nonce_hex are JSON-RPC hex quantities (None -> 0).
    transactions are explorer txlist records, ascending by timeStamp.
    Raw transaction and transfer lists are passed through unchanged.
    """
    transactions = transactions or []
    token_transfers = token_transfers or []
    aggregates = aggregate_transactions(transactions)
    gas = estimate_gas_savings(
        aggregates.total_gas_used,
        aggregates.total_gas_cost_wei,
        assumptions,
    )
    return build_response(
        address=address,
        balance_wei=parse_hex_quantity(balance_hex),
        nonce=parse_hex_quantity(nonce_hex),
        aggregates=aggregates,
        gas=gas,
        transactions=transactions,
        token_transfers=token_transfers,
    )


async def fetch_wallet_stats(
    address: str | None,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """
    Validate address, fetch balance/nonce/txlist/tokentx concurrently, build stats.

    Raises AddressValidationError before any network call for a bad address.
    Upstream exceptions propagate unchanged (no partial result).
    """
    address = validate_address(address)
    if settings is None:
        from backend_arcwallet.config import get_settings

        settings = get_settings()

    log = bind_address(address, __name__)
    log.info("wallet_fetch_start")
    opts = {"timeout": settings.timeout_sec, "max_retries": settings.max_retries}

    async def _gather(http: httpx.AsyncClient) -> tuple[Any, Any, Any, Any]:
        return await asyncio.gather(
            get_balance(http, settings.rpc_url, address, **opts),
            get_transaction_count(http, settings.rpc_url, address, **opts),
            get_transactions(http, settings.explorer_api_url, address, **opts),
            get_token_transfers(http, settings.explorer_api_url, address, **opts),
        )

    if client is not None:
        balance_hex, nonce_hex, transactions, token_transfers = await _gather(client)
    else:
        async with httpx.AsyncClient() as http:
            balance_hex, nonce_hex, transactions, token_transfers = await _gather(http)

    result = build_wallet_stats(
        address,
        balance_hex,
        nonce_hex,
        transactions,
        token_transfers,
        settings.cost_assumptions,
    )
    log.info(
        "wallet_fetch_done",
        tx_count=result["totalTransactions"],
        token_transfers=len(result["tokenTransfers"]),
    )
    return result
