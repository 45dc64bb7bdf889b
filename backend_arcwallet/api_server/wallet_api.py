"""
FastAPI router: GET /wallet?address=0x... and GET /wallet/{address}.

Fetches balance, nonce and history from upstream on every call and returns
the analytics payload. 400 on missing/malformed address (no upstream
calls), 500 with the failure message when any upstream call fails.
"""

from __future__ import annotations

from typing import Any

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel, Field

from backend_arcwallet.analytics.analytics_pipeline import fetch_wallet_stats
from backend_arcwallet.arcwallet_logging import bind_address
from backend_arcwallet.config import Settings, get_settings
from backend_arcwallet.core.exceptions import AddressValidationError

router = APIRouter(prefix="/wallet", tags=["wallet"])


# -----------------------------------------------------------------------------
# Response models (field names are the frontend contract)
# -----------------------------------------------------------------------------


class GasSavings(BaseModel):
    arcGasUsed: str = Field(..., description="Gas paid on Arc (USDC, 4 dp)")
    ethereumEquivalent: str = Field(..., description="Same gas at the reference gas price (native units, 4 dp)")
    savedUSD: str = Field(..., description="Reference USD cost minus Arc cost, floored at 0 (2 dp)")
    savingsPercentage: str = Field(..., description="savedUSD / reference USD cost * 100 (1 dp)")


class UsdcStats(BaseModel):
    balance: str
    totalSpent: str
    averagePerTx: str
    largestTx: str


class PrivacyStats(BaseModel):
    """Fixed placeholder; no shielded-transaction detection."""

    privateTransactions: int
    publicTransactions: int
    privacyScore: str
    shieldedContracts: int


class ContractType(BaseModel):
    name: str
    count: int


class ActivityDay(BaseModel):
    date: str = Field(..., description="UTC date YYYY-MM-DD")
    transactions: int


class WalletStatsResponse(BaseModel):
    """GET /api/wallet response."""

    address: str
    balance: str = Field(..., description="Native balance, 4 dp")
    totalTransactions: int
    transactionsSent: int = Field(..., description="Account nonce")
    uniqueContracts: int
    totalVolume: str
    daysActive: int
    firstTransaction: str = Field(..., description="YYYY-MM-DD or N/A")
    lastTransaction: str = Field(..., description="YYYY-MM-DD or N/A")
    gasSavings: GasSavings
    usdcStats: UsdcStats
    privacyStats: PrivacyStats
    contractTypes: list[ContractType] = Field(default_factory=list)
    activityTimeline: list[ActivityDay] = Field(default_factory=list)
    transactions: list[dict[str, Any]] = Field(default_factory=list, description="Raw explorer txlist records")
    tokenTransfers: list[dict[str, Any]] = Field(default_factory=list, description="Raw explorer tokentx records")


class ErrorResponse(BaseModel):
    error: str


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing or malformed address"},
    500: {"model": ErrorResponse, "description": "Upstream failure"},
}


def get_http_client(request: Request) -> httpx.AsyncClient | None:
    """Dependency: app-scoped AsyncClient opened in lifespan (None outside lifespan)."""
    return getattr(request.app.state, "http_client", None)


async def _wallet_stats(
    address: str | None,
    settings: Settings,
    client: httpx.AsyncClient | None,
) -> dict[str, Any]:
    try:
        return await fetch_wallet_stats(address, settings=settings, client=client)
    except AddressValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        bind_address(address, __name__).exception("wallet_fetch_failed", error=str(e))
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.get("", response_model=WalletStatsResponse, responses=ERROR_RESPONSES)
async def get_wallet_by_query(
    address: str | None = Query(None, description="Wallet address (0x + 40 hex)"),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient | None = Depends(get_http_client),
) -> dict[str, Any]:
    """Wallet analytics for ?address=."""
    return await _wallet_stats(address, settings, client)


@router.get("/{address}", response_model=WalletStatsResponse, responses=ERROR_RESPONSES)
async def get_wallet(
    address: str,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient | None = Depends(get_http_client),
) -> dict[str, Any]:
    """Wallet analytics for a path address; same contract as the query form."""
    return await _wallet_stats(address, settings, client)
