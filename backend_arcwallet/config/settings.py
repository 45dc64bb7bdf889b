"""
Application settings and environment configuration.

Responsibilities:
- Load configuration from environment variables and .env files (see env.py).
- Provide defaults for every optional setting.
- Expose typed settings (RPC URL, explorer URL, timeouts, API port,
  cost assumptions) for the upstream clients, analytics and API server.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from decimal import Decimal

from backend_arcwallet.analytics.cost_estimator import (
    REFERENCE_GAS_PRICE_GWEI,
    REFERENCE_USD_PER_UNIT,
    CostAssumptions,
)
from backend_arcwallet.config import env

GWEI = 10**9


@dataclass(frozen=True)
class Settings:
    """Resolved configuration; build with get_settings() or directly in tests."""

    rpc_url: str = env.DEFAULT_RPC_URL
    explorer_api_url: str = env.DEFAULT_EXPLORER_API_URL
    timeout_sec: float = env.DEFAULT_TIMEOUT_SEC
    max_retries: int = env.DEFAULT_MAX_RETRIES
    api_host: str = env.DEFAULT_API_HOST
    api_port: int = env.DEFAULT_API_PORT
    cost_assumptions: CostAssumptions = field(default_factory=CostAssumptions)


def _cost_assumptions_from_env() -> CostAssumptions:
    gwei = env.get_reference_gas_price_gwei(float(REFERENCE_GAS_PRICE_GWEI))
    usd = env.get_reference_usd_price(float(REFERENCE_USD_PER_UNIT))
    return CostAssumptions(
        reference_gas_price_wei=int(Decimal(str(gwei)) * GWEI),
        reference_usd_per_unit=Decimal(str(usd)),
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the current application settings.

    Cached for the process lifetime; call get_settings.cache_clear() after
    changing the environment (tests do this through a fixture).
    """
    return Settings(
        rpc_url=env.get_rpc_url(),
        explorer_api_url=env.get_explorer_api_url(),
        timeout_sec=env.get_upstream_timeout(),
        max_retries=env.get_upstream_max_retries(),
        api_host=env.get_api_host(),
        api_port=env.get_api_port(),
        cost_assumptions=_cost_assumptions_from_env(),
    )
