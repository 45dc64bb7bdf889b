"""
Environment variable loading for Backend Arc Wallet.

- ARC_RPC_URL: JSON-RPC endpoint (default: Arc testnet dRPC)
- ARC_EXPLORER_API_URL: Blockscout-style explorer API (default: arcscan testnet)
- UPSTREAM_TIMEOUT_SEC / UPSTREAM_MAX_RETRIES: upstream HTTP behaviour
- REFERENCE_GAS_PRICE_GWEI / REFERENCE_USD_PRICE: gas comparison assumptions
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root: config is backend_arcwallet/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_RPC_URL = "https://arc-testnet.drpc.org"
DEFAULT_EXPLORER_API_URL = "https://testnet.arcscan.app/api"
DEFAULT_TIMEOUT_SEC = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000


def load_arcwallet_env() -> None:
    """Load .env from project root. Safe to call multiple times."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH)


def _env_str(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_rpc_url() -> str:
    """Resolve the Arc JSON-RPC URL. ARC_RPC_URL > testnet default."""
    load_arcwallet_env()
    return _env_str("ARC_RPC_URL", DEFAULT_RPC_URL)


def get_explorer_api_url() -> str:
    """Resolve the explorer API base URL (txlist / tokentx)."""
    load_arcwallet_env()
    return _env_str("ARC_EXPLORER_API_URL", DEFAULT_EXPLORER_API_URL).rstrip("/")


def get_upstream_timeout() -> float:
    load_arcwallet_env()
    return _env_float("UPSTREAM_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC)


def get_upstream_max_retries() -> int:
    load_arcwallet_env()
    return max(1, _env_int("UPSTREAM_MAX_RETRIES", DEFAULT_MAX_RETRIES))


def get_reference_gas_price_gwei(default: float) -> float:
    """REFERENCE_GAS_PRICE_GWEI override for the gas comparison; default otherwise."""
    load_arcwallet_env()
    return _env_float("REFERENCE_GAS_PRICE_GWEI", default)


def get_reference_usd_price(default: float) -> float:
    """REFERENCE_USD_PRICE override (USD per reference native unit)."""
    load_arcwallet_env()
    return _env_float("REFERENCE_USD_PRICE", default)


def get_api_host() -> str:
    load_arcwallet_env()
    return _env_str("API_HOST", DEFAULT_API_HOST)


def get_api_port() -> int:
    load_arcwallet_env()
    return _env_int("API_PORT", DEFAULT_API_PORT)
