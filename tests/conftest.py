"""
Pytest fixtures for Arc Wallet tests. Upstream HTTP is never hit: tests use
httpx.MockTransport or patch fetch_wallet_stats.
"""

from __future__ import annotations

import pytest

VALID_ADDRESS = "0x1234567890AbCdEf1234567890aBcDeF12345678"
RPC_URL = "https://rpc.test"
EXPLORER_URL = "https://explorer.test/api"


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    from backend_arcwallet.config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings pointed at fake upstream URLs with no retry backoff."""
    from backend_arcwallet.config import Settings

    return Settings(rpc_url=RPC_URL, explorer_api_url=EXPLORER_URL, timeout_sec=5.0, max_retries=1)


@pytest.fixture
def sample_transactions():
    """Three txs over two days, ascending; one token transfer, one approval, one plain send."""
    return [
        {
            "to": "0xaaaa000000000000000000000000000000000001",
            "value": "1000000000000000000",
            "gasUsed": "21000",
            "gasPrice": "1000000000",
            "timeStamp": "1700000000",
            "methodId": "0xa9059cbb",
        },
        {
            "to": "0xaaaa000000000000000000000000000000000002",
            "value": "2500000000000000000",
            "gasUsed": "50000",
            "gasPrice": "2000000000",
            "timeStamp": "1700000500",
            "input": "0x095ea7b3000000000000000000000000",
        },
        {
            "to": "0xaaaa000000000000000000000000000000000001",
            "value": "0",
            "gasUsed": "21000",
            "gasPrice": "1000000000",
            "timeStamp": "1700100000",
            "input": "0x",
        },
    ]


@pytest.fixture
def client(settings):
    """FastAPI TestClient with settings overridden. Lifespan not started (no shared http client)."""
    from fastapi.testclient import TestClient

    from backend_arcwallet.api_server.server import app
    from backend_arcwallet.config import get_settings

    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
