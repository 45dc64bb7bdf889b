"""
Tests for arcwallet_logging: import without circular import, address binding, URL masking.
"""

from __future__ import annotations


def test_logging_import():
    """Import get_logger from arcwallet_logging and use the logger."""
    from backend_arcwallet.arcwallet_logging import bind_address, get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    logger.info("test_message", key="value")
    bind_address("0x1234567890abcdef1234567890abcdef12345678").info("address_bound")


def test_bind_address_lowercases_and_tolerates_missing():
    from structlog.testing import capture_logs

    from backend_arcwallet.arcwallet_logging import bind_address

    with capture_logs() as logs:
        bind_address("0xABCDEFabcdef0123456789ABCDEFabcdef012345", "tests").info("wallet_fetch_start")
        bind_address(None).warning("wallet_fetch_failed")
    assert logs[0]["address"] == "0xabcdefabcdef0123456789abcdefabcdef012345"
    assert logs[0]["logger"] == "tests"
    assert logs[1]["address"] is None


def test_mask_url_hides_provider_keys():
    from backend_arcwallet.arcwallet_logging.logger import mask_url

    assert mask_url("https://lb.drpc.org/ogrpc?network=arc-testnet&dkey=s3cret") == (
        "https://lb.drpc.org/ogrpc?network=arc-testnet&dkey=***"
    )
    assert mask_url("https://testnet.arcscan.app/api?apikey=abc&module=account") == (
        "https://testnet.arcscan.app/api?apikey=***&module=account"
    )
    assert mask_url("https://arc-testnet.drpc.org") == "https://arc-testnet.drpc.org"


def test_upstream_url_fields_masked_in_rendered_output():
    from backend_arcwallet.arcwallet_logging.logger import _mask_upstream_urls

    event = _mask_upstream_urls(None, "info", {"event": "main_server_starting", "rpc_url": "https://rpc.test/?key=k1", "port": 8000})
    assert event["rpc_url"] == "https://rpc.test/?key=***"
    assert event["port"] == 8000
