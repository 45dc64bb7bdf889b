"""
Pytest tests for transaction categorization by method selector.
"""

from __future__ import annotations

import pytest

from backend_arcwallet.analytics.tx_classifier import (
    CATEGORY_APPROVAL,
    CATEGORY_DEPOSIT_WITHDRAW,
    CATEGORY_DEX_SWAP,
    CATEGORY_TOKEN_TRANSFER,
    CATEGORY_TRANSFER,
    classify,
    extract_selector,
)


@pytest.mark.parametrize(
    "selector,category",
    [
        ("0xa9059cbb", CATEGORY_TOKEN_TRANSFER),
        ("0x23b872dd", CATEGORY_TOKEN_TRANSFER),
        ("0x095ea7b3", CATEGORY_APPROVAL),
        ("0x38ed1739", CATEGORY_DEX_SWAP),
        ("0x7ff36ab5", CATEGORY_DEX_SWAP),
        ("0xe8e33700", CATEGORY_DEPOSIT_WITHDRAW),
        ("0x2e1a7d4d", CATEGORY_DEPOSIT_WITHDRAW),
        ("0xdeadbeef", CATEGORY_TRANSFER),
    ],
)
def test_classify_by_method_id(selector, category):
    assert classify({"methodId": selector}) == category


def test_classify_from_input_prefix():
    """Without methodId the first 4 bytes of input are used."""
    record = {"input": "0xa9059cbb000000000000000000000000abcdef"}
    assert extract_selector(record) == "0xa9059cbb"
    assert classify(record) == CATEGORY_TOKEN_TRANSFER


def test_method_id_wins_over_input():
    record = {"methodId": "0x095ea7b3", "input": "0xa9059cbb0000"}
    assert classify(record) == CATEGORY_APPROVAL


def test_empty_method_id_falls_back_to_input():
    record = {"methodId": "", "input": "0x2e1a7d4d0000"}
    assert classify(record) == CATEGORY_DEPOSIT_WITHDRAW


def test_absent_or_empty_selector_is_transfer():
    assert classify({}) == CATEGORY_TRANSFER
    assert classify({"input": "0x"}) == CATEGORY_TRANSFER
    assert classify({"input": None, "methodId": None}) == CATEGORY_TRANSFER


def test_selector_case_normalized():
    assert classify({"methodId": "0xA9059CBB"}) == CATEGORY_TOKEN_TRANSFER
    assert classify({"input": "0X095EA7B3ffff"}) == CATEGORY_APPROVAL
