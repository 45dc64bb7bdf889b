"""
Transaction categorization for Arc Wallet analytics.

Maps a transaction's 4-byte method selector to a coarse category used in
the contractTypes breakdown. Selector comes from methodId when the explorer
provides it, else from the first 4 bytes of the call data.
"""

from __future__ import annotations

from typing import Any

CATEGORY_TOKEN_TRANSFER = "Token Transfer"
CATEGORY_APPROVAL = "Approval"
CATEGORY_DEX_SWAP = "DEX Swap"
CATEGORY_DEPOSIT_WITHDRAW = "Deposit/Withdraw"
CATEGORY_TRANSFER = "Transfer"

# "0x" + 8 hex digits
SELECTOR_LENGTH = 10

# Selectors are disjoint, so lookup order does not matter
SELECTOR_CATEGORIES: dict[str, str] = {
    "0xa9059cbb": CATEGORY_TOKEN_TRANSFER,  # transfer(address,uint256)
    "0x23b872dd": CATEGORY_TOKEN_TRANSFER,  # transferFrom(address,address,uint256)
    "0x095ea7b3": CATEGORY_APPROVAL,  # approve(address,uint256)
    "0x38ed1739": CATEGORY_DEX_SWAP,  # swapExactTokensForTokens
    "0x7ff36ab5": CATEGORY_DEX_SWAP,  # swapExactETHForTokens
    "0xe8e33700": CATEGORY_DEPOSIT_WITHDRAW,  # addLiquidity
    "0x2e1a7d4d": CATEGORY_DEPOSIT_WITHDRAW,  # withdraw(uint256)
}


def extract_selector(record: dict[str, Any]) -> str:
    """
    Return the lower-cased selector for a transaction record.

    methodId wins when non-empty; otherwise the first 10 chars of input.
    Returns "" for plain value transfers (no call data).
    """
    method_id = record.get("methodId")
    if method_id:
        selector = str(method_id)
    else:
        selector = str(record.get("input") or "")[:SELECTOR_LENGTH]
    selector = selector.strip().lower()
    if selector and not selector.startswith("0x"):
        selector = "0x" + selector
    return selector


def classify(record: dict[str, Any]) -> str:
    """Return the category for one transaction; unknown/absent selector -> Transfer."""
    selector = extract_selector(record)
    if not selector:
        return CATEGORY_TRANSFER
    for known, category in SELECTOR_CATEGORIES.items():
        if selector.startswith(known):
            return category
    return CATEGORY_TRANSFER
