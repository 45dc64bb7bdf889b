"""
Build the wallet analytics payload returned by GET /api/wallet.

Field names, nesting and decimal-string precision are the contract the
dashboard frontend reads; keep them stable.
"""

from __future__ import annotations

from typing import Any

from backend_arcwallet.analytics.aggregator import WalletAggregates
from backend_arcwallet.analytics.cost_estimator import GasComparison
from backend_arcwallet.analytics.units import format_fixed, to_decimal

USD_PLACES = 2
PERCENT_PLACES = 1


def privacy_placeholder(tx_count: int) -> dict[str, Any]:
    """Privacy block; no shielded-transaction detection exists yet, every tx is public."""
    return {
        "privateTransactions": 0,
        "publicTransactions": tx_count,
        "privacyScore": "0.0",
        "shieldedContracts": 0,
    }


def build_response(
    address: str,
    balance_wei: int,
    nonce: int,
    aggregates: WalletAggregates,
    gas: GasComparison,
    transactions: list[dict[str, Any]],
    token_transfers: list[dict[str, Any]],
) -> dict[str, Any]:
    balance = to_decimal(balance_wei)
    return {
        "address": address,
        "balance": balance,
        "totalTransactions": aggregates.tx_count,
        "transactionsSent": nonce,
        "uniqueContracts": aggregates.unique_counterparties,
        "totalVolume": format_fixed(aggregates.total_volume),
        "daysActive": aggregates.days_active,
        "firstTransaction": aggregates.first_tx_date,
        "lastTransaction": aggregates.last_tx_date,
        "gasSavings": {
            "arcGasUsed": format_fixed(gas.actual_cost),
            "ethereumEquivalent": format_fixed(gas.reference_native_cost),
            "savedUSD": format_fixed(gas.saved_usd, USD_PLACES),
            "savingsPercentage": format_fixed(gas.savings_percentage, PERCENT_PLACES),
        },
        "usdcStats": {
            "balance": balance,
            "totalSpent": format_fixed(aggregates.total_gas_cost),
            "averagePerTx": format_fixed(aggregates.average_gas_cost),
            "largestTx": format_fixed(aggregates.largest_tx),
        },
        "privacyStats": privacy_placeholder(aggregates.tx_count),
        "contractTypes": [dict(c) for c in aggregates.category_counts],
        "activityTimeline": [dict(d) for d in aggregates.activity_timeline],
        "transactions": transactions,
        "tokenTransfers": token_transfers,
    }
