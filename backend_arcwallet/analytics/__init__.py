"""
Arc Wallet analytics engine.

Derives wallet statistics from raw explorer records.
Modules: units, tx_classifier, aggregator, cost_estimator, response_builder,
analytics_pipeline.
"""

from backend_arcwallet.analytics.aggregator import WalletAggregates, aggregate_transactions
from backend_arcwallet.analytics.analytics_pipeline import build_wallet_stats, fetch_wallet_stats
from backend_arcwallet.analytics.cost_estimator import CostAssumptions, estimate_gas_savings
from backend_arcwallet.analytics.tx_classifier import classify
from backend_arcwallet.analytics.units import to_decimal

__all__ = [
    "WalletAggregates",
    "aggregate_transactions",
    "build_wallet_stats",
    "fetch_wallet_stats",
    "CostAssumptions",
    "estimate_gas_savings",
    "classify",
    "to_decimal",
]
