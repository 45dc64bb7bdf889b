"""
Pytest tests for the reference-network gas cost comparison.
"""

from __future__ import annotations

from decimal import Decimal

from backend_arcwallet.analytics.cost_estimator import (
    REFERENCE_GAS_PRICE_WEI,
    REFERENCE_USD_PER_UNIT,
    CostAssumptions,
    estimate_gas_savings,
)


def test_default_assumptions():
    a = CostAssumptions()
    assert a.reference_gas_price_wei == 30 * 10**9 == REFERENCE_GAS_PRICE_WEI
    assert a.reference_usd_per_unit == Decimal(3000) == REFERENCE_USD_PER_UNIT


def test_single_transfer_savings():
    # 21000 gas at 1 gwei on Arc vs 30 gwei reference
    gas = estimate_gas_savings(21000, 21000 * 10**9)
    assert gas.actual_cost == Decimal("0.000021")
    assert gas.reference_native_cost == Decimal("0.00063")
    assert gas.reference_usd_cost == Decimal("1.89")
    assert gas.saved_usd == Decimal("1.889979")
    assert Decimal(0) <= gas.savings_percentage <= Decimal(100)


def test_zero_reference_cost_gives_zero_percentage():
    gas = estimate_gas_savings(0, 0)
    assert gas.reference_usd_cost == 0
    assert gas.saved_usd == 0
    assert gas.savings_percentage == 0


def test_saved_never_negative():
    """Observed cost above the reference estimate clamps savings to 0."""
    gas = estimate_gas_savings(21000, 21000 * 10**16)
    assert gas.actual_cost == Decimal(210)
    assert gas.saved_usd == 0
    assert gas.savings_percentage == 0


def test_custom_assumptions():
    a = CostAssumptions(reference_gas_price_wei=10 * 10**9, reference_usd_per_unit=Decimal(2000))
    gas = estimate_gas_savings(100000, 0, a)
    # 100000 * 10 gwei = 0.001 native; * 2000 = 2 USD
    assert gas.reference_native_cost == Decimal("0.001")
    assert gas.reference_usd_cost == Decimal(2)
    assert gas.saved_usd == Decimal(2)
    assert gas.savings_percentage == Decimal(100)


def test_percentage_within_bounds():
    for used, cost in [(1, 1), (21000, 10**12), (10**7, 10**18), (5, 10**20)]:
        gas = estimate_gas_savings(used, cost)
        assert Decimal(0) <= gas.savings_percentage <= Decimal(100)
