"""
Gas cost comparison: what the same gas would have cost on a reference network.

Reference gas price and USD price are fixed assumptions (not market data),
carried in CostAssumptions so they can be changed without touching the
aggregation. Arc gas is paid in USDC, so the observed cost is treated as
already USD-denominated.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

from backend_arcwallet.analytics.units import wei_to_decimal, wide_context

REFERENCE_GAS_PRICE_GWEI = 30
REFERENCE_GAS_PRICE_WEI = REFERENCE_GAS_PRICE_GWEI * 10**9
REFERENCE_USD_PER_UNIT = Decimal(3000)


@dataclass(frozen=True)
class CostAssumptions:
    """Reference-network assumptions for the comparison."""

    reference_gas_price_wei: int = REFERENCE_GAS_PRICE_WEI
    reference_usd_per_unit: Decimal = REFERENCE_USD_PER_UNIT


@dataclass(frozen=True)
class GasComparison:
    actual_cost: Decimal
    reference_native_cost: Decimal
    reference_usd_cost: Decimal
    saved_usd: Decimal
    savings_percentage: Decimal


def estimate_gas_savings(
    total_gas_used: int,
    total_gas_cost_wei: int,
    assumptions: CostAssumptions | None = None,
) -> GasComparison:
    """
    Compare observed gas spend with the reference-network equivalent.

    reference_native_cost = total_gas_used * reference gas price (normalized)
    reference_usd_cost = reference_native_cost * reference USD price
    saved_usd = max(0, reference_usd_cost - actual_cost)
    savings_percentage = saved_usd / reference_usd_cost * 100, or 0 when the
    reference cost is 0.
    """
    assumptions = assumptions or CostAssumptions()
    actual_cost = wei_to_decimal(total_gas_cost_wei)
    reference_native_cost = wei_to_decimal(max(total_gas_used, 0) * assumptions.reference_gas_price_wei)
    usd_per_unit = Decimal(assumptions.reference_usd_per_unit)
    with localcontext(wide_context(reference_native_cost, usd_per_unit, actual_cost)):
        reference_usd_cost = reference_native_cost * usd_per_unit
        saved_usd = max(Decimal(0), reference_usd_cost - actual_cost)
        if reference_usd_cost > 0:
            savings_percentage = saved_usd / reference_usd_cost * 100
        else:
            savings_percentage = Decimal(0)
    return GasComparison(
        actual_cost=actual_cost,
        reference_native_cost=reference_native_cost,
        reference_usd_cost=reference_usd_cost,
        saved_usd=saved_usd,
        savings_percentage=savings_percentage,
    )
