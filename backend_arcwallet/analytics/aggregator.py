"""
Aggregate statistics from a wallet's transaction history.

Converts the explorer's txlist records into volume and gas totals,
counterparty and active-day counts, per-category counts and a bounded
activity timeline. No I/O; the same input always yields the same output.
Records are expected in ascending timeStamp order (explorer sort=asc);
first/last dates are read from the list ends, not re-sorted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, localcontext
from typing import Any

from backend_arcwallet.analytics.tx_classifier import classify
from backend_arcwallet.analytics.units import parse_int, wei_to_decimal, wide_context

# Most recent distinct active days kept in the timeline
TIMELINE_MAX_DAYS = 30

# firstTransaction / lastTransaction when there is no history
NO_DATE = "N/A"


@dataclass
class WalletAggregates:
    """
    Statistics over one wallet's observed transaction list.

    Amounts in *_wei fields are base units (int); Decimal fields are
    normalized to display units.
    """

    tx_count: int = 0
    total_volume: Decimal = Decimal(0)
    """Sum of normalized tx value."""
    total_gas_cost_wei: int = 0
    """Sum of gasUsed * gasPrice (base units)."""
    total_gas_used: int = 0
    """Sum of raw gasUsed, input to the reference-network estimate."""
    unique_counterparties: int = 0
    """Distinct non-empty `to` addresses."""
    days_active: int = 0
    """Distinct UTC calendar dates with at least one tx."""
    category_counts: list[dict[str, Any]] = field(default_factory=list)
    """[{name, count}] sorted by count descending, ties in first-seen order."""
    activity_timeline: list[dict[str, Any]] = field(default_factory=list)
    """[{date, transactions}] for the last TIMELINE_MAX_DAYS active days, ascending."""
    largest_tx: Decimal = Decimal(0)
    average_gas_cost: Decimal = Decimal(0)
    """Normalized gas cost per tx; 0 for an empty list."""
    first_tx_date: str = NO_DATE
    last_tx_date: str = NO_DATE

    @property
    def total_gas_cost(self) -> Decimal:
        """Gas cost normalized to display units."""
        return wei_to_decimal(self.total_gas_cost_wei)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly view; Decimals rendered as strings."""
        return {
            "tx_count": self.tx_count,
            "total_volume": str(self.total_volume),
            "total_gas_cost_wei": self.total_gas_cost_wei,
            "total_gas_used": self.total_gas_used,
            "unique_counterparties": self.unique_counterparties,
            "days_active": self.days_active,
            "category_counts": [dict(c) for c in self.category_counts],
            "activity_timeline": [dict(d) for d in self.activity_timeline],
            "largest_tx": str(self.largest_tx),
            "average_gas_cost": str(self.average_gas_cost),
            "first_tx_date": self.first_tx_date,
            "last_tx_date": self.last_tx_date,
        }


def tx_date(record: dict[str, Any]) -> str:
    """UTC calendar date (YYYY-MM-DD) of a record's timeStamp; malformed -> 1970-01-01."""
    ts = parse_int(record.get("timeStamp"))
    try:
        dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        dt = datetime.fromtimestamp(0, tz=timezone.utc)
    return dt.date().isoformat()


def build_timeline(daily_counts: dict[str, int], max_days: int = TIMELINE_MAX_DAYS) -> list[dict[str, Any]]:
    """Sort day buckets ascending and keep the last max_days."""
    days = sorted(daily_counts)[-max_days:] if max_days > 0 else []
    return [{"date": d, "transactions": daily_counts[d]} for d in days]


def aggregate_transactions(transactions: list[dict[str, Any]]) -> WalletAggregates:
    """
    Compute WalletAggregates in one pass over the transaction list.

    Malformed numeric fields (value, gasUsed, gasPrice, timeStamp) count as 0.
    Empty input returns all-zero aggregates with NO_DATE first/last dates
    and an empty timeline.
    """
    n = len(transactions)
    if n == 0:
        return WalletAggregates()

    total_value_wei = 0
    largest_value_wei = 0
    total_gas_cost_wei = 0
    total_gas_used = 0
    counterparties: set[str] = set()
    daily_counts: dict[str, int] = {}
    categories: dict[str, int] = {}

    for tx in transactions:
        value_wei = parse_int(tx.get("value"))
        gas_used = parse_int(tx.get("gasUsed"))
        gas_price = parse_int(tx.get("gasPrice"))

        total_value_wei += value_wei
        if value_wei > largest_value_wei:
            largest_value_wei = value_wei
        total_gas_cost_wei += gas_used * gas_price
        total_gas_used += gas_used

        to = tx.get("to")
        if to:
            counterparties.add(str(to))

        day = tx_date(tx)
        daily_counts[day] = daily_counts.get(day, 0) + 1

        category = classify(tx)
        categories[category] = categories.get(category, 0) + 1

    # sorted() is stable: equal counts keep first-encountered order
    category_counts = sorted(
        ({"name": name, "count": count} for name, count in categories.items()),
        key=lambda c: c["count"],
        reverse=True,
    )

    total_gas_cost = wei_to_decimal(total_gas_cost_wei)
    with localcontext(wide_context(total_gas_cost)):
        average_gas_cost = total_gas_cost / n

    return WalletAggregates(
        tx_count=n,
        total_volume=wei_to_decimal(total_value_wei),
        total_gas_cost_wei=total_gas_cost_wei,
        total_gas_used=total_gas_used,
        unique_counterparties=len(counterparties),
        days_active=len(daily_counts),
        category_counts=category_counts,
        activity_timeline=build_timeline(daily_counts),
        largest_tx=wei_to_decimal(largest_value_wei),
        average_gas_cost=average_gas_cost,
        first_tx_date=tx_date(transactions[0]),
        last_tx_date=tx_date(transactions[-1]),
    )
