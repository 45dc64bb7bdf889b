"""
Print wallet analytics for one address as JSON.

How to run:
    py -m backend_arcwallet.tools.wallet_report 0xYourAddress
    py -m backend_arcwallet.tools.wallet_report 0xYourAddress --summary --indent 2

Env: ARC_RPC_URL, ARC_EXPLORER_API_URL (see config/env.py).
Exit codes: 0 ok, 1 upstream failure, 2 invalid address.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from backend_arcwallet.analytics.analytics_pipeline import fetch_wallet_stats
from backend_arcwallet.arcwallet_logging import bind_address
from backend_arcwallet.core.exceptions import AddressValidationError

RAW_LIST_FIELDS = ("transactions", "tokenTransfers")


def summarize(stats: dict[str, Any]) -> dict[str, Any]:
    """Drop the raw pass-through lists, keep derived fields."""
    return {k: v for k, v in stats.items() if k not in RAW_LIST_FIELDS}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Arc wallet analytics report (JSON).")
    parser.add_argument("address", help="Wallet address (0x + 40 hex)")
    parser.add_argument("--summary", action="store_true", help="Omit raw transactions and token transfers")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    args = parser.parse_args(argv)

    try:
        stats = asyncio.run(fetch_wallet_stats(args.address))
    except AddressValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        bind_address(args.address, __name__).exception("wallet_report_failed", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.summary:
        stats = summarize(stats)
    print(json.dumps(stats, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
