"""
Upstream data sources: Arc JSON-RPC node and the Blockscout explorer API.

Both are thin async clients over httpx; they return raw results and leave
all interpretation to the analytics package.
"""

from backend_arcwallet.upstream.explorer_client import get_token_transfers, get_transactions
from backend_arcwallet.upstream.rpc_client import get_balance, get_transaction_count

__all__ = [
    "get_balance",
    "get_transaction_count",
    "get_transactions",
    "get_token_transfers",
]
