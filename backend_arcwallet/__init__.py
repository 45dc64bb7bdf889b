"""
Backend Arc Wallet — read-only analytics API for Arc testnet wallets.

Fetches balance, nonce, transaction and token-transfer history for an
address and derives summary statistics (volume, activity cadence, gas cost
comparison, transaction categories) for display. Modular layout: upstream
clients, pure analytics core, API server.
"""

__version__ = "0.1.0"
