"""
Structured logging for Backend Arc Wallet.

JSON logs with timestamp, address, event_type.
Use get_logger() in all modules for aggregation-friendly output.
"""

from backend_arcwallet.arcwallet_logging.logger import bind_address, get_logger

__all__ = ["get_logger", "bind_address"]
