"""
Configuration management for Backend Arc Wallet.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for upstream URLs, timeouts and the
gas comparison assumptions.
"""

from backend_arcwallet.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
