"""
Application-level exceptions.

AddressValidationError maps to HTTP 400 and is raised before any upstream
call. UpstreamError covers failed RPC / explorer responses and maps to 500.
"""

from __future__ import annotations

import re

ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")

MSG_ADDRESS_REQUIRED = "Address parameter required"
MSG_ADDRESS_INVALID = "Invalid address format"


class AddressValidationError(ValueError):
    """Missing or malformed wallet address."""


class UpstreamError(RuntimeError):
    """An upstream data source returned an error or unusable response."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


def validate_address(address: str | None) -> str:
    """
    Return the stripped address if it is 0x + 40 hex digits (any case).

    Raises AddressValidationError otherwise.
    """
    address = (address or "").strip()
    if not address:
        raise AddressValidationError(MSG_ADDRESS_REQUIRED)
    if not ADDRESS_RE.match(address):
        raise AddressValidationError(MSG_ADDRESS_INVALID)
    return address
