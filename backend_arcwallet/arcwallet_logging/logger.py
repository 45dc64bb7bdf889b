"""
structlog setup for the wallet service.

Every record carries event_type, level, ISO timestamp and the logger name.
Wallet-scoped events are emitted through bind_address() so the address key
is always present and comparable across checksum/lower-case spellings.
Upstream URLs can embed provider keys (dRPC `dkey`, explorer `apikey`);
their values are masked before rendering.

No backend_arcwallet imports here: config and analytics import this module.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# json (default) or console
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()

URL_FIELDS = ("url", "rpc_url", "explorer_api_url")
SECRET_QUERY_KEYS = frozenset({"apikey", "api_key", "api-key", "dkey", "key", "token"})
MASK = "***"


def mask_url(url: str) -> str:
    """Replace the values of key-like query parameters with ***."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    query = [
        (k, MASK if k.lower() in SECRET_QUERY_KEYS else v)
        for k, v in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="*")))


def _add_timestamp(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _event_type(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog's positional 'event' becomes event_type."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def _mask_upstream_urls(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for field in URL_FIELDS:
        value = event_dict.get(field)
        if isinstance(value, str):
            event_dict[field] = mask_url(value)
    return event_dict


def configure_structlog() -> None:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _event_type,
        _mask_upstream_urls,
    ]
    if LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Structured logger for a module; the first positional argument is the event type.

        logger = get_logger(__name__)
        logger.info("upstream_rate_limited", url=url, attempt=2)
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_address(address: str | None, name: str = "backend_arcwallet") -> structlog.BoundLogger:
    """
    Logger for one wallet request with `address` bound (lower-cased).

    Missing addresses are bound as None so failed-validation events still
    carry the key.
    """
    return get_logger(name).bind(address=address.lower() if address else None)
