"""
Main entrypoint: run the wallet analytics API with uvicorn.

Env: ARC_RPC_URL, ARC_EXPLORER_API_URL, API_HOST, API_PORT, LOG_LEVEL, etc.

Equivalent: uvicorn backend_arcwallet.api_server.app:app --host 0.0.0.0 --port 8000
"""

import os

# Configure structured JSON logging before other imports that may log
from backend_arcwallet.arcwallet_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Resolve host/port from settings and serve the FastAPI app."""
    from backend_arcwallet.config import get_settings
    from backend_arcwallet.api_server.app import app
    import uvicorn

    settings = get_settings()
    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        rpc_url=settings.rpc_url,
        explorer_api_url=settings.explorer_api_url,
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=os.getenv("LOG_LEVEL", "info").lower())


if __name__ == "__main__":
    main()
