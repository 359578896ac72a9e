"""Entry point for the utility customer‑service API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
come from the same environment variables the application reads
(``HOST``, ``PORT``, ``LOG_LEVEL``); see ``utility_csr_api/app/core/config.py``.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from utility_csr_api.app.core.config import settings
from utility_csr_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger("utility_csr_api.run").info(
        "CSR utilities on http://%s:%s%s/csr-utilities/*", settings.host, settings.port, settings.api_prefix
    )
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
