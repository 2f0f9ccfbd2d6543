"""Entry point for the Match Feed API server.

Starts the FastAPI application with uvicorn on the configured host and
port (``HOST``/``PORT``, default ``0.0.0.0:3002``).  Intended to be run
from the project root, e.g. under Docker where only a single Python
file is specified.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from match_feed_api.app.core.config import settings
from match_feed_api.app.main import app

logger = logging.getLogger(__name__)


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Server listening at http://localhost:%d", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
