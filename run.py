"""Entry point for running the Juice Bar API under uvicorn.

Host, port and log level are taken from ``Settings`` (``HOST``,
``PORT`` and ``LOG_LEVEL`` environment variables).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from juice_bar_api.app.core.config import settings
from juice_bar_api.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    logging.getLogger(__name__).info(
        "Starting server on http://%s:%s (health check at /health)", settings.host, settings.port
    )
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
