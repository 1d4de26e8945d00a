"""Entry point for the Freelance Marketplace API.

Serves the FastAPI application with uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``5000``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from freelance_marketplace_api.app.core.config import settings
from freelance_marketplace_api.app.main import app


async def main() -> None:
    """Start the API server and run until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
