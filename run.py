"""Entry point for the Person Registry API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port and log level come from the environment (``HOST``,
``PORT`` and ``LOG_LEVEL``); see ``person_registry_api/app/core/config.py``
for every supported variable.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from person_registry_api.app.core.config import settings
from person_registry_api.app.main import app


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
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
