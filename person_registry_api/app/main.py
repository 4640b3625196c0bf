"""
Main entrypoint for the Person Registry API.

This module assembles the FastAPI application, sets up logging, CORS
and error handling, and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn person_registry_api.app.main:app --port 3000

or through ``run.py`` at the project root.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import PersonStore


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[PersonStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[PersonStore]
        Person collection served by the app.  A fresh store holding
        only the seed record is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.person_store = store if store is not None else PersonStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Version 1 routes live at the root for compatibility with
    # existing clients.
    app.include_router(v1_router)

    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "Server running on port %s with %d person(s) loaded",
            settings.port,
            len(app.state.person_store),
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
