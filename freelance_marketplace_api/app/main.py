"""
Main entrypoint for the Freelance Marketplace API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn freelance_marketplace_api.app.main:app --reload

All data lives in a :class:`MemStorage` attached to ``app.state``; it
starts empty and is lost when the process exits.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.storage import MemStorage

logger = logging.getLogger(__name__)


def create_app(storage: Optional[MemStorage] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[MemStorage]
        Storage to serve requests from.  A new, empty storage is
        created when omitted, so every application gets its own data
        unless one is shared explicitly (as the tests do).

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log messages.
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.storage = storage if storage is not None else MemStorage()

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)

    logger.debug("Application created with %r", app.state.storage)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
