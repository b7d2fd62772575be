"""
Main entrypoint for the Blog API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn blog_api.app.main:app --reload
"""

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    register_error_handlers(app)
    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and brings the schema up
        # to date.
        init_db()

    return app


# Created at import time so that uvicorn can discover it without
# calling create_app manually.
app = create_app()
