"""
Main entrypoint for the College Management System API.

This module assembles the FastAPI application: it sets up logging,
mounts the versioned REST routers under ``/api/v1`` and the GraphQL
endpoint under ``/graphql``, and maps lecturer constraint violations
to HTTP 409.  ``create_app`` builds the app, which is then
instantiated at import time as ``app``, e.g.::

    uvicorn college_api.app.main:app --reload

Title, version, contact and server entries of the OpenAPI document
come from ``Settings`` in ``core.config``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.db import init_db
from .core.exceptions import LecturerConstraintError
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .graphql_api.schema import create_graphql_router

logger = logging.getLogger(__name__)


async def constraint_error_handler(request: Request, exc: LecturerConstraintError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that the setup below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        contact={"name": settings.contact_name, "email": settings.contact_email},
        servers=[{"url": settings.server_url, "description": settings.server_description}],
        debug=settings.debug,
    )

    app.include_router(v1_router, prefix="/api/v1")
    app.include_router(create_graphql_router(), prefix="/graphql", tags=["graphql"])
    app.add_exception_handler(LecturerConstraintError, constraint_error_handler)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Only the SQLite store has a schema to migrate.
        if settings.storage_backend == "sqlite":
            version = init_db(settings.database_url)
            logger.info("Database schema at version %s", version)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
