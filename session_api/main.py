"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, session_api.api, session_api.observability, session_api.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from session_api import __version__
from session_api.configs import get_settings
from session_api.api.routers import health_router, sessions_router
from session_api.boundary.db import dispose_engine
from session_api.boundary.db.create_tables import create_all_tables
from session_api.observability.logger import configure_logging
from session_api.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging, prepares the schema on startup and releases
    the connection pool on shutdown.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.log_level)
    logger.info(
        "Application startup",
        extra={"environment": settings.environment, "version": __version__},
    )

    if settings.api.create_tables_on_startup:
        try:
            await create_all_tables()
        except Exception as e:
            logger.exception(
                "Failed to initialize database schema",
                extra={"error": str(e)},
            )
            raise

    yield

    # Shutdown
    await dispose_engine()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Session API",
        description="REST resource for Session records backed by a SQL datastore",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix=settings.api.prefix)
    app.include_router(sessions_router, prefix=settings.api.prefix)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "session_api.main:app",
        host=settings.api.host,
        port=settings.api.port,
    )
