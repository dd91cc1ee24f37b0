"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests and production build the same app

2. Lifespan Events
   - startup: connect the store handle, create tables, attach the
     content store
   - shutdown: dispose the store handle

3. Exception Handlers
   - Domain errors (conflict, invalid credentials, not found) become
     400/404 responses with a ``message`` body
   - Database and unexpected errors are logged and returned as a generic
     500 without internal detail
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from rental_api import __version__
from rental_api.config import get_settings
from rental_api.database import Database
from rental_api.exceptions import RentalAPIError
from rental_api.routers import (
    auth_router,
    books_router,
    rentals_router,
    uploads_router,
)
from rental_api.services.storage import ContentStore

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server Error"


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")

    if settings.uses_default_secret and settings.is_production:
        logger.warning("JWT_SECRET is not set; credentials are signed with the default secret")

    database = Database(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        echo=settings.debug,
    )
    database.create_tables()
    app.state.database = database
    logger.info("Database connected")

    content_store = ContentStore(settings.upload_dir)
    app.state.content_store = content_store

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    database.close()


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Book Rental API

Bookkeeping for a small book-rental service.

### Features
- **Users**: Register and log in, receiving a one-hour bearer credential
- **Books**: Catalog with optional cover image uploads
- **Rentals**: Rent books and return them; one active rental per user and book
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(RentalAPIError)
    async def rental_api_exception_handler(
        request: Request,
        exc: RentalAPIError,
    ) -> JSONResponse:
        """Convert domain errors to their status code and message."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error for debugging while hiding details from users.
        """
        logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"message": SERVER_ERROR_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={"message": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"message": SERVER_ERROR_MESSAGE},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(auth_router)
    app.include_router(books_router)
    app.include_router(rentals_router)
    app.include_router(uploads_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> dict:
        """Report that the API is up."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn rental_api.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m rental_api.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rental_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
