from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging

from app.config import get_settings
from app.database import Database
from app.exceptions import register_exception_handlers
from app.api import products, health

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    database: Database = app.state.database

    # Startup
    logger.info("Starting up application...")
    if not database.connect():
        logger.warning("Serving without a reachable database")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    database.disconnect()


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application around a persistence handle.

    Args:
        database: Store handle to use. Built from settings when omitted.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="""
    REST API for managing products with:

    - **Product Management**: list, get, create, full update and delete
    - **Availability**: toggle a product's availability with a single PATCH
    - **Validation**: every field error of a request is reported at once

    All successful responses wrap their payload in a `data` field.
    """,
        version=settings.APP_VERSION,
        lifespan=lifespan
    )
    app.state.database = database or Database()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routers
    app.include_router(health.router, prefix="/api")
    app.include_router(products.router, prefix="/api")

    @app.get("/", tags=["Root"])
    def root():
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
            "redoc": "/redoc",
            "health": "/api/health"
        }

    return app


app = create_app()
