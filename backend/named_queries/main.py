"""
Named Queries Backend - FastAPI Application

CRUD API for named queries: saved aggregation pipelines with column,
visualization and filter metadata.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from motor.motor_asyncio import AsyncIOMotorClient

from named_queries import __version__
from named_queries.config import Settings, get_settings
from named_queries.core.error_handlers import register_error_handlers
from named_queries.database.connections import (
    create_mongo_client,
    close_mongo_client,
    get_database,
)
from named_queries.database.databases.queries_db import create_query_indexes
from named_queries.routers import health, queries

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(
    settings: Optional[Settings] = None,
    mongo_client: Optional[AsyncIOMotorClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to environment settings)
        mongo_client: Existing MongoDB client; when given, the app does not
            close it on shutdown

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Startup:
        - Initialize database connection
        - Create indexes

        Shutdown:
        - Close the database connection if the app opened it
        """
        logger.info("Starting up Named Queries Backend...")

        owns_client = mongo_client is None
        client = create_mongo_client(settings) if owns_client else mongo_client
        db = get_database(client, settings)
        app.state.mongo_client = client
        app.state.db = db

        await create_query_indexes(db)
        logger.info("Indexes ensured on database %s", settings.mongo_db_name)

        yield

        logger.info("Shutting down Named Queries Backend...")
        if owns_client:
            close_mongo_client(client)

    app = FastAPI(
        title="Named Queries API",
        description="""
## Named Queries API

Stores named aggregation pipelines together with the metadata needed to
display their results.

### Features
- **Queries**: Create, list, fetch, update and delete named queries
- **Filtering**: List by tags, categories and free-text search
- **Metadata**: Column definitions, default visualization (table/map/chart)
  and filter controls per query

Pipelines are stored verbatim and never executed by this service.
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS is added last so it wraps error responses too
    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(queries.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Named Queries API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


def run() -> None:
    """Run the API with uvicorn using the configured host and port."""
    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
