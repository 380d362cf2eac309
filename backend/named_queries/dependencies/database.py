"""
Database and service dependencies.

The MongoDB client lives on ``app.state`` (set up by the lifespan), so each
request reaches the store through these dependencies.
"""
from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from named_queries.services.query_service import NamedQueryService


def get_mongo_client(request: Request) -> AsyncIOMotorClient:
    """Return the application-wide MongoDB client stored on app.state."""
    return request.app.state.mongo_client


def get_db(request: Request) -> AsyncIOMotorDatabase:
    """Return the named-queries database stored on app.state."""
    return request.app.state.db


def get_query_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> NamedQueryService:
    """Dependency to get NamedQueryService instance."""
    return NamedQueryService(db)
