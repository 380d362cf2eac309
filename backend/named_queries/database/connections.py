"""
Database connection management for MongoDB.

The client is created once by the application lifespan and stored on
``app.state``; routes receive it through dependencies instead of a module
global.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from named_queries.config import Settings

logger = logging.getLogger(__name__)


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """Create a MongoDB client for the configured URI."""
    logger.info("Connecting to MongoDB at %s", settings.mongo_uri)
    return AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)


def close_mongo_client(client: AsyncIOMotorClient) -> None:
    """Close a MongoDB client."""
    client.close()
    logger.info("MongoDB connection closed")


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """Get the named-queries database from a client."""
    return client[settings.mongo_db_name]
