"""
Named queries database configuration.

Structure:
- namedqueries: saved aggregation pipelines with display metadata
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class Collections:
    """Collection names in the named-queries database."""
    NAMED_QUERIES = "namedqueries"

    # Index definitions for each collection
    INDEXES = {
        "namedqueries": [
            {"keys": [("name", 1)], "unique": True},
            {"keys": [("tags", 1)]},
            {"keys": [("categories", 1)]},
        ],
    }


async def create_query_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for the named-queries collections."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            name = await collection.create_index(keys, **kwargs)
            logger.debug("Ensured index %s on %s", name, collection_name)
