"""
Database module - MongoDB connection and database definitions.
"""
from named_queries.database.connections import (
    create_mongo_client,
    close_mongo_client,
    get_database,
)
from named_queries.database.databases import queries_db

__all__ = [
    "create_mongo_client",
    "close_mongo_client",
    "get_database",
    "queries_db",
]
