"""
Dependencies for dependency injection in routes.
"""
from named_queries.dependencies.database import get_mongo_client, get_db, get_query_service

__all__ = [
    "get_mongo_client",
    "get_db",
    "get_query_service",
]
