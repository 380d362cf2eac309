"""
Database definitions and collection constants.
"""
from named_queries.database.databases import queries_db

__all__ = ["queries_db"]
