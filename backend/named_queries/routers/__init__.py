"""
API Routers module.
"""
from named_queries.routers import health, queries

__all__ = ["health", "queries"]
