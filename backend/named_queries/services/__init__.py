"""
Service layer for business logic.
"""
from named_queries.services.query_service import NamedQueryService
from named_queries.services.filter_builder import NamedQueryFilterBuilder, build_query_filter

__all__ = [
    "NamedQueryService",
    "NamedQueryFilterBuilder",
    "build_query_filter",
]
