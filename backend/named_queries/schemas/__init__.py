"""
Request and response schemas for API endpoints.
"""
from named_queries.schemas.named_query import (
    NamedQueryCreate,
    NamedQueryUpdate,
    NamedQueryResponse,
    NamedQuerySummary,
    NamedQueryListResponse,
    MessageResponse,
)

__all__ = [
    "NamedQueryCreate",
    "NamedQueryUpdate",
    "NamedQueryResponse",
    "NamedQuerySummary",
    "NamedQueryListResponse",
    "MessageResponse",
]
