"""
Named queries router for CRUD operations.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from named_queries.core.exceptions import NotFoundError
from named_queries.dependencies.database import get_query_service
from named_queries.schemas.named_query import (
    NamedQueryCreate,
    NamedQueryUpdate,
    NamedQueryResponse,
    NamedQueryListResponse,
    MessageResponse,
)
from named_queries.services.query_service import NamedQueryService

router = APIRouter(prefix="/api/queries", tags=["Named Queries"])

NOT_FOUND_MESSAGE = "Query not found"

_error_responses = {
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse, "description": "Query not found"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse, "description": "Server error"},
}


@router.get(
    "",
    response_model=NamedQueryListResponse,
    response_model_exclude_none=True,
    summary="List named queries",
)
@router.get(
    "/",
    response_model=NamedQueryListResponse,
    response_model_exclude_none=True,
    include_in_schema=False,
)
async def list_queries(
    tags: Optional[list[str]] = Query(None, description="Match queries having any of these tags"),
    categories: Optional[list[str]] = Query(None, description="Match queries in any of these categories"),
    search: Optional[str] = Query(None, description="Case-insensitive text search in name/description"),
    query_service: NamedQueryService = Depends(get_query_service),
):
    """
    List named queries, newest first.

    - **tags**: repeatable, e.g. `?tags=sales&tags=weekly`
    - **categories**: repeatable
    - **search**: substring of the name or description

    Filters combine with AND; values within `tags` or `categories` combine with OR.
    """
    return await query_service.list_queries(tags=tags, categories=categories, search=search)


@router.get(
    "/{query_id}",
    response_model=NamedQueryResponse,
    response_model_exclude_none=True,
    responses=_error_responses,
    summary="Get named query",
)
async def get_query(
    query_id: str,
    query_service: NamedQueryService = Depends(get_query_service),
):
    """Get a named query with its full pipeline and metadata."""
    query = await query_service.get_query(query_id)

    if not query:
        raise NotFoundError(NOT_FOUND_MESSAGE)

    return query


@router.post(
    "",
    response_model=NamedQueryResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=_error_responses,
    summary="Create named query",
)
@router.post(
    "/",
    response_model=NamedQueryResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_query(
    body: NamedQueryCreate,
    query_service: NamedQueryService = Depends(get_query_service),
):
    """
    Create a new named query.

    - **name**: Unique query name (required)
    - **pipeline**: Aggregation pipeline, stored as-is (required)
    - **metadata**: Columns, visualization and filter definitions
    """
    return await query_service.create_query(body)


@router.put(
    "/{query_id}",
    response_model=NamedQueryResponse,
    response_model_exclude_none=True,
    responses=_error_responses,
    summary="Update named query",
)
async def update_query(
    query_id: str,
    body: NamedQueryUpdate,
    query_service: NamedQueryService = Depends(get_query_service),
):
    """
    Update a named query.

    Provided top-level fields replace the stored ones; the result is
    validated with the same rules as creation.
    """
    query = await query_service.update_query(query_id, body)

    if not query:
        raise NotFoundError(NOT_FOUND_MESSAGE)

    return query


@router.delete(
    "/{query_id}",
    response_model=MessageResponse,
    responses=_error_responses,
    summary="Delete named query",
)
async def delete_query(
    query_id: str,
    query_service: NamedQueryService = Depends(get_query_service),
):
    """
    Delete a named query.

    **Warning**: This action cannot be undone.
    """
    deleted = await query_service.delete_query(query_id)

    if not deleted:
        raise NotFoundError(NOT_FOUND_MESSAGE)

    return MessageResponse(message="Query deleted successfully")
