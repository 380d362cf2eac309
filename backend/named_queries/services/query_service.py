"""
Named query service for CRUD operations on the namedqueries collection.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from named_queries.core.exceptions import DuplicateQueryNameError
from named_queries.database.databases.queries_db import Collections
from named_queries.schemas.named_query import (
    NamedQueryCreate,
    NamedQueryUpdate,
    NamedQueryResponse,
    NamedQuerySummary,
    NamedQueryListResponse,
)
from named_queries.services.filter_builder import NamedQueryFilterBuilder, build_query_filter

logger = logging.getLogger(__name__)

# Fields returned by the list endpoint
SUMMARY_PROJECTION = {
    "name": 1,
    "description": 1,
    "tags": 1,
    "categories": 1,
    "metadata.visualization.defaultView": 1,
    "createdAt": 1,
}


def _utcnow() -> datetime:
    """Current UTC time truncated to the millisecond precision MongoDB stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _object_id(query_id: str) -> Optional[ObjectId]:
    """Parse a query ID; malformed IDs cannot match any document."""
    try:
        return ObjectId(query_id)
    except (InvalidId, TypeError):
        return None


class NamedQueryService:
    """Service for named query operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the named-queries database."""
        self.db = db
        self.queries = db[Collections.NAMED_QUERIES]

    async def list_queries(
        self,
        tags: Optional[list[str]] = None,
        categories: Optional[list[str]] = None,
        search: Optional[str] = None,
    ) -> NamedQueryListResponse:
        """List queries matching the filters, newest first."""
        query = build_query_filter(tags=tags, categories=categories, search=search)
        cursor = self.queries.find(query, SUMMARY_PROJECTION).sort(NamedQueryFilterBuilder.SORT)
        docs = await cursor.to_list(length=None)

        data = [self._doc_to_summary(doc) for doc in docs]
        return NamedQueryListResponse(data=data, count=len(data))

    async def get_query(self, query_id: str) -> Optional[NamedQueryResponse]:
        """Get a query by ID."""
        oid = _object_id(query_id)
        if oid is None:
            return None

        doc = await self.queries.find_one({"_id": oid})
        if not doc:
            return None
        return self._doc_to_response(doc)

    async def create_query(self, request: NamedQueryCreate) -> NamedQueryResponse:
        """Insert a new query; the store assigns the ID."""
        now = _utcnow()
        query_doc = request.model_dump(mode="json", by_alias=True, exclude_none=True)
        query_doc["createdAt"] = now
        query_doc["updatedAt"] = now

        try:
            result = await self.queries.insert_one(query_doc)
        except DuplicateKeyError as e:
            raise DuplicateQueryNameError(
                f"A query named '{request.name}' already exists"
            ) from e

        query_doc["_id"] = result.inserted_id
        logger.info("Created named query %s (%s)", result.inserted_id, request.name)
        return self._doc_to_response(query_doc)

    async def update_query(
        self, query_id: str, request: NamedQueryUpdate
    ) -> Optional[NamedQueryResponse]:
        """Merge the provided fields into an existing query."""
        oid = _object_id(query_id)
        if oid is None:
            return None

        update_data = request.to_update_document()
        update_data["updatedAt"] = _utcnow()

        try:
            result = await self.queries.find_one_and_update(
                {"_id": oid},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateQueryNameError(
                f"A query named '{request.name}' already exists"
            ) from e

        if not result:
            return None

        logger.info("Updated named query %s", query_id)
        return self._doc_to_response(result)

    async def delete_query(self, query_id: str) -> bool:
        """Delete a query. Returns False when it does not exist."""
        oid = _object_id(query_id)
        if oid is None:
            return False

        result = await self.queries.delete_one({"_id": oid})
        if result.deleted_count == 0:
            return False

        logger.info("Deleted named query %s", query_id)
        return True

    # ==================== Helper Methods ====================

    def _doc_to_response(self, doc: dict) -> NamedQueryResponse:
        """Convert MongoDB document to full response."""
        return NamedQueryResponse.model_validate({**doc, "_id": str(doc["_id"])})

    def _doc_to_summary(self, doc: dict) -> NamedQuerySummary:
        """Convert projected MongoDB document to list summary."""
        return NamedQuerySummary.model_validate({**doc, "_id": str(doc["_id"])})
