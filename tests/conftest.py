"""
Global test fixtures for the Named Queries API.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Test settings and application factory
- Named query payload factories
"""

import sys
from copy import deepcopy
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from named_queries.config import Settings  # noqa: E402
from named_queries.main import create_app  # noqa: E402

TEST_DB_NAME = "named-queries-test"


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the process environment."""
    return Settings(
        _env_file=None,
        mongo_uri="mongodb://test:27017",
        mongo_db_name=TEST_DB_NAME,
        log_level="DEBUG",
        distinct_error_statuses=False,
    )


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    return AsyncMongoMockClient()


@pytest_asyncio.fixture
async def mock_queries_db(mock_async_mongo_client):
    """Provide mock named-queries database with the app's indexes."""
    from named_queries.database.databases.queries_db import create_query_indexes

    db = mock_async_mongo_client[TEST_DB_NAME]
    await create_query_indexes(db)
    yield db


# =============================================================================
# Named Query Fixtures
# =============================================================================

NEW_QUERY_PAYLOAD = {
    "name": "New Query",
    "description": "A new query",
    "tags": ["new"],
    "categories": ["development"],
    "pipeline": [{"$match": {"active": True}}],
    "metadata": {
        "columns": [],
        "visualization": {"defaultView": "table"},
        "filters": [],
    },
}


@pytest.fixture
def new_query_payload() -> dict:
    """The minimal create payload used across route tests."""
    return deepcopy(NEW_QUERY_PAYLOAD)


@pytest.fixture
def full_query_payload() -> dict:
    """A create payload exercising every metadata structure."""
    return {
        "name": "Store Locations",
        "description": "Active stores with revenue by region",
        "tags": ["stores", "geo"],
        "categories": ["operations"],
        "pipeline": [
            {"$match": {"status": "open"}},
            {"$group": {"_id": "$region", "revenue": {"$sum": "$revenue"}}},
            {"$sort": {"revenue": -1}},
        ],
        "metadata": {
            "columns": [
                {"name": "region", "type": "string", "displayName": "Region"},
                {
                    "name": "revenue",
                    "type": "number",
                    "displayName": "Revenue",
                    "sortable": True,
                    "filterable": False,
                    "formatter": "currency",
                },
            ],
            "visualization": {
                "defaultView": "map",
                "map": {
                    "geoJsonField": "geometry",
                    "coordinateFields": {"lat": "latitude", "lng": "longitude"},
                },
            },
            "filters": [
                {
                    "field": "region",
                    "type": "select",
                    "options": ["north", "south"],
                    "defaultValue": "north",
                },
                {"field": "revenue", "type": "range", "defaultValue": {"min": 0, "max": 1000}},
            ],
        },
    }


@pytest.fixture
def make_query_doc():
    """
    Factory for raw named query documents as stored in MongoDB.

    Usage:
        doc = make_query_doc("Weekly Sales", tags=["sales"], age_minutes=5)
    """
    base_time = datetime(2024, 10, 15, 12, 0, tzinfo=timezone.utc)

    def _make(name: str, age_minutes: int = 0, **fields) -> dict:
        created_at = base_time - timedelta(minutes=age_minutes)
        doc = {
            "name": name,
            "description": fields.pop("description", None),
            "tags": fields.pop("tags", []),
            "categories": fields.pop("categories", []),
            "pipeline": fields.pop("pipeline", [{"$match": {}}]),
            "metadata": fields.pop(
                "metadata",
                {"columns": [], "visualization": {"defaultView": "table"}, "filters": []},
            ),
            "createdAt": created_at,
            "updatedAt": created_at,
        }
        doc.update(fields)
        return doc

    return _make


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings, mock_async_mongo_client):
    """
    Create FastAPI app for testing, backed by the mock MongoDB client.
    """
    return create_app(settings=test_settings, mongo_client=mock_async_mongo_client)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Entering the client runs the lifespan, so indexes exist before any request.
    """
    with TestClient(app) as c:
        yield c
