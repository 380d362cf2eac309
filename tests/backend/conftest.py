"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for testing
FastAPI routes, services, and database operations.
"""

import pytest
from fastapi.testclient import TestClient

from named_queries.main import create_app

QUERIES_URL = "/api/queries"


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def query_service(mock_queries_db):
    """NamedQueryService backed by the mock database."""
    from named_queries.services.query_service import NamedQueryService

    return NamedQueryService(mock_queries_db)


# =============================================================================
# App Variants
# =============================================================================

@pytest.fixture
def distinct_status_client(test_settings, mock_async_mongo_client):
    """TestClient for an app with 400/409 error statuses enabled."""
    settings = test_settings.model_copy(update={"distinct_error_statuses": True})
    app = create_app(settings=settings, mongo_client=mock_async_mongo_client)
    with TestClient(app) as c:
        yield c


# =============================================================================
# Request Helpers
# =============================================================================

@pytest.fixture
def create_query(client):
    """
    Helper creating a named query through the API.

    Usage:
        created = create_query(name="Weekly Sales", tags=["sales"])
    """
    def _create(**fields) -> dict:
        payload = {"pipeline": [{"$match": {}}], **fields}
        response = client.post(QUERIES_URL, json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, message_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert set(data) == {"message"}
        if message_contains:
            assert message_contains.lower() in data["message"].lower()
    return _assert
