"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client for the application."""
    return TestClient(app)


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_openapi_schema_accessible(self, client: TestClient) -> None:
        """OpenAPI schema is accessible at /openapi.json."""
        response = client.get("/openapi.json")
        assert response.status_code == 200
        schema = response.json()
        assert "openapi" in schema
        assert "info" in schema
        assert "paths" in schema

    def test_openapi_title_and_version(self, client: TestClient) -> None:
        """OpenAPI schema has correct title and version."""
        schema = client.get("/openapi.json").json()
        assert schema["info"]["title"] == "user-service"
        assert schema["info"]["version"] == "0.1.0"

    def test_user_endpoints_in_schema(self, client: TestClient) -> None:
        """All user endpoints are documented."""
        paths = client.get("/openapi.json").json()["paths"]
        assert "post" in paths["/users"]
        assert "get" in paths["/users"]
        assert "get" in paths["/users/{user_id}"]
        assert paths["/users"]["post"]["summary"] == "Create a user"

    def test_create_user_request_schema(self, client: TestClient) -> None:
        """CreateUserRequest schema lists every registration field."""
        components = client.get("/openapi.json").json()["components"]["schemas"]
        props = components["CreateUserRequest"]["properties"]
        assert set(props) == {"name", "email", "password", "role", "company", "invitation"}

    def test_user_response_uses_id_alias(self, client: TestClient) -> None:
        """UserResponse documents the _id field."""
        components = client.get("/openapi.json").json()["components"]["schemas"]
        assert "_id" in components["UserResponse"]["properties"]

    def test_endpoints_tagged_with_users(self, client: TestClient) -> None:
        """Endpoints are grouped under the users tag."""
        schema = client.get("/openapi.json").json()
        assert "users" in [t["name"] for t in schema.get("tags", [])]
        assert "users" in schema["paths"]["/users"]["post"]["tags"]


class TestSwaggerUI:
    """Tests for Swagger UI availability."""

    def test_docs_endpoint_accessible(self, client: TestClient) -> None:
        """Swagger UI is accessible at /docs."""
        response = client.get("/docs")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
