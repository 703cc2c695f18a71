"""Tests for health check endpoints."""


def test_health_check(client):
    """Test basic health check."""
    response = client.get("/api/health/")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readiness_check(client):
    """Test readiness reports a reachable database."""
    response = client.get("/api/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready", "checks": {"database": True}}


def test_root_endpoint(client):
    """Test root endpoint returns API info."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert "name" in data
    assert "version" in data
    assert "docs" in data


def test_openapi_documents_product_routes(client):
    """Test the generated OpenAPI document covers every product operation."""
    schema = client.get("/openapi.json").json()

    assert set(schema["paths"]["/api/products"]) == {"get", "post"}
    assert set(schema["paths"]["/api/products/{id}"]) == {"get", "put", "patch", "delete"}
    post_body = schema["paths"]["/api/products"]["post"]["requestBody"]
    assert "name" in post_body["content"]["application/json"]["schema"]["properties"]
