from fastapi.testclient import TestClient


def test_health_check(client: TestClient) -> None:
    """Test the health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert "status" in data
    assert "database" in data
    assert "version" in data
    # The local mirror points at a writable SQLite file in tests
    assert data["database"] == "connected"
    assert data["status"] == "healthy"


def test_startup_seeds_stores(client: TestClient) -> None:
    """Test that startup builds the seeded stores."""
    me = client.get("/api/users/me")
    assert me.status_code == 200
    assert me.json()["username"] == "alex_wonder"

    products = client.get("/api/products")
    assert len(products.json()) == 11

    conversations = client.get("/api/conversations")
    assert len(conversations.json()) == 4
