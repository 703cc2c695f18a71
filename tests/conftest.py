import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.main import create_app
from app.database import Database


# Create test database (SQLite in-memory for testing)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def database():
    """Fresh in-memory store for each test."""
    test_database = Database(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    test_database.create_all()

    yield test_database

    test_database.disconnect()


@pytest.fixture(scope="function")
def client(database):
    """Create test client over the in-memory store."""
    app = create_app(database)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(database):
    """Create database session for direct database access in tests."""
    session = database.session()

    yield session

    session.close()


@pytest.fixture
def create_product(client):
    """Create a product through the API and return its data."""
    def _create(name="Monitor", price=300, **extra):
        response = client.post("/api/products", json={"name": name, "price": price, **extra})
        assert response.status_code == 201
        return response.json()["data"]
    return _create
