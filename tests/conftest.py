# tests/conftest.py
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from admin_api.core.config import Settings
from admin_api.database import Database
from admin_api.dependencies import get_database
from admin_api.main import app


@pytest.fixture
def settings():
    """Provide local-mode test settings"""
    return Settings(
        _env_file=None,
        DATABASE_URL="",
        DB_USER="test_user",
        DB_PASSWORD="test_pass",
        DB_HOST="localhost",
        DB_PORT=5432,
        DB_NAME="test_db",
    )


@pytest.fixture
def mock_db():
    """A Database whose execute() is an AsyncMock"""
    return AsyncMock(spec=Database)


@pytest.fixture
def test_client(mock_db):
    """Test client wired to the mocked Database. Lifespan is not run."""
    app.dependency_overrides[get_database] = lambda: mock_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_product_row():
    """A products row as the Database layer returns it"""
    return {
        "id": 1,
        "name": "Widget",
        "price": Decimal("9.99"),
        "stock": 5,
        "category": "tools",
        "status": "low-stock",
        "created_at": datetime(2024, 5, 1, 12, 0, 0),
        "updated_at": datetime(2024, 5, 1, 12, 0, 0),
    }


@pytest.fixture
def sample_order_rows():
    return [
        {"id": 7, "customer_name": "Ada", "total": Decimal("120.00"), "status": "pending",
         "date": datetime(2024, 5, 2, 9, 30)},
        {"id": 3, "customer_name": "Grace", "total": Decimal("35.50"), "status": "shipped",
         "date": datetime(2024, 5, 1, 8, 0)},
    ]
