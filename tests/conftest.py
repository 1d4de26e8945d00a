"""Shared fixtures: a fresh storage per test and a client bound to it."""

import pytest
from fastapi.testclient import TestClient

from freelance_marketplace_api.app.core.storage import MemStorage
from freelance_marketplace_api.app.main import create_app


@pytest.fixture
def storage() -> MemStorage:
    return MemStorage()


@pytest.fixture
def client(storage: MemStorage) -> TestClient:
    return TestClient(create_app(storage))


@pytest.fixture
def register(client: TestClient):
    """Register a user through the API and return the response body."""

    def _register(email: str = "a@x.com", account_type: str = "freelancer", **overrides) -> dict:
        payload = {
            "email": email,
            "password": "secret",
            "accountType": account_type,
            "firstName": "Ada",
            "lastName": "Lovelace",
            "country": "US",
            "phone": "123",
        }
        payload.update(overrides)
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _register
