"""Test configuration and fixtures."""

import logfire
import pytest
from fastapi.testclient import TestClient

from wingman.interface.api.app import create_app
from tests.di import build_test_container
from tests.factories import TEST_PASSWORD

# Keep spans local; nothing is sent during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def client():
    """Test client over a fresh app backed by in-memory repositories."""
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register a user over HTTP and return (user_id, auth headers)."""

    def _register(
        name: str,
        email: str,
        bio: str | None = None,
        invite_token: str | None = None,
    ) -> tuple[str, dict[str, str]]:
        response = client.post(
            "/auth/register",
            json={
                "name": name,
                "email": email,
                "password": TEST_PASSWORD,
                "bio": bio,
                "invite_token": invite_token,
            },
        )
        assert response.status_code == 201, response.text
        data = response.json()
        return data["user"]["id"], {"Authorization": f"Bearer {data['token']}"}

    return _register
