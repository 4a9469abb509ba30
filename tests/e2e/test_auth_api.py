"""End-to-end tests for authentication and profile routes."""

from urllib.parse import parse_qs, urlparse

from wingman.adapter.smtp import MockEmailClient
from wingman.domain.service import EmailClient, EmailService


def _sent_emails(client) -> list:
    """Wait for background sends, then return the mock outbox."""
    container = client.app.state.dishka_container
    email_service = client.portal.call(container.get, EmailService)
    client.portal.call(email_service.drain)
    email_client = client.portal.call(container.get, EmailClient)
    assert isinstance(email_client, MockEmailClient)
    return email_client.outbox


def _reset_token(message) -> str:
    link = next(w for w in message.text.split() if "/reset-password" in w)
    return parse_qs(urlparse(link).query)["token"][0]


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAuthFlow:
    """End-to-end tests for register, login and logout."""

    def test_register_sets_cookie_and_authenticates(self, client):
        response = client.post(
            "/auth/register",
            json={
                "name": "Alice",
                "email": "alice@example.com",
                "password": "correct horse battery",
                "bio": "Yoga and running",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["user"]["email"] == "alice@example.com"
        assert data["partnership_created"] is False
        assert "auth_token" in response.cookies

        # Cookie is sent automatically by the client
        me = client.get("/users/me")
        assert me.status_code == 200
        assert me.json()["user"]["name"] == "Alice"
        assert me.json()["partner"] is None

    def test_auth_status_reports_unauthenticated(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    def test_logout_clears_cookie(self, client, register):
        register("Alice", "alice@example.com")
        assert client.get("/users/me").status_code == 200

        response = client.post("/auth/logout")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert client.get("/users/me").status_code == 401
        assert client.get("/auth/me").json()["authenticated"] is False

    def test_login(self, client, register):
        register("Alice", "alice@example.com")
        client.cookies.clear()

        response = client.post(
            "/auth/login",
            json={"email": "Alice@Example.com", "password": "correct horse battery"},
        )

        assert response.status_code == 200
        assert response.json()["user"]["name"] == "Alice"
        assert client.get("/auth/me").json()["authenticated"] is True

    def test_login_wrong_password(self, client, register):
        register("Alice", "alice@example.com")

        response = client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "nope nope nope"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_register_duplicate_email(self, client, register):
        register("Alice", "alice@example.com")

        response = client.post(
            "/auth/register",
            json={
                "name": "Alice Again",
                "email": "ALICE@example.com",
                "password": "correct horse battery",
            },
        )

        assert response.status_code == 400

    def test_register_short_password(self, client):
        response = client.post(
            "/auth/register",
            json={"name": "Alice", "email": "alice@example.com", "password": "short"},
        )

        assert response.status_code == 400
        assert "Password" in response.json()["detail"]


class TestProtectedRoutes:
    """Requests without valid credentials are rejected."""

    def test_missing_token(self, client):
        assert client.get("/users/me").status_code == 401
        assert client.get("/match/suggestions").status_code == 401
        assert client.post("/match/unmatch").status_code == 401

    def test_invalid_bearer_token(self, client):
        response = client.get(
            "/users/me", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401


class TestProfile:
    """End-to-end tests for profile updates."""

    def test_update_profile(self, client, register):
        _, headers = register("Alice", "alice@example.com")

        response = client.patch(
            "/users/me", json={"bio": "Painting and travel"}, headers=headers
        )

        assert response.status_code == 200
        assert response.json()["bio"] == "Painting and travel"
        me = client.get("/users/me", headers=headers).json()
        assert me["user"]["bio"] == "Painting and travel"

    def test_empty_update_is_rejected(self, client, register):
        _, headers = register("Alice", "alice@example.com")

        response = client.patch("/users/me", json={}, headers=headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Nothing to update"


class TestPasswordReset:
    """End-to-end tests for forgot-password and reset-password."""

    def test_reset_flow(self, client, register):
        register("Alice", "alice@example.com")
        client.cookies.clear()

        response = client.post(
            "/auth/forgot-password", json={"email": "alice@example.com"}
        )
        assert response.status_code == 200
        [message] = _sent_emails(client)
        token = _reset_token(message)

        response = client.post(
            "/auth/reset-password",
            json={"token": token, "new_password": "a new passphrase"},
        )
        assert response.status_code == 200

        login = client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "a new passphrase"},
        )
        assert login.status_code == 200

        # Tokens are cleared once used
        reused = client.post(
            "/auth/reset-password",
            json={"token": token, "new_password": "yet another one"},
        )
        assert reused.status_code == 400
        assert reused.json()["detail"] == "Invalid or expired reset token"

    def test_unknown_email_gets_same_answer(self, client, register):
        register("Alice", "alice@example.com")

        known = client.post(
            "/auth/forgot-password", json={"email": "alice@example.com"}
        )
        unknown = client.post(
            "/auth/forgot-password", json={"email": "nobody@example.com"}
        )

        assert known.status_code == unknown.status_code == 200
        assert known.json() == unknown.json()
        assert [m.to for m in _sent_emails(client)] == ["alice@example.com"]

    def test_missing_email(self, client):
        response = client.post("/auth/forgot-password", json={"email": ""})

        assert response.status_code == 400
        assert response.json()["detail"] == "Email is required"

    def test_bad_token(self, client):
        response = client.post(
            "/auth/reset-password",
            json={"token": "deadbeef", "new_password": "a new passphrase"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid or expired reset token"
