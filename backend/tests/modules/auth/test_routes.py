"""
Tests for the register and login endpoints.
"""


REGISTRATION = {
    "username": "alice",
    "email": "alice@example.com",
    "password": "secret123",
    "first_name": "Alice",
    "last_name": "Smith",
}


class TestRegisterEndpoint:
    def test_register_created(self, client):
        """Should return 201 with a token and the new profile."""
        response = client.post("/api/auth/register", json=REGISTRATION)

        assert response.status_code == 201
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["access_token"]
        assert body["user"]["username"] == "alice"
        assert "password_hash" not in body["user"]
        assert "password" not in body["user"]

    def test_register_duplicate(self, client):
        """Should return 409 when the email or username is taken."""
        client.post("/api/auth/register", json=REGISTRATION)

        response = client.post(
            "/api/auth/register",
            json={**REGISTRATION, "email": "other@example.com"},
        )
        assert response.status_code == 409
        assert response.json()["error"] == "USER_ALREADY_EXISTS"

    def test_register_invalid_body(self, client):
        """Should return 422 for an invalid payload."""
        response = client.post(
            "/api/auth/register",
            json={**REGISTRATION, "password": "123"},
        )
        assert response.status_code == 422

    def test_token_works_for_profile(self, client):
        """The issued token should authenticate later requests."""
        token = client.post("/api/auth/register", json=REGISTRATION).json()["access_token"]

        response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["email"] == "alice@example.com"


class TestLoginEndpoint:
    def test_login_success(self, client):
        client.post("/api/auth/register", json=REGISTRATION)

        response = client.post(
            "/api/auth/login",
            json={"email": "alice@example.com", "password": "secret123"},
        )
        assert response.status_code == 200
        assert response.json()["user"]["username"] == "alice"

    def test_login_wrong_password(self, client):
        client.post("/api/auth/register", json=REGISTRATION)

        response = client.post(
            "/api/auth/login",
            json={"email": "alice@example.com", "password": "wrong-password"},
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_login_unknown_email(self, client):
        """Unknown email should look exactly like a wrong password."""
        response = client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": "secret123"},
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"
