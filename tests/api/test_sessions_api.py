"""API tests for /api/v1/sessions (login and logout)."""

import pytest

from src.core.container import get_login_account_handler, get_logout_account_handler
from src.core.enums import ErrorCode
from src.main import app
from tests.api.stubs import failure, success, tokens

URL = "/api/v1/sessions"


@pytest.mark.api
class TestCreateSession:
    def test_success(self, client):
        stub = tokens()
        app.dependency_overrides[get_login_account_handler] = lambda: stub

        response = client.post(URL, json={"email": "bob@example.com", "password": "Password123"})

        assert response.status_code == 200
        assert response.json() == {
            "access_token": "access.jwt",
            "refresh_token": "refresh.jwt",
            "token_type": "bearer",
            "expires_in": 900,
            "message": "Login successful",
            "success": True,
        }

    @pytest.mark.parametrize(
        ("code", "status_code"),
        [
            (ErrorCode.INVALID_CREDENTIALS, 401),
            (ErrorCode.ACCOUNT_BLOCKED, 403),
            (ErrorCode.EMAIL_NOT_VERIFIED, 403),
        ],
    )
    def test_failures(self, client, code, status_code):
        app.dependency_overrides[get_login_account_handler] = lambda: failure(code)

        response = client.post(URL, json={"email": "bob@example.com", "password": "x"})

        assert response.status_code == status_code
        assert response.json()["type"].endswith(f"/errors/{code.value}")

    def test_password_not_checked_against_registration_rules(self, client):
        stub = tokens()
        app.dependency_overrides[get_login_account_handler] = lambda: stub

        response = client.post(URL, json={"email": "bob@example.com", "password": "x"})

        assert response.status_code == 200
        assert stub.commands[0].password == "x"


@pytest.mark.api
class TestDeleteCurrentSession:
    def test_success(self, client):
        stub = success("Logged out successfully")
        app.dependency_overrides[get_logout_account_handler] = lambda: stub

        response = client.request(
            "DELETE", f"{URL}/current", json={"refresh_token": "refresh.jwt"}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Logged out successfully"
        assert stub.commands[0].refresh_token == "refresh.jwt"

    def test_invalid_token(self, client):
        app.dependency_overrides[get_logout_account_handler] = lambda: failure(
            ErrorCode.TOKEN_INVALID, "Invalid refresh token"
        )

        response = client.request(
            "DELETE", f"{URL}/current", json={"refresh_token": "forged"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid refresh token"

    def test_missing_token(self, client):
        app.dependency_overrides[get_logout_account_handler] = lambda: success("unused")

        response = client.request("DELETE", f"{URL}/current", json={})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "refresh_token"
