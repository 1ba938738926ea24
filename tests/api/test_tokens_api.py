"""API tests for POST /api/v1/tokens (refresh)."""

import pytest

from src.core.container import get_refresh_tokens_handler
from src.core.enums import ErrorCode
from src.main import app
from tests.api.stubs import failure, tokens

URL = "/api/v1/tokens"


@pytest.mark.api
class TestCreateTokens:
    def test_success(self, client):
        stub = tokens("Tokens refreshed successfully")
        app.dependency_overrides[get_refresh_tokens_handler] = lambda: stub

        response = client.post(URL, json={"refresh_token": "refresh.jwt"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Tokens refreshed successfully"
        assert body["refresh_token"] == "refresh.jwt"

    @pytest.mark.parametrize(
        ("code", "status_code"),
        [
            (ErrorCode.TOKEN_INVALID, 400),
            (ErrorCode.TOKEN_EXPIRED, 401),
            (ErrorCode.ACCOUNT_BLOCKED, 403),
        ],
    )
    def test_failures(self, client, code, status_code):
        app.dependency_overrides[get_refresh_tokens_handler] = lambda: failure(code)

        response = client.post(URL, json={"refresh_token": "refresh.jwt"})

        assert response.status_code == status_code

    def test_empty_token(self, client):
        app.dependency_overrides[get_refresh_tokens_handler] = lambda: tokens()

        response = client.post(URL, json={"refresh_token": ""})

        assert response.status_code == 400
