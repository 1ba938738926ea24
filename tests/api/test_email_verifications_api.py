"""API tests for email verification endpoints.

- POST /api/v1/email-verifications?token=...
- POST /api/v1/email-verification-tokens
"""

import pytest

from src.core.container import (
    get_resend_verification_handler,
    get_verify_email_handler,
)
from src.core.enums import ErrorCode
from src.main import app
from tests.api.stubs import failure, success


@pytest.mark.api
class TestCreateEmailVerification:
    URL = "/api/v1/email-verifications"

    def test_success(self, client):
        stub = success("Email verified successfully! You can now login.")
        app.dependency_overrides[get_verify_email_handler] = lambda: stub

        response = client.post(self.URL, params={"token": "abc"})

        assert response.status_code == 200
        assert response.json()["message"] == "Email verified successfully! You can now login."
        assert stub.commands[0].token == "abc"

    @pytest.mark.parametrize(
        ("code", "status_code"),
        [
            (ErrorCode.TOKEN_INVALID, 400),
            (ErrorCode.TOKEN_EXPIRED, 401),
            (ErrorCode.ACCOUNT_BLOCKED, 403),
        ],
    )
    def test_failures(self, client, code, status_code):
        app.dependency_overrides[get_verify_email_handler] = lambda: failure(code)

        response = client.post(self.URL, params={"token": "abc"})

        assert response.status_code == status_code

    def test_missing_token(self, client):
        app.dependency_overrides[get_verify_email_handler] = lambda: success("unused")

        response = client.post(self.URL)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "token"


@pytest.mark.api
class TestCreateEmailVerificationToken:
    URL = "/api/v1/email-verification-tokens"

    def test_success(self, client):
        app.dependency_overrides[get_resend_verification_handler] = lambda: success(
            "Verification email has been sent. Please check your inbox."
        )

        response = client.post(self.URL, json={"email": "bob@example.com"})

        assert response.status_code == 200

    @pytest.mark.parametrize(
        ("code", "status_code"),
        [
            (ErrorCode.NOT_FOUND, 404),
            (ErrorCode.ACCOUNT_BLOCKED, 403),
            (ErrorCode.EMAIL_ALREADY_VERIFIED, 403),
        ],
    )
    def test_failures(self, client, code, status_code):
        app.dependency_overrides[get_resend_verification_handler] = lambda: failure(code)

        response = client.post(self.URL, json={"email": "bob@example.com"})

        assert response.status_code == status_code
