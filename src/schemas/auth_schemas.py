"""Credential lifecycle request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

RESTful Endpoints (resource-based):
    POST   /api/v1/users                        - Create user (registration)
    POST   /api/v1/sessions                     - Create session (login)
    DELETE /api/v1/sessions/current             - Delete session (logout)
    POST   /api/v1/tokens                       - Create tokens (refresh)
    POST   /api/v1/email-verifications?token=   - Verify email
    POST   /api/v1/email-verification-tokens    - Resend verification email
    POST   /api/v1/password-reset-tokens        - Request password reset
    POST   /api/v1/password-resets              - Reset password
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.types import Email, Password, RawToken, Username


# =============================================================================
# Shared
# =============================================================================


class MessageResponse(BaseModel):
    """Plain success response carrying a client-facing message."""

    message: str = Field(..., description="Human-readable outcome")
    success: bool = Field(default=True, description="Always true on 200")


class AuthTokensResponse(BaseModel):
    """Access and refresh tokens (login and refresh)."""

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="Signed refresh token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    message: str = Field(..., description="Human-readable outcome")
    success: bool = Field(default=True, description="Always true on 200")


# =============================================================================
# Registration
# =============================================================================


class UserCreateRequest(BaseModel):
    """Request schema for user creation (registration).

    POST /api/v1/users
    """

    username: Username
    email: Email
    password: Password

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "bob",
                "email": "bob@example.com",
                "password": "Password123",
            }
        }
    )


# =============================================================================
# Sessions (login / logout)
# =============================================================================


class SessionCreateRequest(BaseModel):
    """Request schema for session creation (login).

    POST /api/v1/sessions

    The password is only length-checked; it is compared against the stored
    hash, never validated against the registration rules.
    """

    email: Email
    password: str = Field(..., min_length=1, max_length=128)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "bob@example.com",
                "password": "Password123",
            }
        }
    )


class SessionDeleteRequest(BaseModel):
    """Request schema for logout (DELETE /api/v1/sessions/current)."""

    refresh_token: RawToken


# =============================================================================
# Tokens (refresh)
# =============================================================================


class TokenCreateRequest(BaseModel):
    """Request schema for token refresh (POST /api/v1/tokens)."""

    refresh_token: RawToken


# =============================================================================
# Email verification
# =============================================================================


class EmailVerificationTokenCreateRequest(BaseModel):
    """Request schema for resending the verification email."""

    email: Email


# =============================================================================
# Password reset
# =============================================================================


class PasswordResetTokenCreateRequest(BaseModel):
    """Request schema for password reset request.

    POST /api/v1/password-reset-tokens

    The response is identical whether or not the email is registered.
    """

    email: Email


class PasswordResetCreateRequest(BaseModel):
    """Request schema for completing a password reset.

    POST /api/v1/password-resets
    """

    token: RawToken
    new_password: Password

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "Yx0sP3v...",
                "new_password": "NewPassword456",
            }
        }
    )
