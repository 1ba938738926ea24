"""Request/response schemas for API endpoints.

Usage:
    from src.schemas import UserCreateRequest, MessageResponse
"""

from src.schemas.auth_schemas import (
    AuthTokensResponse,
    EmailVerificationTokenCreateRequest,
    MessageResponse,
    PasswordResetCreateRequest,
    PasswordResetTokenCreateRequest,
    SessionCreateRequest,
    SessionDeleteRequest,
    TokenCreateRequest,
    UserCreateRequest,
)

__all__ = [
    "AuthTokensResponse",
    "EmailVerificationTokenCreateRequest",
    "MessageResponse",
    "PasswordResetCreateRequest",
    "PasswordResetTokenCreateRequest",
    "SessionCreateRequest",
    "SessionDeleteRequest",
    "TokenCreateRequest",
    "UserCreateRequest",
]
