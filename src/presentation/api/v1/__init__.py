"""API v1 routers.

RESTful resource-based endpoints. All endpoints use resource nouns, not
action verbs.

Resources:
    /api/v1/users                      - Registration
    /api/v1/sessions                   - Login / logout
    /api/v1/tokens                     - Refresh token rotation
    /api/v1/email-verifications        - Email verification
    /api/v1/email-verification-tokens  - Verification email resend
    /api/v1/password-reset-tokens      - Password reset requests
    /api/v1/password-resets            - Password reset execution
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.api.v1.email_verifications import (
    email_verification_tokens_router,
    email_verifications_router,
)
from src.presentation.api.v1.password_resets import (
    password_reset_tokens_router,
    password_resets_router,
)
from src.presentation.api.v1.sessions import router as sessions_router
from src.presentation.api.v1.tokens import router as tokens_router
from src.presentation.api.v1.users import router as users_router

# Create combined v1 router
v1_router = APIRouter(prefix=settings.api_v1_prefix)

v1_router.include_router(users_router)
v1_router.include_router(sessions_router)
v1_router.include_router(tokens_router)
v1_router.include_router(email_verifications_router)
v1_router.include_router(email_verification_tokens_router)
v1_router.include_router(password_reset_tokens_router)
v1_router.include_router(password_resets_router)

__all__ = [
    "v1_router",
    "users_router",
    "sessions_router",
    "tokens_router",
    "email_verifications_router",
    "email_verification_tokens_router",
    "password_reset_tokens_router",
    "password_resets_router",
]
