"""Database models for persistence layer.

SQLAlchemy models that map to database tables. These are infrastructure
concerns and are not imported by the domain layer.

Models Organization:
    - account.py: Account credentials and lifecycle state
    - email_verification_token.py: Email verification tokens
    - password_reset_token.py: Password reset tokens
    - refresh_token.py: Refresh tokens

Note:
    Domain entities live in src/domain/entities/ and are mapped to these
    models in the repository layer.
"""

from src.infrastructure.persistence.models.account import Account
from src.infrastructure.persistence.models.email_verification_token import (
    EmailVerificationToken,
)
from src.infrastructure.persistence.models.password_reset_token import (
    PasswordResetToken,
)
from src.infrastructure.persistence.models.refresh_token import RefreshToken

__all__ = [
    "Account",
    "EmailVerificationToken",
    "PasswordResetToken",
    "RefreshToken",
]
