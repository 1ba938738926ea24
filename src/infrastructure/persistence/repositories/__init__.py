"""Repository implementations (adapters) for the persistence layer."""

from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.token_repository import (
    EmailVerificationTokenRepository,
    PasswordResetTokenRepository,
    RefreshTokenRepository,
    SQLAlchemyTokenRepository,
)

__all__ = [
    "AccountRepository",
    "EmailVerificationTokenRepository",
    "PasswordResetTokenRepository",
    "RefreshTokenRepository",
    "SQLAlchemyTokenRepository",
]
