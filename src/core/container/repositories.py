"""Repository and token service builders (request-scoped).

Every builder takes the request's AsyncSession so all repositories used by
one handler share a single unit of work.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.application.services.token_issuer import TokenIssuer, TokenLifetimes
from src.application.services.token_validator import TokenValidator
from src.core.config import settings
from src.core.container.infrastructure import get_secret_hasher
from src.domain.enums import TokenPurpose
from src.domain.protocols.token_repository import TokenRepository
from src.infrastructure.persistence.repositories import (
    AccountRepository,
    EmailVerificationTokenRepository,
    PasswordResetTokenRepository,
    RefreshTokenRepository,
)


def build_token_repositories(
    session: AsyncSession,
) -> dict[TokenPurpose, TokenRepository]:
    """One repository per token pool, all on the same session."""
    return {
        TokenPurpose.VERIFICATION: EmailVerificationTokenRepository(session=session),
        TokenPurpose.RESET: PasswordResetTokenRepository(session=session),
        TokenPurpose.REFRESH: RefreshTokenRepository(session=session),
    }


def build_token_issuer(
    repositories: dict[TokenPurpose, TokenRepository],
) -> TokenIssuer:
    """Token Issuer over the given pools, lifetimes from settings."""
    return TokenIssuer(
        repositories=repositories,
        hasher=get_secret_hasher(),
        lifetimes=TokenLifetimes.from_settings(settings),
    )


def build_token_validator(
    repositories: dict[TokenPurpose, TokenRepository],
    account_repo: AccountRepository,
) -> TokenValidator:
    """Token Validator over the given pools and account store."""
    return TokenValidator(
        repositories=repositories,
        account_repo=account_repo,
        hasher=get_secret_hasher(),
    )
