"""Token Issuer application service.

Mints a raw secret, stores only its bcrypt hash, and hands the raw secret
back to the calling handler exactly once.

Lifetime policy (from settings):
    - verification: VERIFICATION_TOKEN_EXPIRE_MINUTES (15)
    - reset: RESET_TOKEN_EXPIRE_MINUTES (30)
    - refresh: REFRESH_TOKEN_EXPIRE_DAYS (30)

Usage:
    issuer = TokenIssuer(repositories=repos, hasher=hasher, lifetimes=lifetimes)
    issued = await issuer.issue(account.id, TokenPurpose.VERIFICATION)
    issued.raw_secret  # goes into the outbound event, nowhere else
"""

import secrets
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

from src.application.dtos.auth_dtos import IssuedToken
from src.core.config import Settings
from src.domain.enums import TokenPurpose
from src.domain.protocols.secret_hasher_protocol import SecretHasherProtocol
from src.domain.protocols.token_repository import TokenRepository

# 32 random bytes, 43 url-safe characters
SECRET_BYTES = 32


@dataclass(frozen=True, kw_only=True)
class TokenLifetimes:
    """Time-to-live per token purpose."""

    verification: timedelta = timedelta(minutes=15)
    reset: timedelta = timedelta(minutes=30)
    refresh: timedelta = timedelta(days=30)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenLifetimes":
        """Build the policy from application settings."""
        return cls(
            verification=timedelta(minutes=settings.verification_token_expire_minutes),
            reset=timedelta(minutes=settings.reset_token_expire_minutes),
            refresh=timedelta(days=settings.refresh_token_expire_days),
        )

    def for_purpose(self, purpose: TokenPurpose) -> timedelta:
        """Lifetime for a token purpose."""
        match purpose:
            case TokenPurpose.VERIFICATION:
                return self.verification
            case TokenPurpose.RESET:
                return self.reset
            case TokenPurpose.REFRESH:
                return self.refresh


class TokenIssuer:
    """Issues hashed, expiring token records."""

    def __init__(
        self,
        repositories: Mapping[TokenPurpose, TokenRepository],
        hasher: SecretHasherProtocol,
        lifetimes: TokenLifetimes,
    ) -> None:
        """Initialize issuer.

        Args:
            repositories: One token repository per purpose issued.
            hasher: Secret hasher for the raw secret.
            lifetimes: TTL policy.
        """
        self._repositories = repositories
        self._hasher = hasher
        self._lifetimes = lifetimes

    async def issue(self, account_id: UUID, purpose: TokenPurpose) -> IssuedToken:
        """Issue a new token for an account.

        Args:
            account_id: Owning account.
            purpose: Which pool the record goes into.

        Returns:
            IssuedToken with the stored record and the raw secret.

        Raises:
            KeyError: If no repository was configured for the purpose.
        """
        repository = self._repositories[purpose]
        raw_secret = secrets.token_urlsafe(SECRET_BYTES)
        record = await repository.save(
            account_id=account_id,
            token_hash=self._hasher.hash(raw_secret),
            expires_at=datetime.now(UTC) + self._lifetimes.for_purpose(purpose),
        )
        return IssuedToken(record=record, raw_secret=raw_secret)
